"""
Allow running picugen with ``python -m picugen``.
"""

from picugen.orchestrator.main import main

if __name__ == "__main__":
    raise SystemExit(main())
