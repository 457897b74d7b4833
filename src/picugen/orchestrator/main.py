"""
Command-line entry point tying settings, registry, scanner and output together.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

import yaml

from picugen import __version__
from picugen.config import AppConfig, HashSettings
from picugen.discovery import Scanner
from picugen.duplicates import OutputMode, OutputStats, ResultWriter
from picugen.hashing import (
    DEFAULT_ALGORITHM,
    InvalidAlgorithmError,
    describe,
    hash_string,
    join_words,
    list_names,
    resolve,
)
from picugen.utils import setup_logging

PROG = "picugen"

EXAMPLES = [
    ("-a md5 document.txt", "Generate MD5 digest of a file"),
    ("-a md5 *", "Generate MD5 digests of all files in folder"),
    ("-a sha1 -s hello world", "Generate SHA-1 digest of a string"),
    ("-a sha1 -salt s4lt -s hello world", "Generate salted SHA-1 digest of a string"),
    ("-a hmacsha1 -k k3y -s untouched", "Generate HMAC of a string using SHA-1"),
    ("-only-same -a md5 *", "List files in folder that share an MD5 digest"),
]


class Orchestrator:
    """Run one invocation in string or file mode."""

    def __init__(
        self,
        settings: HashSettings,
        mode: OutputMode = OutputMode.DIRECT,
        logger: Optional[logging.Logger] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.settings = settings
        self.mode = mode
        self.logger = logger or logging.getLogger("picugen")
        self.stream = stream or sys.stdout
        # Fails fast on unknown names before anything is hashed.
        self.digest = resolve(settings.algorithm, key=settings.key)

    def run_string(self, words: Iterable[str]) -> str:
        """Hash the space-joined words and print the digest."""
        value = hash_string(self.digest, self.settings.salt, join_words(words))
        print(value, file=self.stream)
        return value

    def run_files(self, patterns: Iterable[str]) -> OutputStats:
        """Hash every file matched by the patterns and print the results."""
        scanner = Scanner(self.settings, self.digest, logger=self.logger.getChild("scanner"))
        writer = ResultWriter(self.mode, stream=self.stream)
        stats = writer.write_all(scanner.scan(patterns))
        self.logger.info(
            "Hashed %s files with %s. Errors=%s Groups=%s",
            stats.records,
            self.digest.name,
            stats.errors,
            stats.groups,
        )
        return stats


def _algorithm_table() -> str:
    names = list_names()
    width = max(15, max(len(name) for name in names))
    return "\n".join(f"  {name:<{width}} {describe(name)}" for name in names)


def _epilog() -> str:
    example_width = max(len(example) for example, _ in EXAMPLES)
    lines = ["Examples:"]
    for example, text in EXAMPLES:
        lines.append(f"  {PROG} {example:<{example_width}}  {text}")
    lines.append("")
    lines.append(f"Available algorithms (default is {DEFAULT_ALGORITHM}):")
    lines.append(_algorithm_table())
    lines.append("")
    lines.append(
        "Note: For complex strings, put the string in a file, then run picugen on\n"
        "      the file. (Don't add newlines to the file as they will alter the output.)"
    )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=f"{PROG} [-a <algorithm>] [-k <key>] [-salt <salt>] [-s <string to hash>] / <file(s) to hash>",
        description="Compute checksums and digests of strings or files.",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-a", "--algorithm", default=None, help="Algorithm (see list below)")
    parser.add_argument("-k", "--key", default=None, help="Key for keyed hashes (HMAC)")
    parser.add_argument("-salt", "--salt", default=None, help="Salt prepended to every input")
    parser.add_argument("-s", "--string", action="store_true", help="Hash the arguments as a string")
    parser.add_argument(
        "-group-same",
        "--group-same",
        action="store_true",
        help="Group files with identical digests (buffers output)",
    )
    parser.add_argument(
        "-only-same",
        "--only-same",
        action="store_true",
        help="Only show files with identical digests (enables -group-same)",
    )
    parser.add_argument("--config", default=None, help="Optional config path override")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    # Everything from the first positional on is data, even words starting with "-".
    parser.add_argument(
        "args", nargs=argparse.REMAINDER, metavar="ARG", help="Files/globs, or words with -s"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.args[:1] == ["--"]:
        args.args = args.args[1:]
    if not args.args:
        parser.print_help()
        return 0

    config_path = Path(args.config) if args.config else None
    try:
        config = AppConfig.load(config_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger = setup_logging()
        logger.error("Error: %s", exc)
        return 2

    level = "DEBUG" if args.verbose else str(config.get("logging", "level", default="WARNING"))
    logger = setup_logging(config.resolve_path("paths", "logs"), level=level)

    try:
        settings = HashSettings.from_config(
            config, algorithm=args.algorithm, key=args.key, salt=args.salt
        )
    except ValueError as exc:
        logger.error("Error: %s", exc)
        return 2

    mode = OutputMode.from_flags(args.group_same, args.only_same)
    try:
        orchestrator = Orchestrator(settings, mode=mode, logger=logger)
    except InvalidAlgorithmError as exc:
        logger.error("Error: %s", exc)
        return 1

    if args.string:
        orchestrator.run_string(args.args)
    else:
        orchestrator.run_files(args.args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
