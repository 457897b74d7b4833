import logging

import pytest

from picugen.utils import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_picugen_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
