import logging

import pytest


@pytest.fixture(autouse=True)
def reset_semaver_logger():
    """Undo handlers installed by setup_logging so tests don't leak streams."""
    logger = logging.getLogger('semaver')
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
