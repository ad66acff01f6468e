"""
Shared fixtures.
"""

import logging

import pytest

from envstore.config.singleton import GlobalEnv


@pytest.fixture(autouse=True)
def reset_global_env():
    """Each test starts and ends without a shared DotEnv."""
    GlobalEnv.reset_env()
    yield
    GlobalEnv.reset_env()


@pytest.fixture(autouse=True)
def reset_envstore_logger():
    """Drop handlers installed by setup_logging so tests do not leak into each other."""
    yield
    logger = logging.getLogger("envstore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
