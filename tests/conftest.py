"""
Shared test config
"""
# Standard
import logging

# Third Party
import pytest

# Local
from kogito_operator.test_helpers.helpers import configure_logging

configure_logging()


@pytest.fixture(autouse=True)
def no_debug_env(monkeypatch):
    """Make sure the tests run with the production logger profile unless a
    test opts in, even if DEBUG is exported in the environment
    """
    monkeypatch.delenv("DEBUG", raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Tests that acquire loggers replace the root handler. Put the test
    logging config back once they are done.
    """
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    configure_logging()
