"""Unit tests for glossa.core.logging."""

import logging

from glossa.core.logging import _is_test_environment, configure_logging, get_module_logger


class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        """_is_test_environment returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True

    def test_configure_logging_in_test_environment(self):
        """configure_logging suppresses logs in test environment."""
        logger = configure_logging()
        assert hasattr(logger, "bind")
        assert logging.root.level > logging.CRITICAL

    def test_get_module_logger_binds_module_context(self):
        """get_module_logger binds the calling module's name."""
        logger = get_module_logger()
        context = logger._context  # pylint: disable=protected-access
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]
