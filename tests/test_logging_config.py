"""Tests for logging setup."""

import logging

import pytest

from common.logging_config import get_logger, setup_logging


@pytest.fixture
def component_name(request):
    """Unique logger name per test, cleaned up afterwards."""
    name = f"test-component-{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_setup_logging_installs_one_handler(component_name):
    logger = setup_logging(component_name, log_level="DEBUG")
    setup_logging(component_name, log_level="DEBUG")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_setup_logging_reads_env_level(component_name, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")

    logger = setup_logging(component_name)

    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(component_name):
    logger = setup_logging(component_name, log_level="LOUD")

    assert logger.level == logging.INFO


def test_module_loggers_reach_component_handler(component_name, capsys):
    setup_logging(component_name, log_level="INFO")

    get_logger(f"{component_name}.importer").info("stored 0.png")

    assert "stored 0.png" in capsys.readouterr().out
