"""Tests for logging setup and module docstring examples."""
import doctest
import logging

import pytest

import directrix.logging_config
import directrix.model.geometry
import directrix.model.site
import directrix.view.renderer
from directrix.logging_config import resolve_log_level, setup_logging
from directrix.model.site import Site


@pytest.fixture
def package_logger():
    logger = logging.getLogger("directrix")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_does_not_stack_handlers(package_logger) -> None:
    setup_logging(level=logging.DEBUG, environ={})
    setup_logging(level=logging.DEBUG, environ={})

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_setup_logging_defaults_to_info(package_logger) -> None:
    setup_logging(environ={})
    assert package_logger.level == logging.INFO


def test_environment_level_enables_pointer_trace(package_logger, tmp_path) -> None:
    log_file = tmp_path / "trace.log"
    setup_logging(environ={"DIRECTRIX_LOG_LEVEL": "debug", "DIRECTRIX_LOG_FILE": str(log_file)})

    Site(300.0, 200.0, 210.0).set_directrix(350.0)
    for handler in package_logger.handlers:
        handler.flush()

    assert package_logger.level == logging.DEBUG
    content = log_file.read_text(encoding="utf-8")
    assert "Logging initialized at DEBUG" in content
    assert "directrix.model.site - DEBUG - Directrix moved to y=350.0" in content


def test_explicit_level_wins_over_environment(package_logger) -> None:
    setup_logging(level="WARNING", environ={"DIRECTRIX_LOG_LEVEL": "DEBUG"})
    assert package_logger.level == logging.WARNING


def test_setup_logging_writes_to_file(package_logger, tmp_path) -> None:
    log_file = tmp_path / "directrix.log"
    setup_logging(level=logging.INFO, log_file=str(log_file), environ={})

    logging.getLogger("directrix.model.site").info("focus moved")
    for handler in package_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert f"writing to {log_file}" in content
    assert "directrix.model.site - INFO - focus moved" in content


@pytest.mark.parametrize(
    "value, expected",
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("15", 15), (logging.ERROR, logging.ERROR), ("", logging.INFO)],
)
def test_resolve_log_level(value, expected) -> None:
    assert resolve_log_level(value) == expected


def test_resolve_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="DIRECTRIX_LOG_LEVEL"):
        resolve_log_level("chatty")


@pytest.mark.parametrize(
    "module",
    [directrix.model.site, directrix.model.geometry, directrix.view.renderer, directrix.logging_config],
)
def test_docstring_examples(module) -> None:
    result = doctest.testmod(module)
    assert result.failed == 0
