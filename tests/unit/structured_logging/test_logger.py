import logging

import pytest

from config.settings import LoggingSettings, Settings
from unico_core.infrastructure.logging.logger import (
    StructuredFormatter,
    configure_from_settings,
    configure_logger,
    get_logger,
)


def _record(**attrs: object) -> logging.LogRecord:
    record = logging.LogRecord("unico.test", logging.INFO, __file__, 1, "evento", None, None)
    record.__dict__.update(attrs)
    return record


@pytest.fixture
def isolated_logger():
    names: list[str] = []

    def _make(name: str) -> str:
        names.append(name)
        return name

    yield _make
    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


def test_formatter_serializes_extra_payload() -> None:
    formatter = StructuredFormatter(fmt="%(message)s | extra=%(extra)s")

    output = formatter.format(_record(extra={"unique": 3, "campo": "ação"}))

    assert output == 'evento | extra={"unique": 3, "campo": "ação"}'


def test_formatter_wraps_non_mapping_extra() -> None:
    formatter = StructuredFormatter(fmt="%(extra)s")

    assert formatter.format(_record(extra="valor")) == '{"value": "valor"}'
    assert formatter.format(_record()) == "{}"


def test_configure_logger_installs_single_handler(isolated_logger) -> None:
    name = isolated_logger("unico_test_single_handler")

    first = configure_logger(name)
    second = configure_logger(name, level="DEBUG")

    assert first is second
    assert len(second.handlers) == 1
    assert isinstance(second.handlers[0].formatter, StructuredFormatter)
    assert second.level == logging.DEBUG
    assert second.propagate is False


def test_configure_from_settings_uses_name_and_level(isolated_logger) -> None:
    name = isolated_logger("unico_test_from_settings")
    settings = Settings(logging=LoggingSettings(level="WARNING", name=name))

    logger = configure_from_settings(settings)

    assert logger.name == name
    assert logger.level == logging.WARNING


def test_get_logger_is_child_of_unico() -> None:
    assert get_logger("uniqueness").name == "unico.uniqueness"
