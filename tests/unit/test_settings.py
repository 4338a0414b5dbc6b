import pytest

from config.settings import DEFAULT_SAMPLE_SIZE, load_settings

_VARIABLES = (
    "UNICO_LOG_LEVEL",
    "UNICO_LOGGER_NAME",
    "UNICO_CONSISTENCY_CHECK",
    "UNICO_CONSISTENCY_SAMPLE",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in _VARIABLES:
        monkeypatch.delenv(variable, raising=False)


def test_defaults_without_environment() -> None:
    settings = load_settings()

    assert settings.logging.level == "INFO"
    assert settings.logging.name == "unico"
    assert settings.consistency.enabled is False
    assert settings.consistency.sample_size == DEFAULT_SAMPLE_SIZE


def test_values_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNICO_LOG_LEVEL", "debug")
    monkeypatch.setenv("UNICO_LOGGER_NAME", "app.unico")
    monkeypatch.setenv("UNICO_CONSISTENCY_CHECK", "Yes")
    monkeypatch.setenv("UNICO_CONSISTENCY_SAMPLE", "8")

    settings = load_settings()

    assert settings.logging.level == "DEBUG"
    assert settings.logging.name == "app.unico"
    assert settings.consistency.enabled is True
    assert settings.consistency.sample_size == 8


@pytest.mark.parametrize(
    ("variable", "value"),
    [
        ("UNICO_LOG_LEVEL", "verboso"),
        ("UNICO_CONSISTENCY_CHECK", "talvez"),
        ("UNICO_CONSISTENCY_SAMPLE", "0"),
        ("UNICO_CONSISTENCY_SAMPLE", "muitos"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, variable: str, value: str) -> None:
    monkeypatch.setenv(variable, value)

    with pytest.raises(RuntimeError):
        load_settings()
