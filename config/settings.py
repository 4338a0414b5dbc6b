"""Carregamento de configurações para a biblioteca Unico."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

DEFAULT_SAMPLE_SIZE = 32

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(slots=True)
class LoggingSettings:
    level: str = "INFO"
    name: str = "unico"


@dataclass(slots=True)
class ConsistencySettings:
    enabled: bool = False
    sample_size: int = DEFAULT_SAMPLE_SIZE


@dataclass(slots=True)
class Settings:
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    consistency: ConsistencySettings = field(default_factory=ConsistencySettings)


def _load_level(value: str | None) -> str:
    if not value:
        return "INFO"
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Nível de log inválido: '{value}'")
    return level


def _load_flag(value: str | None, *, variable: str) -> bool:
    if value is None:
        return False
    cleaned = value.strip().lower()
    if cleaned in _TRUTHY:
        return True
    if cleaned in _FALSY:
        return False
    raise RuntimeError(f"Valor booleano inválido em {variable}: '{value}'")


def _load_sample_size(value: str | None) -> int:
    if not value:
        return DEFAULT_SAMPLE_SIZE
    try:
        parsed = int(value)
        if parsed <= 0:
            raise ValueError
        return parsed
    except ValueError as exc:  # noqa: PERF203 - trata entrada malformada
        raise RuntimeError(
            f"UNICO_CONSISTENCY_SAMPLE deve ser um inteiro positivo: '{value}'"
        ) from exc


def load_settings() -> Settings:
    """Carrega configurações a partir de variáveis de ambiente."""

    logging_settings = LoggingSettings(
        level=_load_level(os.environ.get("UNICO_LOG_LEVEL")),
        name=os.environ.get("UNICO_LOGGER_NAME", "unico") or "unico",
    )

    consistency = ConsistencySettings(
        enabled=_load_flag(
            os.environ.get("UNICO_CONSISTENCY_CHECK"),
            variable="UNICO_CONSISTENCY_CHECK",
        ),
        sample_size=_load_sample_size(os.environ.get("UNICO_CONSISTENCY_SAMPLE")),
    )

    return Settings(logging=logging_settings, consistency=consistency)
