"""Configuração de logging estruturado para aplicações que usam o Unico."""

from __future__ import annotations

import json
import logging
from logging import Logger, LogRecord

from config.settings import Settings, load_settings

DEFAULT_LOGGER_NAME = "unico"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s | extra=%(extra)s"


class StructuredFormatter(logging.Formatter):
    """Formatter que serializa o payload ``extra`` em JSON."""

    def format(self, record: LogRecord) -> str:  # noqa: D401
        payload = getattr(record, "extra", {})
        if not isinstance(payload, dict):
            payload = {"value": payload}
        record.__dict__["extra"] = json.dumps(payload, ensure_ascii=False, default=repr)
        return super().format(record)


def configure_logger(name: str = DEFAULT_LOGGER_NAME, *, level: str | int = logging.INFO) -> Logger:
    """Instala um único handler estruturado no logger informado.

    Chamadas repetidas apenas ajustam o nível; nenhum handler é duplicado.
    """

    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(suffix: str) -> Logger:
    """Logger filho de ``unico``; a biblioteca não instala handlers sozinha."""

    return logging.getLogger(f"{DEFAULT_LOGGER_NAME}.{suffix}")


def configure_from_settings(settings: Settings | None = None) -> Logger:
    """Configura o logger raiz do Unico a partir de ``config.settings``."""

    settings = settings or load_settings()
    return configure_logger(settings.logging.name, level=settings.logging.level)
