"""Logging estruturado do Unico."""

from .logger import StructuredFormatter, configure_from_settings, configure_logger, get_logger

__all__ = ["StructuredFormatter", "configure_from_settings", "configure_logger", "get_logger"]
