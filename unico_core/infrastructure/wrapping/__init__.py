"""Adaptadores de elementos para conjuntos baseados em hash."""

from .wrap import Wrap, wrap, wrap_fields

__all__ = ["Wrap", "wrap", "wrap_fields"]
