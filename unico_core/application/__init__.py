"""Casos de uso do Unico."""

from .uniqueness import Uniqueness, from_collection

__all__ = ["Uniqueness", "from_collection"]
