"""Deduplicação de coleções com regras de igualdade e hash customizadas."""

from unico_core.application.uniqueness import Uniqueness, from_collection
from unico_core.domain.contracts import EquivalenceRule
from unico_core.domain.errors import (
    InconsistentRuleError,
    InvalidSampleSizeError,
    MissingRuleError,
    NullArgumentError,
    UnicoError,
)
from unico_core.infrastructure.wrapping.wrap import Wrap, wrap, wrap_fields

__all__ = [
    "EquivalenceRule",
    "InconsistentRuleError",
    "InvalidSampleSizeError",
    "MissingRuleError",
    "NullArgumentError",
    "UnicoError",
    "Uniqueness",
    "Wrap",
    "from_collection",
    "wrap",
    "wrap_fields",
]
