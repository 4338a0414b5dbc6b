"""Regras de unicidade: nativa, por campos e verificação de consistência."""

from .consistency import DEFAULT_SAMPLE_SIZE, ConsistencyChecker
from .field_rules import equals_from_fields, hash_from_fields, native_rule, rule_from_fields

__all__ = [
    "ConsistencyChecker",
    "DEFAULT_SAMPLE_SIZE",
    "equals_from_fields",
    "hash_from_fields",
    "native_rule",
    "rule_from_fields",
]
