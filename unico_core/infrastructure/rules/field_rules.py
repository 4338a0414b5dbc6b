"""Regras de unicidade derivadas de listas de campos."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from unico_core.domain.contracts import Equalsor, EquivalenceRule, FieldList, HashFunction
from unico_core.domain.errors import NullArgumentError

T = TypeVar("T")


def native_rule() -> EquivalenceRule[Any]:
    """Regra padrão: usa ``==`` e ``hash()`` do próprio tipo do elemento."""

    return EquivalenceRule(equals=_native_equals, hash_function=hash)


def equals_from_fields(fields: FieldList[T]) -> Equalsor[T]:
    """Gera uma função de igualdade que compara as projeções informadas.

    Dois elementos são iguais quando são o mesmo objeto, ou quando têm o mesmo
    tipo em tempo de execução e todas as projeções coincidem. Com uma lista
    vazia, quaisquer elementos do mesmo tipo são considerados iguais.
    """

    extractors = _freeze_fields(fields)

    def equals(that: T, other: Any) -> bool:
        if that is other:
            return True
        if other is None or type(that) is not type(other):
            return False
        return all(extractor(that) == extractor(other) for extractor in extractors)

    return equals


def hash_from_fields(fields: FieldList[T]) -> HashFunction[T]:
    """Gera uma função de hash sensível à ordem a partir das projeções."""

    extractors = _freeze_fields(fields)

    def hash_function(that: T) -> int:
        return hash(tuple(_hashable(extractor(that)) for extractor in extractors))

    return hash_function


def rule_from_fields(fields: FieldList[T]) -> EquivalenceRule[T]:
    """Monta a regra completa (igualdade + hash) a partir da lista de campos."""

    return EquivalenceRule(
        equals=equals_from_fields(fields),
        hash_function=hash_from_fields(fields),
    )


def _native_equals(that: Any, other: Any) -> bool:
    return bool(that == other)


def _freeze_fields(fields: FieldList[T] | None) -> tuple:
    if fields is None:
        raise NullArgumentError("fields")
    return tuple(fields)


def _hashable(value: object) -> object:
    # Projeções mutáveis viram equivalentes imutáveis para que ``hash`` aceite.
    if isinstance(value, Mapping):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    if isinstance(value, (set, frozenset)):
        return frozenset(_hashable(item) for item in value)
    if isinstance(value, (list, tuple)):
        return tuple(_hashable(item) for item in value)
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        try:
            hash(value)
        except TypeError:
            return tuple(_hashable(item) for item in value)
    return value
