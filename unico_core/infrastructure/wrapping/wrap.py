"""Adaptadores que aplicam uma regra de unicidade em estruturas nativas."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from unico_core.domain.contracts import Equalsor, EquivalenceRule, FieldList, HashFunction
from unico_core.infrastructure.rules.field_rules import rule_from_fields

T = TypeVar("T")


class Wrap(Generic[T]):
    """Envolve um elemento para que ``set``/``dict`` usem a regra informada.

    Dois ``Wrap`` são iguais quando têm a mesma classe e
    ``equals(self.wrapped, other.wrapped)`` é verdadeiro. Em um ``set`` nativo
    o elemento já presente é o lado esquerdo da comparação.
    """

    __slots__ = ("_wrapped", "_equals", "_hash_function")

    def __init__(
        self,
        wrapped: T,
        equals: Equalsor[T],
        hash_function: HashFunction[T],
    ) -> None:
        self._wrapped = wrapped
        self._equals = equals
        self._hash_function = hash_function

    @property
    def wrapped(self) -> T:
        return self._wrapped

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return bool(self._equals(self._wrapped, other.wrapped))

    def __hash__(self) -> int:
        return self._hash_function(self._wrapped)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._wrapped!r})"


class _BoundWrap(Wrap[T]):
    """Variante interna criada pelas operações terminais de ``Uniqueness``."""

    __slots__ = ()

    @classmethod
    def bind(cls, wrapped: T, rule: EquivalenceRule[T]) -> "_BoundWrap[T]":
        return cls(wrapped, rule.equals, rule.hash_function)


def wrap(element: T, equals: Equalsor[T], hash_function: HashFunction[T]) -> Wrap[T]:
    """Cria um ``Wrap`` com funções de igualdade e hash explícitas."""

    return Wrap(element, equals, hash_function)


def wrap_fields(element: T, fields: FieldList[T]) -> Wrap[T]:
    """Cria um ``Wrap`` cuja regra é derivada da lista de campos."""

    rule: EquivalenceRule[Any] = rule_from_fields(fields)
    return Wrap(element, rule.equals, rule.hash_function)
