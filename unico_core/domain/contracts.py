"""Contratos e estruturas de dados compartilhadas no domínio do Unico."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Equalsor(Protocol[T_contra]):
    """Interface para funções de igualdade customizadas.

    ``that`` é sempre o elemento do lado esquerdo da comparação; ``other`` pode
    ser de qualquer tipo (inclusive ``None``) e a implementação decide como
    tratá-lo. Não se exige simetria.
    """

    def __call__(self, that: T_contra, other: Any) -> bool:
        """Indica se ``that`` deve ser considerado igual a ``other``."""


class HashFunction(Protocol[T_contra]):
    """Interface para funções de hash compatíveis com um ``Equalsor``."""

    def __call__(self, that: T_contra) -> int:
        """Retorna o hash de ``that``."""


FieldExtractor = Callable[[T], Any]
FieldList = Sequence[FieldExtractor[T]]


@dataclass(frozen=True, slots=True)
class EquivalenceRule(Generic[T]):
    """Par (igualdade, hash) que define quais elementos são duplicatas.

    Nenhum dos dois campos é validado: a consistência entre eles é
    responsabilidade de quem constrói a regra.
    """

    equals: Equalsor[T] | None
    hash_function: HashFunction[T] | None

    def with_equals(self, equals: Equalsor[T] | None) -> "EquivalenceRule[T]":
        return EquivalenceRule(equals=equals, hash_function=self.hash_function)

    def with_hash(self, hash_function: HashFunction[T] | None) -> "EquivalenceRule[T]":
        return EquivalenceRule(equals=self.equals, hash_function=hash_function)

    @property
    def is_complete(self) -> bool:
        return self.equals is not None and self.hash_function is not None


__all__ = (
    "Equalsor",
    "EquivalenceRule",
    "FieldExtractor",
    "FieldList",
    "HashFunction",
)
