"""Verificação amostral de que uma regra se comporta como equivalência."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import TypeVar

from config.settings import DEFAULT_SAMPLE_SIZE
from unico_core.domain.contracts import EquivalenceRule
from unico_core.domain.errors import (
    InconsistentRuleError,
    InvalidSampleSizeError,
    MissingRuleError,
)

T = TypeVar("T")


class ConsistencyChecker:
    """Confere reflexividade, simetria, transitividade e compatibilidade do hash.

    Apenas os primeiros ``sample_size`` elementos são inspecionados; a
    transitividade é cúbica no tamanho da amostra.
    """

    def __init__(self, *, sample_size: int = DEFAULT_SAMPLE_SIZE) -> None:
        if sample_size <= 0:
            raise InvalidSampleSizeError(f"sample_size deve ser positivo: {sample_size}")
        self._sample_size = sample_size

    @property
    def sample_size(self) -> int:
        return self._sample_size

    def check(self, rule: EquivalenceRule[T], elements: Iterable[T]) -> None:
        if not rule.is_complete:
            raise MissingRuleError("Regra incompleta para verificação de consistência")
        equals = rule.equals
        hash_function = rule.hash_function
        sample = list(islice(elements, self._sample_size))

        for index, element in enumerate(sample):
            if not equals(element, element):
                raise InconsistentRuleError(
                    f"Elemento #{index} não é igual a si mesmo",
                    property_name="reflexivity",
                )

        related = [
            [equals(left, right) for right in sample] for left in sample
        ]
        for i, left in enumerate(sample):
            for j, right in enumerate(sample):
                if not related[i][j]:
                    continue
                if not related[j][i]:
                    raise InconsistentRuleError(
                        f"Elemento #{i} é igual a #{j}, mas não o contrário",
                        property_name="symmetry",
                    )
                if hash_function(left) != hash_function(right):
                    raise InconsistentRuleError(
                        f"Elementos #{i} e #{j} são iguais com hashes diferentes",
                        property_name="hash_consistency",
                    )
                for k in range(len(sample)):
                    if related[j][k] and not related[i][k]:
                        raise InconsistentRuleError(
                            f"Elementos #{i}, #{j} e #{k} violam a transitividade",
                            property_name="transitivity",
                        )
