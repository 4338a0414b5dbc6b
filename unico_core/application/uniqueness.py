"""Builder que remove duplicatas de coleções com regras de unicidade customizadas.

Evita criar uma classe embrulho só para sobrescrever ``__eq__``/``__hash__``::

    unicos = (
        Uniqueness.from_collection(pessoas)
        .constraint_on([lambda p: p.cpf])
        .to_list()
    )

A regra (igualdade + hash) não é validada: se ela não for uma relação de
equivalência, o resultado depende da ordem da coleção de origem. Use
``with_consistency_check`` para uma verificação amostral opcional.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator
from logging import Logger
from typing import Generic, TypeVar

from config.settings import Settings
from unico_core.domain.contracts import Equalsor, EquivalenceRule, FieldList, HashFunction
from unico_core.domain.errors import InconsistentRuleError, MissingRuleError, NullArgumentError
from unico_core.infrastructure.logging.logger import get_logger
from unico_core.infrastructure.rules.consistency import ConsistencyChecker
from unico_core.infrastructure.rules.field_rules import native_rule, rule_from_fields
from unico_core.infrastructure.wrapping.wrap import _BoundWrap

T = TypeVar("T")


class Uniqueness(Generic[T]):
    """Configura e executa a deduplicação de uma coleção.

    Instâncias são mutáveis e não são thread-safe: não reconfigure a regra
    enquanto uma operação terminal estiver em andamento.
    """

    def __init__(
        self,
        source: Iterable[T],
        *,
        settings: Settings | None = None,
        logger: Logger | None = None,
    ) -> None:
        if source is None:
            raise NullArgumentError("source")
        settings = settings or Settings()
        self._source: Collection[T] = (
            source if isinstance(source, Collection) else tuple(source)
        )
        self._rule: EquivalenceRule[T] = native_rule()
        self._logger = logger or get_logger("uniqueness")
        self._default_sample_size = settings.consistency.sample_size
        self._checker: ConsistencyChecker | None = None
        if settings.consistency.enabled:
            self._checker = ConsistencyChecker(sample_size=settings.consistency.sample_size)

    @classmethod
    def from_collection(
        cls,
        source: Iterable[T],
        *,
        settings: Settings | None = None,
        logger: Logger | None = None,
    ) -> "Uniqueness[T]":
        """Inicia o builder com ``==``/``hash()`` nativos como regra padrão.

        Em seguida chame ``with_equals`` + ``with_hash`` ou ``constraint_on``.
        """

        return cls(source, settings=settings, logger=logger)

    @property
    def rule(self) -> EquivalenceRule[T]:
        return self._rule

    def with_equals(self, equals: Equalsor[T] | None) -> "Uniqueness[T]":
        """Substitui apenas a igualdade; exclusivo com ``constraint_on``."""

        self._rule = self._rule.with_equals(equals)
        return self

    def with_hash(self, hash_function: HashFunction[T] | None) -> "Uniqueness[T]":
        """Substitui apenas o hash; exclusivo com ``constraint_on``."""

        self._rule = self._rule.with_hash(hash_function)
        return self

    def constraint_on(self, fields: FieldList[T]) -> "Uniqueness[T]":
        """Gera igualdade e hash a partir das projeções informadas.

        Sobrescreve qualquer ``with_equals``/``with_hash`` anterior. Uma lista
        vazia torna todos os elementos do mesmo tipo iguais entre si.
        """

        self._rule = rule_from_fields(fields)
        return self

    def with_consistency_check(self, sample_size: int | None = None) -> "Uniqueness[T]":
        """Ativa a verificação amostral da regra antes das operações terminais."""

        if sample_size is None:
            sample_size = self._default_sample_size
        self._checker = ConsistencyChecker(sample_size=sample_size)
        return self

    def without_consistency_check(self) -> "Uniqueness[T]":
        self._checker = None
        return self

    def to_sequence(self) -> Iterator[T]:
        """Retorna um iterador preguiçoso com os elementos únicos.

        A regra é capturada no momento da chamada. A ordem do resultado não faz
        parte do contrato (atualmente é a ordem da primeira ocorrência). O evento
        ``uniqueness.finish`` é registrado ao esgotar ou fechar o iterador.
        """

        rule = self._rule
        if not rule.is_complete:
            missing = "equals" if rule.equals is None else "hash_function"
            self._logger.error(
                "uniqueness.missing_rule", extra={"extra": {"missing": missing}}
            )
            raise MissingRuleError(f"Função '{missing}' não configurada")
        if self._checker is not None:
            self._check(rule)
        return self._deduplicate(rule)

    def to_list(self) -> list[T]:
        """Materializa ``to_sequence`` em uma lista."""

        return list(self.to_sequence())

    def to_set(self) -> set[T]:
        """Materializa ``to_sequence`` em um ``set`` nativo.

        ATENÇÃO: ao inserir no ``set`` o ``__eq__``/``__hash__`` do próprio tipo
        é aplicado novamente, então o resultado pode ter menos elementos do que
        ``to_list`` quando a igualdade nativa é mais grossa que a regra.
        """

        return set(self.to_sequence())

    def _check(self, rule: EquivalenceRule[T]) -> None:
        try:
            self._checker.check(rule, self._source)
        except InconsistentRuleError as exc:
            self._logger.warning(
                "uniqueness.consistency_violation",
                extra={
                    "extra": {
                        "property": exc.property_name,
                        "sample": self._checker.sample_size,
                        "error": str(exc),
                    }
                },
            )
            raise

    def _deduplicate(self, rule: EquivalenceRule[T]) -> Iterator[T]:
        source_count = 0
        unique_count = 0
        self._logger.debug(
            "uniqueness.start", extra={"extra": {"source": len(self._source)}}
        )
        buckets: dict[int, list[_BoundWrap[T]]] = {}
        completed = False
        try:
            for element in self._source:
                source_count += 1
                candidate = _BoundWrap.bind(element, rule)
                bucket = buckets.setdefault(hash(candidate), [])
                if any(candidate == present for present in bucket):
                    continue
                bucket.append(candidate)
                unique_count += 1
                yield candidate.wrapped
            completed = True
        finally:
            # Também roda quando o iterador é fechado antes do fim.
            self._logger.debug(
                "uniqueness.finish",
                extra={
                    "extra": {
                        "source": source_count,
                        "unique": unique_count,
                        "dropped": source_count - unique_count,
                        "completed": completed,
                    }
                },
            )


def from_collection(
    source: Iterable[T],
    *,
    settings: Settings | None = None,
    logger: Logger | None = None,
) -> Uniqueness[T]:
    """Atalho para ``Uniqueness.from_collection``."""

    return Uniqueness.from_collection(source, settings=settings, logger=logger)
