"""Definições de exceções para o domínio do Unico."""

from __future__ import annotations


class UnicoError(Exception):
    """Exceção base para erros conhecidos da biblioteca."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NullArgumentError(UnicoError, ValueError):
    """Argumento obrigatório recebido como ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argumento '{argument}' não pode ser None")
        self.argument = argument


class MissingRuleError(UnicoError, RuntimeError):
    """Operação terminal executada sem função de igualdade ou de hash."""


class InconsistentRuleError(UnicoError):
    """Regra de unicidade que não se comporta como relação de equivalência."""

    def __init__(self, message: str, *, property_name: str) -> None:
        super().__init__(message)
        self.property_name = property_name


class InvalidSampleSizeError(UnicoError, ValueError):
    """Tamanho de amostra não positivo para a verificação de consistência."""
