"""Tipos de exemplo utilizados pelos testes."""

from .samples import (  # noqa: F401
    Something,
    SomethingWithPartialEquals,
    field1,
    field2,
    partial_sample_input,
    sample_input,
)
