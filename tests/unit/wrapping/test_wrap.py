from tests.support import Something, field1, field2, sample_input
from unico_core.infrastructure.wrapping.wrap import Wrap, _BoundWrap, wrap, wrap_fields


def _same_field1(that: Something, other: object) -> bool:
    return isinstance(other, Something) and that.field1 == other.field1


def test_wrap_with_equals_and_hash_deduplicates_in_native_set() -> None:
    result = {wrap(item, _same_field1, field1) for item in sample_input()}

    assert len(result) == 2
    assert {wrapped.wrapped.field1 for wrapped in result} == {1, 2}


def test_wrap_fields_with_all_fields() -> None:
    result = {wrap_fields(item, [field1, field2]) for item in sample_input()}

    assert len(result) == 3
    assert {(w.wrapped.field1, w.wrapped.field2) for w in result} == {(1, 2), (1, 3), (2, 2)}


def test_wrap_fields_with_one_field() -> None:
    result = {wrap_fields(item, [field2]) for item in sample_input()}

    assert len(result) == 2
    assert {w.wrapped.field2 for w in result} == {2, 3}


def test_wrap_exposes_element_and_hash() -> None:
    item = Something(4, 5)
    wrapped = wrap(item, _same_field1, field1)

    assert wrapped.wrapped is item
    assert hash(wrapped) == hash(4)
    assert repr(wrapped) == "Wrap(Something(field1=4, field2=5))"


def test_wrap_is_not_equal_to_other_types() -> None:
    item = Something(1, 2)
    wrapped = wrap(item, _same_field1, field1)

    assert wrapped != item
    assert wrapped != None  # noqa: E711
    assert wrapped != _BoundWrap(item, _same_field1, field1)


def test_wrap_equality_uses_left_operand_as_subject() -> None:
    calls: list[tuple[int, int]] = []

    def recording(that: int, other: object) -> bool:
        calls.append((that, other))
        return True

    left = Wrap(1, recording, lambda _: 0)
    right = Wrap(2, recording, lambda _: 0)

    assert left == right
    assert calls == [(1, 2)]
