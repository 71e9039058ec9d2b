"""Property-based tests for construction, case analysis and equality."""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from adt_dsl import ADT, ArityError, NonExhaustiveMatchError, TypeMismatchError, eq, just, show

names = st.from_regex(r"[A-Z][A-Za-z0-9]{0,8}", fullmatch=True)
primitives = st.one_of(
    st.integers(), st.text(max_size=5), st.booleans(), st.none(),
    st.floats(allow_nan=False),
)


@given(names)
def test_type_is_the_wrapped_name(name: str) -> None:
    Type = ADT(name, {"Only": ["number"]})

    assert Type.type == f"({name})"
    assert Type.type == Type.type


@given(st.integers(min_value=1, max_value=4), st.integers(min_value=0, max_value=6))
@settings(max_examples=50)
def test_wrong_arity_always_fails(arity: int, count: int) -> None:
    Type = ADT("Type", {"Variant": ["number"] * arity})
    args = ["not even a number"] * count

    if count == arity:
        with pytest.raises(TypeMismatchError):
            Type.Variant(*args)
    else:
        with pytest.raises(ArityError):
            Type.Variant(*args)


@given(st.data())
@settings(max_examples=50)
def test_mismatch_names_the_position(data: st.DataObject) -> None:
    arity = data.draw(st.integers(min_value=1, max_value=5))
    position = data.draw(st.integers(min_value=0, max_value=arity - 1))
    args: list[object] = data.draw(st.lists(st.integers(), min_size=arity, max_size=arity))
    args[position] = data.draw(st.text())

    Type = ADT("Type", {"Variant": ["number"] * arity})
    with pytest.raises(TypeMismatchError) as excinfo:
        Type.Variant(*args)

    assert excinfo.value.position == position + 1
    assert excinfo.value.expected == "number"
    assert excinfo.value.actual == "string"


@given(st.integers(min_value=2, max_value=6), st.data())
@settings(max_examples=30)
def test_case_exhaustiveness(count: int, data: st.DataObject) -> None:
    variants = [f"V{i}" for i in range(count)]
    Type = ADT("Type", {variant: [] for variant in variants})
    dropped = data.draw(st.sampled_from(variants))
    handlers = {variant: (lambda v=variant: v) for variant in variants if variant != dropped}

    with pytest.raises(NonExhaustiveMatchError):
        Type.case(handlers)

    match = Type.case({**handlers, "_": lambda: "rest"})
    assert match(getattr(Type, dropped)) == "rest"
    for variant in handlers:
        assert match(getattr(Type, variant)) == variant


@given(primitives)
def test_eq_is_reflexive(value: object) -> None:
    assert eq(value, value)
    assert eq(just(value), just(value))


@given(st.integers(), st.integers())
def test_eq_is_symmetric(a: int, b: int) -> None:
    assert eq(just(a), just(b)) == eq(just(b), just(a)) == (a == b)


@given(st.lists(st.integers(), max_size=5))
def test_show_renders_every_field(fields: list[int]) -> None:
    Type = ADT("Type", {"Many": ["number"] * len(fields)})
    value = Type.Many(*fields) if fields else Type.Many

    expected = f"(Many {' '.join(map(str, fields))})" if fields else "Many"
    assert show(value) == expected
