from __future__ import annotations

import pytest

from adt_dsl import ADT, Maybe, Tuple, TypeMismatchError, eq, just, show, tuple_


# ============================================================================
# eq
# ============================================================================


def test_eq_on_primitives() -> None:
    assert eq(1, 1)
    assert eq(1, 1.0)
    assert not eq(1, 2)
    assert eq("a", "a")
    assert eq(None, None)
    assert eq(True, True)
    assert not eq(True, False)


def test_eq_on_variants() -> None:
    MaybeNumber = Maybe("number")

    assert eq(MaybeNumber.Just(3), MaybeNumber.Just(3))
    assert eq(Maybe("number").Just(3), Maybe("number").Just(3))
    assert not eq(MaybeNumber.Just(3), MaybeNumber.Just(4))
    assert not eq(MaybeNumber.Just(3), MaybeNumber.Nothing)
    assert not eq(MaybeNumber.Nothing, MaybeNumber.Just(3))
    assert eq(MaybeNumber.Nothing, MaybeNumber.Nothing)


def test_eq_is_symmetric() -> None:
    a, b = tuple_(1, "a"), tuple_(1, "b")

    assert eq(a, b) == eq(b, a)
    assert eq(a, tuple_(1, "a")) == eq(tuple_(1, "a"), a)


def test_eq_recurses_into_fields() -> None:
    assert eq(just(just(1)), just(just(1)))
    assert not eq(just(just(1)), just(just(2)))
    assert not eq(just(Maybe("number").Nothing), just(just(2)))


def test_eq_across_types_is_an_error() -> None:
    with pytest.raises(TypeMismatchError, match='You can use "type_of"'):
        eq(3, just(3))
    with pytest.raises(TypeMismatchError):
        eq(1, "1")
    with pytest.raises(TypeMismatchError):
        eq(1, True)
    with pytest.raises(TypeMismatchError):
        eq(just(1), just("1"))


def test_eq_fails_on_nested_mismatch() -> None:
    Boxes = Tuple("object", "number")

    with pytest.raises(TypeMismatchError):
        eq(Boxes.Tuple([1], 1), Boxes.Tuple(["a"], 1))


def test_eq_on_plain_sequences() -> None:
    assert eq([1, 2], [1, 2])
    assert eq([just(1)], [just(1)])
    assert not eq([1, 2], [1, 3])
    assert not eq([1], [1, 2])


def test_eq_on_other_objects_uses_equality() -> None:
    assert eq({"a": 1}, {"a": 1})
    assert not eq({"a": 1}, {"a": 2})


# ============================================================================
# show
# ============================================================================


def test_show_variants() -> None:
    assert show(Tuple("number", "string").Tuple(1, "a")) == "(Tuple 1 a)"
    assert show(Maybe("number").Nothing) == "Nothing"
    assert show(just(just(1))) == "(Just (Just 1))"


def test_show_passes_primitives_through() -> None:
    def f() -> None:
        pass

    assert show(None) is None
    assert show(3) == 3
    assert show(2.5) == 2.5
    assert show("text") == "text"
    assert show(True) is True
    assert show(f) is f


def test_show_plain_sequences() -> None:
    assert show([1, just(2), "a"]) == "[ 1, (Just 2), a ]"
    assert show([]) == "[  ]"
    assert show(just([1, [2]])) == "(Just [ 1, [ 2 ] ])"


def test_show_nested_null_and_booleans() -> None:
    assert show(just(True)) == "(Just true)"
    assert show(Tuple("boolean", "boolean").Tuple(False, True)) == "(Tuple false true)"
    assert show(Maybe("null").Just(None)) == "(Just )"
    assert show([None, False]) == "[ , false ]"


def test_show_other_objects() -> None:
    Shape = ADT("Shape", {"Circle": ["number"]})

    assert show({"a": 1}) == "{'a': 1}"
    assert show(Shape) == "<ADT (Shape): Circle>"


def test_str_and_repr_of_values_render_them() -> None:
    value = tuple_(1, just("x"))

    assert str(value) == "(Tuple 1 (Just x))"
    assert repr(value) == "(Tuple 1 (Just x))"
    assert f"{Maybe('string').Nothing}" == "Nothing"
