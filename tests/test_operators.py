import math

import pytest

from varcore import (
    Category, Origin, EMPTY,
    TypeMismatch, DivideByZero, VarcoreError,
    from_int, from_long, from_bool, from_double, from_string,
    add, divide, equals, not_equals, logical_or, logical_and, apply_operator,
)

INTEGER = Category.INTEGER


def integer(x):
    return from_int(x, category=INTEGER)

# -----------------------------------------------------
# Scenarios
# -----------------------------------------------------

def test_numbers_add_to_double():
    res = from_int(3) + from_int(4)
    assert res.category is Category.NUMBER
    assert res.origin is Origin.DOUBLE
    assert res.payload == 7.0

def test_strings_concatenate():
    res = from_string("a") + from_string("b")
    assert res.category is Category.STRING
    assert res.as_string() == "ab"

def test_number_plus_string_is_a_mismatch():
    with pytest.raises(TypeMismatch) as exc:
        from_int(3) + from_string("b")
    assert exc.value.operator == "+"
    assert exc.value.left is Category.NUMBER
    assert exc.value.right is Category.STRING
    assert str(exc.value) == "Operator + is not defined for NUMBER and STRING"

def test_divide_by_zero():
    with pytest.raises(DivideByZero):
        from_int(5) / from_int(0)

def test_ordering_scenarios():
    assert (from_int(5) > from_int(3)) is True
    assert (from_string("b") < from_string("a")) is False

# -----------------------------------------------------
# Arithmetic
# -----------------------------------------------------

@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        ("+", from_int(1), from_double(2.5), 3.5),
        ("+", from_bool(True), from_int(1), 2.0),
        ("+", from_long(1 << 40), from_int(1), float((1 << 40) + 1)),
        ("-", from_int(10), from_int(4), 6.0),
        ("-", from_int(-10), from_int(-5), -5.0),
        ("*", from_int(3), from_int(4), 12.0),
        ("*", from_double(-2.0), from_int(3), -6.0),
        ("/", from_int(7), from_int(2), 3.5),
        ("/", from_int(-12), from_int(3), -4.0),
        ("%", from_int(7), from_int(3), 1.0),
        ("%", from_int(-7), from_int(3), -1.0),
        ("%", from_int(7), from_int(-3), 1.0),
        ("%", from_double(5.5), from_int(2), 1.5),
    ]
)
def test_arithmetic(op, a, b, expected):
    res = apply_operator(op, a, b)
    assert res.origin is Origin.DOUBLE
    assert res.category is Category.NUMBER
    assert res.as_double() == expected

@pytest.mark.parametrize("divisor", [from_int(0), from_double(0.0), from_double(-0.0), from_bool(False), from_long(0)])
def test_divide_by_any_zero(divisor):
    with pytest.raises(DivideByZero):
        divide(from_double(1.5), divisor)

def test_divide_by_zero_is_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        from_int(1) / 0

def test_remainder_by_zero_is_nan():
    assert math.isnan((from_int(5) % from_int(0)).as_double())
    assert math.isnan((from_double(math.inf) % from_int(2)).as_double())

@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%"])
@pytest.mark.parametrize(
    "a,b",
    [
        (from_int(1), from_string("1")),
        (from_string("1"), from_int(1)),
        (integer(1), integer(1)),
        (integer(1), from_int(1)),
        (EMPTY, from_int(1)),
    ]
)
def test_arithmetic_mismatch(op, a, b):
    with pytest.raises(TypeMismatch) as exc:
        apply_operator(op, a, b)
    assert exc.value.operator == op
    assert (exc.value.left, exc.value.right) == (a.category, b.category)

@pytest.mark.parametrize("op", ["-", "*", "/", "%"])
def test_only_plus_accepts_strings(op):
    with pytest.raises(TypeMismatch):
        apply_operator(op, from_string("a"), from_string("b"))

def test_mismatch_is_a_type_error():
    with pytest.raises(TypeError):
        from_string("a") - from_string("b")

def test_operands_are_not_mutated():
    a, b = from_int(2), from_int(3)
    res = add(a, b)
    assert res is not a and res is not b
    assert (a.payload, a.origin) == (2, Origin.INT)
    assert (b.payload, b.origin) == (3, Origin.INT)

def test_native_operands_are_wrapped():
    assert (from_int(3) + 4).as_double() == 7.0
    assert (4 + from_int(3)).as_double() == 7.0
    assert (10 - from_int(4)).as_double() == 6.0
    assert ("a" + from_string("b")).as_string() == "ab"
    assert (from_string("a") + "b").as_string() == "ab"

def test_unconvertible_operand_is_not_implemented():
    with pytest.raises(TypeError) as exc:
        from_int(3) + object()
    assert not isinstance(exc.value, TypeMismatch)

def test_unknown_operator():
    with pytest.raises(VarcoreError):
        apply_operator("**", from_int(1), from_int(2))

# -----------------------------------------------------
# Comparison and equality
# -----------------------------------------------------

@pytest.mark.parametrize(
    "op,a,b,expected",
    [
        (">", from_int(5), from_double(4.5), True),
        ("<", from_int(5), from_double(4.5), False),
        (">=", from_int(5), from_double(5.0), True),
        ("<=", from_bool(False), from_int(0), True),
        (">", from_long(1 << 40), from_int(1), True),
        ("<", from_string("B"), from_string("a"), True),
        ("<", from_string("ab"), from_string("abc"), True),
        (">=", from_string("b"), from_string("b"), True),
        ("<=", from_string("b"), from_string("a"), False),
        ("==", from_int(2), from_double(2.0), True),
        ("==", from_bool(True), from_int(1), True),
        ("==", from_string("a"), from_string("a"), True),
        ("==", from_string("a"), from_string("A"), False),
        ("!=", from_int(2), from_int(3), True),
        ("!=", from_string("x"), from_string("x"), False),
    ]
)
def test_comparisons(op, a, b, expected):
    assert apply_operator(op, a, b) is expected

@pytest.mark.parametrize("op", [">", "<", ">=", "<=", "==", "!="])
@pytest.mark.parametrize(
    "a,b",
    [
        (from_int(1), from_string("1")),
        (from_string("1"), from_double(1.0)),
        (integer(1), from_int(1)),
        (EMPTY, EMPTY),
    ]
)
def test_comparison_mismatch(op, a, b):
    with pytest.raises(TypeMismatch):
        apply_operator(op, a, b)

def test_not_equals_reports_equality_operator():
    with pytest.raises(TypeMismatch) as exc:
        not_equals(from_int(1), from_string("1"))
    assert exc.value.operator == "=="

def test_nan_is_not_equal_to_itself():
    nan = from_double(math.nan)
    assert equals(nan, nan) is False
    assert (nan != nan) is True

def test_python_equality_with_natives():
    assert from_int(3) == 3
    assert from_string("x") == "x"
    assert from_int(3) != 4
    with pytest.raises(TypeMismatch):
        from_int(3) == "3"

def test_variables_are_unhashable():
    with pytest.raises(TypeError) as exc:
        hash(from_int(0))
    assert not isinstance(exc.value, TypeMismatch)
    with pytest.raises(TypeError) as exc:
        {from_int(0), from_string("")}
    assert not isinstance(exc.value, TypeMismatch)
    with pytest.raises(TypeError):
        {EMPTY: 1}

def test_equality_with_none_is_false():
    assert (from_int(1) == None) is False  # noqa: E711
    assert (from_int(1) != None) is True  # noqa: E711
    assert (from_string("") == None) is False  # noqa: E711
    assert (EMPTY == None) is False  # noqa: E711
    assert None != from_double(0.0)  # noqa: E711

# -----------------------------------------------------
# Logical
# -----------------------------------------------------

@pytest.mark.parametrize(
    "a,b,expected_or,expected_and",
    [
        (integer(1), integer(1), True, True),
        (integer(1), integer(0), True, False),
        (integer(0), integer(7), True, False),
        (integer(0), integer(0), False, False),
        (from_bool(True).with_category(INTEGER), from_double(0.0).with_category(INTEGER), True, False),
    ]
)
def test_logical_on_integers(a, b, expected_or, expected_and):
    assert logical_or(a, b) is expected_or
    assert logical_and(a, b) is expected_and
    assert (a | b) is expected_or
    assert (a & b) is expected_and

@pytest.mark.parametrize("op", ["|", "&"])
@pytest.mark.parametrize(
    "a,b",
    [
        (from_int(1), from_int(1)),
        (from_bool(True), from_bool(True)),
        (integer(1), from_int(1)),
        (from_int(1), integer(1)),
        (from_string("1"), integer(1)),
        (EMPTY, integer(1)),
    ]
)
def test_logical_requires_integer_category(op, a, b):
    with pytest.raises(TypeMismatch) as exc:
        apply_operator(op, a, b)
    assert exc.value.operator == op
