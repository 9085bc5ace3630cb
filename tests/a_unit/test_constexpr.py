"""Unit tests for chapter1.constexpr."""

from __future__ import annotations

import pytest

from chapter1.constexpr import CONSTEXPR_FUNCTIONS, NotConstantError, constexpr, fold, is_constant


class TestFold:
    """Tests for constant folding."""

    def test_literal(self) -> None:
        assert fold("42") == 42

    def test_named_constants(self) -> None:
        assert fold("a", {"a": 7}) == 7

    def test_unary(self) -> None:
        assert fold("-a", {"a": 3}) == -3
        assert fold("+3") == 3

    def test_arithmetic(self) -> None:
        assert fold("30 - count", {"count": 9}) == 21
        assert fold("2 * 3 + 10 // 4 % 3") == 8

    def test_nested_constexpr_calls(self) -> None:
        assert fold("select_min(select_min(5, 9), 2 + 1)") == 3

    def test_literal_arguments(self) -> None:
        assert fold("select_min(1, 4)") == 1

    def test_unknown_name(self) -> None:
        with pytest.raises(NotConstantError, match="'x' is not a compile-time constant"):
            fold("select_min(x, y)")

    def test_non_constexpr_function(self) -> None:
        with pytest.raises(NotConstantError, match="'max' is not constexpr"):
            fold("max(1, 2)")

    def test_keyword_arguments_rejected(self) -> None:
        with pytest.raises(NotConstantError):
            fold("select_min(a=1, b=2)")

    def test_unsupported_constructs(self) -> None:
        for expression in ["1.5", "'text'", "True", "[1, 2]", "2 ** 3", "1 / 2"]:
            with pytest.raises(NotConstantError):
                fold(expression)

    def test_division_by_zero(self) -> None:
        with pytest.raises(NotConstantError, match="Division by zero"):
            fold("a % 0", {"a": 3})

    def test_not_constant_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            fold("y")

    def test_syntax_error(self) -> None:
        with pytest.raises(SyntaxError):
            fold("select_min(")

    def test_too_few_arguments(self) -> None:
        with pytest.raises(NotConstantError, match="Bad arguments to constexpr 'select_min'"):
            fold("select_min(1)")

    def test_too_many_arguments(self) -> None:
        with pytest.raises(NotConstantError):
            fold("select_min(1, 2, 3)")


class TestIsConstant:
    """Tests for is_constant."""

    def test_constant(self) -> None:
        assert is_constant("select_min(a, b)", {"a": 1, "b": 4})

    def test_runtime_only(self) -> None:
        assert not is_constant("select_min(x, y)", {"a": 1, "b": 4})

    def test_wrong_arity(self) -> None:
        assert is_constant("select_min(1)") is False
        assert is_constant("select_min(1, 2, 3)") is False


class TestConstexprDecorator:
    """Tests for the constexpr registry."""

    def test_registers_and_returns_function(self) -> None:
        def triple(n: int) -> int:
            return 3 * n

        try:
            assert constexpr(triple) is triple
            assert fold("triple(a)", {"a": 5}) == 15
        finally:
            CONSTEXPR_FUNCTIONS.pop("triple", None)
