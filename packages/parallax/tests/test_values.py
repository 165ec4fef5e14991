"""Tests for parallax.values - ValueTemplate decomposition."""
from __future__ import annotations

import pytest

from parallax.values import PLACEHOLDER, ValueTemplate, format_number


class TestParse:
    def test_single_number_with_unit(self) -> None:
        v = ValueTemplate.parse(0.0, "10px")
        assert v.numbers == (10.0,)
        assert v.template == "@px"

    def test_function_with_several_numbers(self) -> None:
        v = ValueTemplate.parse(0.5, "rgba(255, 0, 12, 0.5)")
        assert v.numbers == (255.0, 0.0, 12.0, 0.5)
        assert v.template == "rgba(@, @, @, @)"

    def test_signed_numbers(self) -> None:
        v = ValueTemplate.parse(0.0, "translateX(-12.5%) rotate(+3deg)")
        assert v.numbers == (-12.5, 3.0)
        assert v.template == "translateX(@%) rotate(@deg)"

    def test_keyword_value_is_constant(self) -> None:
        v = ValueTemplate.parse(0.0, "none")
        assert v.numbers == ()
        assert v.template == "none"
        assert v.is_constant

    def test_empty_value(self) -> None:
        v = ValueTemplate.parse(0.0, "")
        assert v.numbers == ()
        assert v.template == ""

    def test_placeholder_marker(self) -> None:
        assert PLACEHOLDER == "@"


class TestRender:
    @pytest.mark.parametrize(
        "raw",
        [
            "10px",
            "rgba(255, 0, 12, 0.5)",
            "translate(-10px) scale(1.25)",
            "none",
            "05px",
            "+3deg",
            "calc(100% - 20px)",
            "email@host 3",
        ],
    )
    def test_round_trip(self, raw: str) -> None:
        v = ValueTemplate.parse(0.0, raw)
        assert v.render(v.numbers) == raw

    def test_substitutes_by_position(self) -> None:
        v = ValueTemplate.parse(0.0, "translate(10px, 20px)")
        assert v.render([15.0, 25.5]) == "translate(15px, 25.5px)"

    def test_surplus_numbers_ignored(self) -> None:
        v = ValueTemplate.parse(0.0, "rgb(0, 0, 0)")
        assert v.render([10.0, 20.0, 30.0, 0.5]) == "rgb(10, 20, 30)"

    def test_missing_numbers_keep_literal(self) -> None:
        v = ValueTemplate.parse(0.0, "translate(10px, 20px)")
        assert v.render([15.0]) == "translate(15px, 20px)"

    def test_authored_at_sign_survives(self) -> None:
        v = ValueTemplate.parse(0.0, "a@b 4")
        assert v.render([8.0]) == "a@b 8"


class TestFormatNumber:
    def test_integral(self) -> None:
        assert format_number(5.0) == "5"

    def test_fraction(self) -> None:
        assert format_number(0.25) == "0.25"

    def test_float_noise_trimmed(self) -> None:
        assert format_number(0.1 + 0.2) == "0.3"

    def test_negative_zero(self) -> None:
        assert format_number(-0.0) == "0"
        assert format_number(-0.0000001) == "0"

    def test_negative(self) -> None:
        assert format_number(-12.5) == "-12.5"
