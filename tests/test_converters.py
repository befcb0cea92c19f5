"""Tests for the individual string/integer and string/IpPort converters."""

import pytest

from type_converter.converter import (
    IntegerToStringConverter,
    IpPortToStringConverter,
    StringToIntegerConverter,
    StringToIpPortConverter,
)
from type_converter.core.errors import ConversionError
from type_converter.types import IpPort


class TestStringToInteger:
    def test_string_to_integer(self) -> None:
        assert StringToIntegerConverter().convert("10") == 10

    def test_leading_zeros_normalize(self) -> None:
        assert StringToIntegerConverter().convert("007") == 7

    def test_signed_values(self) -> None:
        converter = StringToIntegerConverter()
        assert converter.convert("-42") == -42
        assert converter.convert("+3") == 3

    @pytest.mark.parametrize("text", ["abc", "", "1.5", " 10", "1_000", "10a"])
    def test_invalid_text_raises(self, text: str) -> None:
        with pytest.raises(ConversionError):
            StringToIntegerConverter().convert(text)

    def test_digit_limit_raises_conversion_error(self) -> None:
        with pytest.raises(ConversionError):
            StringToIntegerConverter().convert("1" * 5000)

    def test_conversion_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            StringToIntegerConverter().convert("abc")


class TestIntegerToString:
    def test_integer_to_string(self) -> None:
        assert IntegerToStringConverter().convert(10) == "10"

    def test_negative(self) -> None:
        assert IntegerToStringConverter().convert(-5) == "-5"

    def test_huge_values_do_not_fail(self) -> None:
        converter = IntegerToStringConverter()
        assert converter.convert(10 ** 5000) == "1" + "0" * 5000
        assert converter.convert(-(10 ** 5000 + 7)) == "-1" + "0" * 4999 + "7"

    def test_text_round_trip_is_canonical(self) -> None:
        to_int = StringToIntegerConverter()
        to_text = IntegerToStringConverter()
        assert to_text.convert(to_int.convert("007")) == "7"
        assert to_int.convert(to_text.convert(to_int.convert("0123"))) == 123


class TestStringToIpPort:
    def test_oversized_port_raises_conversion_error(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            StringToIpPortConverter().convert("127.0.0.1:" + "1" * 5000)
        assert exc_info.value.source.startswith("127.0.0.1:")

    def test_parses_host_and_port(self) -> None:
        result = StringToIpPortConverter().convert("127.0.0.1:8080")
        assert result == IpPort("127.0.0.1", 8080)
        assert result.ip == "127.0.0.1"
        assert result.port == 8080

    def test_hostname(self) -> None:
        assert StringToIpPortConverter().convert("localhost:80") == IpPort("localhost", 80)

    def test_no_separator_raises(self) -> None:
        with pytest.raises(ConversionError):
            StringToIpPortConverter().convert("bad-input")

    def test_multiple_separators_raise(self) -> None:
        with pytest.raises(ConversionError):
            StringToIpPortConverter().convert("::1:8080")

    def test_non_numeric_port_raises(self) -> None:
        with pytest.raises(ConversionError) as exc_info:
            StringToIpPortConverter().convert("127.0.0.1:http")
        assert exc_info.value.target_type is IpPort

    def test_range_is_not_checked(self) -> None:
        assert StringToIpPortConverter().convert(":99999") == IpPort("", 99999)


class TestIpPortToString:
    def test_ip_port_to_string(self) -> None:
        assert IpPortToStringConverter().convert(IpPort("127.0.0.1", 8080)) == "127.0.0.1:8080"

    def test_huge_port_does_not_fail(self) -> None:
        text = IpPortToStringConverter().convert(IpPort("h", 10 ** 5000))
        assert text == "h:1" + "0" * 5000

    def test_matches_str(self) -> None:
        value = IpPort("10.0.0.1", 22)
        assert IpPortToStringConverter().convert(value) == str(value)


class TestIpPort:
    def test_is_immutable(self) -> None:
        value = IpPort("127.0.0.1", 8080)
        with pytest.raises(AttributeError):
            value.port = 9090  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert IpPort("127.0.0.1", 8080) == IpPort("127.0.0.1", 8080)
        assert len({IpPort("a", 1), IpPort("a", 1)}) == 1
