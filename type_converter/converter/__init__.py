"""Converters between request text and typed values."""

from .base import Converter
from .integer import IntegerToStringConverter, StringToIntegerConverter
from .ip_port import IpPortToStringConverter, StringToIpPortConverter
from .registry import ConversionService

__all__ = [
    "ConversionService",
    "Converter",
    "IntegerToStringConverter",
    "IpPortToStringConverter",
    "StringToIntegerConverter",
    "StringToIpPortConverter",
]
