from .converter import (
    ConversionService,
    IntegerToStringConverter,
    IpPortToStringConverter,
    StringToIntegerConverter,
    StringToIpPortConverter,
)


def add_formatters(registry: ConversionService) -> None:
    registry.add_converter(StringToIntegerConverter())
    registry.add_converter(IntegerToStringConverter())
    registry.add_converter(StringToIpPortConverter())
    registry.add_converter(IpPortToStringConverter())


def build_conversion_service() -> ConversionService:
    """Return a new conversion service with the application's converters."""
    registry = ConversionService()
    add_formatters(registry)
    return registry

