import logging
from typing import Any, Dict, List, Tuple

from ..core.errors import ConversionError, ConverterNotFoundError
from .base import Converter


logger = logging.getLogger(__name__)


class ConversionService:
    """Table of converters keyed on ``(source_type, target_type)``.

    Built once at application setup and handed to the request binding layer.
    Lookups are exact on the value's type; there is no subclass fallback.
    """

    def __init__(self) -> None:
        self._converters: Dict[Tuple[type, type], Converter] = {}

    def add_converter(self, converter: Converter) -> None:
        key = (converter.source_type, converter.target_type)
        if key in self._converters:
            logger.warning(f"Replacing converter for {key[0].__name__} -> {key[1].__name__}: {converter!r}")
        self._converters[key] = converter

    def can_convert(self, source_type: type, target_type: type) -> bool:
        return source_type is target_type or (source_type, target_type) in self._converters

    def convert(self, value: Any, target_type: type) -> Any:
        source_type = type(value)
        if source_type is target_type:
            return value

        converter = self._converters.get((source_type, target_type))
        if converter is None:
            raise ConverterNotFoundError(value, target_type)

        try:
            return converter.convert(value)
        except ConversionError:
            raise
        except (TypeError, ValueError) as e:
            raise ConversionError(value, target_type, str(e)) from e

    def pairs(self) -> List[str]:
        return [f"{source.__name__} -> {target.__name__}" for source, target in self._converters]

