import logging
import re

from ..core.errors import ConversionError
from .base import Converter


logger = logging.getLogger(__name__)

DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")

# str(int) refuses values past sys.get_int_max_str_digits(); stay well under it
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def parse_decimal(source: str, target_type: type = int) -> int:
    """Parse ASCII decimal text with an optional sign.

    Raises ``ConversionError`` for anything else, including text too long
    for ``int()`` to accept.
    """
    # int() alone would also accept whitespace, underscores and non-ASCII digits
    if not DECIMAL_PATTERN.fullmatch(source):
        raise ConversionError(source, target_type, "not a decimal integer")
    try:
        return int(source)
    except ValueError as e:
        raise ConversionError(source, target_type, str(e)) from e


def decimal_text(value: int) -> str:
    """Base-10 text of ``value`` with no digit limit."""
    if -_CHUNK < value < _CHUNK:
        return str(value)

    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks = []
    while value >= _CHUNK:
        value, chunk = divmod(value, _CHUNK)
        chunks.append(str(chunk).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return sign + "".join(reversed(chunks))


class StringToIntegerConverter(Converter):
    source_type = str
    target_type = int

    def convert(self, source: str) -> int:
        logger.info(f"convert source={source}")
        return parse_decimal(source)


class IntegerToStringConverter(Converter):
    source_type = int
    target_type = str

    def convert(self, source: int) -> str:
        text = decimal_text(source)
        logger.info(f"convert source={text}")
        return text

