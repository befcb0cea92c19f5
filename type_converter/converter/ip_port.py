import logging

from ..core.errors import ConversionError
from ..types import IpPort
from .base import Converter
from .integer import decimal_text, parse_decimal


logger = logging.getLogger(__name__)


class StringToIpPortConverter(Converter):
    """Parses ``"127.0.0.1:8080"`` into ``IpPort("127.0.0.1", 8080)``.

    Host format and port range are not checked here; see
    ``core.validation.validate_ip_port``.
    """

    source_type = str
    target_type = IpPort

    def convert(self, source: str) -> IpPort:
        logger.info(f"convert source={source}")
        parts = source.split(":")
        if len(parts) != 2:
            raise ConversionError(source, IpPort, "expected exactly one ':' between host and port")
        ip, port = parts
        try:
            return IpPort(ip, parse_decimal(port, IpPort))
        except ConversionError as e:
            raise ConversionError(source, IpPort, f"port {port!r}: {e.reason}") from e


class IpPortToStringConverter(Converter):
    source_type = IpPort
    target_type = str

    def convert(self, source: IpPort) -> str:
        text = f"{source.ip}:{decimal_text(source.port)}"
        logger.info(f"convert source={text}")
        return text

