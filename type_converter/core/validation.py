import logging

from ..types import IpPort
from .errors import ConversionError


logger = logging.getLogger(__name__)

MIN_PORT = 0
MAX_PORT = 65535


def validate_ip_port(ip_port: IpPort) -> None:
    if not ip_port.ip:
        raise ConversionError(str(ip_port), IpPort, "host must not be empty")

    if not MIN_PORT <= ip_port.port <= MAX_PORT:
        raise ConversionError(str(ip_port), IpPort, f"port must be between {MIN_PORT} and {MAX_PORT}")

