from dataclasses import dataclass


@dataclass(frozen=True)
class IpPort:
    """A host paired with a port, written as ``HOST:PORT``."""

    ip: str
    port: int

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"

