from .ip_port import IpPort

__all__ = ["IpPort"]
