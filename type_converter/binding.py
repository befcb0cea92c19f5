"""Query parameter binding through the application's conversion service.

``request_param`` produces a FastAPI dependency, so handlers declare typed
parameters and receive already-converted values::

    @router.get("/ip-port")
    async def ip_port(value: IpPort = Depends(request_param(IpPort, "ipPort"))):
        ...

The raw text is declared with ``Query`` so the parameter shows up in the
OpenAPI schema. A missing required value is reported as
``MissingParameterError`` rather than FastAPI's 422.
"""

from typing import Any, Callable

from fastapi import Query, Request

from .converter import ConversionService
from .core.config import Config
from .core.errors import MissingParameterError
from .core.validation import validate_ip_port
from .types import IpPort


def get_conversion_service(request: Request) -> ConversionService:
    return request.app.state.conversion_service


def request_param(target_type: type, name: str, *, required: bool = True) -> Callable[..., Any]:
    description = f"Converted to {target_type.__name__}" + ("" if required else " (optional)")

    def _bind(request: Request, raw: str | None = Query(None, alias=name, description=description)) -> Any:
        if raw is None:
            if required:
                raise MissingParameterError(name, target_type)
            return None

        value = get_conversion_service(request).convert(raw, target_type)
        if target_type is IpPort and Config.STRICT_IP_PORT:
            validate_ip_port(value)
        return value

    _bind.__name__ = f"bind_{name}"
    return _bind

