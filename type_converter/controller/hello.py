import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from ..binding import get_conversion_service, request_param
from ..converter.integer import DECIMAL_PATTERN
from ..types import IpPort


logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


@router.get("/hello-v1")
async def hello_v1(request: Request):
    # Raw query text, converted by hand
    data = request.query_params.get("data")

    if data is None or not DECIMAL_PATTERN.fullmatch(data):
        raise ValueError(f"data={data!r} is not a decimal integer")
    int_value = int(data)

    logger.info(f"intValue = {int_value}")
    return "ok"


@router.get("/hello-v2")
async def hello_v2(data: int = Depends(request_param(int, "data"))):
    """The string ``"10"`` arrives here already converted to the integer ``10``."""
    logger.info(f"intValue = {data}")
    return "ok"


@router.get("/ip-port")
async def hello_ip_port(request: Request, ip_port: IpPort = Depends(request_param(IpPort, "ipPort"))):
    logger.info(f"ipPort IP = {ip_port.ip}")
    logger.info(f"ipPort PORT = {ip_port.port}")
    logger.info(f"ipPort = {get_conversion_service(request).convert(ip_port, str)}")
    return "ok"

