from collections.abc import Iterator

from fastapi import Depends

from listfresh.config import Settings, get_settings
from listfresh.services.connectors import ListGateway, XrpcListGateway


def get_gateway(settings: Settings = Depends(get_settings)) -> Iterator[ListGateway]:
    gateway = XrpcListGateway.from_settings(settings)
    try:
        yield gateway
    finally:
        gateway.close()
