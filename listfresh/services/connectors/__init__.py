"""Remote service connectors used to resolve list metadata."""

from listfresh.services.connectors.base import (
    ActorIdentity,
    ListGateway,
    ListItemView,
    ListPage,
    ListView,
    RecordValue,
    XrpcError,
)
from listfresh.services.connectors.xrpc import XrpcListGateway

__all__ = [
    "ActorIdentity",
    "ListGateway",
    "ListItemView",
    "ListPage",
    "ListView",
    "RecordValue",
    "XrpcError",
    "XrpcListGateway",
]
