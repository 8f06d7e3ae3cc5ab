from enum import Enum


class ErrorCode(str, Enum):
    bad_request = "BAD_REQUEST"
    malformed_locator = "MALFORMED_LOCATOR"
    wrong_collection = "WRONG_COLLECTION"
    list_not_found = "LIST_NOT_FOUND"
    fetch_failed = "FETCH_FAILED"


class ListPurpose(str, Enum):
    curatelist = "app.bsky.graph.defs#curatelist"
    modlist = "app.bsky.graph.defs#modlist"
    referencelist = "app.bsky.graph.defs#referencelist"


class LatestItemSource(str, Enum):
    """Where the timestamp of the newest list member comes from."""

    empty = "empty"
    inline_item = "inline_item"
    cursor = "cursor"
    inconsistent = "inconsistent"
