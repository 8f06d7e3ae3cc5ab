import logging
from dataclasses import dataclass

from listfresh.constants import LIST_COLLECTION, LIST_ITEM_COLLECTION, UPSTREAM_LIST_NOT_FOUND_MARKER
from listfresh.enums import LatestItemSource, ListPurpose
from listfresh.schemas import ListInfoResponse
from listfresh.services.connectors.base import ListGateway, ListPage, XrpcError
from listfresh.services.locator import (
    Did,
    Handle,
    ResourceLocator,
    is_valid_did,
    make_at_uri,
    normalize_list_input,
    parse_at_uri,
    parse_list_locator,
)
from listfresh.services.validation import FetchFailedError, ListNotFoundError, LocatorError

logger = logging.getLogger(__name__)

KNOWN_PURPOSES = {purpose.value for purpose in ListPurpose}


@dataclass
class ListCreator:
    did: str
    handle: str = ""


def _resolve_creator(locator: ResourceLocator, gateway: ListGateway) -> ListCreator:
    authority = locator.authority
    if isinstance(authority, Did):
        return ListCreator(did=authority.value)
    if not isinstance(authority, Handle):
        raise TypeError(f"Unsupported authority type: {type(authority).__name__}")

    logger.debug("Resolving handle to DID: %s", authority.value)
    try:
        identity = gateway.resolve_handle(authority.value)
    except XrpcError as exc:
        logger.warning("Failed to resolve handle %s: %s", authority.value, exc)
        raise ListNotFoundError() from exc
    if not is_valid_did(identity.did):
        logger.warning("Handle %s resolved to an invalid DID: %r", authority.value, identity.did)
        raise ListNotFoundError()
    logger.debug("Resolved handle %s to %s", identity.handle, identity.did)
    return ListCreator(did=identity.did, handle=identity.handle)


def _is_list_not_found(exc: XrpcError) -> bool:
    return UPSTREAM_LIST_NOT_FOUND_MARKER in exc.message or exc.error == "NotFound"


def _fetch_list_page(creator: ListCreator, rkey: str, gateway: ListGateway) -> ListPage:
    list_uri = make_at_uri(creator.did, LIST_COLLECTION, rkey)
    logger.debug("Fetching list with items: %s", list_uri)
    try:
        return gateway.get_list(list_uri, limit=1)
    except XrpcError as exc:
        if _is_list_not_found(exc):
            logger.info("List not found: %s", list_uri)
            raise ListNotFoundError() from exc
        logger.error("Error fetching list %s: %s", list_uri, exc)
        raise FetchFailedError() from exc


def classify_latest_item(page: ListPage) -> LatestItemSource:
    if not page.list_view.list_item_count:
        return LatestItemSource.empty
    if page.items:
        return LatestItemSource.inline_item
    if page.cursor:
        return LatestItemSource.cursor
    return LatestItemSource.inconsistent


def _fetch_created_at(repo: str, rkey: str, gateway: ListGateway) -> str:
    logger.debug("Fetching list item record: repo=%s rkey=%s", repo, rkey)
    try:
        record = gateway.get_record(repo, LIST_ITEM_COLLECTION, rkey)
    except XrpcError as exc:
        logger.error("Error fetching list item %s/%s: %s", repo, rkey, exc)
        raise FetchFailedError() from exc
    if record.created_at is None:
        logger.error("List item %s/%s has no createdAt", repo, rkey)
        raise FetchFailedError()
    return record.created_at


def find_date_last_added(page: ListPage, creator: ListCreator, gateway: ListGateway) -> str | None:
    source = classify_latest_item(page)
    logger.debug("Latest item source: %s", source.value)

    if source is LatestItemSource.empty:
        return None
    if source is LatestItemSource.inline_item:
        try:
            item = parse_at_uri(page.items[0].uri)
        except LocatorError as exc:
            logger.error("Upstream returned an unparseable list item URI: %r", page.items[0].uri)
            raise FetchFailedError() from exc
        return _fetch_created_at(str(item.authority), item.rkey, gateway)
    if source is LatestItemSource.cursor:
        # the newest item failed hydration upstream; its rkey comes back as the cursor
        return _fetch_created_at(creator.did, page.cursor, gateway)

    logger.error(
        "List reports %s items but returned neither items nor a cursor",
        page.list_view.list_item_count,
    )
    raise FetchFailedError()


def resolve_list_info(locator: ResourceLocator, gateway: ListGateway) -> ListInfoResponse:
    creator = _resolve_creator(locator, gateway)
    page = _fetch_list_page(creator, locator.rkey, gateway)

    list_view = page.list_view
    creator = ListCreator(did=list_view.creator.did, handle=list_view.creator.handle)
    purpose = list_view.purpose or ""
    if purpose and purpose not in KNOWN_PURPOSES:
        logger.warning("Unrecognized list purpose %r for %s", purpose, locator)

    date_last_added = find_date_last_added(page, creator, gateway)

    response = ListInfoResponse(
        name=list_view.name or "",
        description=list_view.description or "",
        purpose=purpose,
        creator_did=creator.did,
        creator_handle=creator.handle,
        list_item_count=list_view.list_item_count or 0,
        date_last_added=date_last_added,
        rkey=locator.rkey,
    )
    logger.debug("Built list info for %s: %s", locator, response)
    return response


def get_list_info(raw_uri: str, gateway: ListGateway) -> ListInfoResponse:
    locator = parse_list_locator(normalize_list_input(raw_uri))
    return resolve_list_info(locator, gateway)
