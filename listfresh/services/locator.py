"""AT URI parsing for list locators.

A locator has the shape ``at://<authority>/<collection>/<rkey>``. The
authority is either a handle (``alice.bsky.social``) or a DID
(``did:plc:...``); both are kept as distinct types so callers can match on
them instead of sniffing the string again.
"""

import re
from dataclasses import dataclass
from urllib.parse import quote

from listfresh.constants import (
    AT_URI_SCHEME,
    LIST_COLLECTION,
    MAX_DID_LENGTH,
    MAX_HANDLE_LENGTH,
    MAX_RKEY_LENGTH,
    WEB_APP_ORIGIN,
)
from listfresh.services.validation import ValidationError, malformed_locator, require, wrong_collection

HANDLE_PATTERN = re.compile(
    r"^([a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?\.)+[a-zA-Z]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$"
)
DID_PATTERN = re.compile(r"^did:[a-z]+:[a-zA-Z0-9._:%-]*[a-zA-Z0-9._-]$")
NSID_PATTERN = re.compile(
    r"^[a-zA-Z]([a-zA-Z0-9-]{0,62}[a-zA-Z0-9])?(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,62}[a-zA-Z0-9])?)+"
    r"\.[a-zA-Z]([a-zA-Z0-9]{0,62})?$"
)
RKEY_PATTERN = re.compile(r"^[a-zA-Z0-9._~:-]{1,%d}$" % MAX_RKEY_LENGTH)
AT_URI_PATTERN = re.compile(r"^at://(?P<authority>[^/?#\s]+)/(?P<collection>[^/?#\s]+)/(?P<rkey>[^/?#\s]+)/?$")
WEB_LIST_URL_PATTERN = re.compile(r"^https://bsky\.app/profile/(?P<actor>[^/?#\s]+)/lists/(?P<rkey>[^/?#\s]+)/?$")


@dataclass(frozen=True)
class Handle:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Did:
    value: str

    def __str__(self) -> str:
        return self.value


Authority = Handle | Did


@dataclass(frozen=True)
class ResourceLocator:
    authority: Authority
    collection: str
    rkey: str

    def __str__(self) -> str:
        return make_at_uri(str(self.authority), self.collection, self.rkey)


def is_valid_handle(value: str) -> bool:
    return len(value) <= MAX_HANDLE_LENGTH and bool(HANDLE_PATTERN.match(value))


def is_valid_did(value: str) -> bool:
    return len(value) <= MAX_DID_LENGTH and bool(DID_PATTERN.match(value))


def is_valid_rkey(value: str) -> bool:
    return value not in {".", ".."} and bool(RKEY_PATTERN.match(value))


def is_valid_nsid(value: str) -> bool:
    return len(value) <= 317 and bool(NSID_PATTERN.match(value))


def parse_authority(value: str) -> Authority:
    if value.startswith("did:"):
        require(is_valid_did(value), f"Invalid DID: {value}")
        return Did(value)
    require(is_valid_handle(value), f"Invalid handle: {value}")
    return Handle(value.lower())


def make_at_uri(authority: str, collection: str, rkey: str) -> str:
    return f"{AT_URI_SCHEME}{authority}/{collection}/{rkey}"


def parse_at_uri(uri: str) -> ResourceLocator:
    """Parse an AT URI addressing a single record in any collection."""
    if not isinstance(uri, str):
        raise malformed_locator()
    match = AT_URI_PATTERN.match(uri)
    if match is None:
        raise malformed_locator()
    collection = match.group("collection")
    rkey = match.group("rkey")
    if not is_valid_nsid(collection) or not is_valid_rkey(rkey):
        raise malformed_locator()
    try:
        authority = parse_authority(match.group("authority"))
    except ValidationError as exc:
        raise malformed_locator() from exc
    return ResourceLocator(authority=authority, collection=collection, rkey=rkey)


def parse_list_locator(uri: str) -> ResourceLocator:
    locator = parse_at_uri(uri)
    if locator.collection != LIST_COLLECTION:
        raise wrong_collection(locator.collection)
    return locator


def normalize_list_input(raw: str) -> str:
    """Rewrite a bsky.app list link into its AT URI; other input is only trimmed."""
    value = raw.strip()
    match = WEB_LIST_URL_PATTERN.match(value)
    if match is None:
        return value
    return make_at_uri(match.group("actor"), LIST_COLLECTION, match.group("rkey"))


def profile_web_url(actor: str) -> str:
    return f"{WEB_APP_ORIGIN}/profile/{quote(actor, safe=':')}"


def list_web_url(actor: str, rkey: str) -> str:
    return f"{profile_web_url(actor)}/lists/{quote(rkey, safe='')}"
