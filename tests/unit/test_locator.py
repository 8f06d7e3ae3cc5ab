import pytest

from listfresh.enums import ErrorCode
from listfresh.services.locator import (
    Did,
    Handle,
    list_web_url,
    normalize_list_input,
    parse_at_uri,
    parse_list_locator,
    profile_web_url,
)
from listfresh.services.validation import LocatorError


def test_parses_list_uri_with_did_authority():
    locator = parse_list_locator("at://did:plc:test123/app.bsky.graph.list/list123")
    assert locator.authority == Did("did:plc:test123")
    assert locator.collection == "app.bsky.graph.list"
    assert locator.rkey == "list123"
    assert str(locator) == "at://did:plc:test123/app.bsky.graph.list/list123"


def test_parses_list_uri_with_handle_authority_and_lowercases_it():
    locator = parse_list_locator("at://User.Bsky.Social/app.bsky.graph.list/abc123")
    assert locator.authority == Handle("user.bsky.social")
    assert isinstance(locator.authority, Handle)
    assert locator.rkey == "abc123"


def test_did_web_authority_is_accepted():
    locator = parse_list_locator("at://did:web:example.com/app.bsky.graph.list/3khbcfekugt2j")
    assert isinstance(locator.authority, Did)


@pytest.mark.parametrize(
    "value",
    [
        "invalid-uri",
        "invalid-uri-format",
        "",
        "did:plc:test/app.bsky.graph.list/list123",
        "https://did:plc:test/app.bsky.graph.list/list123",
        "at://did:plc:test123/app.bsky.graph.list",
        "at://did:plc:test123/app.bsky.graph.list/",
        "at://did:plc:test123/app.bsky.graph.list/a/b",
        "at://bad_handle!/app.bsky.graph.list/list123",
        "at://localhost/app.bsky.graph.list/list123",
        "at://did:PLC:test/app.bsky.graph.list/list123",
        "at://did:plc:test:/app.bsky.graph.list/list123",
        "at://did:plc:test123/app.bsky.graph.list/..",
        "at://did:plc:test123/app.bsky.graph.list/has space",
        "at://did:plc:test123/not-an-nsid/list123",
    ],
)
def test_malformed_input_is_rejected(value):
    with pytest.raises(LocatorError) as exc_info:
        parse_list_locator(value)
    assert exc_info.value.code == ErrorCode.malformed_locator
    assert exc_info.value.message == "Invalid URI format"


def test_non_string_input_is_malformed():
    with pytest.raises(LocatorError) as exc_info:
        parse_list_locator(None)  # type: ignore[arg-type]
    assert exc_info.value.code == ErrorCode.malformed_locator


@pytest.mark.parametrize(
    "value",
    [
        "at://did:plc:test/app.bsky.feed.post/post123",
        "at://did:plc:test123/app.bsky.graph.listitem/item123",
        "at://user.bsky.social/app.bsky.graph.follow/abc",
    ],
)
def test_wrong_collection_is_distinguished_from_malformed(value):
    with pytest.raises(LocatorError) as exc_info:
        parse_list_locator(value)
    assert exc_info.value.code == ErrorCode.wrong_collection
    assert exc_info.value.message.startswith("Invalid collection in URI")


def test_parse_at_uri_accepts_member_collection():
    locator = parse_at_uri("at://did:plc:test123/app.bsky.graph.listitem/item123")
    assert locator.collection == "app.bsky.graph.listitem"
    assert locator.rkey == "item123"


def test_parsing_is_idempotent():
    uri = "at://did:plc:test123/app.bsky.graph.list/list123"
    assert parse_list_locator(uri) == parse_list_locator(str(parse_list_locator(uri)))


def test_web_link_is_rewritten_to_at_uri():
    raw = "  https://bsky.app/profile/nus.bsky.social/lists/3khbcfekugt2j \n"
    assert normalize_list_input(raw) == "at://nus.bsky.social/app.bsky.graph.list/3khbcfekugt2j"


def test_web_link_with_did_is_rewritten_to_at_uri():
    raw = "https://bsky.app/profile/did:plc:v2tssqq5tlnx4f5qvtpnlw5j/lists/3khbcfekugt2j"
    locator = parse_list_locator(normalize_list_input(raw))
    assert locator.authority == Did("did:plc:v2tssqq5tlnx4f5qvtpnlw5j")


def test_other_input_is_only_trimmed():
    assert normalize_list_input(" at://a.b/c.d.e/f ") == "at://a.b/c.d.e/f"
    assert normalize_list_input("https://example.com/profile/x/lists/y") == "https://example.com/profile/x/lists/y"


def test_web_url_builders():
    assert profile_web_url("user.bsky.social") == "https://bsky.app/profile/user.bsky.social"
    assert list_web_url("did:plc:abc", "list123") == "https://bsky.app/profile/did:plc:abc/lists/list123"
