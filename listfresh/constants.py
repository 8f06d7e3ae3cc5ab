LIST_COLLECTION = "app.bsky.graph.list"
LIST_ITEM_COLLECTION = "app.bsky.graph.listitem"

AT_URI_SCHEME = "at://"
WEB_APP_ORIGIN = "https://bsky.app"

LIST_INFO_PATH = "/api/list-info"

MAX_HANDLE_LENGTH = 253
MAX_DID_LENGTH = 2048
MAX_RKEY_LENGTH = 512

JSON_CONTENT_TYPE = "application/json; charset=utf-8"

API_RESPONSE_HEADERS = {
    "Cache-Control": "private, no-cache",
}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
}

INVALID_URI_MESSAGE = "Invalid URI format"
INVALID_COLLECTION_MESSAGE = "Invalid collection in URI"

MISSING_URI_MESSAGE = "Missing uri parameter"
LIST_NOT_FOUND_MESSAGE = "List not found"
FETCH_FAILED_MESSAGE = "Failed to fetch list information"

UPSTREAM_LIST_NOT_FOUND_MARKER = "List not found"
