from listfresh.services.connectors import ActorIdentity, ListGateway, ListPage, RecordValue, XrpcError


def build_list_page(
    *,
    did: str = "did:plc:test123",
    handle: str = "user.bsky.social",
    count: int | None = 5,
    items: list[str] | None = None,
    cursor: str | None = None,
    name: str | None = "Test List",
    description: str | None = "A test list",
    purpose: str | None = "app.bsky.graph.defs#curatelist",
) -> ListPage:
    payload = {
        "list": {
            "uri": f"at://{did}/app.bsky.graph.list/list123",
            "creator": {"did": did, "handle": handle},
            "name": name,
            "description": description,
            "purpose": purpose,
            "listItemCount": count,
        },
        "items": [{"uri": uri} for uri in (items or [])],
    }
    if cursor is not None:
        payload["cursor"] = cursor
    return ListPage.model_validate(payload)


def build_record(created_at: str | None = "2025-11-24T10:00:00.000Z") -> RecordValue:
    value = {"$type": "app.bsky.graph.listitem"}
    if created_at is not None:
        value["createdAt"] = created_at
    return RecordValue.model_validate({"uri": "at://did:plc:test123/app.bsky.graph.listitem/x", "value": value})


class FakeGateway(ListGateway):
    """In-memory gateway that records every call it receives."""

    def __init__(
        self,
        *,
        identity: ActorIdentity | XrpcError | None = None,
        page: ListPage | XrpcError | None = None,
        record: RecordValue | XrpcError | None = None,
    ) -> None:
        self.identity = identity
        self.page = page if page is not None else build_list_page(items=["at://did:plc:test123/app.bsky.graph.listitem/item123"])
        self.record = record if record is not None else build_record()
        self.calls: list[tuple] = []
        self.closed = False

    @staticmethod
    def _answer(value):
        if isinstance(value, XrpcError):
            raise value
        return value

    def resolve_handle(self, handle: str) -> ActorIdentity:
        self.calls.append(("resolve_handle", handle))
        if self.identity is None:
            raise XrpcError(400, "InvalidRequest", "Profile not found")
        return self._answer(self.identity)

    def get_list(self, list_uri: str, limit: int = 1) -> ListPage:
        self.calls.append(("get_list", list_uri, limit))
        return self._answer(self.page)

    def get_record(self, repo: str, collection: str, rkey: str) -> RecordValue:
        self.calls.append(("get_record", repo, collection, rkey))
        return self._answer(self.record)

    def close(self) -> None:
        self.closed = True

    def methods_called(self) -> list[str]:
        return [call[0] for call in self.calls]
