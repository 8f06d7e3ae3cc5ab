from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class XrpcModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ActorIdentity(XrpcModel):
    did: str
    handle: str = ""


class ListView(XrpcModel):
    uri: str = ""
    creator: ActorIdentity
    name: str | None = None
    description: str | None = None
    purpose: str | None = None
    list_item_count: int | None = Field(default=None, alias="listItemCount", ge=0)


class ListItemView(XrpcModel):
    uri: str


class ListPage(XrpcModel):
    list_view: ListView = Field(alias="list")
    items: list[ListItemView] = Field(default_factory=list)
    cursor: str | None = None


class RecordValue(XrpcModel):
    uri: str = ""
    cid: str | None = None
    value: dict = Field(default_factory=dict)

    @property
    def created_at(self) -> str | None:
        created_at = self.value.get("createdAt")
        return created_at if isinstance(created_at, str) and created_at else None


class XrpcError(Exception):
    def __init__(self, status_code: int | None, error: str, message: str = "") -> None:
        super().__init__(f"{error}: {message}" if message else error)
        self.status_code = status_code
        self.error = error
        self.message = message


class ListGateway(ABC):
    """Read-only access to the identity, list and record services."""

    @abstractmethod
    def resolve_handle(self, handle: str) -> ActorIdentity:
        """Return the DID and canonical handle for ``handle``."""

    @abstractmethod
    def get_list(self, list_uri: str, limit: int = 1) -> ListPage:
        """Return list metadata plus at most ``limit`` member items."""

    @abstractmethod
    def get_record(self, repo: str, collection: str, rkey: str) -> RecordValue:
        """Return a single repository record."""

    def close(self) -> None:
        return None
