from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ListInfoRequest(BaseModel):
    uri: str | None = None


class ListInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    purpose: str = ""
    creator_did: str = Field(alias="creatorDid")
    creator_handle: str = Field(default="", alias="creatorHandle")
    list_item_count: int = Field(default=0, ge=0, alias="listItemCount")
    date_last_added: str | None = Field(default=None, alias="dateLastAdded")
    rkey: str


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
