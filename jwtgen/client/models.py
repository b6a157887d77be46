from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CoordinatorDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ServerInfo(_CoordinatorDocument):
    environment: str
    node_version: dict[str, Any] | None = Field(default=None, alias="nodeVersion")
    coordinator: bool = False
    starting: bool = False
    uptime: str | None = None


class Column(_CoordinatorDocument):
    name: str
    type: str


class QueryErrorInfo(_CoordinatorDocument):
    message: str | None = None
    error_code: int | None = Field(default=None, alias="errorCode")
    error_name: str | None = Field(default=None, alias="errorName")
    error_type: str | None = Field(default=None, alias="errorType")


class QueryResults(_CoordinatorDocument):
    id: str
    info_uri: str | None = Field(default=None, alias="infoUri")
    partial_cancel_uri: str | None = Field(default=None, alias="partialCancelUri")
    next_uri: str | None = Field(default=None, alias="nextUri")
    columns: list[Column] | None = None
    data: list[list[Any]] | None = None
    stats: dict[str, Any] | None = None
    error: QueryErrorInfo | None = None
