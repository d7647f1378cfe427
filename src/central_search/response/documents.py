"""Document shapes returned in the response body.

The service uses short field keys (``g``, ``a``, ``v``, ``p``, ``ec``); the
models expose readable attribute names and keep the short keys as aliases so
dumping with ``by_alias=True`` reproduces the wire format.
"""

from datetime import UTC, datetime
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchDocument(Protocol):
    """Anything carrying the identifier used as the highlighting key."""

    id: str


def drop_null_fields(data: Any) -> Any:
    """Remove keys holding JSON null so the field defaults apply."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


def _millis_to_datetime(timestamp: int) -> datetime | None:
    if not timestamp:
        return None
    return datetime.fromtimestamp(timestamp / 1000, UTC)


class SearchDocumentModel(BaseModel):
    """Base for document shapes the response envelope can decode."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: str = ""

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        return drop_null_fields(data)


class Artifact(SearchDocumentModel):
    """Latest-version summary of one group/artifact pair (default core)."""

    # id is "<group>:<artifact>"
    group_id: str = Field(default="", alias="g")
    artifact_id: str = Field(default="", alias="a")
    latest_version: str = Field(default="", alias="latestVersion")
    repository_id: str = Field(default="", alias="repositoryId")
    packaging: str = Field(default="", alias="p")
    timestamp: int = 0  # epoch millis
    version_count: int = Field(default=0, alias="versionCount")
    text: list[str] = Field(default_factory=list)
    ec: list[str] = Field(default_factory=list)  # extension/classifier suffixes

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def published_at(self) -> datetime | None:
        """Timestamp of the latest version as an aware UTC datetime."""
        return _millis_to_datetime(self.timestamp)


class Version(SearchDocumentModel):
    """One released version of an artifact (``gav`` core)."""

    # id is "<group>:<artifact>:<version>"
    group_id: str = Field(default="", alias="g")
    artifact_id: str = Field(default="", alias="a")
    version: str = Field(default="", alias="v")
    packaging: str = Field(default="", alias="p")
    timestamp: int = 0
    ec: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @property
    def published_at(self) -> datetime | None:
        return _millis_to_datetime(self.timestamp)
