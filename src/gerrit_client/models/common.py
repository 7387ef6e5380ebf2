"""Shared entities used across the Gerrit REST API."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer
from typing_extensions import Annotated

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: Any) -> Any:
    """Parse Gerrit's ``yyyy-mm-dd hh:mm:ss.fffffffff`` UTC timestamps.

    Values in any other shape are handed on to pydantic's datetime parsing.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str):
        return value

    whole, _, fraction = value.strip().partition(".")
    try:
        parsed = datetime.strptime(whole, TIMESTAMP_FORMAT)
    except ValueError:
        return value

    # Nanosecond precision is truncated to microseconds
    microsecond = int((fraction + "000000")[:6]) if fraction.isdigit() else 0
    return parsed.replace(microsecond=microsecond, tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo:
        value = value.astimezone(timezone.utc)
    return f"{value.strftime(TIMESTAMP_FORMAT)}.{value.microsecond:06d}000"


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class GerritModel(BaseModel):
    """Base for entities returned by the server.

    Unknown fields are kept so that newer server versions round-trip.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_json(self, indent: Optional[int] = 2) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class GerritInput(BaseModel):
    """Base for request bodies. Unset fields are omitted from the JSON."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class WebLinkInfo(GerritModel):
    name: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None


class GitPersonInfo(GerritModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[Timestamp] = None
    tz: Optional[int] = Field(default=None, description="Offset from UTC in minutes")


class AvatarInfo(GerritModel):
    url: Optional[str] = None
    height: Optional[int] = None
    width: Optional[int] = None


class AccountInfo(GerritModel):
    account_id: Optional[int] = Field(default=None, alias="_account_id")
    name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    secondary_emails: Optional[List[str]] = None
    username: Optional[str] = None
    avatars: Optional[List[AvatarInfo]] = None
    more_accounts: Optional[bool] = Field(default=None, alias="_more_accounts")
    status: Optional[str] = None
    inactive: Optional[bool] = None
    tags: Optional[List[str]] = None


class GroupBaseInfo(GerritModel):
    id: Optional[str] = None
    name: Optional[str] = None


class ActionInfo(GerritModel):
    method: Optional[str] = None
    label: Optional[str] = None
    title: Optional[str] = None
    enabled: Optional[bool] = None


class FetchInfo(GerritModel):
    url: Optional[str] = None
    ref: Optional[str] = None
    commands: Optional[Dict[str, str]] = None


class FileInfo(GerritModel):
    status: Optional[str] = Field(
        default=None, description="A (added), D (deleted), R (renamed), C (copied), W (rewritten)"
    )
    binary: Optional[bool] = None
    old_path: Optional[str] = None
    lines_inserted: Optional[int] = None
    lines_deleted: Optional[int] = None
    size_delta: Optional[int] = None
    size: Optional[int] = None


class CommitInfo(GerritModel):
    commit: Optional[str] = None
    parents: Optional[List["CommitInfo"]] = None
    author: Optional[GitPersonInfo] = None
    committer: Optional[GitPersonInfo] = None
    subject: Optional[str] = None
    message: Optional[str] = None
    web_links: Optional[List[WebLinkInfo]] = None


class IncludedInInfo(GerritModel):
    branches: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    external: Optional[Dict[str, List[str]]] = None


class NotifyInfo(GerritInput):
    accounts: List[str] = Field(default_factory=list)


class ProblemInfo(GerritModel):
    message: Optional[str] = None
    status: Optional[str] = None
    outcome: Optional[str] = None


class MergeableInfo(GerritModel):
    submit_type: Optional[str] = None
    strategy: Optional[str] = None
    mergeable: Optional[bool] = None
    commit_merged: Optional[bool] = None
    content_merged: Optional[bool] = None
    conflicts: Optional[List[str]] = None
    mergeable_into: Optional[List[str]] = None
