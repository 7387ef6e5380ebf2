"""Server configuration entities.

Only the commonly inspected parts of ``ServerInfo`` are typed; the rest is
kept as extra fields.
"""

from typing import Dict, List, Optional

from pydantic import Field

from ..query_options import QueryOptions
from .common import GerritModel


class AuthInfo(GerritModel):
    auth_type: Optional[str] = None
    use_contributor_agreements: Optional[bool] = None
    editable_account_fields: Optional[List[str]] = None
    login_url: Optional[str] = None
    login_text: Optional[str] = None
    switch_account_url: Optional[str] = None
    register_url: Optional[str] = None
    register_text: Optional[str] = None
    edit_full_name_url: Optional[str] = None
    http_password_url: Optional[str] = None
    git_basic_auth_policy: Optional[str] = None


class DownloadSchemeInfo(GerritModel):
    url: Optional[str] = None
    is_auth_required: Optional[bool] = None
    is_auth_supported: Optional[bool] = None
    commands: Optional[Dict[str, str]] = None
    clone_commands: Optional[Dict[str, str]] = None


class DownloadInfo(GerritModel):
    schemes: Optional[Dict[str, DownloadSchemeInfo]] = None
    archives: Optional[List[str]] = None


class GerritInfo(GerritModel):
    all_projects: Optional[str] = None
    all_users: Optional[str] = None
    doc_search: Optional[bool] = None
    doc_url: Optional[str] = None
    edit_gpg_keys: Optional[bool] = None
    report_bug_url: Optional[str] = None


class ServerInfo(GerritModel):
    accounts: Optional[dict] = None
    auth: Optional[AuthInfo] = None
    change: Optional[dict] = None
    download: Optional[DownloadInfo] = None
    gerrit: Optional[GerritInfo] = None
    plugin: Optional[dict] = None
    sshd: Optional[dict] = None
    suggest: Optional[dict] = None
    user: Optional[dict] = None


class ServerCapabilityInfo(GerritModel):
    id: Optional[str] = None
    name: Optional[str] = None


class ListCapabilitiesOptions(QueryOptions):
    format: Optional[str] = Field(default=None, description="Response format, e.g. JSON")
