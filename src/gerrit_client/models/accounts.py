"""Account entities, inputs and query options."""

from typing import List, Optional

from pydantic import Field

from ..query_options import QueryOptions
from .common import AccountInfo, GerritInput, GerritModel, Timestamp


class AccountInput(GerritInput):
    username: Optional[str] = None
    name: Optional[str] = None
    display_name: Optional[str] = None
    email: Optional[str] = None
    ssh_key: Optional[str] = None
    http_password: Optional[str] = None
    groups: Optional[List[str]] = None


class AccountDetailInfo(AccountInfo):
    registered_on: Optional[Timestamp] = None


class AccountNameInput(GerritInput):
    name: Optional[str] = None


class AccountStatusInput(GerritInput):
    status: Optional[str] = None


class UsernameInput(GerritInput):
    username: str


class DisplayNameInput(GerritInput):
    display_name: str


class HTTPPasswordInput(GerritInput):
    generate: Optional[bool] = None
    http_password: Optional[str] = None


class OAuthTokenInfo(GerritModel):
    username: Optional[str] = None
    resource_host: Optional[str] = None
    access_token: Optional[str] = None
    provider_id: Optional[str] = None
    expires_at: Optional[str] = None
    type: Optional[str] = None


class EmailInfo(GerritModel):
    email: Optional[str] = None
    preferred: Optional[bool] = None
    pending_confirmation: Optional[bool] = None


class EmailInput(GerritInput):
    email: Optional[str] = None
    preferred: Optional[bool] = None
    no_confirmation: Optional[bool] = None


class SSHKeyInfo(GerritModel):
    seq: Optional[int] = None
    ssh_public_key: Optional[str] = None
    encoded_key: Optional[str] = None
    algorithm: Optional[str] = None
    comment: Optional[str] = None
    valid: Optional[bool] = None


class GpgKeyInfo(GerritModel):
    id: Optional[str] = None
    fingerprint: Optional[str] = None
    user_ids: Optional[List[str]] = None
    key: Optional[str] = None
    status: Optional[str] = None
    problems: Optional[List[str]] = None


class GpgKeysInput(GerritInput):
    add: Optional[List[str]] = None
    delete: Optional[List[str]] = None


class CapabilityInfo(GerritModel):
    """Global capabilities granted to an account.

    Range capabilities such as ``queryLimit`` are kept as extra fields.
    """

    access_database: Optional[bool] = Field(default=None, alias="accessDatabase")
    administrate_server: Optional[bool] = Field(default=None, alias="administrateServer")
    create_account: Optional[bool] = Field(default=None, alias="createAccount")
    create_group: Optional[bool] = Field(default=None, alias="createGroup")
    create_project: Optional[bool] = Field(default=None, alias="createProject")
    email_reviewers: Optional[bool] = Field(default=None, alias="emailReviewers")
    flush_caches: Optional[bool] = Field(default=None, alias="flushCaches")
    kill_task: Optional[bool] = Field(default=None, alias="killTask")
    maintain_server: Optional[bool] = Field(default=None, alias="maintainServer")
    priority: Optional[str] = None
    run_gc: Optional[bool] = Field(default=None, alias="runGC")
    stream_events: Optional[bool] = Field(default=None, alias="streamEvents")
    view_all_accounts: Optional[bool] = Field(default=None, alias="viewAllAccounts")
    view_caches: Optional[bool] = Field(default=None, alias="viewCaches")
    view_connections: Optional[bool] = Field(default=None, alias="viewConnections")
    view_plugins: Optional[bool] = Field(default=None, alias="viewPlugins")
    view_queue: Optional[bool] = Field(default=None, alias="viewQueue")


class AvatarChangeURL(GerritModel):
    url: Optional[str] = None


class TopMenuItemInfo(GerritModel):
    url: Optional[str] = None
    name: Optional[str] = None
    target: Optional[str] = None
    id: Optional[str] = None


class PreferencesInfo(GerritModel):
    changes_per_page: Optional[int] = None
    theme: Optional[str] = None
    expand_inline_diffs: Optional[bool] = None
    download_scheme: Optional[str] = None
    date_format: Optional[str] = None
    time_format: Optional[str] = None
    relative_date_in_change_table: Optional[bool] = None
    diff_view: Optional[str] = None
    size_bar_in_change_table: Optional[bool] = None
    legacycid_in_change_table: Optional[bool] = None
    mute_common_path_prefixes: Optional[bool] = None
    signed_off_by: Optional[bool] = None
    email_strategy: Optional[str] = None
    email_format: Optional[str] = None
    default_base_for_merges: Optional[str] = None
    publish_comments_on_push: Optional[bool] = None
    work_in_progress_by_default: Optional[bool] = None
    my: Optional[List[TopMenuItemInfo]] = None
    change_table: Optional[List[str]] = None


class PreferencesInput(GerritInput):
    changes_per_page: Optional[int] = None
    theme: Optional[str] = None
    expand_inline_diffs: Optional[bool] = None
    download_scheme: Optional[str] = None
    date_format: Optional[str] = None
    time_format: Optional[str] = None
    relative_date_in_change_table: Optional[bool] = None
    diff_view: Optional[str] = None
    size_bar_in_change_table: Optional[bool] = None
    legacycid_in_change_table: Optional[bool] = None
    mute_common_path_prefixes: Optional[bool] = None
    signed_off_by: Optional[bool] = None
    email_strategy: Optional[str] = None
    email_format: Optional[str] = None
    default_base_for_merges: Optional[str] = None
    publish_comments_on_push: Optional[bool] = None
    work_in_progress_by_default: Optional[bool] = None
    my: Optional[List[TopMenuItemInfo]] = None
    change_table: Optional[List[str]] = None


class DiffPreferencesInfo(GerritModel):
    context: Optional[int] = None
    theme: Optional[str] = None
    expand_all_comments: Optional[bool] = None
    ignore_whitespace: Optional[str] = None
    intraline_difference: Optional[bool] = None
    line_length: Optional[int] = None
    manual_review: Optional[bool] = None
    retain_header: Optional[bool] = None
    show_line_endings: Optional[bool] = None
    show_tabs: Optional[bool] = None
    show_whitespace_errors: Optional[bool] = None
    skip_deleted: Optional[bool] = None
    skip_uncommented: Optional[bool] = None
    syntax_highlighting: Optional[bool] = None
    hide_top_menu: Optional[bool] = None
    auto_hide_diff_table_header: Optional[bool] = None
    hide_line_numbers: Optional[bool] = None
    tab_size: Optional[int] = None
    font_size: Optional[int] = None
    hide_empty_pane: Optional[bool] = None
    match_brackets: Optional[bool] = None
    line_wrapping: Optional[bool] = None


class DiffPreferencesInput(GerritInput):
    context: Optional[int] = None
    expand_all_comments: Optional[bool] = None
    ignore_whitespace: Optional[str] = None
    intraline_difference: Optional[bool] = None
    line_length: Optional[int] = None
    manual_review: Optional[bool] = None
    retain_header: Optional[bool] = None
    show_line_endings: Optional[bool] = None
    show_tabs: Optional[bool] = None
    show_whitespace_errors: Optional[bool] = None
    skip_deleted: Optional[bool] = None
    skip_uncommented: Optional[bool] = None
    syntax_highlighting: Optional[bool] = None
    hide_top_menu: Optional[bool] = None
    auto_hide_diff_table_header: Optional[bool] = None
    hide_line_numbers: Optional[bool] = None
    tab_size: Optional[int] = None
    font_size: Optional[int] = None
    line_wrapping: Optional[bool] = None


class EditPreferencesInfo(GerritModel):
    tab_size: Optional[int] = None
    line_length: Optional[int] = None
    indent_unit: Optional[int] = None
    cursor_blink_rate: Optional[int] = None
    hide_top_menu: Optional[bool] = None
    show_tabs: Optional[bool] = None
    show_whitespace_errors: Optional[bool] = None
    syntax_highlighting: Optional[bool] = None
    hide_line_numbers: Optional[bool] = None
    match_brackets: Optional[bool] = None
    line_wrapping: Optional[bool] = None
    auto_close_brackets: Optional[bool] = None


class EditPreferencesInput(GerritInput):
    tab_size: Optional[int] = None
    line_length: Optional[int] = None
    indent_unit: Optional[int] = None
    cursor_blink_rate: Optional[int] = None
    hide_top_menu: Optional[bool] = None
    show_tabs: Optional[bool] = None
    show_whitespace_errors: Optional[bool] = None
    syntax_highlighting: Optional[bool] = None
    hide_line_numbers: Optional[bool] = None
    match_brackets: Optional[bool] = None
    line_wrapping: Optional[bool] = None
    auto_close_brackets: Optional[bool] = None


class AccountExternalIdInfo(GerritModel):
    identity: Optional[str] = None
    email: Optional[str] = None
    trusted: Optional[bool] = None
    can_delete: Optional[bool] = None


class QueryAccountOptions(QueryOptions):
    """Options for ``accounts/`` queries."""

    query: Optional[str] = Field(default=None, alias="q")
    limit: Optional[int] = Field(default=None, alias="n")
    start: Optional[int] = Field(default=None, alias="S")
    additional_fields: Optional[List[str]] = Field(default=None, alias="o")


class CapabilityOptions(QueryOptions):
    filter: Optional[List[str]] = Field(default=None, alias="q")
