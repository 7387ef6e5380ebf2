"""Change, revision, review and edit entities."""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from ..query_options import QueryOptions
from .accounts import AccountInput
from .common import (
    AccountInfo,
    ActionInfo,
    CommitInfo,
    FetchInfo,
    FileInfo,
    GerritInput,
    GerritModel,
    GroupBaseInfo,
    NotifyInfo,
    ProblemInfo,
    Timestamp,
    WebLinkInfo,
)


class AttentionSetInfo(GerritModel):
    account: Optional[AccountInfo] = None
    last_update: Optional[Timestamp] = None
    reason: Optional[str] = None


class AttentionSetInput(GerritInput):
    reason: str
    user: Optional[str] = None
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None


class ApprovalInfo(AccountInfo):
    value: Optional[int] = None
    date: Optional[Timestamp] = None


class LabelInfo(GerritModel):
    optional: Optional[bool] = None
    approved: Optional[AccountInfo] = None
    rejected: Optional[AccountInfo] = None
    recommended: Optional[AccountInfo] = None
    disliked: Optional[AccountInfo] = None
    blocking: Optional[bool] = None
    value: Optional[int] = None
    default_value: Optional[int] = None
    all: Optional[List[ApprovalInfo]] = None
    values: Optional[Dict[str, str]] = None


class ChangeMessageInfo(GerritModel):
    id: Optional[str] = None
    author: Optional[AccountInfo] = None
    date: Optional[Timestamp] = None
    message: Optional[str] = None
    tag: Optional[str] = None
    revision_number: Optional[int] = Field(default=None, alias="_revision_number")


class ReviewerUpdateInfo(GerritModel):
    updated: Optional[Timestamp] = None
    updated_by: Optional[AccountInfo] = None
    reviewer: Optional[AccountInfo] = None
    state: Optional[str] = Field(default=None, description="REVIEWER, CC or REMOVED")


class ParentInfo(GerritModel):
    branch_name: Optional[str] = None
    commit_id: Optional[str] = None
    is_merged_in_target_branch: Optional[bool] = None
    change_id: Optional[str] = None
    change_number: Optional[int] = None
    patch_set_number: Optional[int] = None
    change_status: Optional[str] = None


class RevisionInfo(GerritModel):
    kind: Optional[str] = None
    number: Optional[int] = Field(default=None, alias="_number")
    created: Optional[Timestamp] = None
    uploader: Optional[AccountInfo] = None
    ref: Optional[str] = None
    fetch: Optional[Dict[str, FetchInfo]] = None
    commit: Optional[CommitInfo] = None
    files: Optional[Dict[str, FileInfo]] = None
    actions: Optional[Dict[str, ActionInfo]] = None
    reviewed: Optional[bool] = None
    message_with_footer: Optional[str] = Field(default=None, alias="messageWithFooter")
    parents_data: Optional[List[ParentInfo]] = None


class ChangeInfo(GerritModel):
    id: Optional[str] = Field(
        default=None, description="Triplet of project, branch and Change-Id"
    )
    url: Optional[str] = None
    project: Optional[str] = None
    branch: Optional[str] = None
    topic: Optional[str] = None
    attention_set: Optional[Dict[str, AttentionSetInfo]] = None
    assignee: Optional[AccountInfo] = None
    hashtags: Optional[List[str]] = None
    change_id: Optional[str] = None
    subject: Optional[str] = None
    status: Optional[str] = None
    created: Optional[Timestamp] = None
    updated: Optional[Timestamp] = None
    submitted: Optional[Timestamp] = None
    submitter: Optional[AccountInfo] = None
    starred: Optional[bool] = None
    reviewed: Optional[bool] = None
    submit_type: Optional[str] = None
    mergeable: Optional[bool] = None
    submittable: Optional[bool] = None
    insertions: Optional[int] = None
    deletions: Optional[int] = None
    total_comment_count: Optional[int] = None
    unresolved_comment_count: Optional[int] = None
    number: Optional[int] = Field(default=None, alias="_number")
    owner: Optional[AccountInfo] = None
    actions: Optional[Dict[str, ActionInfo]] = None
    labels: Optional[Dict[str, LabelInfo]] = None
    permitted_labels: Optional[Dict[str, List[str]]] = None
    removable_reviewers: Optional[List[AccountInfo]] = None
    reviewers: Optional[Dict[str, List[AccountInfo]]] = None
    pending_reviewers: Optional[Dict[str, List[AccountInfo]]] = None
    reviewer_updates: Optional[List[ReviewerUpdateInfo]] = None
    messages: Optional[List[ChangeMessageInfo]] = None
    current_revision: Optional[str] = None
    revisions: Optional[Dict[str, RevisionInfo]] = None
    more_changes: Optional[bool] = Field(default=None, alias="_more_changes")
    problems: Optional[List[ProblemInfo]] = None
    is_private: Optional[bool] = None
    work_in_progress: Optional[bool] = None
    has_review_started: Optional[bool] = None
    revert_of: Optional[int] = None
    submission_id: Optional[str] = None
    cherry_pick_of_change: Optional[int] = None
    cherry_pick_of_patch_set: Optional[int] = None
    contains_git_conflicts: Optional[bool] = None
    base_change: Optional[str] = None


class MergeInput(GerritInput):
    source: str
    source_branch: Optional[str] = None
    strategy: Optional[str] = None
    allow_conflicts: Optional[bool] = None


class ChangeInput(GerritInput):
    project: str
    branch: str
    subject: str
    topic: Optional[str] = None
    status: Optional[str] = None
    is_private: Optional[bool] = None
    work_in_progress: Optional[bool] = None
    base_change: Optional[str] = None
    base_commit: Optional[str] = None
    new_branch: Optional[bool] = None
    validation_options: Optional[Dict[str, Any]] = None
    merge: Optional[MergeInput] = None
    author: Optional[AccountInput] = None
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None


class AbandonInput(GerritInput):
    message: Optional[str] = None
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None


class RestoreInput(GerritInput):
    message: Optional[str] = None


class RevertInput(GerritInput):
    message: Optional[str] = None


class CommitMessageInput(GerritInput):
    message: str
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None


class WorkInProgressInput(GerritInput):
    message: Optional[str] = None


class ReadyForReviewInput(GerritInput):
    message: Optional[str] = None


class PrivateInput(GerritInput):
    message: Optional[str] = None


class TopicInput(GerritInput):
    topic: Optional[str] = None


class HashtagsInput(GerritInput):
    add: Optional[List[str]] = None
    remove: Optional[List[str]] = None


class RebaseInput(GerritInput):
    base: Optional[str] = None
    strategy: Optional[str] = None
    allow_conflicts: Optional[bool] = None
    on_behalf_of_uploader: Optional[bool] = None
    committer_email: Optional[str] = None
    validation_options: Optional[Dict[str, str]] = None


class MoveInput(GerritInput):
    destination_branch: str
    message: Optional[str] = None
    keep_all_votes: Optional[bool] = None


class SubmitInput(GerritInput):
    on_behalf_of: Optional[str] = None
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None
    wait_for_merge: Optional[bool] = None


class SubmitInfo(GerritModel):
    status: Optional[str] = None
    on_behalf_of: Optional[str] = None


class FixInput(GerritInput):
    delete_patch_set_if_commit_missing: Optional[bool] = None
    expect_merged_as: Optional[str] = None


class CherryPickInput(GerritInput):
    destination: str
    message: Optional[str] = None
    base: Optional[str] = None
    parent: Optional[int] = None
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None
    keep_reviewers: Optional[bool] = None
    allow_conflicts: Optional[bool] = None
    topic: Optional[str] = None
    allow_empty: Optional[bool] = None
    committer_email: Optional[str] = None
    validation_options: Optional[Dict[str, str]] = None


class DeleteChangeMessageInput(GerritInput):
    reason: Optional[str] = None


class SubmitRequirementInput(GerritInput):
    name: str
    submittability_expression: str
    description: Optional[str] = None
    applicability_expression: Optional[str] = None
    override_expression: Optional[str] = None
    allow_override_in_child_projects: Optional[bool] = None


class SubmitRequirementExpressionInfo(GerritModel):
    expression: Optional[str] = None
    fulfilled: Optional[bool] = None
    status: Optional[str] = None
    passing_atoms: Optional[List[str]] = None
    failing_atoms: Optional[List[str]] = None
    error_atoms: Optional[List[str]] = None


class SubmitRequirementResultInfo(GerritModel):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    is_legacy: Optional[bool] = None
    applicability_expression_result: Optional[SubmitRequirementExpressionInfo] = None
    submittability_expression_result: Optional[SubmitRequirementExpressionInfo] = None
    override_expression_result: Optional[SubmitRequirementExpressionInfo] = None


class SubmitRecord(GerritModel):
    status: Optional[str] = None
    ok: Optional[Dict[str, Dict[str, AccountInfo]]] = None
    reject: Optional[Dict[str, Dict[str, AccountInfo]]] = None
    need: Optional[Dict[str, Any]] = None
    may: Optional[Dict[str, Dict[str, AccountInfo]]] = None
    impossible: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None


class RuleInput(GerritInput):
    rule: str
    filters: Optional[str] = None


# Comments


class CommentRange(GerritModel):
    start_line: Optional[int] = None
    start_character: Optional[int] = None
    end_line: Optional[int] = None
    end_character: Optional[int] = None


class CommentInfo(GerritModel):
    patch_set: Optional[int] = None
    id: Optional[str] = None
    path: Optional[str] = None
    side: Optional[str] = None
    parent: Optional[int] = None
    line: Optional[int] = None
    range: Optional[CommentRange] = None
    in_reply_to: Optional[str] = None
    message: Optional[str] = None
    updated: Optional[Timestamp] = None
    author: Optional[AccountInfo] = None
    unresolved: Optional[bool] = None
    change_message_id: Optional[str] = None
    commit_id: Optional[str] = None


class CommentInput(GerritInput):
    id: Optional[str] = None
    path: Optional[str] = None
    side: Optional[str] = None
    line: Optional[int] = None
    range: Optional[CommentRange] = None
    in_reply_to: Optional[str] = None
    updated: Optional[Timestamp] = None
    message: Optional[str] = None
    unresolved: Optional[bool] = None


class DeleteCommentInput(GerritInput):
    reason: Optional[str] = None


class FixReplacementInfo(GerritModel):
    path: Optional[str] = None
    range: Optional[CommentRange] = None
    replacement: Optional[str] = None


class FixSuggestionInfo(GerritModel):
    fix_id: Optional[str] = None
    description: Optional[str] = None
    replacements: Optional[List[FixReplacementInfo]] = None


class RobotCommentInfo(CommentInfo):
    robot_id: Optional[str] = None
    robot_run_id: Optional[str] = None
    url: Optional[str] = None
    properties: Optional[Dict[str, str]] = None
    fix_suggestions: Optional[List[FixSuggestionInfo]] = None


class RobotCommentInput(CommentInput):
    robot_id: str
    robot_run_id: str
    url: Optional[str] = None
    properties: Optional[Dict[str, str]] = None
    fix_suggestions: Optional[List[FixSuggestionInfo]] = None


# Reviews and reviewers


class ReviewerInput(GerritInput):
    reviewer: str
    state: Optional[str] = None
    confirmed: Optional[bool] = None
    notify: Optional[str] = None


class ReviewerInfo(AccountInfo):
    approvals: Optional[Dict[str, str]] = None


class ReviewerResult(GerritModel):
    input: Optional[str] = None
    reviewers: Optional[List[ReviewerInfo]] = None
    ccs: Optional[List[AccountInfo]] = None
    removed: Optional[List[AccountInfo]] = None
    error: Optional[str] = None
    confirm: Optional[bool] = None


class SuggestedReviewerInfo(GerritModel):
    account: Optional[AccountInfo] = None
    group: Optional[GroupBaseInfo] = None


class DeleteVoteInput(GerritInput):
    label: Optional[str] = None
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None


class ReviewInput(GerritInput):
    message: Optional[str] = None
    tag: Optional[str] = None
    labels: Optional[Dict[str, int]] = None
    comments: Optional[Dict[str, List[CommentInput]]] = None
    robot_comments: Optional[Dict[str, List[RobotCommentInput]]] = None
    strict_labels: Optional[bool] = None
    drafts: Optional[str] = None
    notify: Optional[str] = None
    omit_duplicate_comments: Optional[bool] = None
    on_behalf_of: Optional[str] = None
    reviewers: Optional[List[ReviewerInput]] = None
    ready: Optional[bool] = None
    work_in_progress: Optional[bool] = None
    add_to_attention_set: Optional[List[AttentionSetInput]] = None
    remove_from_attention_set: Optional[List[AttentionSetInput]] = None
    ignore_automatic_attention_set_rules: Optional[bool] = None


class ReviewInfo(GerritModel):
    labels: Optional[Dict[str, int]] = None


class ReviewResult(ReviewInfo):
    reviewers: Optional[Dict[str, ReviewerResult]] = None
    ready: Optional[bool] = None
    error: Optional[str] = None
    change_info: Optional[ChangeInfo] = None


# Revisions


class RelatedChangeAndCommitInfo(GerritModel):
    project: Optional[str] = None
    change_id: Optional[str] = None
    commit: Optional[CommitInfo] = None
    change_number: Optional[int] = Field(default=None, alias="_change_number")
    revision_number: Optional[int] = Field(default=None, alias="_revision_number")
    current_revision_number: Optional[int] = Field(
        default=None, alias="_current_revision_number"
    )
    status: Optional[str] = None


class RelatedChangesInfo(GerritModel):
    changes: List[RelatedChangeAndCommitInfo] = Field(default_factory=list)


class DiffFileMetaInfo(GerritModel):
    name: Optional[str] = None
    content_type: Optional[str] = None
    lines: Optional[int] = None
    web_links: Optional[List[WebLinkInfo]] = None


class DiffWebLinkInfo(WebLinkInfo):
    show_on_side_by_side_diff_view: Optional[bool] = None
    show_on_unified_diff_view: Optional[bool] = None


class DiffContent(GerritModel):
    a: Optional[List[str]] = None
    b: Optional[List[str]] = None
    ab: Optional[List[str]] = None
    edit_a: Optional[List[Tuple[int, int]]] = Field(
        default=None, description="Intraline (offset, length) pairs on side A"
    )
    edit_b: Optional[List[Tuple[int, int]]] = None
    skip: Optional[int] = None
    common: Optional[bool] = None


class DiffInfo(GerritModel):
    meta_a: Optional[DiffFileMetaInfo] = None
    meta_b: Optional[DiffFileMetaInfo] = None
    change_type: Optional[str] = None
    intraline_status: Optional[str] = None
    diff_header: Optional[List[str]] = None
    content: Optional[List[DiffContent]] = None
    web_links: Optional[List[DiffWebLinkInfo]] = None
    binary: Optional[bool] = None


class RangeInfo(GerritModel):
    start: Optional[int] = None
    end: Optional[int] = None


class BlameInfo(GerritModel):
    author: Optional[str] = None
    id: Optional[str] = None
    time: Optional[int] = None
    commit_msg: Optional[str] = None
    ranges: Optional[List[RangeInfo]] = None


class DescriptionInput(GerritInput):
    description: str


# Change edits


class EditInfo(GerritModel):
    commit: Optional[CommitInfo] = None
    base_patch_set_number: Optional[int] = None
    base_revision: Optional[str] = None
    ref: Optional[str] = None
    fetch: Optional[Dict[str, FetchInfo]] = None
    files: Optional[Dict[str, FileInfo]] = None


class EditFileInfo(GerritModel):
    web_links: Optional[List[WebLinkInfo]] = None


class ChangeEditInput(GerritInput):
    restore_path: Optional[str] = None
    old_path: Optional[str] = None
    new_path: Optional[str] = None


class ChangeEditMessageInput(GerritInput):
    message: str


class PublishChangeEditInput(GerritInput):
    notify: Optional[str] = None
    notify_details: Optional[Dict[str, NotifyInfo]] = None


# Query options


class QueryChangeOptions(QueryOptions):
    """Options for ``changes/`` queries.

    Each entry in ``query`` runs as a separate query; the server then
    answers with one list per query.
    """

    query: Optional[List[str]] = Field(default=None, alias="q")
    limit: Optional[int] = Field(default=None, alias="n")
    start: Optional[int] = Field(default=None, alias="start")
    skip: Optional[int] = Field(default=None, alias="S")
    additional_fields: Optional[List[str]] = Field(default=None, alias="o")


class ChangeOptions(QueryOptions):
    additional_fields: Optional[List[str]] = Field(default=None, alias="o")


class ChangeEditDetailOptions(QueryOptions):
    list: Optional[bool] = None
    base: Optional[str] = None
    download_commands: Optional[bool] = Field(default=None, alias="download-commands")


class SuggestReviewerOptions(QueryOptions):
    query: Optional[str] = Field(default=None, alias="q")
    limit: Optional[int] = Field(default=None, alias="n")


class DiffOptions(QueryOptions):
    intraline: Optional[bool] = None
    base: Optional[str] = None
    parent: Optional[int] = None
    weblinks_only: Optional[bool] = Field(default=None, alias="weblinks-only")
    ignore_whitespace: Optional[str] = Field(
        default=None,
        alias="ignore-whitespace",
        description="IGNORE_NONE, IGNORE_TRAILING, IGNORE_LEADING_AND_TRAILING or IGNORE_ALL",
    )
    context: Optional[str] = None


class CommitOptions(QueryOptions):
    weblinks: Optional[bool] = Field(default=None, alias="links")


class MergeableOptions(QueryOptions):
    other_branches: Optional[bool] = Field(default=None, alias="other-branches")


class FilesOptions(QueryOptions):
    query: Optional[str] = Field(default=None, alias="q")
    base: Optional[str] = None
    parent: Optional[int] = None


class PatchOptions(QueryOptions):
    zip: Optional[bool] = None
    download: Optional[bool] = None
    path: Optional[str] = None


class ReviewedFilesOptions(FilesOptions):
    """Switches the file listing to the paths the caller marked as reviewed."""

    reviewed: bool = True
