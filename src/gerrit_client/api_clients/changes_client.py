"""Change endpoints: changes, revisions, reviewers, comments and edits."""

import logging
from typing import Dict, List, Optional, Union

from ..destinations import Writer
from ..models.common import AccountInfo, ActionInfo, CommitInfo, FileInfo, IncludedInInfo, MergeableInfo
from ..models.changes import (
    AbandonInput,
    AttentionSetInfo,
    AttentionSetInput,
    BlameInfo,
    ChangeEditDetailOptions,
    ChangeEditInput,
    ChangeEditMessageInput,
    ChangeInfo,
    ChangeInput,
    ChangeMessageInfo,
    ChangeOptions,
    CherryPickInput,
    CommentInfo,
    CommentInput,
    CommitMessageInput,
    CommitOptions,
    DeleteChangeMessageInput,
    DescriptionInput,
    DiffInfo,
    DiffOptions,
    EditFileInfo,
    EditInfo,
    FilesOptions,
    FixInput,
    HashtagsInput,
    MergeableOptions,
    MoveInput,
    PatchOptions,
    PrivateInput,
    PublishChangeEditInput,
    QueryChangeOptions,
    ReadyForReviewInput,
    RebaseInput,
    RelatedChangesInfo,
    RestoreInput,
    ReviewedFilesOptions,
    ReviewerInfo,
    ReviewerInput,
    ReviewerResult,
    ReviewInput,
    ReviewResult,
    RevertInput,
    RobotCommentInfo,
    RuleInput,
    SubmitInput,
    SubmitRecord,
    SubmitRequirementInput,
    SubmitRequirementResultInfo,
    SuggestedReviewerInfo,
    SuggestReviewerOptions,
    TopicInput,
    WorkInProgressInput,
)
from .base_client import BaseRESTClient
from .resource import PendingResource, Resource, escape

logger = logging.getLogger(__name__)

CommentMap = Dict[str, List[CommentInfo]]


class Revision(Resource[CommitInfo]):
    """One patch set of a change.

    The identifier is a commit SHA-1, a patch set number or ``current``.
    """

    collection = "revisions"
    info_type = CommitInfo

    async def refresh(self, options: Optional[CommitOptions] = None) -> "Revision":
        return self.with_info(await self.get_commit(options))

    async def get_commit(self, options: Optional[CommitOptions] = None) -> CommitInfo:
        return await self.client.request_model(
            "GET", self.endpoint("commit"), CommitInfo, options
        )

    async def get_description(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("description"))

    async def set_description(self, description_input: DescriptionInput) -> Optional[str]:
        return await self.client.request_text(
            "PUT", self.endpoint("description"), description_input
        )

    async def get_merge_list(self) -> List[CommitInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("mergelist"), List[CommitInfo]
        )

    async def get_actions(self) -> Dict[str, ActionInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("actions"), Dict[str, ActionInfo]
        )

    async def get_review(self) -> ChangeInfo:
        return await self.client.request_model("GET", self.endpoint("review"), ChangeInfo)

    async def set_review(self, review_input: ReviewInput) -> ReviewResult:
        """Post votes, comments and a message on the revision."""
        return await self.client.request_model(
            "POST", self.endpoint("review"), ReviewResult, review_input
        )

    async def get_related_changes(self) -> RelatedChangesInfo:
        return await self.client.request_model(
            "GET", self.endpoint("related"), RelatedChangesInfo
        )

    async def rebase(self, rebase_input: Optional[RebaseInput] = None) -> ChangeInfo:
        return await self.client.request_model(
            "POST", self.endpoint("rebase"), ChangeInfo, rebase_input
        )

    async def submit(self) -> ChangeInfo:
        return await self.client.request_model("POST", self.endpoint("submit"), ChangeInfo)

    async def get_patch(self, writer: Writer, options: Optional[PatchOptions] = None) -> int:
        """Stream the formatted patch into ``writer``.

        The server answers with base64 text, or with a zip archive when
        ``options.zip`` is set. The bytes are copied unchanged.

        Returns:
            Number of bytes written
        """
        return await self.client.request_bytes(
            "GET", self.endpoint("patch"), writer, options
        )

    async def get_mergeable(
        self, options: Optional[MergeableOptions] = None
    ) -> MergeableInfo:
        return await self.client.request_model(
            "GET", self.endpoint("mergeable"), MergeableInfo, options
        )

    async def get_submit_type(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("submit_type"))

    async def test_submit_type(self, rule_input: RuleInput) -> Optional[str]:
        return await self.client.request_text(
            "POST", self.endpoint("test.submit_type"), rule_input
        )

    async def test_submit_rule(self, rule_input: RuleInput) -> List[SubmitRecord]:
        return await self.client.request_model(
            "POST", self.endpoint("test.submit_rule"), List[SubmitRecord], rule_input
        )

    # Draft comments

    async def list_drafts(self) -> CommentMap:
        return await self.client.request_model("GET", self.endpoint("drafts/"), CommentMap)

    async def create_draft(self, comment_input: CommentInput) -> CommentInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("drafts"), CommentInfo, comment_input
        )

    async def get_draft(self, draft_id: str) -> CommentInfo:
        return await self.client.request_model(
            "GET", self.endpoint("drafts", escape(draft_id)), CommentInfo
        )

    async def update_draft(self, draft_id: str, comment_input: CommentInput) -> CommentInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("drafts", escape(draft_id)), CommentInfo, comment_input
        )

    async def delete_draft(self, draft_id: str) -> None:
        await self.client.request_empty("DELETE", self.endpoint("drafts", escape(draft_id)))

    # Published comments

    async def list_comments(self) -> CommentMap:
        return await self.client.request_model(
            "GET", self.endpoint("comments/"), CommentMap
        )

    async def get_comment(self, comment_id: str) -> CommentInfo:
        return await self.client.request_model(
            "GET", self.endpoint("comments", escape(comment_id)), CommentInfo
        )

    async def delete_comment(self, comment_id: str) -> None:
        await self.client.request_empty(
            "DELETE", self.endpoint("comments", escape(comment_id))
        )

    async def list_robot_comments(self) -> Dict[str, List[RobotCommentInfo]]:
        return await self.client.request_model(
            "GET", self.endpoint("robotcomments/"), Dict[str, List[RobotCommentInfo]]
        )

    async def get_robot_comment(self, comment_id: str) -> RobotCommentInfo:
        return await self.client.request_model(
            "GET", self.endpoint("robotcomments", escape(comment_id)), RobotCommentInfo
        )

    # Files

    async def list_files(self, options: Optional[FilesOptions] = None) -> Dict[str, FileInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("files/"), Dict[str, FileInfo], options
        )

    async def list_reviewed_files(self, options: Optional[FilesOptions] = None) -> List[str]:
        """List the paths the caller has marked as reviewed."""
        reviewed = ReviewedFilesOptions(
            **(options.model_dump(exclude_none=True) if options else {})
        )
        return await self.client.request_model(
            "GET", self.endpoint("files/"), List[str], reviewed
        )

    def _file(self, file_path: str, *segments: str) -> str:
        return self.endpoint("files", escape(file_path), *segments)

    async def get_file_content(self, file_path: str) -> Optional[str]:
        """Return the file content as base64 text."""
        return await self.client.request_text("GET", self._file(file_path, "content"))

    async def get_file_content_type(self, file_path: str) -> Optional[str]:
        """Return the real content type of a file without fetching it."""
        response = await self.client.request_empty("HEAD", self._file(file_path, "content"))
        return response.headers.get("X-FYI-Content-Type") or response.headers.get(
            "Content-Type"
        )

    async def download_file(self, file_path: str, writer: Writer) -> int:
        return await self.client.request_bytes(
            "GET", self._file(file_path, "download"), writer
        )

    async def get_file_diff(
        self, file_path: str, options: Optional[DiffOptions] = None
    ) -> DiffInfo:
        return await self.client.request_model(
            "GET", self._file(file_path, "diff"), DiffInfo, options
        )

    async def get_file_blame(self, file_path: str) -> List[BlameInfo]:
        return await self.client.request_model(
            "GET", self._file(file_path, "blame"), List[BlameInfo]
        )

    async def set_file_reviewed(self, file_path: str) -> None:
        await self.client.request_empty("PUT", self._file(file_path, "reviewed"))

    async def delete_file_reviewed(self, file_path: str) -> None:
        await self.client.request_empty("DELETE", self._file(file_path, "reviewed"))

    async def cherry_pick(self, cherry_pick_input: CherryPickInput) -> ChangeInfo:
        return await self.client.request_model(
            "POST", self.endpoint("cherrypick"), ChangeInfo, cherry_pick_input
        )


class Change(Resource[ChangeInfo]):
    """Handle for one change.

    The identifier may be the change number, the Change-Id or the
    ``project~branch~Change-Id`` triplet.
    """

    collection = "changes"
    info_type = ChangeInfo

    def revision(self, revision_id: Union[int, str] = "current") -> Revision:
        return Revision(self.client, revision_id, parent=self)

    async def get_detail(self, options: Optional[ChangeOptions] = None) -> ChangeInfo:
        return await self.client.request_model(
            "GET", self.endpoint("detail"), ChangeInfo, options
        )

    async def delete(self) -> None:
        await self.client.request_empty("DELETE", self.path)

    async def set_commit_message(self, message_input: CommitMessageInput) -> None:
        await self.client.request_empty("PUT", self.endpoint("message"), message_input)

    async def set_ready_for_review(
        self, ready_input: Optional[ReadyForReviewInput] = None
    ) -> None:
        await self.client.request_empty("POST", self.endpoint("ready"), ready_input)

    async def set_work_in_progress(
        self, wip_input: Optional[WorkInProgressInput] = None
    ) -> None:
        await self.client.request_empty("POST", self.endpoint("wip"), wip_input)

    # Topic

    async def get_topic(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("topic"))

    async def set_topic(self, topic_input: TopicInput) -> Optional[str]:
        """Set the topic. Returns None when the topic was removed."""
        return await self.client.request_text("PUT", self.endpoint("topic"), topic_input)

    async def delete_topic(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("topic"))

    # State transitions, each answering with the updated change

    async def _operate(self, action: str, payload=None) -> ChangeInfo:
        return await self.client.request_model(
            "POST", self.endpoint(action), ChangeInfo, payload
        )

    async def abandon(self, abandon_input: Optional[AbandonInput] = None) -> ChangeInfo:
        return await self._operate("abandon", abandon_input)

    async def restore(self, restore_input: Optional[RestoreInput] = None) -> ChangeInfo:
        return await self._operate("restore", restore_input)

    async def rebase(self, rebase_input: Optional[RebaseInput] = None) -> ChangeInfo:
        return await self._operate("rebase", rebase_input)

    async def move(self, move_input: MoveInput) -> ChangeInfo:
        return await self._operate("move", move_input)

    async def revert(self, revert_input: Optional[RevertInput] = None) -> ChangeInfo:
        return await self._operate("revert", revert_input)

    async def submit(self, submit_input: Optional[SubmitInput] = None) -> ChangeInfo:
        return await self._operate("submit", submit_input)

    async def fix(self, fix_input: Optional[FixInput] = None) -> ChangeInfo:
        """Run consistency checks and fix any problems found."""
        return await self._operate("check", fix_input)

    async def check(self) -> ChangeInfo:
        return await self.client.request_model("GET", self.endpoint("check"), ChangeInfo)

    async def mark_private(self, private_input: Optional[PrivateInput] = None) -> None:
        await self.client.request_empty("POST", self.endpoint("private"), private_input)

    async def unmark_private(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("private"))

    async def get_submitted_together(self) -> List[ChangeInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("submitted_together"), List[ChangeInfo]
        )

    async def get_included_in(self) -> IncludedInInfo:
        return await self.client.request_model("GET", self.endpoint("in"), IncludedInInfo)

    async def list_comments(self) -> CommentMap:
        return await self.client.request_model("GET", self.endpoint("comments"), CommentMap)

    async def list_drafts(self) -> CommentMap:
        return await self.client.request_model("GET", self.endpoint("drafts"), CommentMap)

    async def index(self) -> None:
        await self.client.request_empty("POST", self.endpoint("index"))

    # Hashtags

    async def get_hashtags(self) -> List[str]:
        return await self.client.request_model("GET", self.endpoint("hashtags"), List[str])

    async def set_hashtags(self, hashtags_input: HashtagsInput) -> List[str]:
        return await self.client.request_model(
            "POST", self.endpoint("hashtags"), List[str], hashtags_input
        )

    # Messages

    async def list_messages(self) -> List[ChangeMessageInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("messages"), List[ChangeMessageInfo]
        )

    async def get_message(self, message_id: str) -> ChangeMessageInfo:
        return await self.client.request_model(
            "GET", self.endpoint("messages", escape(message_id)), ChangeMessageInfo
        )

    async def delete_message(
        self, message_id: str, delete_input: Optional[DeleteChangeMessageInput] = None
    ) -> ChangeMessageInfo:
        """Replace a change message with a deletion notice."""
        return await self.client.request_model(
            "POST",
            self.endpoint("messages", escape(message_id), "delete"),
            ChangeMessageInfo,
            delete_input,
        )

    async def check_submit_requirement(
        self, requirement_input: SubmitRequirementInput
    ) -> SubmitRequirementResultInfo:
        return await self.client.request_model(
            "POST",
            self.endpoint("check.submit_requirement"),
            SubmitRequirementResultInfo,
            requirement_input,
        )

    # Attention set

    async def get_attention_set(self) -> List[AttentionSetInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("attention"), List[AttentionSetInfo]
        )

    async def add_attention(self, attention_input: AttentionSetInput) -> AccountInfo:
        return await self.client.request_model(
            "POST", self.endpoint("attention"), AccountInfo, attention_input
        )

    async def remove_attention(
        self, account_id: Union[int, str], attention_input: AttentionSetInput
    ) -> None:
        await self.client.request_empty(
            "POST",
            self.endpoint("attention", escape(account_id), "delete"),
            attention_input,
        )

    # Change edit

    async def get_edit(
        self, options: Optional[ChangeEditDetailOptions] = None
    ) -> Optional[EditInfo]:
        """Return the pending change edit, or None if there is none."""
        return await self.client.request_model(
            "GET", self.endpoint("edit"), Optional[EditInfo], options
        )

    async def put_edit_file(self, file_path: str, content: str) -> None:
        await self.client.request_empty("PUT", self.endpoint("edit", escape(file_path)), content)

    async def get_edit_file(self, file_path: str) -> Optional[str]:
        """Return the base64 content of a file in the change edit."""
        return await self.client.request_text("GET", self.endpoint("edit", escape(file_path)))

    async def get_edit_file_meta(self, file_path: str) -> EditFileInfo:
        return await self.client.request_model(
            "GET", self.endpoint("edit", escape(file_path), "meta"), EditFileInfo
        )

    async def delete_edit_file(self, file_path: str) -> None:
        await self.client.request_empty("DELETE", self.endpoint("edit", escape(file_path)))

    async def restore_edit_file(self, restore_path: str) -> None:
        await self.client.request_empty(
            "POST", self.endpoint("edit"), ChangeEditInput(restore_path=restore_path)
        )

    async def rename_edit_file(self, old_path: str, new_path: str) -> None:
        await self.client.request_empty(
            "POST",
            self.endpoint("edit"),
            ChangeEditInput(old_path=old_path, new_path=new_path),
        )

    async def get_edit_message(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("edit:message"))

    async def set_edit_message(self, message_input: ChangeEditMessageInput) -> None:
        await self.client.request_empty("PUT", self.endpoint("edit:message"), message_input)

    async def publish_edit(
        self, publish_input: Optional[PublishChangeEditInput] = None
    ) -> None:
        await self.client.request_empty("POST", self.endpoint("edit:publish"), publish_input)

    async def rebase_edit(self) -> None:
        await self.client.request_empty("POST", self.endpoint("edit:rebase"))

    async def delete_edit(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("edit"))

    # Reviewers

    async def list_reviewers(self) -> List[ReviewerInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("reviewers/"), List[ReviewerInfo]
        )

    async def suggest_reviewers(
        self, options: Optional[SuggestReviewerOptions] = None
    ) -> List[SuggestedReviewerInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("suggest_reviewers"), List[SuggestedReviewerInfo], options
        )

    async def get_reviewer(self, account_id: Union[int, str]) -> List[ReviewerInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("reviewers", escape(account_id)), List[ReviewerInfo]
        )

    async def add_reviewer(self, reviewer_input: ReviewerInput) -> ReviewerResult:
        return await self.client.request_model(
            "POST", self.endpoint("reviewers"), ReviewerResult, reviewer_input
        )

    async def delete_reviewer(self, account_id: Union[int, str]) -> None:
        await self.client.request_empty(
            "DELETE", self.endpoint("reviewers", escape(account_id))
        )

    async def list_votes(self, account_id: Union[int, str]) -> Dict[str, int]:
        return await self.client.request_model(
            "GET",
            self.endpoint("reviewers", escape(account_id), "votes/"),
            Dict[str, int],
        )

    async def delete_vote(self, account_id: Union[int, str], label: str) -> None:
        await self.client.request_empty(
            "DELETE", self.endpoint("reviewers", escape(account_id), "votes", escape(label))
        )


class ChangesClient:
    """Entry point for ``changes/`` endpoints."""

    def __init__(self, client: BaseRESTClient):
        self.client = client

    async def query(
        self, options: Optional[QueryChangeOptions] = None
    ) -> Union[List[ChangeInfo], List[List[ChangeInfo]]]:
        """Query changes.

        Args:
            options: Search terms, paging and additional fields

        Returns:
            A list of changes, or one list per query when more than one
            query string is given
        """
        if options is not None and options.query and len(options.query) > 1:
            result_type = List[List[ChangeInfo]]
        else:
            result_type = List[ChangeInfo]
        return await self.client.request_model("GET", "changes/", result_type, options)

    def change(self, change_id: Union[int, str]) -> Change:
        return Change(self.client, change_id)

    async def get(self, change_id: Union[int, str], *additional_fields: str) -> Change:
        """Fetch a change, optionally with additional fields such as ``LABELS``."""
        options = ChangeOptions(additional_fields=list(additional_fields) or None)
        return await Change(self.client, change_id).refresh(options)

    async def create(self, change_input: ChangeInput) -> Change:
        """Create a change and bind the handle to the server-assigned id."""
        pending = PendingResource(self.client, Change)
        info = await self.client.request_model("POST", pending.path, ChangeInfo, change_input)
        logger.info(f"Created change {info.id}")
        return pending.bind(info.id, info)

    async def delete(self, change_id: Union[int, str]) -> None:
        await Change(self.client, change_id).delete()
