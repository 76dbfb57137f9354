# -*- coding: utf-8 -*-
"""
Post editor / list state machine.

States::

    idle ──start_edit(id)──▶ editing(id) ──cancel_edit / successful update──▶ idle
    editing(id) ──start_edit(id')──▶ editing(id')   (last Edit wins)

Every mutation is followed by a full reload of the list; the displayed list is
never patched locally. Failures never raise: they are converted into a
notification and a failed ``OperationResult``.
"""
import logging
from typing import List, Optional

from app.common.errors import OperationError, to_operation_error
from app.common.notifications import Notifier
from app.common.schemas import OperationResult
from app.domains.auth.session import SessionStore
from app.domains.blog.keywords import KeywordSuggestionClient, build_blog_content
from app.domains.blog.repository import BlogPostRepository
from app.domains.blog.schemas import (
    BlogPost,
    BlogPostDraft,
    BlogPostDraftUpdate,
    DraftTarget,
    EditorSnapshot,
    EditorState,
    SuggestKeywordsInput,
)
from app.domains.blog.storage import BlogImageStorage

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in all fields."
NOT_SIGNED_IN_MESSAGE = "You must be signed in to manage blog posts."
NO_EDITING_TARGET_MESSAGE = "No blog post is being edited."


class PostEditor:
    """ブログ記事エディタ"""

    def __init__(
        self,
        repository: BlogPostRepository,
        storage: BlogImageStorage,
        keyword_client: KeywordSuggestionClient,
        sessions: SessionStore,
        notifier: Notifier,
    ):
        self._repository = repository
        self._storage = storage
        self._keyword_client = keyword_client
        self._sessions = sessions
        self._notifier = notifier

        self.posts: List[BlogPost] = []
        self.new_draft = BlogPostDraft()
        self.edit_draft = BlogPostDraft()
        self.editing_id: Optional[str] = None
        self.keywords: List[str] = []

    # ------------------------------------------------------------------
    # 状態
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditorState:
        return EditorState.EDITING if self.editing_id is not None else EditorState.IDLE

    def snapshot(self) -> EditorSnapshot:
        return EditorSnapshot(
            state=self.state,
            editing_id=self.editing_id,
            posts=list(self.posts),
            new_draft=self.new_draft.model_copy(),
            edit_draft=self.edit_draft.model_copy(),
            keywords=list(self.keywords),
        )

    def draft_for(self, target: DraftTarget) -> BlogPostDraft:
        return self.edit_draft if target == DraftTarget.EDIT else self.new_draft

    def _fail(self, title: str, exc: BaseException) -> OperationResult:
        error = to_operation_error(exc)
        self._notifier.error(title, error)
        return OperationResult.failure(error)

    def _require_user_id(self) -> str:
        user_id = self._sessions.user_id
        if not user_id:
            raise OperationError.validation(NOT_SIGNED_IN_MESSAGE)
        return user_id

    @staticmethod
    def _require_complete(draft: BlogPostDraft) -> None:
        missing = draft.missing_fields()
        if missing:
            raise OperationError.validation(MISSING_FIELDS_MESSAGE, missing=missing)

    def _exit_edit_mode(self) -> None:
        self.editing_id = None
        self.edit_draft = BlogPostDraft()

    # ------------------------------------------------------------------
    # 下書き編集
    # ------------------------------------------------------------------

    def update_draft(self, target: DraftTarget, changes: BlogPostDraftUpdate) -> OperationResult:
        """下書きフィールドを変更する（状態遷移なし）"""
        if target == DraftTarget.EDIT and self.editing_id is None:
            return self._fail("Cannot edit draft", OperationError.validation(NO_EDITING_TARGET_MESSAGE))

        draft = self.draft_for(target)
        updated = draft.model_copy(update=changes.model_dump(exclude_none=True))
        if target == DraftTarget.EDIT:
            self.edit_draft = updated
        else:
            self.new_draft = updated
        return OperationResult.success()

    # ------------------------------------------------------------------
    # 一覧・作成・更新・削除
    # ------------------------------------------------------------------

    async def load_posts(self) -> OperationResult:
        """一覧を再取得する。失敗時は表示中の一覧を維持"""
        try:
            posts = await self._repository.list_posts()
        except Exception as e:
            return self._fail("Error loading blog posts", e)

        self.posts = posts
        return OperationResult.success()

    async def create_post(self) -> OperationResult:
        try:
            self._require_complete(self.new_draft)
            user_id = self._require_user_id()
            await self._repository.create_post(self.new_draft, user_id)
        except Exception as e:
            # 下書きは残して再試行できるようにする
            return self._fail("Error creating blog post", e)

        self.new_draft = BlogPostDraft()
        self._notifier.notify("Blog post created!")
        return await self.load_posts()

    def start_edit(self, post_id: str) -> OperationResult:
        """編集モードに入る。編集中の別記事があれば上書きする"""
        post = next((p for p in self.posts if p.id == post_id), None)
        if post is None:
            return self._fail(
                "Cannot edit blog post",
                OperationError.validation(f"Blog post {post_id} is not in the list.", post_id=post_id),
            )

        self.editing_id = post.id
        self.edit_draft = BlogPostDraft.from_post(post)
        return OperationResult.success()

    def cancel_edit(self) -> OperationResult:
        self._exit_edit_mode()
        return OperationResult.success()

    async def update_post(self) -> OperationResult:
        try:
            self._require_complete(self.edit_draft)
            self._require_user_id()
            if self.editing_id is None:
                raise OperationError.validation(NO_EDITING_TARGET_MESSAGE)
            await self._repository.update_post(self.editing_id, self.edit_draft)
        except Exception as e:
            # 編集モードは維持
            return self._fail("Error updating blog post", e)

        self._exit_edit_mode()
        self._notifier.notify("Blog post updated!")
        return await self.load_posts()

    async def delete_post(self, post_id: str) -> OperationResult:
        try:
            await self._repository.delete_post(post_id)
        except Exception as e:
            return self._fail("Error deleting blog post", e)

        self._notifier.notify("Blog post deleted!")
        return await self.load_posts()

    # ------------------------------------------------------------------
    # 画像・キーワード
    # ------------------------------------------------------------------

    async def upload_image(
        self,
        target: DraftTarget,
        filename: Optional[str],
        data: Optional[bytes],
        content_type: Optional[str] = None,
    ) -> OperationResult:
        """画像をアップロードし、対象の下書きのimageに公開URLを設定する"""
        if target == DraftTarget.EDIT and self.editing_id is None:
            return self._fail("Error uploading image", OperationError.validation(NO_EDITING_TARGET_MESSAGE))

        draft = self.draft_for(target)
        try:
            url = await self._storage.upload(filename, data, title=draft.title, content_type=content_type)
        except Exception as e:
            return self._fail("Error uploading image", e)

        # 反映先はアップロード完了時点の下書き
        applied = self.update_draft(target, BlogPostDraftUpdate(image=url))
        if not applied.ok:
            return applied
        self._notifier.notify("Image uploaded!", url)
        return OperationResult.success()

    async def suggest_keywords(self, target: DraftTarget = DraftTarget.NEW) -> OperationResult:
        """キーワードを提案し、表示中のリストを丸ごと置き換える"""
        draft = self.draft_for(target)
        try:
            request = SuggestKeywordsInput(blog_content=build_blog_content(draft.title, draft.content))
            result = await self._keyword_client.suggest_keywords(request)
        except Exception as e:
            return self._fail("Error suggesting keywords", e)

        self.keywords = list(result.keywords)
        self._notifier.notify("Keywords suggested!", "Check the keywords section below.")
        return OperationResult.success()
