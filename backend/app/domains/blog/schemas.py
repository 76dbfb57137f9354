# -*- coding: utf-8 -*-
"""
Blog Domain - Pydantic Schemas

ブログ記事・下書き・キーワード提案のスキーマ定義
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =====================================================
# ブログ記事
# =====================================================

class BlogPost(BaseModel):
    """blog_postsテーブルの1行"""
    id: str
    image: str = ""
    title: str
    content: str
    user_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def _stringify_ids(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("image", mode="before")
    @classmethod
    def _empty_image(cls, value):
        return value or ""


REQUIRED_DRAFT_FIELDS = ("image", "title", "content")


class BlogPostDraft(BaseModel):
    """未保存の入力値（作成フォーム / 編集フォーム）"""
    image: str = ""
    title: str = ""
    content: str = ""

    def missing_fields(self) -> List[str]:
        return [name for name in REQUIRED_DRAFT_FIELDS if not getattr(self, name).strip()]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    @classmethod
    def from_post(cls, post: BlogPost) -> "BlogPostDraft":
        return cls(image=post.image, title=post.title, content=post.content)


class BlogPostDraftUpdate(BaseModel):
    """下書きフィールドの部分更新"""
    image: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None


# =====================================================
# エディタ状態
# =====================================================

class EditorState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"


class DraftTarget(str, Enum):
    """操作対象の下書き"""
    NEW = "new"
    EDIT = "edit"


class EditorSnapshot(BaseModel):
    """エディタの表示用スナップショット"""
    state: EditorState
    editing_id: Optional[str] = None
    posts: List[BlogPost] = Field(default_factory=list)
    new_draft: BlogPostDraft = Field(default_factory=BlogPostDraft)
    edit_draft: BlogPostDraft = Field(default_factory=BlogPostDraft)
    keywords: List[str] = Field(default_factory=list)


# =====================================================
# キーワード提案
# =====================================================

class SuggestKeywordsInput(BaseModel):
    """キーワード提案の入力"""
    model_config = ConfigDict(populate_by_name=True)

    blog_content: str = Field(
        ...,
        alias="blogContent",
        description="The content of the blog post to generate keywords for.",
    )


class SuggestKeywordsOutput(BaseModel):
    """キーワード提案の出力。この形に検証できない応答は失敗とする"""
    model_config = ConfigDict(extra="forbid")

    keywords: List[str] = Field(
        ...,
        description="An array of relevant keywords for the blog post.",
    )
