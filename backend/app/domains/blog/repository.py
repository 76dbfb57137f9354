# -*- coding: utf-8 -*-
"""
Blog post repository using Supabase client
"""
import logging
from typing import Any, List, Optional

from app.common.errors import OperationError
from app.core.config import settings
from app.domains.blog.schemas import BlogPost, BlogPostDraft

logger = logging.getLogger(__name__)


class BlogPostRepository:
    """ブログ記事リポジトリ（Supabase版）

    例外はそのまま呼び出し元へ伝播する。ユーザー向けの通知への変換は
    エディタ/ダッシュボード側で行う。
    """

    def __init__(self, client: Any, table: Optional[str] = None):
        self._client = client
        self._table = table or settings.blog_posts_table

    async def list_posts(self) -> List[BlogPost]:
        """全記事を作成日時の降順で取得"""
        result = self._client.table(self._table)\
            .select("*")\
            .order("created_at", desc=True)\
            .execute()

        return [BlogPost(**row) for row in (result.data or [])]

    async def create_post(self, draft: BlogPostDraft, user_id: str) -> BlogPost:
        """記事を作成し、作成された行を返す"""
        post_dict = {
            "image": draft.image,
            "title": draft.title,
            "content": draft.content,
            "user_id": user_id,
        }

        result = self._client.table(self._table).insert(post_dict).execute()

        if not result.data:
            raise OperationError.service("Failed to create blog post")

        post = BlogPost(**result.data[0])
        logger.info(f"Blog post created: {post.id} for user {user_id}")
        return post

    async def update_post(self, post_id: str, draft: BlogPostDraft) -> BlogPost:
        """記事を更新する。user_idは作成時に確定するため送信しない"""
        update_data = {
            "image": draft.image,
            "title": draft.title,
            "content": draft.content,
        }

        result = self._client.table(self._table)\
            .update(update_data)\
            .eq("id", post_id)\
            .execute()

        if not result.data:
            raise OperationError.service(f"Blog post {post_id} not found")

        logger.info(f"Blog post updated: {post_id}")
        return BlogPost(**result.data[0])

    async def delete_post(self, post_id: str) -> None:
        """記事を削除"""
        self._client.table(self._table).delete().eq("id", post_id).execute()
        logger.info(f"Blog post deleted: {post_id}")
