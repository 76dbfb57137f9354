# -*- coding: utf-8 -*-
import logging
from typing import List

from pydantic import BaseModel, Field

from app.common.errors import to_operation_error
from app.common.navigation import BLOGS_ROUTE
from app.common.notifications import Notifier
from app.common.schemas import OperationResult
from app.domains.blog.repository import BlogPostRepository
from app.domains.blog.schemas import BlogPost

logger = logging.getLogger(__name__)


class NavLink(BaseModel):
    label: str
    href: str


class DashboardView(BaseModel):
    """ダッシュボードの表示内容（読み取り専用）"""
    heading: str = "Welcome to the Admin Dashboard"
    subheading: str = "Manage your blog content here."
    links: List[NavLink] = Field(default_factory=lambda: [NavLink(label="Blog Management", href=BLOGS_ROUTE)])
    posts: List[BlogPost] = Field(default_factory=list)


class Dashboard:
    """ログイン後のランディングページ"""

    def __init__(self, repository: BlogPostRepository, notifier: Notifier):
        self._repository = repository
        self._notifier = notifier
        self.posts: List[BlogPost] = []

    async def load(self) -> OperationResult:
        try:
            self.posts = await self._repository.list_posts()
        except Exception as e:
            error = to_operation_error(e)
            self._notifier.error("Error loading blog posts", error)
            return OperationResult.failure(error)
        return OperationResult.success()

    def view(self) -> DashboardView:
        return DashboardView(posts=list(self.posts))
