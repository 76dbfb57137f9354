# -*- coding: utf-8 -*-
"""
Admin console composition root.

One console holds the operator's client-side state: the mirrored session,
draft fields, editing state, suggested keywords and pending notifications.
"""
from functools import lru_cache
import logging
from typing import Any, Optional

from app.common.database import get_supabase_client
from app.common.navigation import Navigator
from app.common.notifications import Notifier
from app.core.config import Settings, settings, validate_required_settings
from app.domains.auth.guard import AuthGuard
from app.domains.auth.service import AuthService
from app.domains.auth.session import SessionStore
from app.domains.blog.editor import PostEditor
from app.domains.blog.keywords import KeywordSuggestionClient
from app.domains.blog.repository import BlogPostRepository
from app.domains.blog.storage import BlogImageStorage
from app.domains.dashboard.view import Dashboard

logger = logging.getLogger(__name__)


class AdminConsole:
    """管理コンソール"""

    def __init__(
        self,
        client: Any,
        config: Optional[Settings] = None,
        keyword_client: Optional[KeywordSuggestionClient] = None,
    ):
        config = validate_required_settings(config or settings)
        self.client = client
        self.notifier = Notifier()
        self.navigator = Navigator()

        self.sessions = SessionStore()
        self._auth_subscription = self.sessions.bind(client.auth)
        self.auth = AuthService(client.auth, self.sessions, self.navigator, self.notifier)
        self.guard = AuthGuard(self.sessions, navigate=self.navigator.push)

        repository = BlogPostRepository(client, table=config.blog_posts_table)
        storage = BlogImageStorage(
            client,
            base_url=config.storage_base_url,
            bucket=config.blog_images_bucket,
            cache_control=config.storage_cache_control,
        )
        keyword_client = keyword_client or KeywordSuggestionClient(
            model=config.keyword_model,
            api_key=config.openai_api_key,
        )

        self.editor = PostEditor(repository, storage, keyword_client, self.sessions, self.notifier)
        self.dashboard = Dashboard(repository, self.notifier)
        logger.info("Admin console initialized")

    def close(self) -> None:
        self.guard.close()
        unsubscribe = getattr(self._auth_subscription, "unsubscribe", None)
        if callable(unsubscribe):
            unsubscribe()


@lru_cache(maxsize=1)
def get_console() -> AdminConsole:
    """FastAPI dependency: the process-wide console"""
    return AdminConsole(get_supabase_client(), settings)
