# -*- coding: utf-8 -*-
"""
Shared fixtures for the admin console tests
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.config import Settings
from app.domains.blog.schemas import SuggestKeywordsOutput

TEST_USER_ID = "user-123"
OTHER_USER_ID = "user-456"
TEST_SUPABASE_URL = "https://project.supabase.co"


def make_session(user_id: str = TEST_USER_ID):
    """Supabaseのセッションを模したオブジェクト"""
    return SimpleNamespace(
        access_token=f"access-token-{user_id}",
        user=SimpleNamespace(id=user_id, email=f"{user_id}@example.com"),
    )


def make_row(post_id, title="Title", content="Content", image="https://img/x.png",
             user_id=TEST_USER_ID, created_at="2024-01-01T00:00:00+00:00"):
    return {
        "id": post_id,
        "image": image,
        "title": title,
        "content": content,
        "user_id": user_id,
        "created_at": created_at,
    }


@pytest.fixture
def test_settings():
    return Settings(
        auth_service_url=TEST_SUPABASE_URL,
        service_key="anon-key",
        storage_base_url=TEST_SUPABASE_URL,
        openai_api_key="sk-test",
    )


@pytest.fixture
def mock_supabase():
    """チェーン呼び出しをモックできるSupabaseクライアント（未ログイン状態）"""
    client = MagicMock()
    client.auth.get_session.return_value = None
    return client


@pytest.fixture
def mock_keyword_client():
    client = MagicMock()
    client.suggest_keywords = AsyncMock(
        return_value=SuggestKeywordsOutput(keywords=["python", "fastapi"])
    )
    return client
