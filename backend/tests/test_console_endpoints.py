# -*- coding: utf-8 -*-
"""
管理コンソールのHTTPエンドポイントのテスト
"""
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from supabase import AuthApiError

from main import app
from app.common.errors import ConfigurationError
from app.core.console import AdminConsole, get_console
from conftest import TEST_USER_ID, make_row, make_session

client = TestClient(app)


@pytest.fixture
def console(mock_supabase, test_settings, mock_keyword_client):
    console = AdminConsole(mock_supabase, test_settings, keyword_client=mock_keyword_client)
    app.dependency_overrides[get_console] = lambda: console
    yield console
    app.dependency_overrides.clear()
    console.close()


@pytest.fixture
def signed_in(console):
    console.sessions.set_session(make_session())
    console.notifier.drain()
    return console


def _mock_list(mock_supabase, rows):
    mock_supabase.table.return_value.select.return_value.order.return_value.execute.return_value.data = rows


# --- ガード ---
def test_dashboard_redirects_to_login_without_session(console):
    response = client.get("/", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert response.json()["detail"] == "Loading..."


def test_blogs_are_guarded_too(console):
    response = client.post("/blogs", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"


def test_dashboard_with_session(signed_in, mock_supabase):
    _mock_list(mock_supabase, [make_row("2", title="Newer"), make_row("1", title="Older")])

    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["ok"] is True
    assert [p["title"] for p in body["data"]["posts"]] == ["Newer", "Older"]
    assert body["data"]["links"][0]["href"] == "/blogs"


# --- 認証 ---
def test_login_success(console, mock_supabase):
    session = make_session()
    mock_supabase.auth.sign_in_with_password.return_value = SimpleNamespace(user=session.user, session=session)

    response = client.post("/login", json={"email": "admin@example.com", "password": "secret"})

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["redirect_to"] == "/"
    assert body["route"] == "/"
    assert console.guard.decision.allowed


def test_login_failure(console, mock_supabase):
    mock_supabase.auth.sign_in_with_password.side_effect = AuthApiError(
        "Invalid login credentials", 400, "invalid_credentials"
    )

    response = client.post("/login", json={"email": "admin@example.com", "password": "wrong"})

    assert response.status_code == 502
    body = response.json()
    assert body["result"]["error"] == {"kind": "service_error", "message": "Invalid login credentials"}
    assert body["notifications"][0]["description"] == "Invalid login credentials"
    assert body["route"] == "/login"


def test_signup_success(console, mock_supabase):
    response = client.post("/signup", json={"email": "new@example.com", "password": "secret"})

    assert response.status_code == 200
    assert response.json()["route"] == "/login"
    mock_supabase.auth.sign_up.assert_called_once()


def test_logout(signed_in, mock_supabase):
    response = client.post("/logout")

    assert response.status_code == 200
    assert response.json()["route"] == "/login"
    assert signed_in.sessions.session is None
    assert client.get("/", follow_redirects=False).status_code == 303


def test_session_endpoint(signed_in):
    response = client.get("/session")

    assert response.json()["data"] == {"authenticated": True, "user_id": TEST_USER_ID}


# --- エディタ ---
def test_create_post_flow(signed_in, mock_supabase):
    mock_supabase.table.return_value.insert.return_value.execute.return_value.data = [make_row("new")]
    _mock_list(mock_supabase, [make_row("new", title="T")])

    draft = {"image": "https://img/x.png", "title": "T", "content": "C"}
    assert client.patch("/blogs/drafts/new", json=draft).status_code == 200

    response = client.post("/blogs")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["new_draft"] == {"image": "", "title": "", "content": ""}
    assert data["posts"][0]["id"] == "new"
    inserted = mock_supabase.table.return_value.insert.call_args[0][0]
    assert inserted["user_id"] == TEST_USER_ID


def test_create_post_validation_error(signed_in, mock_supabase):
    response = client.post("/blogs")

    assert response.status_code == 400
    assert response.json()["result"]["error"]["message"] == "Please fill in all fields."
    mock_supabase.table.return_value.insert.assert_not_called()


def test_edit_update_cancel_flow(signed_in, mock_supabase):
    _mock_list(mock_supabase, [make_row("7", title="Original")])
    client.get("/blogs")

    response = client.post("/blogs/7/edit")
    assert response.json()["data"]["state"] == "editing"
    assert response.json()["data"]["edit_draft"]["title"] == "Original"

    client.patch("/blogs/drafts/edit", json={"title": "Changed"})
    mock_supabase.table.return_value.update.return_value.eq.return_value.execute.return_value.data = [
        make_row("7", title="Changed")
    ]
    _mock_list(mock_supabase, [make_row("7", title="Changed")])

    response = client.put("/blogs/editing")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["state"] == "idle"
    assert data["posts"][0]["title"] == "Changed"

    client.post("/blogs/7/edit")
    response = client.post("/blogs/editing/cancel")
    assert response.json()["data"]["editing_id"] is None


def test_delete_post(signed_in, mock_supabase):
    _mock_list(mock_supabase, [])

    response = client.delete("/blogs/7")

    assert response.status_code == 200
    mock_supabase.table.return_value.delete.return_value.eq.assert_called_with("id", "7")
    assert response.json()["data"]["posts"] == []


def test_upload_image(signed_in, mock_supabase):
    client.patch("/blogs/drafts/new", json={"title": "Post"})
    mock_supabase.storage.from_.return_value.upload.return_value = SimpleNamespace(path="Post-cover.png")

    response = client.post(
        "/blogs/images/new",
        files={"file": ("cover.png", b"\x89PNG", "image/png")},
    )

    assert response.status_code == 200
    assert response.json()["data"]["new_draft"]["image"] == (
        "https://project.supabase.co/storage/v1/object/public/blog-images/Post-cover.png"
    )


def test_upload_image_without_file(signed_in, mock_supabase):
    response = client.post("/blogs/images/new")

    assert response.status_code == 400
    mock_supabase.storage.from_.return_value.upload.assert_not_called()


def test_suggest_keywords(signed_in, mock_keyword_client):
    client.patch("/blogs/drafts/new", json={"title": "T", "content": "C"})

    response = client.post("/blogs/keywords")

    assert response.status_code == 200
    assert response.json()["data"]["keywords"] == ["python", "fastapi"]
    assert response.json()["notifications"][-1]["title"] == "Keywords suggested!"


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert "missing_settings" in response.json()


# --- 設定 ---
@pytest.fixture
def settings_without_openai_key(test_settings):
    test_settings.openai_api_key = ""
    return test_settings


@pytest.fixture
def console_without_keywords(mock_supabase, settings_without_openai_key):
    console = AdminConsole(mock_supabase, settings_without_openai_key)
    app.dependency_overrides[get_console] = lambda: console
    yield console
    app.dependency_overrides.clear()
    console.close()


def test_console_works_without_openai_key(console_without_keywords, mock_supabase):
    session = make_session()
    mock_supabase.auth.sign_in_with_password.return_value = SimpleNamespace(user=session.user, session=session)
    _mock_list(mock_supabase, [make_row("1")])

    login = client.post("/login", json={"email": "admin@example.com", "password": "secret"})
    dashboard = client.get("/")

    assert login.status_code == 200
    assert dashboard.status_code == 200


def test_keywords_without_openai_key_is_a_validation_error(console_without_keywords):
    console_without_keywords.sessions.set_session(make_session())

    response = client.post("/blogs/keywords")

    assert response.status_code == 400
    body = response.json()
    assert body["result"]["error"]["kind"] == "validation"
    assert "openai_api_key" in body["result"]["error"]["message"]
    assert body["data"]["keywords"] == []


def test_health_reports_missing_openai_key(settings_without_openai_key):
    with patch("main.settings", settings_without_openai_key):
        response = client.get("/health")

    assert response.json()["status"] == "healthy"
    assert response.json()["missing_settings"] == []
    assert response.json()["missing_optional_settings"] == ["openai_api_key"]


def test_missing_required_settings_return_service_unavailable():
    def unconfigured_console():
        raise ConfigurationError(
            "Missing required settings: service_key",
            missing=["service_key"],
        )

    app.dependency_overrides[get_console] = unconfigured_console
    try:
        response = client.post("/login", json={"email": "admin@example.com", "password": "secret"})
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
    assert response.json()["missing_settings"] == ["service_key"]
