# -*- coding: utf-8 -*-
"""
Sign-in / sign-up / sign-out against the Supabase auth service
"""
import logging
from typing import Any

from app.common.errors import OperationError, to_operation_error
from app.common.navigation import DASHBOARD_ROUTE, LOGIN_ROUTE, Navigator
from app.common.notifications import Notifier
from app.common.schemas import OperationResult
from app.domains.auth.session import SessionStore, session_user_id

logger = logging.getLogger(__name__)


def _validate_credentials(email: str, password: str) -> None:
    if not (email or "").strip() or not password:
        raise OperationError.validation("Email and password are required.")


class AuthService:
    """認証サービス（Supabase Auth）"""

    def __init__(self, auth_client: Any, sessions: SessionStore, navigator: Navigator, notifier: Notifier):
        self._auth = auth_client
        self._sessions = sessions
        self._navigator = navigator
        self._notifier = notifier

    async def sign_in(self, email: str, password: str) -> OperationResult:
        """メールアドレスとパスワードでサインイン"""
        try:
            _validate_credentials(email, password)
            response = self._auth.sign_in_with_password({"email": email.strip(), "password": password})
            session = getattr(response, "session", None)
            if session is None:
                raise OperationError.unexpected("Sign-in did not return a session")
        except Exception as e:
            error = to_operation_error(e)
            self._notifier.error("Error signing in", error)
            return OperationResult.failure(error)

        self._sessions.set_session(session)
        logger.info(f"Signed in: user {session_user_id(session)}")
        self._navigator.push(DASHBOARD_ROUTE)
        self._notifier.notify("Signed in successfully!")
        return OperationResult.success(redirect_to=DASHBOARD_ROUTE)

    async def sign_up(self, email: str, password: str) -> OperationResult:
        """サインアップ。確認メールはサービス側から送信される"""
        try:
            _validate_credentials(email, password)
            self._auth.sign_up({"email": email.strip(), "password": password})
        except Exception as e:
            error = to_operation_error(e)
            self._notifier.error("Error signing up", error)
            return OperationResult.failure(error)

        logger.info(f"Signed up: {email}")
        self._navigator.push(LOGIN_ROUTE)
        self._notifier.notify(
            "Signed up successfully!",
            "Please check your email to confirm your registration.",
        )
        return OperationResult.success(redirect_to=LOGIN_ROUTE)

    async def sign_out(self) -> OperationResult:
        """サインアウト。結果に関わらずログイン画面へ遷移する"""
        try:
            self._auth.sign_out()
        except Exception as e:
            logger.warning(f"Sign-out reported an error, continuing: {e}")
        finally:
            self._sessions.clear()
            self._navigator.push(LOGIN_ROUTE)
        return OperationResult.success(redirect_to=LOGIN_ROUTE)
