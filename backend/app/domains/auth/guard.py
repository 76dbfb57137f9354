# -*- coding: utf-8 -*-
import logging
from enum import Enum
from typing import Any, Callable, Optional, TypeVar, Union

from pydantic import BaseModel

from app.common.navigation import LOGIN_ROUTE
from app.domains.auth.session import SessionStore

logger = logging.getLogger(__name__)

LOADING_PLACEHOLDER = "Loading..."

T = TypeVar("T")


class GateStatus(str, Enum):
    AUTHENTICATED = "authenticated"
    REDIRECTING = "redirecting"


class GateDecision(BaseModel):
    """ガードの判定結果"""
    status: GateStatus
    redirect_to: Optional[str] = None
    placeholder: Optional[str] = None

    @property
    def allowed(self) -> bool:
        return self.status == GateStatus.AUTHENTICATED


class AuthGuard:
    """
    保護されたビューをセッションの有無で出し分けるガード

    セッションストアを購読し、変更のたびに再評価する。セッションが無い場合は
    ログインルートへ遷移させ、その間はプレースホルダーを表示する。
    """

    def __init__(
        self,
        sessions: SessionStore,
        navigate: Optional[Callable[[str], None]] = None,
        login_route: str = LOGIN_ROUTE,
    ):
        self._sessions = sessions
        self._navigate = navigate
        self._login_route = login_route
        self.decision = self._evaluate(sessions.session)
        self._unsubscribe = sessions.subscribe(self._on_session_change)

    def _evaluate(self, session: Optional[Any]) -> GateDecision:
        if session is not None:
            return GateDecision(status=GateStatus.AUTHENTICATED)

        decision = GateDecision(
            status=GateStatus.REDIRECTING,
            redirect_to=self._login_route,
            placeholder=LOADING_PLACEHOLDER,
        )
        if self._navigate is not None:
            self._navigate(self._login_route)
        return decision

    def _on_session_change(self, session: Optional[Any]) -> None:
        self.decision = self._evaluate(session)
        logger.debug(f"Auth guard re-evaluated: {self.decision.status.value}")

    def render(self, content: Callable[[], T]) -> Union[T, str]:
        """Render protected content, or the placeholder while redirecting"""
        if self.decision.allowed:
            return content()
        return self.decision.placeholder or LOADING_PLACEHOLDER

    def close(self) -> None:
        self._unsubscribe()

    def __enter__(self) -> "AuthGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
