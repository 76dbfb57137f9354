# -*- coding: utf-8 -*-
"""
Observable session store.

The Supabase auth client owns the real session. ``SessionStore`` mirrors it
and lets components (auth guard, dashboard, editor) subscribe to changes
instead of polling the client.
"""
import logging
import threading
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

SessionListener = Callable[[Optional[Any]], None]


def session_user_id(session: Optional[Any]) -> Optional[str]:
    """Return ``session.user.id`` or None"""
    user = getattr(session, "user", None) if session is not None else None
    user_id = getattr(user, "id", None)
    return str(user_id) if user_id else None


class SessionStore:
    """認証セッションを保持し、変更を購読者へ通知する"""

    def __init__(self, session: Optional[Any] = None):
        self._session = session
        self._listeners: Dict[int, SessionListener] = {}
        self._next_listener_id = 0
        # Supabaseのトークン更新スレッドから通知される場合がある
        self._lock = threading.Lock()

    @property
    def session(self) -> Optional[Any]:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    @property
    def user_id(self) -> Optional[str]:
        return session_user_id(self._session)

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener called with the new session on every change.

        Returns:
            A callable that removes the listener again
        """
        with self._lock:
            listener_id = self._next_listener_id
            self._next_listener_id += 1
            self._listeners[listener_id] = listener

        def unsubscribe() -> None:
            with self._lock:
                self._listeners.pop(listener_id, None)

        return unsubscribe

    def set_session(self, session: Optional[Any]) -> None:
        with self._lock:
            if session is self._session:
                return
            previous_user = session_user_id(self._session)
            self._session = session
            listeners = list(self._listeners.values())

        logger.info(f"Session changed: user {previous_user} -> {session_user_id(session)}")
        for listener in listeners:
            try:
                listener(session)
            except Exception as e:
                logger.exception(f"Session listener failed: {e}")

    def clear(self) -> None:
        self.set_session(None)

    def bind(self, auth_client: Any) -> Any:
        """
        Mirror the session held by a Supabase auth client.

        Seeds the store from ``get_session()`` and follows
        ``on_auth_state_change`` events (sign-in, refresh, sign-out, expiry).

        Returns:
            The auth client's subscription (call ``unsubscribe()`` on teardown)
        """
        try:
            self.set_session(auth_client.get_session())
        except Exception as e:
            logger.warning(f"Could not read the current session: {e}")
            self.set_session(None)

        def on_auth_state_change(event: Any, session: Optional[Any]) -> None:
            logger.debug(f"Auth state change: {event}")
            self.set_session(session)

        return auth_client.on_auth_state_change(on_auth_state_change)
