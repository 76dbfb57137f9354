# -*- coding: utf-8 -*-
"""
Transient user notifications (toasts).

Operations push notifications here; the HTTP layer drains them into each
response so the operator sees every message exactly once.
"""
import logging
from typing import List, Optional

from app.common.errors import ErrorKind, OperationError
from app.common.schemas import Notification, NotificationVariant

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_TITLE = "Unexpected error"


class Notifier:
    """通知キュー"""

    def __init__(self):
        self._pending: List[Notification] = []

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def notify(
        self,
        title: str,
        description: Optional[str] = None,
        variant: NotificationVariant = NotificationVariant.DEFAULT,
    ) -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self._pending.append(notification)
        return notification

    def error(self, title: str, error: OperationError) -> Notification:
        """エラーをログに残し、破壊的バリアントの通知を積む"""
        if error.kind == ErrorKind.VALIDATION:
            logger.info(f"{title}: {error.message}")
        elif error.kind == ErrorKind.SERVICE_ERROR:
            logger.error(f"{title}: {error.message}")
        else:
            logger.error(f"{title}: unexpected error: {error.message}", exc_info=error.__cause__ or error)
            title = UNEXPECTED_ERROR_TITLE
        return self.notify(title, error.message, NotificationVariant.DESTRUCTIVE)

    def drain(self) -> List[Notification]:
        notifications, self._pending = self._pending, []
        return notifications
