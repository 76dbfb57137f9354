# -*- coding: utf-8 -*-
import logging
from collections import deque
from typing import Deque

logger = logging.getLogger(__name__)

# UIルート
DASHBOARD_ROUTE = "/"
LOGIN_ROUTE = "/login"
SIGNUP_ROUTE = "/signup"
BLOGS_ROUTE = "/blogs"

# 保持する遷移履歴の件数
HISTORY_LIMIT = 20


class Navigator:
    """現在のルートと直近の遷移履歴を保持する"""

    def __init__(self, initial_route: str = DASHBOARD_ROUTE, history_limit: int = HISTORY_LIMIT):
        self.history: Deque[str] = deque([initial_route], maxlen=history_limit)

    @property
    def current(self) -> str:
        return self.history[-1]

    def push(self, route: str) -> None:
        if route == self.current:
            return
        logger.debug(f"Navigate: {self.current} -> {route}")
        self.history.append(route)
