# -*- coding: utf-8 -*-
"""
Session gate for protected routes
"""
import logging

from fastapi import Depends, HTTPException, status

from app.common.navigation import LOGIN_ROUTE
from app.core.console import AdminConsole, get_console
from app.domains.auth.guard import LOADING_PLACEHOLDER

logger = logging.getLogger(__name__)


def require_session(console: AdminConsole = Depends(get_console)) -> AdminConsole:
    """
    Let the request through only while a session is present.

    Without a session the guard has already navigated to the login route; the
    client receives a 303 redirect whose body is the loading placeholder.

    Raises:
        HTTPException: 303 with a ``Location`` header pointing at the login route
    """
    decision = console.guard.decision
    if decision.allowed:
        return console

    redirect_to = decision.redirect_to or LOGIN_ROUTE
    logger.info(f"🔒 [AUTH] No session - redirecting to {redirect_to}")
    raise HTTPException(
        status_code=status.HTTP_303_SEE_OTHER,
        detail=decision.placeholder or LOADING_PLACEHOLDER,
        headers={"Location": redirect_to},
    )
