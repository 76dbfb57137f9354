# -*- coding: utf-8 -*-
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.api.responses import console_response
from app.common.schemas import OperationResult
from app.core.console import AdminConsole, get_console

router = APIRouter(tags=["auth"])


class CredentialsRequest(BaseModel):
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


@router.post("/login")
async def sign_in(request: CredentialsRequest, console: AdminConsole = Depends(get_console)):
    """Sign in and go to the dashboard"""
    result = await console.auth.sign_in(request.email, request.password)
    return console_response(console, result)


@router.post("/signup")
async def sign_up(request: CredentialsRequest, console: AdminConsole = Depends(get_console)):
    """Register a new admin; confirmation happens by email"""
    result = await console.auth.sign_up(request.email, request.password)
    return console_response(console, result)


@router.post("/logout")
async def sign_out(console: AdminConsole = Depends(get_console)):
    result = await console.auth.sign_out()
    return console_response(console, result)


@router.get("/session")
async def get_session(console: AdminConsole = Depends(get_console)):
    """Whether a session is currently present"""
    return console_response(
        console,
        OperationResult.success(),
        data={
            "authenticated": console.sessions.is_authenticated,
            "user_id": console.sessions.user_id,
        },
    )
