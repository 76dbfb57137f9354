# -*- coding: utf-8 -*-
from fastapi import APIRouter, Depends

from app.api.responses import console_response
from app.common.auth import require_session
from app.core.console import AdminConsole

router = APIRouter(tags=["dashboard"])


@router.get("/", summary="管理ダッシュボード")
async def get_dashboard(console: AdminConsole = Depends(require_session)):
    """ログイン後のランディングページ。記事一覧は読み取り専用"""
    result = await console.dashboard.load()
    return console_response(console, result, data=console.dashboard.view().model_dump(mode="json"))
