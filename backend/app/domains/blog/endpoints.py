# -*- coding: utf-8 -*-
"""
Blog Domain - API Endpoints

ブログ記事管理エディタのAPIエンドポイント
- 一覧・作成・編集・更新・削除
- 下書きフィールドの変更
- 画像アップロード
- SEOキーワード提案

すべてのルートはダッシュボードと同じセッションガードで保護する。
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile

from app.api.responses import console_response
from app.common.auth import require_session
from app.common.schemas import OperationResult
from app.core.console import AdminConsole
from app.domains.blog.schemas import BlogPostDraftUpdate, DraftTarget

logger = logging.getLogger(__name__)

router = APIRouter()


def _editor_response(console: AdminConsole, result: OperationResult):
    return console_response(console, result, data=console.editor.snapshot().model_dump(mode="json"))


@router.get("")
@router.get("/")
async def get_editor(
    reload: bool = Query(True, description="一覧を再取得してから返す"),
    console: AdminConsole = Depends(require_session),
):
    """エディタの状態を取得"""
    result = await console.editor.load_posts() if reload else OperationResult.success()
    return _editor_response(console, result)


@router.patch("/drafts/{target}")
async def update_draft(
    target: DraftTarget,
    changes: BlogPostDraftUpdate,
    console: AdminConsole = Depends(require_session),
):
    """下書きフィールドを変更"""
    result = console.editor.update_draft(target, changes)
    return _editor_response(console, result)


@router.post("")
@router.post("/")
async def create_post(console: AdminConsole = Depends(require_session)):
    """作成フォームの下書きから記事を作成"""
    result = await console.editor.create_post()
    return _editor_response(console, result)


@router.put("/editing")
async def update_post(console: AdminConsole = Depends(require_session)):
    """編集中の記事を更新"""
    result = await console.editor.update_post()
    return _editor_response(console, result)


@router.post("/editing/cancel")
async def cancel_edit(console: AdminConsole = Depends(require_session)):
    result = console.editor.cancel_edit()
    return _editor_response(console, result)


@router.post("/images/{target}")
async def upload_image(
    target: DraftTarget,
    file: Optional[UploadFile] = File(None, description="アップロードする画像"),
    console: AdminConsole = Depends(require_session),
):
    """画像をアップロードし、下書きの画像URLに設定"""
    filename = file.filename if file is not None else None
    data = await file.read() if file is not None else None
    content_type = file.content_type if file is not None else None
    result = await console.editor.upload_image(target, filename, data, content_type)
    return _editor_response(console, result)


@router.post("/keywords")
async def suggest_keywords(
    target: DraftTarget = Query(DraftTarget.NEW, description="キーワード提案に使う下書き"),
    console: AdminConsole = Depends(require_session),
):
    """下書きのタイトルと本文からSEOキーワードを提案"""
    result = await console.editor.suggest_keywords(target)
    return _editor_response(console, result)


@router.post("/{post_id}/edit")
async def start_edit(post_id: str, console: AdminConsole = Depends(require_session)):
    """記事の編集を開始"""
    result = console.editor.start_edit(post_id)
    return _editor_response(console, result)


@router.delete("/{post_id}")
async def delete_post(post_id: str, console: AdminConsole = Depends(require_session)):
    result = await console.editor.delete_post(post_id)
    return _editor_response(console, result)
