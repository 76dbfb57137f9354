# -*- coding: utf-8 -*-
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from enum import Enum

from app.common.errors import ErrorKind, OperationError


# --- 通知 ---
class NotificationVariant(str, Enum):
    """通知の表示種別"""
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """ユーザーに表示する一時的な通知（トースト）"""
    title: str = Field(description="通知タイトル")
    description: Optional[str] = Field(None, description="通知本文")
    variant: NotificationVariant = Field(NotificationVariant.DEFAULT, description="表示種別")


# --- 操作結果 ---
class ErrorPayload(BaseModel):
    """エラーペイロード"""
    kind: ErrorKind = Field(description="エラー種別")
    message: str = Field(description="エラーメッセージ")

    @classmethod
    def from_error(cls, error: OperationError) -> "ErrorPayload":
        return cls(kind=error.kind, message=error.message)


class OperationResult(BaseModel):
    """コンソール操作の結果。例外は投げずにこの形で返す"""
    ok: bool
    error: Optional[ErrorPayload] = None
    redirect_to: Optional[str] = Field(None, description="操作後の遷移先ルート")

    @classmethod
    def success(cls, redirect_to: Optional[str] = None) -> "OperationResult":
        return cls(ok=True, redirect_to=redirect_to)

    @classmethod
    def failure(cls, error: OperationError, redirect_to: Optional[str] = None) -> "OperationResult":
        return cls(ok=False, error=ErrorPayload.from_error(error), redirect_to=redirect_to)


class ConsoleResponse(BaseModel):
    """HTTPレスポンスの共通形式"""
    result: OperationResult
    route: str = Field(description="現在のルート")
    notifications: List[Notification] = Field(default_factory=list)
    data: Optional[Dict[str, Any]] = None
