# -*- coding: utf-8 -*-
from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse

from app.common.errors import ErrorKind
from app.common.schemas import ConsoleResponse, OperationResult
from app.core.console import AdminConsole

# 失敗した操作結果のHTTPステータス
STATUS_BY_ERROR_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def console_response(
    console: AdminConsole,
    result: OperationResult,
    data: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """操作結果・現在のルート・未読の通知をまとめて返す"""
    payload = ConsoleResponse(
        result=result,
        route=console.navigator.current,
        notifications=console.notifier.drain(),
        data=data,
    )
    status_code = status.HTTP_200_OK
    if not result.ok and result.error is not None:
        status_code = STATUS_BY_ERROR_KIND[result.error.kind]
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json"))
