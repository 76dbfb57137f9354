# -*- coding: utf-8 -*-
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.common.errors import ConfigurationError

logger = logging.getLogger(__name__)


async def configuration_exception_handler(request: Request, exc: ConfigurationError):
    """必須設定の欠落でコンソールを生成できない場合のハンドラ"""
    logger.error(f"Console is not configured: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": exc.message, "missing_settings": exc.missing},
    )


# 例外ハンドラを登録するための辞書
exception_handlers = {
    ConfigurationError: configuration_exception_handler,
}
