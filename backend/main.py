# -*- coding: utf-8 -*-
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import missing_optional_settings, missing_settings, settings
from app.core.exceptions import exception_handlers
from app.core.logger import setup_logger

logger = setup_logger("app", settings.log_level, settings.log_file or None)

# FastAPIアプリケーションの初期化
app = FastAPI(
    title="Blog Admin Console API",
    description="Admin console for managing blog posts: authentication, post CRUD, image upload and SEO keyword suggestions.",
    version="1.0.0",
    debug=settings.debug,
    exception_handlers=exception_handlers,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health", tags=["Health"], summary="ヘルスチェック")
async def health_check():
    """APIのヘルスチェックエンドポイント。必須・任意設定の欠落も返す"""
    missing = missing_settings(settings)
    return {
        "status": "healthy" if not missing else "misconfigured",
        "missing_settings": missing,
        "missing_optional_settings": missing_optional_settings(settings),
        "version": "1.0.0",
    }


# Uvicornで実行する場合 (開発用)
if __name__ == "__main__":
    print("To run the server, use the command:")
    print("uvicorn main:app --reload --host 0.0.0.0 --port 8000")
