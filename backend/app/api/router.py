# -*- coding: utf-8 -*-
from fastapi import APIRouter

# 各ドメインのエンドポイントをインポート
from app.domains.auth.endpoints import router as auth_router
from app.domains.blog.endpoints import router as blog_router
from app.domains.dashboard.endpoints import router as dashboard_router

api_router = APIRouter()

# 各ルーターをインクルード
api_router.include_router(dashboard_router)
api_router.include_router(auth_router)
api_router.include_router(blog_router, prefix="/blogs", tags=["Blog Management"])
