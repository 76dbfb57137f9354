# -*- coding: utf-8 -*-
import os
from pathlib import Path
from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv

from app.common.errors import ConfigurationError

# シンプルに.envファイルを読み込み
backend_dir = Path(__file__).parent.parent.parent
env_path = backend_dir / '.env'
if env_path.exists():
    load_dotenv(env_path, override=True)


class Settings(BaseSettings):
    """アプリケーション設定を管理するクラス"""
    # Supabase設定（認証・DB）
    auth_service_url: str = Field(default_factory=lambda: os.getenv("SUPABASE_URL", ""))
    service_key: str = Field(default_factory=lambda: os.getenv("SUPABASE_ANON_KEY", ""))

    # ストレージ設定（未指定時はSupabase URLを公開URLのベースとする）
    storage_base_url: str = Field(
        default_factory=lambda: os.getenv("STORAGE_BASE_URL") or os.getenv("SUPABASE_URL", "")
    )
    blog_images_bucket: str = Field(default_factory=lambda: os.getenv("BLOG_IMAGES_BUCKET", "blog-images"))
    storage_cache_control: str = Field(default_factory=lambda: os.getenv("STORAGE_CACHE_CONTROL", "3600"))

    # テーブル設定
    blog_posts_table: str = Field(default_factory=lambda: os.getenv("BLOG_POSTS_TABLE", "blog_posts"))

    # キーワード提案（OpenAI）
    openai_api_key: str = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))
    keyword_model: str = Field(default_factory=lambda: os.getenv("KEYWORD_MODEL", "gpt-4o-mini"))

    # デバッグ・ログ設定
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = Field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # CORS
    allowed_origins: str = Field(default_factory=lambda: os.getenv("ALLOWED_ORIGINS", "http://localhost:3000"))

    model_config = SettingsConfigDict(
        env_file=[
            '.env',
            Path(__file__).parent.parent.parent / '.env',
        ],
        env_file_encoding='utf-8',
        env_ignore_empty=False,
        extra='allow',
        case_sensitive=False
    )

    @property
    def origins(self) -> list:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# アダプター生成前に必ず存在を確認する設定項目
REQUIRED_SETTINGS: Tuple[str, ...] = ("storage_base_url", "auth_service_url", "service_key")

# 未設定でも起動できるが、対応する機能が無効になる設定項目
OPTIONAL_SETTINGS: Tuple[str, ...] = ("openai_api_key",)


def missing_settings(config: Optional[Settings] = None) -> list:
    """未設定の必須項目名を返す"""
    config = config or settings
    return [name for name in REQUIRED_SETTINGS if not (getattr(config, name, "") or "").strip()]


def missing_optional_settings(config: Optional[Settings] = None) -> list:
    """未設定の任意項目名を返す"""
    config = config or settings
    return [name for name in OPTIONAL_SETTINGS if not (getattr(config, name, "") or "").strip()]


def validate_required_settings(config: Optional[Settings] = None) -> Settings:
    """
    必須設定が揃っているか検証する

    Raises:
        ConfigurationError: 必須項目が欠けている場合
    """
    config = config or settings
    missing = missing_settings(config)
    if missing:
        raise ConfigurationError(
            f"Missing required settings: {', '.join(missing)}",
            missing=missing,
        )
    return config


# 設定インスタンスを作成
settings = Settings()
