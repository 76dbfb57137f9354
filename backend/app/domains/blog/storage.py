# -*- coding: utf-8 -*-
"""
Supabase Storage への画像アップロード
"""
import logging
from typing import Any, Optional

from app.common.errors import OperationError
from app.core.config import settings

logger = logging.getLogger(__name__)

PUBLIC_OBJECT_PATH = "storage/v1/object/public"


class BlogImageStorage:
    """ブログ画像用ストレージアダプター"""

    def __init__(
        self,
        client: Any,
        base_url: Optional[str] = None,
        bucket: Optional[str] = None,
        cache_control: Optional[str] = None,
    ):
        self._client = client
        self.base_url = (base_url or settings.storage_base_url).rstrip("/")
        self.bucket = bucket or settings.blog_images_bucket
        self.cache_control = cache_control or settings.storage_cache_control

    @staticmethod
    def object_key(title: str, filename: str) -> str:
        """オブジェクトキーは「{タイトル}-{ファイル名}」"""
        return f"{title}-{filename}"

    def public_url(self, path: str) -> str:
        return f"{self.base_url}/{PUBLIC_OBJECT_PATH}/{self.bucket}/{path.lstrip('/')}"

    async def upload(
        self,
        filename: Optional[str],
        data: Optional[bytes],
        title: str = "",
        content_type: Optional[str] = None,
    ) -> str:
        """
        画像をアップロードし、公開URLを返す

        Args:
            filename: 選択されたファイル名
            data: ファイルの中身
            title: 下書きのタイトル（オブジェクトキーに使用）
            content_type: MIMEタイプ

        Returns:
            公開URL

        Raises:
            OperationError: ファイル未選択、またはストレージが保存パスを返さなかった場合
        """
        if not filename or data is None:
            raise OperationError.validation("Please select an image to upload.")

        key = self.object_key(title, filename)
        file_options = {
            "cache-control": self.cache_control,
            "upsert": "false",
        }
        if content_type:
            file_options["content-type"] = content_type

        response = self._client.storage.from_(self.bucket).upload(
            path=key,
            file=data,
            file_options=file_options,
        )

        stored_path = getattr(response, "path", None)
        if not stored_path:
            raise OperationError.unexpected("Storage did not return a path for the uploaded image")

        url = self.public_url(stored_path)
        logger.info(f"Image uploaded to {self.bucket}: {stored_path}")
        return url
