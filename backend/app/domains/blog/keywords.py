# -*- coding: utf-8 -*-
"""
SEOキーワード提案クライアント

記事のタイトルと本文からプロンプトを組み立て、OpenAI Responses API の
JSON Schema 出力で `{"keywords": [...]}` を受け取る。
"""
import logging
from typing import Any, Dict, Optional

from openai import OpenAI
from pydantic import ValidationError

from app.common.errors import OperationError
from app.core.config import settings
from app.domains.blog.schemas import SuggestKeywordsInput, SuggestKeywordsOutput

logger = logging.getLogger(__name__)

SUGGEST_KEYWORDS_PROMPT = """You are an SEO expert. Generate a list of keywords for the following blog post content:

{blog_content}

Return the keywords as a JSON array of strings.
"""


def build_blog_content(title: str, content: str) -> str:
    """タイトルと本文を空白で連結する"""
    return f"{title} {content}"


def _output_schema() -> Dict[str, Any]:
    schema = SuggestKeywordsOutput.model_json_schema()
    schema["additionalProperties"] = False
    if "properties" in schema:
        schema["required"] = list(schema["properties"].keys())
    return schema


KEYWORDS_NOT_CONFIGURED_MESSAGE = "Keyword suggestions are not configured: missing openai_api_key"


class KeywordSuggestionClient:
    """キーワード提案クライアント

    APIキーが未設定でも生成できる。その場合は提案時に検証エラーとなり、
    認証や記事管理など他の操作には影響しない。
    """

    def __init__(
        self,
        client: Optional[Any] = None,
        model: Optional[str] = None,
        api_key: Optional[str] = None,
    ):
        if client is None:
            api_key = settings.openai_api_key if api_key is None else api_key
            if (api_key or "").strip():
                client = OpenAI(api_key=api_key)
            else:
                logger.warning("openai_api_key is not set; keyword suggestions are disabled")
        self._client = client
        self.model = model or settings.keyword_model

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def suggest_keywords(self, request: SuggestKeywordsInput) -> SuggestKeywordsOutput:
        """
        キーワードを提案する

        同じ入力でも結果は毎回変わりうる。キャッシュは行わない。

        Raises:
            OperationError: APIキー未設定、応答が空、またはスキーマに一致しない場合
        """
        if self._client is None:
            raise OperationError.validation(KEYWORDS_NOT_CONFIGURED_MESSAGE, missing=["openai_api_key"])

        prompt = SUGGEST_KEYWORDS_PROMPT.format(blog_content=request.blog_content)

        response = self._client.responses.create(
            model=self.model,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": "suggest_keywords",
                    "strict": True,
                    "schema": _output_schema(),
                }
            },
        )

        output_text = getattr(response, "output_text", None) or ""
        if not output_text:
            raise OperationError.unexpected("Empty response from keyword generation service")

        try:
            result = SuggestKeywordsOutput.model_validate_json(output_text)
        except ValidationError as exc:
            logger.error(f"Keyword response failed validation: {output_text}")
            raise OperationError.unexpected("Keyword generation returned an invalid response") from exc

        logger.info(f"Suggested {len(result.keywords)} keywords")
        return result
