# ddgbot/service/search/instant.py
from __future__ import annotations
import json
from typing import Optional

import requests
from pydantic import ValidationError

from ddgbot.common.info_module import LOGMANAGER
from .errors import DeserializationError
from .models import Query, StructuredAnswer
from .transport import fetch


class InstantAnswerClient:
    """
    即时答案 API 客户端。
    只负责一次请求 + 反序列化；答案是否可用由调用方判断，
    网络或结构错误直接抛出，不会触发回退。
    """

    def __init__(
        self,
        *,
        endpoint: str = "https://api.duckduckgo.com/",
        client_id: str = "sbot_discordbot",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.client_id = client_id
        self.timeout = timeout
        self.session = session

    def resolve_instant(self, query: str) -> StructuredAnswer:
        q = Query(text=query, client_id=self.client_id)
        resp = fetch(
            self.endpoint,
            stage="instant",
            params=q.params(),
            timeout=self.timeout,
            session=self.session,
        )

        # 接口返回的 Content-Type 不一定是 application/json，直接按文本解析
        try:
            payload = json.loads(resp.text)
        except ValueError as e:
            raise DeserializationError(f"instant answer body is not JSON: {e}") from e

        try:
            answer = StructuredAnswer.model_validate(payload)
        except ValidationError as e:
            raise DeserializationError(f"unexpected instant answer schema: {e}") from e

        LOGMANAGER.debug(
            f"即时答案: heading={answer.heading!r}, "
            f"abstract={len(answer.abstract_text)} chars, "
            f"related={len(answer.related_topics)}"
        )
        return answer
