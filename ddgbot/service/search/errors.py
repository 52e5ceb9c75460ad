# ddgbot/service/search/errors.py
from __future__ import annotations


class SearchError(Exception):
    """搜索链路所有错误的基类"""


class TransportError(SearchError):
    """网络/连接失败、超时或非 2xx 状态码"""

    def __init__(self, stage: str, message: str):
        super().__init__(f"[{stage}] {message}")
        self.stage = stage


class DeserializationError(SearchError):
    """即时答案响应不是 JSON，或与预期结构不符"""


class ExtractionError(SearchError):
    """HTML 结果页缺少预期的元素/属性"""


class ResultContainerNotFound(ExtractionError):
    pass


class AnchorNotFound(ExtractionError):
    pass


class HrefMissing(ExtractionError):
    pass


class TitleMissing(ExtractionError):
    pass


class SnippetNotFound(ExtractionError):
    pass
