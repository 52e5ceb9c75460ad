# ddgbot/service/search/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_RESULT_TITLE = "No results - DuckDuckGo"


@dataclass(frozen=True)
class Query:
    text: str
    client_id: str

    def params(self) -> Dict[str, str]:
        """即时答案 API 的请求参数，关闭消歧义页"""
        return {
            "q": self.text,
            "format": "json",
            "no_html": "1",
            "skip_disambig": "1",
            "t": self.client_id,
        }


# ==================== 即时答案 ====================

class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)


class TopicResult(_ApiModel):
    first_url: str = Field(default="", alias="FirstURL")
    text: str = Field(default="", alias="Text")


class TopicCategory(_ApiModel):
    """分类分组，渲染时跳过"""
    name: str = Field(default="", alias="Name")
    topics: List[TopicResult] = Field(default_factory=list, alias="Topics")


RelatedTopic = Union[TopicResult, TopicCategory]


def _to_related_topic(raw: Any) -> Any:
    # 两种条目字段都是可选的，靠 Topics 键区分
    if isinstance(raw, dict):
        if "Topics" in raw or "topics" in raw:
            return TopicCategory.model_validate(raw)
        return TopicResult.model_validate(raw)
    return raw


class StructuredAnswer(_ApiModel):
    heading: str = Field(default="", alias="Heading")
    abstract_text: str = Field(default="", alias="AbstractText")
    abstract_url: str = Field(default="", alias="AbstractURL")
    abstract_source: str = Field(default="", alias="AbstractSource")
    image: str = Field(default="", alias="Image")
    related_topics: List[RelatedTopic] = Field(default_factory=list, alias="RelatedTopics")

    @field_validator("related_topics", mode="before")
    @classmethod
    def _split_topics(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_to_related_topic(v) for v in value]
        return value

    def is_usable(self) -> bool:
        # 摘要和相关主题都要看，二者皆空才算没有答案
        return bool(self.abstract_text) or bool(self.related_topics)

    def topic_results(self) -> List[TopicResult]:
        return [t for t in self.related_topics if isinstance(t, TopicResult)]


# ==================== 抓取回退 ====================

@dataclass(frozen=True)
class ScrapedResult:
    title: str
    url: str      # 解码后的真实地址，不是 /l/?uddg= 跳转链接
    content: str

    @classmethod
    def nothing_found(cls) -> "ScrapedResult":
        return cls(title=NO_RESULT_TITLE, url="", content="")

    def is_usable(self) -> bool:
        return bool(self.title and self.url and self.content)


@dataclass(frozen=True)
class NoResult:
    query: str
    reason: str = "nothing_found"


SearchOutcome = Union[StructuredAnswer, ScrapedResult, NoResult]
