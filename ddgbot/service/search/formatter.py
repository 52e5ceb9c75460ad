# ddgbot/service/search/formatter.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urljoin

from ddgbot.config.settings import RenderSettings
from .models import NoResult, ScrapedResult, SearchOutcome, StructuredAnswer


@dataclass(frozen=True)
class RenderedResult:
    """与平台无关的展示记录，由消息层转换成 embed 之类的富消息"""
    title: str
    description: str = ""
    url: Optional[str] = None
    image_url: Optional[str] = None
    fields: Tuple[Tuple[str, str], ...] = ()
    footer: str = ""
    footer_icon: str = ""
    found: bool = True
    failed: bool = False


def _footer(settings: RenderSettings, source: str = "") -> str:
    if source:
        return f"{settings.footer_text} ({source})"
    return settings.footer_text


def _render_answer(answer: StructuredAnswer, settings: RenderSettings, image_base_url: str) -> RenderedResult:
    if answer.abstract_text:
        return RenderedResult(
            title=answer.heading,
            description=answer.abstract_text,
            url=answer.abstract_url or None,
            image_url=urljoin(image_base_url, answer.image) if answer.image else None,
            footer=_footer(settings, answer.abstract_source),
            footer_icon=settings.footer_icon,
        )

    # 没有摘要，只列出相关主题；分类分组不展示
    topics = answer.topic_results()[:settings.max_related_topics]
    fields = tuple(
        (str(idx), f"{topic.first_url}\n{topic.text}")
        for idx, topic in enumerate(topics, start=1)
    )
    return RenderedResult(
        title=settings.related_title,
        fields=fields,
        footer=_footer(settings),
        footer_icon=settings.footer_icon,
    )


def render_outcome(
    outcome: SearchOutcome,
    settings: RenderSettings,
    *,
    image_base_url: str = "https://duckduckgo.com/",
) -> RenderedResult:
    if isinstance(outcome, StructuredAnswer):
        return _render_answer(outcome, settings, image_base_url)

    if isinstance(outcome, ScrapedResult):
        return RenderedResult(
            title=outcome.title,
            description=outcome.content,
            url=outcome.url or None,
            footer=_footer(settings),
            footer_icon=settings.footer_icon,
        )

    if isinstance(outcome, NoResult):
        return RenderedResult(
            title=settings.no_result_text,
            footer=_footer(settings),
            footer_icon=settings.footer_icon,
            found=False,
        )

    raise TypeError(f"Unknown search outcome: {type(outcome).__name__}")


def render_failure(settings: RenderSettings) -> RenderedResult:
    """硬失败只给用户一句道歉，细节写日志"""
    return RenderedResult(
        title=settings.error_text,
        footer=_footer(settings),
        footer_icon=settings.footer_icon,
        found=False,
        failed=True,
    )


def format_text(rendered: RenderedResult) -> str:
    lines = [rendered.title]
    if rendered.url:
        lines.append(rendered.url)
    if rendered.description:
        lines.append("")
        lines.append(rendered.description)
    for name, value in rendered.fields:
        lines.append("")
        lines.append(f"{name}. {value}")
    if rendered.image_url:
        lines.append("")
        lines.append(f"Image: {rendered.image_url}")
    if rendered.footer:
        lines.append("-" * 10)
        lines.append(rendered.footer)
    return "\n".join(lines)
