# ddgbot/service/search/service.py
from __future__ import annotations
from typing import Optional

from ddgbot.common.info_module import LOGMANAGER
from ddgbot.config.settings import AppSettings
from .errors import SearchError
from .formatter import RenderedResult, render_failure, render_outcome
from .instant import InstantAnswerClient
from .models import NoResult, SearchOutcome
from .scraper import ScrapeResolver


class SearchPipeline:
    """即时答案 -> 抓取回退，两次请求严格串行"""

    def __init__(
        self,
        *,
        instant: InstantAnswerClient,
        scraper: ScrapeResolver,
    ):
        self.instant = instant
        self.scraper = scraper

    def resolve(self, query: str) -> SearchOutcome:
        # 即时答案阶段的错误直接抛出：接口挂了 ≠ 接口没有答案
        answer = self.instant.resolve_instant(query)
        if answer.is_usable():
            return answer

        LOGMANAGER.info(f"'{query}' 没有即时答案，回退到 HTML 抓取")
        try:
            scraped = self.scraper.resolve_scrape(query)
        except SearchError as e:
            LOGMANAGER.warning(f"'{query}' 抓取失败，按无结果处理: {e}", exc_info=True)
            return NoResult(query=query, reason=type(e).__name__)

        if not scraped.is_usable():
            LOGMANAGER.info(f"'{query}' 抓取结果为空")
            return NoResult(query=query)
        return scraped


class SearchFacade:
    """
    同步业务入口
    - 按配置组装即时答案客户端和抓取回退
    - 解析查询并渲染成展示记录
    - 硬失败记日志并渲染为道歉消息，任何结果都能展示给用户
    """
    def __init__(
        self,
        settings: AppSettings,
        *,
        pipeline: Optional[SearchPipeline] = None,
    ):
        self.settings = settings
        if pipeline is None:
            search = settings.search
            pipeline = SearchPipeline(
                instant=InstantAnswerClient(
                    endpoint=search.instant_answer_url,
                    client_id=search.client_id,
                    timeout=search.timeout,
                ),
                scraper=ScrapeResolver(
                    endpoint=search.html_search_url,
                    user_agent=search.user_agent,
                    timeout=search.timeout,
                    parser=search.html_parser,
                ),
            )
        self.pipeline = pipeline

    def run(self, query: str) -> RenderedResult:
        LOGMANAGER.info(f"收到搜索请求: '{query}'")
        try:
            outcome = self.pipeline.resolve(query)
        except SearchError as e:
            LOGMANAGER.error(f"'{query}' 搜索失败: {e}", exc_info=True)
            return render_failure(self.settings.render)

        LOGMANAGER.debug(f"'{query}' -> {type(outcome).__name__}")
        return render_outcome(
            outcome,
            self.settings.render,
            image_base_url=self.settings.search.image_base_url,
        )
