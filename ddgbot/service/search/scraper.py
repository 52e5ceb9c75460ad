# ddgbot/service/search/scraper.py
from __future__ import annotations
import re
from typing import Optional
from urllib.parse import parse_qs, urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

from ddgbot.common.info_module import LOGMANAGER
from .errors import (
    AnchorNotFound,
    HrefMissing,
    ResultContainerNotFound,
    SnippetNotFound,
    TitleMissing,
)
from .models import ScrapedResult
from .transport import decode_html, fetch

PROVIDER_ORIGIN = "https://duckduckgo.com"

# 结果页结构：div.result > div.result__body > (h2 a.result__a, a.result__snippet)
RESULT_BODY_SELECTOR = ".result__body"
AD_CLASS = "result--ad"
ANCHOR_SELECTOR = "a.result__a"
SNIPPET_SELECTOR = ".result__snippet"
NO_RESULTS_SELECTOR = ".no-results"


def _clean_text(s: str) -> str:
    s = re.sub(r"\s+", " ", s or "").strip()
    return s


def decode_result_url(href: str) -> str:
    """
    结果链接经常是 /l/?uddg=<编码后的真实地址>&rut=... 形式的跳转链接，
    有 uddg 参数就取它（parse_qs 会做百分号解码），否则补全协议。
    uddg 存在但为空时拿不到真实地址，抛出 HrefMissing。
    """
    uddg = parse_qs(urlsplit(href).query, keep_blank_values=True).get("uddg")
    if uddg is not None:
        if not uddg[0]:
            raise HrefMissing(f"redirect link carries an empty uddg parameter: {href!r}")
        return uddg[0]
    if href.startswith("//"):
        return "https:" + href
    return urljoin(PROVIDER_ORIGIN, href)


def extract_first_result(html: str, parser: str = "lxml") -> ScrapedResult:
    """
    从结果页里取第一条自然结果。依赖服务商页面结构的逻辑全部在这里。

    - 页面明确给出“无结果”标记时返回 ScrapedResult.nothing_found()
    - 其他缺失的元素/属性各自抛出对应的 ExtractionError
    """
    soup = BeautifulSoup(html, parser)

    body = None
    for candidate in soup.select(RESULT_BODY_SELECTOR):
        # 跳过广告位
        if candidate.find_parent(class_=AD_CLASS) is not None:
            continue
        body = candidate
        break

    if body is None:
        if soup.select_one(NO_RESULTS_SELECTOR) is not None:
            return ScrapedResult.nothing_found()
        raise ResultContainerNotFound(f"no element matches {RESULT_BODY_SELECTOR!r}")

    anchor = body.select_one(ANCHOR_SELECTOR)
    if anchor is None:
        raise AnchorNotFound(f"no element matches {ANCHOR_SELECTOR!r}")

    href = (anchor.get("href") or "").strip()
    if not href:
        raise HrefMissing("result anchor has no href")
    url = decode_result_url(href)

    title = _clean_text(anchor.get_text())
    if not title:
        raise TitleMissing("result anchor has no visible text")

    snippet = body.select_one(SNIPPET_SELECTOR)
    if snippet is None:
        raise SnippetNotFound(f"no element matches {SNIPPET_SELECTOR!r}")
    content = _clean_text("".join(snippet.strings))

    return ScrapedResult(title=title, url=url, content=content)


class ScrapeResolver:
    """HTML 结果页抓取回退"""

    def __init__(
        self,
        *,
        endpoint: str = "https://html.duckduckgo.com/html/",
        user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
                          "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36",
        timeout: float = 10.0,
        parser: str = "lxml",
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.parser = parser
        self.session = session
        self.headers = {"User-Agent": user_agent}

    def resolve_scrape(self, query: str) -> ScrapedResult:
        resp = fetch(
            self.endpoint,
            stage="scrape",
            params={"q": query},
            headers=self.headers,
            timeout=self.timeout,
            session=self.session,
        )
        result = extract_first_result(decode_html(resp), self.parser)
        LOGMANAGER.debug(f"抓取结果: title={result.title!r}, url={result.url!r}")
        return result
