from unittest.mock import Mock

import pytest
import requests

from ddgbot.service.search.errors import (
    AnchorNotFound,
    ExtractionError,
    HrefMissing,
    ResultContainerNotFound,
    SnippetNotFound,
    TitleMissing,
    TransportError,
)
from ddgbot.service.search.models import NO_RESULT_TITLE, ScrapedResult
from ddgbot.service.search.scraper import (
    ScrapeResolver,
    decode_result_url,
    extract_first_result,
)

PARSERS = ["lxml", "html.parser"]


# ============================================================
# 跳转链接解码
# ============================================================

class TestDecodeResultUrl:

    def test_uddg_redirect(self):
        """uddg 参数解码成真实地址"""
        assert decode_result_url("/l/?uddg=https%3A%2F%2Fexample.com%2Fpage") == "https://example.com/page"

    def test_empty_uddg_is_not_a_url(self):
        """uddg 为空时不能把跳转链接本身当成结果地址"""
        with pytest.raises(HrefMissing):
            decode_result_url("//duckduckgo.com/l/?uddg=&rut=abc")

    def test_uddg_with_extra_params(self):
        href = "//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fa%3Fb%3D1&rut=abc"
        assert decode_result_url(href) == "https://example.com/a?b=1"

    def test_scheme_relative(self):
        """没有 uddg 时补全协议"""
        assert decode_result_url("//example.org/x") == "https://example.org/x"

    def test_absolute_kept(self):
        assert decode_result_url("https://example.org/x?y=1") == "https://example.org/x?y=1"

    def test_relative_path_joined_to_origin(self):
        assert decode_result_url("/about") == "https://duckduckgo.com/about"


# ============================================================
# 第一条结果抽取
# ============================================================

@pytest.mark.parametrize("parser", PARSERS)
class TestExtractFirstResult:

    def test_first_organic_result(self, result_page, parser):
        """跳过广告，取第一条自然结果"""
        result = extract_first_result(result_page, parser)

        assert result.title == "Rust Programming Language"
        assert result.url == "https://www.rust-lang.org/"
        assert result.content == "A language empowering everyone to build reliable and efficient software."
        assert result.is_usable()

    def test_idempotent(self, result_page, parser):
        """同一份页面解析两次结果一致"""
        assert extract_first_result(result_page, parser) == extract_first_result(result_page, parser)

    def test_no_results_marker_returns_sentinel(self, no_results_page, parser):
        result = extract_first_result(no_results_page, parser)

        assert result == ScrapedResult.nothing_found()
        assert result.title == NO_RESULT_TITLE
        assert not result.is_usable()

    def test_missing_container(self, blocked_page, parser):
        with pytest.raises(ResultContainerNotFound):
            extract_first_result(blocked_page, parser)

    def test_missing_anchor(self, build_result_body, parser):
        html = build_result_body('<a class="result__snippet">snippet</a>')
        with pytest.raises(AnchorNotFound):
            extract_first_result(html, parser)

    def test_missing_href(self, build_result_body, parser):
        html = build_result_body('<a class="result__a">Title</a><a class="result__snippet">snippet</a>')
        with pytest.raises(HrefMissing):
            extract_first_result(html, parser)

    def test_missing_title(self, build_result_body, parser):
        html = build_result_body(
            '<a class="result__a" href="https://example.com/"> </a><a class="result__snippet">snippet</a>'
        )
        with pytest.raises(TitleMissing):
            extract_first_result(html, parser)

    def test_missing_snippet(self, build_result_body, parser):
        html = build_result_body('<a class="result__a" href="https://example.com/">Title</a>')
        with pytest.raises(SnippetNotFound):
            extract_first_result(html, parser)

    def test_snippet_text_nodes_joined_without_separator(self, build_result_body, parser):
        html = build_result_body(
            '<a class="result__a" href="https://example.com/">Title</a>'
            '<div class="result__snippet">foo<b>bar</b>baz</div>'
        )
        assert extract_first_result(html, parser).content == "foobarbaz"


class TestExtractionErrorTaxonomy:

    def test_errors_are_distinct(self):
        """每个抽取点都有自己的异常类型"""
        kinds = {ResultContainerNotFound, AnchorNotFound, HrefMissing, TitleMissing, SnippetNotFound}
        assert len(kinds) == 5
        for kind in kinds:
            assert issubclass(kind, ExtractionError)


# ============================================================
# ScrapeResolver
# ============================================================

class TestScrapeResolver:

    def test_request_shape(self, result_page, make_response):
        """GET 结果页，带 q 参数和 UA"""
        session = Mock()
        session.get.return_value = make_response(result_page)
        resolver = ScrapeResolver(
            endpoint="https://html.duckduckgo.com/html/",
            user_agent="sbot-test/1.0",
            timeout=3,
            session=session,
        )

        result = resolver.resolve_scrape("rust")

        assert result.url == "https://www.rust-lang.org/"
        session.get.assert_called_once_with(
            "https://html.duckduckgo.com/html/",
            params={"q": "rust"},
            headers={"User-Agent": "sbot-test/1.0"},
            timeout=3,
        )

    def test_connection_error(self):
        session = Mock()
        session.get.side_effect = requests.ConnectionError("connection refused")
        resolver = ScrapeResolver(session=session)

        with pytest.raises(TransportError) as exc_info:
            resolver.resolve_scrape("rust")

        assert exc_info.value.stage == "scrape"
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_http_status_error(self, make_response):
        session = Mock()
        session.get.return_value = make_response("", status=403)
        resolver = ScrapeResolver(session=session)

        with pytest.raises(TransportError):
            resolver.resolve_scrape("rust")
        assert session.get.call_count == 1  # 不重试

    def test_unknown_charset_falls_back(self, result_page, make_response):
        """Content-Type 里的 charset 无法识别时照样解析"""
        resp = make_response(result_page)
        resp.encoding = "x-unknown-charset"
        session = Mock()
        session.get.return_value = resp

        result = ScrapeResolver(session=session).resolve_scrape("rust")

        assert result.title == "Rust Programming Language"
        assert result.url == "https://www.rust-lang.org/"
