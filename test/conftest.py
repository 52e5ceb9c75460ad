import pytest
import requests

from ddgbot.config.settings import AppSettings


def _make_response(body, status: int = 200, url: str = "https://example.test/") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    resp.url = url
    resp.reason = "OK" if status < 400 else "Service Unavailable"
    return resp


@pytest.fixture
def make_response():
    """构造一个不走网络的 requests.Response"""
    return _make_response


@pytest.fixture
def settings():
    """每个测试独立的配置，不碰全局 APP_SETTINGS"""
    return AppSettings()


# ============================================================
# HTML 结果页样本
# ============================================================

RESULT_PAGE = """
<html>
<head><title>rust at DuckDuckGo</title></head>
<body>
<div id="links" class="results">
  <div class="result results_links results_links_deep result--ad">
    <div class="links_main links_deep result__body">
      <h2 class="result__title">
        <a rel="nofollow" class="result__a" href="https://duckduckgo.com/y.js?ad_provider=bing">Sponsored thing</a>
      </h2>
      <a class="result__snippet" href="https://duckduckgo.com/y.js?ad_provider=bing">Buy it now</a>
    </div>
  </div>
  <div class="result results_links results_links_deep web-result">
    <div class="links_main links_deep result__body">
      <h2 class="result__title">
        <a rel="nofollow" class="result__a"
           href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.rust-lang.org%2F&amp;rut=5f2a">Rust Programming <b>Language</b></a>
      </h2>
      <a class="result__snippet" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.rust-lang.org%2F">A language empowering everyone
        to build <b>reliable</b> and efficient software.</a>
    </div>
  </div>
  <div class="result results_links results_links_deep web-result">
    <div class="links_main links_deep result__body">
      <h2 class="result__title">
        <a rel="nofollow" class="result__a" href="https://en.wikipedia.org/wiki/Rust">Rust - Wikipedia</a>
      </h2>
      <a class="result__snippet" href="https://en.wikipedia.org/wiki/Rust">Rust is an iron oxide.</a>
    </div>
  </div>
</div>
</body>
</html>
"""

NO_RESULTS_PAGE = """
<html>
<head><title>asdkjasd123 at DuckDuckGo</title></head>
<body>
<div id="links" class="results">
  <div class="no-results">No results.</div>
</div>
</body>
</html>
"""

BLOCKED_PAGE = """
<html>
<head><title>DuckDuckGo</title></head>
<body><form id="challenge-form"><p>Please complete the following challenge.</p></form></body>
</html>
"""


def result_body(inner: str) -> str:
    return (
        '<html><body><div class="result web-result">'
        f'<div class="links_main result__body">{inner}</div>'
        '</div></body></html>'
    )


@pytest.fixture
def result_page():
    return RESULT_PAGE


@pytest.fixture
def no_results_page():
    return NO_RESULTS_PAGE


@pytest.fixture
def blocked_page():
    return BLOCKED_PAGE


@pytest.fixture
def build_result_body():
    return result_body
