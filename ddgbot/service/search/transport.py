# ddgbot/service/search/transport.py
from __future__ import annotations
import threading
import time
from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException

from ddgbot.common.info_module import LOGMANAGER
from .errors import TransportError

_thread_local = threading.local()


def _get_session() -> requests.Session:
    # 每个线程一个 Session，只用于连接复用，不做重试
    sess = getattr(_thread_local, "session", None)
    if sess is None:
        sess = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        sess.mount("http://", adapter)
        sess.mount("https://", adapter)
        _thread_local.session = sess
    return sess


def decode_html(resp: requests.Response) -> str:
    enc = resp.encoding
    if not enc or enc.lower() == "iso-8859-1":
        enc = resp.apparent_encoding or "utf-8"
    try:
        return resp.content.decode(enc, errors="replace")
    except LookupError:
        # Content-Type 里给了未知的 charset
        return resp.content.decode(resp.apparent_encoding or "utf-8", errors="replace")


def fetch(
    url: str,
    *,
    stage: str,
    params: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 10.0,
    session: Optional[requests.Session] = None,
) -> requests.Response:
    """
    单次 GET。任何 requests 层面的失败（连接、超时、非 2xx）统一转成 TransportError，
    原始异常挂在 __cause__ 上。
    """
    sess = session or _get_session()
    start = time.perf_counter()
    try:
        resp = sess.get(url, params=params, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except RequestException as e:
        raise TransportError(stage, f"GET {url} failed: {e}") from e

    LOGMANAGER.debug(
        f"[{stage}] GET {url} -> {resp.status_code}, "
        f"{(time.perf_counter() - start) * 1000:.0f}ms"
    )
    return resp
