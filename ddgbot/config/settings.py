from typing import Literal, Optional
from pydantic import Field
from ddgbot.config.base import BaseSettings

# ==================== 搜索 ====================

class SearchSettings(BaseSettings):
    """搜索链路：即时答案 API + HTML 抓取回退"""

    client_id: str = 'sbot_discordbot'
    """即时答案 API 的调用方标识（t 参数）"""

    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/133.0.0.0 Safari/537.36"
    )
    """抓取 HTML 结果页时发送的 UA，空 UA 会被拒绝"""

    instant_answer_url: str = 'https://api.duckduckgo.com/'
    html_search_url: str = 'https://html.duckduckgo.com/html/'

    image_base_url: str = 'https://duckduckgo.com/'
    """即时答案里的 Image 是相对路径，拼在这个地址后面"""

    timeout: float = Field(default=10.0, gt=0)
    """单次网络请求超时（秒）"""

    html_parser: Literal['lxml', 'html.parser'] = 'lxml'

# ==================== 渲染 ====================

class RenderSettings(BaseSettings):
    """结果渲染，交给消息层展示"""

    footer_text: str = 'Results from DuckDuckGo'
    footer_icon: str = 'https://duckduckgo.com/assets/icons/meta/DDG-iOS-icon_152x152.png'

    related_title: str = 'Search result:'
    """只有相关主题时使用的标题"""

    no_result_text: str = 'No result found!'
    error_text: str = 'Sorry, the search failed. Please try again later.'

    max_related_topics: int = Field(default=25, ge=1, le=25)
    """相关主题最多渲染几条（embed 字段上限 25）"""

# ==================== 日志 ====================

class LogSettings(BaseSettings):
    level: Literal['debug', 'info', 'success', 'warning', 'error'] = 'info'
    enable_console: bool = True
    file_path: Optional[str] = None
    """为空则只输出到控制台"""

# ==============>>> 配置总入口 <<<==============
class AppSettings(BaseSettings):
    search: SearchSettings = Field(default_factory=SearchSettings)
    """搜索"""

    render: RenderSettings = Field(default_factory=RenderSettings)
    """渲染"""

    log: LogSettings = Field(default_factory=LogSettings)
    """日志"""

# 初始化单例
APP_SETTINGS = AppSettings()
