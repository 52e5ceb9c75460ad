from __future__ import annotations
import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, List, Optional

# --------- Log管理器 ----------
# SUCCESS 等级介于 INFO 与 WARNING 之间
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_UNSET = object()


class LogManager:
    """
    基于 logging 的日志管理器：字符串级别（debug/info/success/warning/error），
    控制台输出 + 可选的按大小轮转文件输出。

    >>> log = LogManager(name="ddgbot", file_path="logs/bot.log")
    >>> log.warning("抓取失败，回退为无结果", exc_info=True)
    """

    LEVELS: Dict[str, int] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "success": SUCCESS,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "app",
        *,
        level: str = "info",
        enable_console: bool = True,
        file_path: str | Path | None = None,
        rotate_max_bytes: int = 5_000_000,
        rotate_backup_count: int = 5,
        fmt: str = "[%(asctime)s] [%(levelname)s] %(message)s",
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._enable_console = enable_console
        self._file_path: Optional[Path] = Path(file_path).resolve() if file_path else None
        self._rotate = (int(rotate_max_bytes), int(rotate_backup_count))
        self._formatter = logging.Formatter(fmt, "%Y-%m-%d %H:%M:%S")

        self._logger.setLevel(self._to_level(level))
        self._rebuild_handlers()

    def log(self, msg: str, level: str = "info", *, exc_info: Any = None, stacklevel: int = 2) -> None:
        self._logger.log(self._to_level(level), msg, exc_info=exc_info, stacklevel=stacklevel)

    def debug(self, msg: str, *, exc_info: Any = None) -> None:
        self.log(msg, "debug", exc_info=exc_info, stacklevel=3)

    def info(self, msg: str, *, exc_info: Any = None) -> None:
        self.log(msg, "info", exc_info=exc_info, stacklevel=3)

    def success(self, msg: str, *, exc_info: Any = None) -> None:
        self.log(msg, "success", exc_info=exc_info, stacklevel=3)

    def warning(self, msg: str, *, exc_info: Any = None) -> None:
        self.log(msg, "warning", exc_info=exc_info, stacklevel=3)

    def error(self, msg: str, *, exc_info: Any = None) -> None:
        self.log(msg, "error", exc_info=exc_info, stacklevel=3)

    def setOptions(
        self,
        *,
        level: Optional[str] = None,
        enable_console: Optional[bool] = None,
        file_path: Any = _UNSET,  # 明确传入 None 以移除文件输出
    ) -> None:
        """只改传入的参数；输出通道有变化时重建 handler"""
        if level is not None:
            self._logger.setLevel(self._to_level(level))

        need_rebuild = False
        if enable_console is not None and enable_console != self._enable_console:
            self._enable_console = bool(enable_console)
            need_rebuild = True

        if file_path is not _UNSET:
            new_path = Path(file_path).resolve() if file_path else None
            if new_path != self._file_path:
                self._file_path = new_path
                need_rebuild = True

        if need_rebuild:
            self._rebuild_handlers()

    def close(self) -> None:
        for h in list(self._logger.handlers):
            try:
                h.flush()
                h.close()
            finally:
                self._logger.removeHandler(h)

    # -------------------- 内部实现 --------------------

    def _to_level(self, level: str) -> int:
        key = str(level).strip().lower()
        if key not in self.LEVELS:
            raise ValueError(f"未知日志级别: {level!r}. 可用: {sorted(self.LEVELS)}")
        return self.LEVELS[key]

    def _rebuild_handlers(self) -> None:
        self.close()
        handlers: List[logging.Handler] = []

        if self._enable_console:
            handlers.append(logging.StreamHandler())

        if self._file_path:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            max_bytes, backups = self._rotate
            handlers.append(logging.handlers.RotatingFileHandler(
                self._file_path, maxBytes=max_bytes, backupCount=backups, encoding="utf-8",
            ))

        for h in handlers:
            h.setFormatter(self._formatter)
            self._logger.addHandler(h)


LOGMANAGER = LogManager(name="ddgbot")
