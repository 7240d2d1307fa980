"""로깅 설정"""
import logging

from rich.logging import RichHandler

from tgui_common.config import get_config
from tgui_common.types import LogLevel

LOGGER_NAME = "tgui_common"
HANDLER_NAME = "tgui_common.console"


def setup_logging(level: LogLevel | None = None, rich: bool | None = None) -> logging.Logger:
    """
    패키지 로거에 핸들러 연결

    인자를 생략하면 get_config().logging 값을 쓴다.
    이미 이 함수가 연결한 핸들러가 있으면 레벨만 갱신한다.
    """
    settings = get_config().logging
    level = level or settings.level
    rich = settings.rich if rich is None else rich

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level))

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        if rich:
            handler: logging.Handler = RichHandler(show_path=False, rich_tracebacks=True)
            handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger
