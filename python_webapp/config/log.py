"""로깅 설정 (앱/CLI 공통)"""
import logging
import sys
from typing import Optional

from config.settings import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    루트 로거 설정

    Streamlit은 매 상호작용마다 스크립트를 재실행하므로
    핸들러가 이미 있으면 레벨만 갱신.
    """
    root = logging.getLogger()
    root.setLevel((level or LOG_LEVEL).upper())

    if not any(getattr(h, '_schedviz', False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._schedviz = True
        root.addHandler(handler)

    return root
