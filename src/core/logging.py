"""카탈로그 서비스 로깅

환경(`ENVIRONMENT`)별 동작:
- production: 간단한 포맷, DEBUG 요청은 INFO로 올림
- test: stdout 핸들러를 붙이지 않고 상위 로거로 전파 (pytest caplog 수집)
- 그 외(development): 함수/라인까지 포함한 상세 포맷
"""
import logging
import os
import sys
from typing import Optional

from src.core.config import settings

LOGGER_NAME = "product_catalog"

MINIMAL_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 로그에 값이 그대로 남으면 안 되는 키워드
SENSITIVE_MARKERS = ("password", "token", "api_key", "secret")


def current_environment() -> str:
    return os.getenv("ENVIRONMENT", "development").lower()


def resolve_level(level_name: Optional[str], environment: str) -> int:
    """설정 문자열을 logging 레벨로 변환 (알 수 없는 이름은 INFO)"""
    level = logging.getLevelName((level_name or "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO
    if environment == "production" and level < logging.INFO:
        level = logging.INFO
    return level


def setup_logging(
    environment: Optional[str] = None,
    log_level: Optional[str] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """서비스 로거 초기화

    같은 이름으로 여러 번 호출해도 핸들러는 하나만 유지됩니다.
    """
    environment = (environment or current_environment()).lower()
    level = resolve_level(log_level or settings.log_level, environment)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if environment == "test":
        logger.propagate = True
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    fmt = MINIMAL_FORMAT if environment == "production" else DETAILED_FORMAT
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    # uvicorn 루트 핸들러와 중복 출력 방지
    logger.propagate = False

    return logger


logger = setup_logging()


def sanitize_for_log(value: str, max_length: int = 100) -> str:
    """검색어 등 사용자 입력을 로그에 남길 수 있는 형태로 변환

    민감 키워드가 보이면 전체를 가리고, 줄바꿈은 이스케이프한 뒤
    `max_length`를 넘으면 잘라냅니다.
    """
    if not value:
        return "[empty]"

    lowered = value.lower()
    if any(marker in lowered for marker in SENSITIVE_MARKERS):
        return "***"

    result = value.replace("\n", "\\n").replace("\r", "\\r")
    if len(result) > max_length:
        result = result[:max_length] + "..."
    return result
