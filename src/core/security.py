"""
입력 보안 검증 및 요청 로깅
"""

from typing import Optional
from fastapi import Request
from src.core.config import settings
from src.core.logging import logger, sanitize_for_log
from src.core.exceptions import (
    InvalidPriceException,
    InvalidQueryException,
    InvalidURLException,
)


class SecurityValidator:
    """입력 보안 검증"""

    # 검색어는 DB로 가지 않지만 로그/응답에 섞이지 않도록 제어 문자는 막음
    DANGEROUS_QUERY_CHARS = ['\0', '\n', '\r']

    @staticmethod
    def validate_query(query: Optional[str]) -> bool:
        """검색어 검증

        빈 검색어는 "전체 조회"를 뜻하므로 허용합니다.

        Args:
            query: 검색어

        Returns:
            유효성 여부

        Raises:
            InvalidQueryException: 유효하지 않은 입력
        """
        if not query or not query.strip():
            return True

        if len(query) > settings.max_query_length:
            raise InvalidQueryException(f"Search query must be at most {settings.max_query_length} characters")

        for char in SecurityValidator.DANGEROUS_QUERY_CHARS:
            if char in query:
                logger.warning(
                    f"Control character in search query: {sanitize_for_log(query)}"
                )
                raise InvalidQueryException("Search query contains a disallowed character")

        return True

    @staticmethod
    def validate_image_url(url: Optional[str]) -> bool:
        """이미지 URL 검증 (비어 있으면 이미지 없음)

        Raises:
            InvalidURLException: 유효하지 않은 URL
        """
        if not url:
            return True

        if len(url) > settings.max_image_url_length:
            raise InvalidURLException(url[:50], f"URL must be at most {settings.max_image_url_length} characters")

        if not url.startswith(('http://', 'https://')):
            raise InvalidURLException(url, "URL must start with http:// or https://")

        return True

    @staticmethod
    def validate_price(price: float) -> bool:
        """가격 검증 (0보다 커야 함)

        Raises:
            InvalidPriceException: 유효하지 않은 가격
        """
        if price != price:  # NaN
            raise InvalidPriceException(price, "Price must be a number")

        if price <= 0:
            raise InvalidPriceException(price, "Price must be greater than 0")

        if price > settings.max_price:
            raise InvalidPriceException(price, "Price is too large")

        return True


async def log_request(request: Request) -> None:
    """요청 로깅 (민감 정보 제외)

    Args:
        request: FastAPI Request 객체
    """
    method = request.method
    path = request.url.path

    query_params = {}
    for key, value in request.query_params.items():
        query_params[key] = sanitize_for_log(str(value), max_length=50)

    if query_params:
        logger.debug(f"{method} {path}?{query_params}")
    else:
        logger.debug(f"{method} {path}")
