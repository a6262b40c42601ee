"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class CatalogException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""

    status_code: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 상품 관련 예외
class ProductNotFoundException(CatalogException):
    """상품을 찾을 수 없을 때"""

    status_code = 404

    def __init__(self, product_id: int, details: Optional[dict[str, Any]] = None):
        super().__init__("Product not found", "PRODUCT_NOT_FOUND", details or {"product_id": product_id})


# 데이터베이스 관련 예외
class DatabaseException(CatalogException):
    """데이터베이스 관련 예외"""
    def __init__(self, message: str, error_code: str = "DB_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "DB_ERROR", details)


class DatabaseQueryException(DatabaseException):
    """DB 쿼리 실행 오류"""
    def __init__(self, operation: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Failed to {operation}"
        super().__init__(message, "DB_QUERY_ERROR",
                        details or {"operation": operation, "reason": reason})


# 유효성 검증 관련 예외
class ValidationException(CatalogException):
    """유효성 검증 예외"""

    status_code = 400

    def __init__(self, field: str, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Validation failed for '{field}': {reason}"
        super().__init__(message, "VALIDATION_ERROR",
                        details or {"field": field, "reason": reason})


class InvalidQueryException(ValidationException):
    """유효하지 않은 검색어"""
    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("query", reason, details)


class InvalidPriceException(ValidationException):
    """유효하지 않은 가격"""
    def __init__(self, price: Any, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("price", f"{reason} (value: {price})", details)


class InvalidURLException(ValidationException):
    """유효하지 않은 이미지 URL"""
    def __init__(self, url: str, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__("image_url", f"{reason} (url: {url})", details)


class InvalidProductIdException(ValidationException):
    """유효하지 않은 상품 ID"""
    def __init__(self, product_id: Any, details: Optional[dict[str, Any]] = None):
        CatalogException.__init__(self, "Invalid product ID", "VALIDATION_ERROR",
                                  details or {"field": "id", "product_id": product_id})
