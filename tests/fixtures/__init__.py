"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진/네트워크 의존 없음
"""

from .products import PRODUCTS
from .api_payloads import API_PAYLOADS, INVALID_PAYLOADS

__all__ = [
    "PRODUCTS",
    "API_PAYLOADS",
    "INVALID_PAYLOADS",
]
