"""상품 카탈로그 서비스"""

__version__ = "1.0.0"
