"""상품 카탈로그 서비스 - 비즈니스 로직 오케스트레이션"""
from typing import List, Optional

from sqlalchemy.orm import Session

from src.core.exceptions import InvalidProductIdException, ProductNotFoundException
from src.core.logging import logger, sanitize_for_log
from src.core.security import SecurityValidator
from src.repositories.impl.product_repository import ProductRepository
from src.repositories.models import Product
from src.schemas.product_schema import ProductCreateRequest
from src.utils.text.matching import QueryMatcher


class ProductCatalogService:
    """
    상품 카탈로그 서비스 - SRP: 비즈니스 로직 조율만 담당

    - DB 저장/조회는 ProductRepository
    - 검색 필터링은 QueryMatcher
    """

    def __init__(self, db: Session, matcher: Optional[QueryMatcher] = None):
        self.repository = ProductRepository(db)
        self.matcher = matcher if matcher is not None else QueryMatcher()

    def list_products(self) -> List[Product]:
        """전체 상품 (등록 순서)"""
        return self.repository.list_all()

    def get_product(self, product_id: int) -> Product:
        """ID로 상품 조회

        Raises:
            InvalidProductIdException: id가 양의 정수가 아닐 때
            ProductNotFoundException: 상품이 없을 때
        """
        self._validate_id(product_id)
        product = self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    def create_product(self, data: ProductCreateRequest) -> Product:
        """상품 등록

        스키마 검증을 통과한 요청이라도 가격/이미지 URL은 한 번 더 확인합니다.
        """
        SecurityValidator.validate_price(data.price)
        SecurityValidator.validate_image_url(data.image_url)

        return self.repository.create(
            name=data.name,
            price=data.price,
            description=data.description,
            image_url=data.image_url,
        )

    def delete_product(self, product_id: int) -> Product:
        """상품 삭제 후 삭제된 상품 반환"""
        self._validate_id(product_id)
        product = self.repository.delete(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product

    def search_products(self, query: Optional[str]) -> List[Product]:
        """
        상품 검색

        1. 검색어 검증 (빈 검색어 = 전체)
        2. 전체 카탈로그 로드
        3. QueryMatcher로 필터링 (순서 유지)
        """
        if query is None or not query.strip():
            query = ""
        SecurityValidator.validate_query(query)

        catalog = self.repository.list_all()
        results = self.matcher.filter_catalog(catalog, query)
        logger.info(
            f"Search '{sanitize_for_log(query, max_length=50)}': "
            f"{len(results)}/{len(catalog)} products matched"
        )
        return results

    @staticmethod
    def _validate_id(product_id: int) -> None:
        if product_id < 1:
            raise InvalidProductIdException(product_id)
