"""Product Routes

HTTP Layer는 요청을 ProductCatalogService로 위임하는 Translator 역할만 수행합니다.
예외(CatalogException 계열)는 앱에 등록된 핸들러가 상태 코드로 변환합니다.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from src.core.database import get_db
from src.core.exceptions import InvalidProductIdException
from src.core.logging import logger
from src.schemas.product_schema import (
    ProductCreateRequest,
    ProductDeleteResponse,
    ProductResponse,
)
from src.services.impl.catalog_service import ProductCatalogService
from src.utils.resource_loader import load_contextual_keywords
from src.utils.text.matching import QueryMatcher

router = APIRouter(prefix="/api/products", tags=["products"])

# 싱글톤 매처 (동의어 테이블은 프로세스당 한 번 로드)
_matcher: Optional[QueryMatcher] = None


def get_query_matcher() -> QueryMatcher:
    """QueryMatcher 싱글톤"""
    global _matcher
    if _matcher is None:
        _matcher = QueryMatcher(load_contextual_keywords())
    return _matcher


def get_catalog_service(
    db: Session = Depends(get_db),
    matcher: QueryMatcher = Depends(get_query_matcher),
) -> ProductCatalogService:
    """요청 단위 ProductCatalogService"""
    return ProductCatalogService(db, matcher)


def _parse_product_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidProductIdException(raw)


@router.get("", response_model=List[ProductResponse])
async def list_products(service: ProductCatalogService = Depends(get_catalog_service)):
    """전체 상품 목록"""
    return service.list_products()


@router.get("/search", response_model=List[ProductResponse])
async def search_products(
    query: Optional[str] = Query(None, description="검색어 (비어 있으면 전체)"),
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """상품 검색 (query string)

    - 이름/설명 부분 일치
    - 문맥 키워드 확장 ("need something to sit on" -> chair, sofa ...)
    """
    return service.search_products(query)


@router.get("/search/{query}", response_model=List[ProductResponse])
async def search_products_by_path(
    query: str,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """상품 검색 (path segment)"""
    return service.search_products(query)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """상품 단건 조회"""
    return service.get_product(_parse_product_id(product_id))


@router.post("", response_model=ProductResponse, status_code=201)
async def create_product(
    request: ProductCreateRequest,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """상품 등록"""
    logger.info(f"[API] Create product request (name length: {len(request.name)})")
    return service.create_product(request)


@router.delete("/{product_id}", response_model=ProductDeleteResponse)
async def delete_product(
    product_id: str,
    service: ProductCatalogService = Depends(get_catalog_service),
):
    """상품 삭제"""
    product = service.delete_product(_parse_product_id(product_id))
    return ProductDeleteResponse(
        message="Product deleted successfully",
        product=ProductResponse.model_validate(product),
    )
