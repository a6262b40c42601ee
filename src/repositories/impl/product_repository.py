"""상품 리포지토리 - DB 접근 로직"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.repositories.models import Product
from src.core.logging import logger
from src.core.exceptions import DatabaseQueryException


# 빈 카탈로그에 넣는 샘플 상품
SAMPLE_PRODUCTS: tuple[dict, ...] = (
    {
        "name": "Office Chair",
        "price": 199.99,
        "description": "Ergonomic office chair with lumbar support and adjustable armrests.",
        "image_url": "https://images.unsplash.com/photo-1580480055273-228ff5388ef8",
    },
    {
        "name": "Wooden Desk",
        "price": 349.99,
        "description": "Solid wood desk with drawer storage perfect for home office.",
        "image_url": "https://images.unsplash.com/photo-1518455027359-f3f8164ba6bd",
    },
    {
        "name": "Table Lamp",
        "price": 59.99,
        "description": "Modern desk lamp with adjustable brightness and color temperature.",
        "image_url": "https://images.unsplash.com/photo-1507473885765-e6ed057f782c",
    },
    {
        "name": "Bookshelf",
        "price": 129.99,
        "description": "Five-tier bookshelf with ample storage for books and decorative items.",
        "image_url": "https://images.unsplash.com/photo-1594620302200-9a762244a156",
    },
)


class ProductRepository:
    """상품 데이터 액세스 레이어"""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        name: str,
        price: float,
        description: str,
        image_url: Optional[str] = None,
    ) -> Product:
        """상품 생성"""
        try:
            product = Product(
                name=name,
                price=price,
                description=description,
                image_url=image_url or None,
            )
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
            logger.info(f"Product created: {product.id}")
            return product
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create product: {e}")
            raise DatabaseQueryException("create product", str(e))

    def get_by_id(self, product_id: int) -> Optional[Product]:
        """ID로 상품 조회"""
        try:
            return self.db.query(Product).filter(Product.id == product_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch product {product_id}: {e}")
            raise DatabaseQueryException("fetch product", str(e))

    def list_all(self) -> List[Product]:
        """전체 상품 (id 오름차순 = 등록 순서)"""
        try:
            return self.db.query(Product).order_by(Product.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch products: {e}")
            raise DatabaseQueryException("fetch products", str(e))

    def delete(self, product_id: int) -> Optional[Product]:
        """상품 삭제. 삭제된 상품을 반환하고, 없으면 None"""
        try:
            product = self.db.query(Product).filter(Product.id == product_id).first()
            if product is None:
                return None
            self.db.delete(product)
            self.db.commit()
            logger.info(f"Product deleted: {product_id}")
            return product
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete product {product_id}: {e}")
            raise DatabaseQueryException("delete product", str(e))

    def count(self) -> int:
        """전체 상품 수"""
        return self.db.query(func.count(Product.id)).scalar() or 0

    def seed_if_empty(self) -> int:
        """테이블이 비어 있을 때만 샘플 상품을 등록하고, 등록한 개수를 반환"""
        if self.count() > 0:
            return 0
        try:
            self.db.add_all(Product(**data) for data in SAMPLE_PRODUCTS)
            self.db.commit()
            return len(SAMPLE_PRODUCTS)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to seed sample products: {e}")
            raise DatabaseQueryException("seed products", str(e))
