"""데이터베이스 모델"""
from sqlalchemy import Column, Integer, Text, Float, DateTime, func
from src.core.database import Base


class Product(Base):
    """상품 테이블"""
    
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)  # 비어 있으면 UI에서 placeholder 사용
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    
    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name}, price={self.price})>"
