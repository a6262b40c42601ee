"""Pydantic 스키마 정의 (Security & Validation Enhanced)"""
from typing import Optional, List, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime

from src.core.config import settings


class ProductCreateRequest(BaseModel):
    """상품 등록 요청

    이미지 URL은 `imageUrl`(브라우저 폼) 또는 `image_url` 둘 다 받습니다.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=settings.max_name_length, description="상품명")
    price: float = Field(..., gt=0, le=settings.max_price, allow_inf_nan=False, description="가격 (0 초과)")
    description: str = Field(..., min_length=1, max_length=settings.max_description_length, description="상품 설명")
    image_url: Optional[str] = Field(None, alias="imageUrl", max_length=settings.max_image_url_length, description="이미지 URL (선택)")

    @field_validator('name', 'description')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """공백만으로 구성된 값 거절"""
        if not v.strip():
            raise ValueError('must not be blank')
        return v.strip()

    @field_validator('image_url')
    @classmethod
    def validate_image_url(cls, v: Optional[str]) -> Optional[str]:
        """빈 문자열은 "이미지 없음"으로 취급"""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not v.startswith(('http://', 'https://')):
            raise ValueError('URL must start with http:// or https://')
        return v


class ProductResponse(BaseModel):
    """상품 응답"""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., ge=1, description="상품 ID")
    name: str
    price: float
    description: str
    image_url: Optional[str] = Field(None, description="이미지 URL (없으면 null)")
    created_at: datetime


class ProductDeleteResponse(BaseModel):
    """상품 삭제 응답"""
    message: str
    product: ProductResponse


class ErrorResponse(BaseModel):
    """에러 응답"""
    message: str
    error_code: str | None = None
    errors: Optional[List[Any]] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
