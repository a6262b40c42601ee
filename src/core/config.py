"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""
    
    # 데이터베이스
    database_url: str = "sqlite:///./catalog.db"

    # 테이블이 비어 있을 때 샘플 상품 4개를 넣을지 여부
    seed_sample_data: bool = True

    # 정적 파일 (브라우저 클라이언트)
    static_dir: str = "public"

    # 검색
    # resources/ 기준 상대 경로
    contextual_keywords_path: str = "search/contextual_keywords.yaml"
    max_query_length: int = 500

    # 상품 입력 제한
    max_price: float = 1e9
    max_name_length: int = 200
    max_description_length: int = 5000
    max_image_url_length: int = 2048
    
    # API
    api_title: str = "상품 카탈로그 서비스"
    api_version: str = "1.0.0"
    api_description: str = "상품을 등록하고 문맥 키워드로 검색합니다."
    
    # 로깅
    log_level: str = "INFO"
    
    @field_validator("max_query_length", "max_name_length", "max_description_length", "max_image_url_length")
    @classmethod
    def validate_lengths(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("length limits must be positive")
        return v

    @field_validator("max_price")
    @classmethod
    def validate_max_price(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("max_price must be positive")
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v:
            raise ValueError("database_url must not be empty")
        return v
    
    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
