"""헬스 체크 엔드포인트"""
from fastapi import APIRouter
from datetime import datetime

from src.schemas.product_schema import HealthResponse
from src.core.database import engine
from src.core.logging import logger
from src import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트
    
    - 서버 상태
    - DB 연결 상태
    """
    db_ok = False
    
    try:
        with engine.connect() as connection:
            # 간단한 쿼리로 연결 확인
            connection.exec_driver_sql("SELECT 1")
            db_ok = True
    except Exception as e:
        logger.error(f"Database connection error: {e}")
        db_ok = False
    
    return HealthResponse(
        status="ok" if db_ok else "error",
        timestamp=datetime.now(),
        version=__version__
    )
