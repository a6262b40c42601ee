"""데이터베이스 연결 및 세션 관리"""
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool
from contextlib import contextmanager
from typing import Any, Generator

from src.core.config import settings
from src.core.logging import logger

# SQLAlchemy Base
Base = declarative_base()


def _engine_options(database_url: str) -> dict[str, Any]:
    """드라이버별 엔진 옵션

    SQLite는 커넥션 풀 크기 옵션을 받지 않으므로 분리합니다.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # 인메모리 DB는 커넥션 하나를 공유해야 테이블이 유지됨
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """데이터베이스 테이블 초기화 (+ 빈 테이블이면 샘플 상품 등록)"""
    # 모델을 Base.metadata에 등록
    from src.repositories import models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    if settings.seed_sample_data:
        from src.repositories.impl.product_repository import ProductRepository

        with get_db_context() as db:
            inserted = ProductRepository(db).seed_if_empty()
            if inserted:
                logger.info(f"Inserted {inserted} sample products")


def get_db() -> Generator[Session, None, None]:
    """FastAPI Dependency: DB 세션 제공"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Context Manager: DB 세션 제공"""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
