"""전역 테스트 설정

역할:
- 테스트 환경 구성 (인메모리 SQLite)
- 공통 세션/앱 픽스처 주입
- 전역 상태 초기화
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator

import pytest

# src 모듈이 import 시점에 설정을 읽으므로 import 전에 환경 변수 설정
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "INFO"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_SAMPLE_DATA"] = "false"

# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.core.database import Base, get_db  # noqa: E402
from src.repositories.models import Product  # noqa: E402
from tests.fixtures import PRODUCTS  # noqa: E402


@pytest.fixture
def db_session() -> Iterator[Session]:
    """테스트마다 새로 만드는 인메모리 DB 세션"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded_session(db_session: Session) -> Session:
    """PRODUCTS 자산을 등록 순서대로 넣은 세션"""
    for data in PRODUCTS.values():
        db_session.add(Product(**data))
        db_session.commit()
    return db_session


@pytest.fixture
def app(db_session: Session):
    """get_db를 테스트 세션으로 교체한 앱"""
    from src.app import create_app

    application = create_app()

    def override_get_db() -> Iterator[Session]:
        yield db_session

    application.dependency_overrides[get_db] = override_get_db
    yield application
    application.dependency_overrides.clear()
