"""문맥 키워드 기반 상품 검색 매칭.

검색어를 상품명/설명에 대해 대소문자 무시 부분 문자열로 비교하고,
검색어에 트리거 키워드("sit", "work" 등)가 들어 있으면 연관 단어
("chair", "desk" 등)가 들어간 상품도 결과에 포함합니다.

랭킹/점수는 없고 포함 여부(yes/no)만 판단합니다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Optional, Sequence, TypeVar

T = TypeVar("T")


DEFAULT_CONTEXTUAL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "sit": ("chair", "sofa", "stool", "bench"),
    "work": ("desk", "office", "chair", "computer", "keyboard"),
    "sleep": ("bed", "pillow", "mattress", "blanket"),
    "light": ("lamp", "bulb", "lighting"),
    "storage": ("cabinet", "drawer", "shelf", "desk"),
}


@dataclass(frozen=True)
class ContextualSynonymTable:
    """트리거 키워드 -> 연관 단어 집합 (불변)

    키워드와 연관 단어는 소문자로 저장됩니다.
    """

    entries: Mapping[str, frozenset[str]]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "ContextualSynonymTable":
        entries: dict[str, frozenset[str]] = {}
        for keyword, terms in mapping.items():
            key = str(keyword).lower()
            if not key:
                continue
            if isinstance(terms, str):
                # YAML 스칼라 ("sit: chair")는 단어 하나로 취급
                terms = [terms]
            related = frozenset(str(t).lower() for t in terms if str(t))
            entries[key] = entries.get(key, frozenset()) | related
        return cls(entries=MappingProxyType(entries))

    @classmethod
    def default(cls) -> "ContextualSynonymTable":
        return cls.from_mapping(DEFAULT_CONTEXTUAL_KEYWORDS)

    def triggered_terms(self, lowered_query: str) -> frozenset[str]:
        """검색어에 포함된 모든 키워드의 연관 단어 합집합"""
        triggered: set[str] = set()
        for keyword, related in self.entries.items():
            if keyword in lowered_query:
                triggered |= related
        return frozenset(triggered)

    def __len__(self) -> int:
        return len(self.entries)


def _field(product: Any, name: str) -> str:
    if isinstance(product, Mapping):
        value = product.get(name)
    else:
        value = getattr(product, name, None)
    return value.lower() if isinstance(value, str) else ""


class QueryMatcher:
    """상품 카탈로그 필터

    Stateless: 생성 시 받은 동의어 테이블만 읽으므로
    여러 요청/스레드에서 그대로 공유해도 됩니다.
    """

    def __init__(self, synonyms: Optional[ContextualSynonymTable] = None):
        self.synonyms = synonyms if synonyms is not None else ContextualSynonymTable.default()

    def matches(self, product: Any, query: Optional[str]) -> bool:
        """상품이 검색어에 해당하는지 여부

        Args:
            product: name/description 속성(또는 키)을 가진 상품
            query: 검색어. None/공백만 있으면 모든 상품이 해당

        Returns:
            직접 일치 OR 트리거된 문맥 일치 중 하나라도 있으면 True
        """
        if query is None or not query.strip():
            return True

        lowered_query = query.lower()
        name = _field(product, "name")
        description = _field(product, "description")

        if lowered_query in name or lowered_query in description:
            return True

        for term in self.synonyms.triggered_terms(lowered_query):
            if term in name or term in description:
                return True

        return False

    def filter_catalog(self, catalog: Sequence[T], query: Optional[str]) -> list[T]:
        """카탈로그 순서를 유지한 채 해당 상품만 골라 새 리스트로 반환"""
        return [product for product in catalog if self.matches(product, query)]


_default_matcher = QueryMatcher()


def matches(product: Any, query: Optional[str]) -> bool:
    """기본 동의어 테이블로 `QueryMatcher.matches` 수행"""
    return _default_matcher.matches(product, query)


def filter_catalog(catalog: Sequence[T], query: Optional[str]) -> list[T]:
    """기본 동의어 테이블로 `QueryMatcher.filter_catalog` 수행"""
    return _default_matcher.filter_catalog(catalog, query)
