"""문맥 검색 매처 유닛 테스트

- 외부 호출 없음 (DB/HTTP 금지)
- 직접 일치 / 문맥 확장 / 순서 보존 검증
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest

from src.utils.text.matching import (
    ContextualSynonymTable,
    QueryMatcher,
    filter_catalog,
    matches,
)


@dataclass(frozen=True)
class Item:
    name: str
    description: str
    id: int = 0


OFFICE_CHAIR = Item("Office Chair", "Ergonomic chair with lumbar support.", 1)
WOODEN_DESK = Item("Wooden Desk", "Solid wood desk with drawer storage perfect for home office.", 2)
TABLE_LAMP = Item("Table Lamp", "Modern desk lamp with adjustable brightness and color temperature.", 3)
BOOKSHELF = Item("Bookshelf", "Five-tier bookshelf with ample storage for books.", 4)
PILLOW = Item("Memory Foam Pillow", "Cooling pillow for side sleepers.", 5)

CATALOG = [OFFICE_CHAIR, WOODEN_DESK, TABLE_LAMP, BOOKSHELF, PILLOW]


class TestEmptyQuery:
    """빈 검색어는 필터링하지 않음"""

    @pytest.mark.parametrize("query", ["", " ", "   ", "\t", "\n  "])
    def test_blank_query_matches_everything(self, query):
        assert all(matches(p, query) for p in CATALOG)

    def test_none_query_matches_everything(self):
        assert all(matches(p, None) for p in CATALOG)

    def test_filter_with_empty_query_returns_same_content_and_order(self):
        result = filter_catalog(CATALOG, "")
        assert result == CATALOG
        assert result is not CATALOG


class TestDirectMatch:
    """이름/설명 부분 일치"""

    def test_name_substring(self):
        assert matches(OFFICE_CHAIR, "chair") is True

    def test_description_substring(self):
        assert matches(BOOKSHELF, "five-tier") is True

    def test_case_insensitive(self):
        assert matches(Item("office chair", "seat"), "CHAIR") is True
        assert matches(Item("OFFICE CHAIR", "SEAT"), "chair") is True

    def test_no_trimming_of_query(self):
        """공백 포함 검색어는 그대로 부분 문자열로 비교"""
        assert matches(OFFICE_CHAIR, "office chair") is True
        assert matches(OFFICE_CHAIR, "office  chair") is False

    @pytest.mark.parametrize(
        "product",
        CATALOG,
        ids=[p.name for p in CATALOG],
    )
    def test_any_substring_of_name_matches(self, product):
        name = product.name
        for start in range(len(name)):
            for end in range(start + 1, len(name) + 1):
                fragment = name[start:end]
                if fragment.strip():
                    assert matches(product, fragment.swapcase())

    def test_no_match(self):
        assert matches(OFFICE_CHAIR, "television") is False


class TestContextualMatch:
    """트리거 키워드 -> 연관 단어 확장"""

    def test_sit_finds_chair(self):
        assert matches(OFFICE_CHAIR, "need something to sit on") is True

    def test_keyword_alone_does_not_need_literal_keyword(self):
        """'work'는 상품에 없어도 'desk'/'office'로 일치"""
        assert "work" not in WOODEN_DESK.description.lower()
        assert matches(WOODEN_DESK, "work") is True

    def test_keyword_literally_present_still_matches(self):
        product = Item("Planner", "Keeps your work organised.")
        assert matches(product, "work") is True

    def test_sleep_does_not_match_lamp(self):
        assert matches(TABLE_LAMP, "sleep") is False

    def test_sleep_matches_pillow(self):
        assert matches(PILLOW, "sleep") is True

    def test_keyword_inside_longer_word_triggers(self):
        """트리거는 단어 경계가 아닌 부분 문자열 기준"""
        assert matches(TABLE_LAMP, "lightweight") is True

    def test_union_across_triggered_keywords(self):
        """여러 키워드가 동시에 트리거되면 합집합 (마지막 키워드로 덮어쓰지 않음)"""
        query = "somewhere to sit while I sleep"
        assert matches(OFFICE_CHAIR, query) is True
        assert matches(PILLOW, query) is True
        assert matches(TABLE_LAMP, query) is False

    def test_union_when_earlier_keyword_matches_and_later_does_not(self):
        # 'sit'(chair 일치) 다음에 'storage'(불일치)가 와도 결과 유지
        chair = Item("Chair", "Plain seat.")
        assert matches(chair, "sit storage") is True

    def test_overlapping_related_terms(self):
        """chair는 sit/work 양쪽에 있음 (불리언이므로 중복 무관)"""
        assert matches(OFFICE_CHAIR, "sit at work") is True

    def test_uppercase_keyword_in_query(self):
        assert matches(OFFICE_CHAIR, "SIT") is True


class TestFilterCatalog:
    """카탈로그 필터링"""

    def test_empty_catalog(self):
        assert filter_catalog([], "chair") == []
        assert filter_catalog([], "") == []

    def test_preserves_order(self):
        result = filter_catalog(CATALOG, "desk")
        assert [p.id for p in result] == [2, 3]

    def test_reversed_input_keeps_relative_order(self):
        reversed_catalog = list(reversed(CATALOG))
        result = filter_catalog(reversed_catalog, "storage")
        assert [p.id for p in result] == [4, 3, 2]

    def test_does_not_mutate_input(self):
        catalog = list(CATALOG)
        filter_catalog(catalog, "chair")
        assert catalog == CATALOG

    @pytest.mark.parametrize("query", ["", "chair", "work", "sleep", "light", "nothing", "sit storage"])
    def test_idempotent(self, query):
        once = filter_catalog(CATALOG, query)
        assert filter_catalog(once, query) == once

    def test_storage_context(self):
        result = filter_catalog(CATALOG, "storage ideas")
        assert [p.id for p in result] == [2, 3, 4]

    def test_accepts_mappings(self):
        catalog = [
            {"id": 1, "name": "Sofa", "description": "Two-seat"},
            {"id": 2, "name": "Rug", "description": "Wool"},
        ]
        assert filter_catalog(catalog, "sit") == [catalog[0]]


class TestDefensiveInputs:
    """누락 필드는 빈 문자열로 취급 (예외 없음)"""

    def test_missing_description(self):
        @dataclass
        class Partial:
            name: str
            description: Optional[str] = None

        assert matches(Partial("Stool"), "sit") is True
        assert matches(Partial("Rug"), "sit") is False

    def test_object_without_fields(self):
        assert matches(object(), "chair") is False
        assert matches(object(), "") is True


class TestInjectedSynonymTable:
    """동의어 테이블 주입"""

    def test_custom_table(self):
        matcher = QueryMatcher(ContextualSynonymTable.from_mapping({"cook": ["pan", "pot"]}))
        pan = Item("Frying Pan", "Non-stick")
        assert matcher.matches(pan, "I want to cook") is True
        # 기본 테이블 키워드는 더 이상 동작하지 않음
        assert matcher.matches(OFFICE_CHAIR, "sit") is False

    def test_empty_table_only_direct_match(self):
        matcher = QueryMatcher(ContextualSynonymTable.from_mapping({}))
        assert matcher.matches(OFFICE_CHAIR, "sit") is False
        assert matcher.matches(OFFICE_CHAIR, "chair") is True

    def test_table_is_lowercased(self):
        table = ContextualSynonymTable.from_mapping({"SIT": ["CHAIR"]})
        assert table.entries == {"sit": frozenset({"chair"})}

    def test_scalar_terms_not_split_into_characters(self):
        table = ContextualSynonymTable.from_mapping({"sit": "Chair"})
        assert table.entries == {"sit": frozenset({"chair"})}

    def test_table_is_immutable(self):
        table = ContextualSynonymTable.default()
        with pytest.raises(TypeError):
            table.entries["new"] = frozenset({"x"})  # type: ignore[index]

    def test_default_table_contents(self):
        table = ContextualSynonymTable.default()
        assert set(table.entries) == {"sit", "work", "sleep", "light", "storage"}
        assert table.entries["sit"] == frozenset({"chair", "sofa", "stool", "bench"})
        assert "chair" in table.entries["work"]

    def test_triggered_terms_union(self):
        table = ContextualSynonymTable.default()
        terms = table.triggered_terms("sit and sleep")
        assert {"chair", "bed"} <= terms
        assert "lamp" not in terms
