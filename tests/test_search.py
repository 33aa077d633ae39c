from __future__ import annotations

from types import SimpleNamespace

import pytest

from ucfinder.core import search as search_module
from ucfinder.core.exceptions import InvalidPatternError, SearchTimeoutError
from ucfinder.core.parser import load_index
from ucfinder.core.search import RESULT_LIMIT, SearchEngine


def _codes(matches):
    return [match.hex_code for match in matches]


def test_decimal_references_are_tagged(index):
    engine = SearchEngine(index)
    for query in ("233", "&#233;", "&#233"):
        matches = engine.search(query)
        assert matches[0].hex_code == "00E9"
        assert matches[0].context == "[Decimal: 233]"
        assert matches[0].display_label == "[Decimal: 233] LATIN SMALL LETTER E WITH ACUTE"


def test_hex_references_resolve_without_tag(index):
    engine = SearchEngine(index)
    for query in ("U+00e9", "u+00E9", "&#xE9;", "&#x00e9", "e9"):
        matches = engine.search(query)
        assert _codes(matches)[:1] == ["00E9"], query
        assert matches[0].context is None
        assert matches[0].display_label == "LATIN SMALL LETTER E WITH ACUTE"


def test_bare_digits_try_decimal_then_hex(index):
    engine = SearchEngine(index)
    assert _codes(engine.search("65")) == ["0041"]
    assert _codes(engine.search("41")) == ["0041"]
    assert engine.search("41")[0].context is None


def test_entity_names_are_case_sensitive_first(index):
    engine = SearchEngine(index)
    assert engine.search("eacute")[0].hex_code == "00E9"
    assert engine.search("Eacute")[0].hex_code == "00C9"
    assert engine.search("&Eacute;")[0].context == "[&Eacute;]"


def test_entity_lowercase_fallback(index):
    matches = SearchEngine(index).search("ALPHA")
    assert matches[0].hex_code == "03B1"
    assert matches[0].context == "[&alpha;]"
    assert _codes(matches) == ["03B1", "0391"]


def test_entity_pointing_at_unknown_record_is_skipped(index):
    assert SearchEngine(index).search("&amp;") == []


def test_exact_match_wins_over_substring_duplicate(index):
    matches = SearchEngine(index).search("nbsp")
    assert _codes(matches) == ["00A0"]
    assert matches[0].display_label == "[&nbsp;] NO-BREAK SPACE"
    assert matches[0].alias == "NBSP"


def test_substring_search_is_case_insensitive_and_ordered(index):
    matches = SearchEngine(index).search("small letter")
    assert _codes(matches) == ["0061", "0062", "00E9", "03B1", "03B2"]


def test_substring_search_reads_aliases(index):
    assert _codes(SearchEngine(index).search("BSP")) == ["00A0"]


def test_results_are_capped(index):
    matches = SearchEngine(index).search("a")
    assert len(matches) == RESULT_LIMIT + 1
    assert _codes(matches)[:3] == ["0020", "0021", "0041"]


def test_twenty_matching_descriptions_return_eleven_in_order():
    lines = "".join(f"{'' if n else '65'}\tTEST GLYPH {n}\n" for n in range(20))
    engine = SearchEngine(load_index(lines))
    matches = engine.search("glyph")
    assert len(matches) == 11
    assert [match.description for match in matches] == [f"TEST GLYPH {n}" for n in range(11)]


def test_exact_matches_come_before_substring_matches():
    lines = "65\tLATIN CAPITAL LETTER A\n" + "".join(
        f"\tLETTER NUMBER {n}\n" for n in range(20)
    )
    engine = SearchEngine(load_index(lines))
    matches = engine.search("&#66;")
    assert _codes(matches) == ["0042"]
    matches = engine.search("65")
    assert matches[0].context == "[Decimal: 65]"
    assert matches[0].hex_code == "0041"


def test_empty_query_returns_nothing(index):
    assert SearchEngine(index).search("") == []


def test_exact_matches_only(index):
    assert _codes(SearchEngine(index).exact_matches("alpha")) == ["03B1"]


def test_match_character_is_rendered(index):
    match = SearchEngine(index).search("snowman")[0]
    assert match.character == "☃"
    assert match.code_point == "U+2603"


def test_regex_search_tests_descriptions(index):
    engine = SearchEngine(index)
    assert _codes(engine.regex_search("^latin small")) == ["0061", "0062", "00E9"]
    assert _codes(engine.regex_search("ALPHA$")) == ["0391", "03B1"]


def test_regex_search_ignores_alias_by_default(index):
    assert SearchEngine(index).regex_search("^nbsp$") == []
    engine = SearchEngine(index, regex_match_alias=True)
    assert _codes(engine.regex_search("^nbsp$")) == ["00A0"]


def test_regex_search_has_no_exact_match_phase(index):
    assert SearchEngine(index).regex_search("233") == []


def test_regex_search_is_capped(index):
    assert len(SearchEngine(index).regex_search(".")) == RESULT_LIMIT + 1


@pytest.mark.parametrize("pattern", ["(", "[a-", "*x"])
def test_invalid_pattern_raises(index, pattern):
    with pytest.raises(InvalidPatternError) as excinfo:
        SearchEngine(index).regex_search(pattern)
    assert excinfo.value.pattern == pattern


def test_regex_search_respects_time_budget(index, monkeypatch):
    calls: list[float] = []

    def fake_monotonic() -> float:
        calls.append(0.0)
        return 0.0 if len(calls) == 1 else 5.0

    monkeypatch.setattr(search_module, "time", SimpleNamespace(monotonic=fake_monotonic))
    engine = SearchEngine(index, regex_timeout=1.0)
    with pytest.raises(SearchTimeoutError):
        engine.regex_search("zzz")


def test_regex_search_without_budget(index):
    engine = SearchEngine(index, regex_timeout=None)
    assert _codes(engine.regex_search("snow")) == ["2603"]


def test_decimal_shortcuts_only_accept_ascii_digits(index):
    engine = SearchEngine(index)
    assert engine.search("٦٥") == []
    assert engine.exact_matches("&#٦٥;") == []
