import pytest

from oxirun.fuzzy import CaseMatching, FuzzyMatcher


@pytest.fixture
def matcher():
    return FuzzyMatcher()


def test_empty_pattern_scores_zero(matcher):
    assert matcher.fuzzy_match("firefox", "") == 0


def test_out_of_order_pattern_does_not_match(matcher):
    assert matcher.fuzzy_match("firefox", "xf") is None


def test_missing_characters_do_not_match(matcher):
    assert matcher.fuzzy_match("firefox", "zoo") is None


@pytest.mark.parametrize(
    ("choice", "pattern", "matches"),
    [
        ("firefox", "ffx", True),
        ("firefox", "fox", True),
        ("firefox", "fireffox", False),
        ("Terminal", "trm", True),
        ("Terminal", "lt", False),
    ],
)
def test_matches_exactly_when_subsequence(matcher, choice, pattern, matches):
    assert (matcher.fuzzy_match(choice, pattern) is not None) == matches


def test_matching_score_is_positive(matcher):
    assert matcher.fuzzy_match("firefox", "ffx") > 0


def test_smart_case_uppercase_pattern_is_case_sensitive(matcher):
    assert matcher.fuzzy_match("firefox", "F") is None


def test_smart_case_lowercase_pattern_ignores_case(matcher):
    assert matcher.fuzzy_match("Firefox", "fire") > 0


def test_ignore_case_accepts_uppercase_pattern():
    assert FuzzyMatcher(case=CaseMatching.IGNORE).fuzzy_match("firefox", "F") > 0


def test_respect_case_rejects_other_case():
    assert FuzzyMatcher(case=CaseMatching.RESPECT).fuzzy_match("Terminal", "t") is None


def test_case_mismatch_costs_score(matcher):
    assert matcher.fuzzy_match("firefox", "f") > matcher.fuzzy_match("Firefox", "f")


def test_consecutive_beats_scattered(matcher):
    assert matcher.fuzzy_match("fire", "fire") > matcher.fuzzy_match("fxixrxe", "fire")


def test_gap_is_penalised(matcher):
    assert matcher.fuzzy_match("abc", "ab") > matcher.fuzzy_match("abc", "ac")


def test_word_start_beats_word_middle(matcher):
    assert matcher.fuzzy_match("foo bar", "b") > matcher.fuzzy_match("foobar", "b")


def test_longer_match_scores_higher(matcher):
    assert matcher.fuzzy_match("firefox", "firefox") > matcher.fuzzy_match("firefox", "fire")


def test_full_name_clears_sort_threshold(matcher):
    assert matcher.fuzzy_match("Firefox", "firefox") >= 25


def test_score_is_deterministic(matcher):
    first = matcher.fuzzy_match("Visual Studio Code", "vsc")
    second = FuzzyMatcher().fuzzy_match("Visual Studio Code", "vsc")
    assert first > 0
    assert second == first