"""Fuzzy subsequence scoring in the style of the skim matcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

_HARD_SEPARATORS = frozenset(" /\\|()[]{}")


class CaseMatching(Enum):
    """How letter case is treated when matching."""

    RESPECT = auto()
    IGNORE = auto()
    SMART = auto()


@dataclass(frozen=True)
class ScoreConfig:
    """Weights used when scoring a match."""

    score_match: int = 16
    gap_start: int = -3
    gap_extension: int = -1
    bonus_first_char_multiplier: int = 2
    bonus_head: int = 8
    bonus_break: int = 7
    bonus_camel: int = 6
    bonus_consecutive: int = 4
    penalty_case_mismatch: int = -2


class _CharType(Enum):
    EMPTY = auto()
    UPPER = auto()
    LOWER = auto()
    NUMBER = auto()
    HARD_SEP = auto()
    SOFT_SEP = auto()


def _char_type(ch: str) -> _CharType:
    if ch in _HARD_SEPARATORS:
        return _CharType.HARD_SEP
    if ch.isdigit():
        return _CharType.NUMBER
    if ch.isupper():
        return _CharType.UPPER
    if ch.isalpha():
        return _CharType.LOWER
    return _CharType.SOFT_SEP


_WORD_TYPES = frozenset({_CharType.LOWER, _CharType.UPPER, _CharType.NUMBER})


def _role_bonus(config: ScoreConfig, prev: _CharType, cur: _CharType) -> int:
    if prev in (_CharType.EMPTY, _CharType.HARD_SEP) and cur is not _CharType.HARD_SEP:
        return config.bonus_head
    if prev is _CharType.SOFT_SEP and cur in _WORD_TYPES:
        return config.bonus_break
    if prev is _CharType.LOWER and cur is _CharType.UPPER:
        return config.bonus_camel
    if prev is not _CharType.NUMBER and cur is _CharType.NUMBER:
        return config.bonus_camel
    return 0


def _best(first: int | None, second: int | None) -> int | None:
    if first is None:
        return second
    if second is None:
        return first
    return max(first, second)


def _fold(text: str, case_sensitive: bool) -> list[str]:
    """Split ``text`` into characters, lower-casing each unless case matters."""
    if case_sensitive:
        return list(text)
    return [ch.lower() for ch in text]


@dataclass(frozen=True)
class FuzzyMatcher:
    """Scores how well a pattern matches a choice as an ordered subsequence."""

    config: ScoreConfig = field(default_factory=ScoreConfig)
    case: CaseMatching = CaseMatching.SMART

    def _case_sensitive(self, pattern: str) -> bool:
        if self.case is CaseMatching.RESPECT:
            return True
        if self.case is CaseMatching.IGNORE:
            return False
        return any(ch.isupper() for ch in pattern)

    def _bonuses(self, choice: str) -> list[int]:
        bonuses = []
        prev = _CharType.EMPTY
        for ch in choice:
            cur = _char_type(ch)
            bonuses.append(_role_bonus(self.config, prev, cur))
            prev = cur
        return bonuses

    def fuzzy_match(self, choice: str, pattern: str) -> int | None:
        """Return the best score of ``pattern`` in ``choice``, or None if it does not match.

        An empty pattern matches everything with a score of 0.
        """
        if not pattern:
            return 0
        case_sensitive = self._case_sensitive(pattern)
        folded_pattern = _fold(pattern, case_sensitive)
        folded_choice = _fold(choice, case_sensitive)

        remaining = iter(folded_choice)
        if not all(pat in remaining for pat in folded_pattern):
            return None

        cfg = self.config
        bonuses = self._bonuses(choice)
        prev_scores: list[int | None] = []
        prev_bonuses: list[int] = []

        for row, (pat_char, pat_folded) in enumerate(zip(pattern, folded_pattern)):
            scores: list[int | None] = []
            run_bonuses: list[int] = []
            gapped: int | None = None
            for col, (ch, ch_folded, bonus) in enumerate(zip(choice, folded_choice, bonuses)):
                if row > 0 and col >= 2:
                    two_back = prev_scores[col - 2]
                    gapped = _best(
                        None if gapped is None else gapped + cfg.gap_extension,
                        None if two_back is None else two_back + cfg.gap_start,
                    )
                if ch_folded != pat_folded:
                    scores.append(None)
                    run_bonuses.append(0)
                    continue

                run_bonus = bonus
                if row == 0:
                    score: int | None = cfg.score_match + bonus * cfg.bonus_first_char_multiplier
                else:
                    score = None if gapped is None else gapped + cfg.score_match + bonus
                    diagonal = prev_scores[col - 1] if col >= 1 else None
                    if diagonal is not None:
                        consecutive_bonus = max(bonus, prev_bonuses[col - 1], cfg.bonus_consecutive)
                        candidate = diagonal + cfg.score_match + consecutive_bonus
                        if score is None or candidate >= score:
                            score = candidate
                            run_bonus = consecutive_bonus

                if score is not None and ch != pat_char:
                    score += cfg.penalty_case_mismatch
                scores.append(score)
                run_bonuses.append(run_bonus)

            if all(score is None for score in scores):
                return None
            prev_scores, prev_bonuses = scores, run_bonuses

        return max(score for score in prev_scores if score is not None)