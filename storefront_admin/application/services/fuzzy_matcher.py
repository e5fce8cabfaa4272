"""Fuzzy matcher: Bitap approximate matching over search entries.

Scores an entry's search_text against the query with a bounded-error Bitap
scan. A candidate match with ``e`` errors found at offset ``loc`` scores

    e / len(pattern) + |location - loc| / distance

(0 is exact). Only candidates at or below the threshold match. The per-entry
score is then normalised by field length so that a hit in a short text ranks
above the same hit in a long one.

Patterns longer than 32 characters are searched in 32-character chunks and
the chunk scores averaged.
"""

import math
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from storefront_admin.application.dtos.search import SearchHit
from storefront_admin.domain.entities import SearchEntry

MAX_BITS = 32
MIN_MATCH_SCORE = 0.001
_TOKEN_RE = re.compile(r"[^ ]+")


@dataclass(frozen=True)
class _Chunk:
    pattern: str
    alphabet: dict[str, int]
    start_index: int


def _pattern_alphabet(pattern: str) -> dict[str, int]:
    """Bitmask per character: bit (len - i - 1) set where pattern[i] is that char."""
    masks: dict[str, int] = {}
    size = len(pattern)
    for i, char in enumerate(pattern):
        masks[char] = masks.get(char, 0) | (1 << (size - i - 1))
    return masks


def _bit_at(bits: list[int], index: int) -> int:
    return bits[index] if index < len(bits) else 0


def field_norm(text: str) -> float:
    """1 / sqrt(token count), rounded half-up to 3 decimals."""
    tokens = len(_TOKEN_RE.findall(text)) or 1
    return math.floor(1000 / math.sqrt(tokens) + 0.5) / 1000


class BitapPattern:
    """Compiled query: lower-cased, split into chunks of at most MAX_BITS."""

    def __init__(
        self,
        pattern: str,
        threshold: float = 0.3,
        distance: int = 100,
        location: int = 0,
    ) -> None:
        self.pattern = pattern.lower()
        self.threshold = threshold
        self.distance = distance
        self.location = location
        self.chunks: list[_Chunk] = []
        if not self.pattern:
            return
        size = len(self.pattern)
        if size <= MAX_BITS:
            self._add_chunk(self.pattern, 0)
            return
        remainder = size % MAX_BITS
        end = size - remainder
        for i in range(0, end, MAX_BITS):
            self._add_chunk(self.pattern[i : i + MAX_BITS], i)
        if remainder:
            start_index = size - MAX_BITS
            self._add_chunk(self.pattern[start_index:], start_index)

    def _add_chunk(self, pattern: str, start_index: int) -> None:
        self.chunks.append(_Chunk(pattern, _pattern_alphabet(pattern), start_index))

    def search_in(self, text: str) -> tuple[bool, float]:
        """Return (is_match, score) for text. Score is 1.0 when there is no match."""
        if not self.chunks:
            return False, 1.0
        text = text.lower()
        if text == self.pattern:
            return True, 0.0
        total = 0.0
        has_match = False
        for chunk in self.chunks:
            is_match, score = self._scan(text, chunk, self.location + chunk.start_index)
            if is_match:
                has_match = True
            total += score
        if not has_match:
            return False, 1.0
        return True, total / len(self.chunks)

    def _score(self, pattern_len: int, errors: int, current: int, expected: int) -> float:
        accuracy = errors / pattern_len
        proximity = abs(expected - current)
        if not self.distance:
            return 1.0 if proximity else accuracy
        return accuracy + proximity / self.distance

    def _scan(self, text: str, chunk: _Chunk, location: int) -> tuple[bool, float]:
        pattern = chunk.pattern
        alphabet = chunk.alphabet
        pattern_len = len(pattern)
        text_len = len(text)
        expected = max(0, min(location, text_len))
        current_threshold = self.threshold

        # Exact occurrences tighten the threshold before the error-tolerant pass.
        index = text.find(pattern, expected)
        while index > -1:
            current_threshold = min(
                self._score(pattern_len, 0, index, expected), current_threshold
            )
            index = text.find(pattern, index + pattern_len)

        best_location = -1
        best_score = 1.0
        last_bits: list[int] = []
        bin_max = pattern_len + text_len
        mask = 1 << (pattern_len - 1)

        for errors in range(pattern_len):
            # Widest window in which a match with this many errors can still pass.
            bin_min = 0
            bin_mid = bin_max
            while bin_min < bin_mid:
                if self._score(pattern_len, errors, expected + bin_mid, expected) <= current_threshold:
                    bin_min = bin_mid
                else:
                    bin_max = bin_mid
                bin_mid = (bin_max - bin_min) // 2 + bin_min
            bin_max = bin_mid

            start = max(1, expected - bin_mid + 1)
            finish = min(expected + bin_mid, text_len) + pattern_len
            bits = [0] * (finish + 2)
            bits[finish + 1] = (1 << errors) - 1

            j = finish
            while j >= start:
                current = j - 1
                char_match = alphabet.get(text[current], 0) if current < text_len else 0
                bits[j] = ((bits[j + 1] << 1) | 1) & char_match
                if errors:
                    bits[j] |= (
                        ((_bit_at(last_bits, j + 1) | _bit_at(last_bits, j)) << 1)
                        | 1
                        | _bit_at(last_bits, j + 1)
                    )
                if bits[j] & mask:
                    score = self._score(pattern_len, errors, current, expected)
                    if score <= current_threshold:
                        current_threshold = score
                        best_score = score
                        best_location = current
                        if best_location <= expected:
                            break
                        start = max(1, 2 * expected - best_location)
                j -= 1

            if self._score(pattern_len, errors + 1, expected, expected) > current_threshold:
                break
            last_bits = bits

        if best_location < 0:
            return False, 1.0
        return True, max(MIN_MATCH_SCORE, best_score)


class FuzzyMatcher:
    """Ranks search entries against a query and returns the top hits.

    Args:
        threshold: Maximum raw score (0..1) for a match; 0.0 only matches exactly.
        distance: How far from ``location`` a match may drift before the
            proximity penalty alone reaches 1.0.
        limit: Maximum number of hits returned.
        min_query_length: Trimmed queries shorter than this return no hits.
        location: Expected offset of the match in search_text.
    """

    def __init__(
        self,
        threshold: float = 0.3,
        distance: int = 100,
        limit: int = 8,
        min_query_length: int = 2,
        location: int = 0,
    ) -> None:
        self.threshold = threshold
        self.distance = distance
        self.limit = limit
        self.min_query_length = min_query_length
        self.location = location

    def is_active(self, query: str) -> bool:
        """Whether query is long enough (after trimming) to be matched."""
        return len(query.strip()) >= self.min_query_length

    def search(self, entries: Sequence[SearchEntry], query: str) -> list[SearchHit]:
        """Return at most ``limit`` hits, best score first, ties in scan order."""
        if not self.is_active(query):
            return []
        compiled = BitapPattern(
            query.strip(),
            threshold=self.threshold,
            distance=self.distance,
            location=self.location,
        )
        hits: list[SearchHit] = []
        for index, entry in enumerate(entries):
            is_match, score = compiled.search_in(entry.search_text)
            if not is_match:
                continue
            norm = field_norm(entry.search_text)
            weighted = (sys.float_info.epsilon if score == 0 else score) ** norm
            hits.append(SearchHit(entry=entry, score=weighted, index=index))
        hits.sort(key=lambda h: (h.score, h.index))
        return hits[: self.limit]
