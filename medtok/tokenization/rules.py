from __future__ import annotations
from typing import List, Optional, Tuple

import regex

from medtok.types import TokenSpan
from medtok.tokenization.units import UnitLexicon, get_units

# Segmentation of one whitespace-delimited word into token spans.
# Stages run in this order, each one only sees the ranges the previous left unresolved:
#   1) mid-breaks:   punctuation/symbols (except . , ' ’ - # $), hyphens after anything or
#                    before a letter, commas not flanked by digits on both sides
#   2) start-breaks: leading ' or ’ peeled off one at a time
#   3) end-breaks:   trailing 's 'd 'm n't 'll 've 're ' ’ , peeled off right to left
#   4) units:        "2.5cm" -> "2.5" "cm" when the alpha tail is a known unit
#   5) x-splitting:  "2x3x4" -> "2" "x" "3" "x" "4"
# Offsets inside a word are relative; spans are emitted with the word offset added.

Range = Tuple[int, int]  # [start, end) inside the word

_MID_BREAKS = regex.compile(
    r"(?![.,'’\-#$])[\p{Sm}\p{Sk}\p{P}]"
    r"|(?<=\P{Z})-|-(?=\p{L})"
    # comma with at least one non-number neighbour; digit,digit is a thousands separator
    r"|(?<=\P{N}),(?=.)|(?<=.),(?=\P{N})",
    regex.DOTALL,
)

# quotes only; a leading comma stays with the word (",5" is one token)
_START_BREAKS = frozenset("'’")

_END_BREAKS = regex.compile(r"(?:'[sdm]|n't|'ll|'ve|'re|'|’|,)\Z", regex.IGNORECASE)

_NUMBER_WORD = regex.compile(r"-?[0-9.xX]*[0-9]+(?P<suffix>[A-Za-z]+)")

_NUMBER_X = regex.compile(r"-?[0-9.]*[0-9]+(?:[xX][0-9.]*[0-9]+)+")

_X = frozenset("xX")


class SegmentationEngine:
    """Splits one buffered word into token spans. Stateless apart from the unit lexicon."""

    def __init__(self, units: Optional[UnitLexicon] = None) -> None:
        self.units = units if units is not None else get_units()

    def segment(self, word: str, offset: int = 0) -> List[TokenSpan]:
        spans: List[Range] = []
        start = 0
        for m in _MID_BREAKS.finditer(word):
            if start != m.start():
                self._break_starts(word, start, m.start(), spans)
            if m.start() != m.end():
                spans.append((m.start(), m.end()))
            start = m.end()
        if start != len(word):
            self._break_starts(word, start, len(word), spans)
        return [TokenSpan(offset + s, offset + e) for s, e in spans]

    def _break_starts(self, word: str, start: int, end: int, out: List[Range]) -> None:
        while start < end and word[start] in _START_BREAKS:
            out.append((start, start + 1))
            start += 1
        if start != end:
            self._break_ends(word, start, end, out)

    def _break_ends(self, word: str, start: int, end: int, out: List[Range]) -> None:
        # stacked suffixes ("dogs',") come off right to left, are emitted left to right
        suffixes: List[Range] = []
        while start < end:
            m = _END_BREAKS.search(word[start:end])
            if m is None:
                break
            suffixes.append((start + m.start(), end))
            end = start + m.start()
        if start != end:
            self._break_units(word, start, end, out)
        out.extend(reversed(suffixes))

    def _break_units(self, word: str, start: int, end: int, out: List[Range]) -> None:
        m = _NUMBER_WORD.fullmatch(word, start, end)
        if m is not None:
            suffix = m.group("suffix")
            if suffix.lower() in self.units:
                self._split_x(word, start, end - len(suffix), out)
                out.append((end - len(suffix), end))
                return
        self._split_x(word, start, end, out)

    def _split_x(self, word: str, start: int, end: int, out: List[Range]) -> None:
        if _NUMBER_X.fullmatch(word, start, end) is None:
            out.append((start, end))
            return
        prev = start
        for i in range(start, end):
            if word[i] in _X:
                out.append((prev, i))
                out.append((i, i + 1))
                prev = i + 1
        out.append((prev, end))


def segment_word(word: str, offset: int = 0, units: Optional[UnitLexicon] = None) -> List[TokenSpan]:
    return SegmentationEngine(units).segment(word, offset)
