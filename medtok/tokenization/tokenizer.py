from __future__ import annotations
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Deque, List, Optional
import unicodedata

from medtok.types import TokenSpan
from medtok.tokenization.rules import SegmentationEngine
from medtok.tokenization.units import UnitLexicon

# Character-driven word tokenizer.
# - Offsets are indices into the original string, end exclusive. Nothing is normalized.
# - Separators end the current word and never appear inside a token:
#     Unicode Zs / Zl / Zp (spaces, line and paragraph separators), Cf (format chars such
#     as ZWSP), plus '\n', '\t', '\r'. Every other character, controls included, is a
#     word character.
# - A finished word goes through SegmentationEngine, which may split it further.

_SEPARATOR_CATEGORIES = {"Zs", "Zl", "Zp", "Cf"}
_SEPARATOR_CHARS = {"\n", "\t", "\r"}


def is_separator(ch: str) -> bool:
    return ch in _SEPARATOR_CHARS or unicodedata.category(ch) in _SEPARATOR_CATEGORIES


class Tokenizer:
    """
    Incremental tokenizer: feed characters with advance(), then call finish() once.

    Both return the spans completed by that step (usually none for advance).
    One instance holds one word buffer; do not share it between concurrent callers.
    """

    def __init__(self, units: Optional[UnitLexicon] = None) -> None:
        self._engine = SegmentationEngine(units)
        self._word: List[str] = []
        self._start = -1

    def advance(self, ch: str, index: int) -> List[TokenSpan]:
        if len(ch) != 1:
            raise ValueError(f"advance() takes a single character, got {ch!r}")
        if is_separator(ch):
            return self._break_word()
        if not self._word:
            self._start = index
        self._word.append(ch)
        return []

    def finish(self) -> List[TokenSpan]:
        return self._break_word()

    def _break_word(self) -> List[TokenSpan]:
        if not self._word:
            return []
        spans = self._engine.segment("".join(self._word), self._start)
        self._word.clear()
        self._start = -1
        return spans


class TokenStream(Iterator[TokenSpan]):
    """
    Lazy, single-pass view of the spans of a character sequence.

    Only the spans of the most recent word are held; more input is consumed
    only when they run out. Once exhausted, next() keeps raising StopIteration.
    """

    def __init__(self, chars: Iterable[str], units: Optional[UnitLexicon] = None) -> None:
        self._chars = enumerate(chars)
        self._tokenizer = Tokenizer(units)
        self._pending: Deque[TokenSpan] = deque()
        self._finished = False

    def _fill(self) -> bool:
        while not self._pending:
            if self._finished:
                return False
            nxt = next(self._chars, None)
            if nxt is None:
                self._pending.extend(self._tokenizer.finish())
                self._finished = True
            else:
                index, ch = nxt
                self._pending.extend(self._tokenizer.advance(ch, index))
        return True

    def has_next(self) -> bool:
        return self._fill()

    def __iter__(self) -> "TokenStream":
        return self

    def __next__(self) -> TokenSpan:
        if not self._fill():
            raise StopIteration
        return self._pending.popleft()


def all_tokens(text: str, units: Optional[UnitLexicon] = None) -> List[TokenSpan]:
    tokenizer = Tokenizer(units)
    spans: List[TokenSpan] = []
    for i, ch in enumerate(text):
        spans.extend(tokenizer.advance(ch, i))
    spans.extend(tokenizer.finish())
    return spans


def tokenize(text: Iterable[str], units: Optional[UnitLexicon] = None) -> TokenStream:
    return TokenStream(text, units)


def iter_tokens(chars: Iterable[str], units: Optional[UnitLexicon] = None) -> Iterator[TokenSpan]:
    """Generator over a streamed character sequence; chars must be yielded one at a time."""
    tokenizer = Tokenizer(units)
    for i, ch in enumerate(chars):
        yield from tokenizer.advance(ch, i)
    yield from tokenizer.finish()
