# medtok/tokenization/units.py
"""
Does:
    Measurement-unit lexicon consulted when splitting units off the ends of numbers
    ("2.5cm" -> "2.5" + "cm").

Inputs:
    A newline-delimited unit list. One unit per line, matched case-insensitively.

Outputs:
    UnitLexicon: immutable lowercase set with `in` / contains().

Notes:
    * get_units() loads once per process and is read-only afterwards, so engines on
      different threads can share it without locking.
    * An override that cannot be read falls back to the bundled list; it never raises.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from medtok.config import resolve_config

_LOGGER = logging.getLogger("medtok.tokenization.units")

_BUNDLED_PACKAGE = "medtok.tokenization"
_BUNDLED_DIR = "data"
_BUNDLED_NAME = "units.txt"


class UnitLexicon:
    __slots__ = ("_units",)

    def __init__(self, units: Iterable[str] = ()) -> None:
        self._units = frozenset(u.strip().lower() for u in units if u and u.strip())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "UnitLexicon":
        return cls(lines)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "UnitLexicon":
        with open(path, "r", encoding="utf-8") as f:
            return cls(f.read().splitlines())

    @classmethod
    def default(cls) -> "UnitLexicon":
        text = resources.files(_BUNDLED_PACKAGE).joinpath(_BUNDLED_DIR).joinpath(_BUNDLED_NAME).read_text(encoding="utf-8")
        return cls(text.splitlines())

    def contains(self, unit: str) -> bool:
        return unit in self._units

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._units))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitLexicon):
            return NotImplemented
        return self._units == other._units

    def __hash__(self) -> int:
        return hash(self._units)

    def __repr__(self) -> str:
        return f"UnitLexicon({len(self._units)} units)"


def load_units(path: Optional[Union[str, Path]] = None) -> UnitLexicon:
    """
    Lexicon from `path` when given and readable, else the bundled default.
    """
    if path:
        try:
            lex = UnitLexicon.from_path(path)
        except (OSError, UnicodeDecodeError) as e:
            _LOGGER.debug("unit list %s unreadable (%r); using bundled list", path, e)
        else:
            _LOGGER.debug("loaded %d units from %s", len(lex), path)
            return lex
    lex = UnitLexicon.default()
    _LOGGER.debug("loaded %d bundled units", len(lex))
    return lex


@lru_cache(maxsize=1)
def get_units() -> UnitLexicon:
    """Process-wide lexicon, resolved from env/config once."""
    try:
        cfg = resolve_config()
    except (RuntimeError, ValueError) as e:
        _LOGGER.debug("config unusable (%s); using bundled unit list", e)
        return load_units(None)
    return load_units(cfg.tokenizer.units_list_path)


def reset_units_cache() -> None:
    get_units.cache_clear()
