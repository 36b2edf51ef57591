# medtok/__init__.py
"""
Does: Rule-based word tokenizer for biomedical text.
Inputs: a string (or any iterable of single characters).
Outputs: TokenSpan(start, end) half-open offsets into the input, in order.

Notes:
- Penn-Treebank-like splitting of punctuation and contractions.
- Numbers keep their internal '.' and digit-flanked ','; known units ("mg", "cm")
  and dimension separators ("2x3") are split off.
"""
from medtok.types import TokenSpan
from medtok.tokenization import (
    SegmentationEngine,
    TokenStream,
    Tokenizer,
    UnitLexicon,
    all_tokens,
    get_units,
    iter_tokens,
    load_units,
    tokenize,
)

__all__ = [
    "SegmentationEngine",
    "TokenSpan",
    "TokenStream",
    "Tokenizer",
    "UnitLexicon",
    "all_tokens",
    "get_units",
    "iter_tokens",
    "load_units",
    "tokenize",
]
