from medtok.tokenization.rules import SegmentationEngine, segment_word
from medtok.tokenization.tokenizer import (
    Tokenizer,
    TokenStream,
    all_tokens,
    is_separator,
    iter_tokens,
    tokenize,
)
from medtok.tokenization.units import UnitLexicon, get_units, load_units, reset_units_cache

__all__ = [
    "SegmentationEngine",
    "TokenStream",
    "Tokenizer",
    "UnitLexicon",
    "all_tokens",
    "get_units",
    "is_separator",
    "iter_tokens",
    "load_units",
    "reset_units_cache",
    "segment_word",
    "tokenize",
]
