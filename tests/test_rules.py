from __future__ import annotations
from medtok.tokenization.rules import SegmentationEngine, segment_word
from medtok.tokenization.units import UnitLexicon


def _spans(spans):
    return [(s.start, s.end) for s in spans]


def test_offsets_are_absolute():
    eng = SegmentationEngine()
    assert _spans(eng.segment("first,", 100)) == [(100, 105), (105, 106)]
    assert _spans(segment_word("2.5cm", 7)) == [(7, 10), (10, 12)]

def test_custom_lexicon_controls_unit_split():
    mg_only = UnitLexicon(["mg"])
    assert _spans(segment_word("2.5cm", 0, mg_only)) == [(0, 5)]
    assert _spans(segment_word("2.5mg", 0, mg_only)) == [(0, 3), (3, 5)]
    assert _spans(segment_word("5foo", 0, UnitLexicon(["FOO"]))) == [(0, 1), (1, 4)]

def test_unit_prefix_goes_through_x_split():
    eng = SegmentationEngine(UnitLexicon(["cm"]))
    assert _spans(eng.segment("10x20cm")) == [(0, 2), (2, 3), (3, 5), (5, 7)]

def test_mid_break_then_start_break():
    # "/" is a mid-break; the quote after it is peeled by the start-break stage
    assert _spans(segment_word("a/'b")) == [(0, 1), (1, 2), (2, 3), (3, 4)]

def test_end_break_remainder_reaches_unit_stage():
    assert _spans(segment_word("5mg,")) == [(0, 1), (1, 3), (3, 4)]
    assert _spans(segment_word("2x3'")) == [(0, 1), (1, 2), (2, 3), (3, 4)]

def test_typographic_quote_end_break():
    assert _spans(segment_word("word’")) == [(0, 4), (4, 5)]
    # contraction suffixes need the ASCII apostrophe
    assert _spans(segment_word("can’t")) == [(0, 5)]

def test_lone_punctuation():
    assert _spans(segment_word("'")) == [(0, 1)]
    assert _spans(segment_word(",")) == [(0, 1)]
    assert _spans(segment_word("-")) == [(0, 1)]
    assert _spans(segment_word("...")) == [(0, 3)]
    assert _spans(segment_word("?!")) == [(0, 1), (1, 2)]
