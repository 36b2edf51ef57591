import random

from medtok import all_tokens, iter_tokens, tokenize
from medtok.tokenization.tokenizer import is_separator

ALPHABET = list("abcxyzXACMG0123456789") + list(".,'’-#$%()/+^;:!?\"") + [
    " ", "  ", "\t", "\n", "\r\n", "\u00a0", "\u200b", "é", "µ",
    "mg", "cm", "n't", "'s", "2x3", "4.5", "1,000",
]


def _random_text(rng, n):
    return "".join(rng.choice(ALPHABET) for _ in range(n))


def _check_structure(text, spans):
    prev_end = 0
    for sp in spans:
        assert sp.end > sp.start
        assert sp.start >= prev_end
        # gaps between tokens are separators only
        assert all(is_separator(c) for c in text[prev_end:sp.start])
        # no separator inside a token
        assert not any(is_separator(c) for c in sp.covered_text(text))
        prev_end = sp.end
    assert all(is_separator(c) for c in text[prev_end:])


def _reconstruct(text, spans):
    out, prev = [], 0
    for sp in spans:
        out.append(text[prev:sp.start])
        out.append(sp.covered_text(text))
        prev = sp.end
    out.append(text[prev:])
    return "".join(out)


def test_random_inputs_structure_and_reconstruction():
    rng = random.Random(13)
    for _ in range(300):
        text = _random_text(rng, rng.randint(0, 40))
        spans = all_tokens(text)
        _check_structure(text, spans)
        assert _reconstruct(text, spans) == text

def test_random_inputs_eager_equals_lazy():
    rng = random.Random(7)
    for _ in range(200):
        text = _random_text(rng, rng.randint(0, 40))
        eager = all_tokens(text)
        assert list(tokenize(text)) == eager
        assert list(iter_tokens(iter(text))) == eager

def test_determinism_50_runs():
    q = "Pt. received 2.5mg/kg IV q6h x3 days; wound 3x4cm, pt's BP 120/80 mmHg."
    outs = [all_tokens(q) for _ in range(50)]
    first = outs[0]
    for o in outs[1:]:
        assert o == first

def test_all_separator_inputs_yield_nothing():
    rng = random.Random(3)
    seps = [" ", "\t", "\n", "\r", "\u00a0", "\u2028", "\u2029", "\u200b", "\ufeff"]
    for _ in range(50):
        text = "".join(rng.choice(seps) for _ in range(rng.randint(0, 10)))
        assert all_tokens(text) == []
