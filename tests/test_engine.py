import itertools
from collections import Counter

import pytest
from wordle_solve.engine import score, filter_candidates, check_history, all_green
from wordle_solve.errors import FeedbackSyntaxError, LengthMismatch

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("scoop","scoop","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
    ("sheep","speed","G-GGY"),
    ("abcde","edcba","YYGYY"),
    ("eerie","there","Y-Y-G"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","-GGGYY"),
    ("little","letter","G-GG-Y"),
    ("planet","palate","GYY-YY"),
    ("kitten","tinket","YGYYGY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_score_unicode_letters():
    # one code point per letter, no folding
    assert score("école", "écran") == "GG---"
    assert score("ñandú", "dúñan") == "YYYYY"

def test_score_length_mismatch():
    with pytest.raises(LengthMismatch):
        score("crane", "cranes")

WORDS = ["crane","raise","stare","trace","cared","racer","scoop","level",
         "belle","sheep","speed","eerie","there","lemon","fifty","minty"]

@pytest.mark.parametrize("w", WORDS)
def test_score_self_is_all_green(w):
    assert score(w, w) == all_green(5)

def test_green_plus_yellow_never_exceeds_letter_counts():
    for g, a in itertools.product(WORDS, repeat=2):
        patt = score(g, a)
        hits = Counter(ch for ch, m in zip(g, patt) if m != "-")
        ga, aa = Counter(g), Counter(a)
        for ch, k in hits.items():
            assert k <= aa[ch] and k <= ga[ch], (g, a, patt)

def test_filter_candidates_n5_history():
    history = [("raise","YY--G")]
    cand = filter_candidates(WORDS, history)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand

def test_filter_candidates_n6_basic():
    words = ["letter","settle","little","tattle","better"]
    history = [("settle","-GGGYY")]
    cand = filter_candidates(words, history)
    assert "letter" in cand and "better" not in cand

def test_filter_preserves_dictionary_order():
    cand = filter_candidates(WORDS, [("level", score("level", "belle"))])
    assert cand == [w for w in WORDS if w in cand]

def test_filter_order_independent_idempotent_monotone():
    a = ("raise", score("raise", "trace"))
    b = ("crane", score("crane", "trace"))
    ab = filter_candidates(WORDS, [a, b])
    assert ab == filter_candidates(WORDS, [b, a])
    assert filter_candidates(ab, [a, b]) == ab
    assert len(ab) <= len(filter_candidates(WORDS, [a]))
    assert "trace" in ab

def test_check_history_rejects_bad_entries():
    check_history([("crane", "GY-GY")], 5)
    with pytest.raises(LengthMismatch):
        check_history([("cranes", "GY-GY")], 5)
    with pytest.raises(LengthMismatch):
        check_history([("crane", "GY-G")], 5)
    with pytest.raises(FeedbackSyntaxError):
        check_history([("crane", "GYXGY")], 5)
