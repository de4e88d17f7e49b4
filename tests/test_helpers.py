from wordle_engine.utils.helpers import is_alphabetic, normalize_word


def test_normalize_lowercases_and_trims():
    assert normalize_word("  CRANE \n") == "crane"


def test_normalize_strips_accents():
    assert normalize_word("Élève") == "eleve"
    assert normalize_word("forêt") == "foret"
    assert normalize_word("zèbre") == "zebre"
    assert normalize_word("çà") == "ca"


def test_normalize_expands_ligatures():
    assert normalize_word("cœur") == "coeur"
    assert normalize_word("ŒUVRE") == "oeuvre"
    assert normalize_word("ǣrie") == "aerie"


def test_normalize_is_idempotent():
    for raw in ["  Cœur ", "École", "CRANE", "noël", "ono po", "ab1", "", "ǣ", "ǽ", "\u0301 abc"]:
        once = normalize_word(raw)
        assert normalize_word(once) == once, raw


def test_combining_mark_before_whitespace_is_trimmed():
    assert normalize_word("\u0301 abc") == "abc"


def test_is_alphabetic():
    assert is_alphabetic("crane")
    assert is_alphabetic("")
    assert not is_alphabetic("ono po")
    assert not is_alphabetic("ab1de")
    assert not is_alphabetic("cr-ne")
