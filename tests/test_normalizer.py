from ask_charlie.normalizer import normalize


def test_trims_and_lowercases():
    assert normalize("  What Is The Leave Policy?  ") == "what is the leave policy?"


def test_keeps_punctuation_and_inner_spacing():
    assert normalize("PTO,  time-off!") == "pto,  time-off!"


def test_none_is_empty():
    assert normalize(None) == ""
    assert normalize("   ") == ""
