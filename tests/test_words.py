from marshians_fn.words import candidate_strings, words


def test_words_cat():
    assert sorted(words({"cat", "at"}, "cat", 2)) == ["at", "cat"]


def test_words_first_seen_order():
    assert words({"cat", "at", "act", "ta"}, "cat", 2) == ["at", "ta", "cat", "act"]


def test_words_respects_min():
    assert words({"cat", "at"}, "cat", 3) == ["cat"]
    assert words({"cat", "at"}, "cat", 4) == []


def test_words_deduplicates_repeated_letters():
    assert words({"aa", "a"}, "aab", 1) == ["a", "aa"]


def test_words_exact_match_only():
    assert words({"Cat", "cat "}, "cat", 1) == []


def test_words_empty_pool():
    assert words({"cat"}, "", 1) == []


def test_candidate_strings_order():
    assert list(candidate_strings("ab", 1)) == ["a", "b", "ab", "ba"]


def test_candidate_strings_positional():
    assert list(candidate_strings("aa", 2)) == ["aa", "aa"]
