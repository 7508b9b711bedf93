from anagrams.index import DictionaryIndex
from anagrams.occurrences import sentence_occurrences
from anagrams.search import candidate_words, iter_covers, sentence_anagrams

YES_MAN_WORDS = ["en", "as", "my", "man", "yes", "men", "say", "sane", "Sean",
                 "I", "love", "you", "olive", "cat"]
LINUX_WORDS = ["Rex", "Lin", "Zulu", "nil", "null", "Uzi", "Linux", "rulez", "Yes"]


def _as_set(rows):
    return {tuple(r) for r in rows}


def test_empty_sentence_has_one_empty_anagram():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    assert sentence_anagrams([], idx) == [[]]


def test_sentence_of_empty_words_is_empty_anagram():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    assert sentence_anagrams([""], idx) == [[]]


def test_yes_man():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    expected = {
        ("en", "as", "my"), ("en", "my", "as"), ("man", "yes"), ("men", "say"),
        ("as", "en", "my"), ("as", "my", "en"), ("sane", "my"), ("Sean", "my"),
        ("my", "en", "as"), ("my", "as", "en"), ("my", "sane"), ("my", "Sean"),
        ("say", "men"), ("yes", "man"),
    }
    got = sentence_anagrams(["Yes", "man"], idx)
    assert len(got) == 14
    assert _as_set(got) == expected


def test_i_love_you_includes_itself_and_olive():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    got = _as_set(sentence_anagrams(["I", "love", "you"], idx))
    assert ("I", "love", "you") in got
    assert ("you", "olive") in got and ("olive", "you") in got
    assert len(got) == 8


def test_linux_rulez():
    idx = DictionaryIndex.build(LINUX_WORDS)
    expected = {
        ("Rex", "Lin", "Zulu"), ("nil", "Zulu", "Rex"), ("Rex", "nil", "Zulu"),
        ("Zulu", "Rex", "Lin"), ("null", "Uzi", "Rex"), ("Rex", "Zulu", "Lin"),
        ("Uzi", "null", "Rex"), ("Rex", "null", "Uzi"), ("null", "Rex", "Uzi"),
        ("Lin", "Rex", "Zulu"), ("nil", "Rex", "Zulu"), ("Rex", "Uzi", "null"),
        ("Rex", "Zulu", "nil"), ("Zulu", "Rex", "nil"), ("Zulu", "Lin", "Rex"),
        ("Lin", "Zulu", "Rex"), ("Uzi", "Rex", "null"), ("Zulu", "nil", "Rex"),
        ("rulez", "Linux"), ("Linux", "rulez"),
    }
    got = sentence_anagrams(["Linux", "rulez"], idx)
    assert len(got) == 20
    assert _as_set(got) == expected


def test_uncoverable_sentence_gives_empty_list():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    assert sentence_anagrams(["xyzzy"], idx) == []
    # letters all present in candidates but one is left over
    assert sentence_anagrams(["yes", "man", "q"], idx) == []


def test_repeated_words_and_permutations_collapse():
    idx = DictionaryIndex.build(["ab", "a", "b"])
    got = sentence_anagrams(["baba"], idx)
    # {ab,ab}: 1 ordering, {ab,a,b}: 6, {a,a,b,b}: 4!/(2!*2!) = 6
    assert len(got) == 13
    assert got.count(["ab", "ab"]) == 1
    assert ["a", "b", "a", "b"] in got


def test_duplicate_dictionary_entries_do_not_duplicate_results():
    idx = DictionaryIndex.build(["eat", "eat", "tea"])
    got = sentence_anagrams(["ate"], idx)
    assert sorted(got) == [["eat"], ["tea"]]


def test_results_have_input_signature_and_no_duplicates():
    for words, sentence in ((YES_MAN_WORDS, ["Yes", "man"]),
                            (LINUX_WORDS, ["Linux", "rulez"]),
                            (YES_MAN_WORDS, ["I", "love", "you"])):
        idx = DictionaryIndex.build(words)
        got = sentence_anagrams(sentence, idx)
        assert len(_as_set(got)) == len(got)
        for anagram in got:
            assert sentence_occurrences(anagram) == sentence_occurrences(sentence)


def test_input_case_does_not_matter():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    assert _as_set(sentence_anagrams(["YES", "MAN"], idx)) == _as_set(sentence_anagrams(["yes", "man"], idx))


def test_candidate_words_are_subsets_of_target():
    idx = DictionaryIndex.build(YES_MAN_WORDS)
    target = sentence_occurrences(["yes", "man"])
    got = candidate_words(target, idx)
    assert set(got) == {"en", "as", "my", "man", "yes", "men", "say", "sane", "Sean"}


def test_iter_covers_yields_each_multiset_once():
    target = sentence_occurrences(["yes", "man"])
    covers = list(iter_covers(target, ["en", "as", "my", "man", "yes", "men", "say", "sane"]))
    assert sorted(sorted(c) for c in covers) == sorted(
        sorted(c) for c in [("en", "as", "my"), ("man", "yes"), ("men", "say"), ("my", "sane")]
    )
