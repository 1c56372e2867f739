import pytest

from upodesh.trie import Trie, TrieNode


@pytest.fixture
def small_trie():
    return Trie.from_strings(["ক", "কখ", "কখগঘঙচছ"])


@pytest.fixture
def prefix_trie():
    return Trie.from_strings(["ক", "কখগ", "কখগঘঙ", "চ", "চছজ", "চছজঝঞ", "১"])


def test_find_matching_node(small_trie):
    n1 = small_trie.matching_node("ক")
    assert n1 is not None and n1.word == "ক"
    n2 = n1.get_matching_node("খ")
    assert n2 is not None and n2.word == "কখ"
    n3 = n2.get_matching_node("গঘ")
    assert isinstance(n3, TrieNode)
    n4 = small_trie.matching_node("কখগঘ")
    assert n4 is n3


def test_matching_node_missing(small_trie):
    assert small_trie.matching_node("খ") is None
    assert small_trie.matching_node("কগ") is None


def test_empty_word_matches_node_itself(small_trie):
    assert small_trie.matching_node("") is small_trie.root
    node = small_trie.matching_node("ক")
    assert node.get_matching_node("") is node


def test_is_complete_word(small_trie):
    n1 = small_trie.matching_node("ক")
    assert n1.is_complete_word()
    n2 = n1.get_matching_node("খ")
    assert n2.is_complete_word()
    n3 = n2.get_matching_node("গঘ")
    assert not n3.is_complete_word()
    n4 = small_trie.matching_node("কখগঘ")
    assert not n4.is_complete_word()


def test_match_prefix(prefix_trie):
    assert prefix_trie.match_prefix("ক") == ["কখগ", "কখগঘঙ", "ক"]
    assert prefix_trie.match_prefix("কখ") == ["কখগ", "কখগঘঙ"]
    assert prefix_trie.match_prefix("চছজঝঞ") == ["চছজঝঞ"]
    assert prefix_trie.match_prefix("২") == []
    assert prefix_trie.match_prefix("") == []


def test_match_longest_common_prefix(prefix_trie):
    assert prefix_trie.match_longest_common_prefix("ক") == ("ক", "", True)
    assert prefix_trie.match_longest_common_prefix("ক1234") == ("ক", "1234", True)
    assert prefix_trie.match_longest_common_prefix("1234") == ("", "1234", False)
    assert prefix_trie.match_longest_common_prefix("কখগঘঙচছজঝঞ") == (
        "কখগঘঙ",
        "চছজঝঞ",
        True,
    )


def test_match_longest_common_prefix_empty(prefix_trie):
    assert prefix_trie.match_longest_common_prefix("") == ("", "", False)


def test_match_longest_common_prefix_incomplete(prefix_trie):
    assert prefix_trie.match_longest_common_prefix("কখ") == ("কখ", "", False)


def test_longest_prefix(prefix_trie):
    node, length = prefix_trie.longest_prefix("চছx")
    assert length == 2
    assert node is prefix_trie.matching_node("চছ")
    node, length = prefix_trie.longest_prefix("x")
    assert length == 0
    assert node is prefix_trie.root


def test_find_complete_words_sorted_order():
    trie = Trie.from_strings(["b", "a", "ab", "c"])
    assert trie.root.find_complete_words() == ["a", "ab", "b", "c"]


def test_insert_adds_word():
    trie = Trie()
    assert trie.matching_node("xy") is None
    trie.insert("xy")
    assert trie.matching_node("xy").word == "xy"
    assert not trie.matching_node("x").is_complete_word()