import pytest

from huffman_tools.common.strings.encode_decode import code_table, decode, encode, find_path
from huffman_tools.common.strings.huffman_tree import build

SAMPLE = "this is an example of a huffman tree"


def test_code_table():
    assert code_table(build("aabbc")) == {"b": "L", "c": "RL", "a": "RR"}
    assert code_table(build("abcd")) == {"a": "LL", "b": "LR", "c": "RL", "d": "RR"}


def test_encode_and_decode_scenario():
    tree = build("aabbc")
    assert encode(tree, "abc") == "RRLRL"
    assert decode(tree, "RRLRL") == "abc"


def test_find_path_prefers_left():
    tree = build("abcd")
    assert find_path(tree, "a") == "LL"
    assert find_path(tree, "d") == "RR"
    assert find_path(tree, "z") is None


@pytest.mark.parametrize("text", ["", "a", "the fat man", SAMPLE, SAMPLE[::-1], "eeeeee  "])
def test_round_trip(text):
    tree = build(SAMPLE)
    assert decode(tree, encode(tree, text)) == text


def test_prefix_free():
    codes = list(code_table(build(SAMPLE)).values())
    assert len(set(codes)) == len(codes)
    for a in codes:
        for b in codes:
            if a != b:
                assert not b.startswith(a)


def test_frequent_characters_get_shorter_codes():
    table = code_table(build(SAMPLE))
    assert len(table[" "]) <= len(table["x"])


def test_single_leaf_tree():
    tree = build("aaaa")
    assert code_table(tree) == {"a": "L"}
    assert encode(tree, "aa") == "LL"
    assert decode(tree, "LLL") == "aaa"
    with pytest.raises(ValueError, match="Invalid path symbol"):
        decode(tree, "LR")


def test_encode_unknown_symbol():
    with pytest.raises(ValueError, match="Symbol not found"):
        encode(build("aabbc"), "abz")


def test_decode_malformed_code():
    tree = build("aabbc")
    with pytest.raises(ValueError, match="Invalid path symbol"):
        decode(tree, "RRX")
    with pytest.raises(ValueError, match="Truncated"):
        decode(tree, "RRR")
