import sys

import pytest

import huff
from huffman_tools import frequency, huffman


def test_encode_and_decode_files(tmp_path, capsys):
    text_file = tmp_path / "message.txt"
    text_file.write_text("abc\n", encoding="utf-8")
    code_file = tmp_path / "message.code"
    out_file = tmp_path / "out.txt"

    huffman.main(["encode", "-S", "aabbc", "-o", str(code_file), str(text_file)])
    assert code_file.read_text(encoding="utf-8") == "RRLRL"
    assert "Encoded 3 characters to 5 path symbols" in capsys.readouterr().out

    huffman.main(["decode", "-S", "aabbc", "-o", str(out_file), str(code_file)])
    assert out_file.read_text(encoding="utf-8") == "abc"
    assert "Decoded 5 path symbols to 3 characters" in capsys.readouterr().out


def test_source_file(tmp_path, capsys):
    source_file = tmp_path / "source.txt"
    source_file.write_text("aabbc\n", encoding="utf-8")
    huffman.main(["codes", "--no-color", "-s", str(source_file)])
    assert "'c' has code \"RL\"" in capsys.readouterr().out


def test_tree_with_list(capsys):
    huffman.main(["tree", "--no-color", "--list", "-S", "aabbc"])
    out = capsys.readouterr().out
    assert out.startswith("Huffman tree list:")
    assert "Node: accumulated count 5" in out


def test_missing_source_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        huffman.main(["codes", "-s", str(tmp_path / "missing.txt")])


def test_source_is_required():
    with pytest.raises(SystemExit):
        huffman.main(["codes"])


def test_encode_unknown_symbol(tmp_path):
    text_file = tmp_path / "message.txt"
    text_file.write_text("xyz", encoding="utf-8")
    with pytest.raises(ValueError, match="Symbol not found"):
        huffman.main(["encode", "-S", "aabbc", "-o", str(tmp_path / "m.code"), str(text_file)])


def test_frequency(capsys):
    frequency.main(["--no-color", "-S", "aabbc"])
    out = capsys.readouterr().out
    assert "Alphabet: 'abc'" in out
    assert "Counted 5 characters, 3 distinct." in out


def test_frequency_empty_source():
    with pytest.raises(SystemExit):
        frequency.main(["-S", ""])


def test_dispatcher(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["huff.py", "huffman", "codes", "--no-color", "-S", "abcd"])
    huff.main()
    assert "'d' has code \"RR\"" in capsys.readouterr().out


def test_dispatcher_unknown_tool(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["huff.py", "nope"])
    with pytest.raises(SystemExit) as exc:
        huff.main()
    assert exc.value.code == 1
