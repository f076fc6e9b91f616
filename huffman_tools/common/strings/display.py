from colorama import Fore, Style

from huffman_tools.common.strings.encode_decode import code_table
from huffman_tools.common.strings.huffman_tree import HuffmanTreeList, Node


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"


def print_tree(tree: Node, color: bool = True) -> None:
    """Pretty prints a Huffman tree, one node per line."""
    print("Huffman tree:")
    _print_tree(tree, 0, color)


def _print_tree(node: Node, level: int, color: bool) -> None:
    indent = "  " * (level + 1)
    if node.is_leaf:
        print(indent + _paint(f"Leaf: '{node.char}' with count {node.weight}", Fore.GREEN, color))
    else:
        print(indent + _paint(f"Node: accumulated count {node.weight}", f"{Fore.CYAN}{Style.BRIGHT}", color))
        _print_tree(node.left, level + 1, color)
        _print_tree(node.right, level + 1, color)


def print_codes(tree: Node, color: bool = True) -> None:
    """Prints the code word of every character in the tree."""
    print("Huffman tree codes:")
    for char, code in code_table(tree).items():
        print(f"'{char}' has code \"{_paint(code, Fore.YELLOW, color)}\"")


def print_tree_list(trees: HuffmanTreeList, color: bool = True) -> None:
    print("Huffman tree list:")
    for tree in trees:
        print_tree(tree, color)


def print_frequencies(freqs: dict[str, int], color: bool = True) -> None:
    """Prints a frequency table with a bar per character."""
    total = sum(freqs.values())
    for char, count in freqs.items():
        bar = _paint("#" * count, Fore.MAGENTA, color)
        print(f"{char!r:>6}: {count:5} ({count / total:6.2%}) {bar}")
