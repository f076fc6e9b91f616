from huffman_tools.common.strings.huffman_tree import Node

LEFT = "L"
RIGHT = "R"


def find_path(tree: Node, target: str) -> str | None:
    """Returns the path from tree to the leaf holding target, or None.

    The left subtree is searched before the right one.
    """
    if tree.is_leaf:
        return "" if tree.char == target else None
    path = find_path(tree.left, target)
    if path is not None:
        return LEFT + path
    path = find_path(tree.right, target)
    if path is not None:
        return RIGHT + path
    return None


def encode_char(tree: Node, char: str) -> str:
    """Returns the code word of char in the Huffman tree."""
    path = find_path(tree, char)
    if path is None:
        raise ValueError(f"Symbol not found in Huffman tree: {char!r}")
    # A lone leaf has no edges, so it is given a one-symbol code
    return path or LEFT


def encode(tree: Node, s: str) -> str:
    """Encodes s as the concatenated code words of its characters.

    Args:
        tree: Node - The root of a finished Huffman tree.
        s: str - Text made of characters held by the tree.

    Returns:
        str: A string of LEFT and RIGHT path symbols.
    """
    return "".join(encode_char(tree, char) for char in s)


def decode_char(tree: Node, code: str, pos: int = 0) -> tuple[str, int]:
    """Decodes one character starting at code[pos].

    Returns:
        str: The decoded character.
        int: The position just past its code word.
    """
    node = tree
    if node.is_leaf:
        if code[pos] != LEFT:
            raise ValueError(f"Invalid path symbol {code[pos]!r} at position {pos}")
        return node.char, pos + 1
    while not node.is_leaf:
        if pos >= len(code):
            raise ValueError("Truncated code: ends part way through a code word")
        if code[pos] == LEFT:
            node = node.left
        elif code[pos] == RIGHT:
            node = node.right
        else:
            raise ValueError(f"Invalid path symbol {code[pos]!r} at position {pos}")
        pos += 1
    return node.char, pos


def decode(tree: Node, code: str) -> str:
    """Decodes a string of path symbols back into text."""
    decoded = []
    pos = 0
    while pos < len(code):
        char, pos = decode_char(tree, code, pos)
        decoded.append(char)
    return "".join(decoded)


def code_table(tree: Node) -> dict[str, str]:
    """Maps every leaf character to its code word, in left to right order."""
    table = {}
    _update_table(tree, "", table)
    return table


def _update_table(node: Node, code: str, table: dict[str, str]) -> None:
    if node.is_leaf:
        table[node.char] = code or LEFT
    else:
        _update_table(node.left, code + LEFT, table)
        _update_table(node.right, code + RIGHT, table)
