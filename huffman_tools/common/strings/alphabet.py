# Sources must be shorter than this many characters
MAX_STRING_LENGTH = 1024


def check_length(s: str) -> None:
    """Raises ValueError if s is too long to build a Huffman tree from."""
    if len(s) > MAX_STRING_LENGTH - 1:
        raise ValueError(f"String of {len(s)} characters exceeds the maximum of {MAX_STRING_LENGTH - 1}")


def contains(s: str, c: str) -> bool:
    """Returns True if the string s contains the character c."""
    for char in s:
        if char == c:
            return True
    return False


def frequency(s: str, c: str) -> int:
    """Returns the number of occurrences of c in s."""
    count = 0
    for char in s:
        if char == c:
            count += 1
    return count


def nub(s: str) -> str:
    """Returns the unique characters of s, in order of first appearance.

    Args:
        s: str - The source string, at most MAX_STRING_LENGTH - 1 characters.

    Returns:
        str: Each distinct character of s exactly once.
    """
    check_length(s)
    acc = ""
    for char in s:
        if not contains(acc, char):
            acc += char
    return acc


def frequencies(s: str) -> dict[str, int]:
    """Maps each character of nub(s) to its frequency in s."""
    return {char: frequency(s, char) for char in nub(s)}
