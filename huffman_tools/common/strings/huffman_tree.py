from bisect import insort_right
from typing import Iterator

from huffman_tools.common.strings.alphabet import check_length, contains, frequency, nub


class Node:
    def __init__(self, char=None, weight=0, left=None, right=None):
        self.char = char  # None for internal nodes
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def leaves(self) -> list["Node"]:
        """Returns the leaves under this node, left to right."""
        if self.is_leaf:
            return [self]
        return self.left.leaves() + self.right.leaves()

    def count_leaves(self) -> int:
        return len(self.leaves())

    def count_internal(self) -> int:
        if self.is_leaf:
            return 0
        return 1 + self.left.count_internal() + self.right.count_internal()

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"Node({self.char!r}, {self.weight})"
        return f"Node({self.weight}, {self.left!r}, {self.right!r})"


class HuffmanTreeList:
    """List of Huffman trees kept sorted by ascending weight.

    Trees of equal weight keep their insertion order, which fixes the shape
    of the tree produced by reduce().

    Attributes:
        trees: list[Node]
        The trees not yet merged, lowest weight first.
    """
    def __init__(self, trees: list[Node] | None = None):
        self.trees = []
        for tree in trees or []:
            self.add(tree)

    @classmethod
    def build(cls, s: str, alphabet: str) -> "HuffmanTreeList":
        """Builds a list of leaf trees, one per character of the alphabet.

        Args:
            s: str - The source string the weights are counted from.
            alphabet: str - A duplicate-free version of s, such as nub(s).

        Returns:
            HuffmanTreeList: The leaves, sorted by frequency in s.
        """
        trees = cls()
        for i, char in enumerate(alphabet):
            if contains(alphabet[:i], char):
                raise ValueError(f"Duplicate character in alphabet: {char!r}")
            count = frequency(s, char)
            if count == 0:
                raise ValueError(f"Alphabet character not in source string: {char!r}")
            trees.add(Node(char, count))
        return trees

    def add(self, tree: Node) -> None:
        """Inserts tree after every tree of equal or lower weight."""
        insort_right(self.trees, tree, key=lambda t: t.weight)

    def pop(self) -> Node:
        """Removes and returns the lowest weight tree."""
        return self.trees.pop(0)

    @property
    def head(self) -> Node:
        return self.trees[0]

    def weights(self) -> list[int]:
        return [t.weight for t in self.trees]

    def clear(self) -> None:
        self.trees = []

    def reduce(self) -> Node:
        """Merges the two lightest trees until a single tree remains.

        The first tree becomes the left child of each merge and the second
        the right. A list holding one tree is returned unchanged.

        Returns:
            Node: The root of the finished Huffman tree.
        """
        if not self.trees:
            raise ValueError("Cannot reduce an empty Huffman tree list")
        while len(self.trees) > 1:
            left = self.pop()
            right = self.pop()
            self.add(Node(None, left.weight + right.weight, left, right))
        return self.head

    def __len__(self) -> int:
        return len(self.trees)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.trees)


def build(s: str) -> Node:
    """Builds the Huffman tree for the character frequencies of s."""
    check_length(s)
    if not s:
        raise ValueError("Cannot build a Huffman tree from an empty string")
    return HuffmanTreeList.build(s, nub(s)).reduce()
