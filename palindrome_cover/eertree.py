"""Online palindromic tree (eertree).

The automaton ingests a string one position at a time and, after each step,
points at the node describing the longest palindromic suffix of the prefix
read so far.  Nodes live in a flat list and refer to each other by index:

* node ``0`` is the imaginary root of length ``-1``; extending it by a
  character yields the single-character palindrome,
* node ``1`` is the empty root of length ``0``; its suffix link points at the
  imaginary root so every suffix-link walk ends there.

Each step costs amortised constant time, so feeding a whole string is linear
in its length.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

__all__ = [
    "EMPTY_ROOT",
    "IMAGINARY_ROOT",
    "PalindromeAutomaton",
    "PalindromeNode",
]

IMAGINARY_ROOT = 0
EMPTY_ROOT = 1


@dataclass(slots=True)
class PalindromeNode:
    """A distinct palindrome (or one of the two roots) inside the tree."""

    length: int
    suffix_link: int
    transitions: Dict[str, int] = field(default_factory=dict)


class PalindromeAutomaton:
    """Incrementally built palindromic tree over *sequence*."""

    __slots__ = ("_sequence", "_nodes", "_active_node", "_next_position")

    def __init__(self, sequence: str) -> None:
        if not isinstance(sequence, str):
            raise TypeError("sequence must be a string")
        self._sequence = sequence
        self._nodes: List[PalindromeNode] = [
            PalindromeNode(length=-1, suffix_link=IMAGINARY_ROOT),
            PalindromeNode(length=0, suffix_link=IMAGINARY_ROOT),
        ]
        self._active_node = EMPTY_ROOT
        self._next_position = 0

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------
    def add_character_at(self, position: int) -> int:
        """Ingest ``sequence[position]`` and return the longest suffix node.

        Positions must be fed exactly once each, in order ``0, 1, 2, ...``.
        """

        if position != self._next_position:
            raise ValueError(
                f"positions must be added in order: expected {self._next_position}, "
                f"received {position}"
            )
        if position >= len(self._sequence):
            raise IndexError("position lies beyond the end of the sequence")
        self._next_position += 1

        character = self._sequence[position]
        parent_index = self._find_extendable(self._active_node, position, character)
        parent = self._nodes[parent_index]

        existing = parent.transitions.get(character)
        if existing is not None:
            self._active_node = existing
            return existing

        new_index = len(self._nodes)
        new_length = parent.length + 2
        if new_length == 1:
            suffix_link = EMPTY_ROOT
        else:
            # The shorter extendable suffix always has its transition already.
            link_parent = self._find_extendable(parent.suffix_link, position, character)
            suffix_link = self._nodes[link_parent].transitions[character]

        self._nodes.append(PalindromeNode(length=new_length, suffix_link=suffix_link))
        parent.transitions[character] = new_index
        self._active_node = new_index
        return new_index

    def length_of(self, node_index: int) -> int:
        """Return the palindrome length represented by *node_index*."""

        return self._nodes[node_index].length

    def suffix_link_of(self, node_index: int) -> int:
        """Return the suffix-link target of *node_index*."""

        return self._nodes[node_index].suffix_link

    @property
    def active_node(self) -> int:
        """Index of the node for the longest palindromic suffix read so far."""

        return self._active_node

    @property
    def node_count(self) -> int:
        """Total number of nodes, roots included."""

        return len(self._nodes)

    @property
    def palindrome_count(self) -> int:
        """Number of distinct non-empty palindromic substrings seen so far."""

        return len(self._nodes) - 2

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _find_extendable(self, node_index: int, position: int, character: str) -> int:
        """Walk suffix links from *node_index* until *character* can wrap the node.

        The imaginary root always qualifies: its mirrored index is *position*
        itself.
        """

        sequence = self._sequence
        while True:
            mirrored = position - 1 - self._nodes[node_index].length
            if mirrored >= 0 and sequence[mirrored] == character:
                return node_index
            node_index = self._nodes[node_index].suffix_link
