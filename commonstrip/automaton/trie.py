"""Aho-Corasick automaton over the substrings of one string.

Nodes live in a flat arena and refer to each other by index, so the fail links
never own anything and the whole automaton is dropped in one go once a round
is finished.
"""

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

from commonstrip.core.types import MatchEntry
from commonstrip.utils.constants import Constants

ROOT = Constants.ROOT_INDEX


@dataclass
class TrieNode:
    """A node in the pattern automaton.

    Attributes:
        children: Character to child index, in insertion order
        fail: Index of the longest proper suffix node (root fails to itself)
        output: Patterns ending here, including those reached via fail links
    """

    children: dict[str, int] = field(default_factory=dict)
    fail: int = ROOT
    output: list[MatchEntry] = field(default_factory=list)


class Automaton:
    """Trie of registered patterns with failure links and propagated outputs.

    Attributes:
        nodes: Node arena; index 0 is the root
        pattern_count: Number of (pattern, origin) entries registered
    """

    def __init__(self) -> None:
        self.nodes: list[TrieNode] = [TrieNode()]
        self.pattern_count = 0
        self._built = False

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def root(self) -> TrieNode:
        """The root node."""
        return self.nodes[ROOT]

    @property
    def is_built(self) -> bool:
        """Whether failure links have been computed."""
        return self._built

    def add_pattern(self, pattern: str, origin: int) -> int:
        """Register a pattern and the offset it was taken from.

        Registering the same text again at another offset keeps both entries.

        Args:
            pattern: Non-empty pattern text
            origin: Start offset of the pattern in the string it came from

        Returns:
            Index of the node the pattern ends at
        """
        if not pattern:
            raise ValueError("Empty patterns are not supported")
        if self._built:
            raise RuntimeError("Cannot add patterns after failure links are built")

        index = ROOT
        for ch in pattern:
            child = self.nodes[index].children.get(ch)
            if child is None:
                child = len(self.nodes)
                self.nodes.append(TrieNode())
                self.nodes[index].children[ch] = child
            index = child

        self.nodes[index].output.append((pattern, origin))
        self.pattern_count += 1
        return index

    def build_failure_links(self) -> None:
        """Compute fail links breadth-first and propagate outputs along them.

        A node's fail target is always shallower, so it is finished (its
        output already complete) before the node itself is processed.
        """
        nodes = self.nodes
        queue: deque[int] = deque()

        nodes[ROOT].fail = ROOT
        for child in nodes[ROOT].children.values():
            nodes[child].fail = ROOT
            queue.append(child)

        while queue:
            current = queue.popleft()
            for ch, child in nodes[current].children.items():
                fail = nodes[current].fail
                while fail != ROOT and ch not in nodes[fail].children:
                    fail = nodes[fail].fail

                target = nodes[fail].children.get(ch)
                if target is not None and target != child:
                    nodes[child].fail = target
                else:
                    nodes[child].fail = ROOT

                nodes[child].output.extend(nodes[nodes[child].fail].output)
                queue.append(child)

        self._built = True

    def step(self, state: int, ch: str) -> int:
        """Advance from state on ch, following fail links on mismatch."""
        nodes = self.nodes
        while state != ROOT and ch not in nodes[state].children:
            state = nodes[state].fail
        return nodes[state].children.get(ch, ROOT)


def build_automaton(patterns: Iterable[MatchEntry]) -> Automaton:
    """Build an automaton from (pattern, origin) pairs in registration order.

    Args:
        patterns: Pairs to register, e.g. from enumerate_substrings

    Returns:
        Automaton with failure links and outputs computed
    """
    automaton = Automaton()
    for pattern, origin in patterns:
        automaton.add_pattern(pattern, origin)
    automaton.build_failure_links()
    return automaton
