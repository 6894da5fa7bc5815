"""Aho-Corasick automaton construction and matching."""

from .matcher import LongestMatch, find_longest_match, iter_matches
from .substrings import enumerate_substrings
from .trie import Automaton, TrieNode, build_automaton

__all__ = [
    "Automaton",
    "LongestMatch",
    "TrieNode",
    "build_automaton",
    "enumerate_substrings",
    "find_longest_match",
    "iter_matches",
]
