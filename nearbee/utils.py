"""
Letter-set helpers shared by the corpus generator and the session engine.
"""

from typing import Iterable, List, Set, FrozenSet


def letters_of(word: str) -> FrozenSet[str]:
    """Distinct lowercase letters of a word, ignoring anything non-alphabetic."""
    return frozenset(c.lower() for c in word if c.isalpha())


def new_letters(candidate: Iterable[str], alphabet: Iterable[str]) -> Set[str]:
    """Letters of the candidate that the alphabet does not contain."""
    return set(candidate) - set(alphabet)


def missing_letters(candidate: Iterable[str], alphabet: Iterable[str]) -> Set[str]:
    """Letters of the alphabet that the candidate does not use."""
    return set(alphabet) - set(candidate)


def is_near_anagram(alphabet: Iterable[str], candidate: Iterable[str]) -> bool:
    """
    Check if two letter sets differ by exactly one substitution.

    Exactly one alphabet letter is absent from the candidate and exactly one
    candidate letter is absent from the alphabet. The test is symmetric.
    """
    alphabet, candidate = set(alphabet), set(candidate)
    return len(alphabet - candidate) == 1 and len(candidate - alphabet) == 1


def unique_in_order(items: Iterable[str]) -> List[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def puzzle_key(center: str, outer: Iterable[str]) -> str:
    """Storage key for a puzzle: the center followed by the outer letters."""
    return center + "".join(outer)
