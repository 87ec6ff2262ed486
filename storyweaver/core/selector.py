"""
Deterministic selection from candidate lists.

Pure functions: the same seed and list always give the same element.
"""

from typing import Sequence, TypeVar

from .errors import EmptyTemplateListError

T = TypeVar("T")


def name_seed(child_name: str) -> int:
    """Sum of the code points of a name."""
    return sum(ord(char) for char in child_name)


def pick(items: Sequence[T], seed: int) -> T:
    """
    Pick an element by seed modulo list length.

    Args:
        items: Non-empty candidate list
        seed: Any integer; negative seeds are normalized first

    Raises:
        EmptyTemplateListError: If items is empty
    """
    if not items:
        raise EmptyTemplateListError("Cannot pick from an empty candidate list")
    return items[abs(seed) % len(items)]
