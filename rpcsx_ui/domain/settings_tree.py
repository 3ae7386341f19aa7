"""Typed view of the emulator settings tree.

The tree arrives as deserialized JSON. Mappings with a ``"type"`` key are leaf
settings; mappings without one are groups of further settings. Anything else
is an opaque leaf too, it never becomes a navigable group.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Tuple, Union

ROUTE_DELIMITER = "@@"
LEAF_MARKER = "type"


@dataclass(frozen=True)
class Leaf:
    payload: Any


@dataclass(frozen=True)
class Group:
    children: Dict[str, "Node"] = field(default_factory=dict)

    def groups(self) -> Iterator[Tuple[str, "Group"]]:
        """Child groups in key order."""
        for key, child in self.children.items():
            if isinstance(child, Group):
                yield key, child

    def leaves(self) -> Iterator[Tuple[str, Leaf]]:
        for key, child in self.children.items():
            if isinstance(child, Leaf):
                yield key, child


Node = Union[Leaf, Group]


def classify(raw: Any) -> Node:
    """Convert deserialized JSON into ``Leaf`` / ``Group`` nodes."""
    if isinstance(raw, (Leaf, Group)):
        return raw
    if isinstance(raw, Mapping) and LEAF_MARKER not in raw:
        return Group({str(key): classify(value) for key, value in raw.items()})
    return Leaf(raw)


def classify_root(raw: Any) -> Group:
    """Classify the top of the tree, which is always a group.

    Only children are tested for ``LEAF_MARKER``, so a top-level key named
    ``"type"`` is an ordinary category. Non-mapping input yields an empty group.
    """
    if isinstance(raw, Group):
        return raw
    if isinstance(raw, Mapping):
        return Group({str(key): classify(value) for key, value in raw.items()})
    return Group()



@dataclass(frozen=True)
class RoutePath:
    """Position of a group in the tree as a sequence of keys."""

    segments: Tuple[str, ...] = ()

    def child(self, key: str) -> "RoutePath":
        return RoutePath(self.segments + (key,))

    @property
    def name(self) -> str:
        return self.segments[-1] if self.segments else ""

    def encode(self) -> str:
        return "".join(ROUTE_DELIMITER + segment for segment in self.segments)

    @classmethod
    def decode(cls, text: str) -> "RoutePath":
        if not text:
            return cls()
        if not text.startswith(ROUTE_DELIMITER):
            raise ValueError(f"Route path must start with {ROUTE_DELIMITER!r}: {text!r}")
        return cls(tuple(text[len(ROUTE_DELIMITER) :].split(ROUTE_DELIMITER)))

    def __str__(self) -> str:
        return self.encode()
