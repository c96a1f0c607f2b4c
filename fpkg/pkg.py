"""Package metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .ucstr import ucstrcmp

_LIST_FIELDS = ("depends", "conflicts", "optdepends", "suggests", "replaces", "files")


@dataclass
class Package:
    """A package description as held by a repository."""

    name: Optional[bytes] = None
    version: Optional[bytes] = None
    description: Optional[bytes] = None
    author: Optional[bytes] = None
    depends: List[bytes] = field(default_factory=list)
    conflicts: List[bytes] = field(default_factory=list)
    optdepends: List[bytes] = field(default_factory=list)
    suggests: List[bytes] = field(default_factory=list)
    replaces: List[bytes] = field(default_factory=list)
    files: List[bytes] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in _LIST_FIELDS:
            setattr(self, name, list(getattr(self, name)))


def cmpver(p1: Package, p2: Package) -> bool:
    """Return True when the versions of the two packages differ."""
    if p1.version is None or p2.version is None:
        raise ValueError("both packages need a version to compare")
    return bool(ucstrcmp(p1.version, p2.version))