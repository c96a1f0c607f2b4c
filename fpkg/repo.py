"""Repositories: parsing the binary repository description and package lookup."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .pkg import Package
from .ucstr import ucstrcmp

_U64 = struct.Struct("<Q")


class Bytecode(enum.IntEnum):
    """Record codes of the binary repository description."""

    REPO_NAME = 0x00000001
    REPO_URL = 0x00000002
    REPO_PKGS_LEN = 0x00000003
    PKG_NAME = 0x00000004
    PKG_DESC = 0x00000005
    PKG_AUTHOR = 0x00000006
    PKG_VERSION = 0x00000007
    PKG_ARCH = 0x00000008
    PKG_DEPENDS = 0x00000009
    PKG_CONFLICTS = 0x0000000A
    PKG_OPTDEPS = 0x0000000B
    PKG_SUGGESTS = 0x0000000C
    PKG_REPLACES = 0x0000000D
    PKG_FILES = 0x0000000E


_STRING_FIELDS: Dict[Bytecode, Optional[str]] = {
    Bytecode.PKG_NAME: "name",
    Bytecode.PKG_DESC: "description",
    Bytecode.PKG_AUTHOR: "author",
    Bytecode.PKG_VERSION: "version",
    Bytecode.PKG_ARCH: None,
}

_LIST_FIELDS: Dict[Bytecode, str] = {
    Bytecode.PKG_DEPENDS: "depends",
    Bytecode.PKG_CONFLICTS: "conflicts",
    Bytecode.PKG_OPTDEPS: "optdepends",
    Bytecode.PKG_SUGGESTS: "suggests",
    Bytecode.PKG_REPLACES: "replaces",
    Bytecode.PKG_FILES: "files",
}

_PACKAGE_CODES = frozenset(_STRING_FIELDS) | frozenset(_LIST_FIELDS)


class _Reader:
    """Sequential reader over the repository stream."""

    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def peek_u64(self) -> Optional[int]:
        if self._pos + _U64.size > len(self._data):
            return None
        return _U64.unpack_from(self._data, self._pos)[0]

    def u64(self) -> int:
        value = self.peek_u64()
        if value is None:
            raise ValueError(f"truncated repository data at offset {self._pos}")
        self._pos += _U64.size
        return value

    def code(self) -> Bytecode:
        raw = self.u64()
        try:
            return Bytecode(raw)
        except ValueError:
            raise ValueError(f"unknown repository record code {raw:#x}") from None

    def cstr(self) -> bytes:
        end = self._data.find(b"\0", self._pos)
        if end < 0:
            raise ValueError(f"unterminated string at offset {self._pos}")
        value = self._data[self._pos:end]
        self._pos = end + 1
        return value

    def cstr_list(self) -> List[bytes]:
        return [self.cstr() for _ in range(self.u64())]


@dataclass
class Repo:
    """A package repository: its name, its URL and the packages it offers."""

    name: Optional[bytes] = None
    url: Optional[bytes] = None
    pkgs: List[Package] = field(default_factory=list)

    def find_pkg(self, template: Package) -> Optional[Package]:
        """Return the package matching the template's name and version, or None.

        A missing version on either side matches any version.
        """
        if template.name is None:
            raise ValueError("template package needs a name")
        for pkg in self.pkgs:
            if pkg.name is None or ucstrcmp(pkg.name, template.name):
                continue
            if pkg.version is None or template.version is None:
                return pkg
            if not ucstrcmp(pkg.version, template.version):
                return pkg
        return None


def _read_packages(reader: _Reader, count: int) -> List[Package]:
    packages: List[Package] = []
    while (raw := reader.peek_u64()) is not None and raw in _PACKAGE_CODES:
        code = reader.code()
        if code is Bytecode.PKG_NAME:
            packages.append(Package(name=reader.cstr()))
            continue
        if not packages:
            raise ValueError(f"package record {code.name} before any package name")
        current = packages[-1]
        if code in _STRING_FIELDS:
            value = reader.cstr()
            attr = _STRING_FIELDS[code]
            if attr is not None:
                setattr(current, attr, value)
        else:
            setattr(current, _LIST_FIELDS[code], reader.cstr_list())
    if len(packages) != count:
        raise ValueError(f"expected {count} packages, found {len(packages)}")
    return packages


def parse_repo(stream: Union[bytes, bytearray, memoryview]) -> Repo:
    """Build a repository from its binary description."""
    reader = _Reader(stream)
    repo = Repo()
    while not reader.at_end:
        code = reader.code()
        if code is Bytecode.REPO_NAME:
            repo.name = reader.cstr()
        elif code is Bytecode.REPO_URL:
            repo.url = reader.cstr()
        elif code is Bytecode.REPO_PKGS_LEN:
            repo.pkgs.extend(_read_packages(reader, reader.u64()))
        else:
            raise ValueError(f"package record {code.name} outside a package list")
    repo.pkgs.sort(key=lambda p: (p.name or b"", p.version or b""))
    return repo