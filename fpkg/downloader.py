"""A downloader plugin that fetches URLs into open files."""

from __future__ import annotations

import urllib.request
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import BinaryIO, Sequence

from .plugins import ActorOption, ActorType, Plugin

_DEFAULT_HANDLES = 10
_CHUNK_SIZE = 64 * 1024


@dataclass
class UrlFile:
    """A URL and the binary file its body is written to."""

    url: str
    file: BinaryIO


class HttpDownloader:
    """Downloads several URLs at once, at most ``handles`` in parallel."""

    def __init__(self, handles: int = _DEFAULT_HANDLES) -> None:
        if handles < 1:
            raise ValueError("at least one download handle is needed")
        self.handles = handles
        self.debug = False

    def enable_debug(self) -> None:
        """Report every chunk written."""
        self.debug = True

    def _fetch(self, item: UrlFile) -> int:
        written = 0
        with urllib.request.urlopen(item.url) as response:
            while chunk := response.read(_CHUNK_SIZE):
                item.file.write(chunk)
                written += len(chunk)
                if self.debug:
                    print(f"\t...CURL: Written {len(chunk)} bytes")
        return written

    def act(self, items: Sequence[UrlFile]) -> int:
        """Download every item; return the total number of bytes written."""
        items = list(items)
        if not items:
            return 0
        with ThreadPoolExecutor(max_workers=min(self.handles, len(items))) as pool:
            return sum(pool.map(self._fetch, items))


def make_plugin(handles: int = _DEFAULT_HANDLES) -> Plugin:
    """Return a downloader plugin backed by a fresh ``HttpDownloader``."""
    downloader = HttpDownloader(handles)
    return Plugin(
        name="curl",
        version="0.0.1",
        actor=ActorType.DOWNLOADER,
        act=downloader.act,
        opts=ActorOption.EXCLUDE_OTHERS,
        on_debug=downloader.enable_debug,
    )