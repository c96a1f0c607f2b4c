"""File-system helpers: nested directory creation, iteration, copying, temp names."""

from __future__ import annotations

import os
import secrets
import shutil
import stat
import threading
from collections import deque
from types import TracebackType
from typing import Optional, Type, Union

PathLike = Union[str, "os.PathLike[str]"]

_TEMP_CHARS = (
    "abcdefghijklmnoprstquwxyz"
    "ABCDEFGHIJKLMNOPRSTQUWXYZ"
    "0123456789"
)
_TEMP_PREFIX = "/tmp/"
_PATH_MAX = 4096


def mkdirr(path: PathLike, perm: int = 0o755) -> None:
    """Create every directory named by a prefix of ``path`` that ends in a slash.

    Directories that already exist are left alone; any other failure raises
    ``OSError``.
    """
    text = os.fspath(path)
    for index, char in enumerate(text):
        if char != "/" or index == 0:
            continue
        prefix = text[:index]
        try:
            os.mkdir(prefix, perm)
        except FileExistsError:
            continue


class DirIterator:
    """Thread-safe iterator over the entry names of a directory.

    Like a raw directory read, the names include ``.`` and ``..``.
    """

    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        self._lock = threading.Lock()
        self._entries: Optional[os.ScandirIterator] = os.scandir(self.path)
        self._pending = deque([os.curdir, os.pardir])

    def __iter__(self) -> "DirIterator":
        return self

    def __next__(self) -> str:
        with self._lock:
            if self._entries is None:
                raise StopIteration
            if self._pending:
                return self._pending.popleft()
            try:
                entry = next(self._entries)
            except StopIteration:
                self._release()
                raise
            return entry.name

    def _release(self) -> None:
        if self._entries is not None:
            self._entries.close()
            self._entries = None
        self._pending.clear()

    def close(self) -> None:
        """Release the directory handle; further iteration yields nothing."""
        with self._lock:
            self._release()

    def __enter__(self) -> "DirIterator":
        return self

    def __exit__(
        self,
        *args: Union[Optional[Type[BaseException]], Optional[BaseException], Optional[TracebackType]],
    ) -> None:
        self.close()


def sfcp(src: PathLike, dst: PathLike) -> None:
    """Copy the contents of ``src`` to ``dst`` and give ``dst`` the mode of ``src``."""
    mode = os.stat(src).st_mode
    shutil.copyfile(src, dst)
    os.chmod(dst, stat.S_IMODE(mode))


def mktempd(n: int, buf_max: int = _PATH_MAX) -> str:
    """Return a random temporary directory name under /tmp.

    The name has ``n`` random characters, fewer if the whole path plus a
    terminator would not fit in ``buf_max`` bytes. The directory is not created.
    """
    if n < 0:
        raise ValueError("name length must not be negative")
    room = buf_max - len(_TEMP_PREFIX) - 1
    if room < 0:
        raise ValueError("buffer too small for a temporary path")
    name = "".join(secrets.choice(_TEMP_CHARS) for _ in range(min(n, room)))
    return _TEMP_PREFIX + name