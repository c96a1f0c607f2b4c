# fpkg

Building blocks for a small package manager on POSIX systems: a parser
for binary repository indexes, package metadata, a plugin registry with
an HTTP downloader plugin, and a few file-system helpers. A command-line
entry point recognises the package manager's commands.

## Installation

```
pip install .
```

## Command line

```
fpkg help
```

`fpkg.cli.parse_command` recognises these words (the last command word
wins; `help` or `h` stops the scan; other words are kept as operands):

| Command            | Alias |
|--------------------|-------|
| `help`             | `h`   |
| `install <PKGS>`   | `i`   |
| `remove <PKGS>`    | `r`   |
| `update`           | `u`   |
| `listdb`           | `ld`  |
| `list`             | `l`   |
| `search <PKG>`     | `s`   |

With no command, or with `help`, `fpkg` prints this command summary and
exits with status 0.

## What it does not do

The command line only recognises commands. `install`, `remove`,
`update`, `listdb`, `list` and `search` are parsed and then do nothing:
no packages are fetched, installed or removed, there is no database of
installed packages and no configured list of repositories. The library
parts below are what is there.

## Library use

```python
from fpkg.repo import parse_repo
from fpkg.pkg import Package, cmpver

repo = parse_repo(index_bytes)
found = repo.find_pkg(Package(name=b"hello"))
```

### `fpkg.repo`

`parse_repo(stream)` builds a `Repo` (`name`, `url`, `pkgs`) from a
binary index. Records start with a little-endian 64-bit `Bytecode`:

* `REPO_NAME`, `REPO_URL`: followed by a NUL-terminated string.
* `REPO_PKGS_LEN`: followed by a 64-bit package count and the package
  records. `PKG_NAME` starts a new package; `PKG_DESC`, `PKG_AUTHOR`,
  `PKG_VERSION` and `PKG_ARCH` carry one string (the architecture is
  read and dropped); `PKG_DEPENDS`, `PKG_CONFLICTS`, `PKG_OPTDEPS`,
  `PKG_SUGGESTS`, `PKG_REPLACES` and `PKG_FILES` carry a 64-bit count
  followed by that many strings.

Packages are sorted by name, then version. Truncated data, unknown
codes, package records outside a package list or before a name, and a
count that does not match raise `ValueError`.

`Repo.find_pkg(template)` returns the first package with the template's
name and version, or `None`; a missing version on either side matches
any version. A template without a name raises `ValueError`.

### `fpkg.pkg`

`Package` is a dataclass of byte strings (`name`, `version`,
`description`, `author`) and lists (`depends`, `conflicts`,
`optdepends`, `suggests`, `replaces`, `files`). `cmpver(p1, p2)` returns
`True` when the two versions differ and raises `ValueError` if either is
missing.

### `fpkg.plugins`

`Plugin` holds a name, version, `ActorType` (`DOWNLOADER`,
`DECOMPRESSOR`, `HOOKHANDLER`), an `act` callable, `ActorOption` flags
and a debug switch (`enable_debug`). `PluginRegistry` supports
`register`, `find_actors` (runs every plugin of a type on the given data
and returns their results in order), `deregister_all` and `len()`.

### `fpkg.downloader`

`HttpDownloader(handles=10).act(items)` downloads each `UrlFile(url,
file)` into its open binary file, at most `handles` at a time, and
returns the total number of bytes written. `enable_debug` reports each
chunk. `make_plugin(handles)` wraps one in a `DOWNLOADER` plugin named
`curl` with the `EXCLUDE_OTHERS` option.

### `fpkg.fs`

* `mkdirr(path, perm=0o755)` creates every directory named by a prefix
  of `path` that ends before a `/`; existing ones are left alone.
* `DirIterator(path)` iterates over entry names, `.` and `..` first;
  it is thread-safe and a context manager.
* `sfcp(src, dst)` copies a file's contents and mode.
* `mktempd(n, buf_max=4096)` returns a random name under `/tmp/` with
  `n` characters (fewer if it would not fit in `buf_max` bytes); it does
  not create the directory.

### `fpkg.ucstr`

Helpers for NUL-terminated byte strings: `ucstrcmp`, `ucnstrlen`,
`ucstrcpy`.

## Tests

```
pip install .[test]
pytest
```