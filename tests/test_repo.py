import struct

import pytest

from fpkg.pkg import Package
from fpkg.repo import Bytecode, Repo, parse_repo


def code(c):
    return struct.pack("<Q", int(c))


def s(text):
    return text + b"\0"


def strlist(items):
    return struct.pack("<Q", len(items)) + b"".join(s(i) for i in items)


def sample_stream():
    return (
        code(Bytecode.REPO_NAME) + s(b"core")
        + code(Bytecode.REPO_URL) + s(b"https://repo.example.com/core")
        + code(Bytecode.REPO_PKGS_LEN) + struct.pack("<Q", 2)
        + code(Bytecode.PKG_NAME) + s(b"zlib")
        + code(Bytecode.PKG_VERSION) + s(b"1.3")
        + code(Bytecode.PKG_DESC) + s(b"compression library")
        + code(Bytecode.PKG_FILES) + strlist([b"/usr/lib/libz.so", b"/usr/include/zlib.h"])
        + code(Bytecode.PKG_NAME) + s(b"bash")
        + code(Bytecode.PKG_VERSION) + s(b"5.2")
        + code(Bytecode.PKG_AUTHOR) + s(b"someone")
        + code(Bytecode.PKG_ARCH) + s(b"x86_64")
        + code(Bytecode.PKG_DEPENDS) + strlist([b"readline", b"glibc"])
        + code(Bytecode.PKG_CONFLICTS) + strlist([])
    )


def test_raw_bytecode_values_fixed_by_format():
    stream = (
        code(1) + s(b"core")
        + code(3) + struct.pack("<Q", 1)
        + code(4) + s(b"pkg")
        + code(8) + s(b"x86_64")
        + code(0x0E) + strlist([b"/bin/pkg"])
    )
    repo = parse_repo(stream)
    assert repo.name == b"core"
    assert [p.name for p in repo.pkgs] == [b"pkg"]
    assert repo.pkgs[0].files == [b"/bin/pkg"]


def test_repo_header_parsed():
    repo = parse_repo(sample_stream())
    assert repo.name == b"core"
    assert repo.url == b"https://repo.example.com/core"


def test_packages_parsed_and_sorted_by_name():
    repo = parse_repo(sample_stream())
    assert [p.name for p in repo.pkgs] == [b"bash", b"zlib"]
    bash, zlib = repo.pkgs
    assert bash.depends == [b"readline", b"glibc"]
    assert bash.conflicts == []
    assert bash.author == b"someone"
    assert zlib.description == b"compression library"
    assert zlib.files == [b"/usr/lib/libz.so", b"/usr/include/zlib.h"]


def test_empty_stream_gives_empty_repo():
    assert parse_repo(b"") == Repo()


def test_find_pkg_matches_name_without_version():
    repo = parse_repo(sample_stream())
    found = repo.find_pkg(Package(name=b"zlib"))
    assert found is not None
    assert found.version == b"1.3"


def test_find_pkg_matches_exact_version():
    repo = parse_repo(sample_stream())
    found = repo.find_pkg(Package(name=b"bash", version=b"5.2"))
    assert found is repo.pkgs[0]


def test_find_pkg_version_mismatch():
    repo = parse_repo(sample_stream())
    assert repo.find_pkg(Package(name=b"bash", version=b"4.0")) is None


def test_find_pkg_unknown_name():
    repo = parse_repo(sample_stream())
    assert repo.find_pkg(Package(name=b"vim")) is None


def test_find_pkg_requires_name():
    with pytest.raises(ValueError):
        parse_repo(sample_stream()).find_pkg(Package(version=b"1.0"))


def test_truncated_code_raises():
    with pytest.raises(ValueError):
        parse_repo(code(Bytecode.REPO_NAME)[:5])


def test_unterminated_string_raises():
    with pytest.raises(ValueError):
        parse_repo(code(Bytecode.REPO_NAME) + b"core")


def test_unknown_code_raises():
    with pytest.raises(ValueError, match="unknown"):
        parse_repo(struct.pack("<Q", 0x99))


def test_package_count_mismatch_raises():
    stream = (
        code(Bytecode.REPO_PKGS_LEN) + struct.pack("<Q", 3)
        + code(Bytecode.PKG_NAME) + s(b"only")
    )
    with pytest.raises(ValueError):
        parse_repo(stream)


def test_field_before_name_raises():
    stream = (
        code(Bytecode.REPO_PKGS_LEN) + struct.pack("<Q", 1)
        + code(Bytecode.PKG_VERSION) + s(b"1.0")
    )
    with pytest.raises(ValueError):
        parse_repo(stream)


def test_package_field_at_top_level_raises():
    with pytest.raises(ValueError):
        parse_repo(code(Bytecode.PKG_NAME) + s(b"stray"))


def test_header_after_package_list():
    stream = (
        code(Bytecode.REPO_PKGS_LEN) + struct.pack("<Q", 1)
        + code(Bytecode.PKG_NAME) + s(b"a")
        + code(Bytecode.REPO_NAME) + s(b"late")
    )
    repo = parse_repo(stream)
    assert repo.name == b"late"
    assert [p.name for p in repo.pkgs] == [b"a"]