import re

import pytest

from renamer.domain.errors import InvalidPatternError
from renamer.domain.find_replace import expand_replacement, find_replace
from renamer.domain.models import FileEntry

FILES = [
    FileEntry(name="photo_001.jpg", path="/p/photo_001.jpg", extension=".jpg"),
    FileEntry(name="photo_002.jpg", path="/p/photo_002.jpg", extension=".jpg"),
    FileEntry(name="document.pdf", path="/p/document.pdf", extension=".pdf"),
]


def test_basic_replacement() -> None:
    assert find_replace(FILES, "photo", "vacation") == ["vacation_001", "vacation_002", "document"]


def test_capture_group_swap_python_syntax() -> None:
    assert find_replace(FILES, r"(\w+)_(\d+)", r"\2_\1") == ["001_photo", "002_photo", "document"]


def test_capture_group_swap_dollar_syntax() -> None:
    assert find_replace(FILES, r"(\w+)_(\d+)", "${2}_$1") == ["001_photo", "002_photo", "document"]


def test_no_match_keeps_original_stem() -> None:
    assert find_replace(FILES, "xyz", "abc") == ["photo_001", "photo_002", "document"]


def test_empty_search_returns_stems_without_compiling() -> None:
    assert find_replace(FILES, "", "prefix") == ["photo_001", "photo_002", "document"]
    assert find_replace(FILES, "", "[invalid") == ["photo_001", "photo_002", "document"]


def test_invalid_regex_raises() -> None:
    with pytest.raises(InvalidPatternError, match="invalid pattern"):
        find_replace(FILES, "[invalid", "replacement")


def test_missing_group_reference_expands_to_empty() -> None:
    assert find_replace(FILES, r"(photo)", r"pic\3") == ["pic_001", "pic_002", "document"]
    assert find_replace(FILES, r"(photo)", "${9}x${name}") == ["x_001", "x_002", "document"]


def test_escapes_other_than_group_references_stay_literal() -> None:
    assert find_replace(FILES, "photo", r"a\tb") == [r"a\tb_001", r"a\tb_002", "document"]
    assert find_replace(FILES, "photo", r"\0") == ["photo_001", "photo_002", "document"]


def test_uppercase_extension_is_stripped_from_stem() -> None:
    files = [FileEntry(name="IMG_7.JPG", path="/p/IMG_7.JPG", extension=".jpg")]
    assert find_replace(files, "IMG", "pic") == ["pic_7"]


def test_expand_replacement() -> None:
    match = re.search(r"(?P<head>\w)(\d)", "a1")
    assert expand_replacement(match, "${2}_$1") == "1_a"
    assert expand_replacement(match, r"\g<head>\g<2>") == "a1"
    assert expand_replacement(match, "${head}!") == "a!"
    assert expand_replacement(match, "cost$$") == "cost$"
    assert expand_replacement(match, r"\n\t") == r"\n\t"
