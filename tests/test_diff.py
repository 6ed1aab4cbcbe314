import pytest

from renamer.domain.diff import compute_diff
from renamer.domain.models import DiffKind, DiffSegment


def _join(segments: list[DiffSegment], *kinds: DiffKind) -> str:
    return "".join(s.text for s in segments if not kinds or s.kind in kinds)


def test_identical_strings_yield_single_equal_segment() -> None:
    old_segs, new_segs = compute_diff("hello", "hello")
    assert old_segs == [DiffSegment("hello", DiffKind.EQUAL)]
    assert new_segs == [DiffSegment("hello", DiffKind.EQUAL)]


def test_both_empty_yields_nothing() -> None:
    assert compute_diff("", "") == ([], [])


def test_disjoint_strings() -> None:
    old_segs, new_segs = compute_diff("abc", "xyz")
    assert old_segs == [DiffSegment("abc", DiffKind.DELETE)]
    assert new_segs == [DiffSegment("xyz", DiffKind.INSERT)]


def test_empty_sides() -> None:
    assert compute_diff("", "new") == ([], [DiffSegment("new", DiffKind.INSERT)])
    assert compute_diff("old", "") == ([DiffSegment("old", DiffKind.DELETE)], [])


def test_insertion_only() -> None:
    old_segs, new_segs = compute_diff("ab", "aXb")
    assert old_segs == [DiffSegment("ab", DiffKind.EQUAL)]
    assert new_segs == [
        DiffSegment("a", DiffKind.EQUAL),
        DiffSegment("X", DiffKind.INSERT),
        DiffSegment("b", DiffKind.EQUAL),
    ]


def test_deletion_only() -> None:
    old_segs, new_segs = compute_diff("aXb", "ab")
    assert _join(old_segs, DiffKind.DELETE) == "X"
    assert _join(new_segs, DiffKind.INSERT) == ""


def test_tie_prefers_insert_over_delete_when_backtracking() -> None:
    old_segs, new_segs = compute_diff("ab", "ba")
    assert old_segs == [DiffSegment("a", DiffKind.DELETE), DiffSegment("b", DiffKind.EQUAL)]
    assert new_segs == [DiffSegment("b", DiffKind.EQUAL), DiffSegment("a", DiffKind.INSERT)]


def test_middle_change_keeps_common_prefix_and_suffix() -> None:
    old_segs, _ = compute_diff("img_cat_01", "img_dog_01")
    equal = _join(old_segs, DiffKind.EQUAL)
    assert equal.startswith("img_")
    assert equal.endswith("_01")


@pytest.mark.parametrize(
    ("old", "new"),
    [
        ("photo_001.jpg", "vacation_001.jpg"),
        ("file_old", "file_new"),
        ("", "x"),
        ("résumé.txt", "resume.txt"),
        ("aaaa", "aa"),
        ("IMG_0001.JPG", "2026-02-17_0001.JPG"),
    ],
)
def test_segments_reconstruct_both_sides(old: str, new: str) -> None:
    old_segs, new_segs = compute_diff(old, new)
    assert _join(old_segs) == old
    assert _join(new_segs) == new
    assert {s.kind for s in old_segs} <= {DiffKind.EQUAL, DiffKind.DELETE}
    assert {s.kind for s in new_segs} <= {DiffKind.EQUAL, DiffKind.INSERT}
    assert _join(old_segs, DiffKind.EQUAL) == _join(new_segs, DiffKind.EQUAL)
