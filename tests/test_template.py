from datetime import datetime

import pytest

from renamer.domain.models import FileEntry
from renamer.domain.template import expand_template

FILE = FileEntry(
    name="photo_sunset.jpg",
    path="/vacation_photos/photo_sunset.jpg",
    extension=".jpg",
    size_bytes=1024,
    modified_at=datetime(2026, 2, 17, 10, 30, 0),
)


@pytest.mark.parametrize(
    ("template", "index", "expected"),
    [
        ("{original}_{index}", 0, "photo_sunset_1"),
        ("file_{index:3}", 4, "file_005"),
        ("{original}.{ext}", 0, "photo_sunset.jpg"),
        ("{date}_{original}", 0, "2026-02-17_photo_sunset"),
        ("{date:%Y%m%d}", 0, "20260217"),
        ("{parent}_{index}", 0, "vacation_photos_1"),
        ("{original|upper}", 0, "PHOTO_SUNSET"),
        ("{original|lower}", 0, "photo_sunset"),
        ("{original|title}", 0, "Photo_sunset"),
        ("{parent|upper}", 0, "VACATION_PHOTOS"),
        ("{ext|upper}", 0, "JPG"),
        ("plain_name", 0, "plain_name"),
        ("IMG_{date:%Y%m%d}_{index:4}", 41, "IMG_20260217_0042"),
    ],
)
def test_expand_template(template: str, index: int, expected: str) -> None:
    assert expand_template(template, FILE, index) == expected


def test_pipes_do_not_affect_index_or_date() -> None:
    assert expand_template("{index|upper}", FILE, 0) == "1"
    assert expand_template("{date:%b|upper}", FILE, 0) == "Feb"


@pytest.mark.parametrize("fmt", ["abc", "0", "-2", "3_0", " 3", "+3"])
def test_invalid_index_width_falls_back_to_plain_number(fmt: str) -> None:
    assert expand_template(f"{{index:{fmt}}}", FILE, 6) == "7"


def test_unknown_tokens_are_left_verbatim() -> None:
    assert expand_template("{unknown}_{size:3|upper}_{index}", FILE, 1) == "{unknown}_{size:3|upper}_2"


def test_unknown_pipe_leaves_value_unchanged() -> None:
    assert expand_template("{original|reverse}", FILE, 0) == "photo_sunset"


def test_title_pipe_capitalises_each_word() -> None:
    entry = FileEntry(name="my HOLIDAY pics.png", path="/x/my HOLIDAY pics.png", extension=".png")
    assert expand_template("{original|title}", entry, 0) == "My Holiday Pics"


def test_original_strips_extension_case_insensitively() -> None:
    entry = FileEntry(name="IMG_1.JPG", path="/x/IMG_1.JPG", extension=".jpg")
    assert expand_template("{original}-{ext}", entry, 0) == "IMG_1-jpg"
