import pytest

from pixelcompare.matching import build_correspondence, list_page_images, match_suffix


@pytest.mark.parametrize(
    "name, expected",
    [
        ("report-1.png", "1"),
        ("report-07.png", "07"),
        ("my-long-name-123.png", "123"),
        ("a-b-2-10.png", "10"),
    ],
)
def test_match_suffix_returns_digit_run(name, expected):
    assert match_suffix(name) == expected


@pytest.mark.parametrize(
    "name",
    ["report.png", "report1.png", "report-1.jpg", "report-.png", "report-1a.png", "report-1.png.bak"],
)
def test_match_suffix_without_pattern(name):
    assert match_suffix(name) is None


def test_correspondence_pairs_common_suffixes():
    first = ["a-1.png", "a-2.png", "a-3.png"]
    second = ["b-2.png", "b-3.png", "b-4.png"]

    result = build_correspondence(first, second)

    assert result.suffixes() == ["2", "3"]
    assert [(p.first, p.second) for p in result.pairs] == [
        ("a-2.png", "b-2.png"),
        ("a-3.png", "b-3.png"),
    ]
    assert result.unmatched_first == ["a-1.png"]
    assert result.unmatched_second == ["b-4.png"]


def test_correspondence_follows_first_set_order():
    first = ["a-10.png", "a-2.png", "a-1.png"]
    second = ["b-1.png", "b-2.png", "b-10.png"]

    result = build_correspondence(first, second)

    assert result.suffixes() == ["10", "2", "1"]
    assert not result.unmatched_first
    assert not result.unmatched_second


def test_correspondence_uses_exact_suffix_string():
    result = build_correspondence(["a-1.png"], ["b-01.png"])

    assert result.pairs == []
    assert result.unmatched_first == ["a-1.png"]
    assert result.unmatched_second == ["b-01.png"]


def test_correspondence_reports_files_without_suffix():
    result = build_correspondence(["cover.png", "a-1.png"], ["b-1.png", "notes.png"])

    assert result.suffixes() == ["1"]
    assert result.unmatched_first == ["cover.png"]
    assert result.unmatched_second == ["notes.png"]


def test_correspondence_first_duplicate_in_second_set_wins():
    result = build_correspondence(["a-1.png"], ["b-1.png", "c-1.png"])

    assert result.pairs[0].second == "b-1.png"
    assert result.unmatched_second == ["c-1.png"]


def test_correspondence_of_empty_sets():
    result = build_correspondence([], ["b-1.png"])

    assert result.pairs == []
    assert result.unmatched_first == []
    assert result.unmatched_second == ["b-1.png"]


def test_list_page_images(tmp_path):
    for name in ("doc-2.png", "doc-1.png", "notes.txt"):
        (tmp_path / name).write_bytes(b"")
    (tmp_path / "nested.png").mkdir()

    assert list_page_images(tmp_path) == ["doc-1.png", "doc-2.png"]
    assert list_page_images(tmp_path / "missing") == []


@pytest.mark.parametrize("name", ["a-1.png\n", "a-1.png\r\n"])
def test_match_suffix_rejects_trailing_newline(name):
    assert match_suffix(name) is None
