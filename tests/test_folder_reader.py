import os

import pytest

from rangeclust.folder_reader import (
    FolderReader,
    Order,
    num_from_string,
    numeric_string_compare,
)


@pytest.fixture
def scans(tmp_path):
    for name in ["scan_10.bin", "scan_2.bin", "scan_1.bin", "scan_3.txt", "other_5.bin"]:
        (tmp_path / name).write_bytes(b"")
    return tmp_path


def test_num_from_string_takes_last_number():
    assert num_from_string("dir12/scan_0042.png") == 42
    assert num_from_string("abc") == 0
    assert num_from_string("") == 0


def test_numeric_string_compare():
    assert numeric_string_compare("a_2", "a_10")
    assert not numeric_string_compare("a_10", "a_2")
    assert not numeric_string_compare("a_3", "b_3")


def test_filters_by_ending(scans):
    reader = FolderReader(scans, ".bin")
    names = sorted(os.path.basename(p) for p in reader.all_file_paths)
    assert names == ["other_5.bin", "scan_1.bin", "scan_10.bin", "scan_2.bin"]


def test_filters_by_prefix_and_sorts_numerically(scans):
    reader = FolderReader(scans, ".bin", starting_with="scan", order=Order.SORTED)
    names = [os.path.basename(p) for p in reader.all_file_paths]
    assert names == ["scan_1.bin", "scan_2.bin", "scan_10.bin"]


def test_next_file_path_exhausts(scans):
    reader = FolderReader(scans, ".txt")
    assert os.path.basename(reader.next_file_path()) == "scan_3.txt"
    assert reader.next_file_path() is None


def test_iteration_yields_remaining(scans):
    reader = FolderReader(scans, ".bin", starting_with="scan", order=Order.SORTED)
    first = reader.next_file_path()
    rest = list(reader)
    assert [first, *rest] == reader.all_file_paths
    assert len(rest) == len(reader) - 1


def test_missing_folder_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FolderReader(tmp_path / "missing", ".bin")


def test_file_instead_of_folder_gives_no_paths(scans):
    reader = FolderReader(scans / "scan_1.bin", ".bin")
    assert reader.all_file_paths == []
    assert reader.next_file_path() is None