from musicopedia.common.strings.text import csv_to_list, is_blank


def test_csv_to_list():
    assert csv_to_list(None) == []
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]
    assert csv_to_list(" a, b ,c ,, d ") == ["a", "b", "c", "d"]


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank(" x ")
