from pathlib import Path
import pytest

from autocompletor.loader import load_vocabulary, parse_vocabulary


def test_parse_with_count_header():
    vocab = parse_vocabulary(["4", "3\tair", "2\tbat", "4\tbell", "1\tboy"])
    assert vocab.words == ("air", "bat", "bell", "boy")
    assert vocab.weights == (3.0, 2.0, 4.0, 1.0)
    assert len(vocab) == 4


def test_parse_without_header_and_with_blank_lines():
    vocab = parse_vocabulary(["", "   5627187200\tthe", "", "3.5 of"])
    assert vocab.words == ("the", "of")
    assert vocab.weights == (5627187200.0, 3.5)


def test_count_header_after_leading_blank_lines():
    vocab = parse_vocabulary(["", "  ", "2", "3\tair", "2\tbat"])
    assert vocab.words == ("air", "bat")


def test_only_first_non_blank_line_can_be_a_header():
    with pytest.raises(ValueError, match="line 3"):
        parse_vocabulary(["2", "3\tair", "7"])


def test_words_may_contain_spaces():
    vocab = parse_vocabulary(["14608512\tShanghai, China", "13076300\tBuenos Aires, Argentina"])
    assert vocab.words == ("Shanghai, China", "Buenos Aires, Argentina")


def test_count_mismatch_is_not_an_error():
    vocab = parse_vocabulary(["10", "1\tone"])
    assert vocab.words == ("one",)


@pytest.mark.parametrize("line", ["justaword", "abc\tword"])
def test_malformed_line_reports_line_number(line):
    with pytest.raises(ValueError, match="line 2"):
        parse_vocabulary(["1\tok", line])


def test_load_vocabulary_from_file(tmp_path: Path):
    f = tmp_path / "words.txt"
    f.write_text("3\n3\tair\r\n2\tbat\n4\tbell\n", encoding="utf-8")
    vocab = load_vocabulary(str(f))
    assert vocab.words == ("air", "bat", "bell")
    assert vocab.weights == (3.0, 2.0, 4.0)


def test_load_vocabulary_unicode(tmp_path: Path):
    f = tmp_path / "words.txt"
    f.write_text("7\tcafé\n", encoding="utf-8")
    assert load_vocabulary(str(f)).words == ("café",)


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_vocabulary(str(tmp_path / "nope.txt"))
