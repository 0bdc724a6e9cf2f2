import pytest

from typetest.passage import CORRECT, DEFAULT, INCORRECT, Letter, build_passage, letter_state, normalize_passage


def test_build_passage_splits_words_and_letters():
    words = build_passage("cat dog")
    assert [word.text for word in words] == ["cat", "dog"]
    assert [letter.text for letter in words[0].letters] == ["c", "a", "t"]
    for word in words:
        assert not word.error and not word.populated
        for letter in word.letters:
            assert letter == Letter(text=letter.text)


def test_build_passage_keeps_punctuation_inside_words():
    words = build_passage("Solid's (code)")
    assert [word.text for word in words] == ["Solid's", "(code)"]
    assert len(words[1].letters) == 6


@pytest.mark.parametrize("text", ["", " cat", "cat ", "cat  dog"])
def test_build_passage_rejects_empty_words(text):
    with pytest.raises(ValueError):
        build_passage(text)


def test_normalize_passage_collapses_whitespace():
    assert normalize_passage("  cat\n dog\t\tbird ") == "cat dog bird"
    assert [word.text for word in build_passage(normalize_passage(" a  b "))] == ["a", "b"]


def test_letter_state_mapping():
    assert letter_state(Letter(text="a")) == DEFAULT
    assert letter_state(Letter(text="a", populated=True)) == CORRECT
    assert letter_state(Letter(text="a", populated=True, error=True)) == INCORRECT
    overflow = Letter(text="x", populated=True, error=True, errored_text_at_the_end=True)
    assert letter_state(overflow) == INCORRECT
