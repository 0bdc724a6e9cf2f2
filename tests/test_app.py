from typetest.widget.app import _cursor_x_offset, _wrap_words


def test_wrap_words_moves_word_to_next_line():
    assert _wrap_words([3, 3, 3], gap=1, max_width=7) == [(0, 2), (2, 3)]


def test_wrap_words_gives_long_word_its_own_line():
    assert _wrap_words([2, 20, 2], gap=1, max_width=10) == [(0, 1), (1, 2), (2, 3)]


def test_wrap_words_single_line_and_empty():
    assert _wrap_words([1, 1, 1], gap=1, max_width=100) == [(0, 3)]
    assert _wrap_words([], gap=1, max_width=100) == []


def test_cursor_offset_at_letter_and_past_end():
    widths = [10, 12, 8]
    assert _cursor_x_offset(widths, 0) == 0
    assert _cursor_x_offset(widths, 2) == 22
    assert _cursor_x_offset(widths, 3) == 30
