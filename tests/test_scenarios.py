from typetest.engine import BACKSPACE, SPACE, Cursor, KeyEvent, TypingEngine


def _press(engine, *keys, alt=False):
    for key in keys:
        engine.handle_key(KeyEvent(key, alt_modifier=alt))


def test_complete_word_and_advance():
    engine = TypingEngine("cat dog")
    _press(engine, "c", "a", "t")
    assert all(l.populated and not l.error for l in engine.words[0].letters)
    assert engine.cursor == Cursor(0, 3)
    _press(engine, SPACE)
    assert engine.cursor == Cursor(1, 0)


def test_overtype_then_backspace():
    engine = TypingEngine("cat")
    _press(engine, "c", "a", "t", "x")
    extra = engine.words[0].letters[3]
    assert (extra.text, extra.error, extra.populated, extra.errored_text_at_the_end) == ("x", True, True, True)
    assert engine.cursor == Cursor(0, 4)

    _press(engine, BACKSPACE)
    assert engine.cursor == Cursor(0, 3)
    assert len(engine.words[0].letters) == 3


def test_backspace_from_next_word_start():
    engine = TypingEngine("cat dog")
    _press(engine, "c", "a", "t", SPACE)
    _press(engine, BACKSPACE)
    assert engine.cursor == Cursor(0, 3)
    assert all(l.populated and not l.error for l in engine.words[0].letters)


def test_word_delete_after_mistake():
    engine = TypingEngine("cat dog")
    _press(engine, "c", "x", "t")
    _press(engine, BACKSPACE, alt=True)
    assert all(not l.populated and not l.error for l in engine.words[0].letters)
    assert engine.cursor == Cursor(0, 0)
