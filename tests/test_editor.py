from pebble.cli.editor import ERASE, LineEditor
from pebble.cli.keys import BACKSPACE, ENTER, TAB, KeyEvent
from pebble.completion import Trie


def _type(editor: LineEditor, text: str) -> None:
    for char in text:
        assert editor.feed(KeyEvent.of(char)) is None


def _editor(renderer, echo: bool = True) -> LineEditor:
    return LineEditor(Trie(["echo", "exit", "type"]), renderer, echo=echo)


def test_characters_are_buffered_and_echoed(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "ls")
    assert editor.buffer == "ls"
    assert renderer.out == "ls"


def test_enter_submits_and_clears_buffer(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "echo hi")
    assert editor.feed(ENTER) == "echo hi"
    assert editor.buffer == ""
    assert renderer.out.endswith("\n")


def test_backspace_removes_last_character(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "ab")
    editor.feed(BACKSPACE)
    assert editor.buffer == "a"
    assert renderer.out == "ab" + ERASE


def test_backspace_on_empty_buffer_is_ignored(renderer) -> None:
    editor = _editor(renderer)
    editor.feed(BACKSPACE)
    assert editor.buffer == ""
    assert renderer.stdout == []


def test_tab_appends_unique_completion(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "ech")
    editor.feed(TAB)
    assert editor.buffer == "echo "
    assert renderer.out == "echo "


def test_tab_on_ambiguous_prefix_changes_nothing(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "e")
    editor.feed(TAB)
    assert editor.buffer == "e"
    assert renderer.out == "e"


def test_tab_completes_only_the_last_word(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "type ex")
    editor.feed(TAB)
    assert editor.buffer == "type exit "


def test_tab_after_complete_word_adds_space(renderer) -> None:
    editor = _editor(renderer)
    _type(editor, "exit")
    editor.feed(TAB)
    assert editor.buffer == "exit "


def test_prompt_and_silent_mode(renderer) -> None:
    editor = _editor(renderer, echo=False)
    editor.prompt()
    _type(editor, "ech")
    editor.feed(TAB)
    assert editor.feed(ENTER) == "echo "
    assert renderer.out == "$ "
