import io

import pytest

from componentmgr.prompts import PromptError, Prompter

OPTIONS = ["vue", "react", "svelte"]


def prompter(text):
    return Prompter(io.StringIO(text), io.StringIO())


def test_text_returns_line():
    assert prompter("Button\n").text("Component name:") == "Button"


def test_text_shows_help_message():
    output = io.StringIO()
    Prompter(io.StringIO("x\n"), output).text("Describe:", "shown in the list")
    assert "shown in the list" in output.getvalue()


def test_text_eof_raises():
    with pytest.raises(PromptError):
        prompter("").text("Component name:")


def test_select_by_number():
    assert prompter("2\n").select("Pick:", OPTIONS) == OPTIONS[1]


def test_select_by_name():
    assert prompter("svelte\n").select("Pick:", OPTIONS) == "svelte"


def test_select_retries_on_invalid():
    assert prompter("9\nbogus\n1\n").select("Pick:", OPTIONS) == OPTIONS[0]


def test_select_without_options_raises():
    with pytest.raises(PromptError):
        prompter("1\n").select("Pick:", [])


def test_confirm_empty_gives_default():
    assert prompter("\n").confirm("Overwrite?", default=True) is True
    assert prompter("\n").confirm("Overwrite?", default=False) is False


def test_confirm_answers():
    assert prompter("yes\n").confirm("Overwrite?") is True
    assert prompter("maybe\nn\n").confirm("Overwrite?", default=True) is False


def test_multi_select_keeps_option_order():
    assert prompter("3, 1\n").multi_select("Pick:", OPTIONS) == [OPTIONS[0], OPTIONS[2]]


def test_multi_select_mixed_and_duplicates():
    assert prompter("react 2 vue\n").multi_select("Pick:", OPTIONS) == OPTIONS[:2]


def test_multi_select_empty_answer():
    assert prompter("\n").multi_select("Pick:", OPTIONS) == []


def test_multi_select_retries_on_unknown():
    assert prompter("1 nope\n2\n").multi_select("Pick:", OPTIONS) == [OPTIONS[1]]


def test_multi_select_eof_raises():
    with pytest.raises(PromptError):
        prompter("").multi_select("Pick:", OPTIONS)