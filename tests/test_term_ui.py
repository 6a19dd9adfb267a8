import contextlib

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from recycling_machine.term_ui import prompt_item_type, prompt_weight, run_session


@contextlib.contextmanager
def pipe_session():
    with create_pipe_input() as pipe:
        sess = PromptSession(input=pipe, output=DummyOutput())
        yield pipe, sess


def test_prompt_item_type_returns_text_as_typed():
    with pipe_session() as (pipe, sess):
        pipe.send_text("Glass \r")
        assert prompt_item_type(["plastic", "aluminium", "glass"], session=sess) == "Glass "


def test_prompt_item_type_ctrl_c_cancels():
    with pipe_session() as (pipe, sess):
        pipe.send_text("gla\x03")
        assert prompt_item_type(["glass"], session=sess) is None


def test_prompt_weight_returns_raw_text():
    with pipe_session() as (pipe, sess):
        pipe.send_text("2.5\r")
        assert prompt_weight(session=sess) == "2.5"


def _scripted(values):
    it = iter(values)
    return lambda *_a: next(it)


def test_run_session_submits_until_empty_type(ledger):
    lines: list[str] = []
    seen_types: list[list[str]] = []

    types = iter(["glass", "steel", "glass", ""])

    def read_type(catalog_types):
        seen_types.append(list(catalog_types))
        return next(types)

    n = run_session(
        ledger,
        read_type=read_type,
        read_weight=_scripted(["2.0", "5", "oops"]),
        echo=lines.append,
    )

    assert n == 3
    assert lines[0] == "RCM-7 Library $200.00  0.00 lbs"
    assert lines[1] == "Accepts: plastic, aluminium, glass"
    assert "Item Value: $3.60" in lines
    assert "Not accepted: unknown item type 'steel'" in lines
    assert "Invalid Input" in lines
    assert lines[-1] == "RCM-7 Library $196.40  2.00 lbs"
    assert seen_types[0] == ["plastic", "aluminium", "glass"]


def test_run_session_quit_word_and_cancelled_weight(ledger):
    lines: list[str] = []
    n = run_session(
        ledger,
        read_type=_scripted(["glass", "QUIT"]),
        read_weight=_scripted([None]),
        echo=lines.append,
    )
    assert n == 0
    assert ledger.transactions == ()


def test_run_session_stops_on_eof(ledger):
    def read_type(_types):
        raise EOFError

    assert run_session(ledger, read_type=read_type, echo=lambda _s: None) == 0
