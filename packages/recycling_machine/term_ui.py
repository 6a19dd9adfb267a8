"""Tiny terminal UI for the machine (prompt_toolkit-based).

The machine banner shows id, location, cash and weight, then the user is
prompted for an item type (with completion over the catalog) and a weight.
Each submission prints the paid amount or the reason it was refused.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.key_binding import KeyBindings

from .ledger import Ledger
from .machine import display, submit

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def _session_for(session: PromptSession | None, kb: KeyBindings) -> PromptSession:
    if session is None:
        return PromptSession(key_bindings=kb)
    return PromptSession(
        input=getattr(session, "input", None),
        output=getattr(session, "output", None),
        key_bindings=kb,
    )


def _cancel_bindings() -> KeyBindings:
    kb = KeyBindings()

    @kb.add("escape")
    def _(event) -> None:  # pragma: no cover - exercised indirectly
        event.app.exit(result=None)

    @kb.add("c-c", eager=True)
    def _(event) -> None:  # pragma: no cover - exercised indirectly
        event.app.exit(result=None)

    return kb


def prompt_item_type(
    types: Sequence[str],
    *,
    session: PromptSession | None = None,
    message: str = "Type (Enter on empty to quit): ",
) -> str | None:
    """Prompt for an item type, completing over the accepted ``types``.

    Returns the raw text as typed, or ``None`` when canceled via Esc or Ctrl+C.
    """

    completer = WordCompleter(list(types), ignore_case=True, match_middle=False, sentence=True)
    sess = _session_for(session, _cancel_bindings())
    return sess.prompt(message, completer=completer)


def prompt_weight(
    *,
    session: PromptSession | None = None,
    message: str = "Weight (lbs): ",
) -> str | None:
    """Prompt for the item weight; ``None`` when canceled."""

    sess = _session_for(session, _cancel_bindings())
    return sess.prompt(message)


def run_session(
    ledger: Ledger,
    *,
    session: PromptSession | None = None,
    read_type: Callable[[Sequence[str]], str | None] | None = None,
    read_weight: Callable[[], str | None] | None = None,
    echo: Callable[[str], None] = print,
) -> int:
    """Run the interactive recycle loop until the user quits.

    ``read_type``/``read_weight`` default to the prompt_toolkit prompts above
    and may be replaced for non-interactive use. Returns the number of
    submissions made.
    """

    if read_type is None:
        read_type = lambda types: prompt_item_type(types, session=session)  # noqa: E731
    if read_weight is None:
        read_weight = lambda: prompt_weight(session=session)  # noqa: E731

    echo(display(ledger))
    echo("Accepts: " + ", ".join(ledger.catalog.types()))

    submissions = 0
    while True:
        try:
            type_text = read_type(ledger.catalog.types())
            if type_text is None or type_text.strip().lower() in QUIT_WORDS | {""}:
                break
            weight_text = read_weight()
        except (EOFError, KeyboardInterrupt):
            break
        if weight_text is None:
            continue
        echo(submit(ledger, type_text, weight_text))
        echo(display(ledger))
        submissions += 1
    return submissions


__all__ = ["prompt_item_type", "prompt_weight", "run_session", "QUIT_WORDS"]
