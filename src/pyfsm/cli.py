"""Command line front end for the reference automata."""

from __future__ import annotations

import json
from typing import Optional

import click

from pyfsm import __version__
from pyfsm.automata.modulo import ModuloAutomaton
from pyfsm.automata.parity import ParityAutomaton
from pyfsm.automata.streak import StreakAutomaton
from pyfsm.binary import is_binary_string, state_label, to_decimal
from pyfsm.config import ConfigError, Settings
from pyfsm.core.automaton import Automaton
from pyfsm.core.errors import AutomatonError, InvalidParameter
from pyfsm.measures.reachability import (
    dead_states,
    is_strongly_connected,
    reachable_states,
    unreachable_states,
)
from pyfsm.utils.logging import configure_logging, get_logger

KINDS = ("modulo", "streak", "parity")

logger = get_logger("cli")


class Context:
    """CLI context for sharing state between commands."""

    def __init__(self, settings: Settings, as_json: bool) -> None:
        self.settings = settings
        self.as_json = as_json


pass_context = click.make_pass_decorator(Context)


def output_json(data: dict) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def make_automaton(kind: str, n: int) -> Automaton:
    """Construct the reference automaton named by kind."""
    try:
        if kind == "modulo":
            return ModuloAutomaton(n)
        if kind == "streak":
            return StreakAutomaton(n)
        return ParityAutomaton()
    except InvalidParameter as exc:
        raise click.BadParameter(str(exc), param_hint="'-n'") from exc


def describe(kind: str, n: int) -> str:
    if kind == "modulo":
        return f"FSM: Modulo {n}"
    if kind == "streak":
        return f"FSM: Last {n} Ones"
    return "FSM: Parity"


kind_argument = click.argument("kind", type=click.Choice(KINDS, case_sensitive=False))
n_option = click.option(
    "-n",
    "n",
    type=int,
    default=None,
    help="Modulus or streak length (default: PYFSM_DEFAULT_N or 3)",
)


@click.group()
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "warning", "error"], case_sensitive=False),
    default=None,
    help="Logging level (default: PYFSM_LOG_LEVEL or warning)",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, as_json: bool, log_level: Optional[str]) -> None:
    """Run binary strings through deterministic finite automata."""
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(log_level or settings.log_level, settings.log_format)
    ctx.obj = Context(settings=settings, as_json=as_json)


@cli.command()
@kind_argument
@n_option
@click.argument("word")
@pass_context
def run(ctx: Context, kind: str, n: Optional[int], word: str) -> None:
    """Feed WORD to a fresh automaton and report the final state."""
    n = ctx.settings.default_n if n is None else n
    if not is_binary_string(word):
        raise click.BadParameter("Invalid binary input.", param_hint="'WORD'")

    automaton = make_automaton(kind.lower(), n)
    try:
        accepting = automaton.run(word)
    except AutomatonError as exc:
        raise click.ClickException(str(exc)) from exc

    state = automaton.current_state
    logger.info("word_evaluated", kind=kind, n=n, length=len(word), accepting=accepting)

    result = {
        "automaton": describe(kind.lower(), n),
        "input": word,
        "decimal": to_decimal(word),
        "state": state_label(state),
        "accepting": accepting,
    }
    if isinstance(automaton, ModuloAutomaton):
        result["remainder"] = automaton.remainder
    elif isinstance(automaton, StreakAutomaton):
        result["streak"] = automaton.count

    if ctx.as_json:
        output_json(result)
        return

    click.echo(result["automaton"])
    click.echo(f"Decimal: {result['decimal']}")
    click.echo(f"Current State: {result['state']}")
    if "remainder" in result:
        click.echo(f"Remainder: {result['remainder']}")
    if "streak" in result:
        click.echo(f"Streak: {result['streak']}")
    click.echo(f"Accepting: {'YES' if accepting else 'NO'}")


@cli.command()
@kind_argument
@n_option
@pass_context
def table(ctx: Context, kind: str, n: Optional[int]) -> None:
    """Print the transition table."""
    n = ctx.settings.default_n if n is None else n
    automaton = make_automaton(kind.lower(), n)
    delta = automaton.transitions()

    rows = []
    for state in automaton.states:
        rows.append(
            {
                "state": state_label(state),
                "initial": state == automaton.initial_state,
                "accepting": state in automaton.accept_states,
                "next": {str(symbol): state_label(delta[(state, symbol)]) for symbol in automaton.alphabet},
            }
        )

    if ctx.as_json:
        output_json({"automaton": describe(kind.lower(), n), "transitions": rows})
        return

    click.echo(describe(kind.lower(), n))
    header = "  state  " + "  ".join(f"{str(symbol):>6}" for symbol in automaton.alphabet)
    click.echo(header)
    for row in rows:
        marker = ("->" if row["initial"] else "  ") + ("*" if row["accepting"] else " ")
        cells = "  ".join(f"{row['next'][str(symbol)]:>6}" for symbol in automaton.alphabet)
        click.echo(f"{marker}{row['state']:<6}{cells}")


@cli.command()
@kind_argument
@n_option
@pass_context
def reach(ctx: Context, kind: str, n: Optional[int]) -> None:
    """Report reachability and connectivity of the state graph."""
    n = ctx.settings.default_n if n is None else n
    automaton = make_automaton(kind.lower(), n)

    result = {
        "automaton": describe(kind.lower(), n),
        "states": len(automaton.states),
        "reachable": [state_label(s) for s in reachable_states(automaton)],
        "unreachable": [state_label(s) for s in unreachable_states(automaton)],
        "dead": [state_label(s) for s in dead_states(automaton)],
        "strongly_connected": is_strongly_connected(automaton),
    }

    if ctx.as_json:
        output_json(result)
        return

    click.echo(result["automaton"])
    click.echo(f"States: {result['states']}")
    click.echo(f"Reachable from q0: {len(result['reachable'])}")
    click.echo(f"Unreachable: {', '.join(result['unreachable']) or '-'}")
    click.echo(f"Dead: {', '.join(result['dead']) or '-'}")
    click.echo(f"Strongly connected: {'YES' if result['strongly_connected'] else 'NO'}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
