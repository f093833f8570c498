from typing import Optional, Tuple

import click

from .config import CalculatorConfig, configure_logging
from .editor import BufferEditor
from .evaluator import try_evaluate

# Words accepted by the REPL in place of keyboard control names.
REPL_WORDS = {
    "back": "Backspace",
    "clear": "Escape",
    "enter": "Enter",
}


def line_to_symbols(line: str) -> Tuple[str, ...]:
    word = line.strip()
    if word.lower() in REPL_WORDS:
        return (REPL_WORDS[word.lower()],)
    return tuple(ch for ch in word if not ch.isspace())


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (defaults to POCKET_CALC_LOG_LEVEL or WARNING)",
)
@click.option("--precision", type=int, default=None, help="Significant digits for decimal arithmetic")
@click.option(
    "--strict-point",
    is_flag=True,
    default=False,
    help="Reject a second decimal point in one number while typing",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str], precision: Optional[int], strict_point: bool) -> None:
    try:
        config = CalculatorConfig.from_env().with_overrides(
            log_level=log_level.upper() if log_level else None,
            precision=precision,
            reject_repeated_point=True if strict_point else None,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    configure_logging(config.log_level)
    ctx.obj = config


@main.command("eval")
@click.argument("expression")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show the failure kind and detail")
@click.pass_obj
def eval_cmd(config: CalculatorConfig, expression: str, verbose: bool) -> None:
    """Evaluate a finished expression such as 2+3×4."""
    result, e = try_evaluate(expression, config)
    if e is None:
        click.echo(result)
        return
    if verbose:
        click.echo(f"{config.error_marker}: {e.kind}: {e}", err=True)
    else:
        click.echo(config.error_marker, err=True)
    raise SystemExit(1)


@main.command("press")
@click.argument("symbols", nargs=-1, required=True)
@click.option("--trace", is_flag=True, default=False, help="Print the buffer after every symbol")
@click.pass_obj
def press_cmd(config: CalculatorConfig, symbols: Tuple[str, ...], trace: bool) -> None:
    """Feed symbols, one per argument, into a fresh calculator."""
    editor = BufferEditor(config)
    for symbol in symbols:
        buf = editor.submit(symbol)
        if trace:
            click.echo(f"{symbol}\t{buf}")
    if not trace:
        click.echo(editor.buffer)


@main.command("repl")
@click.pass_obj
def repl_cmd(config: CalculatorConfig) -> None:
    """Type keystrokes interactively; every character on a line is one key."""
    editor = BufferEditor(config)
    stdin = click.get_text_stream("stdin")
    click.echo(editor.buffer)
    for line in stdin:
        if line.strip() == "q":
            break
        click.echo(editor.submit_many(line_to_symbols(line)))


if __name__ == "__main__":  # pragma: no cover
    main()
