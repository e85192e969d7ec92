import json
import logging
from typing import Iterable, List, Optional

import click

from .config import Settings, configure_logging
from .engine import Calculator
from .errors import DivideByZeroError, EvaluationError
from .evaluator import DIVIDE_BY_ZERO, ERROR, compute
from .formatter import format_number
from .tokens import KEYS

logger = logging.getLogger(__name__)

# Labels such as "-5=" start with a dash; pass them through as arguments
LABEL_ARGS = {"ignore_unknown_options": True}


def split_labels(args: Iterable[str]) -> List[str]:
    """Turn CLI arguments into single-character key labels, ignoring whitespace."""
    labels: List[str] = []
    for arg in args:
        for ch in arg:
            if ch.isspace():
                continue
            if ch not in KEYS:
                raise click.BadParameter(f"unknown key {ch!r}", param_hint="LABELS")
            labels.append(ch)
    return labels


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: KEYCALC_LOG_LEVEL or WARNING)",
)
@click.pass_context
def main(ctx: click.Context, log_level: Optional[str]) -> None:
    """Keypad calculator with live evaluation."""
    settings = Settings.from_env().override(log_level=log_level and log_level.upper())
    configure_logging(settings.log_level)
    ctx.obj = settings


@main.command("keys", context_settings=LABEL_ARGS)
@click.argument("labels", nargs=-1, required=True)
@click.option("--trace", is_flag=True, default=False, help="Print the state after every key")
def keys_cmd(labels: List[str], trace: bool) -> None:
    """Press LABELS on a fresh calculator, e.g. `keycalc keys "2+3*4="`."""
    calc = Calculator()
    for label in split_labels(labels):
        state = calc.press(label)
        if trace:
            click.echo(json.dumps({"key": label, **state.to_dict()}))
    if not trace:
        click.echo(json.dumps(calc.state.to_dict()))


@main.command("eval", context_settings=LABEL_ARGS)
@click.argument("expression")
@click.pass_context
def eval_cmd(ctx: click.Context, expression: str) -> None:
    """Evaluate a space-separated EXPRESSION such as "2 + 3 * 4"."""
    try:
        value = compute(expression)
    except DivideByZeroError as exc:
        logger.info("Division by zero: %s", exc)
        click.echo(DIVIDE_BY_ZERO)
        ctx.exit(1)
    except EvaluationError as exc:
        logger.info("Cannot evaluate %r: %s", expression, exc)
        click.echo(ERROR)
        ctx.exit(1)
    else:
        click.echo(format_number(value))


@main.command("serve")
@click.option("--host", default=None, help="Host to bind to (default: KEYCALC_HOST or 127.0.0.1)")
@click.option("--port", default=None, type=int, help="Port to bind to (default: KEYCALC_PORT or 5000)")
@click.option("--debug/--no-debug", default=None, help="Run Flask in debug mode")
@click.pass_obj
def serve_cmd(settings: Settings, host: Optional[str], port: Optional[int], debug: Optional[bool]) -> None:
    """Run the HTTP API server."""
    from .webapp import run_server

    settings = settings.override(host=host, port=port, debug=debug)
    click.echo(f"Access at: http://{settings.host}:{settings.port}", err=True)
    run_server(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
