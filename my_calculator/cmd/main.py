import logging
from typing import Optional

import click
import typer

from my_calculator.config import Settings, load_settings
from my_calculator.conversions import (
    ConversionError,
    Dimension,
    convert,
    find_unit,
    get_units,
)
from my_calculator.errors import (
    DivisionByZero,
    EvalError,
    InvalidNumberLiteral,
    NestingTooDeep,
    UnexpectedEnd,
    UnexpectedToken,
)
from my_calculator.evaluate import Evaluator, evaluate_node
from my_calculator.functions import CONSTANTS, FUNCTIONS, AngleMode
from my_calculator.helper import error_message, format_number
from my_calculator.node import to_text

logger = logging.getLogger(__name__)

app = typer.Typer(help="Evaluate arithmetic expressions and convert units.")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def describe_error(error: EvalError) -> str:
    match error:
        case UnexpectedToken():
            return f"syntax error: {error.message}"
        case UnexpectedEnd():
            return "syntax error: expression ends too early"
        case DivisionByZero():
            return "math error: division by zero"
        case InvalidNumberLiteral():
            return f"syntax error: {error.message}"
        case NestingTooDeep():
            return f"limit exceeded: {error.message}"
    raise ValueError(f"invalid error type {type(error).__name__}")


def build_settings(
    angle_mode: Optional[AngleMode], max_depth: Optional[int]
) -> Settings:
    try:
        settings = load_settings()
        if angle_mode is not None:
            settings = settings.replace(angle_mode=angle_mode)
        if max_depth is not None:
            settings = settings.replace(max_depth=max_depth)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    return settings


def run_expression(evaluator: Evaluator, expression: str, show_tree: bool = False) -> bool:
    logger.debug("evaluating %r", expression)
    try:
        node = evaluator.parse(expression)
        if show_tree:
            typer.echo(to_text(node))
        value = evaluate_node(node, evaluator.settings.angle_mode)
    except EvalError as e:
        logger.debug("evaluation failed at %d: %s", e.location, e.message)
        message = error_message(expression, e.location, describe_error(e))
        typer.echo(message.rstrip("\n"), err=True)
        return False
    typer.echo(format_number(value, evaluator.settings.precision))
    return True


@app.command("eval", context_settings={"ignore_unknown_options": True})
def evaluate_command(
    expression: Optional[str] = typer.Argument(
        None, help="Expression to evaluate; read one per line from stdin if omitted."
    ),
    angle_mode: Optional[AngleMode] = typer.Option(
        None, "--angle-mode", "-a", case_sensitive=False, help="Unit of trigonometric angles."
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", help="Maximum nesting of parentheses and unary operators."
    ),
    tree: bool = typer.Option(False, "--tree", help="Print the parsed expression tree first."),
):
    evaluator = Evaluator(build_settings(angle_mode, max_depth))
    if expression is not None:
        expressions = [expression]
    else:
        stdin = click.get_text_stream("stdin")
        expressions = [line.strip() for line in stdin if line.strip()]
    results = [run_expression(evaluator, item, tree) for item in expressions]
    if not all(results):
        raise typer.Exit(code=1)


@app.command("convert", context_settings={"ignore_unknown_options": True})
def convert_command(
    value: str = typer.Argument(..., help="Value or expression to convert."),
    from_unit: str = typer.Argument(..., help="Unit to convert from."),
    to_unit: str = typer.Argument(..., help="Unit to convert to."),
):
    evaluator = Evaluator(build_settings(None, None))
    try:
        number = evaluator.evaluate(value)
        source, target = find_unit(from_unit), find_unit(to_unit)
        result = convert(number, source, target)
    except EvalError as e:
        message = error_message(value, e.location, describe_error(e))
        typer.echo(message.rstrip("\n"), err=True)
        raise typer.Exit(code=1)
    except ConversionError as e:
        typer.echo(f"conversion error: {e}", err=True)
        raise typer.Exit(code=1)
    precision = evaluator.settings.precision
    typer.echo(f"{format_number(result, precision)} {target}")


@app.command("units")
def units_command(
    dimension: Optional[Dimension] = typer.Argument(
        None, case_sensitive=False, help="Only list units of this dimension."
    ),
):
    dimensions = [dimension] if dimension is not None else list(Dimension)
    for item in dimensions:
        typer.echo(f"{item.value}:")
        for unit in get_units(item):
            typer.echo(f"  {unit.name} ({unit.system.value})")


@app.command("functions")
def functions_command():
    typer.echo("functions:")
    for function in FUNCTIONS:
        typer.echo(f"  {function.name}(x)")
    typer.echo("constants:")
    for constant in CONSTANTS:
        typer.echo(f"  {constant.name} = {constant.value!r}")


if __name__ == "__main__":
    app()
