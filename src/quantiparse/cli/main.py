"""Command-line interface for quantiparse."""

from __future__ import annotations

import json

import click

from ..config import MAX_INPUT_LENGTH, configure_logging
from ..parser import ParseFailure, parse, to_canonical
from ..parser.tree import as_dict
from ..units.registry import DEFAULT_REGISTRY
from ..units.transform import TransformError, evaluate


@click.group()
@click.option("--log-level", default=None, help="Override QUANTIPARSE_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Quantity expression parser."""

    configure_logging(log_level)


@cli.command("parse")
@click.argument("text")
@click.option("--canonical", is_flag=True, help="Print the canonical text instead of the tree.")
@click.option("--evaluate", "do_evaluate", is_flag=True, help="Include the evaluated measurement.")
def parse_command(text: str, canonical: bool, do_evaluate: bool) -> None:
    """Parse TEXT and print its parse tree as JSON."""

    if len(text) > MAX_INPUT_LENGTH:
        raise click.ClickException(f"Input longer than {MAX_INPUT_LENGTH} characters")
    try:
        result = parse(text)
    except ParseFailure as exc:
        raise click.ClickException(str(exc)) from exc

    if canonical:
        click.echo(to_canonical(result))
        return

    payload = {"kind": result.kind, "result": as_dict(result), "canonical": to_canonical(result)}
    if do_evaluate:
        try:
            measurement = evaluate(result)
        except TransformError as exc:
            raise click.ClickException(str(exc)) from exc
        payload["measurement"] = {
            "magnitude": str(measurement.magnitude),
            "unit": measurement.unit_text,
            "si_magnitude": str(measurement.to_si()),
            "si_unit": measurement.si_unit_text,
        }
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@cli.command("units")
@click.option("--prefixes", is_flag=True, help="List prefixes instead of unit names.")
def units_command(prefixes: bool) -> None:
    """List the names known to the default registry, longest first."""

    if prefixes:
        names = DEFAULT_REGISTRY.prefixes_sorted_longest_first()
    else:
        names = DEFAULT_REGISTRY.names_sorted_longest_first()
    for name in names:
        click.echo(name)


if __name__ == "__main__":  # pragma: no cover
    cli()
