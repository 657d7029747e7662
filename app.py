#!/usr/bin/env python3

import json
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from ocpi_contracts.dtos import MODELS
from ocpi_contracts.error_details import (
    format_validation_errors,
    get_error_human_message,
)
from ocpi_contracts.utils.logging import get_logger, setup_logging
from ocpi_contracts.validation import CI_STRING, OCPI_DATETIME, TIME_OF_DAY

logger = get_logger("cli")

FORMAT_RULES = {
    "ci-string": CI_STRING,
    "datetime": OCPI_DATETIME,
    "time": TIME_OF_DAY,
}


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """OCPI Contracts - validate OCPI values and payloads"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("rule_name", type=click.Choice(sorted(FORMAT_RULES)))
@click.argument("value")
@click.option(
    "--field",
    default="value",
    show_default=True,
    help="Field name used in the violation message",
)
def check(rule_name, value, field) -> None:
    """Check a single VALUE against an OCPI string format"""
    result = FORMAT_RULES[rule_name].validate(value, field)
    if result.failed:
        click.echo(result.message, err=True)
        sys.exit(1)
    click.echo("OK")


@cli.command()
@click.argument("model_name", type=click.Choice(sorted(MODELS)))
@click.argument(
    "payload_file",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
)
def validate(model_name, payload_file) -> None:
    """Validate a JSON payload file against an OCPI object"""
    model = MODELS[model_name]
    try:
        payload = json.loads(payload_file.read_text(encoding="utf-8"))
        model.model_validate(payload)
    except ValidationError as e:
        logger.debug("Payload rejected", model=model_name, errors=e.error_count())
        for line in format_validation_errors(e):
            click.echo(line, err=True)
        sys.exit(1)
    except (OSError, ValueError) as e:
        click.echo(get_error_human_message(e), err=True)
        sys.exit(1)
    click.echo(f"{payload_file}: valid {model_name}")


@cli.command()
def models() -> None:
    """List the OCPI objects known to the validate command"""
    for name in sorted(MODELS):
        click.echo(name)


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
