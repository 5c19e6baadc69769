"""
CLI tool to detect the envelope type of Ethereum transactions.

Examples:
    txtype raw 0x02f872...
    echo '{"gas": "0x5208", "gasPrice": "0x1"}' | txtype fields
    txtype fields tx.json --hardfork london
    txtype forks --since berlin

"""

import json
import sys
from typing import Any, Optional, TextIO, Type

import click
from pydantic import ValidationError

from config import AppConfig, EnvConfig
from ethereum_tx_base_types import to_json, to_quantity
from ethereum_tx_classifier import (
    IncompatibleFieldsError,
    detect_raw_transaction_type,
    detect_transaction_type,
)
from ethereum_tx_forks import BaseFork, forks_from, get_fork_by_name, get_forks
from ethereum_tx_logging import LogLevel, configure_logging, get_logger
from ethereum_tx_types import TransactionFields

logger = get_logger(__name__)

INDETERMINATE = "indeterminate"


def parse_log_level(ctx: click.Context, param: click.Parameter, value: Optional[str]):  # noqa: D103
    if value is None:
        return None
    try:
        return LogLevel.from_cli(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def parse_fork(ctx: click.Context, param: click.Parameter, value: Optional[str]):  # noqa: D103
    if value is None:
        return None
    fork = get_fork_by_name(value)
    if fork is None:
        raise click.BadParameter(f"Unknown hardfork '{value}'")
    return fork


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def txtype() -> None:
    """Detect the envelope type of Ethereum transactions."""
    pass


@txtype.command(short_help="Detect the type of a serialized transaction.")
@click.argument("hex_string")
def raw(hex_string: str) -> None:
    """
    Detect the type of a serialized transaction given as HEX_STRING.

    A transaction starting with a byte above 0x7f is a legacy RLP list, any
    other first byte is the type of a typed transaction envelope.
    """
    try:
        click.echo(detect_raw_transaction_type(hex_string))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="HEX_STRING") from e


@txtype.command(short_help="Detect the type of a JSON transaction object.")
@click.argument("json_file", type=click.File("r"), default="-")
@click.option("--hardfork", help="Hardfork of the transaction, overriding the JSON object.")
@click.option(
    "--common-hardfork",
    help="Hardfork of the chain configuration, overriding the JSON object.",
)
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Environment configuration file. Defaults to $TXTYPE_ENV_FILE, then ./env.yaml.",
)
@click.option(
    "--log-level",
    callback=parse_log_level,
    default=None,
    help="Log level written to stderr: DEBUG, VERBOSE, INFO, WARNING, ERROR or CRITICAL.",
)
def fields(
    json_file: TextIO,
    hardfork: Optional[str],
    common_hardfork: Optional[str],
    env_file: Optional[str],
    log_level: Optional[int],
) -> None:
    """
    Detect the type of the JSON transaction object in JSON_FILE, or stdin.

    Prints the type tag, e.g. `0x2`, or `indeterminate` when the fields and
    the hardfork do not determine the type.
    """
    try:
        env_config = EnvConfig(env_file)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    app_config = AppConfig()
    if log_level is None:
        log_level = env_config.log_level
    configure_logging(
        log_level=log_level if log_level is not None else app_config.DEFAULT_LOG_LEVEL,
        log_format=app_config.DEFAULT_LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        data: Any = json.load(json_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {json_file.name}: {e}") from e
    if not isinstance(data, dict):
        raise click.ClickException(
            f"Expected a JSON object in {json_file.name}, got {type(data).__name__}"
        )
    overrides = {"hardfork": hardfork, "common_hardfork": common_hardfork}

    try:
        transaction = TransactionFields.model_validate(data).copy(
            **{name: value for name, value in overrides.items() if value is not None}
        )
        logger.debug(f"Parsed transaction fields {to_json(transaction)}")
        tx_type = detect_transaction_type(transaction, env_config.network_context())
    except ValidationError as e:
        raise click.ClickException(f"Invalid transaction: {e}") from e
    except IncompatibleFieldsError as e:
        raise click.ClickException(str(e)) from e

    logger.verbose(f"Detected transaction type {tx_type} for {json_file.name}")
    click.echo(tx_type if tx_type is not None else INDETERMINATE)


@txtype.command(name="forks", short_help="List the known hardforks.")
@click.option(
    "--since",
    callback=parse_fork,
    default=None,
    help="Only list this hardfork and the ones after it.",
)
def list_forks(since: Optional[Type[BaseFork]]) -> None:
    """
    List the known hardforks, oldest first, with their rank and transaction types.

    Forks accepting typed transaction envelopes are marked `typed`, and forks
    that only delay the difficulty bomb are marked `bomb-delay`.
    """
    for fork in get_forks() if since is None else forks_from(since):
        tx_types = ",".join(to_quantity(tx_type) for tx_type in sorted(fork.tx_types()))
        notes = []
        if fork.typed_transactions_supported():
            notes.append("typed")
        if fork.ignore():
            notes.append("bomb-delay")
        line = f"{fork.rank():>2}  {fork.network_name():<16} {tx_types:<12} " + ",".join(notes)
        click.echo(line.rstrip())


if __name__ == "__main__":
    txtype()
