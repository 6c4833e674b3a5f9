"""CLI entry point for firmware descriptor commands."""

import logging
import sys
from typing import TextIO

import click

from firmware_descriptor.config import ConfigurationError, get_settings
from firmware_descriptor.models.binary_firmware import BinaryFirmware
from firmware_descriptor.models.firmware import Firmware
from firmware_descriptor.models.firmware_edition import FirmwareEdition
from firmware_descriptor.models.firmware_version import FirmwareVersion
from firmware_descriptor.models.result_envelope import DecodedEnvelope, decode_envelope
from firmware_descriptor.services.container import ServiceContainer
from firmware_descriptor.utils.error_handling import EXIT_FAILURE, handle_cli_errors

logger = logging.getLogger(__name__)

# Exit status for a well-formed envelope reporting failure
EXIT_REMOTE_FAILURE = 2


def create_container() -> ServiceContainer:
    """Build the service container from validated environment settings."""
    settings = get_settings()
    settings.validate_config()
    return ServiceContainer(config=settings)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Firmware CLI - Firmware descriptor and remote response tools."""
    if ctx.obj is None:
        try:
            ctx.obj = create_container()
        except ConfigurationError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(EXIT_FAILURE)

    settings = ctx.obj.config()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@cli.command()
@click.option("--serial-number", required=True, help="Firmware serial number")
@click.option("--size", required=True, type=int, help="Firmware size in bytes")
@click.option("--compile-time", required=True, help="RFC 3339 compile timestamp")
@click.option("--edition", default=str(FirmwareEdition.default()), show_default=True,
              help="Edition (STANDARD, PLUS, PREMIUM or Standard, Plus, Premium)")
@click.option("--version", "version_text", required=True, help="Version MAJOR.MINOR.PATCH")
def describe(
    serial_number: str, size: int, compile_time: str, edition: str, version_text: str
) -> None:
    """Validate firmware attributes and print the descriptor.

    Examples:
        firmware-cli describe --serial-number SN1 --size 524288 \\
            --compile-time 2024-03-01T12:00:00Z --edition Plus --version 1.2.3
    """
    firmware = Firmware.assemble(serial_number, size, compile_time, edition, version_text)
    if firmware is None:
        click.echo("Error: invalid firmware descriptor", err=True)
        sys.exit(EXIT_FAILURE)

    click.echo(str(firmware))


@cli.command()
@click.argument("text")
@handle_cli_errors
def parse_version(text: str) -> None:
    """Parse a firmware version and print its canonical form."""
    click.echo(str(FirmwareVersion.parse(text)))


@cli.command()
@click.argument("text")
@handle_cli_errors
def parse_edition(text: str) -> None:
    """Parse a firmware edition and print its canonical form."""
    click.echo(str(FirmwareEdition.parse(text)))


def _echo_remote_failure(message: str) -> None:
    click.echo(f"failed: {message}", err=True)
    sys.exit(EXIT_REMOTE_FAILURE)


def _echo_envelope(envelope: DecodedEnvelope) -> None:
    """Print an envelope; a failed envelope exits with EXIT_REMOTE_FAILURE."""

    def on_success() -> None:
        click.echo("succeeded")
        if envelope.data:
            click.echo(envelope.data)

    envelope.if_failed(_echo_remote_failure, on_success)


@cli.command()
@click.argument(
    "source", type=click.File("r", encoding="utf-8", errors="replace"), default="-"
)
@handle_cli_errors
def decode(source: TextIO) -> None:
    """Decode a response envelope read from SOURCE (default: stdin)."""
    _echo_envelope(decode_envelope(source.read()))


@cli.command()
@click.argument("path")
@click.pass_obj
@handle_cli_errors
def fetch(container: ServiceContainer, path: str) -> None:
    """GET PATH from the firmware service and decode the envelope."""
    client = container.firmware_api_client()
    try:
        envelope = client.get(path)
    finally:
        client.close()
    _echo_envelope(envelope)


@cli.command()
@click.argument(
    "source", type=click.File("r", encoding="utf-8", errors="replace"), default="-"
)
@click.pass_obj
def rank(container: ServiceContainer, source: TextIO) -> None:
    """Print the most recent firmware records, newest first.

    SOURCE holds one "<epoch-seconds> <serial-number>" record per line.
    Only the most recent MAX_RECENT_FIRMWARES records are kept.
    """
    recency_service = container.recency_service()

    for line_number, line in enumerate(source, start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            click.echo(f"Error: line {line_number}: expected '<timestamp> <serial>'", err=True)
            sys.exit(EXIT_FAILURE)
        try:
            record = BinaryFirmware(timestamp=int(fields[0]), serial_number=fields[1])
        except ValueError as e:
            click.echo(f"Error: line {line_number}: {e}", err=True)
            sys.exit(EXIT_FAILURE)
        recency_service.add(record)

    for record in recency_service.records():
        click.echo(f"{record.timestamp} {record.serial_number}")


def main() -> None:
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
