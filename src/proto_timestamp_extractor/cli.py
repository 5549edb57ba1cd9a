"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from proto_timestamp_extractor.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from proto_timestamp_extractor.extraction import Message, create_timestamp_extractor
from proto_timestamp_extractor.extraction_errors import ExtractionError
from proto_timestamp_extractor.kafka_consumption import KafkaReadError, RecordTimestampReader
from proto_timestamp_extractor.partitioning import partition_path


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="proto-timestamp-extractor")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log initialization details.")
def cli(verbose: bool) -> None:
    """Protobuf message timestamp extraction utility."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="extract")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option("--hex", "payload_hex", required=False, help="Serialized payload as hex digits")
@click.option(
    "--payload-file",
    "payload_file",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a file holding one serialized payload",
)
def extract(config_path: str, payload_hex: str | None, payload_file: str | None) -> None:
    """Extract the timestamp of one serialized message."""
    if (payload_hex is None) == (payload_file is None):
        raise CliError("Provide exactly one of --hex or --payload-file.")
    configuration = _load(config_path)
    payload = _read_payload(payload_hex, payload_file)
    try:
        extractor = create_timestamp_extractor(configuration.extractor)
        timestamp_millis = extractor.extract_timestamp_millis(Message(payload=payload))
    except (ConfigurationError, ExtractionError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"{timestamp_millis}\t{_partition_for(configuration, timestamp_millis)}")


@cli.command(name="scan")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--max-messages",
    "max_messages",
    required=False,
    default=100,
    show_default=True,
    type=click.IntRange(min=1),
    help="Stop after this many records",
)
def scan(config_path: str, max_messages: int) -> None:
    """Consume the configured topic and print one timestamp per record."""
    configuration = _load(config_path)
    if configuration.kafka is None:
        raise CliError("Configuration section 'kafka' is required for scan.")
    try:
        extractor = create_timestamp_extractor(configuration.extractor)
        reader = RecordTimestampReader(kafka_settings=configuration.kafka, extractor=extractor)
        for record in reader.read(max_messages=max_messages):
            coordinates = f"{record.message.kafka_partition}\t{record.message.offset}"
            if record.timestamp_millis is None:
                click.echo(f"{coordinates}\tERROR\t{record.error}")
                continue
            partition = _partition_for(configuration, record.timestamp_millis)
            click.echo(f"{coordinates}\t{record.timestamp_millis}\t{partition}")
    except (ConfigurationError, KafkaReadError) as exc:
        raise CliError(str(exc)) from exc


def _load(config_path: str) -> Configuration:
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _read_payload(payload_hex: str | None, payload_file: str | None) -> bytes:
    if payload_hex is not None:
        try:
            return bytes.fromhex(payload_hex)
        except ValueError as exc:
            raise CliError(f"Invalid hex payload: {exc}") from exc
    try:
        return Path(str(payload_file)).read_bytes()
    except OSError as exc:
        raise CliError(str(exc)) from exc


def _partition_for(configuration: Configuration, timestamp_millis: int) -> str:
    try:
        return partition_path(
            timestamp_millis,
            configuration.partitioning.granularity,
            configuration.partitioning.prefix,
        )
    except ValueError:
        return "-"


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
