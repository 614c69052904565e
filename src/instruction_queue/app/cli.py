from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from instruction_queue.adapters.factory import file_input_source, file_output_sink, log_sink
from instruction_queue.config.loader import load_config
from instruction_queue.observability.logging import LogMessage
from instruction_queue.services.instruction_queue import InstructionQueue
from instruction_queue.usecases.config_models import AppConfig
from instruction_queue.usecases.drain import DrainInstructions, error_reasons
from instruction_queue.usecases.receiver import InstructionMessageReceiver

# Thin wrapper: wiring lives here, parsing/validation/ordering live in usecases and services.

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "default_config.yml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Instruction message ingestion and priority drain")
    parser.add_argument("--config", help="Path to YAML config (packaged default_config.yml when omitted)")
    parser.add_argument("--input", required=True, help="Path to a file with one message per line")
    parser.add_argument("--output", help="Override output file path")
    parser.add_argument("--on-error", choices=["skip", "fail"], help="Override rejection policy")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Override logging threshold",
    )
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.output is not None:
        config.output.file_path = args.output
    if args.on_error is not None:
        config.ingest.on_error = args.on_error
    if args.log_level is not None:
        config.logging.level = args.log_level


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(Path(args.config) if args.config is not None else DEFAULT_CONFIG)
    apply_overrides(config, args)

    queue = InstructionQueue()
    logs = log_sink(config.logging)
    shell = DrainInstructions(
        receiver=InstructionMessageReceiver(queue=queue),
        queue=queue,
        log_sink=logs,
        on_error=config.ingest.on_error,
    )
    try:
        try:
            shell.ingest(file_input_source(args.input).read())
        except ValueError as exc:
            logs.emit(
                LogMessage(
                    level="error",
                    message="ingest aborted",
                    fields={"input": args.input, "error": type(exc).__name__, "reasons": error_reasons(exc)},
                )
            )
            return 1

        output_sink = file_output_sink(config.output)
        try:
            written = shell.drain(output_sink)
        except Exception:
            output_sink.discard()
            raise
        output_sink.close()
        logs.emit(
            LogMessage(
                level="info",
                message="drain finished",
                fields={"written": written, "output": config.output.file_path},
            )
        )
    finally:
        logs.close()
    return 0
