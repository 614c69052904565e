from __future__ import annotations

from pathlib import Path

from instruction_queue.adapters.input_source import FileInputSource
from instruction_queue.adapters.log_sinks import JsonlLogSink, LevelFilteredLogSink, StdoutLogSink
from instruction_queue.adapters.output_sink import FileOutputSink
from instruction_queue.ports.log_sink import LogSink
from instruction_queue.usecases.config_models import LoggingConfig, OutputConfig


def file_input_source(path: str | Path) -> FileInputSource:
    # Undecodable bytes become U+FFFD so the line is rejected by the receiver under on_error.
    return FileInputSource(Path(path), decode_errors="replace")


def file_output_sink(config: OutputConfig) -> FileOutputSink:
    # Factory for file-based output sink.
    return FileOutputSink(Path(config.file_path), atomic_replace=config.atomic_replace)


def log_sink(config: LoggingConfig) -> LevelFilteredLogSink:
    # Selects the configured sink and wraps it with the level threshold.
    inner: LogSink
    if config.sink.kind == "jsonl":
        assert config.sink.jsonl is not None
        inner = JsonlLogSink(Path(config.sink.jsonl.path))
    else:
        inner = StdoutLogSink()
    return LevelFilteredLogSink(inner=inner, level=config.level)
