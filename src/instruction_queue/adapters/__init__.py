from .input_source import FileInputSource
from .log_sinks import JsonlLogSink, LevelFilteredLogSink, StdoutLogSink
from .output_sink import FileOutputSink

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileInputSource",
    "FileOutputSink",
    "JsonlLogSink",
    "LevelFilteredLogSink",
    "StdoutLogSink",
]
