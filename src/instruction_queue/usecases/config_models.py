from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class IngestConfig(BaseModel):
    # on_error decides whether a rejected line stops the run or is only logged.
    model_config = ConfigDict(extra="forbid")
    on_error: Literal["skip", "fail"] = "skip"


class OutputConfig(BaseModel):
    # Output file receiving drained instructions in priority order.
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    file_path: str = Field(validation_alias=AliasChoices("file_path", "file"))
    atomic_replace: bool = False


class LogSinkJsonlConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str


class LogSinkConfig(BaseModel):
    # Only one log sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    kind: Literal["stdout", "jsonl"] = "stdout"
    jsonl: LogSinkJsonlConfig | None = None

    @model_validator(mode="after")
    def _require_jsonl(self) -> LogSinkConfig:
        # For jsonl kind, a jsonl section is required to avoid silent defaults.
        if self.kind == "jsonl" and self.jsonl is None:
            raise ValueError("logging.sink.jsonl is required when kind is 'jsonl'")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["debug", "info", "warning", "error"] = "info"
    sink: LogSinkConfig = Field(default_factory=LogSinkConfig)


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    ingest: IngestConfig = Field(default_factory=IngestConfig)
    output: OutputConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
