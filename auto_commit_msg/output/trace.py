"""Trace block appended to the commit message when tracing is on."""

import json
import math
import time
from dataclasses import dataclass, asdict

from auto_commit_msg import TRACE_KEY, TRACE_LANGUAGE

TRACE_SEPARATOR = "\n---\n"


def truncate_seconds(seconds: float) -> float:
    """Cut a duration down to two decimals (1.239 -> 1.23)."""
    # round first so 1.15 * 100 == 114.99999999999999 still truncates to 1.15
    return math.floor(round(seconds * 100, 6)) / 100


class Stopwatch:
    """Wall-clock timer started on creation."""

    def __init__(self):
        self.started = time.time()

    def elapsed(self) -> float:
        return time.time() - self.started


@dataclass
class TraceRecord:
    model: str
    response_time: float
    execution_time: float
    language: str = TRACE_LANGUAGE

    @classmethod
    def create(cls, model: str, response_time: float, execution_time: float) -> 'TraceRecord':
        return cls(
            model=model,
            response_time=truncate_seconds(response_time),
            execution_time=truncate_seconds(execution_time),
        )

    def to_dict(self) -> dict:
        fields = asdict(self)
        return {TRACE_KEY: {k: fields[k] for k in ("language", "model", "response_time", "execution_time")}}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def render_message(message: str, trace: TraceRecord | None = None) -> str:
    """Final output text: message, optional trace block, trailing newline."""
    text = message
    if trace is not None:
        text = f"{message}{TRACE_SEPARATOR}{trace.to_json()}"
    if not text.endswith("\n"):
        text += "\n"
    return text
