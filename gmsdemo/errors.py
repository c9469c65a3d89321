"""Error kinds and the result type shared by the pipeline stages."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    INPUT_MISSING = "input_missing"
    DETECTOR_UNKNOWN = "detector_unknown"
    EXTRACTION_FAILURE = "extraction_failure"
    FILTER_FAILURE = "filter_failure"
    DISPLAY_FAILURE = "display_failure"

    @property
    def fatal(self) -> bool:
        return self is not ErrorKind.DISPLAY_FAILURE


@dataclass(frozen=True)
class Result:
    """Value produced by a stage, paired with the error that spoiled it (if any)."""
    value: Any = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, value: Any = None) -> "Result":
        return cls(value=value, error=error)
