"""Pydantic and dataclass models for runner label rewriting."""

from relabel.models.errors import ErrorInfo, SourceSpan
from relabel.models.labels import LabelMap
from relabel.models.replacement import Replacement, RunnerShape

__all__ = [
    "ErrorInfo",
    "LabelMap",
    "Replacement",
    "RunnerShape",
    "SourceSpan",
]
