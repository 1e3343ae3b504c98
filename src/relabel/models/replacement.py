"""Replacement descriptors produced by the locator and consumed by the patcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class RunnerShape(StrEnum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class Replacement:
    """One label substitution pinned to a source coordinate.

    ``line`` and ``column`` are 0-based and point at the first character of
    the value's source text (the opening quote for quoted scalars).
    """

    job: str
    old_label: str
    new_label: str
    line: int
    column: int
    shape: RunnerShape = RunnerShape.SCALAR
    index: int | None = None  # position within a sequence-valued runs-on
