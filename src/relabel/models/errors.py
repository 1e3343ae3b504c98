"""Structured error models with YAML source position tracking."""

from __future__ import annotations

from pydantic import BaseModel


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None


class ErrorInfo(BaseModel):
    """A structured rewrite error with optional source position."""

    code: str
    message: str
    span: SourceSpan | None = None
