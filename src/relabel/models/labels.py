"""Validated mapping of old runner labels to their replacements."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from pydantic import RootModel, field_validator


class LabelMap(RootModel[dict[str, str]]):
    """Old label -> new label.

    Old labels must be non-empty; an empty key would match at every column.
    """

    root: dict[str, str] = {}

    @field_validator("root")
    @classmethod
    def _reject_blank_labels(cls, value: dict[str, str]) -> dict[str, str]:
        for old in value:
            if not old.strip():
                raise ValueError("runner label keys must be non-empty")
        return value

    @classmethod
    def coerce(cls, labels: LabelMap | Mapping[str, str]) -> LabelMap:
        """Accept either an existing ``LabelMap`` or any plain mapping."""
        if isinstance(labels, LabelMap):
            return labels
        return cls.model_validate(dict(labels))

    def get(self, old: str) -> str | None:
        return self.root.get(old)

    def __contains__(self, old: object) -> bool:
        return old in self.root

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
