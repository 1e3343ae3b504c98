"""Error-returning service layer for hosting remediation tools."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from pydantic import ValidationError

from relabel.models.errors import ErrorInfo
from relabel.models.labels import LabelMap
from relabel.models.replacement import Replacement
from relabel.parser.loader import WorkflowParseError, YAMLSafetyError
from relabel.rewrite.pipeline import RewritePipeline
from relabel.settings import Settings

logger = logging.getLogger("relabel.service")

# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class RewriteOutcome:
    """Result of rewriting one document.

    ``ok`` with ``changed=False`` means there was nothing to do; on error
    ``text`` is empty and nothing should be written back.
    """

    text: str
    changed: bool
    error: ErrorInfo | None = None
    replacements: list[Replacement] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# RunnerLabelService
# ---------------------------------------------------------------------------


class RunnerLabelService:
    """Rewrites workflow documents and reports failures as ``ErrorInfo``.

    Stateless apart from its pipeline, so one instance can serve many callers.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._pipeline = RewritePipeline(settings)

    def rewrite(
        self,
        text: str,
        labels: LabelMap | Mapping[str, str],
        filename: str = "<string>",
    ) -> RewriteOutcome:
        try:
            label_map = LabelMap.coerce(labels)
        except ValidationError as exc:
            return self._failed(filename, ErrorInfo(code="INVALID_LABEL_MAP", message=str(exc)))

        try:
            result = self._pipeline.rewrite(text, label_map, filename)
        except WorkflowParseError as exc:
            return self._failed(
                filename, ErrorInfo(code="YAML_PARSE_ERROR", message=str(exc), span=exc.span)
            )
        except YAMLSafetyError as exc:
            return self._failed(filename, ErrorInfo(code="YAML_SAFETY_ERROR", message=str(exc)))

        if result.changed:
            logger.info(
                "%s: replaced %d runner label(s)", filename, len(result.replacements)
            )
        return RewriteOutcome(
            text=result.text, changed=result.changed, replacements=result.replacements
        )

    def rewrite_many(
        self,
        documents: Mapping[str, str],
        labels: LabelMap | Mapping[str, str],
    ) -> dict[str, RewriteOutcome]:
        """Rewrite each named document independently."""
        return {name: self.rewrite(text, labels, name) for name, text in documents.items()}

    @staticmethod
    def _failed(filename: str, error: ErrorInfo) -> RewriteOutcome:
        logger.warning("%s: %s", filename, error.message)
        return RewriteOutcome(text="", changed=False, error=error)
