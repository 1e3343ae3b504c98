"""Orchestrates the rewrite: Text → Tree → Replacements → Patched text."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from relabel.models.labels import LabelMap
from relabel.models.replacement import Replacement
from relabel.parser.loader import TrackedLoader
from relabel.rewrite.locator import RunnerLabelLocator
from relabel.rewrite.patcher import apply_replacements
from relabel.settings import Settings

logger = logging.getLogger("relabel.rewrite")


@dataclass
class RewriteResult:
    """The rewritten document and what was done to it.

    ``replacements`` lists only the substitutions actually applied to ``text``;
    located labels the patcher could not find at their column are left out.
    """

    text: str
    changed: bool
    replacements: list[Replacement] = field(default_factory=list)


class RewritePipeline:
    """Orchestrates: Parse → Locate → Patch.

    Parsing happens before any patching, so a malformed document raises
    ``WorkflowParseError`` without producing partial output.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self._loader = TrackedLoader(settings)
        self._locator = RunnerLabelLocator(settings.jobs_key, settings.runner_key)

    def rewrite(
        self,
        text: str,
        labels: LabelMap | Mapping[str, str],
        filename: str = "<string>",
    ) -> RewriteResult:
        label_map = LabelMap.coerce(labels)
        if not label_map:
            return RewriteResult(text=text, changed=False)

        # Phase 1: parse for coordinates only
        root = self._loader.load_string(text, filename)

        # Phase 2: locate eligible runs-on values
        replacements = self._locator.locate(root, label_map)
        if not replacements:
            logger.debug("%s: no runner labels to replace", filename)
            return RewriteResult(text=text, changed=False)

        # Phase 3: patch the original text
        new_text, applied = apply_replacements(text, replacements)
        return RewriteResult(text=new_text, changed=bool(applied), replacements=applied)


def replace_runner_labels(
    text: str, labels: LabelMap | Mapping[str, str]
) -> RewriteResult:
    """Replace runner labels in a workflow using default settings."""
    return RewritePipeline().rewrite(text, labels)
