"""Structural locator: find replaceable runner labels and their coordinates."""

from __future__ import annotations

import logging

from relabel.models.labels import LabelMap
from relabel.models.replacement import Replacement, RunnerShape
from relabel.parser.nodes import Node, NodeKind
from relabel.rewrite.selector import (
    RunnerSelector,
    ScalarSelector,
    SequenceSelector,
    UnsupportedSelector,
    classify,
)

logger = logging.getLogger("relabel.rewrite")


class RunnerLabelLocator:
    """Walks ``jobs.<name>.runs-on`` and emits one ``Replacement`` per match.

    Pure read over the tree: results come back in document order (jobs as
    they appear, then element order within list-valued ``runs-on``).
    """

    def __init__(self, jobs_key: str = "jobs", runner_key: str = "runs-on") -> None:
        self._jobs_key = jobs_key
        self._runner_key = runner_key

    def locate(self, root: Node | None, labels: LabelMap) -> list[Replacement]:
        if root is None:
            return []
        jobs = root.get(self._jobs_key)
        if jobs is None or jobs.kind is not NodeKind.MAPPING:
            logger.debug("No '%s' mapping at top level", self._jobs_key)
            return []

        replacements: list[Replacement] = []
        for name_node, body in jobs.pairs():
            job = name_node.value or ""
            runs_on = body.get(self._runner_key)
            if runs_on is None:
                continue
            replacements.extend(self._for_selector(job, classify(runs_on), labels))
        return replacements

    def _for_selector(
        self, job: str, selector: RunnerSelector, labels: LabelMap
    ) -> list[Replacement]:
        match selector:
            case ScalarSelector(node=node):
                new_label = labels.get(node.value or "")
                if new_label is None:
                    return []
                return [_replacement(job, node, new_label, RunnerShape.SCALAR, None)]
            case SequenceSelector(items=items):
                found: list[Replacement] = []
                for idx, item in enumerate(items):
                    if not item.is_scalar:
                        continue
                    new_label = labels.get(item.value or "")
                    if new_label is not None:
                        found.append(_replacement(job, item, new_label, RunnerShape.SEQUENCE, idx))
                return found
            case UnsupportedSelector(kind=kind):
                logger.debug("Job '%s': %s-valued %s left untouched", job, kind, self._runner_key)
                return []


def _replacement(
    job: str, node: Node, new_label: str, shape: RunnerShape, index: int | None
) -> Replacement:
    # Parser positions are 1-based; the patcher indexes lines and strings.
    return Replacement(
        job=job,
        old_label=node.value or "",
        new_label=new_label,
        line=node.line - 1,
        column=node.column - 1,
        shape=shape,
        index=index,
    )
