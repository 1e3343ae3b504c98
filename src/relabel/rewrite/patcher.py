"""Text patcher: apply replacements to the original lines, nothing else."""

from __future__ import annotations

import logging
import re

from relabel.models.replacement import Replacement

logger = logging.getLogger("relabel.rewrite")

# Characters that end a runner label token in YAML source: whitespace, quotes,
# flow indicators and the comment marker.
_DELIMITERS = " \t\r'\",[]{}#"


def _bounded(label: str) -> re.Pattern[str]:
    """Match ``label`` only where it is not part of a longer token."""
    edge = re.escape(_DELIMITERS)
    return re.compile(rf"(?<![^{edge}]){re.escape(label)}(?![^{edge}])")


def apply_replacements(
    text: str, replacements: list[Replacement]
) -> tuple[str, list[Replacement]]:
    """Patch ``text`` in place and return ``(new_text, applied)``.

    For every replacement the search starts at the recorded column and only
    the first bounded occurrence of the old label is replaced, so quotes,
    trailing comments and identical tokens earlier on the line survive.
    Columns refer to the original text; earlier edits on the same line
    (flow sequences) shift later columns by the length difference.
    """
    if not replacements:
        return text, []

    lines = text.split("\n")
    shifts: dict[int, list[tuple[int, int]]] = {}  # line -> [(column, delta)]
    applied: list[Replacement] = []
    for r in replacements:
        if not 0 <= r.line < len(lines):
            logger.debug("Skipping %s: line %d outside document", r.job, r.line + 1)
            continue

        line = lines[r.line]
        column = r.column + sum(
            delta for origin, delta in shifts.get(r.line, []) if origin < r.column
        )
        prefix, suffix = line[:column], line[column:]
        match = _bounded(r.old_label).search(suffix)
        if match is None:
            logger.debug(
                "Skipping %s: '%s' not found at line %d column %d",
                r.job,
                r.old_label,
                r.line + 1,
                r.column + 1,
            )
            continue

        lines[r.line] = prefix + suffix[: match.start()] + r.new_label + suffix[match.end() :]
        shifts.setdefault(r.line, []).append((r.column, len(r.new_label) - len(r.old_label)))
        applied.append(r)
        logger.debug(
            "Job '%s': '%s' -> '%s' at line %d", r.job, r.old_label, r.new_label, r.line + 1
        )

    return "\n".join(lines), applied
