"""Format-preserving runner label rewriting for CI workflow YAML."""

from relabel.models.errors import ErrorInfo, SourceSpan
from relabel.models.labels import LabelMap
from relabel.models.replacement import Replacement, RunnerShape
from relabel.parser.loader import WorkflowParseError, YAMLSafetyError
from relabel.rewrite.pipeline import RewritePipeline, RewriteResult, replace_runner_labels
from relabel.service.label_service import RewriteOutcome, RunnerLabelService
from relabel.settings import Settings

__version__ = "0.1.0"

__all__ = [
    "ErrorInfo",
    "LabelMap",
    "Replacement",
    "RewriteOutcome",
    "RewritePipeline",
    "RewriteResult",
    "RunnerLabelService",
    "RunnerShape",
    "Settings",
    "SourceSpan",
    "WorkflowParseError",
    "YAMLSafetyError",
    "__version__",
    "replace_runner_labels",
]
