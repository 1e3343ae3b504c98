from relabel.service.label_service import RewriteOutcome, RunnerLabelService

__all__ = ["RewriteOutcome", "RunnerLabelService"]
