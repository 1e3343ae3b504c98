"""Runner label rewrite: locate runs-on values, then patch the source text."""

from relabel.rewrite.pipeline import RewritePipeline, RewriteResult, replace_runner_labels

__all__ = ["RewritePipeline", "RewriteResult", "replace_runner_labels"]
