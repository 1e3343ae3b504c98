"""Shared test fixtures for runner label rewriting."""

from __future__ import annotations

from pathlib import Path

import pytest

from relabel.parser.loader import TrackedLoader
from relabel.rewrite.pipeline import RewritePipeline
from relabel.service.label_service import RunnerLabelService

FIXTURES_DIR = Path(__file__).parent / "fixtures"
RUNNER_LABELS_INPUT = FIXTURES_DIR / "runner_labels" / "input"
RUNNER_LABELS_OUTPUT = FIXTURES_DIR / "runner_labels" / "output"

UBUNTU_MAP = {"ubuntu-latest": "step-ubuntu-24"}


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def pipeline() -> RewritePipeline:
    return RewritePipeline()


@pytest.fixture
def service() -> RunnerLabelService:
    return RunnerLabelService()


SAMPLE_WORKFLOW_YAML = """\
name: CI
on: [push]

jobs:
  build:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4

  test:
    runs-on: [self-hosted, ubuntu-latest]
    steps:
      - run: pytest

  release:
    runs-on: macos-latest
    steps:
      - run: make release
"""

MALFORMED_WORKFLOW_YAML = """\
name: Test Workflow
on: [push
jobs:
  test:
    runs-on: ubuntu-latest
"""
