"""Pytest configuration for the PropLexEngine test suite.

Hypothesis profiles:
- dev: 500 examples; round-trip tests draw whole documents, so local runs
  need enough examples to reach continuation and CRLF combinations
- ci: 50 derandomized examples for stable, fast CI runs

CI=true selects "ci"; HYPOTHESIS_PROFILE=dev|ci overrides.

Tests marked @pytest.mark.fuzz are skipped unless run with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
