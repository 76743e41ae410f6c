"""Pytest configuration for the msgtable test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

import os
from pathlib import Path
from typing import Any

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

from tests.strategies import PackageWriter

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Tests that use tmp_path share it across examples; every such test writes
# into a fresh subdirectory per example.
_SUPPRESSED = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def write_locale_package(tmp_path: Path) -> PackageWriter:
    """Write hand-made locale packages under ``tmp_path / "messages"``.

    The returned function takes a locale and ``{category: nested mapping}``,
    writes one ``<category>.py`` per category plus an ``__init__.py`` that
    imports them relatively, and returns the catalog root.
    """
    root = tmp_path / "messages"

    def _write(locale: str, categories: dict[str, dict[str, Any]]) -> Path:
        package = root / locale
        package.mkdir(parents=True, exist_ok=True)
        imports = []
        for category, mapping in categories.items():
            (package / f"{category}.py").write_text(
                f"messages = {mapping!r}\n", encoding="utf-8"
            )
            imports.append(f"from .{category} import messages as {category}\n")
        exports = ", ".join(f"{category!r}: {category}" for category in categories)
        (package / "__init__.py").write_text(
            "".join(imports) + f"\nmessages = {{{exports}}}\n", encoding="utf-8"
        )
        return root

    return _write
