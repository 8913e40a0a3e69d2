"""Shared pytest setup for i18ntree.

Hypothesis profiles (max_examples is set here and nowhere else):
    dev      200 examples, random seed (default)
    ci       50 examples, derandomized, failure blobs printed
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE picks a profile by name; otherwise CI=true selects "ci".

Tests marked with @pytest.mark.fuzz are skipped unless requested with -m fuzz.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from i18ntree.localization.current_locale import get_current_locale, set_current_locale

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


_PROFILES = ("dev", "ci", "verbose")


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())


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


@pytest.fixture(autouse=True)
def _isolate_current_locale() -> Iterator[None]:
    """Keep ambient locale bindings from leaking between tests."""
    previous = get_current_locale()
    yield
    set_current_locale(previous)
