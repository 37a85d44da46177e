"""Pytest configuration for the glossengine test suite.

Hypothesis profiles:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples, derandomized
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Tests marked with @pytest.mark.fuzz are skipped unless requested with
``pytest -m fuzz``.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from glossengine import Glossary
from glossengine.runtime import LocaleContext

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

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


def _detect_profile() -> str:
    """Pick the Hypothesis profile from the environment."""
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


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests unless ``-m fuzz`` was given."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_locale_cache() -> Iterator[None]:
    """Isolate LocaleContext cache state between tests."""
    LocaleContext.clear_cache()
    yield
    LocaleContext.clear_cache()


SAMPLE_GLOSSARY = {
    "$version": "1.0.0",
    "$locale": "en-US",
    "$translations": {
        "greeting": "Hello, world!",
        "version": "Translation named like a reserved field",
        "user": {
            "notifications": {
                "$template": "{count}",
                "$params": {
                    "count": {
                        "$format": "plural",
                        "$plural": {
                            "one": "You have 1 notification.",
                            "other": "You have {count} notifications.",
                        },
                    },
                },
            },
            "welcome": {
                "$template": "Hello {name}, welcome back!",
                "$params": {"name": {"$default": "User"}},
            },
        },
        "greetings": {
            "$template": "Hello {names}, today is {today}!",
            "$params": {
                "names": {"$format": "list", "$options": {"type": "disjunction"}},
                "today": {"$format": "date-time", "$options": {"dateStyle": "full"}},
            },
        },
        "shopping": {
            "$template": "You have {items} in your list.",
            "$params": {"items": {"$format": "list"}},
        },
        "balance": {
            "$template": "{amount}",
            "$params": {
                "amount": {
                    "$format": "number",
                    "$options": {"style": "currency", "currency": "USD"},
                },
            },
        },
        "last_seen": {
            "$template": "Last seen {when}",
            "$params": {"when": {"$format": "relative-time", "$options": {"numeric": "always"}}},
        },
        "profile": {
            "$template": "Signed in as {display}",
            "$params": {"display": {"$alias": "username"}},
        },
        "menu": {
            "0": "First",
            "1": "Second",
        },
        "bare": {"$template": "{x}"},
    },
}


@pytest.fixture
def glossary() -> Glossary:
    """Validated en-US glossary covering every format kind."""
    return Glossary.from_data(SAMPLE_GLOSSARY)
