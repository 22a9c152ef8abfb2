from __future__ import annotations

import os

from hypothesis import settings

_PROFILE_ENV_VAR = "ARGDIAG_HYPOTHESIS_PROFILE"
_CI_PROFILE = "argdiag_ci"
_EXPLORE_PROFILE = "argdiag_explore"

settings.register_profile(
    _CI_PROFILE,
    derandomize=True,
    max_examples=50,
    deadline=None,
    print_blob=True,
)
# Randomized and longer; opt in locally when hunting for counterexamples.
settings.register_profile(_EXPLORE_PROFILE, max_examples=500, deadline=None)


def pytest_configure(config: object) -> None:
    del config
    settings.load_profile(os.environ.get(_PROFILE_ENV_VAR, _CI_PROFILE))
