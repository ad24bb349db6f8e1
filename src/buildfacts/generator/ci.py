"""Continuous integration platform detection."""

import os
from typing import List, Mapping, Optional, Tuple

from ..models import CIPlatform


# Checked in order; vendor-specific variables win over the generic CI flag
_VENDOR_VARIABLES: List[Tuple[str, CIPlatform]] = [
    ("GITHUB_ACTIONS", CIPlatform.GITHUB_ACTIONS),
    ("GITLAB_CI", CIPlatform.GITLAB_CI),
    ("TRAVIS", CIPlatform.TRAVIS_CI),
    ("CIRCLECI", CIPlatform.CIRCLECI),
    ("APPVEYOR", CIPlatform.APPVEYOR),
    ("TF_BUILD", CIPlatform.AZURE_PIPELINES),
    ("JENKINS_URL", CIPlatform.JENKINS),
    ("TEAMCITY_VERSION", CIPlatform.TEAMCITY),
    ("BUILDKITE", CIPlatform.BUILDKITE),
    ("BITBUCKET_BUILD_NUMBER", CIPlatform.BITBUCKET_PIPELINES),
    ("DRONE", CIPlatform.DRONE),
]

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _is_set(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() not in _FALSE_VALUES


def detect_ci_platform(environ: Optional[Mapping[str, str]] = None) -> Optional[CIPlatform]:
    """Detect the CI platform the build is running on.

    Args:
        environ: Environment to inspect, defaults to the process environment

    Returns:
        Optional[CIPlatform]: Detected platform, or None outside CI
    """
    if environ is None:
        environ = os.environ

    for variable, platform in _VENDOR_VARIABLES:
        if _is_set(environ, variable):
            return platform

    if _is_set(environ, "CI") or _is_set(environ, "CONTINUOUS_INTEGRATION"):
        return CIPlatform.GENERIC
    return None
