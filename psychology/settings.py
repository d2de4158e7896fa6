"""Runtime settings read from environment variables.

Only the caller-facing knobs live here. The scoring constants are part of
the test's definition and are not configurable.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


class ScoringSettings(BaseModel):
    """Settings for result aggregation and the boundary codec."""

    test_threshold: float = Field(default=3.75, ge=0.0)
    query_key: str = Field(default="encdata", min_length=1)


def _env_float(env: Mapping[str, str | None], name: str, default: float) -> float:
    raw = env.get(name) or ""
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default


def load_settings(env_file: str | Path | None = None) -> ScoringSettings:
    """Build settings from PSYCHOLOGY_* environment variables.

    Reads PSYCHOLOGY_TEST_THRESHOLD and PSYCHOLOGY_QUERY_KEY.
    When *env_file* is given, its values are used for variables not set
    in the process environment. Unset or unparsable values fall back to
    the defaults.
    """
    env: dict[str, str | None] = {}
    if env_file is not None:
        env.update(dotenv_values(env_file))
    env.update(os.environ)

    defaults = ScoringSettings()
    return ScoringSettings(
        test_threshold=_env_float(env, "PSYCHOLOGY_TEST_THRESHOLD", defaults.test_threshold),
        query_key=env.get("PSYCHOLOGY_QUERY_KEY") or defaults.query_key,
    )
