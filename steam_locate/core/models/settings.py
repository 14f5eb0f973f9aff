"""
Settings model — tunables read from steamlocate.yml.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# Bound for every spawned command (reg, which, pgrep, tasklist, powershell)
DEFAULT_COMMAND_TIMEOUT = 5.0


class Settings(BaseModel):
    """Runtime settings for discovery.

    All fields have defaults, so an empty or missing config file is valid.
    """

    command_timeout: float = Field(default=DEFAULT_COMMAND_TIMEOUT, gt=0)
    # Extra root candidates probed after the built-in platform chain
    extra_search_paths: list[str] = Field(default_factory=list)
