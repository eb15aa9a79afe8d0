"""Resolution of effective settings from CLI options and config files."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .global_config import GlobalConfig
from .local_config import LocalConfig


DEFAULT_PROBLEM_ID = "1"


@dataclass
class Settings:
    """Effective values for one command invocation."""

    service_url: str
    problem_id: str
    runtime: str
    document: Optional[str] = None


def resolve_settings(
    service_url: Optional[str] = None,
    problem_id: Optional[str] = None,
    runtime: Optional[str] = None,
    document: Optional[str] = None,
    global_path: Optional[Path] = None,
    local_path: Optional[Path] = None,
) -> Settings:
    """
    Merge explicit options with local and global config.
    Order: option -> local config -> global config.
    DEVSKILL_URL takes precedence over the global service url.
    """
    global_config = GlobalConfig.load(global_path)
    local_config = LocalConfig.load(local_path) or LocalConfig()

    return Settings(
        service_url=(
            service_url
            or os.getenv("DEVSKILL_URL")
            or global_config.service_url
        ).rstrip("/"),
        problem_id=problem_id or local_config.problem_id or DEFAULT_PROBLEM_ID,
        runtime=runtime or local_config.runtime or global_config.default_runtime,
        document=document or local_config.document,
    )
