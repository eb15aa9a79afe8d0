"""Global configuration management (~/.devskill.global)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


DEFAULT_SERVICE_URL = "http://localhost:8080"
DEFAULT_RUNTIME = "default"


@dataclass
class GlobalConfig:
    """
    Global configuration storing the evaluation service address
    and the preferred runtime.
    Stored at ~/.devskill.global
    """

    service_url: str = DEFAULT_SERVICE_URL
    default_runtime: str = DEFAULT_RUNTIME

    @staticmethod
    def default_path() -> Path:
        return Path.home() / ".devskill.global"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file."""
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                return cls(
                    service_url=data.get("service_url") or DEFAULT_SERVICE_URL,
                    default_runtime=data.get("default_runtime") or DEFAULT_RUNTIME,
                )
        except (json.JSONDecodeError, IOError, AttributeError):
            return cls()

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = self.default_path()

        data = {
            "service_url": self.service_url.rstrip("/"),
            "default_runtime": self.default_runtime,
        }
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
