"""Local configuration management (.devskill.local)."""

import json
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


LOCAL_CONFIG_NAME = ".devskill.local"


@dataclass
class LocalConfig:
    """
    Local configuration for the challenge being worked on.
    Stored at .devskill.local in project directory.
    """

    problem_id: Optional[str] = None
    document: Optional[str] = None
    runtime: Optional[str] = None

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Optional["LocalConfig"]:
        """
        Load local config from file.
        If path is not specified, searches upward from current directory.
        """
        if path is None:
            path = cls.find_config()

        if path is None or not path.exists():
            return None

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
                config = cls(
                    problem_id=data.get("problem_id"),
                    document=data.get("document"),
                    runtime=data.get("runtime"),
                )
        except (json.JSONDecodeError, IOError, AttributeError):
            return None

        # Relative document paths are relative to the config file
        if config.document and not Path(config.document).is_absolute():
            config.document = str(path.parent / config.document)
        return config

    def save(self, path: Optional[Path] = None) -> None:
        """Save local config to file."""
        if path is None:
            path = Path.cwd() / LOCAL_CONFIG_NAME

        data = {
            "problem_id": self.problem_id,
            "document": self.document,
            "runtime": self.runtime,
        }

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @staticmethod
    def find_config(start: Optional[Path] = None) -> Optional[Path]:
        """
        Search for .devskill.local starting from current directory,
        walking up to root.
        """
        current = start or Path.cwd()

        while True:
            config_path = current / LOCAL_CONFIG_NAME
            if config_path.exists():
                return config_path

            # Check if we've reached the root
            if current == current.parent:
                return None

            current = current.parent
