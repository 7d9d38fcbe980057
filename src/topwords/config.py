"""Configuration for word frequency reports."""

import codecs
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .ranking import DEFAULT_TOP_N
from .report import OUTPUT_FORMATS
from .source import DEFAULT_TIMEOUT


@dataclass
class ReportConfig:
    """Settings for a single report run."""

    top: int = DEFAULT_TOP_N
    format: str = "text"
    encoding: str = "utf-8"
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate values after init."""
        self.validate()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReportConfig":
        """Create ReportConfig from a YAML dict.

        Missing keys keep their defaults.

        Raises:
            ValueError: If a key is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "ReportConfig":
        """Load report configuration from a YAML file.

        An empty file gives the default configuration.

        Raises:
            ValueError: If the file is not valid YAML or holds invalid values.
        """
        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Cannot parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        return cls.from_dict(data)

    def validate(self) -> None:
        """Check that all values are usable.

        Raises:
            ValueError: If any value is out of range or of the wrong type.
        """
        # bool is an int subclass, but "top: yes" is not a count
        if isinstance(self.top, bool) or not isinstance(self.top, int):
            raise ValueError(f"'top' must be an integer, got {self.top!r}")
        if self.top < 0:
            raise ValueError(f"'top' must be non-negative, got {self.top}")
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(
                f"'format' must be one of {', '.join(OUTPUT_FORMATS)}, got {self.format!r}"
            )
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ValueError(f"'encoding' must be a non-empty string, got {self.encoding!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            raise ValueError(f"'timeout' must be a number, got {self.timeout!r}")
        if self.timeout <= 0:
            raise ValueError(f"'timeout' must be positive, got {self.timeout}")

    def override(self, overrides: dict[str, Any]) -> None:
        """Override values, ignoring those set to None.

        Raises:
            ValueError: If the resulting configuration is invalid.
        """
        for key, value in overrides.items():
            if value is not None:
                setattr(self, key, value)
        self.validate()
