"""Configuration parsing for count runs."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from .options import DEFAULT_COUNT_OPTION, CountOption
from .report import REPORT_FORMATS
from .url import DEFAULT_TIMEOUT

_KNOWN_KEYS = {"mode", "top", "format", "output", "timeout"}


def _is_positive_int(value: Any) -> bool:
    # YAML booleans are ints in Python
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass
class CountConfig:
    """Settings for a count run, from YAML and/or command-line flags."""

    mode: CountOption = DEFAULT_COUNT_OPTION
    top: int | None = None
    format: str = "text"
    output: Path | None = None
    timeout: int = DEFAULT_TIMEOUT
    base_dir: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        """Validate field values after init."""
        self.mode = CountOption.parse(self.mode)
        if self.top is not None and not _is_positive_int(self.top):
            raise ValueError(f"'top' must be a positive integer, got {self.top!r}")
        if self.format not in REPORT_FORMATS:
            raise ValueError(
                f"Unknown format: {self.format!r} (choose from {', '.join(REPORT_FORMATS)})"
            )
        if not _is_positive_int(self.timeout):
            raise ValueError(f"'timeout' must be a positive integer, got {self.timeout!r}")
        if self.output is not None:
            self.output = self.resolve_path(self.output)

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "CountConfig":
        """Create CountConfig from a YAML dict.

        Args:
            data: Parsed YAML mapping.
            base_dir: Directory that relative paths are resolved against.

        Raises:
            KeyError: If the mapping has keys this config does not know.
            ValueError: If a value is invalid.
        """
        unknown = set(data) - _KNOWN_KEYS
        if unknown:
            raise KeyError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = {k: v for k, v in data.items() if v is not None}
        if "output" in kwargs:
            kwargs["output"] = Path(str(kwargs["output"]))
        if base_dir is not None:
            kwargs["base_dir"] = base_dir
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> "CountConfig":
        """Load configuration from a YAML file.

        An empty file yields the defaults. A relative ``output`` is resolved
        relative to the directory containing the YAML file.
        """
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

        return cls.from_dict(data, base_dir=path.parent.resolve())

    def resolve_path(self, value: Any) -> Path:
        """Make a path absolute relative to the config's base directory."""
        path = Path(str(value))
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def override(self, **values: Any) -> None:
        """Apply overrides, ignoring those set to None.

        Paths given here come from the command line, so they are taken
        relative to the working directory rather than the config file.
        """
        known = {f.name for f in fields(self)}
        for key, value in values.items():
            if key not in known:
                raise KeyError(f"Unknown config key: {key}")
            if value is None:
                continue
            if key == "output":
                value = Path(value).resolve()
            setattr(self, key, value)
        # Re-run validation on the merged values
        self.__post_init__()
