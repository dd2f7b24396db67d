"""Configuration management for OMYB."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from omyb.config.paths import default_config_path
from omyb.platform.logging import logger


PREFIX_WIDTH_DEFAULT = 2


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Zero-pad width used when writing numeric prefixes
    prefix_width: int = PREFIX_WIDTH_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Paths always skipped by ``create``
    ignore: list[Path] = field(default_factory=list)

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        self.ignore = [Path(item) for item in self.ignore if str(item).strip()]

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys.

        Args:
            raw: Parsed TOML mapping.

        Returns:
            Config: Configuration populated from ``raw``.

        Raises:
            ValueError: If a known key carries a value of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(key for key in raw if key not in known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        config_dict = {key: value for key, value in raw.items() if key in known}

        width = config_dict.get("prefix_width", PREFIX_WIDTH_DEFAULT)
        if isinstance(width, bool) or not isinstance(width, int):
            raise ValueError(f"prefix_width must be an integer, got {width!r}")

        ignore = config_dict.get("ignore", [])
        if not isinstance(ignore, list) or not all(isinstance(item, str) for item in ignore):
            raise ValueError("ignore must be a list of path strings")

        log_file = config_dict.get("log_file")
        if log_file is not None and not isinstance(log_file, str):
            raise ValueError(f"log_file must be a string, got {log_file!r}")

        return cls(**config_dict)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
                instance = cls.from_dict(config_dict)
                logger.debug("Configuration loaded from %s", target)
            else:
                instance = cls()
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached singleton so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


# Global configuration instance
config = Config.load()
