# emawindow/config.py
"""
Configuration management for the emawindow library.

Settings are loaded from environment variables.

Optional environment variables:
    EMA_WINDOW_SIZE - Window size used by DEFAULT_PARAMETERS (default: 30)
    EMA_SMOOTHING   - Smoothing factor used by DEFAULT_PARAMETERS (default: 2.0)
    LOG_LEVEL       - Logging level (default: INFO)

Parameter sets can also be loaded from a YAML file:

    window_size: 5
    smoothing: 2.0
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable


@dataclass
class Settings:
    """
    Global settings for the emawindow library.

    Values are loaded from environment variables on initialization.
    DEFAULT_PARAMETERS is built from window_size and smoothing once, when
    emawindow is first imported; changing them on this instance afterwards
    does not affect it. Set EMA_WINDOW_SIZE / EMA_SMOOTHING before import,
    or pass an EmaParameters to each engine:

        engine = FastEmaEngine(EmaParameters(window_size=10))
    """

    window_size: int = 30
    smoothing: float = 2.0
    log_level: str = "INFO"
    invalid: list[str] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        # Populate from environment at import-time.
        self.window_size = self._from_env("EMA_WINDOW_SIZE", int, self.window_size)
        self.smoothing = self._from_env("EMA_SMOOTHING", float, self.smoothing)
        self.log_level = os.getenv("LOG_LEVEL", self.log_level).upper()

    def _from_env(self, name: str, cast: Callable[[str], Any], default: Any) -> Any:
        raw = os.getenv(name)
        if raw is None or raw.strip() == "":
            return default
        try:
            return cast(raw.strip())
        except ValueError:
            self.invalid.append(name)
            return default

    def validate(self) -> None:
        """
        Validate the loaded settings.

        Raises:
            ValueError: If any setting is unparseable or out of range
        """
        problems: list[str] = [f"{name} is not a number" for name in self.invalid]
        if self.window_size <= 0:
            problems.append(f"EMA_WINDOW_SIZE must be > 0, got {self.window_size}")
        if self.smoothing <= 0:
            problems.append(f"EMA_SMOOTHING must be > 0, got {self.smoothing}")
        elif self.window_size > 0 and self.smoothing >= 1 + self.window_size:
            problems.append(
                f"EMA_SMOOTHING must be < 1 + EMA_WINDOW_SIZE ({1 + self.window_size}), "
                f"got {self.smoothing}"
            )
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            problems.append(f"LOG_LEVEL is not a logging level: '{self.log_level}'")

        if problems:
            raise ValueError(f"Invalid emawindow settings: {'; '.join(problems)}")


def load_parameters_config(config_path: str | Path):
    """
    Load an EMA parameter set from a YAML file.

    Args:
        config_path: Path to YAML config file

    Returns:
        EmaParameters built from the file's ``window_size`` and ``smoothing``
    """
    import yaml

    from .parameters import EmaParameters

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if config is None:
        raise ValueError(f"Empty config file: {config_path}")
    if not isinstance(config, dict):
        raise ValueError(f"Expected a mapping in {config_path}, got {type(config).__name__}")
    if "window_size" not in config:
        raise ValueError(f"Missing 'window_size' in {config_path}")

    try:
        window_size = int(config["window_size"])
        smoothing = float(config.get("smoothing", 2.0))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid parameter value in {config_path}: {e}")

    return EmaParameters(window_size=window_size, smoothing=smoothing)


# Global settings instance - loaded when module is imported
settings = Settings()
