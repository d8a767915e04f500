"""uno_engine/config.py"""

from typing import List, Dict, TypeVar, Optional, Union
from dataclasses import dataclass, field
import os
import re  # For parsing human-readable sizes

import yaml

from .constants import INITIAL_HAND_SIZE

T = TypeVar("T")


# Helper to get nested dict values safely
def get_nested(data: Dict, keys: List[str], default: T) -> T:
    """Safely retrieve a nested value from a dict."""
    current = data
    for key in keys:
        if isinstance(current, dict) and key in current:
            current = current.get(key)
        else:
            return default
    # Handle case where the final value retrieved is None, but default isn't None
    if current is None and default is not None:
        return default
    return current  # type: ignore


def parse_human_readable_size(size_str: Union[str, int]) -> int:
    """Parses a human-readable size string (e.g., '1GB', '500MB', '1024') into bytes."""
    if isinstance(size_str, int):
        return size_str
    if not isinstance(size_str, str):
        raise ValueError(f"Invalid size format: {size_str}. Must be int or string.")

    size_str = size_str.upper().strip()
    match = re.fullmatch(r"(\d+)\s*(KB|MB|GB)?", size_str)
    if not match:
        raise ValueError(f"Invalid size format: {size_str}")

    value = int(match.group(1))
    unit = match.group(2)

    if unit == "KB":
        value *= 1024
    elif unit == "MB":
        value *= 1024**2
    elif unit == "GB":
        value *= 1024**3
    return value


def parse_hand_size(hand_size: Union[str, int]) -> int:
    """Parse the starting hand size, ensuring it's a positive integer."""
    try:
        value = int(hand_size)
    except (TypeError, ValueError):
        raise ValueError(f"hand_size must be an integer. Got: {hand_size}") from None
    if value < 1:
        raise ValueError(f"hand_size must be at least 1. Got: {value}")
    return value


@dataclass
class SystemConfig:
    seed: Optional[int] = None  # Fixed seed for reproducible shuffles


@dataclass
class UnoRulesConfig:
    hand_size: int = INITIAL_HAND_SIZE
    flip_first_discard: bool = True  # start_game turns one card face up


@dataclass
class PersistenceConfig:
    store_path: str = "uno_store.joblib"


@dataclass
class LoggingConfig:
    log_level_file: str = "DEBUG"  # Logging level for the log file
    log_level_console: str = "WARNING"  # Logging level for the console
    log_dir: str = "logs"
    log_file_prefix: str = "uno"
    log_max_bytes: int = 5 * 1024 * 1024  # Can be a string like "5MB" in YAML
    log_backup_count: int = 5


@dataclass
class Config:
    system: SystemConfig = field(default_factory=SystemConfig)
    uno_rules: UnoRulesConfig = field(default_factory=UnoRulesConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    _source_path: Optional[str] = None  # Internal field to store config path


def load_config(
    config_path: str = "config.yaml",
) -> Config:
    """Loads configuration from a YAML file, falling back to defaults."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_dict = yaml.safe_load(f)
            if config_dict is None:
                print(
                    f"Warning: Config file '{config_path}' is empty or invalid. "
                    f"Using default configuration."
                )
                config_dict = {}

            logging_config = LoggingConfig(
                log_level_file=get_nested(
                    config_dict,
                    ["logging", "log_level_file"],
                    LoggingConfig.log_level_file,
                ),
                log_level_console=get_nested(
                    config_dict,
                    ["logging", "log_level_console"],
                    LoggingConfig.log_level_console,
                ),
                log_dir=get_nested(
                    config_dict, ["logging", "log_dir"], LoggingConfig.log_dir
                ),
                log_file_prefix=get_nested(
                    config_dict,
                    ["logging", "log_file_prefix"],
                    LoggingConfig.log_file_prefix,
                ),
                log_max_bytes=parse_human_readable_size(
                    get_nested(
                        config_dict,
                        ["logging", "log_max_bytes"],
                        LoggingConfig.log_max_bytes,
                    )
                ),
                log_backup_count=get_nested(
                    config_dict,
                    ["logging", "log_backup_count"],
                    LoggingConfig.log_backup_count,
                ),
            )

            cfg = Config(
                system=SystemConfig(
                    seed=get_nested(config_dict, ["system", "seed"], SystemConfig.seed)
                ),
                uno_rules=UnoRulesConfig(
                    hand_size=parse_hand_size(
                        get_nested(
                            config_dict,
                            ["uno_rules", "hand_size"],
                            UnoRulesConfig.hand_size,
                        )
                    ),
                    flip_first_discard=get_nested(
                        config_dict,
                        ["uno_rules", "flip_first_discard"],
                        UnoRulesConfig.flip_first_discard,
                    ),
                ),
                persistence=PersistenceConfig(
                    store_path=get_nested(
                        config_dict,
                        ["persistence", "store_path"],
                        PersistenceConfig.store_path,
                    )
                ),
                logging=logging_config,
                _source_path=os.path.abspath(config_path),
            )
            return cfg

    except FileNotFoundError:
        print(
            f"Warning: Config file '{config_path}' not found. Using default configuration."
        )
        return Config(_source_path=None)
    except (
        TypeError,
        KeyError,
        AttributeError,
        yaml.YAMLError,
        ValueError,  # For parse_human_readable_size or parse_hand_size
    ) as e:
        print(
            f"Error loading or parsing config file '{config_path}': {e}. "
            f"Check config structure/types."
        )
        print("Using default configuration.")
        return Config(_source_path=None)
