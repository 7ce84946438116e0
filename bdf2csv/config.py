"""Configuration loading from CLI args, env vars, and optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

from bdf2csv.errors import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    input_path: str = ""
    output_path: str = ""
    epoch_only: bool = False
    repair_names: bool = False
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def _resolve(cli_value, env_name: str, yaml_data: dict, key: str, default):
    """CLI flag wins, then env var, then YAML key, then the default."""
    if cli_value is not None:
        return cli_value
    env_value = os.environ.get(env_name)
    if env_value is not None:
        return env_value
    return yaml_data.get(key, default)


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from CLI args, env vars, and parsed YAML data."""
    epoch_only = _resolve(
        getattr(cli_args, "epoch", None),
        "BDF2CSV_EPOCH_ONLY", yaml_data, "epoch_only", Config.epoch_only,
    )
    repair_names = _resolve(
        getattr(cli_args, "repair_names", None),
        "BDF2CSV_REPAIR_NAMES", yaml_data, "repair_names", Config.repair_names,
    )
    log_level = str(_resolve(
        None, "BDF2CSV_LOG_LEVEL", yaml_data, "log_level", Config.log_level,
    )).upper()

    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"unknown log level {log_level!r}, expected one of {', '.join(LOG_LEVELS)}"
        )

    return Config(
        input_path=cli_args.input or "",
        output_path=cli_args.output or "",
        epoch_only=_parse_bool(epoch_only),
        repair_names=_parse_bool(repair_names),
        log_level=log_level,
    )
