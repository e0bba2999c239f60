"""Engine tunables, read from config.yaml with environment overrides."""

import logging
import os
import sys
from dataclasses import dataclass, fields

import yaml
from dotenv import load_dotenv

from phoenix_logic.errors import ConfigError

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.yaml")

_RULE_KEYS = (
    "oxygen_decay_interval",
    "oxygen_decay_amount",
    "xp_per_level",
    "level_up_power_bonus",
    "critical_oxygen_threshold",
    "win_xp_bonus",
)
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class EngineConfig:
    oxygen_decay_interval: int = 5
    oxygen_decay_amount: int = 2
    xp_per_level: int = 150
    level_up_power_bonus: int = 10
    critical_oxygen_threshold: int = 20
    win_xp_bonus: int = 500
    freeze_on_completion: bool = True
    commander_name: str = "Alex Chen"
    log_level: str = "INFO"


DEFAULT_CONFIG = EngineConfig()


def _as_bool(value, key: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"{key}: expected a boolean, got {value!r}")


def _as_count(value, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key}: expected a non-negative integer, got {value!r}")
    return value


def _read_yaml(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def load_config(path: str | None = None) -> EngineConfig:
    """Build an EngineConfig from YAML, then apply PHOENIX_* environment overrides.

    A .env file at the project root is loaded first. Values already present
    in the environment win over .env.
    """
    load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

    path = path or os.getenv("PHOENIX_CONFIG") or DEFAULT_CONFIG_PATH
    data = _read_yaml(path)

    values = {}
    rules = data.get("rules") or {}
    for key in _RULE_KEYS:
        if key in rules:
            values[key] = _as_count(rules[key], f"rules.{key}")
    if values.get("oxygen_decay_interval") == 0:
        raise ConfigError("rules.oxygen_decay_interval must be at least 1")
    if values.get("xp_per_level") == 0:
        raise ConfigError("rules.xp_per_level must be at least 1")

    session = data.get("session") or {}
    if "freeze_on_completion" in session:
        values["freeze_on_completion"] = _as_bool(
            session["freeze_on_completion"], "session.freeze_on_completion"
        )
    if "commander_name" in session:
        values["commander_name"] = str(session["commander_name"])

    log_section = data.get("logging") or {}
    if "level" in log_section:
        values["log_level"] = str(log_section["level"]).upper()

    if os.getenv("PHOENIX_LOG_LEVEL"):
        values["log_level"] = os.environ["PHOENIX_LOG_LEVEL"].upper()
    if os.getenv("PHOENIX_FREEZE_ON_COMPLETION"):
        values["freeze_on_completion"] = _as_bool(
            os.environ["PHOENIX_FREEZE_ON_COMPLETION"], "PHOENIX_FREEZE_ON_COMPLETION"
        )
    if os.getenv("PHOENIX_COMMANDER_NAME"):
        values["commander_name"] = os.environ["PHOENIX_COMMANDER_NAME"]

    known = {f.name for f in fields(EngineConfig)}
    return EngineConfig(**{k: v for k, v in values.items() if k in known})


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr. stdout is reserved for the MCP stdio transport."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ConfigError(f"Unknown log level: {level!r}")
    logging.basicConfig(
        level=numeric,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
