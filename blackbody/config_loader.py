#!/usr/bin/env python3
"""
Configuration and reference-preset JSON loading.

Schemas
=======
Configuration (config.json at the repository root, every key optional):
{
  "initial_temperature": 5778.0,
  "history_capacity": 2,
  "calibration": {
    "min_temperature": 700.0,
    "max_temperature": 3000.0,
    "power_exponent": 0.7,
    "scale_factor": 1.0,
    "halo_max_alpha": 0.1
  },
  "logging": {
    "level": "INFO",
    "format": "%(asctime)s [%(levelname)s] %(message)s",
    "log_dir": "runs"
  }
}

Reference preset (presets/*.json):
{
  "name": "Betelgeuse",
  "temperature": 3500.0
}

A missing or malformed file falls back to the defaults. Users can add their own JSON
files to presets/ and they'll be picked up by the loader.
"""
import json
import logging
import os
from dataclasses import dataclass, field, fields
from typing import List, Optional

from .constants import DEFAULT_TEMPERATURE, SAVED_HISTORY_CAPACITY
from .data_models import ColorCalibration, ReferencePreset
from .thermometer import DEFAULT_REFERENCE_PRESETS

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(ROOT_DIR, "config.json")
PRESETS_DIR = os.path.join(ROOT_DIR, "presets")

DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("blackbody_sim")


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_dir: Optional[str] = "runs"


@dataclass
class SimulationConfig:
    initial_temperature: float = DEFAULT_TEMPERATURE
    history_capacity: int = SAVED_HISTORY_CAPACITY
    calibration: ColorCalibration = field(default_factory=ColorCalibration)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _read_json(path: str) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is not an object", path)
        return None
    return data


def _coerce_number(value) -> Optional[float]:
    # JSON true/false would otherwise pass float() as 1.0/0.0
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _coerce_calibration(data: dict) -> ColorCalibration:
    known = {f.name for f in fields(ColorCalibration)}
    kwargs = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Unknown calibration key '%s' ignored", key)
            continue
        number = _coerce_number(value)
        if number is None:
            logger.warning("Calibration key '%s' is not a number; using default", key)
            continue
        kwargs[key] = number
    try:
        return ColorCalibration(**kwargs)
    except ValueError as exc:
        logger.warning("Invalid calibration (%s); using defaults", exc)
        return ColorCalibration()


def _coerce_logging(data: dict) -> LoggingConfig:
    cfg = LoggingConfig()
    level = data.get("level")
    if isinstance(level, str) and isinstance(logging.getLevelName(level.upper()), int):
        cfg.level = level.upper()
    elif level is not None:
        logger.warning("Unknown log level %r; using %s", level, cfg.level)
    if isinstance(data.get("format"), str):
        cfg.format = data["format"]
    if "log_dir" in data:
        cfg.log_dir = data["log_dir"] if isinstance(data["log_dir"], str) else None
    return cfg


def load_config(path: str = CONFIG_PATH) -> SimulationConfig:
    """Load config.json; any missing, malformed or invalid value keeps its default."""
    config = SimulationConfig()
    data = _read_json(path)
    if not data:
        return config

    if "initial_temperature" in data:
        temperature = _coerce_number(data["initial_temperature"])
        if temperature is None:
            logger.warning("initial_temperature is not a number; using %.0f K", config.initial_temperature)
        else:
            config.initial_temperature = max(0.0, temperature)
    if "history_capacity" in data:
        capacity = data["history_capacity"]
        if isinstance(capacity, int) and not isinstance(capacity, bool):
            config.history_capacity = max(0, capacity)
        else:
            logger.warning("history_capacity is not an integer; using %d", config.history_capacity)
    if isinstance(data.get("calibration"), dict):
        config.calibration = _coerce_calibration(data["calibration"])
    if isinstance(data.get("logging"), dict):
        config.logging = _coerce_logging(data["logging"])
    return config


def load_preset(file_name: str, presets_dir: str = PRESETS_DIR) -> Optional[ReferencePreset]:
    """Load a single preset definition; None if it is missing or malformed."""
    path = os.path.join(presets_dir, file_name)
    data = _read_json(path)
    if not data:
        return None
    temperature = _coerce_number(data.get("temperature"))
    if temperature is None:
        logger.warning("Preset %s has no numeric temperature", file_name)
        return None
    if temperature < 0:
        logger.warning("Preset %s has a negative temperature", file_name)
        return None
    return ReferencePreset(name=str(data.get("name") or os.path.splitext(file_name)[0]), temperature=temperature)


def list_presets(presets_dir: str = PRESETS_DIR) -> List[ReferencePreset]:
    """Built-in reference temperatures followed by any valid presets/*.json, hottest first."""
    presets = list(DEFAULT_REFERENCE_PRESETS)
    if os.path.isdir(presets_dir):
        for fn in sorted(os.listdir(presets_dir)):
            if not fn.lower().endswith(".json"):
                continue
            preset = load_preset(fn, presets_dir)
            if preset is not None:
                presets.append(preset)
    return sorted(presets, key=lambda p: p.temperature, reverse=True)
