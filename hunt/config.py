"""
Configuration loader
"""
import os
from pathlib import Path

import yaml
from pydantic import BaseModel

from hunt.models import MAX_ROUND, ProgressionParams, StepOrder


DEFAULT_CONFIG_PATH = "config/hunt.yaml"


class HuntConfig(BaseModel):
    """Server configuration, passed explicitly to everything that needs it"""
    max_round: int = MAX_ROUND
    step_order: StepOrder = StepOrder.OUT_OF_ORDER
    catalog_path: str = "data/rounds.yaml"
    admin_key: str = "change-me"

    def progression_params(self) -> ProgressionParams:
        return ProgressionParams(max_round=self.max_round, step_order=self.step_order)


def resolve_config_path(config_path: str = None) -> str:
    """Explicit argument, then HUNT_CONFIG, then the default location"""
    return config_path or os.environ.get("HUNT_CONFIG") or DEFAULT_CONFIG_PATH


def load_config(config_path: str = None) -> HuntConfig:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to config file

    Returns:
        HuntConfig object
    """
    path = Path(resolve_config_path(config_path))

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return HuntConfig(**data)
