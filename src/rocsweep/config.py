"""Configuration loading for rocsweep.

Loads sweep, curve, and bootstrap settings from a YAML file so that
command-line runs are reproducible.
"""
from __future__ import annotations

from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, Field

from rocsweep.core.enums import UndefinedRatePolicy
from rocsweep.core.exceptions import ConfigError


class SweepConfig(BaseModel):
    """Threshold sweep configuration.

    Attributes:
        undefined_rate: Policy for an FPR or TPR with a zero denominator.
    """

    undefined_rate: UndefinedRatePolicy = UndefinedRatePolicy.RAISE


class CurveConfig(BaseModel):
    """Curve assembly configuration.

    Attributes:
        drop_intermediate: Drop collinear interior points.
    """

    drop_intermediate: bool = True


class BootstrapConfig(BaseModel):
    """AUC bootstrap configuration.

    Attributes:
        n_iter: Number of bootstrap resamples.
        seed: Random seed for reproducibility.
        confidence: Central coverage of the interval.
    """

    n_iter: int = Field(default=1000, ge=1)
    seed: int = 42
    confidence: float = Field(default=0.95, gt=0.0, lt=1.0)


class RocSweepConfig(BaseModel):
    """Root configuration for rocsweep.

    Attributes:
        sweep: Threshold sweep settings.
        curve: Curve assembly settings.
        bootstrap: Bootstrap settings.
    """

    sweep: SweepConfig = Field(default_factory=SweepConfig)
    curve: CurveConfig = Field(default_factory=CurveConfig)
    bootstrap: BootstrapConfig = Field(default_factory=BootstrapConfig)


def load_config(path: Path) -> RocSweepConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        RocSweepConfig with every missing section at its defaults.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigError: If the file is not a mapping or holds invalid values.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in {path}: {exc}"
            raise ConfigError(msg) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config root must be a mapping: {path}"
        raise ConfigError(msg)

    try:
        return RocSweepConfig(
            sweep=SweepConfig(**(data.get("sweep") or {})),
            curve=CurveConfig(**(data.get("curve") or {})),
            bootstrap=BootstrapConfig(**(data.get("bootstrap") or {})),
        )
    except (TypeError, pydantic.ValidationError) as exc:
        msg = f"Invalid configuration in {path}: {exc}"
        raise ConfigError(msg) from exc
