"""Structured configuration of approximate comparisons."""
import dataclasses
import functools
from typing import Dict, Optional, Union

from omegaconf import DictConfig, OmegaConf


@dataclasses.dataclass
class ComparisonConfig:
    """Tolerances used when comparing density values, see `jnp.allclose`."""
    rtol: float = 1e-5
    atol: float = 1e-8
    equal_nan: bool = False


@functools.lru_cache(maxsize=None)
def default_comparison_config() -> DictConfig:
    """The default `ComparisonConfig`, built once and read-only."""
    config = OmegaConf.structured(ComparisonConfig)
    OmegaConf.set_readonly(config, True)
    return config


def is_comparison_config(cfg) -> bool:
    """Whether `cfg` is an already complete and validated `ComparisonConfig`."""
    return isinstance(cfg, DictConfig) and OmegaConf.get_type(cfg) is ComparisonConfig


def comparison_config(cfg: Optional[Union[DictConfig, Dict]] = None, **overrides) -> DictConfig:
    """Merge `cfg` and keyword `overrides` over the default `ComparisonConfig`.

    :param cfg: Optional (partial) configuration, e.g. loaded from a yaml file.
    :param overrides: Single entries that take precedence over `cfg`.
    :return: Validated configuration
    """
    if not overrides and (cfg is None or is_comparison_config(cfg)):
        return default_comparison_config() if cfg is None else cfg
    config = OmegaConf.structured(ComparisonConfig)
    if cfg is not None:
        config = OmegaConf.merge(config, cfg)
    return OmegaConf.merge(config, overrides)
