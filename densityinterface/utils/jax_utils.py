from typing import Dict, Optional, Union

import jax
import jax.numpy as jnp
from jaxtyping import PyTree
from omegaconf import DictConfig

from ..config import comparison_config


def is_pytree_node(x) -> bool:
    """Whether `x` is a registered pytree node rather than a single leaf."""
    return not jax.tree_util.treedef_is_leaf(jax.tree_util.tree_structure(x))


def tree_allclose(
    tree1: PyTree,
    tree2: PyTree,
    cfg: Optional[Union[DictConfig, Dict]] = None,
    **overrides
) -> bool:
    """Whether all leaves of two pytrees of the same structure are approximately equal.

    :param cfg: Comparison tolerances, see `ComparisonConfig`
    :param overrides: Single tolerances overriding `cfg`
    """
    config = comparison_config(cfg, **overrides)
    rtol, atol, equal_nan = config.rtol, config.atol, config.equal_nan
    return jax.tree_util.tree_all(
        jax.tree_util.tree_map(
            lambda x, y: bool(jnp.allclose(x, y, rtol=rtol, atol=atol, equal_nan=equal_nan)),
            tree1,
            tree2,
        )
    )
