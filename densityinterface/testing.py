"""Conformance test for implementations of the density interface."""
import logging
from typing import Any, Callable

import jax.numpy as jnp

from .config import comparison_config
from .construction import funcdensity, logfuncdensity
from .evaluation import densityof, logdensityof
from .kinds import IsDensity, IsOrHasDensity, densitykind
from .utils.jax_utils import tree_allclose


def test_density_interface(
    d,
    x: Any,
    ref_logd_at_x,
    compare: Callable[..., bool] = tree_allclose,
    **kwargs
):
    """Test if `d` is compatible with the density interface.

    Tests that `logdensityof(d, x)` equals `ref_logd_at_x` and that the behavior of
    `logdensityof(d)`, `densityof(d, x)` and `densityof(d)` is consistent with it.
    Also tests that `logfuncdensity(logdensityof(d))` and `funcdensity(densityof(d))`
    return densities equivalent to `d` with respect to these functions.

    :param d: Object that is or has a density
    :param x: Point to evaluate the density at
    :param ref_logd_at_x: Expected log-density of `d` at `x`
    :param compare: Comparison of computed and expected values, called as
        `compare(value, expected, **kwargs)`
    :raises AssertionError: If `d` violates the density interface, including any
        error raised while evaluating or comparing it
    """
    logging.info(f"Testing density interface of {d!r} at {x}")
    if compare is tree_allclose:
        # Merge the tolerances once instead of on every comparison
        kwargs = dict(cfg=comparison_config(**kwargs))

    kind = densitykind(d)
    _check(kind in IsOrHasDensity, f"densitykind({d!r}) is {kind!r}, expected IsDensity() or HasDensity()")
    _check_evaluations(d, x, ref_logd_at_x, compare, **kwargs)

    for construct, evaluate in ((logfuncdensity, logdensityof), (funcdensity, densityof)):
        name = f"{construct.__name__}({evaluate.__name__}(d))"
        d2 = _evaluate(name, d, lambda: construct(evaluate(d)))
        kind2 = densitykind(d2)
        _check(kind2 is IsDensity, f"densitykind({name}) is {kind2!r}, expected IsDensity()")
        _check_evaluations(d2, x, ref_logd_at_x, compare, **kwargs)


test_density_interface.__test__ = False


def _check_evaluations(d, x, ref_logd_at_x, compare, **kwargs):
    ref_d_at_x = jnp.exp(ref_logd_at_x)
    checks = (
        ("logdensityof(d, x)", lambda: logdensityof(d, x), ref_logd_at_x),
        ("logdensityof(d)(x)", lambda: logdensityof(d)(x), ref_logd_at_x),
        ("densityof(d, x)", lambda: densityof(d, x), ref_d_at_x),
        ("densityof(d)(x)", lambda: densityof(d)(x), ref_d_at_x),
    )
    for name, evaluation, expected in checks:
        value = _evaluate(name, d, evaluation)
        matches = _evaluate(f"Comparing {name}", d, lambda: compare(value, expected, **kwargs))
        _check(matches, f"{name} of {d!r} is {value}, expected {expected}")


def _evaluate(name: str, d, fn: Callable[[], Any]):
    try:
        return fn()
    except Exception as e:
        raise AssertionError(f"{name} of {d!r} raised {e!r}") from e


def _check(condition, message: str):
    if not condition:
        raise AssertionError(message)
