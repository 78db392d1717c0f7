"""Construction of densities from plain (log-)density functions.

`logfuncdensity` and `funcdensity` are the inverses of the curried forms of
`logdensityof` and `densityof`:

* `d = logfuncdensity(logdensityof(obj))` is equivalent to `obj` with respect to
  `logdensityof` and `densityof`. If `obj` *is* a density, `d` is `obj` itself. If
  `obj` only *has* a density, `d` is a new object that *is* that density.
* `logdensityof(logfuncdensity(log_f))` is `log_f`.

The same holds for `funcdensity` and `densityof`.
"""
import dataclasses
import functools
from typing import Callable

import jax
import jax.numpy as jnp
from jaxtyping import Array

from .evaluation import DensityOf, LogDensityOf, densityof, logdensityof
from .inverse import register_inverse
from .kinds import HasDensity, IsDensity, NotADensityError, densitykind, register_density_kind
from .utils.jax_utils import is_pytree_node


@jax.tree_util.register_pytree_node_class
@dataclasses.dataclass(frozen=True, repr=False)
class LogFuncDensity:
    """A density defined by its log-density function `log_f`.

    Use `logfuncdensity(log_f)` instead of instantiating this directly.
    """
    log_f: Callable[[Array], Array]

    def __repr__(self):
        return f"{type(self).__name__}({self.log_f!r})"

    def tree_flatten(self):
        # Plain functions are static, curried evaluators keep their object as children
        if is_pytree_node(self.log_f):
            return (self.log_f,), None
        return (), self.log_f

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children) if aux_data is None else cls(aux_data)


@jax.tree_util.register_pytree_node_class
@dataclasses.dataclass(frozen=True, repr=False)
class FuncDensity:
    """A density defined by its non-log density function `f`.

    Use `funcdensity(f)` instead of instantiating this directly.
    """
    f: Callable[[Array], Array]

    def __repr__(self):
        return f"{type(self).__name__}({self.f!r})"

    def tree_flatten(self):
        if is_pytree_node(self.f):
            return (self.f,), None
        return (), self.f

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children) if aux_data is None else cls(aux_data)


@functools.singledispatch
def logfuncdensity(log_f: Callable[[Array], Array]):
    """Return a density (of kind `IsDensity`) defined by the log-density function `log_f`.

    Returns a `LogFuncDensity` by default. Curried `logdensityof` functions are
    unwrapped to the original object if it is a density. Types for which
    `logdensityof(obj)` is specialised register their own inversion via
    `logfuncdensity.register`.
    """
    return LogFuncDensity(log_f)


@logfuncdensity.register
def _(log_f: LogDensityOf):
    kind = densitykind(log_f.obj)
    if kind is IsDensity:
        return log_f.obj
    if kind is HasDensity:
        return LogFuncDensity(log_f)
    raise NotADensityError(type(log_f.obj))


@functools.singledispatch
def funcdensity(f: Callable[[Array], Array]):
    """Return a density (of kind `IsDensity`) defined by the non-log density function `f`.

    Returns a `FuncDensity` by default, see `logfuncdensity` for the unwrapping of
    curried `densityof` functions.
    """
    return FuncDensity(f)


@funcdensity.register
def _(f: DensityOf):
    kind = densitykind(f.obj)
    if kind is IsDensity:
        return f.obj
    if kind is HasDensity:
        return FuncDensity(f)
    raise NotADensityError(type(f.obj))


register_density_kind(LogFuncDensity, IsDensity)


@logdensityof.register(LogFuncDensity)
def _(obj: LogFuncDensity, x):
    return obj.log_f(x)


@logdensityof.register_curried(LogFuncDensity)
def _(obj: LogFuncDensity):
    return obj.log_f


@densityof.register(LogFuncDensity)
def _(obj: LogFuncDensity, x):
    return jnp.exp(obj.log_f(x))


@densityof.register_curried(LogFuncDensity)
def _(obj: LogFuncDensity):
    log_f = obj.log_f

    def density_fn(x):
        return jnp.exp(log_f(x))

    return density_fn


register_density_kind(FuncDensity, IsDensity)


@logdensityof.register(FuncDensity)
def _(obj: FuncDensity, x):
    return jnp.log(obj.f(x))


@logdensityof.register_curried(FuncDensity)
def _(obj: FuncDensity):
    f = obj.f

    def log_density_fn(x):
        return jnp.log(f(x))

    return log_density_fn


@densityof.register(FuncDensity)
def _(obj: FuncDensity, x):
    return obj.f(x)


@densityof.register_curried(FuncDensity)
def _(obj: FuncDensity):
    return obj.f


register_inverse(logfuncdensity, logdensityof)
register_inverse(funcdensity, densityof)
