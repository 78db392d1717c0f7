"""Evaluation of densities: `logdensityof` and `densityof`."""
import dataclasses
import functools
from typing import Any, Callable, Optional

import jax
import jax.numpy as jnp
from jaxtyping import Array

from .kinds import check_is_or_has_density

_NO_POINT = object()


class DensityFunction:
    """A function of a density-like object that is either evaluated at a point,
    `fn(obj, x)`, or curried into a function of the point, `fn(obj)`.

    Both forms dispatch on the type of `obj`. Implementations for a type are
    registered like for `functools.singledispatch`, with `fn.register` for the
    evaluation at a point and `fn.register_curried` for the curried form.
    """

    def __init__(
        self,
        name: str,
        at_point: Callable[[Any, Any], Array],
        curried: Callable[[Any], Callable],
        doc: Optional[str] = None,
    ):
        self.__name__ = name
        self.__qualname__ = name
        self.__doc__ = doc
        self._at_point = functools.singledispatch(at_point)
        self._curried = functools.singledispatch(curried)

    def __call__(self, obj, x=_NO_POINT):
        if x is _NO_POINT:
            return self._curried(obj)
        return self._at_point(obj, x)

    def register(self, cls, func=None):
        """Register the evaluation at a point, `func(obj, x)`, for objects of type `cls`."""
        return self._at_point.register(cls, func)

    def register_curried(self, cls, func=None):
        """Register the curried form, `func(obj) -> (x -> value)`, for objects of type `cls`."""
        return self._curried.register(cls, func)

    def __repr__(self):
        return self.__name__


def _logdensityof_at(obj, x):
    raise NotImplementedError(
        f"logdensityof is not implemented for objects of type {type(obj).__name__}"
    )


def _logdensityof_curried(obj):
    check_is_or_has_density(obj)
    return LogDensityOf(obj)


def _densityof_at(obj, x):
    return jnp.exp(logdensityof(obj, x))


def _densityof_curried(obj):
    check_is_or_has_density(obj)
    return DensityOf(obj)


logdensityof = DensityFunction(
    "logdensityof",
    _logdensityof_at,
    _logdensityof_curried,
    doc="""Logarithm of the density `obj` (resp. its associated density).

    `logdensityof(obj, x)` evaluates it at the point `x`. Every type that is or has
    a density must register this form, there is no generic fallback.

    `logdensityof(obj)` returns a function of the point. It defaults to
    `LogDensityOf(obj)` and raises `NotADensityError` if `obj` neither is nor has
    a density. If a type registers a specialised curried form, `logfuncdensity`
    typically has to be specialised for the returned type as well, since
    `logfuncdensity(logdensityof(obj))` must be equivalent to `obj`.
    """,
)

densityof = DensityFunction(
    "densityof",
    _densityof_at,
    _densityof_curried,
    doc="""Value of the density `obj` (resp. its associated density).

    `densityof(obj, x)` defaults to `exp(logdensityof(obj, x))` but may be
    registered directly for types that can compute the non-log density.

    `densityof(obj)` returns a function of the point, `DensityOf(obj)` by default,
    and raises `NotADensityError` if `obj` neither is nor has a density.
    """,
)


@jax.tree_util.register_pytree_node_class
@dataclasses.dataclass(frozen=True)
class LogDensityOf:
    """`logdensityof` with the density-like object fixed, as returned by `logdensityof(obj)`."""
    obj: Any

    def __call__(self, x):
        return logdensityof(self.obj, x)

    def __repr__(self):
        return f"{type(self).__name__}({self.obj!r})"

    def tree_flatten(self):
        return (self.obj,), None

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)


@jax.tree_util.register_pytree_node_class
@dataclasses.dataclass(frozen=True)
class DensityOf:
    """`densityof` with the density-like object fixed, as returned by `densityof(obj)`."""
    obj: Any

    def __call__(self, x):
        return densityof(self.obj, x)

    def __repr__(self):
        return f"{type(self).__name__}({self.obj!r})"

    def tree_flatten(self):
        return (self.obj,), None

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)
