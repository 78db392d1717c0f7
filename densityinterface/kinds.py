"""Classification of objects that are, have, or are unrelated to a density."""
import enum
import functools
import logging
import warnings
from typing import Callable, Type, TypeVar

T = TypeVar("T")


class DensityKind(enum.Enum):
    """Indicates whether an object *is* a density, *has* a density or has
    *no* density at all.

    `IsDensity` marks objects that directly represent a density, like a probability
    density function. `HasDensity` marks objects that are associated with a density,
    like a probability distribution with its probability density. Every other object
    is `NoDensity`.
    """
    IsDensity = "IsDensity"
    HasDensity = "HasDensity"
    NoDensity = "NoDensity"

    def __repr__(self):
        return f"{self.name}()"


IsDensity = DensityKind.IsDensity
HasDensity = DensityKind.HasDensity
NoDensity = DensityKind.NoDensity

IsOrHasDensity = frozenset({IsDensity, HasDensity})


class NotADensityError(ValueError):
    """Raised when an object that neither is nor has a density is used as one."""

    def __init__(self, object_type: type):
        self.object_type = object_type
        super().__init__(
            f"Object of type {object_type.__name__} neither is nor has a density"
        )


@functools.singledispatch
def densitykind(obj) -> DensityKind:
    """Return the `DensityKind` of `obj`, resolved on its type.

    Defaults to `NoDensity`. A type opts in via

        densitykind.register(MyDensity, lambda _: IsDensity)

    or with the `register_density` class decorator.
    """
    return NoDensity


def is_or_has_density(obj) -> bool:
    """Whether `obj` is compatible with the density interface."""
    return densitykind(obj) in IsOrHasDensity


def check_is_or_has_density(obj):
    if not is_or_has_density(obj):
        raise NotADensityError(type(obj))


def register_density_kind(cls: type, kind: DensityKind):
    """Declare that all instances of `cls` are of the given density kind."""
    if not isinstance(kind, DensityKind):
        raise ValueError(
            f"Expected one of `IsDensity`, `HasDensity` or `NoDensity`, got {kind!r}"
        )
    if cls is not object and cls in densitykind.registry:
        warnings.warn(f"Overriding the registered density kind of {cls.__name__}")
    densitykind.register(cls, _constant_kind(kind))
    logging.debug(f"Registered {cls.__name__} as {kind.name}")


def _constant_kind(kind: DensityKind) -> Callable:
    def kind_fn(_obj) -> DensityKind:
        return kind

    return kind_fn


def register_density(kind: DensityKind) -> Callable[[Type[T]], Type[T]]:
    """Class decorator registering the density kind of a type.

    Methods named `logdensityof` and `densityof` that take a single point are
    registered as the type's evaluations at a point:

        @register_density(IsDensity)
        class MyDensity:
            def logdensityof(self, x):
                return -jnp.sum(x ** 2)
    """
    # Deferred, evaluation builds on this module
    from .evaluation import densityof, logdensityof

    def register(cls: Type[T]) -> Type[T]:
        register_density_kind(cls, kind)
        if callable(getattr(cls, "logdensityof", None)):
            logdensityof.register(cls, lambda obj, x: obj.logdensityof(x))
        if callable(getattr(cls, "densityof", None)):
            densityof.register(cls, lambda obj, x: obj.densityof(x))
        return cls

    return register
