"""Trait-like interface for mathematical and statistical densities."""
from .kinds import (
    DensityKind,
    HasDensity,
    IsDensity,
    IsOrHasDensity,
    NoDensity,
    NotADensityError,
    densitykind,
    is_or_has_density,
    register_density,
    register_density_kind,
)
from .evaluation import DensityFunction, DensityOf, LogDensityOf, densityof, logdensityof
from .construction import FuncDensity, LogFuncDensity, funcdensity, logfuncdensity
from .inverse import inverse, register_inverse
from .config import ComparisonConfig, comparison_config
from . import testing
