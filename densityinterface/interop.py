"""Density interface for numpyro distributions."""
import logging

from .evaluation import logdensityof
from .kinds import HasDensity, densitykind, register_density_kind


def register_numpyro():
    """Declare that numpyro distributions *have* a density, given by their `log_prob`.

    Covers all subclasses of `numpyro.distributions.Distribution`. Calling this
    more than once has no further effect.
    """
    from numpyro.distributions import Distribution

    if Distribution in densitykind.registry:
        return

    register_density_kind(Distribution, HasDensity)

    @logdensityof.register(Distribution)
    def _(dist: Distribution, x):
        return dist.log_prob(x)

    logging.info("Registered numpyro distributions with the density interface")
