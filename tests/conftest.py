import jax
import jax.numpy as jnp
import pytest

from densityinterface import HasDensity, IsDensity, register_density


def neg_sq_norm(x):
    return -jnp.sum(jnp.square(x))


@register_density(IsDensity)
class MyDensity:
    def logdensityof(self, x):
        return neg_sq_norm(x)


@register_density(HasDensity)
class MyMeasure:
    def logdensityof(self, x):
        return neg_sq_norm(x)


@jax.tree_util.register_pytree_node_class
@register_density(HasDensity)
class Normal:
    """Univariate normal distribution, which *has* a probability density"""

    def __init__(self, mu, sigma):
        self.mu = mu
        self.sigma = sigma

    def logdensityof(self, x):
        return -0.5 * ((x - self.mu) / self.sigma) ** 2 - jnp.log(self.sigma * jnp.sqrt(2 * jnp.pi))

    def tree_flatten(self):
        children = (self.mu, self.sigma)
        aux_data = None
        return children, aux_data

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)


class NotADensity:
    pass


@pytest.fixture
def x():
    return jnp.array([1.0, 2.0, 3.0])


@pytest.fixture
def my_density():
    return MyDensity()


@pytest.fixture
def my_measure():
    return MyMeasure()


@pytest.fixture
def normal():
    return Normal(jnp.array(1.0), jnp.array(2.0))
