import warnings

import pytest

from densityinterface import (
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
from densityinterface.kinds import check_is_or_has_density


def test_kinds_are_closed():
    assert set(DensityKind) == {IsDensity, HasDensity, NoDensity}
    assert IsOrHasDensity == {IsDensity, HasDensity}
    assert NoDensity not in IsOrHasDensity


@pytest.mark.parametrize("obj", ["foo", 42, 1.5, None, [1, 2, 3], len])
def test_default_is_no_density(obj):
    assert densitykind(obj) is NoDensity
    assert not is_or_has_density(obj)
    with pytest.raises(NotADensityError):
        check_is_or_has_density(obj)


def test_registered_kinds(my_density, my_measure):
    assert densitykind(my_density) is IsDensity
    assert densitykind(my_measure) is HasDensity
    assert is_or_has_density(my_density)
    assert is_or_has_density(my_measure)


def test_kind_is_resolved_on_type():
    class Base:
        pass

    class Derived(Base):
        pass

    densitykind.register(Base, lambda _: HasDensity)
    assert densitykind(Derived()) is HasDensity
    assert densitykind(Base()) is HasDensity


def test_register_density_without_methods():
    @register_density(IsDensity)
    class Marker:
        pass

    assert densitykind(Marker()) is IsDensity


def test_register_invalid_kind():
    class Invalid:
        pass

    with pytest.raises(ValueError):
        register_density_kind(Invalid, "IsDensity")
    assert densitykind(Invalid()) is NoDensity


def test_reregistration_warns():
    class Twice:
        pass

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        register_density_kind(Twice, IsDensity)
    with pytest.warns(UserWarning, match="Twice"):
        register_density_kind(Twice, HasDensity)
    assert densitykind(Twice()) is HasDensity


def test_not_a_density_error():
    err = NotADensityError(str)
    assert isinstance(err, ValueError)
    assert err.object_type is str
    assert "str" in str(err)


def test_repr():
    assert repr(IsDensity) == "IsDensity()"
    assert repr(NoDensity) == "NoDensity()"
