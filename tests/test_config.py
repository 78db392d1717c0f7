import pytest
from omegaconf import OmegaConf
from omegaconf.errors import ValidationError

from densityinterface import comparison_config
from densityinterface.utils.jax_utils import tree_allclose


def test_defaults():
    cfg = comparison_config()
    assert cfg.rtol == 1e-5
    assert cfg.atol == 1e-8
    assert cfg.equal_nan is False


def test_merging():
    cfg = comparison_config(OmegaConf.create({"rtol": 1e-3, "atol": 0.1}), atol=0.0)
    assert cfg.rtol == 1e-3
    assert cfg.atol == 0.0


def test_validation():
    with pytest.raises(ValidationError):
        comparison_config({"rtol": "tight"})


def test_tree_allclose():
    assert tree_allclose({"a": 1.0, "b": (2.0, 3.0)}, {"a": 1.0, "b": (2.0, 3.0 + 1e-7)})
    assert not tree_allclose({"a": 1.0}, {"a": 1.1})
    assert tree_allclose({"a": 1.0}, {"a": 1.1}, rtol=0.2)
    assert tree_allclose(float("nan"), float("nan"), equal_nan=True)
    assert not tree_allclose(float("nan"), float("nan"))


def test_default_config_is_built_once():
    assert comparison_config() is comparison_config()
    cfg = comparison_config(rtol=1e-3)
    assert comparison_config(cfg) is cfg
    assert comparison_config().rtol == 1e-5
