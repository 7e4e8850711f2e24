import dataclasses

import numpy as np
import pytest

from powersvd import AlgorithmConfig, InvalidParameterError, compute_dominant_triplet


def test_config_is_frozen():
    config = AlgorithmConfig(epsilon=0.1, alpha=0.1, beta=1.0, seed=7)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.epsilon = 0.2


def test_config_construction_does_not_validate():
    config = AlgorithmConfig(epsilon=-0.1, alpha=0.1, beta=1.0)
    assert config.epsilon == -0.1
    assert config.seed is None


def test_config_from_mapping():
    config = AlgorithmConfig.from_mapping({"epsilon": "0.05", "alpha": 0.01, "beta": 1, "seed": 3})
    assert config == AlgorithmConfig(epsilon=0.05, alpha=0.01, beta=1.0, seed=3)


def test_config_from_mapping_rejects_unknown_keys():
    with pytest.raises(InvalidParameterError) as excinfo:
        AlgorithmConfig.from_mapping({"epsilon": 0.1, "alpha": 0.1, "beta": 1.0, "gamma": 2})
    assert excinfo.value.parameter == "gamma"


def test_config_from_mapping_rejects_missing_keys():
    with pytest.raises(InvalidParameterError) as excinfo:
        AlgorithmConfig.from_mapping({"epsilon": 0.1, "beta": 1.0})
    assert excinfo.value.parameter == "alpha"


@pytest.mark.parametrize("key, value", [("epsilon", "abc"), ("alpha", None), ("beta", float("nan"))])
def test_config_from_mapping_rejects_non_numeric_values(key, value):
    mapping = {"epsilon": 0.1, "alpha": 0.1, "beta": 1.0}
    mapping[key] = value
    with pytest.raises(InvalidParameterError) as excinfo:
        AlgorithmConfig.from_mapping(mapping)
    assert excinfo.value.parameter == key


@pytest.mark.parametrize("seed", ["3", 3.0, True])
def test_config_from_mapping_rejects_non_integer_seed(seed):
    with pytest.raises(InvalidParameterError) as excinfo:
        AlgorithmConfig.from_mapping({"epsilon": 0.1, "alpha": 0.1, "beta": 1.0, "seed": seed})
    assert excinfo.value.parameter == "seed"


def test_config_from_mapping_accepts_numpy_integer_seed():
    config = AlgorithmConfig.from_mapping({"epsilon": 0.1, "alpha": 0.1, "beta": 1.0, "seed": np.int64(5)})
    assert config.seed == 5


def test_generator_seed_is_rejected_when_used():
    config = AlgorithmConfig(epsilon=0.1, alpha=0.1, beta=1.0, seed=np.random.default_rng(0))
    with pytest.raises(InvalidParameterError) as excinfo:
        config.validate(4)
    assert excinfo.value.parameter == "seed"
    with pytest.raises(InvalidParameterError) as excinfo:
        compute_dominant_triplet(np.eye(2), config)
    assert excinfo.value.parameter == "seed"
