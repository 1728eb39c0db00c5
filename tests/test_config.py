"""Tests for the pydantic configuration models."""

import pytest
from pydantic import ValidationError

from scalefree.config import (
    SEED_MAX,
    SEED_MIN,
    GeneratorConfig,
    InstanceConfig,
    RandomBackend,
    ScaleFreeConfig,
)


class TestScaleFreeConfig:
    def test_defaults(self):
        cfg = ScaleFreeConfig(size=10)
        assert cfg.seed is None
        assert cfg.random_source is RandomBackend.JAVA

    def test_negative_size(self):
        with pytest.raises(ValidationError):
            ScaleFreeConfig(size=-1)

    def test_seed_bounds(self):
        ScaleFreeConfig(size=1, seed=SEED_MIN)
        ScaleFreeConfig(size=1, seed=SEED_MAX)
        with pytest.raises(ValidationError):
            ScaleFreeConfig(size=1, seed=SEED_MAX + 1)
        with pytest.raises(ValidationError):
            ScaleFreeConfig(size=1, seed=SEED_MIN - 1)

    def test_backend_from_string(self):
        assert ScaleFreeConfig(size=1, random_source="python").random_source is RandomBackend.PYTHON

    def test_frozen(self):
        cfg = ScaleFreeConfig(size=3)
        with pytest.raises(ValidationError):
            cfg.size = 4


class TestGeneratorConfig:
    def test_defaults(self):
        cfg = GeneratorConfig(sizes=[10, 20])
        assert cfg.type == "scale_free"
        assert cfg.count_per_size == 1
        assert cfg.directed is True
        assert cfg.params == {}

    def test_parameters_alias(self):
        cfg = GeneratorConfig(sizes=[5], parameters={"random_source": "python"})
        assert cfg.params == {"random_source": "python"}

    def test_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(sizes=[5], count_per_size=0)

    def test_sizes_required(self):
        with pytest.raises(ValidationError):
            GeneratorConfig()

    @pytest.mark.parametrize("key", ["seed", "size"])
    def test_reserved_params(self, key):
        with pytest.raises(ValidationError, match=f"params must not set {key}"):
            GeneratorConfig(sizes=[5], params={key: 3})

    def test_reserved_params_via_alias(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(sizes=[5], parameters={"seed": 3, "size": 4})


def test_instance_config_from_dict():
    cfg = InstanceConfig.model_validate({
        "generators": [{"type": "scale_free", "sizes": [8], "seed": 1}],
    })
    assert cfg.generators[0].seed == 1
    assert cfg.custom_instances == []
