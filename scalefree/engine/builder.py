"""
Batch instance builder.

Expands an :class:`~scalefree.config.InstanceConfig` into concrete graph
instance dicts, one per (generator × size × repetition).
"""

from __future__ import annotations

import logging

from scalefree.config import SEED_MIN, GeneratorConfig, InstanceConfig
from scalefree.generators import get_generator

logger = logging.getLogger(__name__)


class InstanceBuilder:
    """
    Generates every instance requested by an instance config.

    Usage
    -----
    >>> builder = InstanceBuilder(config)
    >>> instances = builder.generate_instances()
    """

    def __init__(self, config: InstanceConfig) -> None:
        self.config = config
        self._instances: list[dict] = []

    @property
    def instances(self) -> list[dict]:
        return self._instances

    def generate_instances(self) -> list[dict]:
        """
        Build all graph instances according to the config.

        Returns a list of dicts, each augmented with an ``instance_name``
        key for later identification.
        """
        instances: list[dict] = []

        for gen_cfg in self.config.generators:
            GenClass = get_generator(gen_cfg.type)
            for size in gen_cfg.sizes:
                for i in range(gen_cfg.count_per_size):
                    gen = GenClass(size=size, seed=self._seed_for(gen_cfg, i), **gen_cfg.params)
                    inst = gen.generate_instance(directed=gen_cfg.directed)
                    inst["instance_name"] = f"{gen_cfg.type}_n{size}_{i}"
                    instances.append(inst)

        # Append any custom instances
        for idx, inst in enumerate(self.config.custom_instances):
            instances.append({"instance_name": f"custom_{idx}", **inst})

        self._instances = instances
        logger.info("Generated %d instances", len(instances))
        return instances

    @staticmethod
    def _seed_for(gen_cfg: GeneratorConfig, index: int):
        """Per-repetition seed; None lets the generator draw its own."""
        if gen_cfg.seed is None:
            return None
        # Wrap around like a signed 64-bit counter
        return (gen_cfg.seed + index - SEED_MIN) % 2**64 + SEED_MIN
