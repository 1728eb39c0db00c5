"""Reproducible scale-free graph generation."""

from scalefree.config import GeneratorConfig, InstanceConfig, RandomBackend, ScaleFreeConfig
from scalefree.errors import CollaboratorFailure, InvalidConfiguration, ScaleFreeError
from scalefree.generators import (
    GENERATOR_REGISTRY,
    BaseGenerator,
    ScaleFreeGenerator,
    get_generator,
    list_generators,
)
from scalefree.random_source import (
    JavaRandom,
    PythonRandom,
    RandomSource,
    draw_seed,
    make_random_source,
)
from scalefree.sinks import GraphSink, IntegerVertexFactory, NetworkXSink, VertexFactory

__all__ = [
    "BaseGenerator",
    "CollaboratorFailure",
    "GENERATOR_REGISTRY",
    "GeneratorConfig",
    "GraphSink",
    "InstanceConfig",
    "IntegerVertexFactory",
    "InvalidConfiguration",
    "JavaRandom",
    "NetworkXSink",
    "PythonRandom",
    "RandomBackend",
    "RandomSource",
    "ScaleFreeConfig",
    "ScaleFreeError",
    "ScaleFreeGenerator",
    "VertexFactory",
    "draw_seed",
    "get_generator",
    "list_generators",
    "make_random_source",
]
