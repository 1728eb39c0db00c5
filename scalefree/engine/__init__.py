"""Batch instance construction."""

from scalefree.engine.builder import InstanceBuilder

__all__ = ["InstanceBuilder"]
