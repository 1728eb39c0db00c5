"""Pydantic models defining configuration contracts for scalefree."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Seeds are signed 64-bit integers
SEED_MIN = -(2**63)
SEED_MAX = 2**63 - 1

# Set by the batch builder itself, not through GeneratorConfig.params
RESERVED_PARAMS = frozenset({"size", "seed"})


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class RandomBackend(str, Enum):
    JAVA = "java"
    PYTHON = "python"


# ---------------------------------------------------------------------------
# Generator configuration models
# ---------------------------------------------------------------------------

class ScaleFreeConfig(BaseModel):
    """Construction parameters of a single :class:`ScaleFreeGenerator`."""
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=0, description="Number of vertices to generate")
    seed: Optional[int] = Field(
        default=None,
        ge=SEED_MIN,
        le=SEED_MAX,
        description="PRNG seed; drawn once at construction when omitted",
    )
    random_source: RandomBackend = Field(
        default=RandomBackend.JAVA,
        description="Which PRNG algorithm drives the attachment process",
    )


class GeneratorConfig(BaseModel):
    """Configuration for one batch of generated instances."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(default="scale_free", description="Generator type, e.g. 'scale_free'")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra generator params (e.g. {'random_source': 'python'})",
        validation_alias=AliasChoices("params", "parameters"),
    )
    sizes: list[int] = Field(..., description="Graph sizes to generate")
    count_per_size: int = Field(default=1, ge=1, description="Instances per size")
    seed: Optional[int] = Field(
        default=None,
        ge=SEED_MIN,
        le=SEED_MAX,
        description="Base seed; instance i of each size uses seed + i (64-bit wraparound)",
    )
    directed: bool = Field(default=True, description="Keep edge directions in output")

    @field_validator("params")
    @classmethod
    def _no_reserved_params(cls, params: dict[str, Any]) -> dict[str, Any]:
        reserved = sorted(params.keys() & RESERVED_PARAMS)
        if reserved:
            raise ValueError(
                f"params must not set {', '.join(reserved)}; "
                f"use the top-level 'sizes' and 'seed' fields instead"
            )
        return params


class InstanceConfig(BaseModel):
    """Specifies which instances to generate."""
    generators: list[GeneratorConfig]
    custom_instances: list[dict[str, Any]] = Field(
        default_factory=list,
        description="User-supplied instance dicts",
    )
