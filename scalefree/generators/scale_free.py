"""Scale-free graph generator driven by preferential attachment."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from scalefree.config import RandomBackend, ScaleFreeConfig
from scalefree.errors import CollaboratorFailure, InvalidConfiguration
from scalefree.generators.base import BaseGenerator
from scalefree.random_source import RandomSource, draw_seed, make_random_source
from scalefree.sinks import GraphSink, VertexFactory

logger = logging.getLogger(__name__)


class ScaleFreeGenerator(BaseGenerator):
    """
    Grows a connected scale-free graph one vertex at a time.

    Every new vertex is tested against each existing vertex ``j`` and
    attaches to it with probability ``degree[j] / degree_sum``, so
    high-degree vertices keep accumulating edges.  Each accepted edge gets
    a random direction.  If a full pass over the existing vertices accepts
    nothing, the whole pass is repeated, so every vertex after the first
    ends up with degree >= 1 and the undirected view is connected.

    The random source is re-seeded at the start of every :meth:`generate`
    call: the same instance always produces the same vertex and edge
    sequence.  Do not call :meth:`generate` concurrently on one instance.

    Parameters
    ----------
    size : int
        Number of vertices to generate (>= 0).
    seed : int | None
        Signed 64-bit seed.  When omitted a seed is drawn once here and
        reused for every call.
    random_source : str, default "java"
        PRNG backend, ``"java"`` (48-bit LCG) or ``"python"``
        (Mersenne Twister).
    """

    name = "scale_free"

    def __init__(
        self,
        size: int,
        seed: Optional[int] = None,
        random_source: RandomBackend | str = RandomBackend.JAVA,
    ) -> None:
        try:
            config = ScaleFreeConfig(size=size, seed=seed, random_source=random_source)
        except ValidationError as exc:
            raise InvalidConfiguration(
                f"invalid scale-free generator parameters: size={size!r}, "
                f"seed={seed!r}, random_source={random_source!r}"
            ) from exc

        self._size = config.size
        self._seed = config.seed if config.seed is not None else draw_seed()
        self._backend = config.random_source
        self._rng: RandomSource = make_random_source(self._backend)

    @property
    def size(self) -> int:
        return self._size

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random_source(self) -> RandomBackend:
        return self._backend

    @property
    def params(self) -> dict[str, Any]:
        return {"seed": self._seed, "random_source": self._backend.value}

    def generate(
        self,
        sink: GraphSink,
        vertex_factory: VertexFactory,
        result_map: Optional[dict[str, Any]] = None,
    ) -> None:
        # result_map is accepted for interface compatibility and left untouched
        rng = self._rng
        rng.set_seed(self._seed)

        vertices: list[Any] = []
        degrees: list[int] = []
        degree_sum = 0
        retried_passes = 0

        for i in range(self._size):
            new_vertex = self._call(i, "create_vertex", vertex_factory.create_vertex)
            self._call(i, "add_vertex", sink.add_vertex, new_vertex)
            new_degree = 0

            # The first attachment accepts unconditionally (degree_sum == 0);
            # afterwards every existing degree is positive, so a pass
            # eventually accepts something.
            while i != 0 and new_degree == 0:
                for j, vertex in enumerate(vertices):
                    if degree_sum == 0 or rng.next_int(degree_sum) < degrees[j]:
                        degrees[j] += 1
                        new_degree += 1
                        degree_sum += 2
                        if rng.next_bool():
                            self._call(i, "add_edge", sink.add_edge, new_vertex, vertex)
                        else:
                            self._call(i, "add_edge", sink.add_edge, vertex, new_vertex)
                if new_degree == 0:
                    retried_passes += 1

            vertices.append(new_vertex)
            degrees.append(new_degree)
            logger.debug("Step %d: new_degree=%d, degree_sum=%d", i, new_degree, degree_sum)

        logger.debug(
            "Generated scale-free graph (size=%d, seed=%d, edges=%d, retried_passes=%d)",
            self._size,
            self._seed,
            degree_sum // 2,
            retried_passes,
        )

    @staticmethod
    def _call(step: int, operation: str, func: Callable[..., Any], *args: Any) -> Any:
        """Invoke a sink/factory operation, wrapping any failure."""
        try:
            return func(*args)
        except Exception as exc:
            logger.error(
                "Scale-free generation aborted at step %d: %s failed: %s",
                step,
                operation,
                exc,
            )
            raise CollaboratorFailure(
                f"{operation} failed at step {step}: {exc}",
                step=step,
                operation=operation,
            ) from exc
