import math
import random
from typing import Dict, Generic, Hashable, Optional, TypeVar

from .errors import SamplerStateError


E = TypeVar("E", bound=Hashable)


class WeightedSampler(Generic[E]):
    """
    Roulette-wheel sampler. Each element owns a span of ``[0, total_weight)``
    proportional to its weight; spans are laid out in insertion order.
    Weights are expected to be non-negative.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self._weights: Dict[E, float] = {}
        self._total = 0.0

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, element) -> bool:
        return element in self._weights

    @property
    def total_weight(self) -> float:
        return self._total

    def weight_of(self, element: E) -> float:
        return self._weights[element]

    def _span_end(self) -> float:
        # Plain left-to-right sum, the same arithmetic sample() walks with.
        end = 0.0
        for weight in self._weights.values():
            end += weight
        return end

    def add(self, element: E, weight: float) -> None:
        weight = float(weight)
        if not math.isfinite(weight):
            raise ValueError(f"Weight of {element!r} is not finite: {weight}.")
        if element in self._weights:
            self._weights[element] += weight
            self._total = self._span_end()
        else:
            self._weights[element] = weight
            self._total += weight

    def remove(self, element: E) -> bool:
        if element not in self._weights:
            return False
        del self._weights[element]
        self._total = self._span_end()
        return True

    def sample(self) -> E:
        value = self.rng.random() * self._total
        end = 0.0
        last = None
        for element, weight in self._weights.items():
            end += weight
            if value < end:
                return element
            if weight > 0.0:
                last = element
        # A draw rounded up onto the total belongs to the last non-empty span.
        if last is not None and value <= self._total:
            return last
        raise SamplerStateError(
            f"Draw {value} not covered by {len(self._weights)} entries of total weight {self._total}."
        )

    def clear(self) -> None:
        self._weights.clear()
        self._total = 0.0
