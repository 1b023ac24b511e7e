from typing import List, Tuple


class TSPError(Exception):
    """Base class for every error raised by ga4tsp."""


class ConfigurationError(TSPError, ValueError):
    def __init__(self, name: str, value, minimum):
        self.name = name
        self.value = value
        self.minimum = minimum
        super().__init__(f"{name} is too small: {value}. Must be at least {minimum}.")


class MissingSeedError(TSPError, ValueError):
    pass


class SamplerStateError(TSPError, RuntimeError):
    """A draw could not be resolved; the sampler bookkeeping is broken."""


class WorkerFailedError(TSPError, RuntimeError):
    def __init__(self, failures: List[Tuple[int, BaseException]], total: int):
        self.failures = failures
        indices = ", ".join(str(i) for i, _ in failures)
        super().__init__(f"{len(failures)} of {total} workers did not finish (workers: {indices}).")


def check_minimum(name: str, value, minimum) -> None:
    if value < minimum:
        raise ConfigurationError(name, value, minimum)
