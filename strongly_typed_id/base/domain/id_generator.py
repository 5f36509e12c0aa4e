# (c) Nelen & Schuurmans
from abc import ABC
from abc import abstractmethod

__all__ = ["IdGenerator"]


class IdGenerator(ABC):
    """Produces new identifier strings.

    Implementations are immutable after construction, so one instance may be
    shared between threads.
    """

    @abstractmethod
    def generate(self) -> str:
        pass
