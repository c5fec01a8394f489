from abc import ABC, abstractmethod
from ..core.types import ClockDomain, ClockSample, Resolution

class ClockSource(ABC):
    """
    Abstract Base Class for clock collaborators.
    Must provide one raw sample per call, without retrying.
    """

    @abstractmethod
    def sample(self, domain: ClockDomain, resolution: Resolution) -> ClockSample:
        """
        Reads `domain` once at `resolution`.
        Raises ClockReadError if no sample can be produced.
        """
        pass
