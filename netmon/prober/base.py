# netmon/prober/base.py
from abc import ABC, abstractmethod

from netmon.schemas import ProbeResult

class Prober(ABC):
    @abstractmethod
    def probe_once(self, server: str) -> ProbeResult:
        """Resolve server, time exactly one TCP connect and return a ProbeResult dict."""
        raise NotImplementedError
