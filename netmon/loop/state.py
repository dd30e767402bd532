# netmon/loop/state.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from netmon.schemas import ProbeResult

class Phase(Enum):
    IDLE = "idle"
    PROBING = "probing"
    REPORTING = "reporting"
    SLEEPING = "sleeping"

@dataclass
class LoopState:
    phase: Phase = Phase.IDLE
    probes_sent: int = 0
    successes: int = 0
    failures: int = 0
    last: Optional[ProbeResult] = None

    def record(self, result: ProbeResult):
        self.probes_sent += 1
        if result.get("status") == "ok":
            self.successes += 1
        else:
            self.failures += 1
        self.last = result
