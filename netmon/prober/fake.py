# netmon/prober/fake.py
import time
from collections import deque
from datetime import datetime, timezone

from netmon.address import format_server_address
from netmon.prober.base import Prober
from netmon.schemas import ProbeResult

class FakeProber(Prober):
    """
    script: dict[server] -> list of ProbeResult-like dicts to return each call
    If no scripted result is left, returns a timeout result.
    delay_s simulates how long each probe takes.
    """
    def __init__(self, script=None, delay_s: float = 0.0):
        self.script = {}
        if script:
            for k, v in script.items():
                self.script[k] = deque(v)
        self.delay_s = delay_s
        self.calls = []

    def probe_once(self, server: str) -> ProbeResult:
        self.calls.append(server)
        if self.delay_s:
            time.sleep(self.delay_s)
        dq = self.script.get(server)
        if dq and len(dq) > 0:
            return dq.popleft()
        # default: timeout
        return {
            "target": server,
            "address": format_server_address(server),
            "endpoint": None,
            "status": "timeout",
            "rtt_s": None,
            "error": "connection timed out",
            "fallback": False,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
