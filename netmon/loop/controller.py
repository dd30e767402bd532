# netmon/loop/controller.py

import logging
import sys
import threading
from typing import Optional

from netmon.loop.report import failure_line, success_line
from netmon.loop.state import LoopState, Phase

logger = logging.getLogger(__name__)


class RttController:
    """
    Probe -> report -> sleep, forever unless stop is set or max_probes is hit.

    The interval is a fixed delay after each report, not a schedule: a probe
    that outlasts the interval is reported and then followed by the full delay.
    """

    def __init__(self, prober, settings, out=None, err=None):
        self.prober = prober
        self.s = settings
        self.out = out
        self.err = err

    def report(self, server: str, result) -> None:
        if result.get("status") == "ok":
            print(success_line(server, result), file=self.out or sys.stdout, flush=True)
        else:
            print(failure_line(server, result), file=self.err or sys.stderr, flush=True)

    def run(self, server: Optional[str] = None,
            stop: Optional[threading.Event] = None,
            max_probes: Optional[int] = None) -> LoopState:
        server = server or self.s.server
        stop = stop or threading.Event()
        state = LoopState()
        logger.debug("probing %s every %d ms (timeout=%s)",
                     server, self.s.interval_ms, self.s.timeout_ms)

        while not stop.is_set():
            if max_probes is not None and state.probes_sent >= max_probes:
                break

            state.phase = Phase.PROBING
            result = self.prober.probe_once(server)
            state.record(result)

            state.phase = Phase.REPORTING
            self.report(server, result)

            if max_probes is not None and state.probes_sent >= max_probes:
                # no trailing sleep after the last probe
                break

            state.phase = Phase.SLEEPING
            # Event.wait doubles as an interruptible sleep
            if stop.wait(self.s.interval_s):
                break

        state.phase = Phase.IDLE
        return state
