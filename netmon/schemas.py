from typing import Literal, TypedDict, Optional

ProbeStatus = Literal["ok", "timeout", "refused", "resolution_error", "io_error"]

class ProbeResult(TypedDict, total=False):
    target: str                 # server string as the user gave it
    address: str                # normalized host:port
    endpoint: Optional[str]     # ip:port actually dialled
    status: ProbeStatus
    rtt_s: Optional[float]
    error: Optional[str]
    fallback: bool
    timestamp: str
