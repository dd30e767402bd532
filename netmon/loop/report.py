# netmon/loop/report.py
from netmon.schemas import ProbeResult

def format_duration(seconds: float) -> str:
    """Render a duration with the largest unit that keeps it >= 1, e.g. '12.345ms'."""
    if seconds >= 1.0:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f}µs"
    return f"{round(seconds * 1e9)}ns"

def success_line(server: str, result: ProbeResult) -> str:
    return f"RTT to {server}: {format_duration(result['rtt_s'])}"

def failure_line(server: str, result: ProbeResult) -> str:
    reason = result.get("error") or result.get("status") or "unknown error"
    return f"Failed to ping {server}: {reason}"
