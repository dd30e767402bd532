from dataclasses import dataclass
from typing import Optional

PROGRAM_NAME = "netmon"
VERSION = "0.1.0"

# Cloudflare DNS; also the endpoint dialled when a server does not resolve
SERVER_DEFAULT = "1.1.1.1:443"


@dataclass(frozen=True)
class Settings:
    server: str = SERVER_DEFAULT
    interval_ms: int = 1000
    timeout_ms: Optional[int] = 500   # None -> connect blocks with no bound

    # substitute fallback_server when resolution fails (legacy behaviour)
    fallback_server: str = SERVER_DEFAULT
    use_fallback: bool = True

    @property
    def interval_s(self) -> float:
        return self.interval_ms / 1000.0
