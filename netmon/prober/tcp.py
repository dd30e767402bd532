# netmon/prober/tcp.py
import logging
import socket
import time
from datetime import datetime, timezone
from typing import Optional

from netmon.address import format_server_address, split_host_port
from netmon.config import SERVER_DEFAULT
from netmon.prober.base import Prober
from netmon.schemas import ProbeResult

logger = logging.getLogger(__name__)

RESOLVE_ERRORS = (socket.gaierror, UnicodeError)


def format_endpoint(sockaddr) -> str:
    host, port = sockaddr[0], sockaddr[1]
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


class TcpProber(Prober):
    """
    Times a single TCP handshake per call. Only the first address the resolver
    returns is dialled; there is no retry against the remaining candidates.

    When the server does not resolve, the fallback server is dialled instead
    (and a warning is logged) unless use_fallback is off, in which case the
    probe fails with status "resolution_error".
    """

    def __init__(self,
                 timeout_ms: Optional[int] = 500,
                 fallback_server: str = SERVER_DEFAULT,
                 use_fallback: bool = True,
                 resolver=socket.getaddrinfo,
                 socket_factory=socket.socket):
        self.timeout_ms = timeout_ms
        self.fallback_server = fallback_server
        self.use_fallback = use_fallback
        self.resolver = resolver
        self.socket_factory = socket_factory

    @property
    def timeout_s(self) -> Optional[float]:
        return None if self.timeout_ms is None else self.timeout_ms / 1000.0

    def _lookup(self, address: str) -> list:
        host, port = split_host_port(address)
        # getaddrinfo wraps ports above 65535 and dials 0 for an empty one
        if not (port.isascii() and port.isdigit()) or not 1 <= int(port) <= 65535:
            raise socket.gaierror(socket.EAI_SERVICE, f"invalid port {port!r}")
        return list(self.resolver(host, port, 0, socket.SOCK_STREAM))

    def resolve(self, address: str):
        """Return (first addrinfo tuple, used_fallback) for a normalized address."""
        try:
            candidates = self._lookup(address)
        except RESOLVE_ERRORS as e:
            if not self.use_fallback:
                raise
            logger.debug("resolving %s failed: %s", address, e)
            candidates = []

        if candidates:
            return candidates[0], False

        if not self.use_fallback:
            raise socket.gaierror(socket.EAI_NONAME, f"no addresses found for {address}")

        logger.warning("Invalid server address: %s\nUsing default address %s",
                       address, self.fallback_server)
        candidates = self._lookup(format_server_address(self.fallback_server))
        if not candidates:
            raise socket.gaierror(socket.EAI_NONAME,
                                  f"no addresses found for {self.fallback_server}")
        return candidates[0], True

    def probe_once(self, server: str) -> ProbeResult:
        address = format_server_address(server)
        result: ProbeResult = {
            "target": server, "address": address, "endpoint": None,
            "status": "io_error", "rtt_s": None, "error": None, "fallback": False,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        try:
            (family, socktype, proto, _, sockaddr), used_fallback = self.resolve(address)
        except RESOLVE_ERRORS as e:
            result.update({"status": "resolution_error",
                           "error": f"failed to resolve {address}: {e}"})
            logger.debug("%s: %s", server, result["error"])
            return result

        result["endpoint"] = format_endpoint(sockaddr)
        result["fallback"] = used_fallback

        try:
            sock = self.socket_factory(family, socktype, proto)
        except OSError as e:
            result.update({"status": "io_error", "error": e.strerror or str(e)})
            return result

        try:
            sock.settimeout(self.timeout_s)
            start = time.perf_counter()
            sock.connect(sockaddr)
            elapsed = time.perf_counter() - start
        except socket.timeout as e:
            # must come before OSError; socket.timeout is an OSError subclass
            reason = str(e) if self.timeout_ms is None else f"connection timed out after {self.timeout_ms} ms"
            result.update({"status": "timeout", "error": reason})
        except ConnectionRefusedError as e:
            result.update({"status": "refused", "error": e.strerror or str(e)})
        except OSError as e:
            result.update({"status": "io_error", "error": e.strerror or str(e)})
        else:
            result.update({"status": "ok", "rtt_s": elapsed})
        finally:
            sock.close()

        logger.debug("%s via %s: status=%s rtt_s=%s", server, result["endpoint"],
                     result["status"], result["rtt_s"])
        return result
