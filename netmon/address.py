# netmon/address.py

SCHEMES = ("https://", "http://")
DEFAULT_PORT = "443"


def format_server_address(server: str) -> str:
    """
    Strip a leading http:// or https:// and make sure a port is present.

    No validation happens here; whatever is left over is handed to the
    resolver as-is, so the result may well be nonsense.
    """
    stripped = True
    while stripped:
        stripped = False
        for scheme in SCHEMES:
            if server.startswith(scheme):
                server = server[len(scheme):]
                stripped = True
    if ":" not in server:
        # Default to the HTTPS port
        server = f"{server}:{DEFAULT_PORT}"
    return server


def split_host_port(address: str) -> tuple[str, str]:
    """Split a normalized 'host:port' on its last colon. '[::1]:80' -> ('::1', '80')."""
    host, _, port = address.rpartition(":")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port
