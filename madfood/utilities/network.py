"""Startup helpers for printing where the planner can be reached."""
import socket
from typing import Optional, Tuple

LOOPBACK_HOSTS = ("127.0.0.1", "localhost")


def get_local_ip(route_host: str = "8.8.8.8") -> str:
    """Non-loopback LAN address if the OS can route to ``route_host``, otherwise '127.0.0.1'.

    Connecting a UDP socket sends nothing; it only makes the OS pick a source address.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect((route_host, 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(port: int, local_ip: str) -> Tuple[str, Optional[str]]:
    """(localhost URL, LAN URL or None when only loopback is available)."""
    local_url = f"http://localhost:{port}"
    if local_ip in LOOPBACK_HOSTS:
        return local_url, None
    return local_url, f"http://{local_ip}:{port}"
