"""Addresses the launcher prints so the planner can be opened from other devices."""
import socket
from typing import List


def get_local_ip() -> str:
    '''LAN address of this machine, or 127.0.0.1 when there is none.'''
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        # UDP connect sends nothing; it only makes the OS pick an interface
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def server_urls(host: str, port: int) -> List[str]:
    """URLs the server answers on: localhost first, then the LAN address when bound to all interfaces."""
    urls = [f"http://localhost:{port}"]
    if host in ("0.0.0.0", "::"):
        local_ip = get_local_ip()
        if local_ip not in ("127.0.0.1", "localhost"):
            urls.append(f"http://{local_ip}:{port}")
    return urls
