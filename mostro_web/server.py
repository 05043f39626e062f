"""
Server entry point - binds the loopback listener and runs uvicorn on it
"""
import signal
import socket
import sys
from typing import Optional

import uvicorn

from mostro_web.app import create_app
from mostro_web.core.utils import get_logger
from mostro_web.models import ServerSettings

logger = get_logger("server")


class ListenerBindError(RuntimeError):
    """The listening socket could not be bound"""


def bind_listener(host: str, port: int) -> socket.socket:
    """Bind a TCP socket, raising ListenerBindError on failure"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise ListenerBindError(f"could not bind {host}:{port}: {e.strerror or e}") from e
    sock.set_inheritable(True)
    return sock


def serve(settings: Optional[ServerSettings] = None) -> None:
    """Bind, print the banner, then serve until signalled"""
    settings = settings or ServerSettings()
    app = create_app(settings)

    sock = bind_listener(settings.host, settings.port)
    print(settings.banner, flush=True)
    logger.info(f"Serving {settings.asset_dir}", extra={
        "asset_dir": str(settings.asset_dir),
        "url": settings.url
    })

    config = uvicorn.Config(app, log_level="warning", access_log=False)
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    """Console entry point. Takes no arguments"""
    # uvicorn re-raises the signal it shut down on; make SIGTERM end up
    # as KeyboardInterrupt like SIGINT does
    signal.signal(signal.SIGTERM, signal.default_int_handler)
    try:
        serve()
    except ListenerBindError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
