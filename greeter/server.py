from __future__ import annotations

import logging
import socket
from dataclasses import dataclass
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .errors import ListenerError
from .main import app as greeter_app
from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class StartResult:
    ok: bool
    error: Optional[ListenerError] = None


def _failure(host: str, port: int, exc: BaseException) -> StartResult:
    error = ListenerError(host, port, str(exc) or exc.__class__.__name__)
    error.__cause__ = exc
    return StartResult(ok=False, error=error)


class GreeterServer:
    """Serves the greeter app on a socket this object binds and owns.

    ``start()`` blocks until the server stops and reports the outcome as a
    ``StartResult``; it never exits the process. ``stop()`` may be called from
    another thread to end a running ``start()``.
    """

    def __init__(self, settings: Optional[Settings] = None, app: Optional[FastAPI] = None) -> None:
        self.settings = settings or Settings()
        self.app = app if app is not None else greeter_app
        self.address: tuple[str, int] | None = None
        self._server: uvicorn.Server | None = None

    @property
    def started(self) -> bool:
        return self._server is not None and self._server.started

    def _bind(self, host: str, port: int) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((host, port))
        except OSError:
            sock.close()
            raise
        sock.set_inheritable(True)
        return sock

    def start(self) -> StartResult:
        host, port = self.settings.host, self.settings.port
        # Built before the bind so a stop() from another thread is never lost.
        config = uvicorn.Config(self.app, log_level=self.settings.log_level)
        self._server = uvicorn.Server(config)
        try:
            sock = self._bind(host, port)
        except OSError as exc:
            return _failure(host, port, exc)

        self.address = sock.getsockname()[:2]
        logger.info("Server starting on %s:%d", host, self.address[1])

        try:
            self._server.run(sockets=[sock])
        except OSError as exc:
            return _failure(host, self.address[1], exc)
        finally:
            sock.close()

        if not self._server.started:
            return _failure(host, self.address[1], RuntimeError("server failed to start"))
        return StartResult(ok=True)

    def stop(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
