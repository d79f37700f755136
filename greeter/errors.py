class GreeterError(Exception):
    """Base class for errors raised by the greeter service."""


class ListenerError(GreeterError):
    """The listener could not bind, or the server stopped with an error."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"cannot serve on {host}:{port}: {reason}")
