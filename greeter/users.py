import sys
from typing import Iterable, Optional, TextIO

from .models import UserRecord

USERS: tuple[UserRecord, ...] = (
    UserRecord(id=1, name="Alice", age=30),
    UserRecord(id=2, name="Bob", age=25),
)


def format_user(user: UserRecord) -> str:
    return f"User: {user.name}, Age: {user.age}"


def print_users(users: Iterable[UserRecord] = USERS, stream: Optional[TextIO] = None) -> None:
    """Write one line per record, in order, to ``stream`` (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    for user in users:
        out.write(format_user(user) + "\n")
    out.flush()
