from dataclasses import dataclass


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str
    age: int
