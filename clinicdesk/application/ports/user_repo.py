from dataclasses import dataclass
from typing import Protocol, Optional


@dataclass
class UserDto:
    id: int
    email: str
    # Plaintext, compared with simple equality. Demo accounts only.
    password: str
    role: str


class UserRepository(Protocol):
    def find_by_credentials(self, email: str, password: str) -> Optional[UserDto]:
        ...
