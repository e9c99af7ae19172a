from dataclasses import dataclass
from typing import Any, Optional

from ..ports.user_repo import UserRepository
from ..ports.audit_logger import AuditLogger
from ...exceptions import InvalidCredentials


@dataclass
class LoginResult:
    id: int
    email: str
    role: str


@dataclass
class AuthService:
    user_repo: UserRepository
    audit: Optional[AuditLogger] = None

    def login(self, email: Any, password: Any) -> LoginResult:
        # Plaintext equality against the seeded accounts; no session is issued
        user = None
        if email is not None and password is not None:
            user = self.user_repo.find_by_credentials(email, password)
        if self.audit:
            self.audit.log("login", subject=email if isinstance(email, str) else None, success=user is not None)
        if not user:
            raise InvalidCredentials()
        return LoginResult(id=user.id, email=email, role=user.role)
