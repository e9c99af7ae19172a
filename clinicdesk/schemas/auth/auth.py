# clinicdesk/schemas/auth/auth.py
from pydantic import BaseModel
from typing import Any

class LoginRequest(BaseModel):
    # Untyped so a non-string credential is just a failed match (401)
    email: Any = None
    password: Any = None

class LoginResponse(BaseModel):
    id: int
    email: str
    role: str
