from dataclasses import dataclass
from enum import Enum

class UserRole(Enum):
    ADMIN = "Admin"
    USER = "User"

@dataclass(frozen=True)
class User:
    """Application user, recorded as the creator of a quote"""
    id: str
    name: str
    email: str
    role: UserRole = UserRole.USER

    @classmethod
    def from_dict(cls, data: dict) -> 'User':
        return cls(
            id=data['id'],
            name=data['name'],
            email=data.get('email', ''),
            role=UserRole(data.get('role', UserRole.USER.value))
        )
