"""
User Entity - A stored user record.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class User:
    name: str
    email: str
    age: Optional[int] = None
    # Assigned by the repository on first save
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, name: str, email: str, age: Optional[int] = None) -> "User":
        return cls(name=name, email=email, age=age)
