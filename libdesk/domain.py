from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum, auto
from typing import Any, ClassVar, Dict, Optional, Union

from .errors import InvalidArgumentError, LibraryError


class Role(Enum):
    ADMIN = auto()
    STUDENT = auto()

    @classmethod
    def parse(cls, value: Union["Role", str]) -> "Role":
        """Map a caller-supplied role to a Role.

        "admin" in any case selects ADMIN; every other string selects STUDENT.
        Surrounding whitespace is not ignored.
        """
        if isinstance(value, Role):
            return value
        if not isinstance(value, str):
            raise InvalidArgumentError("Role must be a string.")
        if value.lower() == "admin":
            return cls.ADMIN
        return cls.STUDENT


@dataclass(eq=False)
class User:
    user_id: str
    name: str
    password: str
    email: str
    active: bool = True

    role: ClassVar[Role]

    def deactivate(self) -> None:
        self.active = False

    def display_info(self) -> Dict[str, str]:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.name.lower(),
        }


@dataclass(eq=False)
class Administrator(User):
    role: ClassVar[Role] = Role.ADMIN


@dataclass(eq=False)
class Student(User):
    role: ClassVar[Role] = Role.STUDENT


@dataclass
class Book:
    book_id: str
    name: str
    isbn: str
    author: str
    category: str
    price: float
    storage_path: str
    available: bool = True
    borrowed_by: Optional[Student] = None

    @property
    def is_borrowed(self) -> bool:
        return self.borrowed_by is not None


@dataclass
class Loan:
    loan_id: str
    book_id: str
    student: Student
    checkout_at: datetime
    returned_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.returned_at is None

    def mark_returned(self, when: Optional[datetime] = None) -> None:
        self.returned_at = when or datetime.now(timezone.utc)


class SessionState(Enum):
    LOGGED_OUT = auto()
    LOGGED_IN_AS_ADMINISTRATOR = auto()
    LOGGED_IN_AS_STUDENT = auto()


@dataclass(frozen=True)
class Outcome:
    """Result of a facade call: a message, plus a value or the error raised."""

    ok: bool
    message: str
    value: Any = None
    error: Optional[LibraryError] = None

    @classmethod
    def success(cls, message: str, value: Any = None) -> "Outcome":
        return cls(ok=True, message=message, value=value)

    @classmethod
    def failure(cls, error: LibraryError) -> "Outcome":
        return cls(ok=False, message=str(error), error=error)

    def __bool__(self) -> bool:
        return self.ok
