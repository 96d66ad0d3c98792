"""
LibDesk catalog package.

Exports key modules for convenient imports.
"""

from .domain import (
    Role,
    User,
    Administrator,
    Student,
    Book,
    Loan,
    SessionState,
    Outcome,
)

from .errors import (
    LibraryError,
    NotFoundError,
    UnauthorizedError,
    InvalidArgumentError,
    InvalidCredentialsError,
    AlreadyBorrowedError,
    NotBorrowedByCallerError,
)

from .repositories import IdSequence, RecordStore

from .services import (
    Session,
    AccountService,
    CatalogService,
    CirculationService,
)

from .config import Settings, settings, configure_logging
from .api import LibrarySystem
from .seed import seed_demo_data

__all__ = [
    # domain
    "Role",
    "User",
    "Administrator",
    "Student",
    "Book",
    "Loan",
    "SessionState",
    "Outcome",
    # errors
    "LibraryError",
    "NotFoundError",
    "UnauthorizedError",
    "InvalidArgumentError",
    "InvalidCredentialsError",
    "AlreadyBorrowedError",
    "NotBorrowedByCallerError",
    # store
    "IdSequence",
    "RecordStore",
    # services
    "Session",
    "AccountService",
    "CatalogService",
    "CirculationService",
    # config
    "Settings",
    "settings",
    "configure_logging",
    # api
    "LibrarySystem",
    # seed
    "seed_demo_data",
]
