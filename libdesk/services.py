from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union

from .domain import (
    Administrator,
    Book,
    Loan,
    Role,
    SessionState,
    Student,
    User,
)
from .errors import (
    AlreadyBorrowedError,
    InvalidArgumentError,
    InvalidCredentialsError,
    NotBorrowedByCallerError,
    UnauthorizedError,
)
from .repositories import RecordStore

logger = logging.getLogger(__name__)


class Session:
    """The single logged-in identity, or none."""

    def __init__(self) -> None:
        self.identity: Optional[User] = None

    @property
    def state(self) -> SessionState:
        if isinstance(self.identity, Administrator):
            return SessionState.LOGGED_IN_AS_ADMINISTRATOR
        if isinstance(self.identity, Student):
            return SessionState.LOGGED_IN_AS_STUDENT
        return SessionState.LOGGED_OUT

    def begin(self, user: User) -> None:
        self.identity = user

    def end(self) -> None:
        self.identity = None

    def require(self, role: Role) -> User:
        """Return the identity if it holds `role`, else raise UnauthorizedError."""
        if self.identity is None:
            raise UnauthorizedError("Not logged in.")
        if self.identity.role is not role:
            raise UnauthorizedError(f"Logged in as {self.identity.role.name.lower()}.")
        return self.identity


class AccountService:
    def __init__(self, store: RecordStore, session: Session) -> None:
        self.store = store
        self.session = session

    def register(
        self, name: str, email: str, password: str, role: Union[Role, str] = Role.STUDENT
    ) -> User:
        role = Role.parse(role)
        user_id = self.store.next_user_id(role)
        cls = Administrator if role is Role.ADMIN else Student
        u = cls(user_id=user_id, name=name, password=password, email=email)
        self.store.add_user(u)
        logger.info("registered %s id=%s email=%s", role.name.lower(), user_id, email)
        return u

    def login(self, email: str, password: str, role: Union[Role, str]) -> User:
        role = Role.parse(role)
        u = self.store.search_user_by_email(email, role)
        if u.password != password:
            raise InvalidCredentialsError("Invalid Password.")
        self.session.begin(u)
        logger.info("login %s id=%s", role.name.lower(), u.user_id)
        return u

    def logout(self) -> None:
        if self.session.identity is not None:
            logger.info("logout id=%s", self.session.identity.user_id)
        self.session.end()

    def deactivate(self, user_id: str, role: Union[Role, str]) -> User:
        actor = self.session.require(Role.ADMIN)
        role = Role.parse(role)
        u = self.store.search_user_by_id(user_id, role)
        # a deactivated student must not hold books
        if any(b.borrowed_by is u for b in self.store.list_books()):
            raise InvalidArgumentError("Student still holds borrowed books.")
        self.store.deactivate_user(user_id, role)
        logger.info(
            "deactivated %s id=%s by admin id=%s", role.name.lower(), user_id, actor.user_id
        )
        # a deactivated account cannot stay logged in
        if u is actor:
            self.session.end()
        return u

    def profile(self) -> Dict[str, str]:
        if self.session.identity is None:
            raise UnauthorizedError("Not logged in.")
        return self.session.identity.display_info()


class CatalogService:
    def __init__(self, store: RecordStore, session: Session) -> None:
        self.store = store
        self.session = session

    def add_book(
        self,
        name: str,
        isbn: str,
        author: str,
        category: str,
        price: float,
        path: str,
        available: bool = True,
    ) -> Book:
        admin = self.session.require(Role.ADMIN)
        # convert before allocating an id so a rejected book leaves no gap
        try:
            price = float(price)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("Price must be a number.") from exc
        b = Book(
            book_id=self.store.next_book_id(),
            name=name,
            isbn=isbn,
            author=author,
            category=category,
            price=price,
            storage_path=path,
            available=available,
        )
        self.store.add_book(b, admin)
        logger.info("book added id=%s name=%r by admin id=%s", b.book_id, b.name, admin.user_id)
        return b

    def search_book(self, book_id: str) -> Book:
        return self.store.search_book_by_id(book_id)

    def search(self, text: str) -> List[Book]:
        return self.store.search_books(text)

    def list_books(self) -> List[Book]:
        return self.store.list_books()


class CirculationService:
    def __init__(self, store: RecordStore, session: Session) -> None:
        self.store = store
        self.session = session

    def borrow(self, book_id: str, now: Optional[datetime] = None) -> Book:
        student = self.session.require(Role.STUDENT)
        b = self.store.search_book_by_id(book_id)
        if b.borrowed_by is not None:
            raise AlreadyBorrowedError("Book already borrowed.")
        b.borrowed_by = student
        self.store.add_loan(
            Loan(
                loan_id=self.store.next_loan_id(),
                book_id=b.book_id,
                student=student,
                checkout_at=now or datetime.now(timezone.utc),
            )
        )
        logger.info("book id=%s borrowed by student id=%s", book_id, student.user_id)
        return b

    def return_book(self, book_id: str, now: Optional[datetime] = None) -> Book:
        student = self.session.require(Role.STUDENT)
        b = self.store.search_book_by_id(book_id)
        if b.borrowed_by is not student:
            raise NotBorrowedByCallerError("Student didn't borrow this book.")
        b.borrowed_by = None
        loan = self.store.open_loan_for(b.book_id)
        if loan:
            loan.mark_returned(now)
        logger.info("book id=%s returned by student id=%s", book_id, student.user_id)
        return b

    def list_loans(self) -> List[Loan]:
        """All loans for an administrator; a student sees only their own."""
        if self.session.identity is None:
            raise UnauthorizedError("Not logged in.")
        if self.session.state is SessionState.LOGGED_IN_AS_ADMINISTRATOR:
            return self.store.list_loans()
        return self.store.list_loans(self.session.require(Role.STUDENT))

    def borrowed_books(self) -> List[Book]:
        student = self.session.require(Role.STUDENT)
        return [b for b in self.store.list_books() if b.borrowed_by is student]
