from __future__ import annotations
import itertools
import logging
from typing import Dict, List, Optional

from .domain import Administrator, Book, Loan, Role, Student, User
from .errors import InvalidArgumentError, NotFoundError, UnauthorizedError

logger = logging.getLogger(__name__)


class IdSequence:
    """Monotonic id counter for one collection.

    Ids are never reused, even after the record holding one is deactivated.
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._upcoming = next(self._counter)

    def peek(self) -> str:
        return str(self._upcoming)

    def next(self) -> str:
        value = self._upcoming
        self._upcoming = next(self._counter)
        return str(value)


class RecordStore:
    """In-memory administrators, students and books.

    Lookups scan in insertion order; there are no secondary indexes.
    """

    def __init__(self, first_id: int = 1) -> None:
        self._admins: List[Administrator] = []
        self._students: List[Student] = []
        self._books: List[Book] = []
        self._loans: List[Loan] = []

        self._user_ids: Dict[Role, IdSequence] = {
            Role.ADMIN: IdSequence(first_id),
            Role.STUDENT: IdSequence(first_id),
        }
        self._book_ids = IdSequence(first_id)
        self._loan_ids = IdSequence(first_id)

    def _users_for(self, role: Role) -> List[User]:
        if role is Role.ADMIN:
            return self._admins
        return self._students

    # users
    def add_user(self, user: User) -> None:
        if isinstance(user, Administrator):
            self._admins.append(user)
        elif isinstance(user, Student):
            self._students.append(user)
        else:
            raise InvalidArgumentError("Object of invalid type provided.")

    def search_user_by_id(self, user_id: str, role: Role) -> User:
        for u in self._users_for(role):
            if u.active and u.user_id == user_id:
                return u
        raise NotFoundError("User not found.")

    def search_user_by_email(self, email: str, role: Role) -> User:
        for u in self._users_for(role):
            if u.active and u.email == email:
                return u
        raise NotFoundError("User not found.")

    def deactivate_user(self, user_id: str, role: Role) -> User:
        user = self.search_user_by_id(user_id, role)
        user.deactivate()
        return user

    def list_users(self, role: Role) -> List[User]:
        # includes deactivated records
        return list(self._users_for(role))

    def next_user_id(self, role: Role = Role.STUDENT) -> str:
        user_id = self._user_ids[role].next()
        logger.debug("allocated %s id %s", role.name.lower(), user_id)
        return user_id

    # books
    def next_book_id(self) -> str:
        book_id = self._book_ids.next()
        logger.debug("allocated book id %s", book_id)
        return book_id

    def add_book(self, book: Book, acting_user: User) -> None:
        if not isinstance(acting_user, Administrator):
            raise UnauthorizedError("User is not an admin.")
        self._books.append(book)

    def search_book_by_id(self, book_id: str) -> Book:
        for b in self._books:
            if b.book_id == book_id:
                return b
        raise NotFoundError("Book with the provided id does not exist.")

    def list_books(self) -> List[Book]:
        return list(self._books)

    def search_books(self, text: str) -> List[Book]:
        t = text.lower().strip()

        def matches(b: Book) -> bool:
            return (
                t in b.name.lower()
                or t in b.author.lower()
                or t in b.isbn.lower()
                or t in b.category.lower()
            )

        return [b for b in self._books if matches(b)]

    # loans
    def next_loan_id(self) -> str:
        return self._loan_ids.next()

    def add_loan(self, loan: Loan) -> None:
        self._loans.append(loan)

    def open_loan_for(self, book_id: str) -> Optional[Loan]:
        for l in self._loans:
            if l.book_id == book_id and l.is_open:
                return l
        return None

    def list_loans(self, student: Optional[Student] = None) -> List[Loan]:
        if student is None:
            return list(self._loans)
        return [l for l in self._loans if l.student is student]
