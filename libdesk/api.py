from __future__ import annotations
import logging
from typing import Callable, Optional, Union

from .config import Settings, settings as default_settings
from .domain import Outcome, Role, SessionState
from .errors import LibraryError
from .repositories import RecordStore
from .services import AccountService, CatalogService, CirculationService, Session

logger = logging.getLogger(__name__)


class LibrarySystem:
    """
    Facade that wires the record store, the session and the services.

    Every call returns an Outcome; LibraryError never escapes this class.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings

        self.store = RecordStore(first_id=self.settings.first_id)
        self.session = Session()

        self.accounts = AccountService(self.store, self.session)
        self.catalog = CatalogService(self.store, self.session)
        self.circulation = CirculationService(self.store, self.session)

    def _run(self, action: str, call: Callable[[], Outcome]) -> Outcome:
        try:
            return call()
        except LibraryError as exc:
            logger.warning("[%s] %s: %s", action, type(exc).__name__, exc)
            return Outcome.failure(exc)

    # ---- session
    def current_session(self) -> SessionState:
        return self.session.state

    def register(
        self, name: str, email: str, password: str, role: Union[Role, str] = Role.STUDENT
    ) -> Outcome:
        return self._run(
            "register",
            lambda: Outcome.success(
                "Registered Successfully.",
                self.accounts.register(name, email, password, role),
            ),
        )

    def login(self, email: str, password: str, role: Union[Role, str]) -> Outcome:
        return self._run(
            "login",
            lambda: Outcome.success(
                "Logged in successfully.", self.accounts.login(email, password, role)
            ),
        )

    def logout(self) -> None:
        self.accounts.logout()

    def deactivate_user(self, user_id: str, role: Union[Role, str]) -> Outcome:
        return self._run(
            "deactivate",
            lambda: Outcome.success(
                f"User {user_id} deactivated.", self.accounts.deactivate(user_id, role)
            ),
        )

    def profile(self) -> Outcome:
        return self._run("profile", lambda: Outcome.success("Profile.", self.accounts.profile()))

    # ---- catalog
    def add_book(
        self,
        name: str,
        isbn: str,
        author: str,
        category: str,
        price: float,
        path: str,
        available: bool = True,
    ) -> Outcome:
        def call() -> Outcome:
            b = self.catalog.add_book(name, isbn, author, category, price, path, available)
            return Outcome.success(f"Book added with id {b.book_id}.", b)

        return self._run("add_book", call)

    def search_book(self, book_id: str) -> Outcome:
        def call() -> Outcome:
            b = self.catalog.search_book(book_id)
            return Outcome.success(f"Found: {b.name}", b.name)

        return self._run("search_book", call)

    def search_books(self, text: str) -> Outcome:
        def call() -> Outcome:
            found = self.catalog.search(text)
            return Outcome.success(f"{len(found)} book(s) found.", found)

        return self._run("search_books", call)

    # ---- circulation
    def borrow(self, book_id: str) -> Outcome:
        def call() -> Outcome:
            b = self.circulation.borrow(book_id)
            return Outcome.success(
                f"Book with id {b.book_id} has been borrowed by {b.borrowed_by.name}.", b
            )

        return self._run("borrow", call)

    def return_book(self, book_id: str) -> Outcome:
        def call() -> Outcome:
            b = self.circulation.return_book(book_id)
            return Outcome.success(f"Book with id {b.book_id} has been returned.", b)

        return self._run("return", call)

    def my_books(self) -> Outcome:
        return self._run(
            "my_books",
            lambda: Outcome.success("Borrowed books.", self.circulation.borrowed_books()),
        )

    def list_loans(self) -> Outcome:
        return self._run(
            "list_loans", lambda: Outcome.success("Loans.", self.circulation.list_loans())
        )
