from __future__ import annotations
import logging

from .api import LibrarySystem
from .domain import Role

logger = logging.getLogger(__name__)


def seed_demo_data(sys: LibrarySystem) -> None:
    # users
    sys.register("Ava Admin", "admin@example.com", "admin-pass", role=Role.ADMIN)
    sys.register("Alice Reader", "alice@example.com", "alice-pass")
    sys.register("Bob Reader", "bob@example.com", "bob-pass")

    # books (added under an admin session, which is closed again afterwards)
    sys.login("admin@example.com", "admin-pass", Role.ADMIN)
    sys.add_book("Dune", "9780441172719", "Frank Herbert", "sci-fi", 9.99, "/shelves/a/1")
    sys.add_book(
        "Harry Potter and the Sorcerer's Stone",
        "9780590353427",
        "J.K. Rowling",
        "fantasy",
        8.5,
        "/shelves/b/4",
    )
    sys.add_book(
        "Clean Code", "9780132350884", "Robert C. Martin", "software", 32.0, "/shelves/c/2"
    )
    sys.logout()

    logger.info(
        "[seed] students=%s books=%s",
        [u.name for u in sys.store.list_users(Role.STUDENT)],
        [b.name for b in sys.store.list_books()],
    )
