import pytest

from libdesk import LibrarySystem, Role, Settings


@pytest.fixture
def system():
    # A fresh system per test; nothing is shared between instances
    return LibrarySystem(Settings(first_id=1))


@pytest.fixture
def populated(system):
    """Admin Ava, students Alice ("1") and Bob ("2"), and Dune as book "1"."""
    system.register("Ava", "ava@example.com", "root", Role.ADMIN)
    system.register("Alice", "alice@example.com", "a-pass", Role.STUDENT)
    system.register("Bob", "bob@example.com", "b-pass", Role.STUDENT)

    system.login("ava@example.com", "root", "admin")
    system.add_book("Dune", "9780441172719", "Frank Herbert", "sci-fi", 9.99, "/a/1")
    system.logout()
    return system


@pytest.fixture
def as_alice(populated):
    populated.login("alice@example.com", "a-pass", "student")
    return populated


@pytest.fixture
def as_admin(populated):
    populated.login("ava@example.com", "root", "admin")
    return populated
