from __future__ import annotations

from libdesk import LibrarySystem, configure_logging, seed_demo_data
from libdesk.domain import Role


def demo_flow() -> None:
    configure_logging()
    sys = LibrarySystem()
    seed_demo_data(sys)

    # Search
    print("\n[demo] search 'clean':", [b.name for b in sys.search_books("clean").value])
    print("[demo] lookup id 1:", sys.search_book("1").message)

    # Alice borrows Dune
    sys.login("alice@example.com", "alice-pass", "student")
    print("\n[demo] session:", sys.current_session().name)
    print("[demo] Alice borrows 1:", sys.borrow("1").message)
    sys.logout()

    # Bob is turned away while Alice holds it
    sys.login("bob@example.com", "bob-pass", "student")
    print("[demo] Bob borrows 1:", sys.borrow("1").message)
    print("[demo] Bob returns 1:", sys.return_book("1").message)
    print("[demo] Bob adds a book:", sys.add_book("X", "0", "Y", "Z", 1.0, "/").message)
    sys.logout()

    # Alice returns, then Bob gets it
    sys.login("alice@example.com", "alice-pass", "student")
    print("\n[demo] Alice returns 1:", sys.return_book("1").message)
    sys.logout()
    sys.login("bob@example.com", "bob-pass", "student")
    print("[demo] Bob borrows 1:", sys.borrow("1").message)
    print("[demo] Bob holds:", [b.name for b in sys.my_books().value])
    print("[demo] Bob loans:", [(l.book_id, l.is_open) for l in sys.list_loans().value])
    sys.logout()

    # Wrong password leaves the session logged out
    attempt = sys.login("alice@example.com", "nope", "student")
    print("\n[demo] bad login:", attempt.message, "->", sys.current_session().name)

    # Admin deactivates Alice; she can no longer log in
    sys.login("admin@example.com", "admin-pass", Role.ADMIN)
    print("[demo] deactivate Alice:", sys.deactivate_user("1", Role.STUDENT).message)
    sys.logout()
    print("[demo] Alice logs in:", sys.login("alice@example.com", "alice-pass", "student").message)


if __name__ == "__main__":
    demo_flow()
