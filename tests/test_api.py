from libdesk import (
    AlreadyBorrowedError,
    InvalidArgumentError,
    InvalidCredentialsError,
    NotBorrowedByCallerError,
    NotFoundError,
    Role,
    SessionState,
    UnauthorizedError,
)


def test_register_then_lookup(system):
    first = system.register("Alice", "alice@example.com", "a-pass", "student")
    second = system.register("Bob", "bob@example.com", "b-pass", "student")

    assert first and second
    assert first.message == "Registered Successfully."
    found = system.store.search_user_by_email("bob@example.com", Role.STUDENT)
    assert (found.name, found.email) == ("Bob", "bob@example.com")
    assert int(found.user_id) > int(first.value.user_id)
    assert system.current_session() is SessionState.LOGGED_OUT


def test_login_transitions(populated):
    assert populated.login("ava@example.com", "root", "Admin")
    assert populated.current_session() is SessionState.LOGGED_IN_AS_ADMINISTRATOR

    populated.logout()
    assert populated.login("alice@example.com", "a-pass", "student")
    assert populated.current_session() is SessionState.LOGGED_IN_AS_STUDENT


def test_login_mismatch_leaves_prior_state(populated):
    populated.login("alice@example.com", "a-pass", "student")

    bad_password = populated.login("bob@example.com", "nope", "student")
    bad_email = populated.login("nobody@example.com", "b-pass", "student")
    bad_role = populated.login("bob@example.com", "b-pass", "admin")

    assert not bad_password and isinstance(bad_password.error, InvalidCredentialsError)
    assert isinstance(bad_email.error, NotFoundError)
    assert isinstance(bad_role.error, NotFoundError)
    assert populated.session.identity.name == "Alice"


def test_logout_from_any_state(populated):
    populated.logout()
    assert populated.current_session() is SessionState.LOGGED_OUT
    populated.login("ava@example.com", "root", "admin")
    populated.logout()
    populated.logout()
    assert populated.current_session() is SessionState.LOGGED_OUT


def test_add_book_returns_book(as_admin):
    outcome = as_admin.add_book("Emma", "9780141439587", "Jane Austen", "classic", 5.0, "/b/2", True)
    assert outcome
    assert outcome.value.book_id == "2"
    assert outcome.message == "Book added with id 2."


def test_student_cannot_add_book(as_alice):
    outcome = as_alice.add_book("Emma", "9780141439587", "Jane Austen", "classic", 5.0, "/b/2")
    assert isinstance(outcome.error, UnauthorizedError)
    assert as_alice.store.list_books()[-1].name == "Dune"


def test_search_book_any_state(populated):
    found = populated.search_book("1")
    assert found.value == "Dune"
    missing = populated.search_book("99")
    assert not missing and isinstance(missing.error, NotFoundError)


def test_admin_cannot_borrow_or_return(as_admin):
    borrow = as_admin.borrow("1")
    ret = as_admin.return_book("1")
    assert isinstance(borrow.error, UnauthorizedError)
    assert isinstance(ret.error, UnauthorizedError)
    assert as_admin.store.search_book_by_id("1").borrowed_by is None


def test_logged_out_cannot_borrow(populated):
    assert isinstance(populated.borrow("1").error, UnauthorizedError)


def test_borrow_unknown_book(as_alice):
    assert isinstance(as_alice.borrow("42").error, NotFoundError)


def test_borrow_ignores_available_flag(as_admin):
    as_admin.add_book("Reference", "0", "Staff", "ref", 0, "/ref", False)
    as_admin.logout()
    as_admin.login("alice@example.com", "a-pass", "student")
    assert as_admin.borrow("2")


def test_borrow_return_example(populated):
    dune = populated.store.search_book_by_id("1")
    alice = populated.store.search_user_by_id("1", Role.STUDENT)

    populated.login("alice@example.com", "a-pass", "student")
    assert populated.borrow("1")
    assert dune.borrowed_by is alice
    populated.logout()

    populated.login("bob@example.com", "b-pass", "student")
    again = populated.borrow("1")
    assert isinstance(again.error, AlreadyBorrowedError)
    assert again.message == "Book already borrowed."
    wrong_return = populated.return_book("1")
    assert isinstance(wrong_return.error, NotBorrowedByCallerError)
    assert dune.borrowed_by is alice
    populated.logout()

    populated.login("alice@example.com", "a-pass", "student")
    assert populated.return_book("1").message == "Book with id 1 has been returned."
    assert dune.borrowed_by is None
    populated.logout()

    populated.login("bob@example.com", "b-pass", "student")
    outcome = populated.borrow("1")
    assert outcome.message == "Book with id 1 has been borrowed by Bob."
    assert populated.my_books().value == [dune]


def test_deactivated_user_cannot_log_in(as_admin):
    outcome = as_admin.deactivate_user("2", "student")
    assert outcome and outcome.value.name == "Bob"
    as_admin.logout()

    assert isinstance(as_admin.login("bob@example.com", "b-pass", "student").error, NotFoundError)
    assert len(as_admin.store.list_users(Role.STUDENT)) == 2

    as_admin.register("Carol", "carol@example.com", "c-pass")
    carol = as_admin.store.search_user_by_email("carol@example.com", Role.STUDENT)
    assert carol.user_id == "3"


def test_profile_outcome(as_alice):
    assert as_alice.profile().value["name"] == "Alice"
    as_alice.logout()
    assert isinstance(as_alice.profile().error, UnauthorizedError)


def test_search_books(populated):
    outcome = populated.search_books("dune")
    assert outcome.message == "1 book(s) found."
    assert [b.name for b in outcome.value] == ["Dune"]


def test_non_numeric_price_fails_without_using_an_id(as_admin):
    bad = as_admin.add_book("X", "0", "Y", "Z", "nine", "/x")
    assert not bad and isinstance(bad.error, InvalidArgumentError)
    assert bad.message == "Price must be a number."
    assert isinstance(as_admin.add_book("X", "0", "Y", "Z", None, "/x").error, InvalidArgumentError)

    good = as_admin.add_book("Emma", "9780141439587", "Jane Austen", "classic", "5", "/b/2")
    assert good.value.book_id == "2"
    assert good.value.price == 5.0


def test_non_string_role_fails(system):
    register = system.register("Ann", "ann@example.com", "p", None)
    login = system.login("ann@example.com", "p", 42)
    assert isinstance(register.error, InvalidArgumentError)
    assert isinstance(login.error, InvalidArgumentError)
    assert system.store.list_users(Role.STUDENT) == []


def test_padded_admin_role_selects_student(system):
    outcome = system.register("Ann", "ann@example.com", "p", " admin ")
    assert outcome.value.role is Role.STUDENT


def test_cannot_deactivate_student_holding_books(populated):
    populated.login("alice@example.com", "a-pass", "student")
    populated.borrow("1")
    populated.logout()

    populated.login("ava@example.com", "root", "admin")
    refused = populated.deactivate_user("1", "student")
    assert isinstance(refused.error, InvalidArgumentError)
    assert populated.store.search_user_by_id("1", Role.STUDENT).active
    populated.logout()

    populated.login("alice@example.com", "a-pass", "student")
    populated.return_book("1")
    populated.logout()
    populated.login("ava@example.com", "root", "admin")
    assert populated.deactivate_user("1", "student")


def test_loan_history(populated):
    populated.login("alice@example.com", "a-pass", "student")
    populated.borrow("1")
    populated.return_book("1")
    populated.logout()
    populated.login("bob@example.com", "b-pass", "student")
    populated.borrow("1")

    bobs = populated.list_loans().value
    assert [(l.student.name, l.is_open) for l in bobs] == [("Bob", True)]
    populated.logout()

    populated.login("ava@example.com", "root", "admin")
    loans = populated.list_loans().value
    assert [(l.loan_id, l.student.name, l.is_open) for l in loans] == [
        ("1", "Alice", False),
        ("2", "Bob", True),
    ]
    assert loans[0].returned_at >= loans[0].checkout_at
    populated.logout()

    assert isinstance(populated.list_loans().error, UnauthorizedError)
