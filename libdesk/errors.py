class LibraryError(Exception):
    """Base exception for catalog and session failures."""


class NotFoundError(LibraryError):
    """No active user or no book matches the lookup."""


class UnauthorizedError(LibraryError):
    """The current session's role may not perform the action."""


class InvalidArgumentError(LibraryError):
    """A value of the wrong variant was passed to a role-specific insert."""


class InvalidCredentialsError(LibraryError):
    """Password does not match the stored one."""


class AlreadyBorrowedError(LibraryError):
    """Book is already held by a student."""


class NotBorrowedByCallerError(LibraryError):
    """Book is not held by the student returning it."""
