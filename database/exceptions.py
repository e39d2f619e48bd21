class DatabaseError(Exception):
    """Base for all storage errors."""


class NotFoundError(DatabaseError):
    """No player, course or round with that id."""


class DuplicateError(DatabaseError):
    """Id or course name already taken, or a second device owner."""


class IntegrityError(DatabaseError):
    """Reference to a missing record, or a score outside the round."""
