class DatabaseError(Exception):
    """Raised by the DAL when a Supabase call fails."""


class RowLevelSecurityError(DatabaseError):
    """A write was rejected by a row-level security policy."""


class UniqueViolationError(DatabaseError):
    """A write collided with an existing row."""
