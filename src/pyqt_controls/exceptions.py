"""Control framework exceptions."""


class SchemaError(ValueError):
    """Raised when a control schema is malformed (duplicate fields, unknown control type)."""


class InvalidValueError(ValueError):
    """Raised when a host is asked to save an edited value that does not validate."""
