"""Base exceptions for calicheck domain."""


class CalicheckError(Exception):
    """Root exception for all calicheck errors.

    All domain exceptions inherit from this.
    Allows catching all calicheck-specific errors.
    """
