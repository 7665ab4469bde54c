"""Exceptions raised by the hardened (strict) counting paths."""


class InvalidInputError(ValueError):
    """Raised when an input array breaks a counter's precondition."""
