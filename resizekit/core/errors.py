"""Exceptions raised by the resize engine and the reference shape store."""


class IllegalStateError(RuntimeError):
    """A precondition of a resize (or store mutation) does not hold."""


class ReadOnlyViolation(IllegalStateError):
    """A mutation was attempted while the document is read-only."""


class ShapeNotFoundError(IllegalStateError, KeyError):
    """A shape, its bounds, its page transform or its util could not be resolved."""

    def __str__(self) -> str:
        # KeyError quotes its message; keep the plain RuntimeError rendering
        return str(self.args[0]) if self.args else ""
