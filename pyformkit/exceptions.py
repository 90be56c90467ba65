"""Library exceptions."""

from typing import Optional


class FormKitException(Exception):
    """Generic form rendering exception."""


class UnknownControlKind(FormKitException, LookupError):
    """A fieldset child names a control kind that is not registered."""

    def __init__(self, kind: str, position: Optional[int] = None) -> None:
        self.kind = kind
        self.position = position
        if position is None:
            message = f"Unknown control kind {kind!r}"
        else:
            message = (
                f"Unknown control kind {kind!r} at position {position} "
                "in fieldset controls"
            )
        super().__init__(message)


class InvalidControlInvocation(FormKitException, ValueError):
    """A fieldset child is not a descriptor or a [kind, name, attrs?, opts?] list."""

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid control invocation at position {position}: {reason}")


class FormDocumentError(FormKitException):
    """A form document could not be read or validated."""
