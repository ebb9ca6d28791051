# scholarurl/errors.py
"""Exceptions raised by scholarurl."""


class ScholarURLError(Exception):
    """Base class for scholarurl errors."""


class ValidationError(ScholarURLError):
    """A query model failed validation and cannot be compiled."""

    def __init__(self, errors: tuple[str, ...] | list[str]) -> None:
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors))


class UnsupportedTargetError(ScholarURLError, ValueError):
    """Compile attempted against a target outside IEEE/Scopus."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(f"Unsupported target: {target!r}")


class InvalidFieldError(ScholarURLError, ValueError):
    """Field is not one of the target's allowed metadata fields."""

    def __init__(self, field: str, target: object) -> None:
        self.field = field
        self.target = target
        super().__init__(f"Field {field!r} is not valid for target {target!r}")
