from __future__ import annotations


class TypeMismatchError(TypeError):
    """Numeric operation met a non-numeric element."""

    operation: str
    value: object

    def __init__(self, operation: str, value: object) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"{operation} is not supported for non numeric iterators (got {value!r})")


class InvalidArgumentError(TypeError):
    """Value is neither iterable, an async iterator, nor a range descriptor."""

    value: object

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        detail = reason or "expected an iterable, an async iterable or a range descriptor"
        super().__init__(f"{detail} (got {type(value).__name__})")


class NoValueError(LookupError):
    """Terminal operation finished without producing a value."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} produced no value")


__all__ = ("InvalidArgumentError", "NoValueError", "TypeMismatchError")
