"""Model validation errors and helpers for collecting validation failures."""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, TypeVar, runtime_checkable


class InvalidModelError(ValueError):
    """A model failed validation for one or more reasons."""

    def __init__(self, model_name: str, reasons: Optional[Iterable[str]] = None) -> None:
        self.model_name = model_name
        self.reasons: list[str] = list(reasons) if reasons is not None else []
        super().__init__(model_name, self.reasons)

    def __str__(self) -> str:
        if not self.reasons:
            return "unexpected error"
        return f"{self.model_name}: {'; '.join(self.reasons)}"


class InvalidModelErrorBuilder:
    """Collects validation failures for a model, one reason at a time."""

    def __init__(self, model_name: str) -> None:
        self._model_name = "invalid " + model_name
        self._reasons: list[str] = []

    def add_error(self, reason: str) -> None:
        """Record one reason why the model is invalid."""
        self._reasons.append(reason)

    def error(self) -> Optional[InvalidModelError]:
        """Return the collected error, or None if nothing was recorded."""
        if not self._reasons:
            return None
        return InvalidModelError(self._model_name, self._reasons)

    def raise_if_invalid(self) -> None:
        """Raise the collected error if any reason was recorded."""
        err = self.error()
        if err is not None:
            raise err


@runtime_checkable
class ModelValidator(Protocol):
    """Anything that can check its own consistency."""

    def validate(self) -> None:
        """Raise InvalidModelError if the model is not valid."""
        ...


M = TypeVar("M", bound=ModelValidator)


def validate_model(model: M) -> M:
    """Validate the model, raising InvalidModelError on failure; return it otherwise."""
    model.validate()
    return model