"""Result envelopes shared by every action.

``Result`` is a two-variant outcome: ``Ok`` carries a value, ``Err``
carries an error.  ``ActionResult`` specialises it for tool executors:
the success value always has a human-readable ``message`` and the
error always has a displayable ``message`` plus optional ``detail``.

Callers branch on ``kind`` (or ``isinstance``) exhaustively; a missing
field never means success.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T
    kind: Literal["Ok"] = field(default="Ok", init=False)

    @property
    def is_ok(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        value = self.value.to_dict() if hasattr(self.value, "to_dict") else self.value
        return {"kind": self.kind, "value": value}


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome."""

    error: E
    kind: Literal["Error"] = field(default="Error", init=False)

    @property
    def is_ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        error = self.error.to_dict() if hasattr(self.error, "to_dict") else self.error
        return {"kind": self.kind, "error": error}


Result = Union[Ok[T], Err[E]]


# ── Action results ───────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ActionValue:
    """Payload of a successful action."""

    message: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {**self.data, "message": self.message}


@dataclass(frozen=True, slots=True)
class ActionError:
    """Payload of a failed action.

    ``message`` is a stable, user-displayable headline.  ``detail`` is
    optional diagnostic text, usually the underlying exception message.
    """

    message: str
    detail: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"message": self.message}
        if self.detail is not None:
            result["detail"] = self.detail
        return result


ActionResult = Union[Ok[ActionValue], Err[ActionError]]


def ok(message: str, **data: Any) -> Ok[ActionValue]:
    """Build a successful action result."""
    return Ok(ActionValue(message=message, data=dict(data)))


def err(message: str, detail: str | None = None) -> Err[ActionError]:
    """Build a failed action result."""
    return Err(ActionError(message=message, detail=detail))


def err_from_exception(message: str, exc: BaseException) -> Err[ActionError]:
    """Translate a caught exception into a failed action result.

    The fixed *message* describes the failed intent; the exception text
    goes to ``detail`` only when the exception actually carries one.
    """
    text = str(exc)
    return err(message, text if text else None)
