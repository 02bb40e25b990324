"""Lookup outcome passed from the handler to the view."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ERROR_MESSAGE = "Error, please try again"


class FailureReason(Enum):
    """Why a lookup failed. Diagnostic only, never rendered."""

    TRANSPORT = "transport"
    CITY_NOT_FOUND = "city_not_found"


@dataclass(frozen=True)
class Success:
    """Lookup succeeded.

    Attributes:
        display_text: Sentence combining temperature and location name.
    """

    display_text: str


@dataclass(frozen=True)
class Failure:
    """Lookup failed.

    Attributes:
        message: User-facing error text.
        reason: Failure cause, excluded from equality.
    """

    message: str = ERROR_MESSAGE
    reason: FailureReason | None = field(default=None, compare=False)


LookupResult = Success | Failure


def render_context(result: LookupResult | None) -> dict[str, Any]:
    """Map a lookup result onto the view's two render slots.

    A missing result (first page load) leaves both slots empty.
    """
    if isinstance(result, Success):
        return {"weather": result.display_text, "error": None}
    if isinstance(result, Failure):
        return {"weather": None, "error": result.message}
    return {"weather": None, "error": None}
