"""
Message state data structure

A single log call as handed to a formatter
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Sequence


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class MessageState:
    """
    State of a single log call.

    Holds the unformatted template and its arguments together with the
    level, request id and time of the call. Formatters only read it;
    no field is validated, so any combination can be formatted.
    """

    template: Optional[str]
    arguments: Optional[Sequence[Any]] = ()
    level: Optional[Any] = None
    request_id: Optional[str] = None
    timestamp: datetime = field(default_factory=_utc_now)
