import contextvars
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class OutboundCall:
    """The Ubisoft call the current task is making, as shown in log records."""

    request_id: str
    path: str = "-"
    status: int | None = None


current_call: contextvars.ContextVar[OutboundCall | None] = contextvars.ContextVar(
    "siege_outbound_call", default=None
)


@contextmanager
def outbound_call(path: str = "-", request_id: str | None = None) -> Iterator[OutboundCall]:
    """Tag log records emitted by the current task with one outbound call."""
    call = OutboundCall(request_id=request_id or uuid.uuid4().hex[:12], path=path)
    token = current_call.set(call)
    try:
        yield call
    finally:
        current_call.reset(token)


def record_status(status: int) -> None:
    call = current_call.get()
    if call is not None:
        call.status = status
