import uuid
from contextvars import ContextVar

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> None:
    """Set the correlation id for the current detection request."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Retrieve the current correlation id if one is set."""
    return _request_id.get()


def new_request_id() -> str:
    request_id = uuid.uuid4().hex[:12]
    _request_id.set(request_id)
    return request_id
