"""Session id handling shared by routes that track connections."""

from uuid import uuid4

from fastapi import Header, Response

SESSION_HEADER = "x-session-id"


def resolve_session_id(
    response: Response,
    x_session_id: str | None = Header(None, description="Browser session id"),
) -> str:
    """Use the client's session id, or issue a new one and send it back."""
    session_id = x_session_id or str(uuid4())
    response.headers[SESSION_HEADER] = session_id
    return session_id
