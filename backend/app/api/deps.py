"""Shared dependencies for API endpoints.

The application owns exactly one in-memory RegistrationSession, stored on
app.state. Endpoints receive it through this dependency instead of reaching
for a module-level global, so tests can hand each app its own session.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.services.registration_session import RegistrationSession


def get_registration_session(request: Request) -> RegistrationSession:
    """Return the application's onboarding session.

    Args:
        request: HTTP request (injected by FastAPI).

    Returns:
        The session stored on app.state.
    """
    return request.app.state.registration_session


def reset_registration_session(request: Request) -> RegistrationSession:
    """Discard the current session and start an empty one.

    Args:
        request: HTTP request (injected by FastAPI).

    Returns:
        The new, empty session.
    """
    session = RegistrationSession()
    request.app.state.registration_session = session
    return session


CurrentSession = Annotated[RegistrationSession, Depends(get_registration_session)]
