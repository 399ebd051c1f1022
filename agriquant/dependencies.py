"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from agriquant.services.session_service import SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
	"""Session registry created by the application lifespan."""
	return request.app.state.sessions
