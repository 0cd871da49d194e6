"""Dependency injection for API routes."""

from fastapi import Request

from app.repositories.hikes import HikeRepository


def get_repository(request: Request) -> HikeRepository:
    """The repository built once by create_app()."""
    return request.app.state.repository
