# File location: src/gradebook/utils/dependencies.py
from fastapi import Request

from src.gradebook.db.store import Store
from src.gradebook.utils.pubsub import EventBus


def get_store(request: Request) -> Store:
    """The store the application was built with."""
    return request.app.state.store


def get_bus(request: Request) -> EventBus:
    return request.app.state.bus
