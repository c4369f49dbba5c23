# File: src/gradebook/controllers/user_controller.py

from typing import List, Optional

from ..db.store import Store
from ..models.user import User, UserRole


def get_user(store: Store, user_id: str) -> Optional[User]:
    return store.get(User, user_id)


def list_users(store: Store, role: Optional[UserRole] = None) -> List[User]:
    return store.list(User, role=role)
