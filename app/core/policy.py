"""Role-based access policy.

Every role check in the API goes through ``authorize``; actions not listed in
``POLICY`` are open to any authenticated user.
"""

from enum import Enum

from app.core.errors import ForbiddenError


class Role(str, Enum):
    ADMIN = "admin"
    AGENT = "agent"
    MANAGER = "manager"
    SUPPORT = "support"


class Action(str, Enum):
    USER_CREATE = "user:create"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"
    USER_LIST = "user:list"
    USER_READ = "user:read"
    CLIENT_IMPORT = "client:import"
    CLIENT_EXPORT = "client:export"


ALL_ROLES = frozenset(Role)

POLICY: dict[Action, frozenset[Role]] = {
    Action.USER_CREATE: frozenset({Role.ADMIN}),
    Action.USER_UPDATE: frozenset({Role.ADMIN}),
    Action.USER_DELETE: frozenset({Role.ADMIN}),
    Action.USER_LIST: frozenset({Role.ADMIN, Role.MANAGER}),
    Action.USER_READ: frozenset({Role.ADMIN, Role.MANAGER}),
    Action.CLIENT_IMPORT: frozenset({Role.ADMIN, Role.SUPPORT}),
    Action.CLIENT_EXPORT: frozenset({Role.ADMIN, Role.SUPPORT}),
}


def allowed_roles(action: Action) -> frozenset[Role]:
    return POLICY.get(action, ALL_ROLES)


def is_allowed(role: str, action: Action) -> bool:
    try:
        parsed = Role(role)
    except ValueError:
        return False
    return parsed in allowed_roles(action)


def authorize(role: str, action: Action) -> None:
    """Raise ForbiddenError unless ``role`` may perform ``action``."""
    if not is_allowed(role, action):
        raise ForbiddenError()
