"""Tests for the role-based access policy."""

import pytest

from app.core.errors import ForbiddenError
from app.core.policy import ALL_ROLES, Action, Role, allowed_roles, authorize, is_allowed


@pytest.mark.unit
def test_user_management_is_admin_only():
    """Only admins may create, update or delete users."""
    for action in (Action.USER_CREATE, Action.USER_UPDATE, Action.USER_DELETE):
        assert allowed_roles(action) == {Role.ADMIN}
        assert is_allowed("admin", action)
        for role in ("agent", "manager", "support"):
            assert not is_allowed(role, action)


@pytest.mark.unit
def test_user_listing_allows_admin_and_manager():
    """Managers can read the user directory but not change it."""
    assert is_allowed("manager", Action.USER_LIST)
    assert is_allowed("manager", Action.USER_READ)
    assert not is_allowed("agent", Action.USER_LIST)
    assert not is_allowed("support", Action.USER_READ)


@pytest.mark.unit
def test_bulk_transfer_allows_admin_and_support():
    """Import and export are limited to admin and support."""
    for action in (Action.CLIENT_IMPORT, Action.CLIENT_EXPORT):
        assert allowed_roles(action) == {Role.ADMIN, Role.SUPPORT}
        assert not is_allowed("agent", action)
        assert not is_allowed("manager", action)


@pytest.mark.unit
def test_unknown_role_is_denied():
    """A role outside the enum is never allowed."""
    assert not is_allowed("superuser", Action.USER_LIST)
    with pytest.raises(ForbiddenError):
        authorize("superuser", Action.CLIENT_EXPORT)


@pytest.mark.unit
def test_authorize_raises_forbidden():
    """authorize raises a 403 error with a fixed message."""
    with pytest.raises(ForbiddenError) as exc_info:
        authorize("support", Action.USER_DELETE)

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Forbidden"
    authorize("admin", Action.USER_DELETE)


@pytest.mark.unit
def test_all_roles_cover_enum():
    assert ALL_ROLES == {Role.ADMIN, Role.AGENT, Role.MANAGER, Role.SUPPORT}
