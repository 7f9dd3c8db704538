from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from kondo.errors import NotFound, StoreError, ValidationError
from kondo.services.user_admin_service import UserAdminService


@pytest.fixture
def admin_client():
    client = MagicMock(name="SupabaseAdminClientMock")
    client.auth.admin.list_users.return_value = [
        SimpleNamespace(id="u1", email="ana@example.com", created_at=None, last_sign_in_at=None),
        {"id": "u2", "email": "bruno@example.com"},
    ]
    return client


@pytest.mark.service
def test_list_users(admin_client):
    users = UserAdminService(admin_client).list_users()

    assert [u.id for u in users] == ["u1", "u2"]
    assert users[1].email == "bruno@example.com"


@pytest.mark.service
def test_delete_user_by_email(admin_client):
    message = UserAdminService(admin_client).delete_user("bruno@example.com")

    admin_client.auth.admin.delete_user.assert_called_once_with("u2")
    assert message == "User bruno@example.com deleted successfully"


@pytest.mark.service
def test_delete_unknown_user(admin_client):
    with pytest.raises(NotFound):
        UserAdminService(admin_client).delete_user("ghost@example.com")
    admin_client.auth.admin.delete_user.assert_not_called()


@pytest.mark.service
def test_delete_requires_email(admin_client):
    with pytest.raises(ValidationError):
        UserAdminService(admin_client).delete_user("")


@pytest.mark.service
def test_admin_api_failure_becomes_store_error(admin_client):
    admin_client.auth.admin.list_users.side_effect = Exception("401 invalid key")

    with pytest.raises(StoreError):
        UserAdminService(admin_client).list_users()


@pytest.mark.service
def test_send_password_reset(admin_client):
    UserAdminService(admin_client).send_password_reset("ana@example.com", "https://kondo.app/reset-password")

    admin_client.auth.reset_password_for_email.assert_called_once_with(
        "ana@example.com", {"redirect_to": "https://kondo.app/reset-password"}
    )
