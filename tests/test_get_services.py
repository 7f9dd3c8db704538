from unittest.mock import MagicMock, patch

import pytest
from fastapi import HTTPException

from kondo.routes.items import providers


@patch("kondo.routes.items.providers.IncidentService")
@patch("kondo.routes.items.providers.IncidentRepository")
@patch("kondo.routes.items.providers.get_supabase")
def test_get_incident_service_success(mock_get_supabase, mock_repo, mock_service):
    """Debe devolver una instancia de IncidentService correctamente."""
    mock_supabase = MagicMock(name="SupabaseClientMock")
    mock_repo_instance = MagicMock(name="IncidentRepositoryMock")
    mock_service_instance = MagicMock(name="IncidentServiceMock")

    mock_get_supabase.return_value = mock_supabase
    mock_repo.return_value = mock_repo_instance
    mock_service.return_value = mock_service_instance

    result = providers.get_incident_service()

    assert result == mock_service_instance
    mock_get_supabase.assert_called_once()
    mock_repo.assert_called_once_with(mock_supabase)
    mock_service.assert_called_once_with(mock_repo_instance)


@patch("kondo.routes.items.providers.AlertService")
@patch("kondo.routes.items.providers.AlertRepository")
@patch("kondo.routes.items.providers.get_supabase")
def test_get_alert_service_success(mock_get_supabase, mock_repo, mock_service):
    result = providers.get_alert_service()

    assert result == mock_service.return_value
    mock_repo.assert_called_once_with(mock_get_supabase.return_value)
    mock_service.assert_called_once_with(mock_repo.return_value)


@patch("kondo.routes.items.providers.get_supabase")
def test_dashboard_service_shares_one_client(mock_get_supabase):
    service = providers.get_dashboard_service()

    mock_get_supabase.assert_called_once()
    assert service.incident_repository.supabase is mock_get_supabase.return_value
    assert service.alert_repository.supabase is mock_get_supabase.return_value


@pytest.mark.parametrize(
    "provider",
    [
        providers.get_incident_service,
        providers.get_alert_service,
        providers.get_dashboard_service,
        providers.get_profile_service,
        providers.get_role_resolver,
        providers.get_user_admin_service,
    ],
)
@patch("kondo.routes.items.providers.get_supabase")
def test_provider_failure_returns_500(mock_get_supabase, provider):
    """Debe lanzar HTTPException(500) si get_supabase falla."""
    mock_get_supabase.side_effect = RuntimeError("SUPABASE_SERVICE_ROLE_KEY not set")

    with pytest.raises(HTTPException) as exc:
        provider()

    assert exc.value.status_code == 500
    assert "Database dependency failed" in exc.value.detail
