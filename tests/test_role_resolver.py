from unittest.mock import Mock

import pytest

from kondo.errors import RoleLookupError, StoreError, Unauthenticated
from kondo.models.role import Role
from kondo.services.role_resolver import RoleResolver


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("sindico", Role.SINDICO),
        (" SINDICO ", Role.SINDICO),
        ("morador", Role.MORADOR),
        ("admin", Role.MORADOR),
        ("", Role.MORADOR),
        (None, Role.MORADOR),
        (42, Role.MORADOR),
    ],
)
def test_role_parse_maps_unknown_values_to_morador(raw, expected):
    assert Role.parse(raw) is expected


def test_resolve_reads_role_from_profile(profile_repository, fake_supabase):
    fake_supabase.seed("profiles", id="admin", full_name="Síndico", role="sindico")

    resolver = RoleResolver(profile_repository)

    assert resolver.resolve("admin") is Role.SINDICO
    assert resolver.resolve("someone-else") is Role.MORADOR


def test_resolve_without_actor_raises_unauthenticated():
    repository = Mock()
    resolver = RoleResolver(repository)

    with pytest.raises(Unauthenticated):
        resolver.resolve(None)
    with pytest.raises(Unauthenticated):
        resolver.resolve("")
    repository.select_role.assert_not_called()


def test_resolve_wraps_store_failures():
    repository = Mock()
    repository.select_role.side_effect = StoreError("down")
    resolver = RoleResolver(repository)

    with pytest.raises(RoleLookupError):
        resolver.resolve("u1")


def test_resolve_or_default_fails_closed():
    repository = Mock()
    repository.select_role.side_effect = StoreError("down")
    resolver = RoleResolver(repository)

    assert resolver.resolve_or_default("u1") is Role.MORADOR


def test_resolve_or_default_still_requires_actor():
    resolver = RoleResolver(Mock())
    with pytest.raises(Unauthenticated):
        resolver.resolve_or_default(None)
