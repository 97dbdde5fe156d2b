import dataclasses

import pytest

from shared.application.authenticated_principal import AuthenticatedPrincipal


def test_principal_normalises_blank_email():
    principal = AuthenticatedPrincipal(subject_id=1, identifier="1", email="   ")
    assert principal.email is None


def test_principal_strips_email():
    principal = AuthenticatedPrincipal(subject_id=1, identifier="1", email=" user@example.com ")
    assert principal.email == "user@example.com"
    assert principal.id == 1


def test_principal_is_immutable():
    principal = AuthenticatedPrincipal(subject_id=1, identifier="1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        principal.subject_id = 2  # type: ignore[misc]
