from __future__ import annotations

import pytest
from pydantic import SecretStr, ValidationError

from aadauth import keys
from aadauth.catalog import authentication_properties
from aadauth.config import EnvironmentConfiguration, MapConfiguration
from aadauth.keys import DirectoryLocation
from aadauth.settings import AadSettings


def test_map_configuration__absent_keys_are_none() -> None:
    config = MapConfiguration()
    assert config.get_string(keys.CLIENT_ID) is None
    assert config.get_boolean(keys.ENABLED) is None
    assert config.get_string("not.a.key") is None


def test_map_configuration__booleans_stored_as_strings() -> None:
    config = MapConfiguration({keys.ENABLED: True, keys.MULTI_TENANT: False})
    assert config.get_string(keys.ENABLED) == "true"
    assert config.get_string(keys.MULTI_TENANT) == "false"
    assert config.get_boolean(keys.ENABLED) is True
    assert config.get_boolean(keys.MULTI_TENANT) is False


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("TRUE", True), (" True ", True), ("false", False), ("yes", False), ("", False)],
)
def test_map_configuration__boolean_parsing(raw: str, expected: bool) -> None:
    assert MapConfiguration({keys.ENABLED: raw}).get_boolean(keys.ENABLED) is expected


def test_map_configuration__set_none_removes_key() -> None:
    config = MapConfiguration({keys.CLIENT_ID: "id"})
    config.set(keys.CLIENT_ID, None)
    assert config.get_string(keys.CLIENT_ID) is None


def test_map_configuration__empty_string_is_kept() -> None:
    config = MapConfiguration({keys.TENANT_ID: ""})
    assert config.get_string(keys.TENANT_ID) == ""


def test_map_configuration__catalog_defaults() -> None:
    config = MapConfiguration(definitions=authentication_properties())
    assert config.get_string(keys.LOGIN_STRATEGY) == "Unique"
    assert config.get_boolean(keys.ALLOW_USERS_TO_SIGN_UP) is True
    assert config.get_boolean(keys.ENABLED) is False
    assert config.get_string(keys.CLIENT_ID) is None

    config.set(keys.LOGIN_STRATEGY, "Same as Azure AD login")
    assert config.get_string(keys.LOGIN_STRATEGY) == "Same as Azure AD login"
    config.set(keys.LOGIN_STRATEGY, None)
    assert config.get_string(keys.LOGIN_STRATEGY) == "Unique"


def test_environment_configuration__reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SONAR_AUTH_AAD_ENABLED", "true")
    monkeypatch.setenv("SONAR_AUTH_AAD_CLIENTID_SECURED", "abc-123")
    monkeypatch.setenv("SONAR_AUTH_AAD_CLIENTSECRET_SECURED", "sekrit")
    monkeypatch.setenv("SONAR_AUTH_AAD_TENANTID", "contoso")
    monkeypatch.setenv("SONAR_AUTH_AAD_DIRECTORYLOCATION", "Azure AD for Germany")

    config = EnvironmentConfiguration()
    assert config.client_id == "abc-123"
    assert isinstance(config.client_secret, SecretStr)
    assert config.get_string(keys.CLIENT_SECRET) == "sekrit"
    assert config.get_boolean(keys.ENABLED) is True

    settings = AadSettings(config)
    assert settings.is_enabled() is True
    assert settings.directory_location() is DirectoryLocation.GERMANY
    assert settings.authorization_url() == (
        "https://login.microsoftonline.de/contoso/oauth2/authorize"
    )


def test_environment_configuration__dotted_keyword_arguments() -> None:
    config = EnvironmentConfiguration(
        **{keys.MULTI_TENANT: True, keys.LOGIN_STRATEGY: "Same as Azure AD login"}
    )
    assert config.get_boolean(keys.MULTI_TENANT) is True
    assert config.get_string(keys.MULTI_TENANT) == "true"
    assert config.get_string(keys.LOGIN_STRATEGY) == "Same as Azure AD login"


def test_environment_configuration__catalog_defaults_when_unset() -> None:
    config = EnvironmentConfiguration()
    assert config.get_string(keys.LOGIN_STRATEGY) == "Unique"
    assert config.get_string(keys.DIRECTORY_LOCATION) == "Azure AD (Global)"
    assert config.get_boolean(keys.ENABLED) is False
    assert config.get_boolean(keys.ENABLE_GROUPS_SYNC) is False
    assert config.get_string(keys.CLIENT_ID) is None
    assert config.get_string("not.a.key") is None
    assert AadSettings(config).is_enabled() is False


def test_environment_configuration__invalid_boolean_raises(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("SONAR_AUTH_AAD_MULTITENANT", "sometimes")
    with pytest.raises(ValidationError):
        EnvironmentConfiguration()
