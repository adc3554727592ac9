"""Tests for resource models and presence tracking."""

import copy
import json
import pickle

import pytest

from auth0mgmt.core.exceptions import ValidationError
from auth0mgmt.models import (
    UNSET,
    ClientGrant,
    Connection,
    ConnectionOptions,
    ConnectionOptionsTotp,
)


class TestUnset:
    """Test the UNSET sentinel."""

    def test_unset_is_falsy(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"

    def test_unset_is_singleton_under_copy_and_pickle(self):
        assert copy.copy(UNSET) is UNSET
        assert copy.deepcopy(UNSET) is UNSET
        assert pickle.loads(pickle.dumps(UNSET)) is UNSET

    def test_unset_differs_from_none(self):
        assert UNSET is not None
        assert UNSET != None  # noqa: E711


class TestClientGrant:
    """Test ClientGrant model."""

    def test_defaults_are_unset(self):
        grant = ClientGrant()

        assert grant.id is UNSET
        assert grant.scope is UNSET
        assert grant.set_fields() == []
        assert grant.to_dict() == {}

    def test_from_dict(self):
        grant = ClientGrant.from_dict(
            {
                "id": "cgr_123",
                "client_id": "client_abc",
                "audience": "https://api.example.com",
                "scope": ["read:users", "update:users"],
            }
        )

        assert grant.id == "cgr_123"
        assert grant.client_id == "client_abc"
        assert grant.audience == "https://api.example.com"
        assert grant.scope == ["read:users", "update:users"]

    def test_only_set_fields_are_serialized(self):
        grant = ClientGrant(scope=["read:users"])

        assert grant.to_dict() == {"scope": ["read:users"]}

    def test_explicit_null_is_serialized(self):
        grant = ClientGrant(audience=None)

        assert grant.to_dict() == {"audience": None}
        assert grant.is_set("audience")
        assert not grant.is_set("client_id")

    def test_null_from_json_stays_null(self):
        grant = ClientGrant.from_dict({"id": "cgr_1", "scope": None})

        assert grant.scope is None
        assert grant.to_dict() == {"id": "cgr_1", "scope": None}

    def test_unknown_keys_are_kept(self):
        grant = ClientGrant.from_dict({"id": "cgr_1", "organization_usage": "deny"})

        assert grant.extra == {"organization_usage": "deny"}
        assert grant.to_dict() == {"id": "cgr_1", "organization_usage": "deny"}

    def test_get_returns_default_for_absent_and_null(self):
        grant = ClientGrant(audience=None)

        assert grant.get("audience", "fallback") == "fallback"
        assert grant.get("id") is None

    def test_str_is_indented_json(self):
        grant = ClientGrant(id="cgr_1")

        assert json.loads(str(grant)) == {"id": "cgr_1"}
        assert "\n" in str(grant)

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(ValidationError):
            ClientGrant.from_dict(["not", "an", "object"])

    def test_from_list(self):
        grants = ClientGrant.from_list([{"id": "a"}, {"id": "b"}])

        assert [g.id for g in grants] == ["a", "b"]
        assert ClientGrant.from_list(None) == []

    def test_from_dict_does_not_alias_input(self):
        data = {"scope": ["read:users"]}
        grant = ClientGrant.from_dict(data)
        data["scope"].append("delete:users")

        assert grant.scope == ["read:users"]


class TestConnection:
    """Test Connection and nested options models."""

    def test_json_key_aliases(self):
        options = ConnectionOptions(
            password_policy="good",
            enabled_database_customization=True,
            custom_scripts={"login": "function login() {}"},
            from_="+15551234567",
        )

        assert options.to_dict() == {
            "passwordPolicy": "good",
            "enabledDatabaseCustomization": True,
            "customScripts": {"login": "function login() {}"},
            "from": "+15551234567",
        }

    def test_nested_options_are_parsed(self):
        connection = Connection.from_dict(
            {
                "id": "con_123",
                "name": "sms",
                "strategy": "sms",
                "options": {
                    "totp": {"time_step": 300, "length": 6},
                    "twilio_sid": "AC123",
                },
            }
        )

        assert isinstance(connection.options, ConnectionOptions)
        assert connection.options.totp == ConnectionOptionsTotp(time_step=300, length=6)
        assert connection.options.twilio_sid == "AC123"
        assert connection.options.brute_force_protection is UNSET

    def test_null_options_stay_null(self):
        connection = Connection.from_dict({"options": None})

        assert connection.options is None
        assert connection.to_dict() == {"options": None}

    def test_provider_specific_options_are_kept(self):
        options = ConnectionOptions.from_dict(
            {
                "client_id": "google-client",
                "scope": ["email", "profile"],
                "allowed_audiences": ["example.com"],
            }
        )

        assert options.client_id == "google-client"
        assert options.extra == {
            "scope": ["email", "profile"],
            "allowed_audiences": ["example.com"],
        }

    def test_extra_repeating_declared_key_is_rejected(self):
        with pytest.raises(ValidationError, match="repeats declared keys"):
            ConnectionOptions(extra={"from": "+15551234567"})

        with pytest.raises(ValidationError):
            Connection(name="db", extra={"name": "other"})

    def test_undeclared_top_level_keys_are_kept(self):
        connection = Connection.from_dict(
            {"id": "con_1", "display_name": "Database", "show_as_button": False}
        )

        assert connection.extra == {"display_name": "Database", "show_as_button": False}
        assert connection.set_fields() == ["id"]

    def test_nested_resource_given_as_dict_serializes(self):
        connection = Connection(options={"brute_force_protection": True})

        assert connection.to_dict() == {"options": {"brute_force_protection": True}}


ROUND_TRIP_SAMPLES = [
    {},
    {"id": "cgr_1", "client_id": "abc", "audience": "https://api", "scope": []},
    {"id": "cgr_2", "scope": None},
    {
        "id": "cgr_3",
        "client_id": "abc",
        "audience": "https://api",
        "scope": ["read:users"],
        "allow_any_organization": False,
        "organization_usage": "allow",
    },
]

CONNECTION_SAMPLES = [
    {
        "id": "con_1",
        "name": "Username-Password-Authentication",
        "strategy": "auth0",
        "is_domain_connection": False,
        "enabled_clients": ["client_a", "client_b"],
        "realms": ["Username-Password-Authentication"],
        "options": {
            "passwordPolicy": "good",
            "password_history": {"enable": True, "size": 5},
            "password_complexity_options": {"min_length": 8},
            "brute_force_protection": True,
            "requires_username": False,
            "enabledDatabaseCustomization": True,
            "customScripts": {"login": "function login() {}"},
            "configuration": {"API_KEY": "secret"},
            "mfa": {"active": True, "return_enroll_settings": True},
        },
        "metadata": {"team": "identity"},
    },
    {
        "id": "con_2",
        "name": "sms",
        "strategy": "sms",
        "options": {
            "totp": {"time_step": 300, "length": 6},
            "from": "+15551234567",
            "syntax": "md_with_macros",
            "upstream_params": None,
        },
    },
    {"id": "con_3", "options": None, "metadata": None},
    {
        "id": "con_4",
        "name": "db",
        "display_name": "Database",
        "show_as_button": False,
        "strategy": "auth0",
        "options": {"brute_force_protection": True},
    },
]


class TestRoundTrip:
    """Serializing a parsed record yields the original JSON."""

    @pytest.mark.parametrize("data", ROUND_TRIP_SAMPLES)
    def test_client_grant_round_trip(self, data):
        grant = ClientGrant.from_dict(data)

        assert grant.to_dict() == data
        assert ClientGrant.from_dict(grant.to_dict()) == grant

    @pytest.mark.parametrize("data", CONNECTION_SAMPLES)
    def test_connection_round_trip(self, data):
        connection = Connection.from_dict(data)

        assert connection.to_dict() == data
        assert Connection.from_dict(connection.to_dict()) == connection

    def test_absent_fields_stay_absent(self):
        connection = Connection.from_dict(CONNECTION_SAMPLES[1])
        restored = Connection.from_dict(json.loads(json.dumps(connection.to_dict())))

        assert restored.set_fields() == ["id", "name", "strategy", "options"]
        assert "realms" not in restored.to_dict()
        assert "brute_force_protection" not in restored.to_dict()["options"]
