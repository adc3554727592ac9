"""Connection records.

A connection's ``options`` object is strategy specific and not fully
enumerable, so :class:`ConnectionOptions` declares the commonly used keys
and keeps everything else in ``extra``.
"""

from dataclasses import dataclass
from typing import Any

from auth0mgmt.models.base import JSONValue, Maybe, Resource, attr

# Identity provider identifiers accepted in Connection.strategy
STRATEGIES = frozenset(
    {
        "ad", "adfs", "amazon", "aol", "apple", "auth0", "auth0-adldap",
        "auth0-oidc", "baidu", "bitbucket", "bitly", "box", "custom",
        "daccount", "dropbox", "dwolla", "email", "evernote",
        "evernote-sandbox", "exact", "facebook", "fitbit", "flickr", "github",
        "google-apps", "google-oauth2", "guardian", "instagram", "ip",
        "line", "linkedin", "miicard", "oauth1", "oauth2", "office365",
        "oidc", "okta", "paypal", "paypal-sandbox", "pingfederate",
        "planningcenter", "renren", "salesforce", "salesforce-community",
        "salesforce-sandbox", "samlp", "sharepoint", "shopify", "sms",
        "soundcloud", "thecity", "thecity-sandbox", "thirtysevensignals",
        "twitter", "untappd", "vkontakte", "waad", "weibo", "windowslive",
        "wordpress", "yahoo", "yammer", "yandex",
    }
)

# Allowed keys of ConnectionOptions.custom_scripts
CUSTOM_SCRIPT_NAMES = (
    "get_user",
    "login",
    "create",
    "verify",
    "change_password",
    "delete",
    "change_email",
)


@dataclass(kw_only=True)
class ConnectionOptionsTotp(Resource):
    """One-time password settings of a passwordless SMS connection."""

    time_step: Maybe[int] = attr()
    length: Maybe[int] = attr()


@dataclass(kw_only=True)
class ConnectionOptions(Resource):
    """Strategy-specific connection settings."""

    _keep_unknown = True

    validation: Maybe[dict[str, Any]] = attr()

    # "none", "low", "fair", "good", "excellent" or null
    password_policy: Maybe[str] = attr(json_key="passwordPolicy")
    password_history: Maybe[dict[str, Any]] = attr()
    password_no_personal_info: Maybe[dict[str, Any]] = attr()
    password_dictionary: Maybe[dict[str, Any]] = attr()
    password_complexity_options: Maybe[dict[str, Any]] = attr()

    api_enable_users: Maybe[bool] = attr()
    basic_profile: Maybe[bool] = attr()
    ext_admin: Maybe[bool] = attr()
    ext_is_suspended: Maybe[bool] = attr()
    ext_agreed_terms: Maybe[bool] = attr()
    ext_groups: Maybe[bool] = attr()
    ext_nested_groups: Maybe[bool] = attr()
    ext_assigned_plans: Maybe[bool] = attr()
    ext_profile: Maybe[bool] = attr()
    enabled_database_customization: Maybe[bool] = attr(
        json_key="enabledDatabaseCustomization"
    )
    brute_force_protection: Maybe[bool] = attr()
    import_mode: Maybe[bool] = attr()
    disable_signup: Maybe[bool] = attr()
    requires_username: Maybe[bool] = attr()

    upstream_params: Maybe[JSONValue] = attr()

    # Enterprise / social
    client_id: Maybe[str] = attr()
    client_secret: Maybe[str] = attr()
    tenant_domain: Maybe[str] = attr()
    domain_aliases: Maybe[list[str]] = attr()
    use_wsfed: Maybe[bool] = attr()
    waad_protocol: Maybe[str] = attr()
    waad_common_endpoint: Maybe[bool] = attr()
    app_id: Maybe[str] = attr()
    app_domain: Maybe[str] = attr()
    max_groups_to_retrieve: Maybe[str] = attr()

    # Database connection scripts, keyed by CUSTOM_SCRIPT_NAMES
    custom_scripts: Maybe[dict[str, str]] = attr(json_key="customScripts")
    # Variables available to custom scripts
    configuration: Maybe[dict[str, str]] = attr()

    # Passwordless SMS (Twilio)
    totp: Maybe[ConnectionOptionsTotp] = attr(model=ConnectionOptionsTotp)
    name: Maybe[str] = attr()
    twilio_sid: Maybe[str] = attr()
    twilio_token: Maybe[str] = attr()
    from_: Maybe[str] = attr(json_key="from")
    syntax: Maybe[str] = attr()
    template: Maybe[str] = attr()
    messaging_service_sid: Maybe[str] = attr()

    adfs_server: Maybe[str] = attr()


@dataclass(kw_only=True)
class Connection(Resource):
    """An identity provider connection."""

    _keep_unknown = True

    # A generated string identifying the connection.
    id: Maybe[str] = attr()

    # Alphanumerics and '-', starting and ending with an alphanumeric,
    # at most 128 characters.
    name: Maybe[str] = attr()

    # Identity provider identifier, see STRATEGIES.
    strategy: Maybe[str] = attr()

    is_domain_connection: Maybe[bool] = attr()

    options: Maybe[ConnectionOptions] = attr(model=ConnectionOptions)

    # Client IDs the connection is enabled for. Empty or absent enables none.
    enabled_clients: Maybe[list[str]] = attr()

    # Realms (e.g. email domains) the connection is used for. Empty or
    # absent means the connection name is the realm.
    realms: Maybe[list[str]] = attr()

    metadata: Maybe[dict[str, JSONValue]] = attr()
