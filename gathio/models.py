"""
Data Models for gathio configuration.

This module defines the Pydantic models used for the instance configuration
and the values derived from it. It covers:
- The effective instance configuration (GathioConfig and its sections)
- The client-safe projection served to browsers (FrontendConfig)
- Human-readable policy statements (InstanceRule)
- The outcome of a configuration load (ConfigLoadResult)

Configuration values are passed through exactly as the TOML parser produced
them. Section fields are unconstrained and every one is optional, because a
`general` block in the file replaces the default block as a whole. The checks
the derived views need (truthiness, "greater than zero", "has entries") are
applied where the views are built, not here.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ConfigSection(BaseModel):
    """A top-level TOML table. Unknown keys are kept, values are not validated."""
    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _non_table_as_empty(cls, data: Any) -> Any:
        # A section given as a scalar or array has no fields to read.
        if not isinstance(data, dict):
            return {}
        return data


class GeneralConfig(ConfigSection):
    """
    The `[general]` section: site identity, federation, retention, mail
    delivery and creation policy.
    """
    domain: Any = None
    """Public host (and port) the instance is served from."""

    port: Any = None

    email: Any = None
    """Contact address shown to users and used as the sender address."""

    site_name: Any = None

    delete_after_days: Any = None
    """Days after an event ends before it is deleted. 0 keeps events forever."""

    is_federated: Any = None

    email_logo_url: Any = None

    show_kofi: Any = None

    show_public_event_list: Any = None

    mail_service: Any = None
    """`nodemailer` or `sendgrid`; selects which credentials section is used."""

    creator_email_addresses: Any = None
    """When non-empty, only these addresses may create events and groups."""


class DatabaseConfig(ConfigSection):
    """The `[database]` section."""
    mongodb_url: Any = None


class NodemailerConfig(ConfigSection):
    """SMTP credentials, meaningful when `mail_service` is `nodemailer`."""
    smtp_server: Any = None
    smtp_port: Any = None
    smtp_username: Any = None
    smtp_password: Any = None


class SendgridConfig(ConfigSection):
    """SendGrid credentials, meaningful when `mail_service` is `sendgrid`."""
    api_key: Any = None


class GathioConfig(BaseModel):
    """
    Effective instance configuration: the file's top-level sections overlaid
    on the compiled-in defaults.
    """
    model_config = ConfigDict(extra="allow")

    general: GeneralConfig
    database: DatabaseConfig
    nodemailer: Optional[NodemailerConfig] = None
    sendgrid: Optional[SendgridConfig] = None
    static_pages: Any = None
    """Array of `{title, path, filename}` tables describing auxiliary pages."""


class FrontendConfig(BaseModel):
    """
    Client-safe subset of the configuration.
    Serialized with camelCase keys (`model_dump(by_alias=True)`).
    """
    model_config = ConfigDict(populate_by_name=True)

    domain: Any = None
    site_name: Any = Field(default=None, alias="siteName")
    is_federated: bool = Field(alias="isFederated")
    email_logo_url: Any = Field(default=None, alias="emailLogoUrl")
    show_kofi: bool = Field(alias="showKofi")
    show_public_event_list: bool = Field(alias="showPublicEventList")
    show_instance_information: bool = Field(alias="showInstanceInformation")
    """True when at least one static page is configured."""

    static_pages: Any = Field(default=None, alias="staticPages")
    version: str
    """Build version, or `unknown` when the build environment does not provide one."""


class InstanceRule(BaseModel):
    """A single policy statement displayed on the instance information page."""
    model_config = ConfigDict(frozen=True)

    icon: str
    """Font Awesome icon classes."""

    text: str


class InstanceRulesResponse(BaseModel):
    rules: List[InstanceRule]


class ConfigLoadResult(BaseModel):
    """Outcome of loading the configuration file, success or fatal error."""
    ok: bool
    config_path: str
    config: Optional[GathioConfig] = None
    error: Optional[str] = None
    """Operator-facing message when the configuration is unavailable."""
