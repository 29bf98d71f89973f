import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ..config import settings
from ..defaults import get_default_config
from ..errors import ConfigUnavailableError
from ..models import ConfigLoadResult, FrontendConfig, GathioConfig, InstanceRule
from ..process import exit_with_error

logger = logging.getLogger(__name__)


def load_raw_config(config_path: Path) -> Dict[str, Any]:
    """Read and parse the TOML file into plain Python types."""
    with open(config_path, "r", encoding="utf-8") as f:
        doc = tomlkit.parse(f.read())
    return doc.unwrap()


def merge_config(defaults: Mapping[str, Any], parsed: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Overlay parsed top-level sections onto the defaults.

    Only top-level keys are considered: a section present in `parsed` replaces
    the default section as a whole, so a partial `[general]` block leaves the
    unspecified fields unset instead of inheriting the defaults.
    """
    return {**defaults, **parsed}


def _is_on(value: Any) -> bool:
    """Unset, false, zero, NaN and "" are off; anything else, including an empty table or array, is on."""
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _has_entries(value: Any) -> bool:
    return isinstance(value, (list, str)) and len(value) > 0


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return None
    return None


def _format_days(days: Any) -> str:
    if isinstance(days, bool):
        return "true" if days else "false"
    if isinstance(days, float) and days.is_integer():
        return str(int(days))
    return str(days)


def build_frontend_config(config: GathioConfig) -> FrontendConfig:
    """Project the client-safe fields; the version is read from the environment on each call."""
    general = config.general
    return FrontendConfig(
        domain=general.domain,
        site_name=general.site_name,
        is_federated=_is_on(general.is_federated),
        email_logo_url=general.email_logo_url,
        show_public_event_list=_is_on(general.show_public_event_list),
        show_kofi=_is_on(general.show_kofi),
        show_instance_information=_has_entries(config.static_pages),
        static_pages=config.static_pages,
        version=os.environ.get(settings.SYSTEM.VERSION_ENV) or settings.SYSTEM.UNKNOWN_VERSION,
    )


def build_instance_rules(config: GathioConfig) -> List[InstanceRule]:
    general = config.general
    rules: List[InstanceRule] = []

    if _is_on(general.show_public_event_list):
        rules.append(InstanceRule(
            text="Public events and groups are displayed on the homepage",
            icon="fas fa-eye",
        ))
    else:
        rules.append(InstanceRule(
            text="Events and groups can only be accessed by direct link",
            icon="fas fa-eye-slash",
        ))

    if _has_entries(general.creator_email_addresses):
        rules.append(InstanceRule(
            text="Only specific people can create events and groups",
            icon="fas fa-user-check",
        ))
    else:
        rules.append(InstanceRule(
            text="Anyone can create events and groups",
            icon="fas fa-users",
        ))

    days = general.delete_after_days
    days_number = _as_number(days)
    if days_number is not None and days_number > 0:
        rules.append(InstanceRule(
            text=f"Events are automatically deleted {_format_days(days)} days after they end",
            icon="far fa-calendar-times",
        ))
    else:
        rules.append(InstanceRule(
            text="Events are permanent, and are never automatically deleted",
            icon="far fa-calendar-check",
        ))

    # Both branches share the globe icon.
    if _is_on(general.is_federated):
        rules.append(InstanceRule(
            text="This instance federates with other instances using ActivityPub",
            icon="fas fa-globe",
        ))
    else:
        rules.append(InstanceRule(
            text="This instance does not federate with other instances",
            icon="fas fa-globe",
        ))

    return rules


class ConfigService:
    """
    Loads the instance configuration and derives the views served to clients.

    The file is re-read on every call; nothing is cached, so callers always see
    the current file contents. `load()` reports failures as a
    `ConfigLoadResult`; `get_config()` and the derived views treat a failure
    as fatal and stop the process.
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path or settings.SYSTEM.CONFIG_PATH)

    @property
    def example_config_path(self) -> Path:
        return self.config_path.parent / settings.SYSTEM.EXAMPLE_CONFIG_NAME

    def unavailable_message(self) -> str:
        example = self._display_path(self.example_config_path)
        target = self._display_path(self.config_path)
        return f"Configuration file not found! Have you renamed '{example}' to '{target}'?"

    @staticmethod
    def _display_path(path: Path) -> str:
        text = path.as_posix()
        if path.is_absolute() or text.startswith("."):
            return text
        return f"./{text}"

    def read_config(self) -> GathioConfig:
        """Load and merge the configuration, raising ConfigUnavailableError when the file is missing or unparsable."""
        try:
            parsed = load_raw_config(self.config_path)
        except FileNotFoundError as exc:
            raise ConfigUnavailableError(
                config_path=str(self.config_path),
                message=self.unavailable_message(),
                details={"reason": "missing", "error": str(exc)},
            ) from exc
        except (OSError, UnicodeDecodeError, TOMLKitError) as exc:
            raise ConfigUnavailableError(
                config_path=str(self.config_path),
                message=self.unavailable_message(),
                details={"reason": "unreadable", "error": str(exc)},
            ) from exc

        return GathioConfig.model_validate(merge_config(get_default_config(), parsed))

    def load(self) -> ConfigLoadResult:
        try:
            config = self.read_config()
        except ConfigUnavailableError as exc:
            logger.error(
                "Failed to load configuration from %s (%s): %s",
                exc.config_path,
                exc.details.get("reason"),
                exc.details.get("error"),
            )
            return ConfigLoadResult(ok=False, config_path=exc.config_path, error=exc.message)
        logger.debug("Configuration loaded from %s", self.config_path)
        return ConfigLoadResult(ok=True, config_path=str(self.config_path), config=config)

    def get_config(self) -> GathioConfig:
        """Return the effective configuration or stop the process if it is unavailable."""
        result = self.load()
        if not result.ok or result.config is None:
            exit_with_error(result.error or self.unavailable_message())
        return result.config

    def frontend_config(self) -> FrontendConfig:
        return build_frontend_config(self.get_config())

    def instance_rules(self) -> List[InstanceRule]:
        return build_instance_rules(self.get_config())


config_service = ConfigService()


def get_config() -> GathioConfig:
    return config_service.get_config()


def frontend_config() -> FrontendConfig:
    return config_service.frontend_config()


def instance_rules() -> List[InstanceRule]:
    return config_service.instance_rules()
