"""Compiled-in baseline for the instance configuration."""

import copy
from typing import Any, Dict


_DEFAULT_CONFIG: Dict[str, Any] = {
    "general": {
        "domain": "localhost:3000",
        "email": "contact@example.com",
        "port": "3000",
        "site_name": "gathio",
        "is_federated": True,
        "delete_after_days": 7,
        "email_logo_url": "",
        "show_public_event_list": False,
        "show_kofi": False,
        "mail_service": "nodemailer",
        "creator_email_addresses": [],
    },
    "database": {
        "mongodb_url": "mongodb://localhost:27017/gathio",
    },
}


def get_default_config() -> Dict[str, Any]:
    """Return a deep copy of the defaults; the module baseline is never handed out."""
    return copy.deepcopy(_DEFAULT_CONFIG)
