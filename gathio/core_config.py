"""
Core Settings Definitions.

This module defines the process-level settings of the service using `yacs`.
These are not the instance configuration (that lives in `config.toml` and is
loaded by `gathio.services.config_service`); they describe where to find it
and where the process writes its own files.

Settings are organized into sections:
- SYSTEM: Global paths and environment settings.
"""

import os
from yacs.config import CfgNode as CN  # type: ignore[import-untyped]


_C = CN()

# -----------------------------------------------------------------------------
# System Settings
# -----------------------------------------------------------------------------
_C.SYSTEM = CN()

# Instance configuration file, resolved against the working directory
_C.SYSTEM.CONFIG_PATH = os.environ.get(
    "GATHIO_CONFIG_PATH",
    os.path.join(".", "config", "config.toml"),
)

# Example file operators are told to copy when the config file is unusable
_C.SYSTEM.EXAMPLE_CONFIG_NAME = "config-example.toml"

# Data directory for process-owned files (logs)
_C.SYSTEM.DATA_DIR = os.environ.get("GATHIO_DATA_DIR", os.path.join(".", "data"))

# Build version environment variable and its fallback
_C.SYSTEM.VERSION_ENV = "GATHIO_VERSION"
_C.SYSTEM.UNKNOWN_VERSION = "unknown"


def get_cfg_defaults():
    """
    Get a yacs CfgNode object with default values.
    Returns a clone so callers never mutate the module defaults.
    """
    return _C.clone()
