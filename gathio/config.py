"""
Settings Loader.

This module initializes the global settings object (`settings`) used throughout
the application. It leverages `yacs` to provide a hierarchical, dot-accessible
structure defined in `gathio.core_config`.

Usage:
    from gathio.config import settings
    print(settings.SYSTEM.CONFIG_PATH)
"""

from gathio.core_config import get_cfg_defaults

settings = get_cfg_defaults()

# Freeze to prevent accidental changes during runtime.
settings.freeze()
