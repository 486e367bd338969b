"""Core package for citeguard: contracts, verdicts, errors and settings.

Downstream code imports the submodules directly, e.g.:
    from citeguard.core.settings import load_settings, Settings, get_logger
"""

from __future__ import annotations

__all__ = ["__doc__"]
