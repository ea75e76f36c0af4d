"""
CLI runner module.

Provides commands:
- init-config: Write a default config file
- login / logout / status: Manage the persisted session
- transactions: Paginated transaction listing
- categories / shortcuts: Cost lookups
- notifications, equity, analytics: Read-only reports
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
