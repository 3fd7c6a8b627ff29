"""
Infrastructure modules for the payments dashboard.

Modules:
    logs: Logging utilities
    storage: Key/value storage backends
    clients: Per-browser client sessions and their registry
"""

from payments_ui.lib import logs, storage

__all__ = ["logs", "storage"]
