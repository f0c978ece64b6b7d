"""Interactive development-environment installer.

Core design goals:
- Ordered, fail-fast provisioning steps
- Idempotent steps, so an interrupted run can simply be repeated
- Strict all-or-nothing menu selection
- One session log per run
"""

__all__ = []
