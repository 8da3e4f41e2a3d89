"""Infrastructure modules for the directory membership helpers.

Centralized infrastructure components:
- configuration: Settings management (Settings and per-integration settings)
- logging: Structured logging setup and operation context binding
- operations: Operation results and error classification
- clients: Vendor API clients (Google Workspace, Microsoft Graph)
- services: Application-scoped providers (get_settings, get_membership_service)

Subpackages are imported explicitly by callers; nothing is loaded eagerly here.
"""
