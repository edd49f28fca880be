"""
Repository layer - credential persistence and the command handler registry.

handler_registry is imported directly (idracctl.repositories.handler_registry)
because it depends on the handlers package, which depends on this package.
"""

from .credential_store import CredentialStore, CREDENTIALS_FILE

__all__ = ['CredentialStore', 'CREDENTIALS_FILE']
