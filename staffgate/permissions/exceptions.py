"""
Staffgate Permissions - Exceptions
==================================
Structured errors for permission engine operations.

These are contract violations and authorization failures, NOT denials.
A missing grant is always a plain ``False`` from the resolver.
"""

from __future__ import annotations


class PermissionEngineError(Exception):
    """Base error for permission engine operations."""
    pass


class InvalidArgument(PermissionEngineError, ValueError):
    """Malformed module/action/grant input; rejected before any state change."""
    pass


class InvalidActionKind(InvalidArgument):
    """Action key outside the closed action vocabulary."""

    def __init__(self, action):
        self.action = action
        super().__init__(
            f"Unknown action kind '{action}'. Must be one of: "
            "all, create, read, update, delete, print, export, approve."
        )


class Unauthenticated(PermissionEngineError):
    """No credential, or the credential does not resolve to an identity."""

    def __init__(self, message: str = "Unauthorized: Missing or invalid token"):
        super().__init__(message)


class Unauthorized(PermissionEngineError):
    """Authenticated caller lacks ownership over the target agent."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class AgentNotFound(PermissionEngineError):
    """Target identity is unknown or is not an agent role."""

    def __init__(self, agent_id):
        self.agent_id = agent_id
        super().__init__("Agent not found")
