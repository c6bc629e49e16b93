"""Event persistence layer"""

from .audit_log import AuditLog

__all__ = ["AuditLog"]
