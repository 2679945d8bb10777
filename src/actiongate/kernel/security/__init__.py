"""Kernel security – AuthToken, ACL store, audit log, authorization gate."""
from actiongate.kernel.security.token import AuthToken
from actiongate.kernel.security.acl import WILDCARD, AccessControlList, AccessControlStore, AclState
from actiongate.kernel.security.audit import AuditLog, AuditRecord, FileAuditLog, InMemoryAuditLog
from actiongate.kernel.security.gate import AuthorizationGate

__all__ = [
    "WILDCARD",
    "AccessControlList",
    "AccessControlStore",
    "AclState",
    "AuditLog",
    "AuditRecord",
    "AuthToken",
    "AuthorizationGate",
    "FileAuditLog",
    "InMemoryAuditLog",
]
