"""
actiongate – action dispatch and ACL authorization for RPC workers.

Import path convention::

    from actiongate.application.dispatch import ActionHandler, action
    from actiongate.kernel.errors import DispatchError
    from actiongate.kernel.security import AccessControlStore, AuthorizationGate
    from actiongate.config import Context, DispatchSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
