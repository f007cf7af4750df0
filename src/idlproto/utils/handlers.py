"""Handler-inclusion policy.

The emitter asks an inclusion predicate whether each role, and each operation
of an included role, should be written. Any callable matching
``IncludePredicate`` can be injected; HandlerFilter is the default.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..config import EmitterConfig
from ..models import OperationDefinition, RoleDefinition

IncludePredicate = Callable[[RoleDefinition, Optional[OperationDefinition]], bool]

# Annotation that hides a role or operation from generated code
NOCODE = "nocode"


class HandlerFilter:
    """Default inclusion predicate driven by an EmitterConfig.

    A role is excluded when it is annotated ``@nocode``, listed in
    ``exclude_roles``, or missing from a non-empty ``include_roles``.
    An operation is included when its role is and it is not ``@nocode``.

    Example:
        >>> include = HandlerFilter(EmitterConfig(exclude_roles=("Admin",)))
        >>> include(admin_role)
        False
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self.config = config or EmitterConfig()

    def __call__(
        self, role: RoleDefinition, operation: OperationDefinition | None = None
    ) -> bool:
        if not self._include_role(role):
            return False
        if operation is not None and operation.annotation(NOCODE) is not None:
            return False
        return True

    def _include_role(self, role: RoleDefinition) -> bool:
        if role.annotation(NOCODE) is not None:
            return False
        if role.name in self.config.exclude_roles:
            return False
        if self.config.include_roles and role.name not in self.config.include_roles:
            return False
        return True
