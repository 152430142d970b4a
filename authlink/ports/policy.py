"""
Absence policies - how an operation behaves when its target does not exist.

Every port operation declares exactly one policy:

- HARD_FAIL: the caller only invokes the operation when it believes the
  entity exists; absence raises NotFoundError / PersistenceError.
- SOFT_NULL: absence is a normal outcome; reads return None, deletes are
  silent no-ops and resolve-or-create falls through to creation.
- TOLERANT: the operation never raises for a missing target and always
  returns a TolerantResult acknowledgment.
"""

from enum import Enum
from typing import Any, Callable, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

POLICY_ATTR = "__absence_policy__"


class AbsencePolicy(Enum):
    """Absence handling categories."""
    HARD_FAIL = "hard_fail"
    SOFT_NULL = "soft_null"
    TOLERANT = "tolerant"


def absence_policy(policy: AbsencePolicy) -> Callable[[F], F]:
    """Tag a port method with its absence policy."""
    def decorate(func: F) -> F:
        setattr(func, POLICY_ATTR, policy)
        return func
    return decorate


def policy_of(obj: Any, name: str) -> Optional[AbsencePolicy]:
    """
    Look up the policy declared for ``name`` anywhere in the class hierarchy.

    Implementations override port methods without repeating the tag, so the
    declaration on the port is found through the MRO.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    for klass in cls.__mro__:
        member = vars(klass).get(name)
        if member is not None and hasattr(member, POLICY_ATTR):
            return getattr(member, POLICY_ATTR)
    return None
