"""
Write path state machine for posts and comments.

Every create, update or delete request moves through
REQUESTED -> AUTHORIZED_CHECK -> {APPLIED | REJECTED}. Terminal states are
final for the request; there are no retries at this layer.
"""

from enum import Enum
from typing import Dict, List, Optional, Set

from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.permissions.ownership import Owned, can_delete, can_mutate
from blog_api.kernel.results import Err, forbidden, not_found, unauthenticated
from blog_api.logging_config import get_logger

logger = get_logger(__name__)


class WriteState(str, Enum):
    """Write request lifecycle state."""
    REQUESTED = "requested"
    AUTHORIZED_CHECK = "authorized_check"
    APPLIED = "applied"
    REJECTED = "rejected"


class WriteAction(str, Enum):
    """Kind of mutation requested."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


_TRANSITIONS: Dict[WriteState, Set[WriteState]] = {
    WriteState.REQUESTED: {WriteState.AUTHORIZED_CHECK},
    WriteState.AUTHORIZED_CHECK: {WriteState.APPLIED, WriteState.REJECTED},
    WriteState.APPLIED: set(),
    WriteState.REJECTED: set(),
}

TERMINAL_STATES = frozenset((WriteState.APPLIED, WriteState.REJECTED))


def can_transition(from_state: WriteState, to_state: WriteState) -> bool:
    """Check whether from_state -> to_state is a legal move."""
    return to_state in _TRANSITIONS[from_state]


class WriteRequest:
    """
    Tracks one write through the write path.

    Usage:
        request = WriteRequest(WriteAction.UPDATE, "post", identity, post_id)
        error = request.authorize(post)
        if error:
            return error
        ...perform the mutation...
        request.apply()
    """

    def __init__(
        self,
        action: WriteAction,
        resource_type: str,
        identity: Optional[CallerIdentity],
        resource_id: Optional[int] = None,
    ):
        self.action = action
        self.resource_type = resource_type
        self.identity = identity
        self.resource_id = resource_id
        self.state = WriteState.REQUESTED
        self.history: List[WriteState] = [self.state]
        self.error: Optional[Err] = None

    def _move(self, to_state: WriteState) -> None:
        if not can_transition(self.state, to_state):
            raise RuntimeError(
                f"Invalid write transition: {self.state.value} -> {to_state.value}"
            )
        self.state = to_state
        self.history.append(to_state)

    def _log_extra(self) -> dict:
        return {
            "action": self.action.value,
            "resource_type": self.resource_type,
            "resource_id": self.resource_id,
            "user_id": self.identity.id if self.identity else None,
        }

    def authorize(self, resource: Optional[Owned] = None) -> Optional[Err]:
        """
        Evaluate the ownership gate.

        Create needs only an identity. Update and delete need the fetched
        resource and an identity that owns it.

        Returns:
            None when authorized, otherwise the rejection error
        """
        self._move(WriteState.AUTHORIZED_CHECK)

        if self.identity is None:
            return self.reject(unauthenticated())

        if self.action is WriteAction.CREATE:
            return None

        if resource is None:
            return self.reject(not_found(self.resource_type))

        allowed = (
            can_delete(resource, self.identity)
            if self.action is WriteAction.DELETE
            else can_mutate(resource, self.identity)
        )
        if not allowed:
            return self.reject(forbidden(self.action.value, self.resource_type))
        return None

    def reject(self, error: Err) -> Err:
        """Move to REJECTED and remember why."""
        self._move(WriteState.REJECTED)
        self.error = error
        logger.warning(
            "Write rejected: %s", error.message,
            extra={**self._log_extra(), "error_kind": error.kind.value},
        )
        return error

    def apply(self) -> None:
        """Mark the mutation as applied."""
        self._move(WriteState.APPLIED)
        logger.info("Write applied", extra=self._log_extra())
