"""
Orchestration layer: services and the write path state machine.
"""

from blog_api.orchestration.state_machine import (
    WriteAction,
    WriteRequest,
    WriteState,
    can_transition,
)
from blog_api.orchestration.post_service import PostService
from blog_api.orchestration.comment_service import CommentService

__all__ = [
    "WriteAction",
    "WriteRequest",
    "WriteState",
    "can_transition",
    "PostService",
    "CommentService",
]
