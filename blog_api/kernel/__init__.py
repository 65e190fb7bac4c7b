"""
Kernel Layer

Access control and query composition for posts and comments:
- Visibility policy (who may read)
- Ownership policy (who may mutate or delete)
- Query composer (filtered, ordered, paginated listings)
- Cascade rule (post deletion removes its comments atomically)

Policies are pure functions of (resource, caller identity); the caller
identity is always passed explicitly.
"""

from blog_api.kernel.models import Base, User, Post, Comment
from blog_api.kernel.results import ErrorKind, Ok, Err, Result, Page

__all__ = [
    # Models
    "Base",
    "User",
    "Post",
    "Comment",
    # Results
    "ErrorKind",
    "Ok",
    "Err",
    "Result",
    "Page",
]
