"""Unit tests for the visibility and ownership policies."""

from types import SimpleNamespace

from blog_api.kernel.identity.caller import CallerIdentity
from blog_api.kernel.models import Comment, Post
from blog_api.kernel.permissions import (
    can_delete,
    can_mutate,
    is_post_visible,
    is_visible,
    visible_posts_clause,
)

ALICE = CallerIdentity(id=1, name="Alice")
BOB = CallerIdentity(id=2, name="Bob")


class TestPostVisibility:
    """Tests for is_visible on posts."""

    def test_published_post_visible_to_anonymous(self):
        post = Post(id=1, owner_id=ALICE.id, published=True)

        assert is_visible(post, None) is True

    def test_draft_hidden_from_anonymous(self):
        post = Post(id=1, owner_id=ALICE.id, published=False)

        assert is_visible(post, None) is False

    def test_draft_visible_to_owner(self):
        post = Post(id=1, owner_id=ALICE.id, published=False)

        assert is_visible(post, ALICE) is True

    def test_draft_hidden_from_other_user(self):
        post = Post(id=1, owner_id=ALICE.id, published=False)

        assert is_visible(post, BOB) is False

    def test_published_post_visible_to_everyone(self):
        post = Post(id=1, owner_id=ALICE.id, published=True)

        for identity in (None, ALICE, BOB):
            assert is_visible(post, identity) is True

    def test_works_on_plain_snapshots(self):
        """Any object with owner_id and published satisfies the policy."""
        snapshot = SimpleNamespace(owner_id=BOB.id, published=False)

        assert is_post_visible(snapshot, BOB) is True
        assert is_post_visible(snapshot, ALICE) is False


class TestCommentVisibility:
    """Comments carry no publication gate of their own."""

    def test_comment_always_visible(self):
        comment = Comment(id=1, post_id=1, owner_id=BOB.id, content="hi")

        assert is_visible(comment, None) is True
        assert is_visible(comment, ALICE) is True


class TestVisibilityClause:
    """Tests for the SQL rendition of the post policy."""

    def test_anonymous_clause_only_checks_published(self):
        sql = str(visible_posts_clause(None))

        assert "published" in sql
        assert "owner_id" not in sql

    def test_authenticated_clause_includes_ownership(self):
        clause = visible_posts_clause(ALICE)
        sql = str(clause)

        assert "published" in sql
        assert "owner_id" in sql
        assert ALICE.id in clause.compile().params.values()


class TestOwnership:
    """Tests for can_mutate and can_delete."""

    def test_anonymous_cannot_mutate(self):
        post = Post(id=1, owner_id=ALICE.id, published=True)

        assert can_mutate(post, None) is False
        assert can_delete(post, None) is False

    def test_owner_can_mutate(self):
        post = Post(id=1, owner_id=ALICE.id, published=False)

        assert can_mutate(post, ALICE) is True
        assert can_delete(post, ALICE) is True

    def test_other_user_cannot_mutate(self):
        post = Post(id=1, owner_id=ALICE.id, published=True)

        assert can_mutate(post, BOB) is False
        assert can_delete(post, BOB) is False

    def test_post_owner_has_no_rights_over_comments(self):
        """A comment is checked against its own owner, not the post's."""
        comment = Comment(id=5, post_id=1, owner_id=BOB.id, content="hi")

        assert can_mutate(comment, ALICE) is False
        assert can_delete(comment, ALICE) is False
        assert can_mutate(comment, BOB) is True

    def test_identity_with_same_id_is_owner(self):
        """Ownership compares ids only."""
        post = Post(id=1, owner_id=ALICE.id, published=True)
        same_user = CallerIdentity(id=ALICE.id, name="Renamed")

        assert can_mutate(post, same_user) is True
