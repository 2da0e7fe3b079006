"""Tests for database models."""

import pytest
from sqlalchemy.exc import IntegrityError

from blogdesk.extensions import db
from blogdesk.models import User, Post
from blogdesk.utils.crypto import hash_password


class TestUser:
    """Test cases for User model."""

    def test_user_creation_defaults(self, app):
        user = User(username='newuser', password_hash=hash_password('password123'))
        db.session.add(user)
        db.session.commit()

        assert user.id is not None
        assert user.is_admin is False
        assert user.created_at is not None
        assert user.last_login is None
        assert user.get_id() == str(user.id)

    def test_username_unique(self, app):
        db.session.add(User(username='dup', password_hash='x'))
        db.session.commit()

        db.session.add(User(username='dup', password_hash='y'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


class TestPost:
    """Test cases for Post model."""

    def test_post_creation(self, app):
        post = Post(title='Hello', slug='hello', markdown='# Hi')
        db.session.add(post)
        db.session.commit()

        assert post.id is not None
        assert post.created_at is not None
        assert post.updated_at is None
        assert repr(post) == "<Post 'hello'>"

    def test_slug_unique(self, app, test_post):
        db.session.add(Post(title='Other', slug='hello', markdown='body'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()

    def test_markdown_required(self, app):
        db.session.add(Post(title='No body', slug='no-body'))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()
