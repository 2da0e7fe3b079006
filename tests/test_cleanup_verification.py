"""
Verify that each test starts from an empty database.
"""

from sqlalchemy import text

from blogdesk.extensions import db
from blogdesk.models import User, Post


class TestDatabaseCleanup:
    """Test cases to verify database cleanup after tests."""

    def test_database_starts_empty(self, app):
        user_count = db.session.execute(text("SELECT COUNT(*) FROM users")).scalar()
        post_count = db.session.execute(text("SELECT COUNT(*) FROM posts")).scalar()

        assert user_count == 0, f"Users table should be empty, found {user_count} records"
        assert post_count == 0, f"Posts table should be empty, found {post_count} records"

    def test_create_data(self, app):
        db.session.add(User(username='cleanup_test_user', password_hash='test_hash'))
        db.session.add(Post(title='Leftover', slug='leftover', markdown='body'))
        db.session.commit()

        assert db.session.execute(text("SELECT COUNT(*) FROM posts")).scalar() == 1

    def test_database_cleaned_after_previous_test(self, app):
        assert db.session.execute(db.select(User).filter_by(username='cleanup_test_user')).first() is None
        assert db.session.execute(db.select(Post).filter_by(slug='leftover')).first() is None
