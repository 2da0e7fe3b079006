from blogdesk.repositories.user import (
    get_user_by_id,
    get_user_by_username,
    create_user,
)
from blogdesk.repositories.posts import (
    get_posts,
    get_post,
    create_post,
    update_post,
    delete_post,
)

__all__ = [
    # User repositories
    "get_user_by_id",
    "get_user_by_username",
    "create_user",
    # Post repositories
    "get_posts",
    "get_post",
    "create_post",
    "update_post",
    "delete_post",
]
