from openlaunch.models.entities import (
    NOTIFICATION_TYPES,
    PROJECT_STATUSES,
    PUBLIC_PROJECT_STATUSES,
    Article,
    Base,
    Comment,
    CommentUpvote,
    Follow,
    Notification,
    Profile,
    Project,
    ProjectUpvote,
)

__all__ = [
    "NOTIFICATION_TYPES",
    "PROJECT_STATUSES",
    "PUBLIC_PROJECT_STATUSES",
    "Article",
    "Base",
    "Comment",
    "CommentUpvote",
    "Follow",
    "Notification",
    "Profile",
    "Project",
    "ProjectUpvote",
]
