from openlaunch.api.api_v1.endpoints import articles, comments, leaderboard, notifications, profiles, projects

__all__ = [
    "articles",
    "comments",
    "leaderboard",
    "notifications",
    "profiles",
    "projects",
]
