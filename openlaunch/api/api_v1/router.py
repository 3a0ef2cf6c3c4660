from fastapi import APIRouter

from openlaunch.api.api_v1.endpoints import articles, comments, leaderboard, notifications, profiles, projects, social

api_router = APIRouter()
api_router.include_router(profiles.router, tags=["profiles"])
api_router.include_router(social.router, tags=["social"])
api_router.include_router(projects.router, tags=["projects"])
api_router.include_router(articles.router, tags=["articles"])
api_router.include_router(comments.router, tags=["comments"])
api_router.include_router(notifications.router, tags=["notifications"])
api_router.include_router(leaderboard.router, tags=["leaderboard"])
