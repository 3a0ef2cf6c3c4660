from openlaunch.schemas.article import ArticleOut, ArticleSortBy, CreateArticleRequest
from openlaunch.schemas.comment import CommentOut, CommentSortBy, CreateCommentRequest
from openlaunch.schemas.common import CursorPage, KeysetCursor, OffsetPage, PaginationInfoOut
from openlaunch.schemas.leaderboard import LeaderboardEntry, LeaderboardType
from openlaunch.schemas.notification import MarkReadResponse, NotificationOut, UnreadCountOut
from openlaunch.schemas.profile import CreateProfileRequest, ProfileOut, ProfilePreview
from openlaunch.schemas.project import CreateProjectRequest, ProjectOut, ProjectSortBy, ProjectStatus
from openlaunch.schemas.social import ActorRequest, FollowResult, FollowStatusOut, UpvoteResult

__all__ = [
    "ArticleOut",
    "ArticleSortBy",
    "CreateArticleRequest",
    "CommentOut",
    "CommentSortBy",
    "CreateCommentRequest",
    "CursorPage",
    "KeysetCursor",
    "OffsetPage",
    "PaginationInfoOut",
    "LeaderboardEntry",
    "LeaderboardType",
    "MarkReadResponse",
    "NotificationOut",
    "UnreadCountOut",
    "CreateProfileRequest",
    "ProfileOut",
    "ProfilePreview",
    "CreateProjectRequest",
    "ProjectOut",
    "ProjectSortBy",
    "ProjectStatus",
    "ActorRequest",
    "FollowResult",
    "FollowStatusOut",
    "UpvoteResult",
]
