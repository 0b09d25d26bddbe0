from app.schemas.base import CamelModel, OkResponse
from app.schemas.user import (
    UserCreate,
    UserResponse,
    UserSummary,
    PrivacySettings,
    DeleteAccountRequest,
    Token,
    TokenRefresh,
    LoginRequest,
)
from app.schemas.follow import (
    FollowAction,
    FollowActionRequest,
    FollowStateResponse,
    FollowSummary,
    RespondRequest,
    RespondResponse,
)
from app.schemas.notification import NotificationResponse, UnreadCountResponse, MarkedResponse
from app.schemas.post import PostCreate, PostListItem, PostResponse, PostPreviewResponse
