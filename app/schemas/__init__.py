from .user import (
	UserCreate,
	UserLogin,
	UserSummary,
	UserResponse,
	AuthFormResponse,
)
from .category import (
	CategoryInfo,
	HomeResponse,
)
from .comment import (
	CommentCreate,
	CommentResponse,
)
from .post import (
	PostBase,
	PostCreate,
	PostUpdate,
	PostResponse,
	PostDetailResponse,
	CategoryPageResponse,
	PostFormResponse,
	AdminPostListResponse,
)

__all__ = [
	# User
	"UserCreate",
	"UserLogin",
	"UserSummary",
	"UserResponse",
	"AuthFormResponse",
	# Category
	"CategoryInfo",
	"HomeResponse",
	# Comment
	"CommentCreate",
	"CommentResponse",
	# Post
	"PostBase",
	"PostCreate",
	"PostUpdate",
	"PostResponse",
	"PostDetailResponse",
	"CategoryPageResponse",
	"PostFormResponse",
	"AdminPostListResponse",
]
