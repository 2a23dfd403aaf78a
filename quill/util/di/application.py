"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.auth import SigninUseCase, SignupUseCase
from quill.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    ListBlogsUseCase,
    UpdateBlogUseCase,
)
from quill.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from quill.application.usecase.like import GetReactionsUseCase, ReactUseCase
from quill.application.usecase.user import GetProfileUseCase, UpdateProfileUseCase
from quill.domain.service import (
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    OwnershipGuard,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide
    def get_signin_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SigninUseCase:
        """Provide signin use case."""
        return SigninUseCase(user_service=user_service, jwt_service=jwt_service)

    # User use cases
    @provide
    def get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    # Blog use cases
    @provide
    def get_create_blog_use_case(self, blog_service: BlogService) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(blog_service=blog_service)

    @provide
    def get_get_blog_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(blog_service=blog_service, user_service=user_service)

    @provide
    def get_list_blogs_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(blog_service=blog_service, user_service=user_service)

    @provide
    def get_update_blog_use_case(
        self, blog_service: BlogService, ownership_guard: OwnershipGuard
    ) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(
            blog_service=blog_service, ownership_guard=ownership_guard
        )

    @provide
    def get_delete_blog_use_case(
        self, blog_service: BlogService, ownership_guard: OwnershipGuard
    ) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(
            blog_service=blog_service, ownership_guard=ownership_guard
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            user_service=user_service,
        )

    @provide
    def get_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, ownership_guard: OwnershipGuard
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, ownership_guard=ownership_guard
        )

    # Like use cases
    @provide
    def get_react_use_case(
        self, like_service: LikeService, blog_service: BlogService
    ) -> ReactUseCase:
        """Provide react use case."""
        return ReactUseCase(like_service=like_service, blog_service=blog_service)

    @provide
    def get_reactions_use_case(self, like_service: LikeService) -> GetReactionsUseCase:
        """Provide get reactions use case."""
        return GetReactionsUseCase(like_service=like_service)
