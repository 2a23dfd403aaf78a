"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings
from quill.domain.repository import (
    BlogRepository,
    CommentRepository,
    LikeRepository,
    UserRepository,
)
from quill.domain.service import (
    BlogService,
    CommentService,
    IdentityResolver,
    JWTService,
    LikeService,
    OwnershipGuard,
    PasswordService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Stateless crypto services are APP-scoped and built once from settings.
    Services that wrap repositories are REQUEST-scoped to align with the
    repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_identity_resolver(self, jwt_service: JWTService) -> IdentityResolver:
        """Provide identity resolver used by the request middleware."""
        return IdentityResolver(jwt_service=jwt_service)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_service: PasswordService
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_service=password_service
        )

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_ownership_guard(
        self,
        blog_repository: BlogRepository,
        comment_repository: CommentRepository,
    ) -> OwnershipGuard:
        """Provide ownership guard."""
        return OwnershipGuard(
            blog_repository=blog_repository, comment_repository=comment_repository
        )
