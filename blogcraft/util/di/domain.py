"""Domain layer DI providers."""

from dishka import Scope, provide

from blogcraft.config import ContentSettings, SearchSettings
from blogcraft.domain.repository import (
    CategoryRepository,
    CommentRepository,
    PostRepository,
    TagRepository,
)
from blogcraft.domain.service import (
    CommentService,
    PostService,
    QueryBuilder,
    SearchService,
    TaxonomyService,
    ViewAssembler,
    ViewCounter,
)
from blogcraft.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services that hold a repository are REQUEST-scoped to align with the
    repository/session lifecycle. The stateless helpers are APP-scoped.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_query_builder(self, content_settings: ContentSettings) -> QueryBuilder:
        """Provide query builder."""
        return QueryBuilder(content_settings=content_settings)

    @provide(scope=Scope.APP)
    def get_view_assembler(self, content_settings: ContentSettings) -> ViewAssembler:
        """Provide view assembler."""
        return ViewAssembler(excerpt_length=content_settings.excerpt_length)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        query_builder: QueryBuilder,
        view_assembler: ViewAssembler,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            query_builder=query_builder,
            view_assembler=view_assembler,
        )

    @provide
    def get_search_service(
        self,
        post_repository: PostRepository,
        view_assembler: ViewAssembler,
        search_settings: SearchSettings,
    ) -> SearchService:
        """Provide search domain service."""
        return SearchService(
            post_repository=post_repository,
            view_assembler=view_assembler,
            search_settings=search_settings,
        )

    @provide
    def get_view_counter(self, post_repository: PostRepository) -> ViewCounter:
        """Provide view counter."""
        return ViewCounter(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, content_settings: ContentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, content_settings=content_settings
        )

    @provide
    def get_taxonomy_service(
        self, category_repository: CategoryRepository, tag_repository: TagRepository
    ) -> TaxonomyService:
        """Provide taxonomy domain service."""
        return TaxonomyService(
            category_repository=category_repository, tag_repository=tag_repository
        )
