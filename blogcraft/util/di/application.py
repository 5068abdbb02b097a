"""Application layer DI providers."""

from dishka import Scope, provide

from blogcraft.application.usecase.comment import (
    GetCommentsUseCase,
    SubmitCommentUseCase,
)
from blogcraft.application.usecase.post import (
    GetPostUseCase,
    ListPostsUseCase,
    RecordViewUseCase,
)
from blogcraft.application.usecase.search import SearchPostsUseCase
from blogcraft.application.usecase.seo import BuildRobotsTxtUseCase, BuildSitemapUseCase
from blogcraft.application.usecase.taxonomy import (
    GetCategoryUseCase,
    GetTagUseCase,
    ListCategoriesUseCase,
    ListCategoryPostsUseCase,
    ListTagPostsUseCase,
    ListTagsUseCase,
)
from blogcraft.config import Settings
from blogcraft.domain.service import (
    CommentService,
    PostService,
    QueryBuilder,
    SearchService,
    TaxonomyService,
    ViewCounter,
)
from blogcraft.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, query_builder: QueryBuilder
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, query_builder=query_builder)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_record_view_use_case(self, view_counter: ViewCounter) -> RecordViewUseCase:
        """Provide record view use case."""
        return RecordViewUseCase(view_counter=view_counter)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_submit_comment_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # Search use cases
    @provide(scope=Scope.REQUEST)
    def get_search_posts_use_case(
        self, search_service: SearchService
    ) -> SearchPostsUseCase:
        """Provide search posts use case."""
        return SearchPostsUseCase(search_service=search_service)

    # Taxonomy use cases
    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_get_category_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> GetCategoryUseCase:
        """Provide get category use case."""
        return GetCategoryUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_list_category_posts_use_case(
        self,
        taxonomy_service: TaxonomyService,
        post_service: PostService,
        query_builder: QueryBuilder,
    ) -> ListCategoryPostsUseCase:
        """Provide category posts use case."""
        return ListCategoryPostsUseCase(
            taxonomy_service=taxonomy_service,
            post_service=post_service,
            query_builder=query_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, taxonomy_service: TaxonomyService
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_get_tag_use_case(self, taxonomy_service: TaxonomyService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(taxonomy_service=taxonomy_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tag_posts_use_case(
        self,
        taxonomy_service: TaxonomyService,
        post_service: PostService,
        query_builder: QueryBuilder,
    ) -> ListTagPostsUseCase:
        """Provide tag posts use case."""
        return ListTagPostsUseCase(
            taxonomy_service=taxonomy_service,
            post_service=post_service,
            query_builder=query_builder,
        )

    # SEO use cases
    @provide(scope=Scope.REQUEST)
    def get_build_sitemap_use_case(
        self,
        taxonomy_service: TaxonomyService,
        post_service: PostService,
        query_builder: QueryBuilder,
        settings: Settings,
    ) -> BuildSitemapUseCase:
        """Provide sitemap use case."""
        return BuildSitemapUseCase(
            taxonomy_service=taxonomy_service,
            post_service=post_service,
            query_builder=query_builder,
            settings=settings,
        )

    @provide(scope=Scope.APP)
    def get_build_robots_txt_use_case(self, settings: Settings) -> BuildRobotsTxtUseCase:
        """Provide robots.txt use case."""
        return BuildRobotsTxtUseCase(settings=settings)
