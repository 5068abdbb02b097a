"""Post domain service."""

import logfire

from blogcraft.domain.error import BackendError, NotFoundError
from blogcraft.domain.model.post import Post
from blogcraft.domain.repository import PostRepository, ViewIntent
from blogcraft.domain.value import PostId, Slug

from .base import Service
from .query_builder import QueryBuilder
from .view_assembler import ViewAssembler


class PostService(Service):
    """Domain service for public post reads.

    Reads never raise on backend failure: the failure is logged with the
    filter that triggered it and the caller gets an empty list or None.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        query_builder: QueryBuilder,
        view_assembler: ViewAssembler,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            query_builder: Builds filters from view intents
            view_assembler: Shapes rows for readers
        """
        self.post_repository = post_repository
        self.query_builder = query_builder
        self.view_assembler = view_assembler

    async def list_posts(self, intent: ViewIntent) -> list[Post]:
        """List published posts for a view.

        Args:
            intent: All published, by category or by tag, with pagination

        Returns:
            Posts ordered newest first, empty on backend failure
        """
        with logfire.span(
            "post_service.list_posts",
            kind=intent.kind.value,
            slug=intent.slug,
            limit=intent.limit,
            offset=intent.offset,
        ):
            query = self.query_builder.build(intent)
            try:
                records = await self.post_repository.find_many(query)
            except BackendError as e:
                logfire.error(
                    "Post listing failed",
                    operation=e.operation,
                    error=e.detail,
                    filter=query.describe(),
                )
                return []

            posts = [self.view_assembler.assemble(record) for record in records]
            logfire.info("Posts listed", kind=intent.kind.value, count=len(posts))
            return posts

    async def get_post(self, intent: ViewIntent) -> Post | None:
        """Get a single published post.

        Args:
            intent: by-id or by-slug view

        Returns:
            Post if found and visible, None otherwise
        """
        with logfire.span(
            "post_service.get_post",
            kind=intent.kind.value,
            slug=intent.slug,
            post_id=intent.post_id,
        ):
            query = self.query_builder.build(intent)
            try:
                record = await self.post_repository.find_one(query)
            except BackendError as e:
                logfire.error(
                    "Post lookup failed",
                    operation=e.operation,
                    error=e.detail,
                    filter=query.describe(),
                )
                return None

            if not record:
                logfire.warn("Post not found", filter=query.describe())
                return None

            logfire.info("Post found", post_id=record.id, slug=record.slug)
            return self.view_assembler.assemble(record)

    async def get_post_by_slug(self, slug: str) -> Post | None:
        """Get a published post by slug.

        A segment that cannot be a slug never reaches the repository.
        """
        parsed = Slug.parse(slug)
        if parsed is None:
            logfire.warn("Malformed post slug", slug=slug)
            return None
        return await self.get_post(ViewIntent.by_slug(parsed))

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a published post by ID."""
        return await self.get_post(ViewIntent.by_id(post_id))

    async def require_published(self, post_id: PostId) -> Post:
        """Get a published post for a write that depends on it.

        Unlike the reads above this does not degrade: a backend failure
        propagates so the write can be refused as unavailable rather than
        as missing.

        Raises:
            NotFoundError: If no published post has this ID
            BackendError: If the lookup fails
        """
        query = self.query_builder.build(ViewIntent.by_id(post_id))
        with logfire.span("post_service.require_published", post_id=post_id):
            record = await self.post_repository.find_one(query)
            if not record:
                raise NotFoundError("post", str(post_id))
            return self.view_assembler.assemble(record)
