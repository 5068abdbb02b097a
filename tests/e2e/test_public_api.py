"""End-to-end tests for the public blog API.

The app runs against the in-memory content store; each test seeds the
store it needs and talks to the API over HTTP.
"""

import pytest

from blogcraft.domain.value import CommentStatus, PostStatus
from tests.conftest import make_category, make_comment, make_post, make_tag
from tests.harness import create_api_fixture

api = create_api_fixture()


class TestPostEndpoints:
    """Listing, lookup and view counting."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first(self, api):
        api.store.add_post(make_post(1, "Older"))
        api.store.add_post(make_post(2, "Newer"))
        api.store.add_post(make_post(3, "Unfinished", status=PostStatus.DRAFT))

        response = await api.client.get("/posts", params={"limit": 500})

        assert response.status_code == 200
        body = response.json()
        assert [p["slug"] for p in body["posts"]] == ["newer", "older"]
        assert body["limit"] == 100
        assert body["offset"] == 0

    @pytest.mark.asyncio
    async def test_list_posts_by_category(self, api):
        science = api.store.add_category(make_category(1, "Science"))
        api.store.add_post(make_post(1, "Atoms", category=science))
        api.store.add_post(make_post(2, "Poems"))

        response = await api.client.get("/categories/science/posts")

        assert response.status_code == 200
        body = response.json()
        assert body["category"]["slug"] == "science"
        assert [p["slug"] for p in body["posts"]] == ["atoms"]

    @pytest.mark.asyncio
    async def test_get_post_by_slug(self, api):
        rust = api.store.add_tag(make_tag(1, "Rust"))
        api.store.add_post(make_post(1, "Ownership", tags=[rust]))

        response = await api.client.get("/posts/ownership")

        assert response.status_code == 200
        post = response.json()["post"]
        assert post["id"] == 1
        assert post["tags"][0]["slug"] == "rust"
        assert post["views"] == 0

    @pytest.mark.asyncio
    async def test_draft_post_is_not_found(self, api):
        api.store.add_post(make_post(1, "Secret", status=PostStatus.DRAFT))

        by_slug = await api.client.get("/posts/secret")
        by_id = await api.client.get("/posts/id/1")

        assert by_slug.status_code == 404
        assert by_id.status_code == 404

    @pytest.mark.asyncio
    async def test_slug_lookup_ignores_case_and_rejects_malformed(self, api):
        api.store.add_post(make_post(1, "Ownership"))

        upper = await api.client.get("/posts/OWNERSHIP")
        malformed = await api.client.get("/posts/own_ership")

        assert upper.status_code == 200
        assert upper.json()["post"]["id"] == 1
        assert malformed.status_code == 404

    @pytest.mark.asyncio
    async def test_get_post_by_id(self, api):
        api.store.add_post(make_post(4, "Four"))

        response = await api.client.get("/posts/id/4")

        assert response.status_code == 200
        assert response.json()["post"]["slug"] == "four"

    @pytest.mark.asyncio
    async def test_record_view_is_accepted_and_counted(self, api):
        api.store.add_post(make_post(1, "Popular", views=41))

        response = await api.client.post("/posts/1/views")

        assert response.status_code == 202
        assert response.json() == {"post_id": 1, "status": "accepted"}
        assert api.store.posts[1].views == 42


class TestCommentEndpoints:
    """Reading and submitting comments."""

    @pytest.mark.asyncio
    async def test_only_approved_comments_listed(self, api):
        api.store.add_post(make_post(1, "Essay"))
        api.store.add_comment(make_comment(1, 1, "Visible"))
        api.store.add_comment(
            make_comment(2, 1, "Waiting", status=CommentStatus.PENDING)
        )

        response = await api.client.get("/posts/1/comments")

        assert response.status_code == 200
        comments = response.json()["comments"]
        assert [c["content"] for c in comments] == ["Visible"]
        assert "author_email" not in comments[0]

    @pytest.mark.asyncio
    async def test_submit_comment(self, api):
        api.store.add_post(make_post(1, "Essay"))

        response = await api.client.post(
            "/posts/1/comments",
            json={
                "author_name": "Ada",
                "author_email": "ada@example.com",
                "content": "Lovely post",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert api.store.comments[body["comment_id"]].author_name == "Ada"

    @pytest.mark.asyncio
    async def test_invalid_email_names_field(self, api):
        api.store.add_post(make_post(1, "Essay"))

        response = await api.client.post(
            "/posts/1/comments",
            json={"author_name": "Ada", "author_email": "nope", "content": "Hi"},
        )

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "author_email"
        assert api.store.comments == {}

    @pytest.mark.asyncio
    async def test_comment_on_missing_post(self, api):
        response = await api.client.post(
            "/posts/99/comments",
            json={
                "author_name": "Ada",
                "author_email": "ada@example.com",
                "content": "Hello?",
            },
        )

        assert response.status_code == 404


class TestTaxonomyEndpoints:
    """Categories and tags."""

    @pytest.mark.asyncio
    async def test_list_categories_and_tags(self, api):
        api.store.add_category(make_category(1, "Science", posts_count=3))
        api.store.add_category(make_category(2, "Hidden", is_active=False))
        api.store.add_tag(make_tag(1, "Rust", posts_count=5))
        api.store.add_tag(make_tag(2, "Go", posts_count=9))

        categories = await api.client.get("/categories")
        tags = await api.client.get("/tags")

        assert [c["slug"] for c in categories.json()["categories"]] == ["science"]
        assert [t["slug"] for t in tags.json()["tags"]] == ["go", "rust"]

    @pytest.mark.asyncio
    async def test_unknown_taxonomy_is_not_found(self, api):
        assert (await api.client.get("/categories/nope")).status_code == 404
        assert (await api.client.get("/categories/nope/posts")).status_code == 404
        assert (await api.client.get("/tags/nope")).status_code == 404
        assert (await api.client.get("/tags/nope/posts")).status_code == 404

    @pytest.mark.asyncio
    async def test_tag_posts(self, api):
        go = api.store.add_tag(make_tag(1, "Go"))
        api.store.add_post(make_post(1, "Channels", tags=[go]))

        response = await api.client.get("/tags/go/posts")

        assert response.status_code == 200
        assert [p["slug"] for p in response.json()["posts"]] == ["channels"]


class TestSearchEndpoint:
    """Full-text search."""

    @pytest.mark.asyncio
    async def test_title_match_ranks_first(self, api):
        api.store.add_post(make_post(1, "Notes", content="<p>about python</p>"))
        api.store.add_post(make_post(2, "Python tips"))

        response = await api.client.get("/search", params={"q": "PYTHON"})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 2
        assert [r["id"] for r in body["results"]] == [2, 1]

    @pytest.mark.asyncio
    async def test_overlong_query_returns_nothing(self, api):
        api.store.add_post(make_post(1, "Anything"))

        response = await api.client.get("/search", params={"q": "x" * 201})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert response.json()["count"] == 0

    @pytest.mark.asyncio
    async def test_blank_query_returns_nothing(self, api):
        api.store.add_post(make_post(1, "Anything"))

        response = await api.client.get("/search", params={"q": "   "})

        assert response.status_code == 200
        assert response.json()["results"] == []


class TestSiteEndpoints:
    """Health, sitemap and robots.txt."""

    @pytest.mark.asyncio
    async def test_health(self, api):
        response = await api.client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_sitemap(self, api):
        api.store.add_post(make_post(1, "Mapped"))

        response = await api.client.get("/sitemap.xml")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        assert "/blog/post/mapped</loc>" in response.text

    @pytest.mark.asyncio
    async def test_robots(self, api):
        response = await api.client.get("/robots.txt")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Sitemap: " in response.text
        assert "Disallow: /admin/" in response.text
