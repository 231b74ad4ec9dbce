"""
Unit tests for the CMS client.

The CMS is faked with httpx.MockTransport so query construction and failure
handling can be checked without a network.
"""

import json
import unittest

import httpx

from clubsite.content import CMSClient, DefaultContentSource, FallbackContentSource
from clubsite.content.cms_client import media_file_location
from clubsite.models import Homepage


BASE = "https://cms.test"


def client_for(handler):
    return CMSClient(base_url=BASE, timeout=1.0, transport=httpx.MockTransport(handler))


def docs(*items):
    return httpx.Response(200, json={"docs": list(items)})


class TestCMSClientReads(unittest.TestCase):
    """Test read operations and their query strings."""

    def setUp(self):
        self.requests = []

    def record(self, response):
        def handler(request):
            self.requests.append(request)
            return response
        return handler

    def test_get_tenant(self):
        with client_for(self.record(docs({"id": 3, "code": "kallitechnia", "name": "Club"}))) as client:
            tenant = client.get_tenant("kallitechnia")

        self.assertEqual(tenant.id, "3")
        self.assertEqual(tenant.name, "Club")
        params = self.requests[0].url.params
        self.assertEqual(self.requests[0].url.path, "/api/tenants")
        self.assertEqual(params["where[code][equals]"], "kallitechnia")
        self.assertEqual(params["limit"], "1")
        self.assertEqual(params["depth"], "0")

    def test_get_tenant_not_found(self):
        with client_for(self.record(docs())) as client:
            self.assertIsNone(client.get_tenant("nobody"))

    def test_get_homepage(self):
        sections = [{"blockType": "kallitechnia.hero", "title": "Hi"}]
        with client_for(self.record(docs({"id": "h1", "sections": sections}))) as client:
            homepage = client.get_homepage("3")

        self.assertEqual(homepage.sections, sections)
        self.assertEqual(self.requests[0].url.params["where[tenant][equals]"], "3")
        self.assertEqual(self.requests[0].url.params["depth"], "2")

    def test_get_page_by_slug(self):
        with client_for(self.record(docs({"id": 1, "title": "About", "slug": "about", "sections": None}))) as client:
            page = client.get_page_by_slug("about", "3")

        self.assertEqual(page.title, "About")
        self.assertEqual(page.sections, [])
        params = self.requests[0].url.params
        self.assertEqual(params["where[and][0][slug][equals]"], "about")
        self.assertEqual(params["where[and][1][tenant][equals]"], "3")

    def test_get_posts(self):
        payload = {
            "docs": [{"id": 1, "title": "News", "slug": "news", "publishedAt": "2025-01-15T10:00:00Z"}],
            "totalDocs": 11, "limit": 10, "totalPages": 2, "page": 1,
            "hasPrevPage": False, "hasNextPage": True, "prevPage": None, "nextPage": 2,
        }
        with client_for(self.record(httpx.Response(200, json=payload))) as client:
            posts = client.get_posts("3", limit=10, page=1)

        self.assertEqual(posts.total_docs, 11)
        self.assertTrue(posts.has_next_page)
        self.assertEqual(posts.docs[0].published_at, "2025-01-15T10:00:00Z")
        self.assertEqual(self.requests[0].url.params["sort"], "-publishedAt")

    def test_get_form_by_numeric_id(self):
        form = {"id": 5, "slug": "contact", "fields": [], "status": "active"}
        with client_for(self.record(httpx.Response(200, json=form))) as client:
            result = client.get_form(5)

        self.assertEqual(result.slug, "contact")
        self.assertEqual(len(self.requests), 1)
        self.assertEqual(self.requests[0].url.path, "/api/forms/5")

    def test_get_form_by_slug_falls_back_to_id(self):
        def handler(request):
            self.requests.append(request)
            if request.url.path == "/api/forms":
                return docs()
            return httpx.Response(200, json={"id": "abc", "slug": "signup", "fields": []})

        with client_for(handler) as client:
            result = client.get_form("abc")

        self.assertEqual(result.slug, "signup")
        self.assertEqual([r.url.path for r in self.requests], ["/api/forms", "/api/forms/abc"])


class TestCMSClientFailures(unittest.TestCase):
    """Test that upstream failures degrade instead of raising."""

    def test_server_error(self):
        with client_for(lambda request: httpx.Response(500)) as client:
            self.assertIsNone(client.get_tenant("x"))
            self.assertIsNone(client.get_homepage("1"))
            self.assertIsNone(client.get_page_by_slug("about", "1"))
            self.assertIsNone(client.get_post_by_slug("p", "1"))
            self.assertIsNone(client.get_form("contact"))
            posts = client.get_posts("1", limit=5, page=2)

        self.assertEqual(posts.docs, [])
        self.assertEqual(posts.limit, 5)
        self.assertEqual(posts.page, 2)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with client_for(handler) as client:
            self.assertIsNone(client.get_tenant("x"))
            self.assertEqual(client.get_posts("1").docs, [])

    def test_malformed_json(self):
        with client_for(lambda request: httpx.Response(200, content=b"<html>")) as client:
            self.assertIsNone(client.get_homepage("1"))

    def test_unexpected_shape(self):
        with client_for(lambda request: httpx.Response(200, json={"docs": ["nope"]})) as client:
            self.assertIsNone(client.get_page_by_slug("about", "1"))


class TestCMSClientSubmit(unittest.TestCase):
    """Test form submission."""

    def test_successful_submission(self):
        sent = []

        def handler(request):
            sent.append(json.loads(request.content))
            return httpx.Response(200, json={"message": "Thanks", "redirectUrl": "/thanks"})

        with client_for(handler) as client:
            result = client.submit_form("contact", {"name": "Ada"})

        self.assertEqual(sent, [{"formSlug": "contact", "data": {"name": "Ada"}}])
        self.assertTrue(result.success)
        self.assertEqual(result.message, "Thanks")
        self.assertEqual(result.redirect_url, "/thanks")

    def test_rejected_submission(self):
        response = httpx.Response(400, json={"errors": {"email": "Invalid"}})
        with client_for(lambda request: response) as client:
            result = client.submit_form("contact", {})

        self.assertFalse(result.success)
        self.assertEqual(result.message, "Failed to submit form")
        self.assertEqual(result.errors, {"email": "Invalid"})

    def test_submission_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        with client_for(handler) as client:
            result = client.submit_form("contact", {})
        self.assertFalse(result.success)


class TestFetchFile(unittest.TestCase):
    """Test the upstream path mapping of the download proxy."""

    def test_paths(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, content=b"x")

        with client_for(handler) as client:
            client.fetch_file("doc.pdf")
            client.fetch_file("media/file/doc.pdf")

        self.assertEqual(paths, ["/api/media/file/doc.pdf", "/api/media/file/doc.pdf"])

    def test_paths_outside_media_are_rejected(self):
        paths = []

        def handler(request):
            paths.append(request.url.path)
            return httpx.Response(200, content=b"x")

        with client_for(handler) as client:
            for path in ("../../users", "media/file/../../users", "a/%2E%2E/%2E%2E/%2E%2E/users",
                         "..\\..\\users", "/users", "media/file/"):
                with self.subTest(path=path):
                    with self.assertRaises(ValueError):
                        client.fetch_file(path)

        self.assertEqual(paths, [])

    def test_nested_media_paths_allowed(self):
        self.assertEqual(media_file_location("2024/07/doc.pdf"), "/api/media/file/2024/07/doc.pdf")
        self.assertEqual(media_file_location("media/file/./doc.pdf"), "/api/media/file/doc.pdf")


class TestFallbackContentSource(unittest.TestCase):
    """Test falling back to the built-in content."""

    def test_homepage_falls_back_when_cms_fails(self):
        with client_for(lambda request: httpx.Response(503)) as client:
            source = FallbackContentSource(client)
            tenant = source.get_tenant("kallitechnia")
            homepage = source.get_homepage(tenant.id)

        self.assertEqual(tenant.code, "kallitechnia")
        self.assertEqual(len(homepage.sections), 7)
        self.assertEqual(homepage.sections[0]["blockType"], "kallitechnia.hero")

    def test_homepage_from_primary(self):
        primary = DefaultContentSource()
        primary.get_homepage = lambda tenant_id: Homepage(id="1", sections=[{"blockType": "kallitechnia.quote"}])
        source = FallbackContentSource(primary)

        self.assertEqual(source.get_homepage("1").id, "1")

    def test_default_sections_are_fresh_copies(self):
        source = DefaultContentSource()
        first = source.get_homepage("x")
        first.sections.clear()

        self.assertEqual(len(source.get_homepage("x").sections), 7)


if __name__ == '__main__':
    unittest.main(verbosity=2)
