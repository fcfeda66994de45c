import httpx
import pytest
from fastapi.testclient import TestClient

from commit_relay.config import Settings
from commit_relay.main import create_app

GITHUB_API_URL = "https://api.github.test"


def commit_payload(sha="abc123", parents=("parent1",)):
    person = {"name": "Ada", "email": "ada@example.com", "date": "2024-05-01T12:00:00Z"}
    return {
        "sha": sha,
        "commit": {"message": "Fix the thing", "author": person, "committer": person},
        "parents": [{"sha": p, "url": f"{GITHUB_API_URL}/commits/{p}"} for p in parents],
    }


def rate_limited_response(reset="1717171717"):
    return httpx.Response(
        403,
        json={"message": "API rate limit exceeded"},
        headers={"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": reset},
    )


@pytest.fixture
def settings():
    return Settings(github_token="test-token", github_api_url=GITHUB_API_URL)


@pytest.fixture
def github_routes():
    """Maps request paths to canned GitHub responses; tests fill it in."""
    return {}


@pytest.fixture
def github_requests():
    return []


@pytest.fixture
def transport(github_routes, github_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        github_requests.append(request)
        response = github_routes.get(request.url.path)
        if response is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return response

    return httpx.MockTransport(handler)


@pytest.fixture
def client(settings, transport):
    with TestClient(create_app(settings, transport=transport)) as test_client:
        yield test_client
