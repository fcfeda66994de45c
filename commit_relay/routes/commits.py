import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..fetchers import NoParentCommitError, fetch_commit, fetch_commit_diff
from ..github_client import GitHubClient
from ..models import CommitRecord, FileDiff, RateLimitSignal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/repositories/{owner}/{repository}/commits")


def get_github_client(request: Request) -> GitHubClient:
    return request.app.state.github


def rate_limited(signal: RateLimitSignal) -> JSONResponse:
    return JSONResponse(status_code=429, content=signal.model_dump())


def upstream_failure(message: str, exc: Exception) -> JSONResponse:
    """Forward the upstream status code when there is one, else 500."""
    status_code = 500
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code

    return JSONResponse(
        status_code=status_code,
        content={"message": message, "error": str(exc)},
    )


@router.get("/{oid}", response_model=list[CommitRecord])
async def get_commit(
    owner: str,
    repository: str,
    oid: str,
    github: GitHubClient = Depends(get_github_client),
):
    try:
        result = await fetch_commit(github, owner, repository, oid)
    except (httpx.HTTPError, ValueError) as e:
        logger.exception(f"Failed to fetch commit {owner}/{repository}@{oid}")
        return upstream_failure("Error fetching commit details", e)

    if isinstance(result, RateLimitSignal):
        return rate_limited(result)

    return result


@router.get("/{oid}/diff", response_model=list[FileDiff])
async def get_commit_diff(
    owner: str,
    repository: str,
    oid: str,
    github: GitHubClient = Depends(get_github_client),
):
    try:
        result = await fetch_commit_diff(github, owner, repository, oid)
    except NoParentCommitError:
        logger.info(f"No parent commit for {owner}/{repository}@{oid}")
        return JSONResponse(status_code=400, content={"message": "No parent commit found"})
    except (httpx.HTTPError, ValueError) as e:
        logger.exception(f"Failed to fetch diff for {owner}/{repository}@{oid}")
        return upstream_failure("Error fetching commit diff", e)

    if isinstance(result, RateLimitSignal):
        return rate_limited(result)

    return result
