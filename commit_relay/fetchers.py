# commit_relay/fetchers.py
import logging
from typing import Union

from .github_client import GitHubClient
from .models import (
    CommitRecord,
    FileDiff,
    FileRef,
    GitHubCommit,
    GitHubCompare,
    GitHubFile,
    ParentRef,
    RateLimitSignal,
    Signature,
)
from .patch_parser import parse_patch

logger = logging.getLogger(__name__)


class NoParentCommitError(Exception):
    """The commit is a root commit, so there is nothing to diff against."""


def to_commit_record(commit: GitHubCommit) -> CommitRecord:
    return CommitRecord(
        oid=commit.sha,
        message=commit.commit.message,
        author=commit.commit.author or Signature(),
        committer=commit.commit.committer or Signature(),
        parents=[ParentRef(oid=parent.sha) for parent in commit.parents],
    )


def to_file_diff(file: GitHubFile) -> FileDiff:
    # TODO: "copied" files also carry previous_filename upstream; check whether
    # baseFile should point at the copy source for them as well.
    base_path = file.previous_filename if file.status == "renamed" else None
    return FileDiff(
        change_kind=file.status.upper(),
        head_file=FileRef(path=file.filename),
        base_file=FileRef(path=base_path or file.filename),
        hunks=parse_patch(file.patch) if file.patch else [],
    )


async def _get_commit(
    github: GitHubClient, owner: str, repository: str, oid: str
) -> Union[GitHubCommit, RateLimitSignal]:
    payload = await github.get_json(f"/repos/{owner}/{repository}/commits/{oid}")
    if isinstance(payload, RateLimitSignal):
        return payload
    return GitHubCommit.model_validate(payload)


async def fetch_commit(
    github: GitHubClient, owner: str, repository: str, oid: str
) -> Union[list[CommitRecord], RateLimitSignal]:
    """
    Look up one commit.

    The result is always a one-element list; clients of the relay expect
    an array here even though a single oid only ever names one commit.
    """
    commit = await _get_commit(github, owner, repository, oid)
    if isinstance(commit, RateLimitSignal):
        return commit
    return [to_commit_record(commit)]


async def fetch_commit_diff(
    github: GitHubClient, owner: str, repository: str, oid: str
) -> Union[list[FileDiff], RateLimitSignal]:
    """
    Diff a commit against its first parent.

    Raises ``NoParentCommitError`` for root commits. Additional parents of a
    merge commit are ignored.
    """
    commit = await _get_commit(github, owner, repository, oid)
    if isinstance(commit, RateLimitSignal):
        return commit

    parent_oid = commit.parents[0].sha if commit.parents else None
    if not parent_oid:
        raise NoParentCommitError(f"Commit {oid} has no parent")

    payload = await github.get_json(
        f"/repos/{owner}/{repository}/compare/{parent_oid}...{oid}"
    )
    if isinstance(payload, RateLimitSignal):
        return payload

    compare = GitHubCompare.model_validate(payload)
    logger.info(
        f"Compare {parent_oid}...{oid} in {owner}/{repository}: {len(compare.files)} files"
    )
    return [to_file_diff(file) for file in compare.files]
