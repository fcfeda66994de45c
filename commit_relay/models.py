from typing import Optional

from pydantic import BaseModel, Field


# ==========================
# Relay responses
# ==========================

class Signature(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None

    model_config = {"frozen": True}


class ParentRef(BaseModel):
    oid: Optional[str] = None

    model_config = {"frozen": True}


class CommitRecord(BaseModel):
    oid: str
    message: str
    author: Signature
    committer: Signature
    parents: list[ParentRef]

    model_config = {"frozen": True}


class LineRecord(BaseModel):
    base_line_number: Optional[int] = Field(None, alias="baseLineNumber")
    head_line_number: Optional[int] = Field(None, alias="headLineNumber")
    content: str

    model_config = {"populate_by_name": True, "frozen": True}


class Hunk(BaseModel):
    header: str
    lines: list[LineRecord]

    model_config = {"frozen": True}


class FileRef(BaseModel):
    path: str

    model_config = {"frozen": True}


class FileDiff(BaseModel):
    change_kind: str = Field(..., alias="changeKind")
    head_file: FileRef = Field(..., alias="headFile")
    base_file: FileRef = Field(..., alias="baseFile")
    hunks: list[Hunk]

    model_config = {"populate_by_name": True, "frozen": True}


class RateLimitSignal(BaseModel):
    """Returned in place of an upstream payload when the quota is spent."""

    error: str = "GitHub API rate limit exceeded"
    retry_after: Optional[str] = None

    model_config = {"frozen": True}


# ==========================
# Upstream (GitHub) payloads
# ==========================

class GitHubParent(BaseModel):
    sha: Optional[str] = None


class GitHubCommitDetail(BaseModel):
    message: str
    author: Optional[Signature] = None
    committer: Optional[Signature] = None


class GitHubCommit(BaseModel):
    sha: str
    commit: GitHubCommitDetail
    parents: list[GitHubParent] = []


class GitHubFile(BaseModel):
    status: str
    filename: str
    previous_filename: Optional[str] = None
    patch: Optional[str] = None


class GitHubCompare(BaseModel):
    files: list[GitHubFile] = []
