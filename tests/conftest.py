"""Shared fixtures: a trimmed GitHub pull request and its named types."""

import re

import pytest

from jsdoc_typedef import StringType, infer_named_type


@pytest.fixture
def sample_user():
    """A GitHub user object."""
    return {
        "login": "octocat",
        "id": 1,
        "html_url": "https://github.com/octocat",
        "site_admin": False,
    }


@pytest.fixture
def sample_label():
    """A GitHub label object."""
    return {"name": "bug", "url": "https://api.github.com/repos/o/r/labels/bug"}


@pytest.fixture
def pull_request(sample_user, sample_label):
    """A pull request with nested users, labels, nulls and an empty array."""
    return {
        "url": "https://api.github.com/repos/o/r/pulls/1347",
        "id": 1347,
        "title": "Amazing new feature",
        "user": sample_user,
        "labels": [sample_label],
        "milestone": None,
        "created_at": "2011-01-26T19:01:12Z",
        "assignees": [],
        "head": {"ref": "new-topic", "user": dict(sample_user)},
    }


@pytest.fixture
def uri_type():
    return StringType(
        description="A fully qualified URL", match=re.compile(r"^https?://")
    )


@pytest.fixture
def datetime_type():
    return StringType(
        description="An ISO 8601 datetime",
        match=re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z"),
    )


@pytest.fixture
def registry(sample_user, sample_label, uri_type, datetime_type):
    """Named types built from samples, the way a caller builds them up."""
    return {
        "URI": uri_type,
        "DateTime": datetime_type,
        "User": infer_named_type(sample_user, "A GitHub User", {"URI": uri_type}),
        "Label": infer_named_type(sample_label, "A GitHub Label", {"URI": uri_type}),
    }


@pytest.fixture
def pull_request_typedefs():
    """The comments serialize() produces for pull_request with registry."""
    return """/**
 * A GitHub Pull Request
 * @typedef {{
 *   url: URI
 *   id: number
 *   title: string
 *   user: User
 *   labels: Array<Label>
 *   milestone: (string|null)
 *   created_at: DateTime
 *   assignees: Array<undefined>
 *   head: {
 *     ref: string
 *     user: User
 *   }
 * }} PullRequest
 */

/**
 * A fully qualified URL
 * @typedef {string} URI
 */

/**
 * An ISO 8601 datetime
 * @typedef {string} DateTime
 */

/**
 * A GitHub User
 * @typedef {{
 *   login: string
 *   id: number
 *   html_url: URI
 *   site_admin: boolean
 * }} User
 */

/**
 * A GitHub Label
 * @typedef {{
 *   name: string
 *   url: URI
 * }} Label
 */"""
