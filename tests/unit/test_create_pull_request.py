"""End-to-end tests of the package level create_pull_request function."""

from unittest.mock import patch

import pytest

from bitbucket_cloud import (
    BitbucketRequestError,
    PullRequestConfig,
    SharedValues,
    WorkflowContext,
    create_pull_request,
)
from tests.conftest import make_response

RESULT_KEY = SharedValues.BITBUCKET_CREATE_PULL_REQUEST_RESULT


@pytest.fixture
def config():
    return PullRequestConfig(
        username="user",
        password="pass",
        company_host_name="acme",
        repository_name="widgets",
        title="Release",
        source_branch="release/1.0",
    )


@pytest.fixture
def mock_bitbucket():
    with patch("bitbucket_cloud.bitbucket.client.Bitbucket") as mock_cls:
        with patch("bitbucket_cloud.bitbucket.client.configure_ssl_verification"):
            yield mock_cls.return_value


def test_created(config, mock_bitbucket):
    mock_bitbucket.post.return_value = make_response(201, "Created", b'{"id": 1}')
    context = WorkflowContext()

    result = create_pull_request(config, context)

    assert result.parsed_json == {"id": 1}
    assert context.get(RESULT_KEY) == "Status code: 201, reason: Created"
    mock_bitbucket.post.assert_called_once()


def test_bad_request_keeps_result(config, mock_bitbucket):
    mock_bitbucket.post.return_value = make_response(400, "Bad Request", b"not json")
    context = WorkflowContext()

    with pytest.raises(BitbucketRequestError, match="400") as exc_info:
        create_pull_request(config, context)

    assert exc_info.value.result.parsed_json == {}
    assert exc_info.value.result.body == "not json"
    assert context.get(RESULT_KEY) == "Status code: 400, reason: Bad Request"


def test_ok_is_not_success(config, mock_bitbucket):
    mock_bitbucket.post.return_value = make_response(200, "OK", b'{"id": 1}')

    with pytest.raises(BitbucketRequestError, match="200 OK"):
        create_pull_request(config)
