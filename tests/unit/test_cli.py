"""Tests for the command line entry point."""

import json
import logging
import os
from unittest.mock import patch

import pytest

from bitbucket_cloud import cli
from bitbucket_cloud.context import SharedValues
from bitbucket_cloud.exceptions import BitbucketRequestError
from bitbucket_cloud.models.bitbucket.common import PullRequestResult
from bitbucket_cloud.utils.logging import LOGGER_NAME

ENV = {
    "BITBUCKET_USERNAME": "user",
    "BITBUCKET_PASSWORD": "pass",
    "BITBUCKET_COMPANY_HOST_NAME": "acme",
    "BITBUCKET_REPOSITORY_NAME": "widgets",
}


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("bitbucket_cloud.cli.load_dotenv") as mock_load:
        yield mock_load


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def env():
    with patch.dict(os.environ, ENV, clear=True):
        yield


def test_parser_has_flag_per_option():
    args = cli.build_parser().parse_args(
        [
            "--title",
            "T",
            "--source-branch",
            "feature",
            "--destination-branch",
            "main",
            "--reviewers",
            "alice",
            "bob",
        ]
    )

    assert args.title == "T"
    assert args.source_branch == "feature"
    assert args.destination_branch == "main"
    assert args.reviewers == ["alice", "bob"]
    assert args.ssl_verify is None


def test_main_success(env, capsys):
    result = PullRequestResult(
        status=201, reason_phrase="Created", body='{"id": 1}', parsed_json={"id": 1}
    )

    def fake_create(config, context):
        context.set(
            SharedValues.BITBUCKET_CREATE_PULL_REQUEST_RESULT,
            result.context_summary(),
        )
        return result

    with patch(
        "bitbucket_cloud.cli.create_pull_request", side_effect=fake_create
    ) as mock_create:
        exit_code = cli.main(
            ["--title", "T", "--source-branch", "feature", "--reviewers", "a", "b"]
        )

    assert exit_code == 0
    config = mock_create.call_args.args[0]
    assert config.title == "T"
    assert config.reviewers == ("a", "b")
    assert config.ssl_verify is True
    assert json.loads(capsys.readouterr().out)["parsed_json"] == {"id": 1}


def test_main_request_error(env, capsys):
    result = PullRequestResult(status=400, reason_phrase="Bad Request", body="not json")
    error = BitbucketRequestError(
        "Plugin Bitbucket finished with error code 400 Bad Request", result
    )

    with patch("bitbucket_cloud.cli.create_pull_request", side_effect=error):
        exit_code = cli.main(["--title", "T", "--source-branch", "feature"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert json.loads(captured.out)["status"] == 400
    assert "error code 400" in captured.err


def test_main_missing_options(capsys):
    with patch.dict(os.environ, {}, clear=True):
        with patch("bitbucket_cloud.cli.create_pull_request") as mock_create:
            exit_code = cli.main(["--title", "T"])

    assert exit_code == 1
    mock_create.assert_not_called()
    assert "Missing required option(s)" in capsys.readouterr().err


def test_main_no_ssl_verify(env):
    result = PullRequestResult(status=201, reason_phrase="Created")

    with patch(
        "bitbucket_cloud.cli.create_pull_request", return_value=result
    ) as mock_create:
        cli.main(["--title", "T", "--source-branch", "feature", "--no-ssl-verify"])

    assert mock_create.call_args.args[0].ssl_verify is False


def test_main_env_file(env, no_dotenv):
    result = PullRequestResult(status=201, reason_phrase="Created")

    with patch("bitbucket_cloud.cli.create_pull_request", return_value=result):
        cli.main(["--env-file", "ci.env", "--title", "T", "--source-branch", "f"])

    no_dotenv.assert_called_once_with("ci.env", override=False)
