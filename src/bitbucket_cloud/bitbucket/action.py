"""Descriptive metadata of the create pull request action."""

from ..context import SharedValues

DESCRIPTION = "Create a new pull request inside your Bitbucket project"

DETAILS = (
    "Wrapper of Bitbucket cloud rest apis in order to make easy integration "
    "of Bitbucket CI inside your workflow"
)

AUTHORS = ["Luca Tagliabue"]

OUTPUT = [
    (
        SharedValues.BITBUCKET_CREATE_PULL_REQUEST_RESULT,
        "The result of the bitbucket rest cloud api",
    ),
]

RETURN_VALUE = "The result of the bitbucket rest cloud api"

EXAMPLE_CODE = [
    """create_pull_request(
    PullRequestConfig(
        username="YOUR_USERNAME_HERE",
        password="YOUR_PASSWORD_HERE",
        company_host_name="YOUR_COMPANY_HOST_HERE",
        repository_name="YOUR_REPOSITORY_NAME_HERE",
        title="PULL_REQUEST_TITLE_HERE",
        description="PULL_REQUEST_DESCRIPTION_HERE",
        reviewers=["FIRST_REVIEWER", "SECOND_REVIEWER"],
        source_branch="YOUR_SOURCE_BRANCH_HERE",
        destination_branch="YOUR_DESTINATION_BRANCH_HERE",
    )
)""",
]


def is_supported(platform: str | None = None) -> bool:
    """The action only talks HTTP, so every platform is supported."""
    return True
