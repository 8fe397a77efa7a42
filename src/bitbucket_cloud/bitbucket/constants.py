"""Bitbucket Cloud API constants and default values."""

# Bitbucket Cloud API base paths
CLOUD_API_ROOT = "https://api.bitbucket.org/"
CLOUD_API_BASE = "https://api.bitbucket.org/2.0"
CLOUD_REPOSITORIES_PATH = "/repositories"

# {company_host_name}/{repository_name}, inserted as-is
PULL_REQUESTS_URL_TEMPLATE = (
    CLOUD_API_BASE + CLOUD_REPOSITORIES_PATH + "/{workspace}/{repository}/pullrequests"
)

# Environment variable prefix of the action's explicit options
ENV_PREFIX = "FL_POST_BITBUCKET_PULL_REQUEST_"
