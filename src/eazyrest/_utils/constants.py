from importlib.metadata import PackageNotFoundError, version

# Environment variables
ENV_BASE_URL = "EAZYREST_URL"
ENV_AUTH_TOKEN = "EAZYREST_AUTH_TOKEN"
ENV_TIMEOUT = "EAZYREST_TIMEOUT"
ENV_DEBUG = "EAZYREST_DEBUG"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"

DEFAULT_TIMEOUT = 30.0

LOGGER_NAME = "eazyrest"


def user_agent_value() -> str:
    try:
        package_version = version("eazyrest")
    except PackageNotFoundError:
        package_version = "0.0.0"
    return f"EazyRest.Python/{package_version}"
