from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ._utils._request_builder import parse_base_url
from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_AUTH_TOKEN,
    ENV_BASE_URL,
    ENV_DEBUG,
    ENV_TIMEOUT,
)
from .models.errors import BaseUrlMissingError, InvalidURLError


class Config(BaseModel):
    base_url: str
    auth_token: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        try:
            parse_base_url(value)
        except InvalidURLError as e:
            raise ValueError(f"Invalid URL: {value!r}") from e
        return value

    @classmethod
    def load(
        cls,
        *,
        base_url: Optional[str] = None,
        auth_token: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
    ) -> "Config":
        """Build a config from explicit values, falling back to the environment.

        A ``.env`` file in the working directory is loaded first.

        Raises:
            BaseUrlMissingError: Neither ``base_url`` nor ``EAZYREST_URL`` is set.
            pydantic.ValidationError: A value is malformed.
        """
        load_dotenv()

        base_url_value = base_url or env.get(ENV_BASE_URL)
        if not base_url_value:
            raise BaseUrlMissingError()

        timeout_value = timeout if timeout is not None else env.get(ENV_TIMEOUT)
        debug_value = (
            debug
            if debug is not None
            else env.get(ENV_DEBUG, "").lower() in ("1", "true", "yes")
        )

        return cls(
            base_url=base_url_value,
            auth_token=(
                auth_token if auth_token is not None else env.get(ENV_AUTH_TOKEN)
            ),
            timeout=timeout_value if timeout_value is not None else DEFAULT_TIMEOUT,
            debug=debug_value,
        )
