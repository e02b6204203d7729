import os
from typing import Optional, Sequence

from dotenv import load_dotenv

from .errors import MissingCredential

API_KEY_ENV_VARS = ("CDG_API_KEY", "CONGRESS_API_KEY", "CONGRESS_DOT_GOV_API_KEY")


def load_env(env_file: Optional[str] = None, override: bool = False) -> bool:
    """Load a ``.env`` file into the process environment. Returns True if one was found."""
    if env_file is None:
        return load_dotenv(override=override)
    return load_dotenv(env_file, override=override)


def resolve_api_key(api_key: Optional[str] = None, env_vars: Sequence[str] = API_KEY_ENV_VARS) -> str:
    """
    Return the explicit key if given, otherwise the first non-empty
    environment variable in ``env_vars``.

    Raises:
        MissingCredential: no key anywhere.
    """
    if api_key:
        return api_key
    for name in env_vars:
        value = os.getenv(name)
        if value:
            return value
    raise MissingCredential(
        f"Congress.gov API key not provided. Set {env_vars[0]} env var or pass api_key=..."
    )
