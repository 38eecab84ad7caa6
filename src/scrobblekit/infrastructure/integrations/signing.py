"""Last.fm API request signing."""

import hashlib
from collections.abc import Mapping

# Never part of the signature
UNSIGNED_PARAMS = frozenset({"format", "callback", "api_sig"})


def sign_params(params: Mapping[str, str], secret: str) -> str:
    """
    Create the api_sig for an authenticated request.

    Params are sorted by key, concatenated as <key><value> and followed by the shared
    secret, then MD5-hashed.

    Args:
        params: Request parameters (format/callback/api_sig are skipped)
        secret: API shared secret

    Returns:
        Lower-case hex MD5 signature
    """
    sig_string = "".join(
        f"{key}{value}" for key, value in sorted(params.items()) if key not in UNSIGNED_PARAMS
    )
    sig_string += secret

    # MD5 is used for Last.fm API signature, not for security purposes
    return hashlib.md5(  # nosec B324
        sig_string.encode("utf-8"), usedforsecurity=False
    ).hexdigest()
