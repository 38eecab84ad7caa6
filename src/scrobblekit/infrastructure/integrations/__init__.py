"""Last.fm HTTP integrations."""

from scrobblekit.infrastructure.integrations.auth_service import LastfmAuthService
from scrobblekit.infrastructure.integrations.lastfm_invoker import LastfmApiInvoker
from scrobblekit.infrastructure.integrations.signing import sign_params

__all__ = ["LastfmApiInvoker", "LastfmAuthService", "sign_params"]
