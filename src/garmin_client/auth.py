"""Garmin Connect session handling for the readiness feed.

Tokens are cached by garth in a directory so the morning job can run
unattended after a single interactive login.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from garminconnect import Garmin

from garmin_client.exceptions import GarminAuthError, GarminMFARequired

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_DIR = Path("~/.garminconnect").expanduser()
_TOKEN_FILE = "oauth1_token.json"


def has_saved_tokens(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> bool:
    return (Path(token_dir) / _TOKEN_FILE).exists()


def resume_session(token_dir: Path | str = DEFAULT_TOKEN_DIR) -> Garmin:
    """Log in from cached tokens only.

    Raises:
        GarminAuthError: If no tokens are cached or garth rejects them.
    """
    token_dir = Path(token_dir)
    if not has_saved_tokens(token_dir):
        raise GarminAuthError(f"No saved tokens at {token_dir}")

    try:
        garmin = Garmin()
        garmin.login(tokenstore=str(token_dir))
    except Exception as exc:
        raise GarminAuthError(f"Token resume failed: {exc}") from exc
    logger.debug("Resumed Garmin session from %s", token_dir)
    return garmin


def create_session(
    email: str,
    password: str,
    token_dir: Path | str = DEFAULT_TOKEN_DIR,
    prompt_mfa: Optional[Callable[[], str]] = None,
) -> Garmin:
    """Return an authenticated session, preferring cached tokens.

    Falls back to a credential login when the cache is missing or stale,
    then writes fresh tokens back to *token_dir*.

    Args:
        email: Garmin Connect account email.
        password: Garmin Connect account password.
        token_dir: Directory holding garth tokens.
        prompt_mfa: Returns a verification code when the account asks for
            one. Without it an MFA challenge raises GarminMFARequired.

    Raises:
        GarminMFARequired: MFA was requested and no prompt was given.
        GarminAuthError: Any other login failure.
    """
    token_dir = Path(token_dir)
    if has_saved_tokens(token_dir):
        try:
            return resume_session(token_dir)
        except GarminAuthError:
            logger.info("Cached Garmin tokens rejected, logging in with credentials")

    if not email or not password:
        raise GarminAuthError("Garmin credentials are required for a fresh login")

    token_dir.mkdir(parents=True, exist_ok=True)
    try:
        garmin = Garmin(email=email, password=password, prompt_mfa=prompt_mfa)
        garmin.login()
    except Exception as exc:
        message = str(exc).lower()
        if prompt_mfa is None and ("mfa" in message or "verification" in message):
            raise GarminMFARequired(str(exc)) from exc
        raise GarminAuthError(f"Login failed: {exc}") from exc

    garmin.garth.dump(str(token_dir))
    logger.info("Logged in to Garmin Connect, tokens saved to %s", token_dir)
    return garmin
