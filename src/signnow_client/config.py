"""Application credentials and target environment for the SignNow client.

Values come from environment variables first, then from the system keyring
(service ``signnow-client``), where ``signnow-setup`` stores them.
"""

import base64
import logging
import os
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

SERVICE_NAME = "signnow-client"
CLIENT_ID_KEY = "client_id"
CLIENT_SECRET_KEY = "client_secret"
ENVIRONMENT_KEY = "environment"

PRODUCTION = "production"
SANDBOX = "sandbox"

# keyring key -> environment variable overriding it
ENV_VARS = {
    CLIENT_ID_KEY: "SIGNNOW_CLIENT_ID",
    CLIENT_SECRET_KEY: "SIGNNOW_CLIENT_SECRET",
    ENVIRONMENT_KEY: "SIGNNOW_ENVIRONMENT",
}


class ConfigError(ValueError):
    """Raised when the client cannot be configured."""


def encode_credentials(client_id: str, client_secret: str) -> str:
    """Return the base64 ``client_id:client_secret`` used for Basic auth."""
    return base64.b64encode(f"{client_id}:{client_secret}".encode()).decode()


def _read_keyring(key: str) -> Optional[str]:
    try:
        import keyring
        return keyring.get_password(SERVICE_NAME, key)
    except Exception as e:
        logger.warning(f"Could not read {key} from keyring: {e}")
        return None


def load_client_credentials() -> Tuple[Optional[str], Optional[str]]:
    """Return ``(client_id, client_secret)``, or ``(None, None)`` if either is missing.

    The pair is taken from one source: both environment variables, or else
    both keyring entries.
    """
    client_id = os.environ.get(ENV_VARS[CLIENT_ID_KEY])
    client_secret = os.environ.get(ENV_VARS[CLIENT_SECRET_KEY])
    if client_id and client_secret:
        logger.info("Loaded client credentials from environment variables")
        return client_id, client_secret

    client_id = _read_keyring(CLIENT_ID_KEY)
    client_secret = _read_keyring(CLIENT_SECRET_KEY) if client_id else None
    if client_id and client_secret:
        logger.info("Loaded client credentials from keyring")
        return client_id, client_secret
    return None, None


def load_environment() -> bool:
    """Return True when requests should go to the production host.

    ``SIGNNOW_ENVIRONMENT`` or the stored keyring value may be ``production``
    or ``sandbox``; anything else is rejected. Defaults to production.
    """
    value = os.environ.get(ENV_VARS[ENVIRONMENT_KEY]) or _read_keyring(ENVIRONMENT_KEY) or PRODUCTION
    value = value.strip().lower()
    if value not in (PRODUCTION, SANDBOX):
        raise ConfigError(f"Unknown SignNow environment {value!r}; use {PRODUCTION!r} or {SANDBOX!r}")
    return value == PRODUCTION


def save_client_credentials(client_id: str, client_secret: str, production: bool = True) -> bool:
    """Store credentials and target environment in the keyring.

    Returns:
        True if saved successfully, False otherwise
    """
    try:
        import keyring
        keyring.set_password(SERVICE_NAME, CLIENT_ID_KEY, client_id)
        keyring.set_password(SERVICE_NAME, CLIENT_SECRET_KEY, client_secret)
        keyring.set_password(SERVICE_NAME, ENVIRONMENT_KEY, PRODUCTION if production else SANDBOX)
    except Exception as e:
        logger.warning(f"Could not save to keyring: {e}")
        return False
    logger.info(f"Client credentials saved to keyring ({PRODUCTION if production else SANDBOX})")
    return True


def delete_client_credentials() -> bool:
    """Remove every stored entry; entries already absent are skipped."""
    try:
        import keyring
        from keyring.errors import PasswordDeleteError
    except Exception as e:
        logger.warning(f"Could not open keyring: {e}")
        return False

    deleted = False
    for key in ENV_VARS:
        try:
            keyring.delete_password(SERVICE_NAME, key)
            deleted = True
        except PasswordDeleteError:
            continue
        except Exception as e:
            logger.warning(f"Could not delete {key} from keyring: {e}")
            return False
    if deleted:
        logger.info("Client credentials deleted from keyring")
    return deleted
