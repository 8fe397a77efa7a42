"""SSL verification helpers for the Bitbucket session."""

import logging
import ssl
from typing import Any
from urllib.parse import urlparse

from requests.adapters import HTTPAdapter
from requests.sessions import Session
from urllib3.poolmanager import PoolManager

logger = logging.getLogger("bitbucket-cloud.utils.ssl")


class SSLIgnoreAdapter(HTTPAdapter):
    """HTTP adapter that skips certificate and hostname verification.

    Only mounted when a user explicitly turns verification off, typically
    behind an intercepting corporate proxy.
    """

    def init_poolmanager(
        self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any
    ) -> None:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

        self.poolmanager = PoolManager(
            num_pools=connections,
            maxsize=maxsize,
            block=block,
            ssl_context=context,
            **pool_kwargs,
        )

    def cert_verify(self, conn: Any, url: str, verify: bool, cert: Any | None) -> None:
        super().cert_verify(conn, url, verify=False, cert=cert)


def configure_ssl_verification(
    service_name: str,
    url: str,
    session: Session,
    *,
    ssl_verify: bool = True,
) -> None:
    """Configure SSL verification of ``session`` for the host of ``url``.

    Args:
        service_name: Name used in log messages.
        url: Any URL on the host to configure.
        session: The requests session to configure.
        ssl_verify: When False, an ``SSLIgnoreAdapter`` is mounted for the host.
    """
    parsed = urlparse(url)
    domain = parsed.netloc
    scheme = parsed.scheme.lower() or "https"

    if ssl_verify:
        session.verify = True
        return

    logger.warning(
        f"{service_name} SSL verification disabled. "
        "This is insecure and should only be used in testing environments."
    )
    adapter = SSLIgnoreAdapter()
    schemes = [scheme] if scheme == "http" else ["https", "http"]
    for mount_scheme in schemes:
        mount_url = f"{mount_scheme}://{domain}"
        session.mount(mount_url, adapter)
        logger.debug(f"Mounted SSL-ignore adapter for {mount_url}")
