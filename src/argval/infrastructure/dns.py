"""MX-record existence checks backed by dnspython.

The only blocking I/O in argval. Lookups honour the configured timeout
and lifetime and are never retried.

INVARIANT: lookup failures never escape as exceptions. NXDOMAIN, empty
answers, timeouts and resolver misconfiguration all report "no MX
record" (fail closed), which the string facade turns into a validation
error.
"""

from __future__ import annotations

import logging

import dns.exception
import dns.resolver

from argval.config.models import DnsConfig

logger = logging.getLogger(__name__)


def build_resolver(config: DnsConfig | None = None) -> dns.resolver.Resolver:
    """Create a dnspython resolver from *config*.

    Uses the system resolver configuration unless explicit nameservers
    are configured.

    Raises:
        dns.exception.DNSException: If the system configuration cannot be read.
    """
    config = config or DnsConfig()
    resolver = dns.resolver.Resolver(configure=not config.nameservers)
    if config.nameservers:
        resolver.nameservers = list(config.nameservers)
    resolver.timeout = config.timeout
    resolver.lifetime = config.lifetime
    return resolver


class DnsMxResolver:
    """Callable ``(domain) -> bool`` reporting whether *domain* has MX records.

    Usage::

        check = DnsMxResolver(settings.dns)
        string(email).is_email_with_existing_mx(check)
    """

    def __init__(
        self,
        config: DnsConfig | None = None,
        *,
        resolver: dns.resolver.Resolver | None = None,
    ) -> None:
        self._config = config or DnsConfig()
        self._resolver = resolver

    def _get_resolver(self) -> dns.resolver.Resolver:
        if self._resolver is None:
            self._resolver = build_resolver(self._config)
        return self._resolver

    def __call__(self, domain: str) -> bool:
        try:
            answer = self._get_resolver().resolve(domain, "MX")
        except dns.exception.DNSException as exc:
            logger.debug("MX lookup failed for %s: %s", domain, exc)
            return False
        found = len(answer) > 0
        logger.debug("MX lookup for %s: %d record(s)", domain, len(answer))
        return found


def has_mx_record(domain: str) -> bool:
    """Check *domain* for MX records using default DNS settings."""
    return DnsMxResolver()(domain)
