"""OpenSSH client config parsing — the ``Host``/``HostName``/``User`` subset.

Only concrete aliases become hosts. Pattern entries (``*``, ``?``,
negated ``!alias``) configure other hosts and are skipped. Later values
never override earlier ones, matching ssh's first-match-wins rule.
"""

from __future__ import annotations

import ipaddress
import re

from dasshboard.domain.hosts import Host, HostType

# ``Keyword value`` or ``Keyword=value``
_DIRECTIVE_RE = re.compile(r"^([A-Za-z][A-Za-z0-9]*)(?:\s*=\s*|\s+)(.*)$")


def is_ip_address(value: str) -> bool:
    """True when *value* is a literal IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def _is_pattern(alias: str) -> bool:
    return alias.startswith("!") or "*" in alias or "?" in alias


def _split_directive(line: str) -> tuple[str, str] | None:
    """Return ``(keyword, value)`` with the keyword lower-cased, or None."""
    stripped = line.split("#", 1)[0].strip()
    if not stripped:
        return None
    match = _DIRECTIVE_RE.match(stripped)
    if match is None:
        return None
    return match.group(1).lower(), match.group(2).strip()


def parse_ssh_config(text: str) -> list[Host]:
    """Extract concrete hosts from an ssh config file's contents.

    Examples:
        >>> hosts = parse_ssh_config("Host web\\n  HostName 10.0.0.5\\n  User deploy\\n")
        >>> [(h.name, h.hostname, h.user) for h in hosts]
        [('web', '10.0.0.5', 'deploy')]
    """
    hosts: dict[str, Host] = {}
    explicit_hostname: set[str] = set()
    current: str | None = None

    for line in text.splitlines():
        directive = _split_directive(line)
        if directive is None:
            continue
        keyword, value = directive

        if keyword == "host":
            current = None
            for alias in value.split():
                alias = alias.strip("\"'")
                if not alias or _is_pattern(alias):
                    continue
                current = alias
                hosts.setdefault(alias, Host(name=alias, hostname=alias, type=HostType.SSH))
        elif keyword == "match":
            current = None
        elif current is None or not value:
            continue
        # First obtained value wins, as in ssh(1).
        elif keyword == "hostname" and current not in explicit_hostname:
            hosts[current].hostname = value
            explicit_hostname.add(current)
        elif keyword == "user" and hosts[current].user is None:
            hosts[current].user = value

    return list(hosts.values())
