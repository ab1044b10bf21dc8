"""Host discovery from the ssh config, ``wsl.exe``, and ``docker``.

Sources are queried one after another. Each per-source method raises on
failure; :meth:`HostDiscovery.discover_all` catches per source, logs, and
records a warning so one broken tool never hides the others.
"""

from __future__ import annotations

import logging
import socket
import sys
from collections.abc import Callable, Mapping

from dasshboard.config.models import DiscoveryConfig
from dasshboard.domain.docker import DOCKER_PS_FORMAT, parse_docker_ps
from dasshboard.domain.hosts import DiscoveredHosts, Host, HostSettings, HostType
from dasshboard.domain.ssh_config import is_ip_address, parse_ssh_config
from dasshboard.domain.wsl import (
    DEFAULT_DISTRO_TYPE,
    decode_wsl_output,
    parse_os_release,
    parse_wsl_list,
)
from dasshboard.infrastructure.runner import CommandFailure, Runner, run_command

logger = logging.getLogger(__name__)

_OS_RELEASE_SCRIPT = "cat /etc/os-release 2>/dev/null || echo ''"


class HostDiscovery:
    """Finds remote targets on this machine."""

    def __init__(
        self,
        config: DiscoveryConfig,
        *,
        runner: Runner | None = None,
        resolver: Callable[[str], str] | None = None,
        platform: str | None = None,
    ) -> None:
        self._config = config
        self._run = runner or run_command
        self._resolve = resolver or socket.gethostbyname
        self._platform = platform or sys.platform

    # ------------------------------------------------------------------
    # SSH
    # ------------------------------------------------------------------

    def ssh_hosts(self) -> list[Host]:
        """Concrete aliases from the ssh config file; [] when it does not exist."""
        path = self._config.ssh.config_path.expanduser()
        if not path.is_file():
            logger.debug("No ssh config at %s", path)
            return []
        hosts = parse_ssh_config(path.read_text(encoding="utf-8", errors="replace"))
        if self._config.ssh.resolve_ips:
            for host in hosts:
                self._resolve_ip(host)
        logger.debug("Found %d ssh host(s)", len(hosts))
        return hosts

    def _resolve_ip(self, host: Host) -> None:
        if is_ip_address(host.hostname):
            return
        try:
            host.ip = self._resolve(host.hostname)
        except (OSError, UnicodeError, ValueError) as exc:
            logger.debug("Could not resolve %s: %s", host.hostname, exc)

    # ------------------------------------------------------------------
    # WSL
    # ------------------------------------------------------------------

    def wsl_available(self) -> bool:
        """WSL only exists on Windows unless forced through configuration."""
        return self._config.wsl.force or self._platform == "win32"

    def wsl_distros(self) -> list[Host]:
        """Installed WSL distributions, each probed for its distro type."""
        cfg = self._config.wsl
        if not self.wsl_available():
            logger.debug("Not on Windows, skipping WSL detection")
            return []

        proc = self._run([cfg.command, "--list", "--verbose"], timeout=cfg.timeout)
        distros = parse_wsl_list(
            decode_wsl_output(proc.stdout),
            skip=frozenset(cfg.skip_distros),
        )
        hosts = [
            Host(
                name=distro.name,
                hostname=distro.name,
                type=HostType.WSL,
                distro_type=self._probe_distro_type(distro.name),
            )
            for distro in distros
        ]
        logger.debug("Found %d WSL distro(s)", len(hosts))
        return hosts

    def _probe_distro_type(self, distro: str) -> str:
        """Read ``/etc/os-release`` inside *distro*; bash first, then sh."""
        cfg = self._config.wsl
        for shell in ("bash", "sh"):
            try:
                proc = self._run(
                    [cfg.command, "-d", distro, "-e", shell, "-c", _OS_RELEASE_SCRIPT],
                    timeout=cfg.probe_timeout,
                )
            except CommandFailure as exc:
                logger.debug("os-release probe via %s failed in %s: %s", shell, distro, exc)
                continue
            return parse_os_release(proc.stdout.decode("utf-8", errors="replace"))
        return DEFAULT_DISTRO_TYPE

    # ------------------------------------------------------------------
    # Docker
    # ------------------------------------------------------------------

    def docker_containers(self) -> list[Host]:
        """Running containers from ``docker ps``."""
        cfg = self._config.docker
        proc = self._run(
            [cfg.command, "ps", "--no-trunc", "--format", DOCKER_PS_FORMAT],
            timeout=cfg.timeout,
        )
        containers = parse_docker_ps(proc.stdout.decode("utf-8", errors="replace"))
        logger.debug("Found %d Docker container(s)", len(containers))
        return containers

    # ------------------------------------------------------------------
    # All sources
    # ------------------------------------------------------------------

    def discover_all(
        self,
        stored: Mapping[str, HostSettings] | None = None,
        warnings: list[str] | None = None,
    ) -> DiscoveredHosts:
        """Query every enabled source in order, degrading failures to [].

        Stored settings from *stored* are attached to SSH and WSL hosts.
        Failures are appended to *warnings* when a list is given.
        """
        stored = stored or {}
        sources: list[tuple[HostType, bool, Callable[[], list[Host]]]] = [
            (HostType.SSH, self._config.ssh.enabled, self.ssh_hosts),
            (HostType.WSL, self._config.wsl.enabled, self.wsl_distros),
            (HostType.DOCKER, self._config.docker.enabled, self.docker_containers),
        ]
        found: dict[str, list[Host]] = {}
        for host_type, enabled, fetch in sources:
            if not enabled:
                found[host_type.value] = []
                continue
            try:
                hosts = fetch()
            except (*CommandFailure, UnicodeError, ValueError) as exc:
                logger.warning("%s discovery failed: %s", host_type.value, exc)
                if warnings is not None:
                    warnings.append(f"{host_type.value} discovery failed: {exc}")
                hosts = []
            for host in hosts:
                if host.persisted and host.name in stored:
                    host.settings = stored[host.name].model_copy(deep=True)
            found[host_type.value] = hosts
        return DiscoveredHosts(**found)
