"""Parsing for ``docker ps`` output rendered with :data:`DOCKER_PS_FORMAT`."""

from __future__ import annotations

from dasshboard.domain.hosts import Host, HostType

# Full container id, name, image, human status, pipe separated.
DOCKER_PS_FORMAT = "{{.ID}}|{{.Names}}|{{.Image}}|{{.Status}}"


def parse_docker_ps(text: str) -> list[Host]:
    """Turn ``docker ps --no-trunc --format DOCKER_PS_FORMAT`` lines into hosts.

    Lines with fewer than four fields are ignored. Container settings are
    always empty because containers are never customised or persisted.
    """
    containers: list[Host] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split("|")
        if len(parts) < 4:
            continue
        container_id, name, image, status = (p.strip() for p in parts[:4])
        if not name:
            continue
        containers.append(
            Host(
                name=name,
                hostname=name,
                type=HostType.DOCKER,
                container_id=container_id.lower(),
                image=image,
                container_status=status,
            )
        )
    return containers
