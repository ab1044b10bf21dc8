"""Messages posted by the dashboard page.

The page speaks camelCase JSON (``{"command": "openFolder", "newWindow": true}``);
each command is a pydantic model discriminated on ``command``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter

from dasshboard.domain.hosts import HostType
from dasshboard.domain.preferences import Layout


class _Message(BaseModel):
    model_config = {"populate_by_name": True, "frozen": True}


class OpenFolderMessage(_Message):
    command: Literal["openFolder"]
    host: str = Field(min_length=1)
    folder: str | None = None
    new_window: bool = Field(default=False, alias="newWindow")
    host_type: HostType = Field(default=HostType.SSH, alias="hostType")


class OpenSshConfigMessage(_Message):
    command: Literal["openSshConfig"]


class OpenSettingsMessage(_Message):
    command: Literal["openSettings"]


class UpdateSectionColorMessage(_Message):
    command: Literal["updateSectionColor"]
    section: HostType
    color: str = ""


class UpdateSectionCollapsedMessage(_Message):
    command: Literal["updateSectionCollapsed"]
    section: HostType
    collapsed: bool


class UpdateLayoutMessage(_Message):
    command: Literal["updateLayout"]
    layout: Layout


class GetHostSettingsMessage(_Message):
    command: Literal["getHostSettings"]
    host: str = Field(min_length=1)
    host_type: HostType | None = Field(default=None, alias="hostType")


class UpdateHostIconMessage(_Message):
    command: Literal["updateHostIcon"]
    host: str = Field(min_length=1)
    icon: str = ""
    color: str = ""


DashboardMessage = Annotated[
    OpenFolderMessage
    | OpenSshConfigMessage
    | OpenSettingsMessage
    | UpdateSectionColorMessage
    | UpdateSectionCollapsedMessage
    | UpdateLayoutMessage
    | GetHostSettingsMessage
    | UpdateHostIconMessage,
    Field(discriminator="command"),
]

MESSAGE_ADAPTER: TypeAdapter[DashboardMessage] = TypeAdapter(DashboardMessage)
