"""
Struts2 framework versions and the libraries attached for each of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple

from ..errors import UnknownVersionError

MAVEN_CENTRAL_URL = "https://repo1.maven.org/maven2"


@dataclass(frozen=True)
class LibraryInfo:
    """A library jar required by a framework version."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def jar_name(self) -> str:
        return f"{self.artifact_id}-{self.version}.jar"

    @property
    def download_url(self) -> str:
        group_path = self.group_id.replace(".", "/")
        return f"{MAVEN_CENTRAL_URL}/{group_path}/{self.artifact_id}/{self.version}/{self.jar_name}"

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def to_dict(self) -> Dict[str, str]:
        return {
            "coordinates": self.coordinates,
            "jar": self.jar_name,
            "url": self.download_url,
        }


def _lib(coordinates: str) -> LibraryInfo:
    group_id, artifact_id, version = coordinates.split(":")
    return LibraryInfo(group_id, artifact_id, version)


class StrutsVersion(Enum):
    """Known Struts2 release lines."""

    STRUTS_2_0 = (
        "2.0.14",
        (
            _lib("org.apache.struts:struts2-core:2.0.14"),
            _lib("com.opensymphony:xwork:2.0.7"),
            _lib("opensymphony:ognl:2.6.11"),
            _lib("freemarker:freemarker:2.3.8"),
            _lib("commons-logging:commons-logging:1.0.4"),
        ),
    )
    STRUTS_2_1 = (
        "2.1.8.1",
        (
            _lib("org.apache.struts:struts2-core:2.1.8.1"),
            _lib("org.apache.struts.xwork:xwork-core:2.1.6"),
            _lib("opensymphony:ognl:2.7.3"),
            _lib("org.freemarker:freemarker:2.3.15"),
            _lib("commons-logging:commons-logging:1.0.4"),
            _lib("commons-fileupload:commons-fileupload:1.2.1"),
            _lib("commons-io:commons-io:1.3.2"),
        ),
    )
    STRUTS_2_3 = (
        "2.3.37",
        (
            _lib("org.apache.struts:struts2-core:2.3.37"),
            _lib("org.apache.struts.xwork:xwork-core:2.3.37"),
            _lib("ognl:ognl:3.0.21"),
            _lib("org.freemarker:freemarker:2.3.28"),
            _lib("org.javassist:javassist:3.20.0-GA"),
            _lib("org.apache.commons:commons-lang3:3.2"),
            _lib("commons-fileupload:commons-fileupload:1.4"),
            _lib("commons-io:commons-io:2.6"),
        ),
    )

    def __init__(self, version_name: str, libraries: Tuple[LibraryInfo, ...]):
        self.version_name = version_name
        self.libraries = libraries

    def __str__(self) -> str:
        return self.version_name

    @classmethod
    def from_name(cls, name: str) -> "StrutsVersion":
        for version in cls:
            if version.version_name == name:
                return version
        raise UnknownVersionError(
            f"Unknown Struts2 version: {name}. Available: {[v.version_name for v in cls]}"
        )


@dataclass(frozen=True)
class FrameworkVersion:
    """A selectable framework version as offered to the user."""

    version_name: str
    id: str
    libraries: Tuple[LibraryInfo, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version_name,
            "id": self.id,
            "libraries": [lib.to_dict() for lib in self.libraries],
        }


def known_version_names() -> List[str]:
    return [version.version_name for version in StrutsVersion]
