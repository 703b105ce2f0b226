"""
web.xml deployment descriptor editing - ElementTree-based.

Reads an existing web.xml, adds <filter> and <filter-mapping> entries at the
position the servlet schema expects, and writes it back while keeping the XML
prolog (declaration, DOCTYPE), comments and the root namespace intact.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from ..errors import WebDescriptorError

logger = logging.getLogger(__name__)

# web-app children in schema order, starting from <filter>
_FILTER_FOLLOWERS = (
    "filter-mapping",
    "listener",
    "servlet",
    "servlet-mapping",
    "session-config",
    "mime-mapping",
    "welcome-file-list",
    "error-page",
    "taglib",
    "jsp-config",
    "resource-env-ref",
    "resource-ref",
    "security-constraint",
    "login-config",
    "security-role",
    "env-entry",
    "ejb-ref",
    "ejb-local-ref",
)

_ROOT_START_RE = re.compile(r"<(?:[\w.-]+:)?web-app[\s>/]")
_ENCODING_RE = re.compile(rb"^\s*<\?xml[^>]*?encoding\s*=\s*['\"]([A-Za-z][\w.-]*)['\"]")


def _strip_namespace(tag: str) -> str:
    """Remove XML namespace prefix from a tag.

    '{http://java.sun.com/xml/ns/javaee}web-app' -> 'web-app'
    """
    if isinstance(tag, str) and tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag if isinstance(tag, str) else ""


def _namespace_of(tag: str) -> str:
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return ""


def _get_text(element: ET.Element, child_name: str) -> str:
    for child in element:
        if _strip_namespace(child.tag) == child_name:
            return (child.text or "").strip()
    return ""


def _get_texts(element: ET.Element, child_name: str) -> List[str]:
    return [
        (child.text or "").strip()
        for child in element
        if _strip_namespace(child.tag) == child_name
    ]


@dataclass
class FilterEntry:
    """A <filter> declaration."""

    name: str
    filter_class: str


@dataclass
class FilterMappingEntry:
    """A <filter-mapping> declaration."""

    filter_name: str
    url_patterns: List[str] = field(default_factory=list)
    servlet_names: List[str] = field(default_factory=list)


class WebAppDescriptor:
    """Editable model of a web.xml file."""

    def __init__(self, path: Path, root: ET.Element, prolog: str = "", encoding: str = "utf-8"):
        self.path = Path(path)
        self.root = root
        self.prolog = prolog
        self.encoding = encoding
        self.namespace = _namespace_of(root.tag)
        self.modified = False

    # ------------------------------------------------------------------
    # Loading / saving
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "WebAppDescriptor":
        path = Path(path)
        try:
            source = path.read_bytes()
        except OSError as e:
            raise WebDescriptorError(f"Cannot read {path}: {e}") from e
        return cls.parse(source, path)

    @classmethod
    def parse(cls, source: Union[str, bytes], path: Path) -> "WebAppDescriptor":
        """
        Parse descriptor content.

        Bytes are decoded with the encoding named in the XML declaration
        (UTF-8 when there is none), which is also used when saving.
        """
        if isinstance(source, bytes):
            match = _ENCODING_RE.match(source)
            encoding = match.group(1).decode("ascii") if match else "utf-8"
            try:
                codec = "utf-8-sig" if encoding.lower() in ("utf-8", "utf8") else encoding
                source_text = source.decode(codec)
            except (LookupError, UnicodeDecodeError) as e:
                raise WebDescriptorError(f"Cannot decode {path} as {encoding}: {e}") from e
        else:
            source_text = source
            match = _ENCODING_RE.match(source.encode("utf-8"))
            encoding = match.group(1).decode("ascii") if match else "utf-8"

        # expat gets the decoded text, so the declared encoding does not apply twice
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            root = ET.fromstring(source_text, parser=parser)
        except ET.ParseError as e:
            raise WebDescriptorError(f"Invalid XML in {path}: {e}") from e

        if _strip_namespace(root.tag) != "web-app":
            raise WebDescriptorError(
                f"{path} is not a deployment descriptor (root <{_strip_namespace(root.tag)}>)"
            )

        match = _ROOT_START_RE.search(source_text)
        prolog = source_text[: match.start()] if match else ""
        return cls(path, root, prolog, encoding)

    def to_string(self) -> str:
        if self.namespace:
            ET.register_namespace("", self.namespace)
        body = ET.tostring(self.root, encoding="unicode")
        return f"{self.prolog}{body}\n"

    def save(self, path: Optional[Path] = None) -> Path:
        target = Path(path) if path else self.path
        try:
            target.write_bytes(self.to_string().encode(self.encoding, errors="xmlcharrefreplace"))
        except OSError as e:
            raise WebDescriptorError(f"Cannot write {target}: {e}") from e
        self.modified = False
        logger.debug("Saved deployment descriptor %s", target)
        return target

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _children(self, local_name: str) -> List[ET.Element]:
        return [c for c in self.root if _strip_namespace(c.tag) == local_name]

    def get_filters(self) -> List[FilterEntry]:
        return [
            FilterEntry(_get_text(el, "filter-name"), _get_text(el, "filter-class"))
            for el in self._children("filter")
        ]

    def get_filter_mappings(self) -> List[FilterMappingEntry]:
        return [
            FilterMappingEntry(
                _get_text(el, "filter-name"),
                _get_texts(el, "url-pattern"),
                _get_texts(el, "servlet-name"),
            )
            for el in self._children("filter-mapping")
        ]

    def find_filter(self, name: str) -> Optional[FilterEntry]:
        for entry in self.get_filters():
            if entry.name == name:
                return entry
        return None

    def find_filter_mappings(self, filter_name: str) -> List[FilterMappingEntry]:
        return [m for m in self.get_filter_mappings() if m.filter_name == filter_name]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_filter(self, name: str, filter_class: str) -> FilterEntry:
        element = self._new_element("filter", [("filter-name", name), ("filter-class", filter_class)])
        self._insert(element, anchors=("filter",), followers=_FILTER_FOLLOWERS)
        logger.debug("Added filter %s (%s) to %s", name, filter_class, self.path)
        return FilterEntry(name, filter_class)

    def add_filter_mapping(self, filter_name: str, url_pattern: str) -> FilterMappingEntry:
        element = self._new_element(
            "filter-mapping", [("filter-name", filter_name), ("url-pattern", url_pattern)]
        )
        self._insert(
            element, anchors=("filter-mapping", "filter"), followers=_FILTER_FOLLOWERS[1:]
        )
        logger.debug("Mapped filter %s to %s in %s", filter_name, url_pattern, self.path)
        return FilterMappingEntry(filter_name, [url_pattern])

    def _tag(self, local_name: str) -> str:
        return f"{{{self.namespace}}}{local_name}" if self.namespace else local_name

    def _child_indent(self) -> str:
        text = self.root.text
        if text is not None and not text.strip() and "\n" in text:
            return text
        return "\n  "

    def _new_element(self, local_name: str, children: Sequence[tuple]) -> ET.Element:
        indent = self._child_indent()
        unit = indent.split("\n")[-1] or "  "
        element = ET.Element(self._tag(local_name))
        element.text = indent + unit
        for i, (child_name, value) in enumerate(children):
            child = ET.SubElement(element, self._tag(child_name))
            child.text = value
            child.tail = indent + unit if i < len(children) - 1 else indent
        return element

    def _insert(
        self, element: ET.Element, anchors: Sequence[str], followers: Sequence[str]
    ) -> None:
        """Insert after the last anchor element, else before the first follower."""
        children = list(self.root)
        indent = self._child_indent()

        position = None
        for anchor in anchors:
            matches = [i for i, c in enumerate(children) if _strip_namespace(c.tag) == anchor]
            if matches:
                position = matches[-1] + 1
                break

        if position is None:
            for i, child in enumerate(children):
                if _strip_namespace(child.tag) in followers:
                    position = i
                    break

        if position is None:
            position = len(children)

        if position == 0:
            element.tail = self.root.text if children else "\n"
            self.root.text = indent
        else:
            previous = children[position - 1]
            element.tail = previous.tail
            previous.tail = indent

        self.root.insert(position, element)
        self.modified = True
