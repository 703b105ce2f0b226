"""
"Add Framework" support for Struts 2.

StrutsFrameworkSupportProvider offers the selectable Struts2 versions and sets
up a module once a version is chosen: it creates a default struts.xml, registers
it in a new file set of the facet configuration, declares the struts2 filter in
web.xml and tells the user where to continue configuring the facet.

The three project mutations share one write transaction, so a failure in any of
them leaves the module as it was. Outcomes are reported as a ScaffoldResult
instead of being raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from ..constants import (
    DEFAULT_FILE_SET_NAME,
    FILTER_NAME,
    FILTER_URL_PATTERN,
    FRAMEWORK_ID_PREFIX,
    FRAMEWORK_TITLE,
    NOTIFICATION_CONTENT,
    NOTIFICATION_GROUP_ID,
    NOTIFICATION_TITLE,
    STRUTS_2_0_FILTER_CLASS,
    STRUTS_2_0_XML,
    STRUTS_2_1_FILTER_CLASS,
    STRUTS_2_1_THRESHOLD,
    STRUTS_2_1_XML,
    STRUTS_XML_DEFAULT_FILENAME,
)
from ..errors import HostInvariantError
from ..facet import StrutsFacet, StrutsFileSet
from ..interfaces import ProjectTransaction, SourceTree, TemplateEngine
from ..notifications import HyperlinkEvent, HyperlinkEventType, Notification, NotificationType
from ..templates import FileTemplateManager
from .version_compare import is_newer
from .versions import FrameworkVersion, StrutsVersion

logger = logging.getLogger(__name__)

STEP_CREATE_STRUTS_XML = "create_struts_xml"
STEP_REGISTER_FILE_SET = "register_file_set"
STEP_REGISTER_FILTER = "register_filter"
STEP_NOTIFY = "notify"

SKIP_NO_SOURCE_ROOT = "no_source_root"
SKIP_SOURCE_ROOT_MISSING = "source_root_missing"
SKIP_STRUTS_XML_EXISTS = "struts_xml_exists"


class ScaffoldStatus(Enum):
    """Outcome of setting up a module."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILURE = "failure"
    PARTIAL_FAILURE = "partial_failure"


@dataclass
class ScaffoldResult:
    """Standardized result of one scaffolding run."""

    status: ScaffoldStatus
    module_name: str
    version_name: str
    completed_steps: List[str] = field(default_factory=list)
    rolled_back_steps: List[str] = field(default_factory=list)
    skip_reason: Optional[str] = None
    error: Optional[str] = None
    created_file: Optional[str] = None
    file_set_id: Optional[str] = None
    filter_class: Optional[str] = None
    notification: Optional[Notification] = None

    @property
    def success(self) -> bool:
        return self.status in (ScaffoldStatus.SUCCESS, ScaffoldStatus.SKIPPED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "module": self.module_name,
            "version": self.version_name,
            "completed_steps": list(self.completed_steps),
            "rolled_back_steps": list(self.rolled_back_steps),
            "skip_reason": self.skip_reason,
            "error": self.error,
            "created_file": self.created_file,
            "file_set_id": self.file_set_id,
            "filter_class": self.filter_class,
        }


@dataclass(frozen=True)
class TemplateVariant:
    template_name: str
    filter_class: str


STRUTS_2_0_VARIANT = TemplateVariant(STRUTS_2_0_XML, STRUTS_2_0_FILTER_CLASS)
STRUTS_2_1_VARIANT = TemplateVariant(STRUTS_2_1_XML, STRUTS_2_1_FILTER_CLASS)


def select_variant(version_name: str) -> TemplateVariant:
    """2.1.x variant for versions strictly newer than 2.1, otherwise 2.0.x."""
    if is_newer(version_name, STRUTS_2_1_THRESHOLD):
        return STRUTS_2_1_VARIANT
    return STRUTS_2_0_VARIANT


def _log_facet_settings(facet: StrutsFacet) -> None:
    logger.info(
        "Facet settings for %s: %s",
        facet.name,
        [fs.to_dict() for fs in facet.configuration.file_sets],
    )


class StrutsFrameworkSupportProvider:
    """Adds Struts 2 support to a module of a project."""

    def __init__(
        self,
        template_engine: Optional[TemplateEngine] = None,
        file_set_name: str = DEFAULT_FILE_SET_NAME,
        settings_opener: Optional[Callable[[StrutsFacet], None]] = None,
    ):
        """
        Args:
            template_engine: TemplateEngine used to create struts.xml
            file_set_name: Name prefix of the file set created for struts.xml
            settings_opener: Called with the facet when the user follows the
                notification link
        """
        self.template_engine = template_engine or FileTemplateManager()
        self.file_set_name = file_set_name
        self.settings_opener = settings_opener or _log_facet_settings
        self.last_result: Optional[ScaffoldResult] = None

    @property
    def title(self) -> str:
        return FRAMEWORK_TITLE

    def get_versions(self) -> List[FrameworkVersion]:
        return [
            FrameworkVersion(version.version_name, FRAMEWORK_ID_PREFIX + version.version_name, version.libraries)
            for version in StrutsVersion
        ]

    def get_version(self, name: str) -> FrameworkVersion:
        version = StrutsVersion.from_name(name)
        return FrameworkVersion(version.version_name, FRAMEWORK_ID_PREFIX + name, version.libraries)

    def setup_configuration(
        self,
        facet: StrutsFacet,
        project,
        version: Union[FrameworkVersion, str],
        on_complete: Optional[Callable[[ScaffoldResult], None]] = None,
    ) -> None:
        """
        Schedule scaffolding for when the project has finished initializing.

        Args:
            facet: Facet of the module being set up
            project: Project owning the module
            version: Chosen framework version
            on_complete: Receives the ScaffoldResult once the hook has run
        """

        def _run() -> None:
            result = self.scaffold(facet, project, version)
            if on_complete is not None:
                on_complete(result)

        project.startup_manager.run_when_project_initialized(_run)

    def scaffold(
        self,
        facet: StrutsFacet,
        project,
        version: Union[FrameworkVersion, str],
        source_tree: Optional[SourceTree] = None,
    ) -> ScaffoldResult:
        """Set up the module right away and report what happened."""
        version_name = version.version_name if isinstance(version, FrameworkVersion) else str(version)
        module = facet.module
        result = ScaffoldResult(ScaffoldStatus.SKIPPED, module.name, version_name)
        self.last_result = result

        source_tree = source_tree or module.source_tree
        source_roots = source_tree.get_source_roots()
        if not source_roots:
            result.skip_reason = SKIP_NO_SOURCE_ROOT
            logger.debug("Module %s has no source roots, nothing to set up", module.name)
            return result

        directory = source_tree.find_directory(source_roots[0])
        if directory is None:
            result.skip_reason = SKIP_SOURCE_ROOT_MISSING
            logger.debug("Source root %s of %s does not exist", source_roots[0], module.name)
            return result

        if source_tree.find_file(directory, STRUTS_XML_DEFAULT_FILENAME) is not None:
            result.skip_reason = SKIP_STRUTS_XML_EXISTS
            logger.debug("%s already contains %s", directory, STRUTS_XML_DEFAULT_FILENAME)
            return result

        variant = select_variant(version_name)
        result.filter_class = variant.filter_class
        steps: List[str] = []
        tx: Optional[ProjectTransaction] = None
        try:
            with project.transactions.write_action("Add Struts 2 support") as tx:
                # create struts.xml & fileset
                struts_xml = self.template_engine.create_from_template(
                    variant.template_name,
                    STRUTS_XML_DEFAULT_FILENAME,
                    directory,
                    {"MODULE_NAME": module.name},
                )
                tx.track_created(struts_xml)
                result.created_file = str(struts_xml)
                steps.append(STEP_CREATE_STRUTS_XML)

                file_set = self._register_file_set(facet, struts_xml, tx)
                result.file_set_id = file_set.id
                steps.append(STEP_REGISTER_FILE_SET)

                # create filter & mapping in web.xml
                self._register_filter(facet, variant.filter_class, tx)
                steps.append(STEP_REGISTER_FILTER)
        except Exception as e:
            logger.exception("error creating %s from template", STRUTS_XML_DEFAULT_FILENAME)
            result.error = f"{type(e).__name__}: {e}"
            if tx is not None and tx.rollback_errors:
                result.status = ScaffoldStatus.PARTIAL_FAILURE
                result.completed_steps = steps
            else:
                result.status = ScaffoldStatus.FAILURE
                result.rolled_back_steps = steps
                result.created_file = None
                result.file_set_id = None
            return result

        result.completed_steps = steps
        result.notification = self._notify(facet, project)
        steps.append(STEP_NOTIFY)
        result.status = ScaffoldStatus.SUCCESS
        logger.info(
            "Added Struts %s support to module %s (%s)",
            version_name,
            module.name,
            variant.filter_class,
        )
        return result

    def _register_file_set(
        self, facet: StrutsFacet, struts_xml: Path, tx: ProjectTransaction
    ) -> StrutsFileSet:
        configuration = facet.configuration
        existing = configuration.file_sets
        file_set = StrutsFileSet(
            StrutsFileSet.get_unique_id(existing),
            StrutsFileSet.get_unique_name(self.file_set_name, existing),
            configuration,
        )
        file_set.add_file(struts_xml)
        configuration.add_file_set(file_set)
        tx.on_rollback(lambda: configuration.remove_file_set(file_set), "unregister file set")

        state_path = configuration.state_path
        if state_path is not None:
            if not state_path.parent.exists():
                tx.track_created(state_path.parent)
            tx.backup(state_path)
            configuration.save()
        return file_set

    def _register_filter(
        self, facet: StrutsFacet, filter_class: str, tx: ProjectTransaction
    ) -> None:
        web_facet = facet.get_web_facet()
        if web_facet is None:
            raise HostInvariantError(f"Module {facet.module.name} has no web facet")

        web_app = web_facet.get_root()
        if web_app is None:
            raise HostInvariantError(f"No deployment descriptor at {web_facet.web_xml}")

        if web_app.find_filter(FILTER_NAME) is None:
            web_app.add_filter(FILTER_NAME, filter_class)
        else:
            logger.warning("Filter %s already declared in %s", FILTER_NAME, web_app.path)

        mappings = web_app.find_filter_mappings(FILTER_NAME)
        if not any(FILTER_URL_PATTERN in m.url_patterns for m in mappings):
            web_app.add_filter_mapping(FILTER_NAME, FILTER_URL_PATTERN)

        if web_app.modified:
            tx.backup(web_app.path)
            web_app.save()

    def _notify(self, facet: StrutsFacet, project) -> Notification:
        def show_facet_settings(notification: Notification, event: HyperlinkEvent) -> None:
            if event.event_type is HyperlinkEventType.ACTIVATED:
                notification.expire()
                self.settings_opener(facet)

        notification = Notification(
            NOTIFICATION_GROUP_ID,
            NOTIFICATION_TITLE,
            NOTIFICATION_CONTENT,
            NotificationType.INFORMATION,
            show_facet_settings,
        )
        project.notification_bus.notify(notification)
        return notification
