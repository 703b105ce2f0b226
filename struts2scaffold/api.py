"""
Main API interface for struts2-scaffold

Provides a unified facade for adding Struts 2 support to projects on disk and
for inspecting or editing the resulting facet configuration.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from .config import Struts2ScaffoldConfig
from .errors import ScaffoldError
from .facet import StrutsFacet, StrutsFileSet
from .framework import FrameworkVersion, ScaffoldResult, StrutsFrameworkSupportProvider
from .notifications import LoggingNotificationSink, NotificationBus
from .project import Project
from .templates import FileTemplateManager

logger = logging.getLogger(__name__)


class Struts2Scaffold:
    """
    Main API class for struts2-scaffold.

    Wires configuration, the template engine, the notification sinks and the
    framework support provider together.
    """

    def __init__(
        self,
        config: Optional[Struts2ScaffoldConfig] = None,
        notification_sinks: Optional[List] = None,
        settings_opener: Optional[Callable[[StrutsFacet], None]] = None,
    ):
        """
        Args:
            config: Optional configuration object. If None, uses default configuration.
            notification_sinks: Sinks subscribed to every opened project's bus;
                defaults to logging the notifications
            settings_opener: Called with the facet when a notification link is followed
        """
        self.config = config or Struts2ScaffoldConfig.default()
        self.notification_sinks = (
            notification_sinks if notification_sinks is not None else [LoggingNotificationSink()]
        )

        scaffold_settings = self.config.scaffold_settings
        self.provider = StrutsFrameworkSupportProvider(
            template_engine=FileTemplateManager(scaffold_settings.template_dir),
            file_set_name=scaffold_settings.file_set_name,
            settings_opener=settings_opener,
        )

    def get_versions(self) -> List[FrameworkVersion]:
        return self.provider.get_versions()

    def open_project(self, project_path: Union[str, Path]) -> Project:
        """Open a project with this instance's notification sinks subscribed."""
        project_path = Path(project_path)
        if not project_path.is_dir():
            raise ScaffoldError(f"Project directory not found: {project_path}")

        bus = NotificationBus(enabled=self.config.notification_settings.enabled)
        for sink in self.notification_sinks:
            bus.subscribe(sink)
        return Project.open(project_path, self.config.project_settings, bus)

    def get_facet(self, project_path: Union[str, Path], module_name: Optional[str] = None) -> StrutsFacet:
        project = self.open_project(project_path)
        return StrutsFacet(project.find_module(module_name))

    def add_framework(
        self,
        project_path: Union[str, Path],
        version: Optional[str] = None,
        module_name: Optional[str] = None,
    ) -> ScaffoldResult:
        """
        Add Struts 2 support to a module.

        The setup is queued as a startup hook and runs when the project
        finishes initializing.

        Args:
            project_path: Project directory
            version: Framework version name; defaults to the configured one
            module_name: Module to set up; defaults to the first module
        """
        version_name = version or self.config.scaffold_settings.default_version
        framework_version = self.provider.get_version(version_name)

        project = self.open_project(project_path)
        facet = StrutsFacet(project.find_module(module_name))

        results: List[ScaffoldResult] = []
        self.provider.setup_configuration(facet, project, framework_version, results.append)
        project.initialize()
        project.close()

        if not results:
            raise ScaffoldError("Struts 2 setup did not run")
        return results[0]

    def add_config_file(
        self,
        project_path: Union[str, Path],
        file_path: Union[str, Path],
        file_set_id: Optional[str] = None,
        module_name: Optional[str] = None,
    ) -> StrutsFileSet:
        """
        Add a configuration file to a file set of the module's facet.

        Without ``file_set_id`` the first file set is used, or a new one is
        created when the facet has none yet.
        """
        facet = self.get_facet(project_path, module_name)
        configuration = facet.configuration

        file_path = Path(file_path)
        if not file_path.is_absolute():
            file_path = facet.module.root / file_path
        if not file_path.is_file():
            raise ScaffoldError(f"Configuration file not found: {file_path}")

        if file_set_id:
            file_set = configuration.find_file_set(file_set_id)
            if file_set is None:
                raise ScaffoldError(f"Unknown file set: {file_set_id}")
        elif configuration.file_sets:
            file_set = configuration.file_sets[0]
        else:
            existing = configuration.file_sets
            file_set = StrutsFileSet(
                StrutsFileSet.get_unique_id(existing),
                StrutsFileSet.get_unique_name(self.provider.file_set_name, existing),
            )
            configuration.add_file_set(file_set)

        if file_set.add_file(file_path):
            configuration.save()
            logger.info("Added %s to file set %s", file_path, file_set.id)
        else:
            logger.info("%s is already part of file set %s", file_path, file_set.id)
        return file_set
