"""
File template engine for struts2-scaffold.

Renders the bundled struts.xml templates (or overrides from a user template
directory) with jinja2 and writes them into the project.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from ..constants import STRUTS_2_0_XML, STRUTS_2_1_XML
from ..errors import TemplateNotFoundError

logger = logging.getLogger(__name__)


class FileTemplateManager:
    """Locates and materializes named file templates."""

    TEMPLATE_DIR = Path(__file__).parent
    TEMPLATE_SUFFIX = ".j2"

    AVAILABLE_TEMPLATES = {
        STRUTS_2_0_XML: "struts.xml for Struts 2.0.x (FilterDispatcher)",
        STRUTS_2_1_XML: "struts.xml for Struts 2.1.x and later (StrutsPrepareAndExecuteFilter)",
    }

    def __init__(self, template_dir: Optional[str] = None):
        """
        Args:
            template_dir: Optional directory whose templates take precedence
                over the bundled ones
        """
        search_path: List[str] = []
        if template_dir:
            search_path.append(str(template_dir))
        search_path.append(str(self.TEMPLATE_DIR))

        self.template_dir = template_dir
        self.environment = Environment(
            loader=FileSystemLoader(search_path),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    @classmethod
    def list_templates(cls) -> Dict[str, str]:
        """List all bundled templates with their descriptions."""
        return cls.AVAILABLE_TEMPLATES.copy()

    def render(self, template_name: str, properties: Optional[Dict[str, Any]] = None) -> str:
        try:
            template = self.environment.get_template(template_name + self.TEMPLATE_SUFFIX)
        except TemplateNotFound as e:
            raise TemplateNotFoundError(
                f"Unknown template: {template_name}. Available: {list(self.AVAILABLE_TEMPLATES)}"
            ) from e
        return template.render(**(properties or {}))

    def create_from_template(
        self,
        template_name: str,
        file_name: str,
        directory: Path,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Path:
        """
        Create a new file from a template.

        Args:
            template_name: Name of the template to use
            file_name: Name of the file to create
            directory: Directory the file is created in
            properties: Template variables; FILE_NAME is always provided

        Raises:
            TemplateNotFoundError: If the template does not exist
            FileExistsError: If the target file already exists
        """
        target = Path(directory) / file_name
        if target.exists():
            raise FileExistsError(f"File already exists: {target}")

        content = self.render(template_name, {"FILE_NAME": file_name, **(properties or {})})
        target.write_text(content, encoding="utf-8")
        logger.info("Created %s from template %s", target, template_name)
        return target
