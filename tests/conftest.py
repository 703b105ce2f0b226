"""Shared fixtures: small Java web projects on disk."""

import pytest

from struts2scaffold.facet import StrutsFacet
from struts2scaffold.project import Project

WEB_XML_25 = """<?xml version="1.0" encoding="UTF-8"?>
<web-app xmlns="http://java.sun.com/xml/ns/javaee"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="http://java.sun.com/xml/ns/javaee http://java.sun.com/xml/ns/javaee/web-app_2_5.xsd"
         version="2.5">
    <display-name>Sample</display-name>
    <welcome-file-list>
        <welcome-file>index.jsp</welcome-file>
    </welcome-file-list>
</web-app>
"""

WEB_XML_23 = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE web-app PUBLIC "-//Sun Microsystems, Inc.//DTD Web Application 2.3//EN" "http://java.sun.com/dtd/web-app_2_3.dtd">
<web-app>
  <!-- servlets -->
  <servlet>
    <servlet-name>default</servlet-name>
    <servlet-class>org.example.DefaultServlet</servlet-class>
  </servlet>
</web-app>
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep user environment variables out of the tests."""
    for name in (
        "STRUTS2SCAFFOLD_DEFAULT_VERSION",
        "STRUTS2SCAFFOLD_FILE_SET_NAME",
        "STRUTS2SCAFFOLD_TEMPLATE_DIR",
        "STRUTS2SCAFFOLD_SOURCE_ROOTS",
        "STRUTS2SCAFFOLD_WEB_XML",
        "STRUTS2SCAFFOLD_NOTIFICATIONS_ENABLED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def web_project(tmp_path):
    """Plain layout project: src/ and web/WEB-INF/web.xml."""
    root = tmp_path / "shop"
    (root / "src").mkdir(parents=True)
    web_inf = root / "web" / "WEB-INF"
    web_inf.mkdir(parents=True)
    (web_inf / "web.xml").write_text(WEB_XML_25, encoding="utf-8")
    return root


@pytest.fixture
def maven_project(tmp_path):
    """Maven layout project with a Servlet 2.3 web.xml."""
    root = tmp_path / "maven-shop"
    (root / "src" / "main" / "java").mkdir(parents=True)
    (root / "src" / "main" / "resources").mkdir(parents=True)
    web_inf = root / "src" / "main" / "webapp" / "WEB-INF"
    web_inf.mkdir(parents=True)
    (web_inf / "web.xml").write_text(WEB_XML_23, encoding="utf-8")
    (root / "pom.xml").write_text("<project/>\n", encoding="utf-8")
    return root


@pytest.fixture
def project(web_project):
    return Project.open(web_project)


@pytest.fixture
def facet(project):
    return StrutsFacet(project.find_module())
