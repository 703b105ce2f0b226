"""
Constants shared across struts2-scaffold.

File names, template identifiers and filter class names used when adding
Struts2 support to a module.
"""

STRUTS_XML_DEFAULT_FILENAME = "struts.xml"

# Template identifiers (resolved to "<id>.j2" by the template engine)
STRUTS_2_0_XML = "struts-2.0.xml"
STRUTS_2_1_XML = "struts-2.1.xml"

STRUTS_2_0_FILTER_CLASS = "org.apache.struts2.dispatcher.FilterDispatcher"
STRUTS_2_1_FILTER_CLASS = "org.apache.struts2.dispatcher.ng.filter.StrutsPrepareAndExecuteFilter"

# Versions strictly greater than this use the 2.1.x template and filter
STRUTS_2_1_THRESHOLD = "2.1"

FILTER_NAME = "struts2"
FILTER_URL_PATTERN = "/*"

DEFAULT_FILE_SET_NAME = "Default File Set"
FILE_SET_ID_PREFIX = "s2fileset"

NOTIFICATION_GROUP_ID = "struts2"
NOTIFICATION_TITLE = "Struts 2 Setup"
NOTIFICATION_CONTENT = (
    'Struts 2 Facet has been created, please <a href="more">setup fileset(s)</a>'
)

FRAMEWORK_TITLE = "Struts 2"
FRAMEWORK_ID_PREFIX = "struts2-"

FACET_STATE_DIR = ".struts2"
FACET_STATE_FILE = "facet.yaml"
