"""
Constants and default values for model conversions.

This module centralizes the default values used when converting API
responses to models and when building simplified views of them.
"""

#
# Common defaults
#
EMPTY_STRING = ""
UNASSIGNED = "Unassigned"

#
# Jira defaults
#

# Supported REST API versions
JIRA_API_VERSIONS = ("2", "3")
JIRA_DEFAULT_API_VERSION = "3"

# Pagination defaults
DEFAULT_START_AT = 0
DEFAULT_MAX_RESULTS = 50
