"""Common literal values used across water_docs.

These constants keep the URL contract and the fixed fallback markup in one
place so the navigator, the page builder, and tests agree on them.

Examples
--------
>>> from water_docs import _constants
>>> _constants.PAGE_PARAM
'page'
>>> "under construction" in _constants.PLACEHOLDER_HTML.lower()
True
"""

PAGE_PARAM = "page"
DEFAULT_INTRO_ENTRY = "introduction"
CONTENT_DIR = "content"
MOBILE_BREAKPOINT = 768

LOADING_HTML = '<div class="loading">Loading content...</div>'
PLACEHOLDER_HTML = (
    '<div class="under-construction">'
    '<i class="fas fa-hard-hat"></i>'
    "<h2>Under construction</h2>"
    "<p>This part of the documentation is still being written. "
    "Please check back soon.</p>"
    "</div>"
)
