"""page_shell.py — Static document shell for add-on popup windows.

ServiceM8 renders ``eventResponse`` inside an iframe, so every page needs the
SDK stylesheet and script. jQuery is included for DOM work in the client
script.
"""
from __future__ import annotations

import re

from config import (
    JQUERY_INTEGRITY,
    JQUERY_URL,
    SERVICEM8_SDK_CSS_URL,
    SERVICEM8_SDK_JS_URL,
    SPINNER_CSS_URL,
)

__all__ = ["PAGE_SHELL", "wrap_response"]

PAGE_SHELL = f"""<html>
<head>
<link rel="stylesheet" href="{SERVICEM8_SDK_CSS_URL}">
<script src="{SERVICEM8_SDK_JS_URL}"></script>
<script src="{JQUERY_URL}" integrity="{JQUERY_INTEGRITY}" crossorigin="anonymous"></script>
<link rel="stylesheet" href="{SPINNER_CSS_URL}" />
<script>
__SCRIPT_BLOCK__
</script>
<style>
body {{
    padding: 1em;
}}
</style>
</head>
<body>
__BODY_MARKUP__
</body>
</html>
"""

_PLACEHOLDER = re.compile(r"__(SCRIPT_BLOCK|BODY_MARKUP)__")


def wrap_response(body_html: str, script: str) -> str:
    """Embed ``body_html`` and ``script`` in the page shell.

    Substitution is a single pass, so placeholder-looking text inside either
    fragment is left alone.
    """
    parts = {"SCRIPT_BLOCK": script, "BODY_MARKUP": body_html}
    return _PLACEHOLDER.sub(lambda m: parts[m.group(1)], PAGE_SHELL)
