"""TEXT value escaping for iCalendar properties.

Quote, tab, backspace and form-feed are left as they are on purpose: TEXT
has no escape sequence for them.
"""

import re

# Order matters only for the regex alternation: CRLF must win over lone CR.
_ESCAPE_PATTERN = re.compile(r"\r\n|[\\;,\n\r]")

_ESCAPES = {
    "\\": "\\\\",
    ";": "\\;",
    ",": "\\,",
    "\r\n": "\\n",
    "\n": "\\n",
    "\r": "\\n",
}


def escape_text(value) -> str:
    """Escape a TEXT property value.

    Backslash, semicolon and comma get a leading backslash and every line
    break becomes a literal ``\\n``. The text is scanned once, so an
    already-escaped value passed in again is escaped a second time.

    Args:
        value: The value to escape; non-strings are converted with str().

    Returns:
        The escaped text.
    """
    return _ESCAPE_PATTERN.sub(lambda match: _ESCAPES[match.group(0)], str(value))
