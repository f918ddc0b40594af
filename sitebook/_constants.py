"""Common literal values used across sitebook.

These constants keep directive text and artefact filenames centralized so the
loader, renderer, and tests can import the same values without drifting.
Intended for internal use within the sitebook package.

Examples
--------
>>> from sitebook import _constants
>>> _constants.HEADER
'{% include "inc/head.html" %}'
>>> _constants.NUMBERING_FILENAME
'numbering.js'
"""

HEADER = '{% include "inc/head.html" %}'
FOOTER = '{% include "inc/foot.html" %}'

NUMBERING_FILENAME = "numbering.js"

# Copied from the root whenever present, in addition to the configured globs.
DEFAULT_COPY_FILES = (".nojekyll", "CNAME")
