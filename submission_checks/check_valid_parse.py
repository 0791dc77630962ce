"""
MUST HAVE REQUIREMENTS:
- Parse the submission with the shared lxml adapter.
- Fail when the document carries a parse error, printing the first one.
"""
# ----------------------------------
# No parser errors
# ----------------------------------
import sys

import document
import messages

doc = document.load(sys.argv[1])
error = doc.parser_error()
if error:
    print(messages.text("parse_fail", error=error))
    sys.exit(1)
print(messages.text("parse_ok"))
