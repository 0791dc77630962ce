"""
MUST HAVE REQUIREMENTS:
- Look for the literal <!doctype html> in the raw source, case-insensitively.
"""
import sys

import document
import messages

doc = document.load(sys.argv[1])
if "<!doctype html>" not in doc.source.lower():
    print(messages.text("doctype_fail"))
    sys.exit(1)
print(messages.text("doctype_ok"))
