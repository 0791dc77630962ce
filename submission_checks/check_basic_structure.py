"""
MUST HAVE REQUIREMENTS:
- Require html, head and body elements in the parsed document.
- Name every missing part in the failure message.
"""
# ----------------------------------
# html, head and body must exist
# ----------------------------------
import sys

import document
import messages

doc = document.load(sys.argv[1])
parts = [("html", doc.root), ("head", doc.head), ("body", doc.body)]
missing = [name for name, el in parts if el is None]
if missing:
    print(messages.text("structure_fail", missing=", ".join(missing)))
    sys.exit(1)
print(messages.text("structure_ok"))
