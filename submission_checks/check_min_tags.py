"""
MUST HAVE REQUIREMENTS:
- Require at least one h1 and at least one p anywhere in the document.
- Name the first missing tag, h1 before p.
"""
import sys

import document
import messages

doc = document.load(sys.argv[1])
for tag in ("h1", "p"):
    if doc.select(tag) is None:
        print(messages.text("min_tags_fail", tag=tag))
        sys.exit(1)
print(messages.text("min_tags_ok"))
