"""
MUST HAVE REQUIREMENTS:
- Every h1, then every p, in the document must have non-blank text content.
- Positions are 1-based and counted per tag.
- Report the first empty element with its tag and position.
"""
# ----------------------------------
# h1 and p need content
# ----------------------------------
import sys

import document
import messages

doc = document.load(sys.argv[1])
for tag in ("h1", "p"):
    for index, el in enumerate(doc.select_all(tag), 1):
        if not document.text(el).strip():
            print(messages.text("content_fail", tag=tag, index=index))
            sys.exit(1)
print(messages.text("content_ok"))
