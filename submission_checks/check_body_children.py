"""
MUST HAVE REQUIREMENTS:
- Every direct child element of body must be h1 or p.
- Report the 1-based position and tag of the first offending child.
- Fail when body is missing.
"""
# ----------------------------------
# Body children whitelist
# ----------------------------------
import sys

import document
import messages

doc = document.load(sys.argv[1])
if doc.body is None:
    print(messages.text("body_missing"))
    sys.exit(1)
for index, child in enumerate(document.children(doc.body), 1):
    tag = document.tag_name(child)
    if tag not in document.ALLOWED_TAGS:
        print(messages.text("children_fail", index=index, tag=tag))
        sys.exit(1)
print(messages.text("children_ok"))
