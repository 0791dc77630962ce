"""
MUST HAVE REQUIREMENTS:
- Walk every element under body in document order.
- Accept h1 and p, and any element whose direct parent is h1 or p (one level of inline markup).
- Stop at the first other element and name its tag.
- Fail when body is missing.
"""
# ----------------------------------
# Nothing but h1/p (and their direct children) under body
# ----------------------------------
import sys

import document
import messages

doc = document.load(sys.argv[1])
if doc.body is None:
    print(messages.text("body_missing"))
    sys.exit(1)
for el in document.descendants(doc.body):
    tag = document.tag_name(el)
    up = document.parent(el)
    in_text_tag = up is not None and document.tag_name(up) in document.ALLOWED_TAGS
    if tag not in document.ALLOWED_TAGS and not in_text_tag:
        print(messages.text("extra_fail", tag=tag))
        sys.exit(1)
print(messages.text("extra_ok"))
