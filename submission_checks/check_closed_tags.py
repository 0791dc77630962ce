"""
MUST HAVE REQUIREMENTS:
- Serialize the markup inside body with lxml.
- Fail when it ends with an unterminated tag opening (< followed by non-> up to the end).
- Stay a coarse smoke test; no grammar validation.
- Fail when body is missing.
"""
import re
import sys

import document
import messages

open_tag_re = re.compile(r"<[^>]+$")

doc = document.load(sys.argv[1])
if doc.body is None:
    print(messages.text("body_missing"))
    sys.exit(1)
if open_tag_re.search(document.inner_html(doc.body)):
    print(messages.text("closing_fail"))
    sys.exit(1)
print(messages.text("closing_ok"))
