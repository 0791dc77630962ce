"""
MUST HAVE REQUIREMENTS:
- Scan the submission folder given as the only argument for non-hidden .html files.
- Require exactly one candidate; report expected and found counts plus the names (or none) otherwise.
- Print the full path of the single candidate as the last line so the runner can target it.
"""
# ----------------------------------
# Gate: exactly one .html submission
# ----------------------------------
import os
import sys

import document
import messages

folder = sys.argv[1]
found = document.scan(folder)
if len(found) != 1:
    names = ", ".join(found) or messages.text("count_none")
    print(messages.text("count_fail", expected=1, count=len(found), files=names))
    sys.exit(1)
print(os.path.join(os.path.abspath(folder), found[0]))
