"""
MUST HAVE REQUIREMENTS:
- Read the submission as UTF-8 text.
- Fail with the file name and the underlying error when it cannot be read.
"""
# ----------------------------------
# Gate: submission can be read
# ----------------------------------
import os
import sys

import document
import messages

document.load(sys.argv[1])
print(messages.text("read_ok", file=os.path.basename(sys.argv[1])))
