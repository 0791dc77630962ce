"""
MUST HAVE REQUIREMENTS:
- List candidate files: names ending in .html that are not hidden, sorted; a missing folder means none.
- Read the submission as UTF-8 text, replacing undecodable bytes; only OS errors fail the read.
- Build the tree with html5lib (HTML5 tree construction, lxml tree) so html, head and body always exist.
- Record parser failures on the document instead of raising.
- Expose root, head, body, tag queries, direct children, parent, text and inner markup helpers.
"""
# ----------------------------------
# Shared loading and tree helpers for the check scripts
# ----------------------------------
import os
import sys
from html import escape

import html5lib
from lxml import etree

import messages

ALLOWED_TAGS = {"h1", "p"}


# ----------------------------------
# Directory scan
# ----------------------------------
def scan(directory):
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return []
    return [n for n in names if n.endswith(".html") and not n.startswith(".")]


def read_source(path):
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


# ----------------------------------
# Parsed submission
# ----------------------------------
class Document:
    def __init__(self, source):
        self.source = source
        self.errors = []
        root = None
        try:
            tree = html5lib.parse(source, treebuilder="lxml", namespaceHTMLElements=False)
            root = tree.getroot()
        except (etree.LxmlError, ValueError) as exc:
            self.errors.append(str(exc))
        self.root = root
        self.head = root.find("head") if root is not None else None
        self.body = root.find("body") if root is not None else None

    def parser_error(self):
        return self.errors[0] if self.errors else None

    def select(self, tag):
        found = self.select_all(tag)
        return found[0] if found else None

    def select_all(self, tag):
        if self.root is None:
            return []
        return list(self.root.iter(tag))


def load(path):
    try:
        source = read_source(path)
    except OSError as exc:
        print(messages.text("read_fail", file=os.path.basename(path), error=exc))
        sys.exit(1)
    return Document(source)


# ----------------------------------
# Node helpers (comments and PIs are not elements)
# ----------------------------------
def is_element(node):
    return isinstance(node.tag, str)


def tag_name(el):
    return el.tag.lower()


def children(el):
    return [c for c in el if is_element(c)]


def descendants(el):
    return [d for d in el.iterdescendants() if is_element(d)]


def parent(el):
    return el.getparent()


def text(el):
    return el.xpath("string()")


def inner_html(el):
    parts = [escape(el.text or "", quote=False)]
    for child in el:
        parts.append(etree.tostring(child, method="html", encoding="unicode"))
    return "".join(parts)
