"""Go-style struct tag lookup (`json:"id" gorm:"primaryKey"`)."""

import re

JSON_TAG_KEY = "json"
SKIP_SENTINEL = "-"

# key:"value" pairs; pairs may be separated by spaces or written back to back
_TAG_PAIR_RE = re.compile(r'([^\s:"`]+):"((?:[^"\\]|\\.)*)"')


def strip_tag_quotes(raw):
    """Drop the surrounding backticks of a raw tag literal."""
    if raw and len(raw) >= 2 and raw[0] == "`" and raw[-1] == "`":
        return raw[1:-1]
    return raw or ""


def lookup_tag(tag, key):
    """
    Return the value stored under `key` in a struct tag, or None if the key
    is absent. The first occurrence wins.
    """
    for tag_key, value in _TAG_PAIR_RE.findall(strip_tag_quotes(tag)):
        if tag_key == key:
            return value
    return None


def parse_json_tag(value):
    """
    Interpret a json tag value.

    Returns (name, skip):
    - None        -> (None, False)   no annotation
    - "-"         -> (None, True)    field is omitted
    - "x"         -> ("x", False)
    - "x,omitempty" -> ("x", False)  options are ignored
    - ",omitempty"  -> (None, False) empty name, declared name is kept
    """
    if value is None:
        return None, False
    if value == SKIP_SENTINEL:
        return None, True
    name = value.split(",", 1)[0]
    return (name or None), False
