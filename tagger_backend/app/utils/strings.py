# tagger_backend/app/utils/strings.py

import re

_LOCALE_RE = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]{2,8})*$")

# What it does:
# Strip whitespace or convert falsy/nulls to None
def null_to_none_or_strip(x) -> str | None:
    if not x:
        return None
    return str(x).strip() or None

def clean_locale(raw, default: str) -> str:
    """
    Normalise a `locale` query value. Anything that does not look like a
    locale code (e.g. path fragments) falls back to `default`.
    """
    value = null_to_none_or_strip(raw)
    if value is None or not _LOCALE_RE.match(value):
        return default
    return value
