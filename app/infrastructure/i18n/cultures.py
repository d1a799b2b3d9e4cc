"""Culture name utilities.

Syntax checks, canonical casing and parent derivation for BCP 47 style
culture identifiers (e.g., "en-US", "zh-Hans-CN").
"""

import re
from typing import Iterator, Optional

_CULTURE_NAME_PATTERN = re.compile(r"^[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*$")

# Regions whose script is implied rather than spelled out. "zh-TW" is a
# Traditional Chinese culture, so its parent is "zh-Hant", not "zh".
SCRIPT_PARENTS = {
    "zh-cn": "zh-Hans",
    "zh-sg": "zh-Hans",
    "zh-tw": "zh-Hant",
    "zh-hk": "zh-Hant",
    "zh-mo": "zh-Hant",
}


def _unify_separator(name: str) -> str:
    return name.strip().replace("_", "-")


def is_valid_culture_name(name: Optional[str]) -> bool:
    """Check whether a string is a syntactically valid culture name.

    Args:
        name: Candidate culture name (e.g., "en-US", "en_US").

    Returns:
        True if the name is made of 1-8 letter language subtag followed by
        any number of 1-8 alphanumeric subtags.
    """
    if not name or not isinstance(name, str):
        return False
    return bool(_CULTURE_NAME_PATTERN.match(_unify_separator(name)))


def normalize_culture_name(name: str) -> str:
    """Return the canonical spelling of a culture name.

    Language is lower-cased, a 4-letter script is title-cased, a 2-letter
    or 3-digit region is upper-cased and any other subtag is lower-cased.

    Args:
        name: Culture name in any casing, "-" or "_" separated.

    Returns:
        Canonical culture name (e.g., "ZH-hans-cn" -> "zh-Hans-CN").

    Raises:
        ValueError: If the name is not a valid culture name.
    """
    if not is_valid_culture_name(name):
        raise ValueError(f"Invalid culture name: {name!r}")

    subtags = _unify_separator(name).split("-")
    canonical = [subtags[0].lower()]
    for subtag in subtags[1:]:
        if len(subtag) == 4 and subtag.isalpha():
            canonical.append(subtag.title())
        elif (len(subtag) == 2 and subtag.isalpha()) or (
            len(subtag) == 3 and subtag.isdigit()
        ):
            canonical.append(subtag.upper())
        else:
            canonical.append(subtag.lower())
    return "-".join(canonical)


def parent_culture(name: str) -> Optional[str]:
    """Return the parent of a culture, or None for a root (language-only) culture.

    Examples:
        >>> parent_culture("zh-Hans-CN")
        'zh-Hans'
        >>> parent_culture("zh-TW")
        'zh-Hant'
        >>> parent_culture("en")
    """
    canonical = normalize_culture_name(name)
    script_parent = SCRIPT_PARENTS.get(canonical.lower())
    if script_parent:
        return script_parent

    subtags = canonical.split("-")
    if len(subtags) == 1:
        return None
    return "-".join(subtags[:-1])


def culture_hierarchy(name: str) -> Iterator[str]:
    """Yield a culture followed by each of its parents, most specific first."""
    current: Optional[str] = normalize_culture_name(name)
    while current:
        yield current
        current = parent_culture(current)
