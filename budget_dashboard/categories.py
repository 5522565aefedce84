"""Category label normalisation.

Categories are typed free-hand when an expense is added, so "food",
" Food " and "FOOD" all need to land in the same group.  The normalised label
is the only key used for grouping and filtering.
"""

from __future__ import annotations

import re
from typing import Optional

_TOKEN = re.compile(r"\S+")


def _title_token(match: "re.Match[str]") -> str:
    token = match.group(0)
    return token[:1].upper() + token[1:].lower()


def normalize_category(label: Optional[str]) -> str:
    """Trim a category label and title-case each whitespace-delimited token.

    Example:
        >>> normalize_category("  food ")
        'Food'
        >>> normalize_category("eating OUT")
        'Eating Out'
        >>> normalize_category(None)
        ''
    """
    if not label:
        return ""
    return _TOKEN.sub(_title_token, str(label).strip())
