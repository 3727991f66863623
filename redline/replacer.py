import re
from typing import List, Sequence, Tuple

from .matcher import Occurrence

UNLIMITED = -1

_NAME_RE = re.compile(r"\{(\w+)\}")
_DIGITS_RE = re.compile(r"\d+")


def expand_template(template: str, occurrence: Occurrence) -> str:
    """Expand $N, ${N}, ${name}, $0, $& and $$ against one regex occurrence.

    References to groups the pattern does not define are copied literally;
    groups that did not take part in the match expand to an empty string.
    """
    if "$" not in template:
        return template

    groups = (occurrence.text,) + tuple(occurrence.groups)
    out: List[str] = []
    i = 0
    while i < len(template):
        ch = template[i]
        if ch != "$" or i + 1 >= len(template):
            out.append(ch)
            i += 1
            continue

        nxt = template[i + 1]
        if nxt == "$":
            out.append("$")
            i += 2
        elif nxt == "&":
            out.append(occurrence.text)
            i += 2
        elif nxt == "{":
            named = _NAME_RE.match(template, i + 1)
            key = named.group(1) if named else None
            if key is not None and key.isdigit() and int(key) < len(groups):
                out.append(groups[int(key)] or "")
                i = named.end()
            elif key is not None and key in occurrence.named_groups:
                out.append(occurrence.named_groups[key] or "")
                i = named.end()
            else:
                out.append(ch)
                i += 1
        elif nxt.isdigit():
            digits = _DIGITS_RE.match(template, i + 1).group(0)
            # longest prefix that names an existing group wins
            while digits and int(digits) >= len(groups):
                digits = digits[:-1]
            if digits:
                out.append(groups[int(digits)] or "")
                i += 1 + len(digits)
            else:
                out.append(ch)
                i += 1
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def replacement_text(template: str, occurrence: Occurrence, use_regex: bool) -> str:
    return expand_template(template, occurrence) if use_regex else template


def bounded(occurrences: Sequence[Occurrence], max_replacements: int = UNLIMITED) -> Sequence[Occurrence]:
    """The leading occurrences a replacement pass is allowed to touch."""
    if max_replacements is None or max_replacements < 0:
        return occurrences
    return occurrences[:max_replacements]


def apply_replacements(
    text: str,
    occurrences: Sequence[Occurrence],
    template: str,
    max_replacements: int = UNLIMITED,
    use_regex: bool = False,
) -> Tuple[str, int]:
    """Replace the first max_replacements occurrences left to right.

    Returns the new text and the number of replacements applied. When nothing
    is applied the input string itself is returned.
    """
    selected = bounded(occurrences, max_replacements)
    if not selected:
        return text, 0

    pieces: List[str] = []
    cursor = 0
    for occurrence in selected:
        pieces.append(text[cursor:occurrence.start])
        pieces.append(replacement_text(template, occurrence, use_regex))
        cursor = occurrence.end
    pieces.append(text[cursor:])
    return "".join(pieces), len(selected)
