"""
Org document parsing utilities.

Only the parts of org syntax needed to select and convert task entries are
understood: headings, TODO keywords, tags, planning lines, property drawers
and timestamps.
"""

import re
from typing import Any, Dict, List, Optional, Sequence

from org_gtasks.core.models import OrgEntry
from org_gtasks.utils.date import extract_date
from org_gtasks.utils.text import (
    ACTIVE_TS_RE,
    find_timestamp_dates,
    strip_inline_dates_from_title,
    strip_structure_from_body,
    unescape_body_text,
)


DEFAULT_TODO_KEYWORDS = ("TODO", "NEXT", "WAITING", "DONE", "CANCELLED")

# Regular expressions for parsing entries
HEADING_RE = re.compile(r'^(\*+)[ \t]+(.*?)[ \t]*$')
TAGS_RE = re.compile(r'^(.*?)[ \t]+(:(?:[\w@#%]+:)+)$')
PRIORITY_RE = re.compile(r'^\[#[A-Z0-9]\][ \t]*')
PLANNING_RE = re.compile(
    r'^[ \t]*(?:(?:DEADLINE|SCHEDULED|CLOSED):[ \t]*[<\[][^>\]\n]*[>\]][ \t]*)+$'
)
PLANNING_ITEM_RE = re.compile(r'(DEADLINE|SCHEDULED|CLOSED):[ \t]*[<\[](\d{4}-\d{2}-\d{2})[^>\]\n]*[>\]]')
PROPERTY_RE = re.compile(r'^[ \t]*:([^:\s]+):[ \t]*(.*?)[ \t]*$')
DRAWER_START_RE = re.compile(r'^[ \t]*:PROPERTIES:[ \t]*$')
DRAWER_END_RE = re.compile(r'^[ \t]*:END:[ \t]*$')
FILETAGS_RE = re.compile(r'^#\+FILETAGS:[ \t]*(.*)$', re.IGNORECASE)


def _split_tags(tag_string: str) -> List[str]:
    return [tag for tag in tag_string.strip().strip(':').split(':') if tag]


def parse_heading(line: str, todo_keywords: Sequence[str] = DEFAULT_TODO_KEYWORDS) -> Optional[Dict[str, Any]]:
    """
    Parse an org heading line into components.

    Args:
        line: Raw line without the trailing newline
        todo_keywords: Words recognised as TODO keywords

    Returns:
        Dictionary with parsed heading data or None if not a heading
    """
    match = HEADING_RE.match(line)
    if not match:
        return None

    level = len(match.group(1))
    content = match.group(2)

    # Extract tags
    tags: List[str] = []
    tags_match = TAGS_RE.match(content)
    if tags_match:
        content = tags_match.group(1)
        tags = _split_tags(tags_match.group(2))
    elif re.fullmatch(r'(:(?:[\w@#%]+:)+)', content):
        tags = _split_tags(content)
        content = ""

    # Extract TODO keyword
    keyword = None
    first, _, rest = content.partition(' ')
    if first in todo_keywords:
        keyword = first
        content = rest.lstrip()

    # Drop priority cookie
    content = PRIORITY_RE.sub('', content)

    return {
        'level': level,
        'keyword': keyword,
        'raw_title': content,
        'title': strip_inline_dates_from_title(content),
        'tags': tags,
    }


def parse_planning(line: str) -> Optional[Dict[str, str]]:
    """Return the dates of a planning line keyed by lowercase label, or None."""
    if not PLANNING_RE.match(line):
        return None
    return {label.lower(): day for label, day in PLANNING_ITEM_RE.findall(line)}


def parse_properties(lines: Sequence[str]) -> Dict[str, str]:
    """Collect ``:KEY: value`` pairs from the first property drawer in ``lines``."""
    properties: Dict[str, str] = {}
    inside = False
    for line in lines:
        if not inside:
            if DRAWER_START_RE.match(line):
                inside = True
            continue
        if DRAWER_END_RE.match(line):
            break
        prop_match = PROPERTY_RE.match(line)
        if prop_match:
            properties[prop_match.group(1)] = prop_match.group(2)
    return properties


def _build_entry(
    heading: Dict[str, Any],
    body_lines: List[str],
    inherited_tags: List[str],
    file_path: Optional[str],
    line_number: int,
) -> OrgEntry:
    planning: Dict[str, str] = {}
    planning_text = ""
    if body_lines:
        parsed_planning = parse_planning(body_lines[0])
        if parsed_planning is not None:
            planning = parsed_planning
            planning_text = body_lines[0]
            body_lines = body_lines[1:]

    raw_body = "\n".join(body_lines)

    deadline = planning.get('deadline')
    inline_dates = [m.group(1) for m in ACTIVE_TS_RE.finditer(heading['raw_title'])]
    inline_dates.extend(m.group(1) for m in ACTIVE_TS_RE.finditer(raw_body))
    due = deadline or (inline_dates[0] if inline_dates else None)

    timestamps = find_timestamp_dates(heading['raw_title'])
    timestamps.extend(find_timestamp_dates(planning_text))
    timestamps.extend(find_timestamp_dates(raw_body))

    return OrgEntry(
        title=heading['title'],
        todo_keyword=heading['keyword'],
        level=heading['level'],
        due=extract_date(due),
        deadline=deadline,
        scheduled=planning.get('scheduled'),
        closed=planning.get('closed'),
        timestamps=timestamps,
        body=unescape_body_text(strip_structure_from_body(raw_body)),
        properties=parse_properties(body_lines),
        tags=list(heading['tags']),
        inherited_tags=list(inherited_tags),
        file_path=file_path,
        line_number=line_number,
    )


def parse_org_text(
    text: str,
    file_path: Optional[str] = None,
    todo_keywords: Sequence[str] = DEFAULT_TODO_KEYWORDS,
) -> List[OrgEntry]:
    """
    Parse every heading of an org document into an OrgEntry.

    An entry's body runs up to the next heading of any level. Tags are
    inherited from ``#+FILETAGS:`` and from ancestor headings.

    Args:
        text: Document contents
        file_path: Path recorded on each entry
        todo_keywords: Words recognised as TODO keywords

    Returns:
        Entries in document order
    """
    entries: List[OrgEntry] = []
    file_tags: List[str] = []
    # (level, tags) of the ancestors of the current heading
    ancestors: List[tuple] = []

    current: Optional[Dict[str, Any]] = None
    current_line = 0
    current_inherited: List[str] = []
    body_lines: List[str] = []

    # Only "\n" ends a line; form feeds and other separators stay in the text
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    for line_number, raw_line in enumerate(lines, 1):
        raw_line = raw_line[:-1] if raw_line.endswith("\r") else raw_line
        heading = parse_heading(raw_line, todo_keywords)
        if heading is None:
            if current is None:
                filetags_match = FILETAGS_RE.match(raw_line)
                if filetags_match:
                    file_tags.extend(_split_tags(filetags_match.group(1)))
            else:
                body_lines.append(raw_line)
            continue

        if current is not None:
            entries.append(_build_entry(current, body_lines, current_inherited, file_path, current_line))

        while ancestors and ancestors[-1][0] >= heading['level']:
            ancestors.pop()

        inherited: List[str] = list(file_tags)
        for _level, tags in ancestors:
            for tag in tags:
                if tag not in inherited:
                    inherited.append(tag)

        ancestors.append((heading['level'], heading['tags']))
        current = heading
        current_line = line_number
        current_inherited = inherited
        body_lines = []

    if current is not None:
        entries.append(_build_entry(current, body_lines, current_inherited, file_path, current_line))

    return entries
