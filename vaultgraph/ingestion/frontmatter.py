"""YAML frontmatter parsing and rendering for vault notes."""

import re
from pathlib import Path
from typing import Any

import yaml

from vaultgraph.errors import ParseError

FRONTMATTER_DELIMITER = "---"
FRONTMATTER_TERMINATORS = ("---", "...")


def split_frontmatter(raw_text: str, path: str | Path) -> tuple[dict[str, Any], str]:
    """Split raw note text into its frontmatter mapping and body.

    A frontmatter block is only recognised when the very first line is ``---``.
    It ends at the next line consisting of ``---`` or ``...``.

    Args:
        raw_text: Full note text
        path: Note path, used in error messages

    Returns:
        Tuple of (frontmatter mapping, body). The mapping is empty when the
        note has no frontmatter block.

    Raises:
        ParseError: If the block is never closed, is not valid YAML, or is
            not a mapping.
    """
    text = raw_text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return {}, text

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() in FRONTMATTER_TERMINATORS:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            break
    else:
        raise ParseError(path, "unterminated frontmatter block")

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise ParseError(path, f"invalid frontmatter YAML: {e}") from e

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise ParseError(path, f"frontmatter must be a mapping, got {type(data).__name__}")

    return {str(key): value for key, value in data.items()}, body


def parse_tags(frontmatter: dict[str, Any]) -> list[str]:
    """Extract tags from the ``tags`` and ``tag`` keys, keeping insertion order.

    Accepts a YAML list or a string separated by commas and/or whitespace.
    A leading ``#`` is stripped and duplicates are dropped.
    """
    tags: list[str] = []
    for key in ("tags", "tag"):
        for value in _as_list(frontmatter.get(key), separator=r"[,\s]+"):
            tag = value.lstrip("#").strip()
            if tag and tag not in tags:
                tags.append(tag)
    return tags


def parse_aliases(frontmatter: dict[str, Any]) -> list[str]:
    """Extract aliases from the ``aliases`` and ``alias`` keys."""
    aliases: list[str] = []
    for key in ("aliases", "alias"):
        for value in _as_list(frontmatter.get(key), separator=r","):
            alias = value.strip()
            if alias and alias not in aliases:
                aliases.append(alias)
    return aliases


def render_frontmatter(frontmatter: dict[str, Any]) -> str:
    """Serialize a frontmatter mapping back to a ``---`` delimited block.

    Key order is preserved. Returns an empty string for an empty mapping.
    """
    if not frontmatter:
        return ""

    dumped = yaml.safe_dump(
        frontmatter, sort_keys=False, allow_unicode=True, default_flow_style=False
    )
    return f"{FRONTMATTER_DELIMITER}\n{dumped}{FRONTMATTER_DELIMITER}\n"


def _as_list(value: Any, separator: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return re.split(separator, value)
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return [str(value)]
