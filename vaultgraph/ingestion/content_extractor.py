"""Content extraction service for markdown content."""

import re
from pathlib import PurePosixPath
from typing import List

from vaultgraph.domain.note import LinkRef

# Matches [[target]], [[target|display]], [[target#heading]] and ![[embed]]
WIKILINK_PATTERN = re.compile(r"(!?)\[\[([^\[\]\n]+)\]\]")
INLINE_CODE_PATTERN = re.compile(r"(`+)[^\n]*?\1")
# Obsidian tags need at least one non-digit character
INLINE_TAG_PATTERN = re.compile(r"(?<![\w#&/])#([\w/-]*[^\W\d][\w/-]*)")

ATTACHMENT_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".bmp", ".tiff",
    ".pdf", ".excalidraw", ".canvas",
    ".mp3", ".wav", ".ogg", ".m4a", ".mp4", ".webm", ".mov",
}  # fmt: skip


class ContentExtractor:
    """Service for extracting links, embeds and tags from markdown text."""

    @staticmethod
    def extract_links(content: str) -> List[LinkRef]:
        """Extract Obsidian wikilinks and embeds from markdown content.

        Handles ``[[link]]``, ``[[link|display text]]``, ``[[link#heading]]``
        and ``![[embed]]``. Links inside fenced code blocks and inline code
        are ignored, as are same-note anchors like ``[[#heading]]``.

        Args:
            content: Markdown content to extract links from

        Returns:
            Link references in document order
        """
        links = []
        for match in WIKILINK_PATTERN.finditer(ContentExtractor.mask_code(content)):
            link = ContentExtractor._parse_link(match.group(2), embed=bool(match.group(1)))
            if link is not None:
                links.append(link)
        return links

    @staticmethod
    def extract_embeds(content: str) -> List[str]:
        """Extract embedded content targets, attachments included."""
        return [
            link.target for link in ContentExtractor.extract_links(content) if link.kind == "embed"
        ]

    @staticmethod
    def extract_inline_tags(content: str) -> List[str]:
        """Extract ``#tag`` tokens from the body, outside code and links."""
        masked = WIKILINK_PATTERN.sub(_blank, ContentExtractor.mask_code(content))
        tags: List[str] = []
        for tag in INLINE_TAG_PATTERN.findall(masked):
            if tag not in tags:
                tags.append(tag)
        return tags

    @staticmethod
    def is_attachment(target: str) -> bool:
        """Whether a link target names a non-markdown file such as an image."""
        return PurePosixPath(target).suffix.lower() in ATTACHMENT_EXTENSIONS

    @staticmethod
    def mask_code(content: str) -> str:
        """Blank out fenced code blocks and inline code, keeping offsets intact."""
        masked_lines = []
        fence = None
        for line in content.splitlines(keepends=True):
            stripped = line.lstrip()
            if fence is None and stripped.startswith(("```", "~~~")):
                fence = stripped[:3]
                masked_lines.append(_blank_line(line))
            elif fence is not None:
                if stripped.startswith(fence):
                    fence = None
                masked_lines.append(_blank_line(line))
            else:
                masked_lines.append(INLINE_CODE_PATTERN.sub(_blank, line))
        return "".join(masked_lines)

    @staticmethod
    def _parse_link(inner: str, *, embed: bool) -> LinkRef | None:
        target_part, _, display = inner.partition("|")
        # Pipes inside tables are escaped as \|
        target_part = target_part.rstrip("\\")
        target, _, heading = target_part.partition("#")
        target = target.strip()
        if target.lower().endswith(".md"):
            target = target[:-3]
        if not target:
            return None

        return LinkRef(
            raw=inner,
            target=target,
            heading=heading.strip() or None,
            display=display.strip() or None,
            kind="embed" if embed else "wikilink",
        )


def _blank(match: re.Match[str]) -> str:
    return " " * len(match.group(0))


def _blank_line(line: str) -> str:
    stripped = line.rstrip("\r\n")
    return " " * len(stripped) + line[len(stripped) :]
