"""Analysis functions for relationship strength and context extraction."""

import re


def calculate_relationship_strength(source_content: str, target_name: str) -> float:
    """Calculate relationship strength based on how often the target is linked.

    Args:
        source_content: Body of the source note
        target_name: Link target as written in the source note

    Returns:
        Relationship strength between 0.0 and 1.0
    """
    link_pattern = _link_pattern(target_name)

    # Count link occurrences of the target in the source
    occurrences = len(link_pattern.findall(source_content))

    # Base strength on frequency, capped at 1.0
    base_strength = min(occurrences * 0.3, 1.0)

    # Boost if linked from headers
    header_mentions = sum(
        1
        for line in source_content.splitlines()
        if re.match(r"#{1,6}\s", line.lstrip()) and link_pattern.search(line)
    )
    header_boost = header_mentions * 0.2

    return min(base_strength + header_boost, 1.0)


def extract_relationship_context(content: str, target_name: str, context_chars: int = 100) -> str:
    """Extract surrounding context for the first link to a target.

    Args:
        content: Body of the note
        target_name: Link target as written in the note
        context_chars: Number of characters before/after to include

    Returns:
        Context string around the first link
    """
    match = _link_pattern(target_name).search(content)
    if not match:
        return ""

    start = max(0, match.start() - context_chars)
    end = min(len(content), match.end() + context_chars)

    context = content[start:end].strip()

    # Clean up context - remove newlines, extra spaces
    context = re.sub(r"\s+", " ", context)

    return context


def _link_pattern(target_name: str) -> re.Pattern[str]:
    return re.compile(
        r"!?\[\[\s*" + re.escape(target_name) + r"(?:\.md)?\s*(?:\\?[#|][^\]]*)?\]\]",
        re.IGNORECASE,
    )
