"""Test suite for link, embed and tag extraction."""

from vaultgraph.domain.note import LinkRef
from vaultgraph.ingestion.content_extractor import ContentExtractor


def test_link_extraction() -> None:
    """Test link extraction functions."""
    content = """
    # S4 HANA

    This note references [[SAP GUI]] and [[SAP Basis]].

    It also embeds some content: ![[Landscape]]

    And images: ![[diagram.png]]

    Another reference to [[SAP GUI|the GUI]].
    """

    links = ContentExtractor.extract_links(content)

    assert [link.target for link in links] == [
        "SAP GUI",
        "SAP Basis",
        "Landscape",
        "diagram.png",
        "SAP GUI",
    ]
    assert [link.kind for link in links] == ["wikilink", "wikilink", "embed", "embed", "wikilink"]


def test_wikilink_patterns() -> None:
    """Test various wikilink patterns."""
    test_cases = [
        ("[[Simple Link]]", LinkRef(raw="Simple Link", target="Simple Link")),
        ("[[Link|Display Text]]", LinkRef(raw="Link|Display Text", target="Link", display="Display Text")),
        ("[[Structs#Arrays of structs]]", LinkRef(raw="Structs#Arrays of structs", target="Structs", heading="Arrays of structs")),
        ("[[Loops.md]]", LinkRef(raw="Loops.md", target="Loops")),
        ("[[ Padded ]]", LinkRef(raw=" Padded ", target="Padded")),
        ("![[Embedded]]", LinkRef(raw="Embedded", target="Embedded", kind="embed")),
        ("| [[Table\\|alias]] |", LinkRef(raw="Table\\|alias", target="Table", display="alias")),
    ]  # fmt: skip

    for content, expected in test_cases:
        assert ContentExtractor.extract_links(content) == [expected]


def test_same_note_anchor_and_empty_links_are_skipped() -> None:
    """Test that links without a note target are ignored."""
    assert ContentExtractor.extract_links("Jump to [[#Syntax]] or [[]] or [[ ]]") == []


def test_links_in_code_are_ignored() -> None:
    """Test that fenced code blocks and inline code do not produce links."""
    content = (
        "Before [[Arrays]]\n"
        "```c\n"
        "int grid[[3]];\n"
        "```\n"
        "~~~\n"
        "[[Not A Link]]\n"
        "~~~\n"
        "Inline `x[[0]]` code and [[Pointers]]\n"
    )

    links = ContentExtractor.extract_links(content)

    assert [link.target for link in links] == ["Arrays", "Pointers"]


def test_mask_code_keeps_offsets() -> None:
    """Test that masking preserves the length and line structure of the text."""
    content = "a `b` c\n```\ncode\n```\nend\n"

    masked = ContentExtractor.mask_code(content)

    assert len(masked) == len(content)
    assert masked.count("\n") == content.count("\n")
    assert "code" not in masked
    assert masked.endswith("end\n")


def test_extract_embeds() -> None:
    """Test that embeds include attachments."""
    content = "![[image.png]] and ![[Other Note]] and [[Plain]]"

    assert ContentExtractor.extract_embeds(content) == ["image.png", "Other Note"]


def test_extract_inline_tags() -> None:
    """Test inline tag extraction outside code, headings and links."""
    content = (
        "# Heading\n"
        "#c and #sap/basis here, #c again, #2024 is not a tag.\n"
        "`#include <stdio.h>`\n"
        "Link to [[#Section]] and url http://x.org/#frag\n"
    )

    assert ContentExtractor.extract_inline_tags(content) == ["c", "sap/basis"]


def test_is_attachment() -> None:
    """Test attachment detection by file extension."""
    assert ContentExtractor.is_attachment("diagram.png")
    assert ContentExtractor.is_attachment("Pasted image 20250628112432.PNG")
    assert ContentExtractor.is_attachment("drawing.excalidraw")
    assert not ContentExtractor.is_attachment("SAP GUI")
    assert not ContentExtractor.is_attachment("Release v1.2 notes")
