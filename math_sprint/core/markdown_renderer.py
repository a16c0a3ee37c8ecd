"""Markdown rendering for the rich-text labels in the Qt window.

Instruction and about texts are authored as Markdown and converted to the HTML
subset that ``QLabel`` understands in ``Qt.RichText`` mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts Markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html})

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_centered(self, markdown_text: str, color: str | None = None) -> str:
        """Render and wrap the fragment in a centred block for labels."""

        fragment = self.render_fragment(markdown_text)
        if not fragment:
            return ""
        style = "text-align: center;"
        if color:
            style += f" color: {color};"
        return f'<div style="{style}">{fragment}</div>'


renderer = MarkdownRenderer()
# Shared instance; the Qt layer renders from the GUI thread only.
