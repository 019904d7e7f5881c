"""Plain-text report renderers (JSON and Markdown)."""

from specgrade.infrastructure.reporters.text_reporters import (
    render_json,
    render_markdown,
    render_rule_docs,
)

__all__ = ["render_json", "render_markdown", "render_rule_docs"]
