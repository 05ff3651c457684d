from resume_paginator.utils.rich_text import RichTextLine, html_to_lines, strip_html

__all__ = ["RichTextLine", "html_to_lines", "strip_html"]
