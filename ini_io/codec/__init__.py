"""Conversions entre un Document et ses représentations texte."""

from ini_io.codec.json_export import document_to_json_object, render_json
from ini_io.codec.text import parse_text, render_text, split_lines

__all__ = [
    "parse_text",
    "render_text",
    "split_lines",
    "render_json",
    "document_to_json_object",
]
