"""Helpers for locating {{ dotted.path }} placeholders in template text."""
import re

PLACEHOLDER_PATTERN = re.compile(r"\{\{[-+]?\s*([A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*)\s*[-+]?\}\}")


def find_placeholders(text: str) -> list[str]:
    """
    Find the placeholder paths referenced in a piece of text.

    Args:
        text (str): template source or rendered output.

    Returns:
        list[str]: distinct dotted paths, in order of first appearance.
    """
    seen: dict[str, None] = {}
    for match in PLACEHOLDER_PATTERN.finditer(text or ""):
        seen.setdefault(match.group(1), None)
    return list(seen)


def residual_placeholders(rendered: str) -> list[str]:
    """Placeholders left in rendered output. Empty when the render is complete."""
    return find_placeholders(rendered)
