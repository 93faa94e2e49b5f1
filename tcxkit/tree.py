"""Helpers for walking an ElementTree document by local tag name.

TCX files put every element in the Garmin TrainingCenterDatabase namespace and
the lap/trackpoint extensions in their own namespaces (usually bound to ``ns3``
or ``ax``). Matching on the local name lets the rest of the package ignore
which prefix a particular device or exporter chose.
"""

from __future__ import annotations

from collections.abc import Iterator
from xml.etree.ElementTree import Element


def local_name(tag: str) -> str:
    """Return ``tag`` without its ``{namespace}`` prefix."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _matching_children(tag: str, node: Element) -> Iterator[Element]:
    for child in node:
        # Comments and processing instructions have a callable tag
        if isinstance(child.tag, str) and local_name(child.tag) == tag:
            yield child


def find_child(tag: str, node: Element | None) -> Element | None:
    """Return the first direct child of ``node`` named ``tag``, or ``None``."""
    if node is None:
        return None
    return next(_matching_children(tag, node), None)


def find_children(tag: str, node: Element | None) -> list[Element]:
    """Return every direct child of ``node`` named ``tag`` in document order."""
    if node is None:
        return []
    return list(_matching_children(tag, node))


def text_content(node: Element | None) -> str | None:
    """Return the full text content of ``node`` (its text and all descendant text)."""
    if node is None:
        return None
    return "".join(node.itertext())


def find_child_value(tag: str, node: Element | None) -> str | None:
    """Return the text content of the first child named ``tag``, or ``None``."""
    return text_content(find_child(tag, node))


def find_child_path(node: Element | None, *tags: str) -> Element | None:
    """Resolve a path of tag names through nested children.

    Every child matching the current tag is tried in document order, so a
    path like ``Extensions -> LX -> AvgRunCadence`` is found even when the
    lap carries several ``Extensions`` blocks and only a later one holds
    the ``LX`` element.

    Returns:
        The first element satisfying the whole path, or ``None``.
    """
    if node is None:
        return None
    if not tags:
        return node
    head, rest = tags[0], tags[1:]
    for child in _matching_children(head, node):
        found = find_child_path(child, *rest)
        if found is not None:
            return found
    return None


def has_descendant(tag: str, node: Element) -> bool:
    """Return True if any element below ``node``, at any depth, is named ``tag``."""
    return any(isinstance(el.tag, str) and local_name(el.tag) == tag for el in node.iter() if el is not node)
