"""
Emitter for rewritten trees

Serializes a SourceTree back to text by splicing each changed literal's
new value between its original quotes. Everything else, including
unchanged literals, comments, and whitespace, is copied byte for byte.
"""

from ..models.tree import SourceTree


def tree_emit(tree: SourceTree) -> str:
    """
    Serialize a tree back to source text

    Args:
        tree: Tree whose literal values may have been rewritten

    Returns:
        Source text with changed literal bodies replaced

    Example:
        Source 'a = "p-4"; // p-4' with the literal rewritten to "mw-p-4"
        emits 'a = "mw-p-4"; // p-4'
    """
    parts = []
    cursor = 0
    for literal in sorted(tree.changed_literals, key=lambda lit: lit.start):
        parts.append(tree.source[cursor:literal.body_start])
        parts.append(literal.value)
        cursor = literal.body_end
    parts.append(tree.source[cursor:])
    return ''.join(parts)
