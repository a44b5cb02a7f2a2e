"""
Token rewriter and class-list transform

The only textual transformation the codemod performs: insert a namespace
prefix in front of every recognized utility stem in a space-separated
class list, leaving everything else byte-identical.
"""

from typing import Optional

from ..models.tokens import ClassToken
from ..models.utilities import MODIFIER_SEPARATOR, NEGATIVE_SIGN
from .classifier import UtilityRegistry, registry as default_registry


CLASS_SEPARATOR = ' '


def token_rewrite(token: ClassToken, prefix: str) -> str:
    """
    Reassemble a classified token with the prefix before its stem

    Sign and modifier are framework-agnostic syntax, so the prefix goes
    after them and directly in front of the stem.

    Args:
        token: Result of UtilityRegistry.classify()
        prefix: Namespace prefix (e.g., "mw-")

    Returns:
        Rewritten token text, or the original text for opaque tokens

    Example:
        "-mt-8"         -> "-mw-mt-8"
        "hover:bg-blue" -> "hover:mw-bg-blue"
        "custom-class"  -> "custom-class"
    """
    if not token.recognized:
        return token.text

    parts = []
    if token.negative:
        parts.append(NEGATIVE_SIGN)
    if token.modifier is not None:
        parts.append(token.modifier + MODIFIER_SEPARATOR)
    parts.append(prefix)
    parts.append(token.stem)
    if token.suffix:
        parts.append(token.suffix)
    parts.append(token.tail)
    return ''.join(parts)


def classList_transform(
    text: str, prefix: str, registry: Optional[UtilityRegistry] = None
) -> str:
    """
    Prefix every recognized utility in a space-separated class list

    Splits on single spaces so runs of spaces survive as empty segments;
    token order and count are preserved.

    Args:
        text: Class-list string (any string literal is accepted)
        prefix: Namespace prefix
        registry: Vocabulary to classify against (default: built-in)

    Returns:
        Rewritten class list

    Example:
        >>> classList_transform("bg-red-500 custom p-4", "mw-")
        'mw-bg-red-500 custom mw-p-4'
    """
    vocabulary = registry or default_registry
    return CLASS_SEPARATOR.join(
        token_rewrite(vocabulary.classify(segment), prefix)
        for segment in text.split(CLASS_SEPARATOR)
    )
