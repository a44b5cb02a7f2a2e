"""
Utility vocabulary and metadata models

Defines the structure and categories of the recognized utility-class
stems so the classifier can check them as an ordered table instead of one
monolithic pattern.
"""

from enum import Enum
from dataclasses import dataclass
from typing import FrozenSet, Optional


class UtilityCategory(Enum):
    """
    Families of recognized utility stems

    Used for organization, listing, and per-family tests.
    """
    BACKGROUND = "background"    # bg-
    TYPOGRAPHY = "typography"    # text-, font-, underline
    SPACING = "spacing"          # p-, px-, m-, mt-, gap-
    SIZING = "sizing"            # w-, h-
    FLEXBOX = "flexbox"          # flex, flex-, items-, justify-
    POSITION = "position"        # relative, absolute, top-, left-
    BORDER = "border"            # border, rounded-
    INTERACTIVITY = "interactivity"  # cursor-


@dataclass(frozen=True)
class UtilitySpec:
    """
    Description of one recognized utility stem

    Attributes:
        stem: Stem text as it appears in a class token (e.g., "bg-", "flex")
        category: Family the stem belongs to
        exact: Whether the stem is a keyword that must be the whole
               remainder of the token (e.g., "flex" but not "flexible")
        description: Human-readable description
    """
    stem: str
    category: UtilityCategory
    exact: bool = False
    description: str = ""

    def match(self, remainder: str) -> Optional[str]:
        """
        Match this stem against the start of a token remainder

        Args:
            remainder: Token text left after sign and modifier

        Returns:
            The matched stem text, or None

        Example:
            >>> UtilitySpec("bg-", UtilityCategory.BACKGROUND).match("bg-red-500")
            'bg-'
            >>> UtilitySpec("flex", UtilityCategory.FLEXBOX, exact=True).match("flex-row")
        """
        if self.exact:
            return self.stem if remainder == self.stem else None
        return self.stem if remainder.startswith(self.stem) else None


# Responsive and state qualifiers recognized before a stem (without the ':')
MODIFIERS: FrozenSet[str] = frozenset({
    'sm', 'md', 'lg', 'xl', '2xl',
    'hover', 'focus', 'active',
    'group-hover', 'focus-within', 'disabled',
})

MODIFIER_SEPARATOR = ':'
NEGATIVE_SIGN = '-'


def modifier_is(name: str) -> bool:
    """Check if a name is a recognized modifier"""
    return name in MODIFIERS
