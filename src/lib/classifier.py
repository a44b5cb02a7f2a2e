"""
Utility vocabulary registry and token classifier

The registry holds the recognized utility stems as an ordered table of
UtilitySpec entries. Stems are checked in registration order; the first
one that matches wins.
"""

import re
from typing import Dict, List, Optional

from ..models.tokens import ClassToken
from ..models.utilities import (
    MODIFIER_SEPARATOR,
    NEGATIVE_SIGN,
    UtilityCategory,
    UtilitySpec,
    modifier_is,
)


# Value characters allowed after a stem: scale steps, colors, opacity,
# and bracketed arbitrary values such as [#123456] or [5px]
SUFFIX_PATTERN = re.compile(r'[A-Za-z0-9_\-/\[\]#%.]*')


class UtilityRegistry:
    """
    Registry of recognized utility stems

    Maps each stem to its UtilitySpec and keeps the priority order in which
    stems are tried.
    """

    def __init__(self) -> None:
        """Initialize the registry and register all built-in stems in priority order"""
        self.specs: List[UtilitySpec] = []
        self.backgroundUtilities_register()
        self.textUtilities_register()
        self.spacingUtilities_register()
        self.sizingUtilities_register()
        self.flexboxUtilities_register()
        self.positionUtilities_register()
        self.fontUtilities_register()
        self.interactivityUtilities_register()
        self.gapUtilities_register()
        self.decorationUtilities_register()
        self.borderUtilities_register()

    def register(self, spec: UtilitySpec) -> None:
        """Register a stem specification at the lowest priority"""
        self.specs.append(spec)

    def stem_match(self, remainder: str) -> Optional[UtilitySpec]:
        """
        Find the first stem matching the start of a token remainder

        Args:
            remainder: Token text after sign and modifier

        Returns:
            Matching UtilitySpec, or None if the remainder is not a
            recognized utility
        """
        for spec in self.specs:
            if spec.match(remainder) is not None:
                return spec
        return None

    def stems_listByCategory(self, category: UtilityCategory) -> List[UtilitySpec]:
        """Get all stems in a category, in priority order"""
        return [spec for spec in self.specs if spec.category == category]

    def stems_byName(self) -> Dict[str, UtilitySpec]:
        """Get all stems keyed by stem text"""
        return {spec.stem: spec for spec in self.specs}

    def classify(self, text: str) -> ClassToken:
        """
        Decompose one class token into sign, modifier, stem, and suffix

        Matching runs left to right against the start of the token:
        1. optional '-' (negative value)
        2. optional single modifier followed by ':' (e.g., "hover:")
        3. required stem from the registry
        4. optional value suffix of SUFFIX_PATTERN characters

        Only one modifier is taken apart, so "sm:hover:bg-red-500" is
        opaque: after "sm:" the remainder "hover:bg-red-500" has no stem.
        A token with a namespace prefix already in place ("mw-bg-red-500")
        is opaque for the same reason, which keeps rewriting stable.

        Args:
            text: One non-space token

        Returns:
            ClassToken; its stem is None when the token is opaque

        Example:
            >>> UtilityRegistry().classify("-md:mt-8")
            ClassToken(text='-md:mt-8', negative=True, modifier='md', stem='mt-', suffix='8', tail='')
            >>> UtilityRegistry().classify("custom-class").recognized
            False
        """
        remainder = text

        negative = remainder.startswith(NEGATIVE_SIGN)
        if negative:
            remainder = remainder[len(NEGATIVE_SIGN):]

        modifier = None
        head, separator, rest = remainder.partition(MODIFIER_SEPARATOR)
        if separator and modifier_is(head):
            modifier = head
            remainder = rest

        spec = self.stem_match(remainder)
        if spec is None:
            return ClassToken(text=text)

        remainder = remainder[len(spec.stem):]
        suffix_match = SUFFIX_PATTERN.match(remainder)
        suffix = suffix_match.group() if suffix_match else ''

        return ClassToken(
            text=text,
            negative=negative,
            modifier=modifier,
            stem=spec.stem,
            suffix=suffix or None,
            tail=remainder[len(suffix):],
        )

    def backgroundUtilities_register(self) -> None:
        """Register background stems"""
        self.register(UtilitySpec("bg-", UtilityCategory.BACKGROUND, description="Background color, image, position"))

    def textUtilities_register(self) -> None:
        """Register text color/size stems"""
        self.register(UtilitySpec("text-", UtilityCategory.TYPOGRAPHY, description="Text color, size, alignment"))

    def spacingUtilities_register(self) -> None:
        """Register padding and margin stems, all sides and single axes"""
        for stem in ("p-", "px-", "py-"):
            self.register(UtilitySpec(stem, UtilityCategory.SPACING, description="Padding"))
        for stem in ("m-", "mx-", "my-", "mt-", "mr-", "mb-", "ml-", "mf-"):
            self.register(UtilitySpec(stem, UtilityCategory.SPACING, description="Margin"))

    def sizingUtilities_register(self) -> None:
        """Register width and height stems"""
        self.register(UtilitySpec("w-", UtilityCategory.SIZING, description="Width"))
        self.register(UtilitySpec("h-", UtilityCategory.SIZING, description="Height"))

    def flexboxUtilities_register(self) -> None:
        """Register flex container and alignment stems"""
        self.register(UtilitySpec("flex", UtilityCategory.FLEXBOX, exact=True, description="display: flex"))
        self.register(UtilitySpec("flex-", UtilityCategory.FLEXBOX, description="Flex direction, wrap, grow"))
        self.register(UtilitySpec("items-", UtilityCategory.FLEXBOX, description="align-items"))
        self.register(UtilitySpec("justify-", UtilityCategory.FLEXBOX, description="justify-content"))

    def positionUtilities_register(self) -> None:
        """Register positioning keywords and inset stems"""
        self.register(UtilitySpec("relative", UtilityCategory.POSITION, exact=True, description="position: relative"))
        self.register(UtilitySpec("absolute", UtilityCategory.POSITION, exact=True, description="position: absolute"))
        for stem in ("top-", "left-", "right-", "bottom-"):
            self.register(UtilitySpec(stem, UtilityCategory.POSITION, description="Inset"))

    def fontUtilities_register(self) -> None:
        """Register font weight/family stems"""
        self.register(UtilitySpec("font-", UtilityCategory.TYPOGRAPHY, description="Font weight and family"))

    def interactivityUtilities_register(self) -> None:
        """Register cursor stems"""
        self.register(UtilitySpec("cursor-", UtilityCategory.INTERACTIVITY, description="Cursor style"))

    def gapUtilities_register(self) -> None:
        """Register gap stems"""
        self.register(UtilitySpec("gap-", UtilityCategory.SPACING, description="Gap between flex/grid children"))

    def decorationUtilities_register(self) -> None:
        """Register text decoration keywords"""
        self.register(UtilitySpec("underline", UtilityCategory.TYPOGRAPHY, exact=True, description="text-decoration: underline"))

    def borderUtilities_register(self) -> None:
        """Register border keyword and radius stems"""
        self.register(UtilitySpec("border", UtilityCategory.BORDER, exact=True, description="1px border"))
        self.register(UtilitySpec("rounded-", UtilityCategory.BORDER, description="Border radius"))


# Shared vocabulary; the table never changes after construction
registry = UtilityRegistry()


def classify(text: str) -> ClassToken:
    """Classify a token against the built-in vocabulary"""
    return registry.classify(text)
