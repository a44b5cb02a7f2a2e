"""
Token classifier tests

Tests that class tokens are decomposed into sign, modifier, stem, and
suffix, and that anything outside the vocabulary is opaque.
"""

import pytest

from mwprefix.lib.classifier import UtilityRegistry, classify
from mwprefix.models.utilities import UtilityCategory, UtilitySpec, MODIFIERS


class TestRecognizedTokens:
    """Test decomposition of recognized utilities"""

    def test_plain_stem_and_suffix(self):
        """Stem followed by a scale value"""
        token = classify("bg-red-500")

        assert token.recognized
        assert token.negative is False
        assert token.modifier is None
        assert token.stem == "bg-"
        assert token.suffix == "red-500"
        assert token.tail == ""

    def test_negative_sign(self):
        """Leading '-' is taken as the negative sign"""
        token = classify("-mt-8")

        assert token.negative is True
        assert token.stem == "mt-"
        assert token.suffix == "8"

    def test_modifier(self):
        """Single modifier segment is split off with its ':'"""
        token = classify("hover:bg-blue-600")

        assert token.modifier == "hover"
        assert token.stem == "bg-"
        assert token.suffix == "blue-600"

    def test_negative_with_modifier(self):
        """Sign comes before the modifier"""
        token = classify("-md:mt-8")

        assert token.negative is True
        assert token.modifier == "md"
        assert token.stem == "mt-"

    def test_hyphenated_modifiers(self):
        """group-hover and focus-within are modifiers, not stems"""
        assert classify("group-hover:bg-red-500").modifier == "group-hover"
        assert classify("focus-within:p-2").modifier == "focus-within"

    def test_arbitrary_value_suffix(self):
        """Bracketed arbitrary values are part of the suffix"""
        assert classify("bg-[#123456]").suffix == "[#123456]"
        assert classify("gap-[5px]").suffix == "[5px]"

    def test_opacity_suffix(self):
        """Slash opacity is part of the suffix"""
        assert classify("text-white/75").suffix == "white/75"

    def test_exact_keywords(self):
        """Keywords are recognized only as the whole remainder"""
        for keyword in ("flex", "relative", "absolute", "underline", "border"):
            token = classify(keyword)
            assert token.stem == keyword
            assert token.suffix is None

    def test_flex_prefix_after_exact_keyword(self):
        """flex-row falls through the exact 'flex' entry to 'flex-'"""
        assert classify("flex-row").stem == "flex-"

    def test_stem_without_suffix(self):
        """A bare prefix stem is recognized with no suffix"""
        token = classify("rounded-")

        assert token.stem == "rounded-"
        assert token.suffix is None

    def test_tail_is_kept(self):
        """Characters after the suffix are kept verbatim in tail"""
        token = classify("w-[calc(100%-1rem)]")

        assert token.stem == "w-"
        assert token.suffix == "[calc"
        assert token.tail == "(100%-1rem)]"

    @pytest.mark.parametrize("text, stem", [
        ("p-4", "p-"), ("px-2", "px-"), ("py-4", "py-"),
        ("m-1", "m-"), ("mx-auto", "mx-"), ("my-2", "my-"),
        ("mt-1", "mt-"), ("mr-2", "mr-"), ("mb-3", "mb-"), ("ml-4", "ml-"),
        ("w-full", "w-"), ("h-screen", "h-"),
        ("items-center", "items-"), ("justify-between", "justify-"),
        ("top-0", "top-"), ("left-0", "left-"), ("right-9", "right-"), ("bottom-2", "bottom-"),
        ("font-bold", "font-"), ("cursor-pointer", "cursor-"), ("text-xl", "text-"),
    ])
    def test_vocabulary_stems(self, text, stem):
        """Every stem family is recognized"""
        assert classify(text).stem == stem


class TestOpaqueTokens:
    """Test tokens that must pass through untouched"""

    @pytest.mark.parametrize("text", [
        "custom-class",
        "another-custom-class",
        "outline-none",
        "peer-focus:text-xl",
        "sm:hover:bg-red-500",
        "md:focus:text-xl",
        "lg:active:p-4",
        "[&>*]:border-red-500",
        "[mask-type:luminance]",
        "[--scroll-offset:56px]",
        "border-2",
        "flexible",
        "hover:custom-hover",
        "./index",
        "",
        "-",
    ])
    def test_not_recognized(self, text):
        """Tokens outside the vocabulary have no stem"""
        token = classify(text)

        assert not token.recognized
        assert token.text == text

    def test_already_prefixed(self):
        """A prefixed token never matches the vocabulary again"""
        assert not classify("mw-bg-red-500").recognized
        assert not classify("mw-p-4").recognized
        assert not classify("hover:mw-bg-blue-600").recognized

    def test_unknown_modifier_is_not_split(self):
        """Only modifiers from the fixed set are taken apart"""
        token = classify("print:bg-red-500")

        assert not token.recognized
        assert "print" not in MODIFIERS


class TestRegistry:
    """Test the ordered vocabulary table"""

    def test_priority_order_starts_with_background(self):
        """Stems are kept in registration order"""
        registry = UtilityRegistry()

        assert registry.specs[0].stem == "bg-"
        assert registry.specs[-1].stem == "rounded-"

    def test_list_by_category(self):
        """Stems can be listed per family"""
        registry = UtilityRegistry()
        flexbox = [spec.stem for spec in registry.stems_listByCategory(UtilityCategory.FLEXBOX)]

        assert flexbox == ["flex", "flex-", "items-", "justify-"]

    def test_exact_flags(self):
        """Only keywords are exact"""
        specs = UtilityRegistry().stems_byName()

        assert specs["flex"].exact is True
        assert specs["flex-"].exact is False
        assert specs["border"].exact is True

    def test_registered_stem_is_recognized(self):
        """A registry extended with a new family classifies it"""
        registry = UtilityRegistry()
        registry.register(UtilitySpec("grid-", UtilityCategory.FLEXBOX, description="Grid"))

        assert registry.classify("grid-cols-2").stem == "grid-"
        assert not classify("grid-cols-2").recognized
