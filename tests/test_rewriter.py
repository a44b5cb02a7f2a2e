"""
Rewriter and class-list transform tests

Tests prefix placement, pass-through of opaque tokens, and the list-level
guarantees: stable on re-runs, same segment count, spacing untouched.
"""

import pytest

from mwprefix.lib.classifier import classify
from mwprefix.lib.rewriter import classList_transform, token_rewrite


class TestTokenRewrite:
    """Test single-token reassembly"""

    def test_prefix_before_stem(self):
        """Prefix goes directly in front of the stem"""
        assert token_rewrite(classify("bg-red-500"), "mw-") == "mw-bg-red-500"

    def test_prefix_after_negative_sign(self):
        """Sign stays in front of the prefix"""
        assert token_rewrite(classify("-mt-8"), "mw-") == "-mw-mt-8"

    def test_prefix_after_modifier(self):
        """Modifier stays in front of the prefix"""
        assert token_rewrite(classify("hover:bg-blue-600"), "mw-") == "hover:mw-bg-blue-600"

    def test_sign_and_modifier(self):
        """Sign, then modifier, then prefix"""
        assert token_rewrite(classify("-md:mt-8"), "mw-") == "-md:mw-mt-8"

    def test_opaque_token_verbatim(self):
        """Opaque tokens come back byte-identical"""
        for text in ("custom-class", "sm:hover:bg-red-500", "[mask-type:luminance]", "mw-p-4"):
            assert token_rewrite(classify(text), "mw-") == text

    def test_tail_survives(self):
        """Unrecognized trailing characters are not dropped"""
        assert token_rewrite(classify("w-[calc(100%-1rem)]"), "mw-") == "mw-w-[calc(100%-1rem)]"


class TestClassListTransform:
    """Test whole class-list strings"""

    def test_sign_placement(self):
        """Negative values keep their sign outside the prefix"""
        assert classList_transform("-mt-8", "mw-") == "-mw-mt-8"

    def test_suffix_preservation(self):
        """Arbitrary values are preserved"""
        assert classList_transform("bg-[#123456]", "mw-") == "mw-bg-[#123456]"

    def test_custom_prefix(self):
        """Any prefix string can be used"""
        assert (
            classList_transform("bg-red-500 text-white", "custom-")
            == "custom-bg-red-500 custom-text-white"
        )

    def test_already_prefixed_stability(self):
        """Prefixed tokens are left alone, others are prefixed"""
        assert (
            classList_transform("mw-bg-red-500 text-white mw-p-4", "mw-")
            == "mw-bg-red-500 mw-text-white mw-p-4"
        )

    def test_non_utility_pass_through(self):
        """Custom classes around a utility do not change"""
        assert (
            classList_transform("custom-class bg-red-500 another-custom-class", "mw-")
            == "custom-class mw-bg-red-500 another-custom-class"
        )

    def test_consecutive_spaces_preserved(self):
        """Runs of spaces survive as empty segments"""
        assert classList_transform("p-4  flex", "mw-") == "mw-p-4  mw-flex"
        assert classList_transform(" p-4 ", "mw-") == " mw-p-4 "

    def test_empty_string(self):
        """Empty input stays empty"""
        assert classList_transform("", "mw-") == ""

    def test_prose_without_vocabulary_is_untouched(self):
        """Ordinary text with no utility tokens is unchanged"""
        text = "Hello world, this is a sentence."
        assert classList_transform(text, "mw-") == text

    @pytest.mark.parametrize("text", [
        "bg-red-500 text-white p-4 hover:bg-blue-600 focus:outline-none",
        "sm:bg-red-500 md:text-xl -mt-4 custom-class",
        "flex flex-row items-center justify-between gap-[5px]",
        "  border   rounded-full  ",
    ])
    def test_idempotent(self, text):
        """Transforming twice equals transforming once"""
        once = classList_transform(text, "mw-")
        assert classList_transform(once, "mw-") == once

    @pytest.mark.parametrize("text", [
        "bg-red-500 custom p-4",
        "a  b   c",
        " leading and trailing ",
    ])
    def test_segment_count_preserved(self, text):
        """Same number of space-separated segments in and out"""
        assert len(classList_transform(text, "mw-").split(" ")) == len(text.split(" "))
