"""
Site policy tests

Tests which string locations of a built tree are rewritten, with and
without the generic string-literal rule.
"""

from mwprefix.lib.parser import TreeBuilder
from mwprefix.lib.traversal import SitePolicy
from mwprefix.models.tree import SiteKind


def rewrite(source, path="test.tsx", attributes_only=False):
    tree = TreeBuilder(source, path).build()
    policy = SitePolicy("mw-", attributes_only=attributes_only)
    policy.tree_transform(tree)
    return tree, policy


def values(tree):
    return [lit.value for lit in tree.literals]


class TestAttributeRules:
    """Test class/className attribute handling"""

    def test_plain_class_name(self):
        """className="..." is rewritten"""
        tree, policy = rewrite('const el = <div className="flex p-4" />;', attributes_only=True)

        assert values(tree) == ["mw-flex mw-p-4"]
        assert policy.visits[SiteKind.MARKUP_ATTRIBUTE_LITERAL.value] == 1

    def test_wrapped_class_name(self):
        """className={"..."} is rewritten"""
        tree, policy = rewrite('const el = <div className={"flex"} />;', attributes_only=True)

        assert values(tree) == ["mw-flex"]
        assert policy.visits[SiteKind.EXPRESSION_WRAPPED_LITERAL.value] == 1

    def test_other_attributes_are_ignored(self):
        """Only class attributes are rewritten in attributes-only mode"""
        tree, _ = rewrite('const el = <div id="flex" title="p-4" />;', attributes_only=True)

        assert values(tree) == ["flex", "p-4"]
        assert tree.changed_literals == []

    def test_dynamic_class_name_is_skipped(self):
        """className={cn(...)} is skipped by the attribute rule"""
        tree, policy = rewrite(
            'const el = <div className={cn("flex", active)} />;', attributes_only=True
        )

        assert values(tree) == ["flex"]
        assert policy.visits[SiteKind.OTHER_EXPRESSION.value] == 1

    def test_nested_element_is_visited(self):
        """Element-valued attributes recurse into the inner element"""
        tree, policy = rewrite(
            'const el = <Tooltip content={<span className="p-4">Hi</span>} />;',
            attributes_only=True,
        )

        assert values(tree) == ["mw-p-4"]
        assert policy.visits[SiteKind.NESTED_ELEMENT_ATTRIBUTE_LIST.value] == 1

    def test_element_inside_expression_is_visited(self):
        """Elements inside other expressions still get their class rewritten"""
        tree, _ = rewrite(
            'const el = <Box icon={ok && <i className="p-4" />} />;', attributes_only=True
        )

        assert values(tree) == ["mw-p-4"]

    def test_markup_class(self):
        """HTML class attributes are rewritten"""
        tree, _ = rewrite('<p class="font-bold" title="p-4">x</p>', "page.html", True)

        assert values(tree) == ["mw-font-bold", "p-4"]


class TestGenericLiteralRule:
    """Test the every-string-literal rule"""

    def test_all_literals_rewritten(self):
        """Strings outside attributes are rewritten too"""
        tree, policy = rewrite('const a = "p-4";\nconst el = <div id="flex" />;')

        assert values(tree) == ["mw-p-4", "mw-flex"]
        assert policy.visits[SiteKind.GENERIC_LITERAL.value] == 2

    def test_call_arguments_rewritten(self):
        """Strings inside dynamic class expressions are reached as literals"""
        tree, _ = rewrite('const el = <div className={cn("flex", active)} />;')

        assert values(tree) == ["mw-flex"]

    def test_literal_reached_twice_is_rewritten_once(self):
        """A class attribute is not double-prefixed by the second rule"""
        tree, _ = rewrite('const el = <div className="-mt-8 bg-red-500" />;')

        assert values(tree) == ["-mw-mt-8 mw-bg-red-500"]

    def test_opaque_literals_untouched(self):
        """Strings with no utility tokens keep their value"""
        tree, _ = rewrite('import Toast from "./index";\nconst msg = "Hello world";')

        assert tree.changed_literals == []

    def test_running_twice_is_stable(self):
        """A second policy over the same tree changes nothing further"""
        tree, _ = rewrite('const a = "p-4 custom";')
        first = values(tree)

        SitePolicy("mw-").tree_transform(tree)

        assert values(tree) == first
