"""Tests for parameter classification and descriptors."""

import pytest

from require_options.rule.parameters import (
    AlreadyDestructured,
    Decorated,
    Defaulted,
    ParameterDescriptor,
    PropertyPromoted,
    Rest,
    Simple,
    Unrecognized,
    classify,
    describe,
)
from require_options.syntax.nodes import FunctionDeclaration, Identifier, OpaqueNode
from require_options.syntax.tree import SourceText


def _params(tree):
    fn = next(tree.functions())
    return [classify(p, tree.source) for p in fn.params]


class TestClassify:
    """Shapes assigned to TypeScript parameters."""

    def test_simple(self, parse_ts):
        """Bare and annotated identifiers are Simple."""
        a, b = _params(parse_ts("function f(a, b?: string) {}"))
        assert a == Simple(node=a.node, name="a")
        assert isinstance(b, Simple)
        assert b.name == "b"
        assert b.type_text == "string"
        assert b.optional is True

    def test_defaulted(self, parse_ts):
        """Defaults keep their source text and literal kind."""
        a, b, c = _params(parse_ts("function f(a = 'x', b: number = 2, c = make()) {}"))
        assert isinstance(a, Defaulted)
        assert a.default_text == "'x'"
        assert a.default_kind == "string"
        assert a.type_text is None
        assert b.type_text == "number"
        assert b.default_kind == "number"
        assert c.default_text == "make()"
        assert c.default_kind is None

    def test_property_promoted(self, parse_ts):
        """Constructor parameter properties record their modifier."""
        tree = parse_ts("class A { constructor(private readonly x: Foo, public y) {} }")
        x, y = _params(tree)
        assert isinstance(x, PropertyPromoted)
        assert x.name == "x"
        assert x.type_text == "Foo"
        assert x.modifier == "private readonly"
        assert tree.source.get_text(x.node) == "private readonly x: Foo"
        assert y.modifier == "public"
        assert y.type_text is None

    def test_promoted_with_default(self, parse_ts):
        """A promoted parameter with a default is treated as Defaulted."""
        tree = parse_ts("class A { constructor(protected n: number = 5) {} }")
        [n] = _params(tree)
        assert isinstance(n, Defaulted)
        assert n.name == "n"
        assert n.default_text == "5"
        assert n.type_text == "number"

    def test_rest(self, parse_ts):
        """Rest parameters keep their raw text."""
        [r] = _params(parse_ts("function f(...args: number[]) {}"))
        assert isinstance(r, Rest)
        assert r.raw_text == "...args: number[]"

    @pytest.mark.parametrize(
        "code,raw",
        [
            ("function f({ a, b }) {}", "{ a, b }"),
            ("function f([a, b]) {}", "[a, b]"),
            ("function f({ a }: Opts = {}) {}", "{ a }: Opts = {}"),
        ],
    )
    def test_already_destructured(self, parse_ts, code, raw):
        """Object and array patterns, defaulted or not."""
        [p] = _params(parse_ts(code))
        assert isinstance(p, AlreadyDestructured)
        assert p.raw_text == raw

    @pytest.mark.parametrize(
        "code,raw",
        [
            ("class A { m(@Arg() a) {} }", "@Arg() a"),
            ("class A { constructor(@Inject(B) private b: B) {} }", "@Inject(B) private b: B"),
        ],
    )
    def test_decorated(self, parse_ts, code, raw):
        """Decorated parameters keep their decorators in the raw text."""
        [p] = _params(parse_ts(code))
        assert isinstance(p, Decorated)
        assert p.raw_text == raw

    def test_unrecognized_fallback(self):
        """Anything else falls back to Unrecognized with its raw text."""
        source = SourceText("weird")
        node = OpaqueNode((0, 5), node_type="TSUnknownParameter")
        p = classify(node, source)
        assert isinstance(p, Unrecognized)
        assert p.raw_text == "weird"

    def test_javascript_parameters(self, parse_ts):
        """JavaScript parameters have no annotations."""
        a, b = _params(parse_ts("function f(a, b = 1) {}", language="javascript"))
        assert isinstance(a, Simple)
        assert isinstance(b, Defaulted)
        assert b.default_kind == "number"


class TestDescribe:
    """Projection onto code-generation descriptors."""

    def _node(self):
        return Identifier((0, 1), name="a")

    def test_simple_descriptor(self):
        """Simple keeps its optional flag and type."""
        d = describe(Simple(node=self._node(), name="a", type_text="T", optional=True))
        assert d == ParameterDescriptor(name="a", type_text="T", optional=True, had_explicit_type=True)

    def test_defaulted_is_optional(self):
        """A default value makes the property optional."""
        d = describe(Defaulted(node=self._node(), name="a", default_text="1", default_kind="number"))
        assert d.optional is True
        assert d.default_text == "1"
        assert d.had_explicit_type is False
        assert d.default_kind == "number"

    def test_promoted_drops_modifier(self):
        """The modifier is not part of the descriptor."""
        d = describe(
            PropertyPromoted(node=self._node(), name="a", type_text="string", modifier="private")
        )
        assert d == ParameterDescriptor(name="a", type_text="string", had_explicit_type=True)

    @pytest.mark.parametrize("shape", [Rest, AlreadyDestructured, Decorated, Unrecognized])
    def test_raw_shapes_use_raw_text(self, shape):
        """Shapes without a single name carry their raw text as the name."""
        d = describe(shape(node=self._node(), raw_text="...xs"))
        assert d == ParameterDescriptor(name="...xs")

    def test_function_params_order_preserved(self):
        """Classification keeps source order."""
        source = SourceText("a, b, c")
        params = tuple(Identifier((i, i + 1), name=source.text[i]) for i in (0, 3, 6))
        fn = FunctionDeclaration((0, 7), params=params)
        names = [describe(classify(p, source)).name for p in fn.params]
        assert names == ["a", "b", "c"]
