"""Tests for the tree-sitter normalizer."""

import pytest

from require_options.exceptions import ParsingError, UnsupportedLanguageError
from require_options.syntax.nodes import (
    ArrowFunctionExpression,
    AssignmentPattern,
    CallExpression,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    MethodDefinition,
    ObjectPattern,
    Property,
    RestElement,
    TSParameterProperty,
    VariableDeclarator,
)


class TestFunctions:
    """Function-like nodes."""

    def test_declaration(self, parse_ts):
        """Function declarations carry id and params."""
        tree = parse_ts("function add(a, b) { return a + b; }")
        fn = next(tree.functions())
        assert isinstance(fn, FunctionDeclaration)
        assert fn.id.name == "add"
        assert [p.name for p in fn.params] == ["a", "b"]

    def test_arrow_with_bare_parameter(self, parse_ts):
        """``x => x`` has a single Identifier parameter."""
        tree = parse_ts("const f = x => x;")
        fn = next(tree.functions())
        assert isinstance(fn, ArrowFunctionExpression)
        assert len(fn.params) == 1
        assert fn.params[0].name == "x"
        assert isinstance(tree.parent_of(fn), VariableDeclarator)

    def test_class_method(self, parse_ts):
        """Class methods wrap a FunctionExpression in a MethodDefinition."""
        tree = parse_ts("class A { constructor(a) {} static run(b) {} }")
        ctor, run = list(tree.functions())
        assert isinstance(ctor, FunctionExpression)
        ctor_def = tree.parent_of(ctor)
        assert isinstance(ctor_def, MethodDefinition)
        assert ctor_def.kind == "constructor"
        run_def = tree.parent_of(run)
        assert run_def.kind == "method"
        assert run_def.static is True

    def test_object_method_is_property(self, parse_ts):
        """Object-literal method shorthand is a method Property."""
        tree = parse_ts("const o = { go(a) {}, get v() { return 1; } };")
        go, getter = list(tree.functions())
        go_prop = tree.parent_of(go)
        assert isinstance(go_prop, Property)
        assert go_prop.method is True
        getter_prop = tree.parent_of(getter)
        assert getter_prop.method is False
        assert getter_prop.kind == "get"

    def test_object_pair_is_property(self, parse_ts):
        """``key: fn`` is a non-method Property."""
        tree = parse_ts("const o = { key: (a) => a };")
        fn = next(tree.functions())
        prop = tree.parent_of(fn)
        assert isinstance(prop, Property)
        assert prop.method is False
        assert prop.key.name == "key"

    def test_parentheses_unwrapped(self, parse_ts):
        """An IIFE's callee is the function itself."""
        tree = parse_ts("(function (a) {})(1);")
        fn = next(tree.functions())
        call = tree.parent_of(fn)
        assert isinstance(call, CallExpression)
        assert call.callee is fn


class TestParameters:
    """TypeScript parameter shapes."""

    def test_typed_identifier(self, parse_ts):
        """Annotations hang off the Identifier, without the colon."""
        tree = parse_ts("function f(a: Array<string>, b?: number) {}")
        a, b = next(tree.functions()).params
        assert isinstance(a, Identifier)
        assert tree.source.get_text(a) == "a: Array<string>"
        assert tree.source.get_text(a.type_annotation) == "Array<string>"
        assert b.optional is True

    def test_default(self, parse_ts):
        """Defaults become AssignmentPattern spanning the whole parameter."""
        tree = parse_ts("function f(a: number = 1) {}")
        [a] = next(tree.functions()).params
        assert isinstance(a, AssignmentPattern)
        assert tree.source.get_text(a) == "a: number = 1"
        assert a.left.name == "a"
        assert a.right.kind == "number"

    def test_parameter_property(self, parse_ts):
        """Modifiers produce a TSParameterProperty."""
        tree = parse_ts("class A { constructor(public readonly x: T) {} }")
        [x] = next(tree.functions()).params
        assert isinstance(x, TSParameterProperty)
        assert x.accessibility == "public"
        assert x.readonly is True
        assert tree.source.get_text(x.parameter) == "x: T"

    def test_decorated_parameter(self, parse_ts):
        """A decorator stays on the parameter and its range covers it."""
        tree = parse_ts("class A { m(@Arg() a: string) {} }")
        [a] = next(tree.functions()).params
        assert isinstance(a, Identifier)
        assert len(a.decorators) == 1
        assert tree.source.get_text(a) == "@Arg() a: string"

    def test_decorated_parameter_property(self, parse_ts):
        """Promoted parameters carry their decorators too."""
        tree = parse_ts("class A { constructor(@Inject(B) private b: B) {} }")
        [b] = next(tree.functions()).params
        assert isinstance(b, TSParameterProperty)
        assert len(b.decorators) == 1
        assert tree.source.get_text(b).startswith("@Inject(B)")
        assert tree.source.get_text(b.parameter) == "b: B"

    def test_rest_and_patterns(self, parse_ts):
        """Rest and destructuring parameters keep their shapes."""
        tree = parse_ts("function f({ a }, ...rest: number[]) {}")
        obj, rest = next(tree.functions()).params
        assert isinstance(obj, ObjectPattern)
        assert isinstance(rest, RestElement)
        assert rest.argument.name == "rest"
        assert tree.source.get_text(rest.type_annotation) == "number[]"

    def test_typed_declarator(self, parse_ts):
        """A declarator's Identifier carries the variable's annotation."""
        tree = parse_ts("const h: Handler = (a) => a;")
        fn = next(tree.functions())
        declarator = tree.parent_of(fn)
        assert declarator.init is fn
        assert tree.source.get_text(declarator.id.type_annotation) == "Handler"


class TestOffsets:
    """Byte to character offset mapping."""

    def test_multibyte_prefix(self, parse_ts):
        """Ranges are character offsets, not byte offsets."""
        code = "const s = 'é€\U0001f600';\nfunction t(a, b) {}"
        tree = parse_ts(code)
        fn = next(tree.functions())
        assert tree.source.get_text(fn) == "function t(a, b) {}"
        assert [tree.source.get_text(p) for p in fn.params] == ["a", "b"]


class TestErrors:
    """Failure modes."""

    def test_syntax_error(self, normalizer):
        """Broken code raises ParsingError with the line."""
        with pytest.raises(ParsingError) as exc_info:
            normalizer.parse("let ok = 1;\nfunction (", "typescript", "bad.ts")
        assert "syntax error" in exc_info.value.reason
        assert exc_info.value.language == "typescript"

    def test_unsupported_language(self, normalizer):
        """Unknown languages are rejected."""
        with pytest.raises(UnsupportedLanguageError):
            normalizer.parse("x", "cobol")
