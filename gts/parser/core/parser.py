import os

from lark import Lark, LarkError, Token, Transformer

from ..utils.helpers import _translate_lark_error, insert_semicolons, pre_parsing_checks
from .classes import *

LARK_PARSER = None

try:
    # Use importlib.resources for robust package data access
    from importlib.resources import files as pkg_files

    # The path is relative to the 'gts.parser.core' subpackage
    go_grammar = (pkg_files("gts.parser.core") / "go.lark").read_text()

    LARK_PARSER = Lark(go_grammar, start="start", parser="earley", lexer="basic")
except Exception:
    # Fallback for development environments where the package is not installed
    grammar_path = os.path.join(os.path.dirname(__file__), "go.lark")
    with open(grammar_path, "r") as f:
        go_grammar = f.read()
    LARK_PARSER = Lark(go_grammar, start="start", parser="earley", lexer="basic")


# Literal text of the string terminals, so anonymous ones (e.g. "&&") read well in errors.
TERMINAL_LITERALS = {terminal.name: terminal.pattern.value for terminal in LARK_PARSER.terminals if terminal.pattern.type == "str"}

NUMBER_KINDS = (("i", "IMAG"), (".", "FLOAT"))


def _number_kind(text: str) -> str:
    if text[:2].lower() in ("0x", "0b", "0o"):
        return "IMAG" if text.endswith("i") else "INT"
    for marker, kind in NUMBER_KINDS:
        if marker in text:
            return kind
    return "FLOAT" if "e" in text.lower() else "INT"


class GoTransformer(Transformer):
    """
    Transforms the Lark parse tree into the pydantic syntax tree consumed by the speakers.
    Each method is called when the parser produced a rule (or alias) of the same name;
    the transformation starts from the leaves (terminals) and works upwards.
    Optional grammar items (`[...]`) arrive as None when absent.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__()

    # --- Helper methods for creating spans ---
    def _create_span_from_token(self, token: Token) -> Span:
        """Creates a Span object from a single Lark Token."""
        return Span(s_line=token.line, s_col=token.column, e_line=token.end_line, e_col=token.end_column, file_path=self.file_path)

    def _get_span_from_items(self, items: list):
        """Calculates a Span that covers a list of tokens and/or nodes, or None if nothing is located."""
        located = [item for item in items if isinstance(item, Token) or getattr(item, "span", None) is not None]
        if not located:
            return None
        first, last = located[0], located[-1]

        s_line = first.span.s_line if hasattr(first, "span") else first.line
        s_col = first.span.s_col if hasattr(first, "span") else first.column
        e_line = last.span.e_line if hasattr(last, "span") else last.end_line
        e_col = last.span.e_col if hasattr(last, "span") else last.end_column

        return Span(s_line=s_line, s_col=s_col, e_line=e_line, e_col=e_col, file_path=self.file_path)

    def _present(self, items: list) -> list:
        return [item for item in items if item is not None]

    # --- Terminal Transformations ---
    def NAME(self, token: Token):
        return Identifier(name=token.value, span=self._create_span_from_token(token))

    def NUMBER(self, token: Token):
        return BasicLit(kind=_number_kind(token.value), value=token.value, span=self._create_span_from_token(token))

    def STRING(self, token: Token):
        return BasicLit(kind="STRING", value=token.value, span=self._create_span_from_token(token))

    def CHAR(self, token: Token):
        return BasicLit(kind="CHAR", value=token.value, span=self._create_span_from_token(token))

    # --- File and Imports ---
    def start(self, items):
        package, *rest = items
        imports = [spec for group in rest if isinstance(group, list) for spec in group]
        declarations = [decl for decl in rest if isinstance(decl, (FuncDecl, GenDecl))]
        return File(
            package=package,
            imports=imports,
            declarations=declarations,
            file_path=self.file_path,
            span=self._get_span_from_items(items),
        )

    def package_clause(self, items):
        return items[0]

    def import_decl(self, items):
        return self._present(items)

    def import_spec(self, items):
        alias, path_literal = items
        return ImportSpec(path=path_literal.value[1:-1], alias=alias, span=self._get_span_from_items(items))

    def import_alias(self, items):
        alias = items[0]
        if isinstance(alias, Token):
            return Identifier(name=alias.value, span=self._create_span_from_token(alias))
        return alias

    # --- Declarations ---
    def func_decl(self, items):
        receiver, name, type_params, signature, body = items
        return FuncDecl(
            name=name,
            receiver=receiver,
            type_params=type_params,
            params=signature.params,
            results=signature.results,
            body=body,
            span=self._get_span_from_items(items),
        )

    def receiver(self, items):
        return items[0]

    def signature(self, items):
        params, result = items
        if result is not None and not isinstance(result, FieldList):
            # A single unparenthesized result type is one anonymous field.
            result = FieldList(fields=[Field(names=[], type=result, span=result.span)], span=result.span)
        return FuncType(params=params, results=result, span=self._get_span_from_items(items))

    def parameters(self, items):
        fields = self._present(items)
        return FieldList(fields=fields, span=self._get_span_from_items(fields))

    def named_param(self, items):
        *names, param_type = items
        return Field(names=names, type=param_type, span=self._get_span_from_items(items))

    def anon_param(self, items):
        return Field(names=[], type=items[0], span=self._get_span_from_items(items))

    def ellipsis_type(self, items):
        _ellipsis, element = items
        return EllipsisExpr(element=element, span=self._get_span_from_items(items))

    def const_decl(self, items):
        return GenDecl(kind="const", specs=self._present(items), span=self._get_span_from_items(items))

    def var_decl(self, items):
        return GenDecl(kind="var", specs=self._present(items), span=self._get_span_from_items(items))

    def type_decl(self, items):
        return GenDecl(kind="type", specs=self._present(items), span=self._get_span_from_items(items))

    def const_spec(self, items):
        names, spec_type, values = items
        return ValueSpec(names=names, type=spec_type, values=values or [], span=self._get_span_from_items(names))

    def var_spec(self, items):
        return self.const_spec(items)

    def type_spec(self, items):
        name, type_params, spec_type = items
        return TypeSpec(name=name, type_params=type_params, type=spec_type, span=self._get_span_from_items(items))

    def alias_type_spec(self, items):
        name, spec_type = items
        return TypeSpec(name=name, type=spec_type, is_alias=True, span=self._get_span_from_items(items))

    def type_params(self, items):
        return FieldList(fields=list(items), span=self._get_span_from_items(items))

    def type_param_decl(self, items):
        *names, constraint = items
        return Field(names=names, type=constraint, span=self._get_span_from_items(items))

    def union_constraint(self, items):
        left, right = items
        return BinaryExpr(op="|", left=left, right=right, span=self._get_span_from_items(items))

    def tilde_constraint(self, items):
        return UnaryExpr(op="~", operand=items[0], span=self._get_span_from_items(items))

    def identifier_list(self, items):
        return list(items)

    def expression_list(self, items):
        return list(items)

    # --- Types ---
    def qualified_ident(self, items):
        package, name = items
        return SelectorExpr(base=package, selector=name, span=self._get_span_from_items(items))

    def generic_type(self, items):
        base, *arguments = items
        return self._instantiate(base, arguments, self._get_span_from_items(items))

    def _instantiate(self, base, arguments, span):
        if len(arguments) == 1:
            return IndexExpr(base=base, index=arguments[0], span=span)
        return IndexListExpr(base=base, indices=arguments, span=span)

    def pointer_type(self, items):
        return PointerType(pointee=items[0], span=self._get_span_from_items(items))

    def array_type(self, items):
        length, element = items
        return ArrayType(length=length, element=element, span=self._get_span_from_items(items))

    def slice_type(self, items):
        return ArrayType(element=items[0], span=self._get_span_from_items(items))

    def implicit_array_type(self, items):
        ellipsis, element = items
        return ArrayType(length=EllipsisExpr(span=self._create_span_from_token(ellipsis)), element=element, span=self._get_span_from_items(items))

    def map_type(self, items):
        key, value = items
        return MapType(key=key, value=value, span=self._get_span_from_items(items))

    def chan_type(self, items):
        return ChanType(value=items[0], span=self._get_span_from_items(items))

    def send_chan_type(self, items):
        return ChanType(direction="send", value=items[0], span=self._get_span_from_items(items))

    def recv_chan_type(self, items):
        return ChanType(direction="recv", value=items[0], span=self._get_span_from_items(items))

    def func_type(self, items):
        return items[0]

    def struct_type(self, items):
        fields = self._present(items)
        return StructType(fields=FieldList(fields=fields), span=self._get_span_from_items(fields))

    def named_field(self, items):
        *names, field_type, tag = items
        return Field(names=names, type=field_type, tag=tag, span=self._get_span_from_items(items))

    def embedded_field(self, items):
        field_type, tag = items
        return Field(names=[], type=field_type, tag=tag, span=self._get_span_from_items(items))

    def embedded_pointer_field(self, items):
        field_type, tag = items
        pointer = PointerType(pointee=field_type, span=field_type.span)
        return Field(names=[], type=pointer, tag=tag, span=self._get_span_from_items(items))

    def tag(self, items):
        return items[0]

    def interface_type(self, items):
        methods = self._present(items)
        return InterfaceType(methods=FieldList(fields=methods), span=self._get_span_from_items(methods))

    def method_elem(self, items):
        name, signature = items
        return Field(names=[name], type=signature, span=self._get_span_from_items(items))

    def embedded_elem(self, items):
        return Field(names=[], type=items[0], span=self._get_span_from_items(items))

    # --- Statements ---
    def block(self, items):
        statements = self._present(items)
        return BlockStmt(statements=statements, span=self._get_span_from_items(statements))

    def expr_stmt(self, items):
        return ExprStmt(expression=items[0], span=self._get_span_from_items(items))

    def assign_stmt(self, items):
        lhs, op, rhs = items
        return AssignStmt(lhs=lhs, tok=op.value, rhs=rhs, span=self._get_span_from_items(lhs + rhs))

    def inc_dec_stmt(self, items):
        target, op = items
        return IncDecStmt(target=target, tok=op.value, span=self._get_span_from_items(items))

    def return_stmt(self, items):
        results = items[0] or []
        return ReturnStmt(results=results, span=self._get_span_from_items(results))

    def send_stmt(self, items):
        channel, value = items
        return SendStmt(channel=channel, value=value, span=self._get_span_from_items(items))

    def labeled_stmt(self, items):
        label, *statement = items
        return LabeledStmt(label=label, statement=statement[0] if statement else None, span=self._get_span_from_items(items))

    def if_stmt(self, items):
        init, condition, body, else_branch = items
        return IfStmt(init=init, condition=condition, body=body, else_branch=else_branch, span=self._get_span_from_items(items))

    def init_stmt(self, items):
        return items[0]

    def switch_stmt(self, items):
        init, tag, *clauses = items
        return SwitchStmt(init=init, tag=tag, clauses=clauses, span=self._get_span_from_items(items))

    def case_clause(self, items):
        values, *body = items
        return CaseClause(values=values, body=body, span=self._get_span_from_items(values + body))

    def type_case_clause(self, items):
        return self.case_clause(items)

    def type_list(self, items):
        return list(items)

    def default_clause(self, items):
        return CaseClause(is_default=True, body=list(items), span=self._get_span_from_items(items))

    def type_switch_stmt(self, items):
        init, (binding, subject), *clauses = items
        return TypeSwitchStmt(init=init, binding=binding, subject=subject, clauses=clauses, span=self._get_span_from_items([subject, *clauses]))

    def type_switch_guard(self, items):
        binding, subject = items
        return binding, subject

    def select_stmt(self, items):
        return SelectStmt(clauses=list(items), span=self._get_span_from_items(items))

    def comm_clause(self, items):
        comm, *body = items
        return CommClause(comm=comm, body=body, span=self._get_span_from_items(items))

    def default_comm_clause(self, items):
        return CommClause(body=list(items), span=self._get_span_from_items(items))

    def for_forever(self, items):
        return ForStmt(body=items[0], span=self._get_span_from_items(items))

    def for_cond(self, items):
        condition, body = items
        return ForStmt(condition=condition, body=body, span=self._get_span_from_items(items))

    def for_clause(self, items):
        init, condition, post, body = items
        return ForStmt(init=init, condition=condition, post=post, body=body, span=self._get_span_from_items(items))

    def for_init(self, items):
        return items[0]

    def for_post(self, items):
        return items[0]

    def range_stmt(self, items):
        assignment, source, body = items
        key = value = tok = None
        if assignment is not None:
            targets, tok = assignment
            key = targets[0]
            value = targets[1] if len(targets) > 1 else None
        return RangeStmt(key=key, value=value, tok=tok, source=source, body=body, span=self._get_span_from_items(items))

    def range_assign(self, items):
        targets, op = items
        return targets, op.value

    def decl_stmt(self, items):
        return DeclStmt(decl=items[0], span=items[0].span)

    def go_stmt(self, items):
        return GoStmt(call=items[0], span=self._get_span_from_items(items))

    def defer_stmt(self, items):
        return DeferStmt(call=items[0], span=self._get_span_from_items(items))

    def branch_stmt(self, items):
        keyword, label = items
        return BranchStmt(tok=keyword.value, label=label, span=self._get_span_from_items(items))

    # Operator rules keep their token so the expression rules can read its text
    def assign_op(self, items):
        return items[0]

    def inc_dec_op(self, items):
        return items[0]

    def range_op(self, items):
        return items[0]

    def or_op(self, items):
        return items[0]

    def and_op(self, items):
        return items[0]

    def rel_op(self, items):
        return items[0]

    def add_op(self, items):
        return items[0]

    def mul_op(self, items):
        return items[0]

    def unary_op(self, items):
        return items[0]

    # --- Expressions ---
    def binary_expr(self, items):
        left, op, right = items
        return BinaryExpr(op=op.value, left=left, right=right, span=self._get_span_from_items(items))

    def unary(self, items):
        op, operand = items
        span = self._get_span_from_items(items)
        if op.value == "*":
            # Go's own parser represents a dereference like a pointer type.
            return PointerType(pointee=operand, span=span)
        return UnaryExpr(op=op.value, operand=operand, span=span)

    def selector_expr(self, items):
        base, selector = items
        return SelectorExpr(base=base, selector=selector, span=self._get_span_from_items(items))

    def type_assert_expr(self, items):
        base, asserted = items
        return TypeAssertExpr(base=base, asserted=asserted, span=self._get_span_from_items(items))

    def index_expr(self, items):
        base, index = items
        return IndexExpr(base=base, index=index, span=self._get_span_from_items(items))

    def index_list_expr(self, items):
        base, *indices = items
        return self._instantiate(base, indices, self._get_span_from_items(items))

    def slice_expr(self, items):
        base, low, high = items
        return SliceExpr(base=base, low=low, high=high, span=self._get_span_from_items(items))

    def call_expr(self, items):
        callee, call_args = items
        args, ellipsis = call_args if call_args is not None else ([], None)
        return CallExpr(callee=callee, args=args, ellipsis=ellipsis, span=self._get_span_from_items(items))

    def call_args(self, items):
        args = [item for item in items if item is not None and not isinstance(item, Token)]
        has_spread = any(isinstance(item, Token) for item in items)
        return args, (len(args) - 1 if has_spread else None)

    def paren_expr(self, items):
        return ParenExpr(inner=items[0], span=self._get_span_from_items(items))

    def func_lit(self, items):
        signature, body = items
        return FuncLit(signature=signature, body=body, span=self._get_span_from_items(items))

    def composite_lit(self, items):
        literal_type, literal = items
        return CompositeLit(literal_type=literal_type, elements=literal.elements, span=self._get_span_from_items(items))

    def literal_value(self, items):
        elements = self._present(items)
        return CompositeLit(elements=elements, span=self._get_span_from_items(elements))

    def key_value_expr(self, items):
        key, value = items
        return KeyValueExpr(key=key, value=value, span=self._get_span_from_items(items))


def parse_go_source(script_content: str, file_path: str = "<stdin>") -> File:
    """Parses Go source text and transforms it into the speaker's syntax tree."""

    pre_parsing_checks(script_content, file_path)

    try:
        parse_tree = LARK_PARSER.parse(insert_semicolons(script_content))
        return GoTransformer(file_path=file_path).transform(parse_tree)
    except LarkError as e:
        raise _translate_lark_error(e, file_path, TERMINAL_LITERALS) from e
