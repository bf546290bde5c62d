from typing import List, Optional, Union

from gts.parser.core.classes import *


def get_span(s_line: int = 1, s_col: int = 1, e_line: int = 1, e_col: int = 1, file_path: str | None = None):
    return Span(s_line=s_line, s_col=s_col, e_line=e_line, e_col=e_col, file_path=file_path)


def get_identifier(name: str):
    return Identifier(span=get_span(), name=name)


def get_basic_lit(value: str, kind: str = "INT"):
    return BasicLit(span=get_span(), kind=kind, value=value)


def get_string_lit(text: str):
    return get_basic_lit(f'"{text}"', kind="STRING")


def _as_expr(value: Union[str, Expression]):
    """Plain strings are shorthand for identifiers."""
    return get_identifier(value) if isinstance(value, str) else value


def get_selector(base: Union[str, Expression], selector: str):
    return SelectorExpr(span=get_span(), base=_as_expr(base), selector=get_identifier(selector))


def get_binary(op: str, left: Union[str, Expression], right: Union[str, Expression]):
    return BinaryExpr(span=get_span(), op=op, left=_as_expr(left), right=_as_expr(right))


def get_unary(op: str, operand: Union[str, Expression]):
    return UnaryExpr(span=get_span(), op=op, operand=_as_expr(operand))


def get_paren(inner: Union[str, Expression]):
    return ParenExpr(span=get_span(), inner=_as_expr(inner))


def get_call(callee: Union[str, Expression], args: Optional[List[Union[str, Expression]]] = None, ellipsis: Optional[int] = None):
    return CallExpr(span=get_span(), callee=_as_expr(callee), args=[_as_expr(a) for a in args or []], ellipsis=ellipsis)


def get_array_type(element: Union[str, Expression], length: Optional[Expression] = None):
    return ArrayType(span=get_span(), length=length, element=_as_expr(element))


def get_pointer_type(pointee: Union[str, Expression]):
    return PointerType(span=get_span(), pointee=_as_expr(pointee))


def get_map_type(key: Union[str, Expression], value: Union[str, Expression]):
    return MapType(span=get_span(), key=_as_expr(key), value=_as_expr(value))


def get_field(names: List[str], field_type: Union[str, Expression]):
    return Field(span=get_span(), names=[get_identifier(n) for n in names], type=_as_expr(field_type))


def get_field_list(fields: List[tuple]):
    """
    Builds a FieldList from (names, type) pairs, e.g. [(["a", "b"], "int"), ([], "error")].
    """
    return FieldList(span=get_span(), fields=[get_field(names, field_type) for names, field_type in fields])


def get_block(statements: Optional[List[Statement]] = None):
    return BlockStmt(span=get_span(), statements=statements or [])


def get_expr_stmt(expression: Expression):
    return ExprStmt(span=get_span(), expression=expression)


def get_assign(lhs: List[Union[str, Expression]], rhs: List[Union[str, Expression]], tok: str = "="):
    return AssignStmt(span=get_span(), lhs=[_as_expr(e) for e in lhs], tok=tok, rhs=[_as_expr(e) for e in rhs])


def get_return(results: Optional[List[Union[str, Expression]]] = None):
    return ReturnStmt(span=get_span(), results=[_as_expr(r) for r in results or []])


def get_if(condition: Expression, body: BlockStmt, else_branch: Optional[Statement] = None, init: Optional[Statement] = None):
    return IfStmt(span=get_span(), init=init, condition=condition, body=body, else_branch=else_branch)


def get_range(source: Union[str, Expression], body: BlockStmt, key: Optional[str] = None, value: Optional[str] = None, tok: Optional[str] = ":="):
    return RangeStmt(
        span=get_span(),
        key=_as_expr(key) if key else None,
        value=_as_expr(value) if value else None,
        tok=tok if (key or value) else None,
        source=_as_expr(source),
        body=body,
    )


def get_import(path: str, alias: Optional[str] = None):
    return ImportSpec(span=get_span(), path=path, alias=get_identifier(alias) if alias else None)


def get_value_spec(names: List[str], spec_type: Optional[Union[str, Expression]] = None, values: Optional[List[Expression]] = None):
    return ValueSpec(
        span=get_span(),
        names=[get_identifier(n) for n in names],
        type=_as_expr(spec_type) if spec_type is not None else None,
        values=values or [],
    )


def get_type_spec(name: str, spec_type: Union[str, Expression], is_alias: bool = False):
    return TypeSpec(span=get_span(), name=get_identifier(name), type=_as_expr(spec_type), is_alias=is_alias)


def get_gen_decl(kind: str, specs: List[Spec]):
    return GenDecl(span=get_span(), kind=kind, specs=specs)


def get_func_decl(
    name: str,
    params: Optional[List[tuple]] = None,
    results: Optional[List[tuple]] = None,
    body: Optional[List[Statement]] = None,
    has_body: bool = True,
    receiver: Optional[List[tuple]] = None,
) -> FuncDecl:
    """
    A flexible factory to build FuncDecl nodes for tests.

    Args:
        name: The name of the function.
        params: (names, type) pairs for the parameters, e.g. [(["a", "b"], "int")]. Defaults to none.
        results: (names, type) pairs for the results. None means the function returns nothing.
        body: The statements of the body. Defaults to an empty body.
        has_body: False builds a forward declaration with no body at all.
        receiver: (names, type) pairs for a method receiver.
    """
    return FuncDecl(
        span=get_span(),
        name=get_identifier(name),
        receiver=get_field_list(receiver) if receiver is not None else None,
        params=get_field_list(params or []),
        results=get_field_list(results) if results is not None else None,
        body=get_block(body) if has_body else None,
    )


def get_file(package: str = "main", imports: Optional[List[ImportSpec]] = None, declarations: Optional[List[Declaration]] = None, file_path: Optional[str] = None):
    return File(span=get_span(), package=get_identifier(package), imports=imports or [], declarations=declarations or [], file_path=file_path)
