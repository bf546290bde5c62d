"""
Defines the formal data structures (contracts) for the syntax tree produced by
the Go front-end and consumed by the speech compiler.

Each node is a pydantic model carrying a `node_type` literal, so every family of
nodes (expressions, statements, declarations, specs) is a discriminated union.
Nodes optionally carry a `Span` pointing back into the source file.
"""

from typing import Annotated, List, Literal, Optional, Union

import pydantic
from pydantic import BaseModel

# --- Core Data Structures ---


class Span(BaseModel):
    """Represents a location in the source code for precise error reporting."""

    s_line: int
    s_col: int
    e_line: int
    e_col: int
    file_path: Optional[str] = None


class ASTNode(BaseModel):
    """A base class for all syntax tree nodes."""

    span: Optional[Span] = None


# --- Expressions ---


class Identifier(ASTNode):
    node_type: Literal["identifier"] = "identifier"
    name: str


class BasicLit(ASTNode):
    """A literal kept exactly as written, quotes included."""

    node_type: Literal["basic_lit"] = "basic_lit"
    kind: Literal["INT", "FLOAT", "IMAG", "CHAR", "STRING"]
    value: str


class EllipsisExpr(ASTNode):
    """`...T` in a variadic parameter, or the `...` length of `[...]T`."""

    node_type: Literal["ellipsis"] = "ellipsis"
    element: Optional["Expression"] = None


class ArrayType(ASTNode):
    """An array type when `length` is set, a slice type otherwise."""

    node_type: Literal["array_type"] = "array_type"
    length: Optional["Expression"] = None
    element: "Expression"


class PointerType(ASTNode):
    """`*T` as a type, and `*x` as a dereference."""

    node_type: Literal["pointer_type"] = "pointer_type"
    pointee: "Expression"


class MapType(ASTNode):
    node_type: Literal["map_type"] = "map_type"
    key: "Expression"
    value: "Expression"


class ChanType(ASTNode):
    node_type: Literal["chan_type"] = "chan_type"
    direction: Literal["both", "send", "recv"] = "both"
    value: "Expression"


class FuncType(ASTNode):
    node_type: Literal["func_type"] = "func_type"
    params: "FieldList"
    results: Optional["FieldList"] = None


class StructType(ASTNode):
    node_type: Literal["struct_type"] = "struct_type"
    fields: "FieldList"


class InterfaceType(ASTNode):
    node_type: Literal["interface_type"] = "interface_type"
    methods: "FieldList"


class SelectorExpr(ASTNode):
    node_type: Literal["selector_expr"] = "selector_expr"
    base: "Expression"
    selector: Identifier


class BinaryExpr(ASTNode):
    node_type: Literal["binary_expr"] = "binary_expr"
    op: str
    left: "Expression"
    right: "Expression"


class UnaryExpr(ASTNode):
    node_type: Literal["unary_expr"] = "unary_expr"
    op: str
    operand: "Expression"


class ParenExpr(ASTNode):
    node_type: Literal["paren_expr"] = "paren_expr"
    inner: "Expression"


class CallExpr(ASTNode):
    """
    A call. `ellipsis` is the index of the first argument covered by a
    trailing `...` spread, or None when the call has no spread.
    """

    node_type: Literal["call_expr"] = "call_expr"
    callee: "Expression"
    args: List["Expression"] = []
    ellipsis: Optional[int] = None


class IndexExpr(ASTNode):
    node_type: Literal["index_expr"] = "index_expr"
    base: "Expression"
    index: "Expression"


class IndexListExpr(ASTNode):
    """A generic instantiation with more than one type argument, as in `Pair[K, V]`."""

    node_type: Literal["index_list_expr"] = "index_list_expr"
    base: "Expression"
    indices: List["Expression"]


class SliceExpr(ASTNode):
    node_type: Literal["slice_expr"] = "slice_expr"
    base: "Expression"
    low: Optional["Expression"] = None
    high: Optional["Expression"] = None


class TypeAssertExpr(ASTNode):
    node_type: Literal["type_assert_expr"] = "type_assert_expr"
    base: "Expression"
    asserted: "Expression"


class CompositeLit(ASTNode):
    node_type: Literal["composite_lit"] = "composite_lit"
    literal_type: Optional["Expression"] = None
    elements: List["Expression"] = []


class KeyValueExpr(ASTNode):
    node_type: Literal["key_value_expr"] = "key_value_expr"
    key: "Expression"
    value: "Expression"


class FuncLit(ASTNode):
    node_type: Literal["func_lit"] = "func_lit"
    signature: FuncType
    body: "BlockStmt"


# --- Field Lists ---


class Field(ASTNode):
    """Zero or more names sharing one type, as in `a, b int` or an anonymous `error`."""

    names: List[Identifier] = []
    type: "Expression"
    tag: Optional[BasicLit] = None


class FieldList(ASTNode):
    fields: List[Field] = []

    def num_fields(self) -> int:
        """Counts named entries, with each anonymous field counting as one."""
        return sum(len(field.names) or 1 for field in self.fields)


# --- Statements ---


class BlockStmt(ASTNode):
    node_type: Literal["block_stmt"] = "block_stmt"
    statements: List["Statement"] = []


class IfStmt(ASTNode):
    node_type: Literal["if_stmt"] = "if_stmt"
    init: Optional["Statement"] = None
    condition: "Expression"
    body: BlockStmt
    else_branch: Optional["Statement"] = None


class ForStmt(ASTNode):
    node_type: Literal["for_stmt"] = "for_stmt"
    init: Optional["Statement"] = None
    condition: Optional["Expression"] = None
    post: Optional["Statement"] = None
    body: BlockStmt


class RangeStmt(ASTNode):
    node_type: Literal["range_stmt"] = "range_stmt"
    key: Optional["Expression"] = None
    value: Optional["Expression"] = None
    tok: Optional[str] = None
    source: "Expression"
    body: BlockStmt


class ReturnStmt(ASTNode):
    node_type: Literal["return_stmt"] = "return_stmt"
    results: List["Expression"] = []


class AssignStmt(ASTNode):
    node_type: Literal["assign_stmt"] = "assign_stmt"
    lhs: List["Expression"]
    tok: str = "="
    rhs: List["Expression"]


class ExprStmt(ASTNode):
    node_type: Literal["expr_stmt"] = "expr_stmt"
    expression: "Expression"


class IncDecStmt(ASTNode):
    node_type: Literal["inc_dec_stmt"] = "inc_dec_stmt"
    target: "Expression"
    tok: Literal["++", "--"]


class DeclStmt(ASTNode):
    node_type: Literal["decl_stmt"] = "decl_stmt"
    decl: "GenDecl"


class GoStmt(ASTNode):
    node_type: Literal["go_stmt"] = "go_stmt"
    call: "Expression"


class DeferStmt(ASTNode):
    node_type: Literal["defer_stmt"] = "defer_stmt"
    call: "Expression"


class BranchStmt(ASTNode):
    node_type: Literal["branch_stmt"] = "branch_stmt"
    tok: Literal["break", "continue", "goto", "fallthrough"]
    label: Optional[Identifier] = None


class SendStmt(ASTNode):
    node_type: Literal["send_stmt"] = "send_stmt"
    channel: "Expression"
    value: "Expression"


class LabeledStmt(ASTNode):
    node_type: Literal["labeled_stmt"] = "labeled_stmt"
    label: Identifier
    statement: Optional["Statement"] = None


class CaseClause(ASTNode):
    """One `case` of a switch or type switch. The `default` clause has no values."""

    node_type: Literal["case_clause"] = "case_clause"
    values: List["Expression"] = []
    is_default: bool = False
    body: List["Statement"] = []


class SwitchStmt(ASTNode):
    node_type: Literal["switch_stmt"] = "switch_stmt"
    init: Optional["Statement"] = None
    tag: Optional["Expression"] = None
    clauses: List[CaseClause] = []


class TypeSwitchStmt(ASTNode):
    """`switch [init;] [binding :=] subject.(type) { ... }`"""

    node_type: Literal["type_switch_stmt"] = "type_switch_stmt"
    init: Optional["Statement"] = None
    binding: Optional[Identifier] = None
    subject: "Expression"
    clauses: List[CaseClause] = []


class CommClause(ASTNode):
    """One `case` of a select. `comm` is None for the `default` clause."""

    node_type: Literal["comm_clause"] = "comm_clause"
    comm: Optional["Statement"] = None
    body: List["Statement"] = []


class SelectStmt(ASTNode):
    node_type: Literal["select_stmt"] = "select_stmt"
    clauses: List[CommClause] = []


# --- Specs and Declarations ---


class ImportSpec(ASTNode):
    node_type: Literal["import_spec"] = "import_spec"
    path: str
    alias: Optional[Identifier] = None


class ValueSpec(ASTNode):
    node_type: Literal["value_spec"] = "value_spec"
    names: List[Identifier]
    type: Optional["Expression"] = None
    values: List["Expression"] = []


class TypeSpec(ASTNode):
    node_type: Literal["type_spec"] = "type_spec"
    name: Identifier
    type_params: Optional[FieldList] = None
    type: "Expression"
    is_alias: bool = False


class GenDecl(ASTNode):
    node_type: Literal["gen_decl"] = "gen_decl"
    kind: Literal["const", "var", "type"]
    specs: List["Spec"] = []


class FuncDecl(ASTNode):
    node_type: Literal["func_decl"] = "func_decl"
    name: Identifier
    receiver: Optional[FieldList] = None
    type_params: Optional[FieldList] = None
    params: FieldList
    results: Optional[FieldList] = None
    body: Optional[BlockStmt] = None


# --- Top-level Structure ---


class File(ASTNode):
    """The root of the syntax tree, representing a single Go source file."""

    node_type: Literal["file"] = "file"
    package: Identifier
    imports: List[ImportSpec] = []
    declarations: List["Declaration"] = []
    file_path: Optional[str] = None


# --- Discriminated Unions ---

Expression = Annotated[
    Union[
        Identifier,
        BasicLit,
        EllipsisExpr,
        ArrayType,
        PointerType,
        MapType,
        ChanType,
        FuncType,
        StructType,
        InterfaceType,
        SelectorExpr,
        BinaryExpr,
        UnaryExpr,
        ParenExpr,
        CallExpr,
        IndexExpr,
        IndexListExpr,
        SliceExpr,
        TypeAssertExpr,
        CompositeLit,
        KeyValueExpr,
        FuncLit,
    ],
    pydantic.Field(discriminator="node_type"),
]

Statement = Annotated[
    Union[
        BlockStmt,
        IfStmt,
        ForStmt,
        RangeStmt,
        ReturnStmt,
        AssignStmt,
        ExprStmt,
        IncDecStmt,
        DeclStmt,
        GoStmt,
        DeferStmt,
        BranchStmt,
        SendStmt,
        LabeledStmt,
        SwitchStmt,
        TypeSwitchStmt,
        SelectStmt,
    ],
    pydantic.Field(discriminator="node_type"),
]

Spec = Annotated[Union[ValueSpec, TypeSpec], pydantic.Field(discriminator="node_type")]

Declaration = Annotated[Union[FuncDecl, GenDecl], pydantic.Field(discriminator="node_type")]

# A generic type hint for any node in the tree
Node = Union[ASTNode, File]

for _model in (
    EllipsisExpr,
    ArrayType,
    PointerType,
    MapType,
    ChanType,
    FuncType,
    StructType,
    InterfaceType,
    SelectorExpr,
    BinaryExpr,
    UnaryExpr,
    ParenExpr,
    CallExpr,
    IndexExpr,
    IndexListExpr,
    SliceExpr,
    TypeAssertExpr,
    CompositeLit,
    KeyValueExpr,
    FuncLit,
    Field,
    FieldList,
    BlockStmt,
    IfStmt,
    ForStmt,
    RangeStmt,
    ReturnStmt,
    AssignStmt,
    ExprStmt,
    IncDecStmt,
    DeclStmt,
    GoStmt,
    DeferStmt,
    SendStmt,
    LabeledStmt,
    CaseClause,
    SwitchStmt,
    TypeSwitchStmt,
    CommClause,
    SelectStmt,
    ValueSpec,
    TypeSpec,
    GenDecl,
    FuncDecl,
    File,
):
    _model.model_rebuild()
