"""
Grammar for Rust type expressions.

This covers the type syntax a code generator is likely to be handed: paths
with generic arguments (including turbofish and parenthesized `Fn(..)`
arguments), qualified-self paths, references, raw pointers, slices, arrays,
tuples, bare function pointers, `dyn`/`impl` trait bounds, `!` and `_`.

Only `path_type` is decomposed structurally. Everything else is kept so that
it can be re-rendered token by token, which is why the parser is built with
`keep_all_tokens=True`: punctuation must survive in the tree.
"""

from lark import Lark, Tree
from lark.exceptions import (
    UnexpectedCharacters,
    UnexpectedEOF,
    UnexpectedInput,
    UnexpectedToken,
)

from ..exceptions import TypeSyntaxError

TYPE_GRAMMAR = r"""
    ?start: type

    ?type: path_type
         | qualified_path_type
         | reference_type
         | pointer_type
         | slice_type
         | array_type
         | tuple_type
         | paren_type
         | never_type
         | infer_type
         | bare_fn_type
         | trait_object_type
         | impl_trait_type

    // foo::Bar<u8>, ::std::vec::Vec<u8>, Vec::<u8>, Fn(u8) -> bool
    path_type: PATH_SEP? path_segment (PATH_SEP path_segment)*
    path_segment: NAME
                | NAME PATH_SEP? angle_args
                | NAME paren_args

    angle_args: "<" (generic_arg ("," generic_arg)* ","?)? ">"
    ?generic_arg: type_arg
                | lifetime_arg
                | const_arg
                | binding_arg
                | constraint_arg
    type_arg: type
    lifetime_arg: LIFETIME
    const_arg: literal
             | "-" literal
             | block
    binding_arg: NAME angle_args? "=" type
    constraint_arg: NAME angle_args? ":" bounds

    paren_args: "(" (type ("," type)* ","?)? ")" ("->" type)?

    // <T as Trait>::Item, <T>::Item
    qualified_path_type: "<" type ("as" path_type)? ">" PATH_SEP path_segment (PATH_SEP path_segment)*

    reference_type: "&" LIFETIME? "mut"? type
    pointer_type: "*" ("const" | "mut") type
    slice_type: "[" type "]"
    array_type: "[" type ";" const_expr "]"
    tuple_type: "(" ")"
              | "(" type "," ")"
              | "(" type ("," type)+ ","? ")"
    paren_type: "(" type ")"
    never_type: "!"
    infer_type: "_"

    bare_fn_type: for_lifetimes? "unsafe"? abi? "fn" "(" fn_params? ")" ("->" type)?
    abi: "extern" STRING?
    fn_params: fn_param ("," fn_param)* ","?
    fn_param: (NAME ":")? type
            | "..."

    trait_object_type: "dyn" bounds
    impl_trait_type: "impl" bounds

    bounds: bound ("+" bound)*
    bound: "?"? for_lifetimes? path_type
         | "(" "?"? for_lifetimes? path_type ")"
         | LIFETIME
    for_lifetimes: "for" "<" LIFETIME ("," LIFETIME)* ","? ">"

    const_expr: const_atom (const_op const_atom)*
    const_op: "+" | "-" | "*" | "/" | "%"
    ?const_atom: literal
               | "-" literal
               | path_type
               | block
    block: "{" const_expr? "}"

    ?literal: INT | FLOAT | CHAR | STRING | "true" | "false"

    PATH_SEP: "::"
    // A char literal is tried before a lifetime, `'a'` is a char
    CHAR.2: /'([^'\\\n]|\\(u\{[0-9A-Fa-f]+\}|x[0-9A-Fa-f]{2}|.))'/
    LIFETIME: /'[^\W\d]\w*/
    NAME: /r#[^\W\d]\w*|[^\W\d]\w*/
    FLOAT.2: /[0-9][0-9_]*\.[0-9][0-9_]*([eE][+-]?[0-9_]+)?(f32|f64)?/
    INT: /[0-9]\w*/
    %import common.ESCAPED_STRING -> STRING

    %import common.WS
    %ignore WS
"""

# Built lazily, building the Earley tables is the expensive part
_type_parser: Lark | None = None


def get_type_parser() -> Lark:
    global _type_parser
    if _type_parser is None:
        _type_parser = Lark(
            TYPE_GRAMMAR,
            parser="earley",
            lexer="basic",
            keep_all_tokens=True,
            maybe_placeholders=False,
        )
    return _type_parser


def parse_type(text: str) -> Tree:
    """Parse `text` as a single Rust type expression.

    Raises `TypeSyntaxError` if the grammar rejects the text.
    """
    try:
        return get_type_parser().parse(text)
    except UnexpectedInput as e:
        raise TypeSyntaxError(
            text,
            _describe(e),
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
        ) from e


def _describe(error: UnexpectedInput) -> str:
    match error:
        case UnexpectedEOF():
            return "unexpected end of input"
        case UnexpectedToken():
            return f"unexpected token {str(error.token)!r}"
        case UnexpectedCharacters():
            return f"unexpected character {error.char!r}"
        case _:
            return "not a type expression"
