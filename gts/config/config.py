"""
Static configuration data for the Go speaker.
This includes the phonetic dictionary, operator phrases and token names.
"""

# Case-sensitive substitutions applied to each token produced by splitting a symbol.
SYMBOL_TRANSLATIONS = {
    # --- Package and library names ---
    "os": "oh ess",
    "github": "git hub",
    "fmt": "fumt",
    "utf": "you tee f",
    "ast": "a s t",
    "strconv": "s t r conv",
    "io": "eye oh",
    "http": "h t t p",
    "json": "jason",
    # --- Formatting functions ---
    "printf": "printf f",
    "sprintf": "s printf f",
    "fprintf": "f printf f",
    "Printf": "print f",
    "Sprintf": "s print f",
    "Fprintf": "f print f",
    "Println": "print line",
    "Errorf": "error f",
    # --- Separators ---
    ".": "dot",
    "/": "slash",
    ",": "comma",
    ":": "colon",
    "-": "dash",
    "_": "blank",
}

BINARY_OPERATOR_SPEECH = {
    "||": "or",
    "&&": "and",
    "==": "equals",
    "!=": "does not equal",
    "<": "is less than",
    "<=": "is less than or equal to",
    ">": "is greater than",
    ">=": "is greater than or equal to",
    "+": "plus",
    "-": "minus",
    "|": "bitwise or",
    "^": "exclusive or",
    "*": "times",
    "/": "divided by",
    "%": "modulo",
    "<<": "shifted left by",
    ">>": "shifted right by",
    "&": "bitwise and",
    "&^": "bitwise and not",
}

UNARY_OPERATOR_SPEECH = {
    "+": "positive",
    "-": "negative",
    "!": "not",
    "^": "bitwise not",
    "*": "star",
    "&": "ref",
    "<-": "receive from channel",
}

# Keywords after which a line break ends the statement (Go's semicolon rule).
SEMICOLON_KEYWORDS = {"break", "continue", "fallthrough", "return"}

GO_KEYWORDS = {
    "break",
    "case",
    "chan",
    "const",
    "continue",
    "default",
    "defer",
    "else",
    "fallthrough",
    "for",
    "func",
    "go",
    "goto",
    "if",
    "import",
    "interface",
    "map",
    "package",
    "range",
    "return",
    "select",
    "struct",
    "switch",
    "type",
    "var",
}

# A mapping from Lark's terminal names to friendly, human-readable names.
TOKEN_FRIENDLY_NAMES = {
    "NAME": "an identifier",
    "NUMBER": "a number",
    "STRING": "a string literal",
    "CHAR": "a rune literal",
    "ELLIPSIS": "an ellipsis '...'",
    "SEMICOLON": "the end of the statement",
    "LBRACE": "an opening brace '{'",
    "RBRACE": "a closing brace '}'",
    "LPAR": "an opening parenthesis '('",
    "RPAR": "a closing parenthesis ')'",
    "LSQB": "an opening bracket '['",
    "RSQB": "a closing bracket ']'",
    "COMMA": "a comma ','",
    "DOT": "a dot '.'",
    "COLON": "a colon ':'",
    "EQUAL": "an equals sign '='",
    "FUNC": "the 'func' keyword",
    "PACKAGE": "the 'package' keyword",
    "IMPORT": "the 'import' keyword",
    "$END": "the end of the file",
}
