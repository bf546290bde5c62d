from typing import Dict, List, Optional

from gts.config.config import SYMBOL_TRANSLATIONS

GO_EXTENSION = ".go"


def split_symbol(symbol: str) -> List[str]:
    """
    Splits a symbol into maximal runs of letters, with every other character
    (digit, punctuation, underscore) becoming a token of its own.
    e.g. "fmt.Println" -> ["fmt", ".", "Println"], "utf8" -> ["utf", "8"]
    """
    tokens: List[str] = []
    current = ""
    for ch in symbol:
        if ch.isalpha():
            current += ch
            continue
        if current:
            tokens.append(current)
            current = ""
        tokens.append(ch)
    if current:
        tokens.append(current)
    return tokens


def translate_symbols(tokens: List[str], translations: Optional[Dict[str, str]] = None) -> List[str]:
    """Replaces every token that has a (case-sensitive) entry in the dictionary."""
    table = SYMBOL_TRANSLATIONS if translations is None else translations
    return [table.get(token, token) for token in tokens]


def phoneticize(text: str) -> str:
    """Turns an identifier or punctuation string into a speakable word sequence."""
    return " ".join(translate_symbols(split_symbol(text)))


def speakable_filename(filename: str) -> str:
    """Phoneticizes a file name, speaking a trailing `.go` as the two words "dot go"."""
    if filename.endswith(GO_EXTENSION):
        stem = filename[: -len(GO_EXTENSION)]
        return f"{phoneticize(stem)} dot go".lstrip()
    return phoneticize(filename)
