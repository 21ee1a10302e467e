from sprig.reader.parser import lex, TokenStream, parse, parse_all

__all__ = ["lex", "TokenStream", "parse", "parse_all"]
