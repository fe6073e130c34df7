from kappa.reader.parser import lex, atom, parse, parse_many, InPort, TokenStream

__all__ = ["lex", "atom", "parse", "parse_many", "InPort", "TokenStream"]
