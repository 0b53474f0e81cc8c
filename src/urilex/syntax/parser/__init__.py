"""URI parser module.

Module Organization:
- core.py: URIParser class (limits, logging, strict mode)
- rules.py: One grammar rule per URI component, plus parse_uri
- combinators.py: Composition helpers (alt, opt, many1, count, context, ...)
- primitives.py: Leaf parsers (literals, character-class runs, UUID token)

Public API:
    URIParser: Main parser class
"""

from urilex.syntax.parser.core import URIParser

__all__ = ["URIParser"]
