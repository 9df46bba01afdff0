"""
shelldescript – parser for the descript.txt of a Ukagaka shell.

Public API re-exports:

  from shelldescript.parser  import (parse, parse_bytes, parse_line, load_file,
                                     decode_bytes, detect_charset, prescan_charset)
  from shelldescript.charset import Charset, decode
  from shelldescript.writer  import (format_directive, format_document,
                                     encode_document, document_to_dict)
  from shelldescript.errors  import (DescriptError, CharsetError, DecodeError,
                                     DescriptSyntaxError)

Directive and line types live in shelldescript.nodes.
"""

from .charset import Charset, decode
from .errors  import CharsetError, DecodeError, DescriptError, DescriptSyntaxError
from .nodes   import (
    BLANK,
    KERO,
    SAKURA,
    BlankLine,
    CommentLine,
    Directive,
    DirectiveLine,
    Document,
    Scope,
)
from .parser  import (
    decode_bytes,
    detect_charset,
    load_file,
    parse,
    parse_bytes,
    parse_line,
    prescan_charset,
)
from .writer  import (
    document_to_dict,
    encode_document,
    format_directive,
    format_document,
    format_line,
)

__all__ = [
    "Charset", "decode",
    "DescriptError", "CharsetError", "DecodeError", "DescriptSyntaxError",
    "BLANK", "SAKURA", "KERO",
    "BlankLine", "CommentLine", "DirectiveLine", "Directive", "Document", "Scope",
    "decode_bytes",
    "detect_charset",
    "prescan_charset",
    "parse",
    "parse_bytes",
    "parse_line",
    "load_file",
    "format_directive", "format_line", "format_document",
    "encode_document", "document_to_dict",
]
