"""walker — extract top-level statements from JavaScript/TypeScript source.

The import-group checks only need to know where each import declaration
starts and ends, its module specifier, and whether the statement that
follows it is another import.  A full ECMAScript parser is not required
for that: a small lexer that understands comments, string, template and
regex literals and bracket nesting is enough to find every ``import``
declaration at the top level of a module.

Design notes:
    Runs of non-import code are collapsed into a single "other" statement.
    The sequence analyzer never looks past the statement that follows an
    import, so the boundaries inside such a run carry no information.
    Line numbers are 0-based, resolved by bisecting the newline offsets.
"""

import bisect
import re
from typing import Optional

from import_groups.lib.models import ImportStatement, Statement

_IDENT_RE = re.compile(r"[A-Za-z_$\u0080-\uffff][\w$\u0080-\uffff]*")
_NUMBER_RE = re.compile(r"\.?\d[\w.]*")
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_NEWLINE_RE = re.compile(r"\n")

_QUOTES = ("'", '"')
_OPENERS = "([{"
_CLOSERS = ")]}"

# After these keywords a ``/`` starts a regex literal, not a division.
_REGEX_KEYWORDS = frozenset({
    "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
    "throw", "case", "do", "else", "yield", "await",
})

_ATTRIBUTE_KEYWORDS = ("assert", "with")


class ParsedSource:
    """Statements of one source file plus its line index.

    Attributes:
        source: The scanned text.
        statements: Top-level statements in source order.
    """

    def __init__(self, source: str, statements: list[Statement]) -> None:
        self.source = source
        self.statements = statements
        self._line_starts = [0] + [m.end() for m in _NEWLINE_RE.finditer(source)]

    @property
    def imports(self) -> list[ImportStatement]:
        """Only the import declarations, in source order."""
        return [s for s in self.statements if isinstance(s, ImportStatement)]

    def line_of(self, offset: int) -> int:
        """Return the 0-based line containing ``offset``."""
        return bisect.bisect_right(self._line_starts, offset) - 1

    def column_of(self, offset: int) -> int:
        """Return the 0-based column of ``offset`` within its line."""
        return offset - self._line_starts[self.line_of(offset)]

    def line_text(self, line: int) -> str:
        """Return the text of a 0-based line without its line break."""
        start = self._line_starts[line]
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self.source)
        return self.source[start:end].rstrip("\r")


def parse_source(source: str) -> ParsedSource:
    """Scan ``source`` and return its top-level statements.

    Args:
        source: JavaScript or TypeScript module text.

    Returns:
        ParsedSource with imports and collapsed non-import runs.

    Raises:
        SyntaxError: If an import declaration is cut off by the end of
            the file or contains an unterminated literal or comment.
    """
    scanner = _Scanner(source)
    statements = scanner.scan()
    parsed = ParsedSource(source, [])
    parsed.statements = [_located(parsed, s) for s in statements]
    return parsed


def _located(parsed: ParsedSource, stmt: Statement) -> Statement:
    """Return a copy of ``stmt`` with its line fields filled in."""
    line = parsed.line_of(stmt.start)
    end_line = parsed.line_of(max(stmt.start, stmt.end - 1))
    if isinstance(stmt, ImportStatement):
        return ImportStatement(
            start=stmt.start,
            end=stmt.end,
            line=line,
            end_line=end_line,
            text=stmt.text,
            module_path=stmt.module_path,
        )
    return Statement(
        start=stmt.start, end=stmt.end, line=line, end_line=end_line, text=stmt.text
    )


# ---------------------------------------------------------------------------
# Lexer
# ---------------------------------------------------------------------------


class _Scanner:
    """Single forward pass over the source text."""

    def __init__(self, source: str) -> None:
        self.src = source
        self.n = len(source)
        self.depth = 0
        self._last_kind: Optional[str] = None
        self._last_text = ""

    def scan(self) -> list[Statement]:
        """Split the source into import declarations and other code."""
        statements: list[Statement] = []
        other_start: Optional[int] = None
        other_end = 0

        pos = self._skip_hashbang(0)
        while True:
            pos = self.skip_trivia(pos)
            if pos >= self.n:
                break

            if self.depth == 0 and self._at_import_declaration(pos):
                stmt = self._read_import(pos)
                if stmt is not None:
                    if other_start is not None:
                        statements.append(self._other(other_start, other_end))
                        other_start = None
                    statements.append(stmt)
                    pos = stmt.end
                    self._remember("punct", ";")
                    continue

            token_start = pos
            pos = self._consume_token(pos)
            if other_start is None:
                other_start = token_start
            other_end = pos

        if other_start is not None:
            statements.append(self._other(other_start, other_end))
        return statements

    def _other(self, start: int, end: int) -> Statement:
        return Statement(start=start, end=end, line=0, end_line=0, text=self.src[start:end])

    def _remember(self, kind: str, text: str) -> None:
        self._last_kind = kind
        self._last_text = text

    # -- trivia -------------------------------------------------------------

    def _skip_hashbang(self, pos: int) -> int:
        if self.src.startswith("#!", pos):
            newline = self.src.find("\n", pos)
            return self.n if newline < 0 else newline
        return pos

    def skip_trivia(self, pos: int, strict: bool = False) -> int:
        """Skip whitespace and comments starting at ``pos``.

        With ``strict`` an unterminated block comment is an error instead
        of running to the end of the file.
        """
        src = self.src
        while pos < self.n:
            ch = src[pos]
            if ch.isspace():
                pos += 1
            elif src.startswith("//", pos):
                newline = src.find("\n", pos)
                pos = self.n if newline < 0 else newline
            elif src.startswith("/*", pos):
                close = src.find("*/", pos + 2)
                if close < 0:
                    if strict:
                        raise SyntaxError(f"unterminated comment at offset {pos}")
                    return self.n
                pos = close + 2
            else:
                break
        return pos

    # -- tokens -------------------------------------------------------------

    def _consume_token(self, pos: int, strict: bool = False) -> int:
        """Consume one token at ``pos`` and return the offset after it."""
        src = self.src
        ch = src[pos]

        if ch in _QUOTES:
            end = self._skip_string(pos, strict)
            self._remember("value", src[pos:end])
            return end

        if ch == "`":
            end = self._skip_template(pos, strict)
            self._remember("value", "`")
            return end

        if ch == "/" and self._regex_allowed():
            end = self._skip_regex(pos)
            if end is not None:
                self._remember("value", src[pos:end])
                return end

        match = _IDENT_RE.match(src, pos) or _NUMBER_RE.match(src, pos)
        if match:
            self._remember("word", match.group())
            return match.end()

        if ch in _OPENERS:
            self.depth += 1
        elif ch in _CLOSERS:
            self.depth = max(0, self.depth - 1)
        self._remember("punct", ch)
        return pos + 1

    def _regex_allowed(self) -> bool:
        if self._last_kind is None:
            return True
        if self._last_kind == "punct":
            return self._last_text not in (")", "]")
        if self._last_kind == "word":
            return self._last_text in _REGEX_KEYWORDS
        return False

    def _skip_string(self, pos: int, strict: bool = False) -> int:
        src = self.src
        quote = src[pos]
        i = pos + 1
        while i < self.n:
            ch = src[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                return i + 1
            if ch == "\n":
                break
            i += 1
        if strict:
            raise SyntaxError(f"unterminated string literal at offset {pos}")
        return min(i, self.n)

    def _skip_template(self, pos: int, strict: bool = False) -> int:
        src = self.src
        i = pos + 1
        while i < self.n:
            ch = src[i]
            if ch == "\\":
                i += 2
            elif ch == "`":
                return i + 1
            elif src.startswith("${", i):
                i = self._skip_substitution(i + 2, strict)
            else:
                i += 1
        if strict:
            raise SyntaxError(f"unterminated template literal at offset {pos}")
        return self.n

    def _skip_substitution(self, pos: int, strict: bool) -> int:
        """Skip the code inside ``${ ... }`` and return the offset after ``}``."""
        outer_depth = self.depth
        self.depth = 0
        self._remember("punct", "{")
        try:
            while True:
                pos = self.skip_trivia(pos, strict)
                if pos >= self.n:
                    return self.n
                if self.src[pos] == "}" and self.depth == 0:
                    return pos + 1
                pos = self._consume_token(pos, strict)
        finally:
            self.depth = outer_depth

    def _skip_regex(self, pos: int) -> Optional[int]:
        src = self.src
        i = pos + 1
        in_class = False
        while i < self.n:
            ch = src[i]
            if ch == "\n":
                return None
            if ch == "\\":
                i += 2
                continue
            if ch == "[":
                in_class = True
            elif ch == "]":
                in_class = False
            elif ch == "/" and not in_class:
                flags = _IDENT_RE.match(src, i + 1)
                return flags.end() if flags else i + 1
            i += 1
        return None

    # -- import declarations ------------------------------------------------

    def _at_import_declaration(self, pos: int) -> bool:
        src = self.src
        if not src.startswith("import", pos):
            return False
        word = _IDENT_RE.match(src, pos)
        if word is None or word.group() != "import":
            return False
        if self._last_kind == "punct" and self._last_text == ".":
            return False
        after = self.skip_trivia(word.end())
        return after < self.n and src[after] not in "(."

    def _read_import(self, pos: int) -> Optional[ImportStatement]:
        """Read an import declaration starting at the ``import`` keyword.

        Returns None for constructs that start with ``import`` but are not
        import declarations (``import x = require("y")``).
        """
        src = self.src
        saved = (self.depth, self._last_kind, self._last_text)
        i = pos + len("import")
        self._remember("word", "import")

        while True:
            i = self.skip_trivia(i, strict=True)
            if i >= self.n:
                raise SyntaxError(f"unterminated import declaration at offset {pos}")
            ch = src[i]
            if ch in _QUOTES:
                break
            if ch in "=;":
                self.depth, self._last_kind, self._last_text = saved
                return None
            i = self._consume_token(i, strict=True)

        spec_end = self._skip_string(i, strict=True)
        module_path = _ESCAPE_RE.sub(r"\1", src[i + 1 : spec_end - 1])
        end = self._skip_attributes(spec_end)

        j = end
        while j < self.n and src[j] in " \t":
            j += 1
        if j < self.n and src[j] == ";":
            end = j + 1

        self.depth = saved[0]
        return ImportStatement(
            start=pos,
            end=end,
            line=0,
            end_line=0,
            text=src[pos:end],
            module_path=module_path,
        )

    def _skip_attributes(self, pos: int) -> int:
        """Skip an ``assert { ... }`` or ``with { ... }`` clause if present."""
        src = self.src
        i = self.skip_trivia(pos)
        word = _IDENT_RE.match(src, i)
        if word is None or word.group() not in _ATTRIBUTE_KEYWORDS:
            return pos
        brace = self.skip_trivia(word.end())
        if brace >= self.n or src[brace] != "{":
            return pos
        close = src.find("}", brace)
        if close < 0:
            raise SyntaxError(f"unterminated import attributes at offset {brace}")
        return close + 1
