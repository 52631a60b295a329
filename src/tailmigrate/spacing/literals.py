from __future__ import annotations

from tailmigrate.errors.base import TailmigrateError
from tailmigrate.errors.guidance import build_guidance_message


_ESCAPE_TABLE = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "'": "'",
    "`": "`",
    "\\": "\\",
}
_QUOTES = {'"', "'", "`"}
_NULL_WORDS = {"null", "undefined"}
_BOOL_WORDS = {"true": True, "false": False}
_NUMBER_CHARS = set("0123456789.eE+-")


def parse_attribute_value(text: str) -> object:
    """Read the initializer text of a JSX attribute as a spacing value.

    ``'"24px"'`` gives ``"24px"``, ``"{4}"`` gives ``4``, ``'{[2, null, "1rem"]}'``
    gives ``[2, None, "1rem"]`` and ``"{{ base: 2, md: 4 }}"`` gives
    ``{"base": 2, "md": 4}``.
    """
    reader = _LiteralReader(text)
    return reader.read_attribute()


def looks_like_attribute(text: str) -> bool:
    stripped = text.strip()
    if len(stripped) < 2:
        return False
    if stripped[0] == "{" and stripped[-1] == "}":
        return True
    return stripped[0] in _QUOTES and stripped[-1] == stripped[0]


class _LiteralReader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def read_attribute(self) -> object:
        self._skip_space()
        if self._peek() in _QUOTES:
            value = self._read_string()
        elif self._peek() == "{":
            self.pos += 1
            value = self._read_expression()
            self._expect("}")
        else:
            self._fail("Attribute values must be a quoted string or a {...} expression.")
        self._skip_space()
        if self.pos < len(self.text):
            self._fail(f"Unexpected text '{self.text[self.pos:]}' after the attribute value.")
        return value

    def _read_expression(self) -> object:
        self._skip_space()
        char = self._peek()
        if char in _QUOTES:
            return self._read_string()
        if char == "[":
            return self._read_array()
        if char == "{":
            return self._read_object()
        if char == "-" or char == "." or char.isdigit():
            return self._read_number()
        start = self.pos
        word = self._read_word()
        if word in _NULL_WORDS:
            return None
        if word in _BOOL_WORDS:
            return _BOOL_WORDS[word]
        self.pos = start
        if not word:
            self._fail("Expected a value.")
        self._fail(f"'{word}' is not a literal value.")
        return None

    def _read_array(self) -> list[object]:
        self._expect("[")
        items: list[object] = []
        while True:
            self._skip_space()
            if self._peek() == "]":
                self.pos += 1
                return items
            items.append(self._read_expression())
            self._skip_space()
            if self._peek() == ",":
                self.pos += 1
                continue
            self._expect("]")
            return items

    def _read_object(self) -> dict[str, object]:
        self._expect("{")
        entries: dict[str, object] = {}
        while True:
            self._skip_space()
            if self._peek() == "}":
                self.pos += 1
                return entries
            key = self._read_key()
            self._skip_space()
            self._expect(":")
            entries[key] = self._read_expression()
            self._skip_space()
            if self._peek() == ",":
                self.pos += 1
                continue
            self._expect("}")
            return entries

    def _read_key(self) -> str:
        char = self._peek()
        if char in _QUOTES:
            return self._read_string()
        if char.isdigit():
            start = self.pos
            while self.pos < len(self.text) and self.text[self.pos].isalnum():
                self.pos += 1
            return self.text[start:self.pos]
        word = self._read_word()
        if not word:
            self._fail("Expected an object key.")
        return word

    def _read_string(self) -> str:
        quote = self.text[self.pos]
        self.pos += 1
        chars: list[str] = []
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char == "\\" and self.pos + 1 < len(self.text):
                nxt = self.text[self.pos + 1]
                chars.append(_ESCAPE_TABLE.get(nxt, nxt))
                self.pos += 2
                continue
            if char == quote:
                self.pos += 1
                text = "".join(chars)
                if quote == "`" and "${" in text:
                    self._fail("Template literals with ${...} are not static values.")
                return text
            chars.append(char)
            self.pos += 1
        self._fail("Unterminated string.")
        return ""

    def _read_number(self) -> int | float:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _NUMBER_CHARS:
            self.pos += 1
        raw = self.text[start:self.pos]
        try:
            number = float(raw)
        except ValueError:
            self.pos = start
            self._fail(f"'{raw}' is not a number.")
        if number.is_integer() and not any(mark in raw for mark in (".", "e", "E")):
            return int(raw)
        return number

    def _read_word(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and (self.text[self.pos].isalnum() or self.text[self.pos] in "_$"):
            self.pos += 1
        return self.text[start:self.pos]

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _peek(self) -> str:
        if self.pos >= len(self.text):
            return ""
        return self.text[self.pos]

    def _expect(self, char: str) -> None:
        self._skip_space()
        if self._peek() != char:
            found = self._peek() or "end of text"
            self._fail(f"Expected '{char}' but found '{found}'.")
        self.pos += 1

    def _location(self) -> tuple[int, int]:
        line = self.text.count("\n", 0, self.pos) + 1
        line_start = self.text.rfind("\n", 0, self.pos) + 1
        return line, self.pos - line_start + 1

    def _fail(self, why: str) -> None:
        line, column = self._location()
        raise TailmigrateError(
            build_guidance_message(
                what=f"Could not read attribute value {self.text!r}.",
                why=why,
                fix="Only static literals can be converted; leave dynamic expressions as they are.",
                example='mb="24px" or p={[2, null, 4]}',
            ),
            line=line,
            column=column,
            details={"source": self.text},
        )


__all__ = ["looks_like_attribute", "parse_attribute_value"]
