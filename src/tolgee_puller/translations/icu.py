"""
ICU MessageFormat parsing for variable extraction.

A small recursive-descent parser covering the syntax Tolgee stores:

    Hello {name}!
    {count, number, ::compact-short}
    {count, plural, offset:1 =0 {nobody} one {# item} other {# items}}
    {gender, select, female {She} male {He} other {They}}
    Read the <link>terms</link>.

Apostrophes quote syntax characters the same way ICU does: ``''`` is a
literal apostrophe and ``'{'`` a literal brace. The parser only builds as
much structure as needed to tell literal text from placeholders; styles and
skeletons are kept as opaque strings.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from ..utils.core.exceptions import ParseError

__all__ = [
    "ArgumentElement",
    "Element",
    "LiteralElement",
    "PluralElement",
    "PoundElement",
    "SelectElement",
    "TagElement",
    "extract_variable_names",
    "parse_message",
]

MAX_NESTING_DEPTH = 64

SIMPLE_ARGUMENT_TYPES = frozenset(
    {"number", "date", "time", "spellout", "ordinal", "duration"}
)
PLURAL_ARGUMENT_TYPES = frozenset({"plural", "selectordinal"})

# Characters that end an argument name, type or selector
_IDENTIFIER_STOP = frozenset("{}#,'<>=:|")


@dataclass(frozen=True, slots=True)
class LiteralElement:
    """Plain text."""

    value: str


@dataclass(frozen=True, slots=True)
class PoundElement:
    """``#`` inside a plural option, the formatted plural value."""


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """``{name}``, ``{name, type}`` or ``{name, type, style}``."""

    name: str
    type: str | None = None
    style: str | None = None


@dataclass(frozen=True, slots=True)
class PluralElement:
    """``{name, plural|selectordinal, [offset:n] selector {message} ...}``."""

    name: str
    options: dict[str, list[Element]]
    offset: int = 0
    ordinal: bool = False


@dataclass(frozen=True, slots=True)
class SelectElement:
    """``{name, select, selector {message} ...}``."""

    name: str
    options: dict[str, list[Element]]


@dataclass(frozen=True, slots=True)
class TagElement:
    """``<name>children</name>``, rendered through a value of the same name."""

    name: str
    children: list[Element]


Element: TypeAlias = (
    LiteralElement
    | PoundElement
    | ArgumentElement
    | PluralElement
    | SelectElement
    | TagElement
)


class _Parser:
    """Single-use parser over one message source."""

    def __init__(self, source: str) -> None:
        self.source: str = source
        self.pos: int = 0

    # -- cursor helpers -----------------------------------------------------

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> str | None:
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return None

    def error(self, message: str, pos: int | None = None) -> ParseError:
        return ParseError(message, self.source, self.pos if pos is None else pos)

    def skip_whitespace(self) -> None:
        while not self.is_eof and self.source[self.pos].isspace():
            self.pos += 1

    def expect(self, char: str, message: str) -> None:
        if self.peek() != char:
            raise self.error(message)
        self.pos += 1

    # -- grammar --------------------------------------------------------------

    def parse(self) -> list[Element]:
        elements = self.parse_message(depth=0, in_plural=False)
        if not self.is_eof:
            if self.source[self.pos] == "}":
                raise self.error("Unexpected '}'")
            raise self.error("Unexpected closing tag")
        return elements

    def parse_message(self, depth: int, in_plural: bool) -> list[Element]:
        """Parse elements until EOF, a closing ``}`` or a closing tag."""
        if depth > MAX_NESTING_DEPTH:
            raise self.error("Message is nested too deeply")

        elements: list[Element] = []
        while not self.is_eof:
            char = self.source[self.pos]
            if char == "{":
                elements.append(self.parse_argument(depth, in_plural))
            elif char == "}":
                break
            elif char == "#" and in_plural:
                self.pos += 1
                elements.append(PoundElement())
            elif char == "<" and self.at_tag():
                if self.peek(1) == "/":
                    break
                elements.append(self.parse_tag(depth, in_plural))
            else:
                elements.append(LiteralElement(self.parse_literal(in_plural)))
        return elements

    def parse_literal(self, in_plural: bool) -> str:
        chars: list[str] = []
        while not self.is_eof:
            char = self.source[self.pos]
            if char in "{}" or (char == "#" and in_plural):
                break
            if char == "<" and self.at_tag():
                break

            if char == "'":
                following = self.peek(1)
                if following == "'":
                    chars.append("'")
                    self.pos += 2
                elif following is not None and (
                    following in "{}<|" or (following == "#" and in_plural)
                ):
                    self.pos += 1
                    chars.extend(self.parse_quoted())
                else:
                    chars.append("'")
                    self.pos += 1
                continue

            chars.append(char)
            self.pos += 1
        return "".join(chars)

    def parse_quoted(self) -> list[str]:
        """Read a quoted literal after its opening apostrophe."""
        chars: list[str] = []
        while not self.is_eof:
            char = self.source[self.pos]
            if char == "'":
                if self.peek(1) == "'":
                    chars.append("'")
                    self.pos += 2
                    continue
                self.pos += 1
                break
            chars.append(char)
            self.pos += 1
        # An unterminated quote runs to the end of the message, as in ICU.
        return chars

    def parse_identifier(self) -> str:
        start = self.pos
        while not self.is_eof:
            char = self.source[self.pos]
            if char.isspace() or char in _IDENTIFIER_STOP:
                break
            self.pos += 1
        return self.source[start : self.pos]

    def parse_number(self) -> int:
        start = self.pos
        if self.peek() == "-":
            self.pos += 1
        while not self.is_eof and self.source[self.pos].isdigit():
            self.pos += 1
        digits = self.source[start : self.pos]
        if digits in ("", "-"):
            raise self.error("Expected a number", start)
        return int(digits)

    def parse_argument(self, depth: int, in_plural: bool) -> Element:
        start = self.pos
        self.pos += 1
        self.skip_whitespace()
        if self.is_eof:
            raise self.error("Unclosed argument", start)

        name = self.parse_identifier()
        if not name:
            raise self.error("Expected argument name")
        self.skip_whitespace()
        if self.is_eof:
            raise self.error("Unclosed argument", start)

        if self.source[self.pos] == "}":
            self.pos += 1
            return ArgumentElement(name)
        self.expect(",", "Expected ',' or '}' after argument name")
        self.skip_whitespace()

        type_pos = self.pos
        arg_type = self.parse_identifier()
        if not arg_type:
            raise self.error("Expected argument type")
        self.skip_whitespace()

        if arg_type in SIMPLE_ARGUMENT_TYPES:
            if self.peek() == "}":
                self.pos += 1
                return ArgumentElement(name, arg_type)
            self.expect(",", "Expected ',' or '}' after argument type")
            style = self.parse_style()
            self.expect("}", "Unclosed argument")
            return ArgumentElement(name, arg_type, style)

        if arg_type in PLURAL_ARGUMENT_TYPES or arg_type == "select":
            self.expect(",", f"Expected ',' after {arg_type!r}")
            self.skip_whitespace()

            offset = 0
            is_plural = arg_type != "select"
            if is_plural and self.source.startswith("offset:", self.pos):
                self.pos += len("offset:")
                self.skip_whitespace()
                offset = self.parse_number()

            options = self.parse_options(depth, is_plural, in_plural)
            self.expect("}", "Unclosed argument")
            if is_plural:
                return PluralElement(
                    name, options, offset=offset, ordinal=arg_type == "selectordinal"
                )
            return SelectElement(name, options)

        raise self.error(f"Invalid argument type {arg_type!r}", type_pos)

    def parse_style(self) -> str:
        """Read an argument style or skeleton up to the closing brace."""
        self.skip_whitespace()
        chars: list[str] = []
        nesting = 0
        while not self.is_eof:
            char = self.source[self.pos]
            if char == "'":
                if self.peek(1) == "'":
                    chars.append("'")
                    self.pos += 2
                else:
                    self.pos += 1
                    chars.extend(self.parse_quoted())
                continue
            if char == "{":
                nesting += 1
            elif char == "}":
                if nesting == 0:
                    break
                nesting -= 1
            chars.append(char)
            self.pos += 1

        style = "".join(chars).strip()
        if not style:
            raise self.error("Expected argument style")
        return style

    def parse_options(
        self, depth: int, is_plural: bool, in_plural: bool
    ) -> dict[str, list[Element]]:
        options: dict[str, list[Element]] = {}
        while True:
            self.skip_whitespace()
            if self.is_eof:
                raise self.error("Unclosed argument")
            if self.source[self.pos] == "}":
                break

            selector_pos = self.pos
            if is_plural and self.source[self.pos] == "=":
                self.pos += 1
                selector = f"={self.parse_number()}"
            else:
                selector = self.parse_identifier()
                if not selector:
                    raise self.error("Expected option selector")
            if selector in options:
                raise self.error(f"Duplicate selector {selector!r}", selector_pos)

            self.skip_whitespace()
            self.expect("{", f"Expected '{{' after selector {selector!r}")
            value = self.parse_message(depth + 1, in_plural=is_plural or in_plural)
            self.expect("}", f"Unclosed option {selector!r}")
            options[selector] = value

        if not options:
            raise self.error("Expected at least one option")
        return options

    def at_tag(self) -> bool:
        following = self.peek(1)
        if following == "/":
            following = self.peek(2)
        return following is not None and following.isalpha()

    def parse_tag_name(self) -> str:
        start = self.pos
        while not self.is_eof:
            char = self.source[self.pos]
            if not (char.isalnum() or char in "-_."):
                break
            self.pos += 1
        return self.source[start : self.pos]

    def parse_tag(self, depth: int, in_plural: bool) -> Element:
        start = self.pos
        self.pos += 1
        name = self.parse_tag_name()
        self.skip_whitespace()

        if self.source.startswith("/>", self.pos):
            self.pos += 2
            return LiteralElement(self.source[start : self.pos])
        self.expect(">", f"Expected '>' to close tag <{name}>")

        children = self.parse_message(depth + 1, in_plural)
        if not self.source.startswith("</", self.pos):
            raise self.error(f"Unclosed tag <{name}>", start)

        closing_pos = self.pos
        self.pos += 2
        closing_name = self.parse_tag_name()
        if closing_name != name:
            raise self.error(
                f"Mismatched closing tag </{closing_name}> for <{name}>", closing_pos
            )
        self.skip_whitespace()
        self.expect(">", f"Expected '>' to close tag </{name}>")
        return TagElement(name, children)


def parse_message(message: str) -> list[Element]:
    """
    Parse an ICU message pattern.

    Args:
        message: The message source

    Returns:
        Top-level elements of the message

    Raises:
        ParseError: If the pattern is malformed
    """
    return _Parser(message).parse()


def _walk(elements: list[Element]) -> Iterator[Element]:
    for element in elements:
        yield element
        match element:
            case PluralElement(options=options) | SelectElement(options=options):
                for option in options.values():
                    yield from _walk(option)
            case TagElement(children=children):
                yield from _walk(children)
            case _:
                pass


def extract_variable_names(message: str) -> set[str]:
    """
    Collect the names of every placeholder referenced by a message.

    Arguments, plural/select selectors and rich-text tags count, including
    those nested inside plural and select options. Literal text and ``#``
    do not.

    Raises:
        ParseError: If the pattern is malformed
    """
    names: set[str] = set()
    for element in _walk(parse_message(message)):
        match element:
            case ArgumentElement(name=name) | PluralElement(name=name) | SelectElement(
                name=name
            ) | TagElement(name=name):
                names.add(name)
            case _:
                pass
    return names
