"""Error kinds raised while parsing inputs and building the code tables.

Every error is fatal to a build. All kinds derive from ValueError so that
callers can treat them the way they treat any other malformed value.
"""


class WubiTableError(ValueError):
    """Base class for all code-table errors.

    ``location`` is filled in by the loader with ``<source>:<line>`` once the
    offending record is known.
    """

    def __init__(self, message, value=None):
        super().__init__(message)
        self.message = message
        self.value = value
        self.location = None

    def __str__(self):
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class EmptyCode(WubiTableError):
    def __init__(self):
        super().__init__("empty code")


class CodeTooLong(WubiTableError):
    def __init__(self, code):
        super().__init__(f"too long code: {code!r}", code)
        self.code = code


class NotValidChar(WubiTableError):
    def __init__(self, message="not a letter in a-y", value=None):
        super().__init__(message, value)


class CharacterOutOfRange(NotValidChar):
    def __init__(self, ch):
        super().__init__(f"character out of accepted range: {ch!r}", ch)


class NoTab(WubiTableError):
    def __init__(self, line):
        super().__init__(f"no '\\t' found: {line!r}", line)
        self.line = line


class MultipleCharacters(WubiTableError):
    def __init__(self, field):
        super().__init__(f"more than one character found: {field!r}", field)
        self.field = field


class ParseIntError(WubiTableError):
    def __init__(self, text):
        super().__init__(f"parse int error: {text!r}", text)


class CodepointMismatch(WubiTableError):
    def __init__(self, codepoint, ch):
        super().__init__(
            f"codepoint does not match character: {codepoint} vs {ch!r}",
            (codepoint, ch),
        )


class DuplicateCode(WubiTableError):
    def __init__(self, code, existing, ch):
        super().__init__(
            f"code {code} already maps to {existing!r}, cannot add {ch!r}",
            code,
        )


class DuplicatePhrase(WubiTableError):
    def __init__(self, phrase, existing):
        super().__init__(
            f"phrase {phrase!r} already has code {existing}", phrase
        )


class MissingCharacterCode(WubiTableError):
    def __init__(self, ch, phrase):
        super().__init__(
            f"no full code for character {ch!r} in phrase {phrase!r}", ch
        )


class InvalidRecord(WubiTableError):
    def __init__(self, message="invalid format", value=None):
        super().__init__(message, value)


class TooManyCodes(InvalidRecord):
    def __init__(self, ch, limit):
        super().__init__(
            f"character {ch!r} already has {limit} simplified codes", ch
        )
