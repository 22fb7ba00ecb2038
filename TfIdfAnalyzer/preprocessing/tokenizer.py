import re
from abc import ABC, abstractmethod
from enum import Enum


class TokenType(Enum):
    WORD = "word"
    NUMBER = "number"
    PUNCT = "punct"


class Token:
    """A single match produced by a tokenizer."""

    def __init__(self, processed_form: str, position: int, token_type: TokenType):
        self.processed_form = processed_form
        self.position = position
        self.token_type = token_type

    def __repr__(self):
        return f"Token({self.processed_form!r}, {self.position}, {self.token_type.name})"


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, text: str) -> list[Token]:
        raise NotImplementedError()


class RegexMatchTokenizer(Tokenizer):
    """
    Naive alphabetic tokenizer.

    Runs of ASCII letters become WORD tokens, digit runs become NUMBER tokens and any
    other non-whitespace character is a PUNCT token. Case is left untouched.
    """

    word_pattern = r"(?P<word>[a-zA-Z]+)"
    number_pattern = r"(?P<number>\d+)"
    punct_pattern = r"(?P<punct>[^\sa-zA-Z\d])"

    def __init__(self):
        self.pattern = re.compile("|".join([self.word_pattern, self.number_pattern, self.punct_pattern]))

    def tokenize(self, text: str) -> list[Token]:
        tokens = []
        for match in self.pattern.finditer(text):
            if match.group("word"):
                token_type = TokenType.WORD
            elif match.group("number"):
                token_type = TokenType.NUMBER
            else:
                token_type = TokenType.PUNCT
            tokens.append(Token(match.group(0), match.start(), token_type))
        return tokens
