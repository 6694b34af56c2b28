"""Exceptions raised by the tokenizer."""


class TokenizerError(Exception):
    """Base class for sibylline-tokens errors."""


class UnrecognizedCharacter(TokenizerError):
    """No scanning rule accepts the character under the cursor.

    Fatal for the tokenization run: no partial token list is produced.
    """

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(text, position)

    @property
    def character(self) -> str:
        return self.text[self.position]

    def __str__(self) -> str:
        return f'Could not recognize character "{self.character}" @ {self.position}'
