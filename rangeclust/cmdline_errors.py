"""Errors raised while defining or parsing command-line arguments."""

from __future__ import annotations

_UNDEFINED_TEXT = "undefined exception"
_UNDEFINED_ID = "undefined"


class ArgException(Exception):
    """An argument error with a message, the argument it concerns and a kind."""

    def __init__(
        self,
        text: str = _UNDEFINED_TEXT,
        arg_id: str = _UNDEFINED_ID,
        type_description: str = "Generic ArgException",
    ) -> None:
        self._error_text = text
        self._arg_id = arg_id
        self._type_description = type_description
        super().__init__(f"{arg_id} -- {text}")

    def error(self) -> str:
        """Return the error text."""
        return self._error_text

    def arg_id(self) -> str:
        """Return a label naming the argument, or a blank for none."""
        if self._arg_id == _UNDEFINED_ID:
            return " "
        return "Argument: " + self._arg_id

    def type_description(self) -> str:
        """Return the description of this kind of error."""
        return self._type_description


class ArgParseException(ArgException):
    """An argument could not parse the value it was given."""

    def __init__(self, text: str = _UNDEFINED_TEXT, arg_id: str = _UNDEFINED_ID) -> None:
        super().__init__(
            text,
            arg_id,
            "Exception found while parsing the value the Arg has been passed.",
        )


class CmdLineParseException(ArgException):
    """The command line does not meet the requirements of the defined arguments."""

    def __init__(self, text: str = _UNDEFINED_TEXT, arg_id: str = _UNDEFINED_ID) -> None:
        super().__init__(
            text,
            arg_id,
            "Exception found when the values on the command line do not meet "
            "the requirements of the defined Args.",
        )


class SpecificationException(ArgException):
    """An argument was defined improperly by the developer."""

    def __init__(self, text: str = _UNDEFINED_TEXT, arg_id: str = _UNDEFINED_ID) -> None:
        super().__init__(
            text,
            arg_id,
            "Exception found when an Arg object is improperly defined by the developer.",
        )


class ExitException(Exception):
    """Request to end the program with the given exit status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status