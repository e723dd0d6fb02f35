"""Command-line interfaces, their output, and DocBook usage pages."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Sequence, TextIO

from rangeclust.cmdline_arg import FLAG_START_CHAR, NAME_START_STRING, Arg, Visitor
from rangeclust.cmdline_errors import ArgException, ExitException
from rangeclust.cmdline_xor import XorHandler


class CmdLineInterface(ABC):
    """A command line definition that hands parsing to its arguments."""

    @abstractmethod
    def add(self, arg: Arg) -> None:
        """Add an argument to be parsed."""

    @abstractmethod
    def xor_add(self, args: Sequence[Arg]) -> None:
        """Add arguments of which only one may be given."""

    @abstractmethod
    def parse(self, args: Sequence[str]) -> None:
        """Parse ``args``; the first element is the program name."""

    @property
    @abstractmethod
    def output(self) -> CmdLineOutput:
        """The object that writes usage, version and failures."""

    @property
    @abstractmethod
    def version(self) -> str:
        """The version string."""

    @property
    @abstractmethod
    def program_name(self) -> str:
        """The program name."""

    @property
    @abstractmethod
    def arg_list(self) -> list[Arg]:
        """The defined arguments."""

    @property
    @abstractmethod
    def xor_handler(self) -> XorHandler:
        """The handler of mutually exclusive arguments."""

    @property
    @abstractmethod
    def delimiter(self) -> str:
        """The character separating a flag from its value."""

    @property
    @abstractmethod
    def message(self) -> str:
        """The description of the program."""

    @abstractmethod
    def has_help_and_version(self) -> bool:
        """Whether help and version switches were created automatically."""

    @abstractmethod
    def reset(self) -> None:
        """Return to the freshly constructed state."""


class CmdLineOutput(ABC):
    """Writes usage, version and failure messages for a command line."""

    @abstractmethod
    def usage(self, cmd: CmdLineInterface) -> None:
        """Write the usage of ``cmd``."""

    @abstractmethod
    def version(self, cmd: CmdLineInterface) -> None:
        """Write the version of ``cmd``."""

    @abstractmethod
    def failure(self, cmd: CmdLineInterface, error: ArgException) -> None:
        """Report ``error`` raised while parsing ``cmd``."""


def _escape(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def _strip_chars(text: str, chars: str) -> str:
    return text.translate({ord(c): None for c in chars})


class DocBookOutput(CmdLineOutput):
    """Writes the usage as a DocBook reference entry.

    Output goes to ``stream``, or to standard output at the time of writing.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._delimiter = " "

    def _write(self, text: str) -> None:
        (self._stream if self._stream is not None else sys.stdout).write(text)

    def _line(self, text: str = "") -> None:
        self._write(text + "\n")

    def version(self, cmd: CmdLineInterface) -> None:
        self._line(cmd.version)

    def failure(self, cmd: CmdLineInterface, error: ArgException) -> None:
        """Write the error and end the program with status 1."""
        self._line(str(error))
        raise ExitException(1)

    def usage(self, cmd: CmdLineInterface) -> None:
        arg_list = cmd.arg_list
        prog_name = cmd.program_name.rsplit("/", 1)[-1]
        xversion = cmd.version
        self._delimiter = cmd.delimiter
        xor_handler = cmd.xor_handler

        self._line("<?xml version='1.0'?>")
        self._line('<!DOCTYPE refentry PUBLIC "-//OASIS//DTD DocBook XML V4.2//EN"')
        self._line('\t"http://www.oasis-open.org/docbook/xml/4.2/docbookx.dtd">')
        self._line()

        self._line("<refentry>")
        self._line("<refmeta>")
        self._line(f"<refentrytitle>{prog_name}</refentrytitle>")
        self._line("<manvolnum>1</manvolnum>")
        self._line("</refmeta>")

        self._line("<refnamediv>")
        self._line(f"<refname>{prog_name}</refname>")
        self._line(f"<refpurpose>{cmd.message}</refpurpose>")
        self._line("</refnamediv>")

        self._line("<refsynopsisdiv>")
        self._line("<cmdsynopsis>")
        self._line(f"<command>{prog_name}</command>")

        for group in xor_handler.xor_list():
            self._line("<group choice='req'>")
            for arg in group:
                self._print_short_arg(arg)
            self._line("</group>")

        for arg in arg_list:
            if not xor_handler.contains(arg):
                self._print_short_arg(arg)

        self._line("</cmdsynopsis>")
        self._line("</refsynopsisdiv>")

        self._line("<refsect1>")
        self._line("<title>Description</title>")
        self._line("<para>")
        self._line(cmd.message)
        self._line("</para>")
        self._line("</refsect1>")

        self._line("<refsect1>")
        self._line("<title>Options</title>")
        self._line("<variablelist>")
        for arg in arg_list:
            self._print_long_arg(arg)
        self._line("</variablelist>")
        self._line("</refsect1>")

        self._line("<refsect1>")
        self._line("<title>Version</title>")
        self._line("<para>")
        self._line(xversion)
        self._line("</para>")
        self._line("</refsect1>")

        self._line("</refentry>")

    def _replaceable(self, arg: Arg) -> str:
        value = _strip_chars(arg.short_id(), "[]<>")
        value = value[value.rfind(self._delimiter) + 1:]
        return f"{self._delimiter}<replaceable>{value}</replaceable>"

    def _print_short_arg(self, arg: Arg) -> None:
        choice = "plain" if arg.required else "opt"
        text = f"<arg choice='{choice}'"
        if arg.accepts_multiple_values():
            text += " rep='repeat'"
        text += ">"
        if arg.flag:
            text += FLAG_START_CHAR + arg.flag
        else:
            text += NAME_START_STRING + arg.name
        if arg.value_required:
            text += self._replaceable(arg)
        self._line(text + "</arg>")

    def _print_long_arg(self, arg: Arg) -> None:
        desc = _escape(arg.description_text())

        self._line("<varlistentry>")
        if arg.flag:
            self._line("<term>")
            self._line(f"<option>{FLAG_START_CHAR}{arg.flag}</option>")
            self._line("</term>")

        self._line("<term>")
        option = NAME_START_STRING + arg.name
        if arg.value_required:
            option += self._replaceable(arg)
        self._line(f"<option>{option}</option>")
        self._line("</term>")

        self._line("<listitem>")
        self._line("<para>")
        self._line(desc)
        self._line("</para>")
        self._line("</listitem>")
        self._line("</varlistentry>")


class VersionVisitor(Visitor):
    """Writes the version of a command line and then requests exit.

    Without an explicit ``output`` the command line's current output is used.
    """

    def __init__(self, cmd: CmdLineInterface, output: CmdLineOutput | None = None) -> None:
        self._cmd = cmd
        self._output = output

    def visit(self) -> None:
        output = self._output if self._output is not None else self._cmd.output
        output.version(self._cmd)
        raise ExitException(0)