"""Line-based interactive prompts."""

from __future__ import annotations

import re
import sys
from typing import Sequence, TextIO, TypeVar

T = TypeVar("T")


class PromptError(Exception):
    """Raised when a prompt cannot be answered, e.g. because input ended."""


class Prompter:
    """Asks questions on an output stream and reads answers from an input stream."""

    def __init__(self, input_stream: TextIO | None = None, output_stream: TextIO | None = None):
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output_stream if output_stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def _ask(self, message: str) -> str:
        self._write(f"{message} ")
        line = self._input.readline()
        if not line:
            raise PromptError("input ended before an answer was given")
        return line.rstrip("\r\n")

    def _show_options(self, message: str, options: Sequence[object]) -> None:
        self._write(f"{message}\n")
        for number, option in enumerate(options, start=1):
            self._write(f"  {number}) {option}\n")

    @staticmethod
    def _resolve(token: str, options: Sequence[T]) -> T | None:
        if token.isdigit() and 1 <= int(token) <= len(options):
            return options[int(token) - 1]
        for option in options:
            if str(option) == token:
                return option
        return None

    def text(self, message: str, help_message: str | None = None) -> str:
        """Ask for a free-form line of text."""
        if help_message:
            self._write(f"  ({help_message})\n")
        return self._ask(message)

    def select(self, message: str, options: Sequence[T]) -> T:
        """Ask for exactly one of the options, by number or by name."""
        options = list(options)
        if not options:
            raise PromptError("no options to choose from")
        self._show_options(message, options)
        while True:
            choice = self._resolve(self._ask(">").strip(), options)
            if choice is not None:
                return choice
            self._write(f"Please enter a number from 1 to {len(options)}.\n")

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask a yes/no question; an empty answer gives the default."""
        hint = "[Y/n]" if default else "[y/N]"
        while True:
            answer = self._ask(f"{message} {hint}").strip().lower()
            if not answer:
                return default
            if answer in ("y", "yes"):
                return True
            if answer in ("n", "no"):
                return False
            self._write("Please answer y or n.\n")

    def multi_select(self, message: str, options: Sequence[T]) -> list[T]:
        """Ask for any number of options, separated by commas or spaces."""
        options = list(options)
        self._show_options(message, options)
        while True:
            tokens = [t for t in re.split(r"[,\s]+", self._ask(">").strip()) if t]
            chosen = [self._resolve(token, options) for token in tokens]
            if all(choice is not None for choice in chosen):
                picked = set(map(id, chosen))
                return [option for option in options if id(option) in picked]
            self._write("Unknown choice; enter option numbers or names.\n")