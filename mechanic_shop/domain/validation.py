"""
Field validators and the prompt loop used by the interactive handlers.

A validator maps one line of operator input to a `Checked` result. Validators
never raise; `prompt_until_valid` asks again until one accepts.
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Collection, Generic, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Checked(Generic[T]):
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


Validator = Callable[[str], Checked]


def bounded_text(label: str, max_len: int) -> Validator:
    """Accept 1..max_len characters, taken verbatim."""
    def check(raw: str) -> Checked[str]:
        if len(raw) <= 0 or len(raw) > max_len:
            return Checked(error=f"{label} can not be null (empty) or exceed {max_len} characters.")
        return Checked(value=raw)
    return check


def free_text(raw: str) -> Checked[str]:
    return Checked(value=raw)


def integer(label: str, minimum: Optional[int] = None, message: Optional[str] = None) -> Validator:
    def check(raw: str) -> Checked[int]:
        try:
            n = int(raw.strip())
        except ValueError:
            return Checked(error=f'{label} must be an integer, got "{raw}".')
        if minimum is not None and n < minimum:
            return Checked(error=message or f"{label} must be at least {minimum}.")
        return Checked(value=n)
    return check


def one_of(choices: Collection[Any], message: str, parse: Callable[[str], Checked] = free_text) -> Validator:
    """Run `parse`, then require the parsed value to be one of `choices`."""
    def check(raw: str) -> Checked:
        res = parse(raw)
        if not res.ok:
            return res
        if res.value not in choices:
            return Checked(error=message)
        return res
    return check


def prompt_until_valid(
    prompt: str,
    validator: Validator,
    read: Optional[Callable[[str], str]] = None,
    err: Optional[TextIO] = None,
):
    """
    Prompt until `validator` accepts and return the accepted value.
    Rejections are printed to `err` (stderr by default). EOFError from `read`
    propagates so the shell can terminate.
    """
    read = read or input
    while True:
        res = validator(read(prompt))
        if res.ok:
            return res.value
        print(res.error, file=err or sys.stderr)
