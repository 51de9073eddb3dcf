"""Line-oriented readers for integers and Brazilian state codes."""

from __future__ import annotations

import re
from typing import TextIO

# Each read takes at most this many characters, like a fixed-size line buffer.
INT_LINE_LIMIT = 99
UF_LINE_LIMIT = 9

UFS: tuple[str, ...] = (
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA",
    "MT", "MS", "MG", "PA", "PB", "PR", "PE", "PI", "RJ", "RN",
    "RS", "RO", "RR", "SC", "SP", "SE", "TO",
)

UF_PROMPT = "\n Insira a UF (sigla com 2 letras): "
UF_LENGTH_ERROR = (
    "\n Erro: A sigla deve ter exatamente 2 letras. Insira novamente. \n"
    " ------------------------------------------------------------- \n"
)
UF_INVALID_ERROR = (
    "\n Erro: UF invalida. Insira novamente. \n"
    " ------------------------------------------------------------- \n"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_int(text: str) -> int:
    """Return the integer at the start of ``text`` (after blanks), or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _read_line(stream: TextIO, limit: int) -> str:
    line = stream.readline(limit)
    if line == "":
        raise EOFError("no more input")
    return line


def read_int(stream: TextIO) -> int:
    """Read one line (at most 99 characters) and parse an integer from it.

    Input that does not start with a number yields 0. Raises EOFError when the
    stream is exhausted.
    """
    return parse_int(_read_line(stream, INT_LINE_LIMIT))


def is_valid_uf(uf: str) -> bool:
    """Tell whether ``uf`` is one of the 27 state codes, in upper case."""
    return uf in UFS


def _ascii_upper(text: str) -> str:
    return "".join(ch.upper() if ch.isascii() else ch for ch in text)


def read_uf(stream: TextIO, out: TextIO) -> str:
    """Prompt on ``out`` until a valid state code is read from ``stream``; return it upper-cased."""
    while True:
        out.write(UF_PROMPT)
        line = _read_line(stream, UF_LINE_LIMIT)
        uf = _ascii_upper(line.split("\n", 1)[0])
        if len(uf) != 2:
            out.write(UF_LENGTH_ERROR)
            continue
        if is_valid_uf(uf):
            return uf
        out.write(UF_INVALID_ERROR)