"""Conversion between smiley images and their text codes in chat messages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Smiley:
    """A smiley's text code and the resource path of its picture."""

    code: str
    pic: str


def make_html_safe(text: str, escapes: Iterable[tuple[str, str]] = ()) -> str:
    """Replace each symbol with its escape, in the order given."""
    for symbol, escape in escapes:
        text = text.replace(symbol, escape)
    return text


def replace_smiley(
    html: str, smileys: Sequence[Smiley], escapes: Iterable[tuple[str, str]] = ()
) -> str | None:
    """Return the escaped code of the smiley whose image tag is html, or None."""
    escapes = tuple(escapes)
    for smiley in smileys:
        if html == f'<img src="qrc{smiley.pic}">':
            return make_html_safe(smiley.code, escapes)
    return None


def encode_smileys(
    message: str, smileys: Sequence[Smiley], escapes: Iterable[tuple[str, str]] = ()
) -> str:
    """Replace smiley images in message with their escaped text codes."""
    escapes = tuple(escapes)
    for smiley in smileys:
        code = make_html_safe(smiley.code, escapes)
        message = message.replace(f'<img src="{smiley.pic}" />', code)
    return message


def decode_smileys(
    message: str, smileys: Sequence[Smiley], escapes: Iterable[tuple[str, str]] = ()
) -> str:
    """Replace escaped text codes in message, ignoring case, with smiley images."""
    escapes = tuple(escapes)
    for smiley in smileys:
        code = make_html_safe(smiley.code, escapes)
        if not code:
            continue
        image = f"<img src='qrc{smiley.pic}' />"
        message = re.sub(re.escape(code), lambda _match: image, message, flags=re.IGNORECASE)
    return message