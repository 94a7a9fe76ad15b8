from __future__ import annotations

import codecs
from typing import Callable

from .errors import ValidationError

TextEncoder = Callable[[str], bytes]

DEFAULT_CODEPAGE = "cp437"
GBK = "gbk"
WESTERN_EUROPEAN = "cp850"


def codepage_encoder(codepage: str = DEFAULT_CODEPAGE, errors: str = "replace") -> TextEncoder:
    """Return an encoder converting text to the given legacy code page.

    Characters the code page cannot represent are handled per ``errors``
    (``"replace"`` prints a question mark).
    """
    try:
        name = codecs.lookup(codepage).name
    except LookupError as exc:
        raise ValidationError(f"Unknown code page: {codepage}") from exc

    def encode(text: str) -> bytes:
        return text.encode(name, errors)

    return encode
