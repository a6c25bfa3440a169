"""Emoji classification backed by ICU character properties.

The removable set is exactly the Unicode ``Emoji_Presentation`` binary
property as shipped with the installed ICU data, i.e. the code points that
render as a graphical emoji by default. Text-default symbols such as U+2713
CHECK MARK, variation selectors and ZWJ are left alone.
"""

from __future__ import annotations

from typing import ClassVar

import icu  # type: ignore[import-untyped]

from emoji_stripper.logging.logger import Log
from emoji_stripper.transform.base import BaseEmojiClassifier


class IcuEmojiPresentationClassifier(BaseEmojiClassifier):
    """Classifies code points by their ICU ``EMOJI_PRESENTATION`` property."""

    _PROPERTY: ClassVar[int] = icu.UProperty.EMOJI_PRESENTATION

    # ICU cannot receive unpaired surrogates; they are never emoji.
    _SURROGATES: ClassVar[range] = range(0xD800, 0xE000)

    def __init__(self) -> None:
        Log.debug(
            f"Classifying emoji with ICU {icu.ICU_VERSION} (Unicode {icu.UNICODE_VERSION})"
        )

    def is_removable(self, char: str) -> bool:
        code_point = ord(char)
        if code_point in self._SURROGATES:
            return False
        return bool(icu.Char.hasBinaryProperty(code_point, self._PROPERTY))
