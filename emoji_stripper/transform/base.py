from abc import ABC, abstractmethod


class BaseEmojiClassifier(ABC):
    """Contract for all character classification adapters."""

    @abstractmethod
    def is_removable(self, char: str) -> bool:
        """Decide whether a single code point should be stripped.

        Args:
            char: A string of length one.

        Returns:
            True if the character is an emoji that must be removed.
            Implementations never raise for any code point, including
            lone surrogates.
        """
