from emoji_stripper.transform.base import BaseEmojiClassifier


class EmojiStripper:
    """Removes every character the classifier marks as removable.

    Pure and deterministic: the output is the input with removable code
    points dropped, so it is always a subsequence of the input and applying
    it twice changes nothing further.
    """

    def __init__(self, classifier: BaseEmojiClassifier) -> None:
        self._classifier = classifier

    def strip(self, text: str) -> str:
        if not text:
            return text
        is_removable = self._classifier.is_removable
        return "".join(ch for ch in text if not is_removable(ch))

