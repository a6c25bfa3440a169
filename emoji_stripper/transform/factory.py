from emoji_stripper.transform.icu_classifier import IcuEmojiPresentationClassifier
from emoji_stripper.transform.stripper import EmojiStripper


class EmojiStripperFactory:
    """Creates the stripper wired to the default classifier."""

    @classmethod
    def create(cls) -> EmojiStripper:
        """Create an ICU-backed Emoji_Presentation stripper."""
        return EmojiStripper(IcuEmojiPresentationClassifier())
