from better_profanity import Profanity


class ProfanityFilter:
    """Masks disallowed words in free text.

    Built once per app and handed to handlers through a dependency, so tests can
    swap in their own word list.
    """

    def __init__(self, extra_words: list[str] | None = None, censor_char: str = "*"):
        self._profanity = Profanity()
        if extra_words:
            self._profanity.add_censor_words(extra_words)
        self.censor_char = censor_char

    def clean(self, text: str) -> str:
        if not text:
            return text
        return self._profanity.censor(text, self.censor_char)
