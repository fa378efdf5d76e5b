from typing import Callable, List, Optional

from keypop.constants import LETTERS
from keypop.events.bus import EventBus, EVENT_KEY_PRESS

LetterHandler = Callable[[str], None]


class InputRouter:
    """Turns raw key presses into letters and hands them to subscribers.

    Keys outside the alphabet are dropped without any error. Subscribers run
    in the order they subscribed.
    """

    def __init__(self, event_bus: Optional[EventBus] = None, alphabet: str = LETTERS):
        self.event_bus = event_bus
        self.alphabet = alphabet
        self._subscribers: List[LetterHandler] = []
        if event_bus is not None:
            event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_event)

    def subscribe(self, handler: LetterHandler) -> "InputRouter":
        self._subscribers.append(handler)
        return self

    def unsubscribe(self, handler: LetterHandler) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass

    @property
    def subscribers(self) -> List[LetterHandler]:
        return list(self._subscribers)

    def on_key_event(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.on_key_press(symbol)

    def on_key_press(self, raw_key_code) -> Optional[str]:
        letter = self.to_letter(raw_key_code)
        if letter is None:
            return None
        for handler in list(self._subscribers):
            handler(letter)
        return letter

    def to_letter(self, raw_key_code) -> Optional[str]:
        # arcade reports letter keys as lower-case code points; browsers use upper-case ones.
        if isinstance(raw_key_code, str):
            char = raw_key_code
        elif isinstance(raw_key_code, int) and not isinstance(raw_key_code, bool):
            try:
                char = chr(raw_key_code)
            except (ValueError, OverflowError):
                return None
        else:
            return None
        # Some non-ASCII characters upper-case into A-Z (dotless i, long s).
        if len(char) != 1 or not char.isascii():
            return None
        char = char.upper()
        if len(char) != 1 or char not in self.alphabet:
            return None
        return char
