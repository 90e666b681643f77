# /dog_adoption/services/live_state.py

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

Observer = Callable[[T], None]


class LiveState(Generic[T]):
    """
    Holds the latest published value and notifies observers synchronously,
    in publish order. The value stays None until the first publish.
    """

    def __init__(self):
        self._value: Optional[T] = None
        self._observers: List[Observer] = []

    @property
    def value(self) -> Optional[T]:
        return self._value

    def publish(self, value: T) -> None:
        self._value = value
        # Copy so an observer may unsubscribe while being notified.
        for observer in list(self._observers):
            observer(value)

    def observe(self, observer: Observer) -> Callable[[], None]:
        """
        Registers an observer and returns a function that removes it. An
        observer added after a publish is immediately given the current value.
        """
        self._observers.append(observer)
        if self._value is not None:
            observer(self._value)

        def _remove() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _remove
