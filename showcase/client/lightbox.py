DEFAULT_SWIPE_THRESHOLD = 50


class Lightbox:
    """
    Selection state of a gallery lightbox.

    ``selected_index`` is ``None`` while closed. Navigation wraps around at both
    ends. Swipes shorter than ``swipe_threshold`` pixels are ignored.
    """

    def __init__(self, length: int, swipe_threshold: float = DEFAULT_SWIPE_THRESHOLD):
        if length < 0:
            raise ValueError("length must be >= 0")
        if swipe_threshold <= 0:
            raise ValueError("swipe_threshold must be > 0")
        self.length = length
        self.swipe_threshold = swipe_threshold
        self.selected_index: int | None = None
        self._touch_start: float | None = None
        self._touch_end: float | None = None

    @property
    def is_open(self) -> bool:
        return self.selected_index is not None

    def open(self, index: int) -> None:
        if not 0 <= index < self.length:
            raise IndexError(f"index {index} out of range for {self.length} item(s)")
        self.selected_index = index

    def close(self) -> None:
        self.selected_index = None
        self._touch_start = self._touch_end = None

    def next(self) -> int | None:
        if self.selected_index is not None and self.length:
            self.selected_index = (self.selected_index + 1) % self.length
        return self.selected_index

    def prev(self) -> int | None:
        if self.selected_index is not None and self.length:
            self.selected_index = (self.selected_index - 1) % self.length
        return self.selected_index

    def handle_key(self, key: str) -> int | None:
        if self.selected_index is None:
            return None
        if key == "ArrowLeft":
            self.prev()
        elif key == "ArrowRight":
            self.next()
        elif key == "Escape":
            self.close()
        return self.selected_index

    def touch_start(self, x: float) -> None:
        self._touch_start = x
        self._touch_end = x

    def touch_move(self, x: float) -> None:
        if self._touch_start is not None:
            self._touch_end = x

    def touch_end(self) -> int | None:
        """Finish a swipe: leftward moves to the next item, rightward to the previous one."""
        if self._touch_start is not None and self._touch_end is not None:
            distance = self._touch_start - self._touch_end
            if distance > self.swipe_threshold:
                self.next()
            elif distance < -self.swipe_threshold:
                self.prev()
        self._touch_start = self._touch_end = None
        return self.selected_index

    def resize(self, length: int) -> None:
        """Follow a change in the collection size; closes when the selection falls off the end."""
        if length < 0:
            raise ValueError("length must be >= 0")
        self.length = length
        if self.selected_index is not None and self.selected_index >= length:
            self.close()
