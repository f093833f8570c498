"""
Expression buffer state machine.

`BufferEditor` owns the single text buffer a calculator display shows. Each
input symbol is applied with no look-ahead beyond the buffer's last character,
and the guards keep the text evaluable: no leading zeros, no expression that
starts with an operator, no two operators in a row.
"""

import logging
import threading
from typing import Callable, List, Optional

from .config import DEFAULT_CONFIG, CalculatorConfig
from .errors import CalculatorError
from .evaluator import evaluate, format_result
from .symbols import POINT, Control, SymbolKind, classify, is_operator_glyph

logger = logging.getLogger(__name__)

Observer = Callable[[str], None]


class BufferEditor:
    """Calculator input buffer with syntactic guards and change notification."""

    def __init__(self, config: Optional[CalculatorConfig] = None, initial: str = "0"):
        self.config = config or DEFAULT_CONFIG
        self._buffer = initial
        self._lock = threading.Lock()
        self._observers: List[Observer] = []
        self.last_error: Optional[CalculatorError] = None

    @property
    def buffer(self) -> str:
        with self._lock:
            return self._buffer

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback invoked with the new buffer after each change.

        Returns:
            A function that removes the observer again
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def submit(self, symbol: str) -> str:
        """Apply one raw key or button symbol and return the resulting buffer."""
        sym = classify(symbol)
        if sym.kind is SymbolKind.UNKNOWN:
            logger.debug("Ignoring unknown symbol %r", symbol)
            return self.buffer
        if sym.kind is SymbolKind.CONTROL:
            control = Control(sym.value)
            if control is Control.CLEAR:
                return self.clear()
            if control is Control.BACKSPACE:
                return self.backspace()
            return self.evaluate()
        if sym.kind is SymbolKind.OPERATOR:
            return self._apply(self._append_operator, sym.value)
        return self._apply(self._append_digit, sym.value)

    def submit_many(self, symbols) -> str:
        for symbol in symbols:
            self.submit(symbol)
        return self.buffer

    def backspace(self) -> str:
        return self._apply(lambda buf, _: buf[:-1], None)

    def clear(self) -> str:
        with self._lock:
            changed = self._buffer != "0"
            self._buffer = "0"
            self.last_error = None
        if changed:
            self._notify("0")
        return "0"

    def evaluate(self) -> str:
        with self._lock:
            if self._buffer == self.config.error_marker:
                return self._buffer
            expression = self._buffer
            try:
                self._buffer = format_result(evaluate(expression, self.config))
                self.last_error = None
            except CalculatorError as exc:
                logger.info("Evaluation of %r failed: %s: %s", expression, exc.kind, exc)
                self._buffer = self.config.error_marker
                self.last_error = exc
            result = self._buffer
        self._notify(result)
        return result

    def _apply(self, edit: Callable[[str, Optional[str]], str], value: Optional[str]) -> str:
        with self._lock:
            before = self._buffer
            if before == self.config.error_marker:
                logger.debug("Buffer holds the error marker; ignoring %r until cleared", value)
                return before
            after = edit(before, value)
            self._buffer = after
        if after != before:
            logger.debug("Buffer %r -> %r", before, after)
            self._notify(after)
        return after

    def _append_digit(self, buf: str, digit: str) -> str:
        if buf == "0" and digit == "0":
            return buf
        if buf == "" and digit == POINT:
            return "0."
        if buf == "0" and digit != POINT:
            return digit
        if digit == POINT and self.config.reject_repeated_point and POINT in _current_run(buf):
            return buf
        return buf + digit

    def _append_operator(self, buf: str, glyph: str) -> str:
        if buf == "":
            return buf
        if is_operator_glyph(buf[-1]):
            return buf[:-1] + glyph
        return buf + glyph

    def _notify(self, buffer: str) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer(buffer)


def _current_run(buf: str) -> str:
    """Return the trailing numeric run, i.e. the text after the last operator."""
    for idx in range(len(buf) - 1, -1, -1):
        if is_operator_glyph(buf[idx]):
            return buf[idx + 1:]
    return buf


__all__ = ["BufferEditor", "Observer"]
