"""Line-based terminal driver used by the select list.

Keys are read with readchar and turned into tagged KeyEvents. Output is
plain text plus ANSI control sequences for colors, cursor visibility and
clearing previously printed lines.

Usage:
    from terminal import Terminal

    term = Terminal()
    term.print(term.hide)
    with term.listen(handler):
        term.read_keypress()   # handler(event) is called with the KeyEvent
    term.print(term.show)
"""
from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

import readchar

from errors import ConfigurationError
from helper import load_prompt_config

logger = logging.getLogger(__name__)

ESC = '\033'

COLORS: Dict[str, str] = {
    'black': '30',
    'red': '31',
    'green': '32',
    'yellow': '33',
    'blue': '34',
    'magenta': '35',
    'cyan': '36',
    'white': '37',
    'bright_black': '90',
    'bold': '1',
    'dim': '2',
}


class Key(Enum):
    UP = 'up'
    DOWN = 'down'
    NUMBER = 'number'
    RETURN = 'return'
    SPACE = 'space'
    OTHER = 'other'


@dataclass(frozen=True)
class KeyEvent:
    kind: Key
    value: str = ''


_KEY_MAP = {
    readchar.key.UP: Key.UP,
    'k': Key.UP,
    readchar.key.DOWN: Key.DOWN,
    'j': Key.DOWN,
    readchar.key.ENTER: Key.RETURN,
    readchar.key.CR: Key.RETURN,
    readchar.key.LF: Key.RETURN,
    readchar.key.SPACE: Key.SPACE,
}


def translate_key(raw: str) -> KeyEvent:
    """Map a raw key string from readchar to a KeyEvent."""
    kind = _KEY_MAP.get(raw)
    if kind is not None:
        return KeyEvent(kind, raw)
    if raw.isdigit():
        return KeyEvent(Key.NUMBER, raw)
    return KeyEvent(Key.OTHER, raw)


def check_color(color: Optional[str]) -> None:
    if color is not None and color not in COLORS:
        raise ConfigurationError(
            f"unknown color `{color}`, expected one of: {', '.join(sorted(COLORS))}")


class Terminal:
    hide = f'{ESC}[?25l'
    show = f'{ESC}[?25h'

    def __init__(
        self,
        output: Optional[TextIO] = None,
        reader: Optional[Callable[[], str]] = None,
        prefix: Optional[str] = None,
        active_color: Optional[str] = None,
        help_color: Optional[str] = None,
        marker: Optional[str] = None,
        color: Optional[bool] = None,
    ) -> None:
        config = load_prompt_config()
        self.output = output if output is not None else sys.stdout
        self.reader = reader or readchar.readkey
        self.prefix = prefix if prefix is not None else config['prefix']
        self.active_color = active_color or config['active_color']
        self.help_color = help_color or config['help_color']
        self.marker = marker or config['marker']
        self.color = color if color is not None else 'NO_COLOR' not in os.environ
        check_color(self.active_color)
        check_color(self.help_color)
        self._handler: Optional[Callable[[KeyEvent], Any]] = None

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    def print(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def puts(self, text: str = '') -> None:
        self.print(text + '\n')

    def decorate(self, text: str, color: Optional[str]) -> str:
        if not self.color or not color or not text:
            return text
        check_color(color)
        return f'{ESC}[{COLORS[color]}m{text}{ESC}[0m'

    @staticmethod
    def clear_lines(count: int) -> str:
        """Return a sequence erasing ``count`` lines upwards from the cursor.

        The cursor ends at column 1 of the topmost erased line.
        """
        clear_line = f'{ESC}[2K{ESC}[1G'
        up = f'{ESC}[1A'
        return ''.join(clear_line + (up if i < count - 1 else '') for i in range(count))

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------
    @contextmanager
    def listen(self, handler: Callable[[KeyEvent], Any]) -> Iterator[None]:
        """Route key events to ``handler`` until the block exits."""
        previous = self._handler
        self._handler = handler
        try:
            yield
        finally:
            self._handler = previous

    def read_keypress(self) -> KeyEvent:
        """Block for one key, dispatch it to the listening handler and return it."""
        event = translate_key(self.reader())
        logger.debug("Read key %s (%r)", event.kind.name, event.value)
        if self._handler is not None:
            self._handler(event)
        return event
