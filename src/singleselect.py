"""Interactive single-select list for line-based terminals.

Usage:
    from singleselect import SingleSelect, select

    value = select('Pick a fruit?', [('Apple', 1), ('Banana', 2), ('Cherry', 3)])

    menu = SingleSelect(enum=')', default=2)
    menu.choice('Small', 's')
    menu.choice('Large', 'l', action=print)
    size = menu.call('Which size?')

Controls:
    Up/Down (or k/j) - move, wrapping around at either end
    1-9              - jump to a choice by number (only when `enum` is set)
    Enter / Space    - choose

The chosen choice's value is returned. Its action, if any, is called with
the value first.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from choices import NOT_SET, Choice, Choices
from errors import ConfigurationError
from menu_render import MenuStyle, lines_to_clear, render_header, render_menu
from terminal import Key, KeyEvent, Terminal, check_color

logger = logging.getLogger(__name__)

OPTIONS = frozenset(['default', 'marker', 'enum', 'active_color', 'help_color', 'help', 'prefix'])


class SelectionController:
    """Active index and completion flag of one selection session.

    Only reacts to events; never prints anything.
    """

    def __init__(self, choices: Choices, defaults: Sequence[Any] = (1,), enum: Optional[str] = None) -> None:
        self.choices = choices
        self.defaults: Tuple[Any, ...] = tuple(defaults)
        self.enum = enum
        self.active = 1
        self.done = False
        self._dispatch: Dict[Key, Callable[[KeyEvent], None]] = {
            Key.UP: self.move_up,
            Key.DOWN: self.move_down,
            Key.NUMBER: self.jump_to,
            Key.RETURN: self.confirm,
            Key.SPACE: self.confirm,
        }

    @property
    def enumerate(self) -> bool:
        return self.enum is not None

    def handle(self, event: KeyEvent) -> None:
        if self.done:
            return
        action = self._dispatch.get(event.kind)
        if action is None:
            return
        action(event)
        logger.debug("Handled %s, active=%d done=%s", event.kind.name, self.active, self.done)

    def move_up(self, event: Optional[KeyEvent] = None) -> None:
        self.active = self.choices.size() if self.active == 1 else self.active - 1

    def move_down(self, event: Optional[KeyEvent] = None) -> None:
        self.active = 1 if self.active == self.choices.size() else self.active + 1

    def jump_to(self, event: Any) -> None:
        """Make the choice at the typed position active, if it exists."""
        if not self.enumerate:
            return
        raw = event.value if isinstance(event, KeyEvent) else event
        try:
            index = int(raw)
        except (TypeError, ValueError):
            return
        if not 1 <= index <= self.choices.size():
            logger.debug("Ignoring jump to %d, out of range (1 - %d)", index, self.choices.size())
            return
        self.active = index

    def confirm(self, event: Optional[KeyEvent] = None) -> None:
        self.done = True

    def validate_defaults(self) -> None:
        """Check every default candidate is a position in the list."""
        size = self.choices.size()
        if not self.defaults:
            raise ConfigurationError(f"default index must be an integer in range (1 - {size})")
        for d in self.defaults:
            if d is None or str(d) == '' or isinstance(d, bool) or not isinstance(d, int):
                raise ConfigurationError(f"default index must be an integer in range (1 - {size})")
            if d < 1 or d > size:
                raise ConfigurationError(f"default index `{d}` out of range (1 - {size})")

    def setup_defaults(self) -> None:
        self.validate_defaults()
        # only the first candidate is used
        self.active = self.defaults[0]


class SingleSelect:
    def __init__(self, terminal: Optional[Terminal] = None, **options: Any) -> None:
        unknown = set(options) - OPTIONS
        if unknown:
            raise ConfigurationError(f"unknown option(s): {', '.join(sorted(unknown))}")
        self.terminal = terminal or Terminal()
        self._prefix = options.get('prefix', self.terminal.prefix)
        self._enum = options.get('enum')
        self._default = self._as_defaults(options.get('default', 1))
        self._active_color = options.get('active_color', self.terminal.active_color)
        self._help_color = options.get('help_color', self.terminal.help_color)
        self._marker = options.get('marker', self.terminal.marker)
        self._help = options.get('help')
        check_color(self._active_color)
        check_color(self._help_color)
        self._choices = Choices()
        self._question = ''
        self._first_render = True
        self.controller: Optional[SelectionController] = None

    @staticmethod
    def _as_defaults(value: Any) -> Tuple[Any, ...]:
        if isinstance(value, (list, tuple)):
            return tuple(value)
        return (value,)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------
    def marker(self, value: str) -> None:
        self._marker = value

    def default(self, *values: Any) -> None:
        self._default = values

    def enum(self, value: Optional[str]) -> None:
        """Enable jumping to a choice by number; ``value`` follows each number."""
        self._enum = value

    def choice(self, name: Any, value: Any = NOT_SET, action: Optional[Callable[[Any], Any]] = None) -> Choice:
        return self._choices.append(name, value, action)

    def choices(self, values: Iterable[Any]) -> None:
        self._choices.extend(values)

    def enumerate(self) -> bool:
        return self._enum is not None

    @property
    def style(self) -> MenuStyle:
        return MenuStyle(
            prefix=self._prefix,
            marker=self._marker,
            enum=self._enum,
            active_color=self._active_color,
            help_color=self._help_color,
            help=self._help,
        )

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------
    def call(self, question: str, choices: Iterable[Any] = (), block: Optional[Callable[['SingleSelect'], Any]] = None) -> Any:
        """Ask ``question`` and return the value of the chosen choice."""
        self.choices(choices)
        self._question = question
        if block is not None:
            block(self)
        self.controller = SelectionController(self._choices, self._default, self._enum)
        self.controller.setup_defaults()
        self._choices.freeze()
        return self._render()

    def _render(self) -> Any:
        term = self.terminal
        controller = self.controller
        logger.debug("Starting selection with %d choices, active=%d", self._choices.size(), controller.active)
        term.print(term.hide)
        try:
            with term.listen(controller.handle):
                while not controller.done:
                    self._render_question()
                    term.read_keypress()
                    self._refresh()
            self._render_question()
            answer = self._render_answer()
        finally:
            term.print(term.show)
        logger.debug("Selected choice %d", controller.active)
        return answer

    def _render_answer(self) -> Any:
        choice = self._choices.at(self.controller.active)
        if choice.action is not None:
            choice.action(choice.value)
        return choice.value

    def _refresh(self) -> None:
        self.terminal.print(self.terminal.clear_lines(lines_to_clear(self._question, self._choices)))

    def _render_question(self) -> None:
        controller = self.controller
        style = self.style
        decorate = self.terminal.decorate
        header = render_header(
            self._question, self._choices, controller.active, controller.done,
            self._first_render, style, decorate,
        )
        self.terminal.puts(header)
        self._first_render = False
        if not controller.done:
            self.terminal.print(render_menu(self._choices, controller.active, style, decorate))


def select(question: str, choices: Iterable[Any] = (), terminal: Optional[Terminal] = None,
           block: Optional[Callable[[SingleSelect], Any]] = None, **options: Any) -> Any:
    """Shortcut for ``SingleSelect(terminal, **options).call(question, choices, block)``."""
    return SingleSelect(terminal, **options).call(question, choices, block)
