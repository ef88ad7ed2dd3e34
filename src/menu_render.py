"""Text rendering for the select list.

Everything here is a pure function of the question, the choices, the
selection state and the style: nothing is printed and nothing is mutated.
The output is rebuilt from scratch on every refresh.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from choices import Choices

HELP = '(Use arrow%s keys, press Enter to select)'

Decorate = Callable[[str, Optional[str]], str]


@dataclass(frozen=True)
class MenuStyle:
    prefix: str = ''
    marker: str = '‣'
    enum: Optional[str] = None
    active_color: Optional[str] = None
    help_color: Optional[str] = None
    help: Optional[str] = None

    @property
    def enumerate(self) -> bool:
        return self.enum is not None


def _plain(text: str, color: Optional[str]) -> str:
    return text


def help_text(style: MenuStyle, size: int) -> str:
    if style.help is not None:
        return style.help
    return HELP % (f' or number (1-{size})' if style.enumerate else '')


def render_header(
    question: str,
    choices: Choices,
    active: int,
    done: bool,
    first_render: bool,
    style: MenuStyle,
    decorate: Decorate = _plain,
) -> str:
    """Return the question line followed by the answer or the help text."""
    if done:
        trailer = decorate(choices.at(active).name, style.active_color)
    elif first_render:
        trailer = decorate(help_text(style, choices.size()), style.help_color)
    else:
        trailer = ''
    return f'{style.prefix}{question} {trailer}'


def render_menu(choices: Choices, active: int, style: MenuStyle, decorate: Decorate = _plain) -> str:
    """Return one line per choice, the active one marked, without a trailing newline."""
    lines = []
    for index, choice in enumerate(choices, start=1):
        num = f'{index}{style.enum} ' if style.enumerate else ''
        if index == active:
            lines.append(decorate(f'{style.marker} {num}{choice.name}', style.active_color))
        else:
            lines.append(f'  {num}{choice.name}')
    return '\n'.join(lines)


def lines_to_clear(question: str, choices: Choices) -> int:
    """Number of screen lines taken by the header and the menu."""
    return question.count('\n') + choices.size() + 1
