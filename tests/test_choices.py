import pytest

from choices import Choice, Choices
from errors import ConfigurationError


def test_append_keeps_insertion_order_and_duplicates():
    registry = Choices()
    registry.append('Apple', 1)
    registry.append('Apple', 2)
    registry.append('Cherry', 3)

    assert registry.size() == 3
    assert [c.name for c in registry] == ['Apple', 'Apple', 'Cherry']
    assert registry.at(2).value == 2


def test_extend_accepts_shorthand_forms():
    action = print
    registry = Choices([
        'plain',
        ('Pair', 2),
        ['Single'],
        ('With action', 4, action),
        {'Mapped': 5},
        Choice('Ready', 6),
    ])

    assert [(c.name, c.value) for c in registry] == [
        ('plain', 'plain'),
        ('Pair', 2),
        ('Single', 'Single'),
        ('With action', 4),
        ('Mapped', 5),
        ('Ready', 6),
    ]
    assert registry.at(4).action is action


def test_append_action_without_value_uses_name():
    registry = Choices()
    choice = registry.append('Quit', action=print)
    assert choice.value == 'Quit'
    assert choice.action is print


@pytest.mark.parametrize('index', [0, 4, -1])
def test_at_out_of_range_raises_index_error(index):
    registry = Choices(['a', 'b', 'c'])
    with pytest.raises(IndexError):
        registry.at(index)


def test_frozen_registry_rejects_appends():
    registry = Choices(['a'])
    registry.freeze()
    with pytest.raises(ConfigurationError):
        registry.append('b')
    assert len(registry) == 1


def test_bad_shorthand_rejected():
    with pytest.raises(ConfigurationError):
        Choice.from_value(('a', 1, None, 'extra'))
    with pytest.raises(ConfigurationError):
        Choice.from_value({'a': 1, 'b': 2})
