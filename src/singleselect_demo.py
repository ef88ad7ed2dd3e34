"""Demo for the SingleSelect component.

Run this script to manually exercise the single-item selector. Use the
arrow keys (or type a number) and press Enter; the chosen value is printed
after the list closes.
"""
import logging
import sys

from singleselect import SingleSelect, select


def make_items(n=6):
    return [(f"Item {i}", i) for i in range(1, n + 1)]


def main():
    if '-v' in sys.argv:
        logging.basicConfig(level=logging.DEBUG, filename='singleselect_demo.log')

    value = select('Single-select demo: pick one item?', make_items(), default=2)
    print('\nSelection result:')
    print(value)

    menu = SingleSelect(enum=')')
    menu.choice('Small', 's')
    menu.choice('Large', 'l', action=lambda v: print(f'Action for {v!r} called'))
    size = menu.call('Numbered demo: which size?')
    print(size)


if __name__ == '__main__':
    main()
