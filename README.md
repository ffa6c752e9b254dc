# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`.
It prints the sequence of stack instructions that does the sort:

| Instruction  | Effect                                         |
|--------------|------------------------------------------------|
| `sa`, `sb`   | swap the top two elements of a / b             |
| `pa`, `pb`   | move the top element of b onto a / a onto b    |
| `ra`, `rb`   | rotate a / b up: the top goes to the bottom    |
| `rra`, `rrb` | rotate a / b down: the bottom goes to the top  |

The numbers are first replaced by their ranks (0 for the smallest). Two to
five numbers are sorted with fixed sequences of moves. Larger inputs use a
binary radix sort on the ranks.

## Installation

```
pip install .
```

## Usage

Pass the numbers as separate arguments, or as one argument separated by spaces:

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

The program prints one instruction per line. It prints nothing if the input
is already sorted.

Some input makes the program write `Error` to standard error and exit with
status 1. This happens when the input is not a list of distinct integers in
the 32-bit signed range. Before the digits, only a leading `-` is allowed.

Run without arguments, the program prints nothing and exits with a non-zero
status.

## Using it from Python

```python
from pushswap.cli import sort_values

sort_values([3, 2, 1])   # ['sa', 'rra']
```

- `sort_values` returns the list of instructions and prints nothing.
- `pushswap.cli.main(argv=None)` is the command itself. It returns the exit
  status.
- `pushswap.args.parse_args` turns command-line style arguments into integers.
  It raises `pushswap.args.InputError`, a subclass of `ValueError`, on bad
  input.
- `pushswap.sorts.normalize` replaces values by their ranks.
- `pushswap.sorts` also provides the strategies themselves: `sort_three`,
  `sort_four_and_five` and `radix_sort`. There is also `max_bits`.

`pushswap.stacks.Stacks` holds the two stacks in one shared array:

- `push`, `swap`, `rotate` and `reverse_rotate` each take the label `"a"` or
  `"b"`. They return whether the move took effect.
- Each move that takes effect is appended to `operations`. If a stream was
  given, the move is also written to it as one line.
- `a` and `b` give each stack's contents, top first.
- `stack_len`, `is_sorted` and `is_full_sorted` inspect the state.

The package also carries small helper modules used by the above:

- `pushswap.chars`: ASCII classification and case conversion.
- `pushswap.strings`: `atoi`, `split`, `strncmp`, `strlcpy` and similar
  string functions.
- `pushswap.memory`: byte-buffer fill, copy, move, search and compare.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a text stream.

## What it does not do

The package only produces instructions. It has no checker that reads
instructions from input and verifies that they sort a given list.

## Running the tests

```
pip install .[test]
pytest
```