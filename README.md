# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints the operations it performs, one per
line. Replaying them on the input leaves stack `a` sorted in ascending order
and stack `b` empty.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` | swap the top two elements of `a` / `b` |
| `pa` / `pb` | push the top of `b` onto `a` / the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a` / `b` / both up by one |
| `rra` / `rrb` / `rrr` | rotate `a` / `b` / both down by one |

The sort moves elements from `a` to `b` one at a time. At each step it picks
the element that needs the fewest operations to reach its place in `b`, and
rotations of both stacks in the same direction count once. Three elements
stay in `a` and are ordered directly. Everything is then pushed back into
place in `a`, and `a` is rotated so that its smallest element is on top.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments, with the top of stack `a` first:

```
pushswap 3 1 2 5 4
```

The operations go to standard output. Each argument is read as a leading
integer: optional whitespace, an optional sign, then digits. Anything after
the digits is ignored. If no numbers are given, or an argument reads as zero
or falls outside the 32-bit signed range, the command writes `Error` to
standard error and exits with status 1. This includes an argument with no
digits, which reads as zero.

## Library use

```python
from pushswap.sorter import sort_numbers

operations = sort_numbers([3, 1, 2, 5, 4])
print("\n".join(operations))
```

`pushswap.cli` holds `parse_arguments`, which raises `InputError` on unusable
input, and `main(argv=None)`, which returns the exit status.

To drive the stacks yourself, use `pushswap.stacks.Stacks`. It provides
`swap`, `rotate`, `reverse_rotate`, `push`, `rotate_both`,
`reverse_rotate_both`, `perform_rotations` and `perform_reverse_rotations`.
Every counted operation is recorded in `Stacks.operations`.

`pushswap.moves` holds the cost calculations: the `Moves` record,
`combined_cost`, `moves_in_a`, `moves_in_b`, `insertion_index_in_a`,
`insertion_index_in_b` and `best_moves`. `pushswap.sorter` holds the steps of
the sort: `sort_three`, `push_back_to_a`, `rotate_min_to_top` and
`turkish_sort`.

The package also has a few general helpers:

- `pushswap.chars`: ASCII character classification and case conversion.
- `pushswap.memory`: byte-buffer utilities.
- `pushswap.numbers`: `atoi`, `atoll` and `itoa` at C integer widths.
- `pushswap.output`: a small `printf`-style formatter for `c s p d i u x X %`.
- `pushswap.linkedlist`: a singly linked list.

## What it does not do

Duplicate numbers are not rejected. The command expects distinct integers,
and its output is undefined for repeated values. No separate checker command
is included to replay an operation list against an input.

## Running the tests

```
pip install ".[test]"
pytest
```