# pushswap

Sorts a list of distinct integers using only a small set of stack
operations, and prints the operations it used, one per line.

There are two stacks, **a** and **b**. The numbers start on stack **a**,
with the first number on top. The operations printed are:

| move  | effect                                                |
|-------|-------------------------------------------------------|
| `sa`  | swap the top two elements of **a**                    |
| `pa`  | move the top of **b** onto **a**                      |
| `pb`  | move the top of **a** onto **b**                      |
| `ra`  | rotate **a** up: the top element goes to the bottom   |
| `rra` | rotate **a** down: the bottom element goes to the top |

When the operations are applied in order, stack **a** ends up in
ascending order from top to bottom and stack **b** ends up empty.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

The numbers may be passed as separate arguments, each an optionally
signed number, or as a single argument holding numbers separated by
spaces. Inputs of two to five numbers are handled with fixed move
sequences; larger inputs use a binary radix sort on the ranks of the
numbers. An input that is already sorted prints nothing.

With no arguments, or an empty first argument, nothing is printed. If an
argument is not a well-formed number, a value does not fit in a 32-bit
signed integer, the same number is written twice, or there are no numbers
at all, `Error` is written to standard error. The exit status is 0 in
every case.

## Library use

```python
from pushswap.parsing import parse_arguments
from pushswap.solver import solve

ranks = parse_arguments(["3", "2", "1"])   # [2, 1, 0]
moves = solve(ranks)                        # ['ra', 'sa']
```

- `pushswap.parsing.parse_arguments(args)` checks the arguments and
  returns each value's rank, 0 to n-1; it raises
  `pushswap.parsing.InputError` on bad input. `rank(values)`,
  `check_params(args)` and `check_param(text)` are available on their own.
- `pushswap.solver.solve(values)` takes ranks, first one on top, and
  returns the list of moves. `brute_sort`, `brute_three`, `brute_four`,
  `brute_five` and `radix_sort` act directly on a `Stacks` object.
- `pushswap.stacks.Stacks(values, stream=None)` holds stacks `a` and `b`,
  carries out `sa()`, `pa()`, `pb()`, `ra()` and `rra()`, records each
  move that changed the stacks in `moves` (and writes it to `stream` when
  one is given), and reports `is_sorted()`.
- `pushswap.cli.main(argv=None)` is the command-line entry point.

The package also carries small general helpers:

- `pushswap.chars`: ASCII classification and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_lower`, `to_upper`).
- `pushswap.numeric`: `atoi` with 32-bit limits (out-of-range values give
  0) and `itoa`.
- `pushswap.strings`: `split`, `strchr`, `strrchr`, `striteri`, `strmapi`,
  `strjoin`, `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim`,
  `substr`.
- `pushswap.memory`: byte-buffer `memset`, `bzero`, `calloc`, `memchr`,
  `memcmp`, `memcpy`, `memmove`.
- `pushswap.lists`: a singly linked `LinkedList` of `Node` cells.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `pushswap.printf`: `sprintf` and `printf` for `%c %s %p %d %i %u %x %X %%`.
- `pushswap.lines`: `LineReader`, which reads lines from any object with a
  `read(size)` method.

## What it does not do

- Only the five moves above are ever produced; there is no `sb`, `ss`,
  `rb`, `rr`, `rrb` or `rrr`.
- There is no command that reads a list of moves back and checks whether
  they sort a given input.
- The radix sort is simple rather than minimal: it does not try to find
  the shortest sequence of moves.

## Tests

```
pip install ".[test]"
pytest
```