# cachesim

`cachesim` models a set-associative cache with least-recently-used
replacement over 32-bit addresses. You give it a trace of addresses. It
reports which of them hit in the cache and which missed. On a miss, the block
goes into a free way of its set if there is one. If there is none, it takes
the place of the least recently used way.

## Modules

- `cachesim.tag_ram`
  - `TagEntry` is a dataclass holding `tag`, `valid` and `dirty`.
  - `TagRam` holds one `TagEntry` for each set and way.
    - `entry()` returns a copy of an entry.
    - `set_tag()`, `set_valid()` and `set_dirty()` write the fields.
    - `tag()`, `is_valid()` and `is_dirty()` read them.
- `cachesim.lru_ram`
  - `LruRam` keeps an age for each way of each set. Age 0 is the most recently
    used way. A set starts with ways `0, 1, 2, …` at ages `0, 1, 2, …`.
    - `touch()` makes a way the most recent.
    - `lru_way()` returns the way with the highest age. On a tie it returns
      the first such way.
    - `reset()` restores the starting ages of a set.
    - `ages()` returns a set's ages as a tuple.
    - `format()` renders all sets, one line per set.
- `cachesim.cache`
  - `Cache` ties the tag and LRU stores together.
    - `split()` breaks an address into an `AddressParts`, which holds
      `offset`, `set_index` and `tag`. The address is first masked to 32 bits.
    - `lookup()` returns the hit way or `None`. A hit also marks the way as
      most recently used.
    - `free_way()` returns the highest-numbered invalid way in the address's
      set, or `None` if the set is full.
    - `insert()` writes the block into a given way.
    - `evict()` writes it into the least recently used way and returns that
      way.
    - `replace()` finds the way in a given set that holds one address's tag,
      retags it with another address's tag, and returns the way. It returns
      `None` if no way holds that tag.
    - `format_state()` renders every set and way.
- `cachesim.cli`
  - `read_addresses()` parses one hexadecimal address per non-empty line.
  - `simulate()` yields one `AccessResult` per address. An `AccessResult`
    holds `address`, `way`, `hit` and `evicted`.
  - `main()` is the command-line entry point.

Field widths come from the base-2 logarithm of `block_size` and `num_sets`,
rounded down, so both should be powers of two. All four constructor
parameters must be positive. If one is not, `Cache` raises `ValueError`. A set
or way index outside the cache raises `IndexError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
cachesim [INPUT]
```

The command reads hexadecimal addresses, one per line, from `INPUT`. If
`INPUT` is not given, it reads `input.txt`. Blank lines are skipped. A
leading `0x` is accepted.

A line that does not start with a hexadecimal number raises `ValueError`. So
does a value outside the signed 32-bit range.

If the file cannot be opened, the command prints `Error opening input file.`
to standard error and exits with status 1.

The trace runs through a cache with these fixed settings:

- 16 sets
- 4 ways
- 64-byte blocks

For every access the command prints these, with numbers in hexadecimal:

1. the LRU ages before the access
2. the offset and set index of the address
3. whether the access hit or missed
4. the way that was used, and whether that way was free or evicted
5. the cache state after the access

Example `input.txt`:

```
1000
1040
1000
2000
```

## Library use

```python
from cachesim.cache import Cache
from cachesim.cli import simulate

cache = Cache(num_sets=16, block_size=64, cache_size=16 * 64 * 4, associativity=4)

addr = 0x1040
print(cache.split(addr))          # AddressParts(offset=0, set_index=1, tag=4)

if cache.lookup(addr) is None:    # miss
    way = cache.free_way(addr)
    if way is None:
        cache.evict(addr)         # reuse the least recently used way
    else:
        cache.insert(addr, way)

for result in simulate(cache, [0x1040, 0x2040]):
    print(result.address, result.way, result.hit, result.evicted)

print(cache.format_state())
```

## What it does not do

- The model tracks tags only. It holds no data, does not tell reads from
  writes, and never sets the dirty bit or writes blocks back.
- `cache_size` is stored but not checked against the other three parameters.
- The command prints no hit or miss totals.
- The command's cache settings cannot be changed from the command line.