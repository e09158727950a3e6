# gardensim

A small turn-based garden simulator played at a text prompt. You create a
rectangular garden of soil cells, send a gardener in, plant cacti, rosebushes,
weeds and exotic plants, and advance time to watch them draw on the soil and
wither. The prompt and its messages are in Portuguese.

## Installing

```
pip install .
```

## Running

```
gardensim
```

The prompt starts with no garden. Until one exists, only `jardim`, `executa`,
`ajuda` and `fim` are accepted. Create a garden first:

```
> jardim 6 8
```

Rows and columns must each be between 1 and 26. The garden is drawn with
letters for rows and columns; `.` is empty soil and a letter marks a plant.
The session ends with `fim` or at end of input.

## Commands

Command names are case-insensitive. Positions are given as 1-based row and
column numbers.

| Command | Effect |
| --- | --- |
| `jardim <rows> <cols>` | Create the garden (only once per session) |
| `avanca [n]` | Advance time by `n` instants (default 1) |
| `lplantas` | List every plant with its water and nutrients |
| `lplanta <row> <col>` | Show the plant at a position |
| `larea` | List the positions that hold a plant |
| `lsolo <row> <col>` | Show the soil's water, nutrients and plant at a position |
| `entra <row> <col>` | Put the gardener into the garden |
| `sai` | Take the gardener out |
| `e`, `d`, `c`, `b` | Move the gardener left, right, up, down; it cannot step outside |
| `planta <row> <col> <kind>` | Plant `c` (cactus), `r` (rosebush), `e` (weed) or `x` (exotic) |
| `colhe <row> <col>` | Harvest (remove) the plant at a position |
| `executa <name>` | Run the non-empty lines of `Script/<name>.txt` as commands |
| `ajuda` | Show help |
| `fim` | Quit |

Planting and harvesting need the gardener inside the garden. Script and save
names may not contain `.` or `/`. `executa` is only accepted before a garden
has been created; the script itself may then create one.

## How plants behave

Each instant, every living plant acts on its own cell:

- **Cactus** (`C`) starts with 80 water and 40 nutrients and gains 2 water
  and 5 nutrients per instant. It never dies.
- **Rosebush** (`R`) and **exotic** (`E`) start with 25 water and 25
  nutrients, lose 4 of each per instant, take 8 nutrients from the soil and
  add 5 water to it. They wither when their water or nutrients drop below 1,
  or their nutrients rise above 199.
- **Weed** (`E`) starts with 5 water and 5 nutrients, takes 1 nutrient from
  the soil and adds 1 water to it, and withers after 60 instants.

Soil starts with 5 water and 5 nutrients; its water is capped at 10 and its
nutrients never go below 0. A plant that withers is removed from its cell.

## Using it from Python

```python
from gardensim.interface import Interface

ui = Interface()
ui.process("jardim 3 3")
ui.process("entra 1 1")
ui.process("planta 2 2 r")
ui.process("avanca 3")
```

`Interface.process` prints its output. The simulation itself can also be used
directly; its methods return text instead of printing, and use 0-based
positions:

```python
from gardensim.garden import Garden

garden = Garden(3, 3)
print(garden.plant(1, 1, "r"))   # raises ValueError if occupied or unknown kind
messages = garden.advance(7)     # messages from plants that withered
print(garden.render())
print(garden.soil(1, 1).describe())
```

`Garden.soil` and `Garden.plant` raise `IndexError` for positions outside the
garden. The other pieces are `gardensim.soil.Soil`, the plants in
`gardensim.plants` (`Cactus`, `Rosebush`, `Weed`, `Exotic`, `create_plant`)
and `gardensim.gardener.Gardener`. The numbers are in `gardensim.settings`.

## What it does not do

- Tools are not available. `lferr`, `larga`, `pega <n>` and `compra <c>`
  check their arguments and print a notice, but no tool is ever bought,
  carried or used, and `gardensim.gardener.Tool` has no concrete kinds.
- Saving is not available. `grava <name>` only creates an empty
  `Save/<name>.txt` (or asks before overwriting one that exists, then writes
  nothing); `recupera <name>` only reports whether that file exists;
  `apaga <name>` deletes it.
- Plants do not multiply, and the per-turn limits on the gardener in
  `gardensim.settings.GardenerSettings` are not enforced.
- `lsolo` ignores a third argument and shows only the given cell.

## Tests

```
pip install .[test]
pytest
```