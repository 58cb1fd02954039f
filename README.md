# openmenu

A library and command-line tools for the data files behind a disc-image game menu:

- the `OPENMENU.INI` game list (slots, names, dates, product serials, disc numbers),
- DAT containers, which hold fixed-size chunks (box art, icons or metadata records)
  indexed by product serial,
- per-game metadata (players, VMU blocks, accessories, genres, description).

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

| Command | Usage | What it does |
| --- | --- | --- |
| `openmenu-datread` | `openmenu-datread input.dat [-d]` | Prints the container's chunk size and index, then looks up the IDs `T40502N` and `MISSING`; with `-d` also writes every chunk as `<ID>.pvr` into a folder named after the input file without its extension. |
| `openmenu-datpack` | `openmenu-datpack FOLDER output.dat` | Packs the regular files of `FOLDER`, in name order, into a DAT. The first file fixes the chunk size; files of another size are skipped. |
| `openmenu-metapack` | `openmenu-metapack FOLDER output.dat` | Reads one metadata INI per game from `FOLDER` (section `[ITEM]`) and packs them as fixed-size records into a DAT. |
| `openmenu-menufaker` | `openmenu-menufaker filelist.csv` | Writes `OPENMENU.INI` in the current folder from a CSV of `Name (Region),SERIAL.ext` lines; games take slots from 2 on and `num_items` is 256. |
| `openmenu-datstrip` | `openmenu-datstrip input.dat openmenu.ini output.dat` | Writes a smaller DAT holding, in game-list order, only the entries whose serials appear in the game list. Input and output must differ. |
| `openmenu-renamecsv` | `openmenu-renamecsv FOLDER filelist.csv [-ext pvr]` | Renames files in `FOLDER` from the `current,new` pairs of a CSV; with `-ext`, both names get that extension instead. Missing files are reported and skipped. |
| `openmenu-tsv2ini` | `openmenu-tsv2ini input.tsv FOLDER` | Turns a tab-separated sheet (Region, Players, VMU Blocks, Genre, Network, Accessories, Product ID, Name, Synopsis) into one `SERIAL.txt` metadata INI per row in `FOLDER`; empty fields become `0`. |

Each tool returns exit status 1 on wrong usage or when its input cannot be read.

DAT IDs are taken from file names: the extension is removed, the rest is upper-cased and cut
to ten characters. Files without an extension, or whose name before the extension is longer
than eleven characters, are skipped.

## Library

```python
from openmenu.datfile import DatFile
from openmenu.gamelist import GameList, SortOrder
from openmenu.metadb import MetaDatabase, format_players, format_vmu_blocks

games = GameList.read("OPENMENU.INI")
print(len(games), "games")

meta = MetaDatabase.load("META.DAT")
for game in games.select(sort=SortOrder.NAME):
    record = meta.get(game.product)
    if record is not None:
        print(game.name, format_players(record.num_players),
              format_vmu_blocks(record.vmu_blocks))

art = DatFile.load("BOX.DAT")
if "T1401N" in art:
    chunk = art.read("T1401N")
```

Modules:

- `openmenu.datfile` — `DatFile` (`load`, `parse`, `offset_of`, `index_of`, `read`,
  `read_chunk`, `info`), `build_dat` / `write_dat` to lay out a container,
  `dump_dat`, `ident_from_filename`, and `DatFormatError`.
- `openmenu.gamelist` — `GameList` with `items`, `by_genre`, `select` (sort by
  `SortOrder`, filter by genre, optionally hide later discs of multi-disc sets) and
  `multidisc`; `GameItem`; `fix_sega_serials` corrects known clashing serials.
- `openmenu.metadb` — `MetaDatabase` finds a `MetaRecord` by serial after remapping;
  `format_players` and `format_vmu_blocks` give strings such as `2 Players` and `1 Block`.
- `openmenu.genres` — `Genre` and `Accessory` flags, `MetaRecord` with `pack()` /
  `unpack()`, and `parse_genres` / `parse_accessories` for `Action+Racing` style strings.
- `openmenu.serials` — `sanitize_art` and `sanitize_meta` map regional duplicate serials
  to the ones that carry artwork or metadata.
- `openmenu.textures` — `TextureSet` looks art up in an add-on DAT, then the primary one,
  and keeps loaded `Image`s in a pool of cached slots.
- `openmenu.lru` — `LruCache` with add and remove callbacks.
- `openmenu.block_pool` — `BlockPool`, a fixed-slot allocator with a per-slot `SlotFormat`;
  `PoolFullError` when every slot is taken.
- `openmenu.texalloc` — `TextureAllocator`, a bump allocator storing up to 31 textures
  in one buffer, aligned to 32 bytes.
- `openmenu.ini` — `parse_ini` for the INI dialect these files use; `IniError` on bad lines.
- `openmenu.packer`, `openmenu.metapacker`, `openmenu.menufaker`, `openmenu.stripper`,
  `openmenu.renamecsv`, `openmenu.tsv2ini` — the functions behind the commands
  (`pack_folder`, `read_meta`, `pack_meta_folder`, `build_menu_ini`, `strip_dat`,
  `rename_from_csv`, `meta_ini_text`, `convert_tsv`).

## What it does not do

The package handles the menu's files only. It has no on-screen menu, no controller
input, and does not switch disc images or start games on a console. `TextureSet` does not
decode texture formats itself: by default it stores each chunk's raw bytes, and a decoder
can be passed in as `loader`.