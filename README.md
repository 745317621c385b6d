# ndditor

A small modal text editor for the terminal. Each line is held in a gap
buffer, several files can be open at once in tabs, and the screen is drawn
with a minimal box layout system made of columns, rows and bordered boxes.

## Installing

```
pip install .
```

The terminal front end uses the standard library's `curses` module, so it runs
where `curses` is available.

## Running

```
ndditor            # start with an empty "new tab"
ndditor notes.txt  # open notes.txt (created on save if it does not exist)
```

If the path given is a directory, the editor prints
`error reading file: ...` and exits with status 1.

## Modes

The status line at the bottom shows the current mode.

- **VIEW**: the starting mode. Press `i` to enter insert mode or `:` to enter
  command mode.
- **INSERT**: typed characters go into the active tab. `Enter` splits the
  line at the cursor, `Backspace` and `Delete` remove characters and join
  lines at the line edges.
- **COMMAND**: typed characters form a command shown after `:`. `Enter` runs
  it, `Backspace` deletes, `Escape` goes back to view mode.

`Escape` leaves insert or command mode. The arrow keys move the cursor in the
focused element: the tab, or the command line in command mode. `Ctrl+C` quits
at once, without saving.

## Tabs

In view or command mode:

| Key      | Action                  |
|----------|-------------------------|
| `Ctrl+T` | open a new empty tab    |
| `Ctrl+Q` | go to the previous tab  |
| `Ctrl+E` | go to the next tab      |
| `Ctrl+W` | close the active tab    |

Closing the only tab leaves a fresh empty one.

In insert mode `Ctrl+S` saves the active tab; if it has no path yet, command
mode opens with `path ` already typed so you can give one.

## Commands

| Command        | Action                                   |
|----------------|------------------------------------------|
| `:w`           | save the active tab                      |
| `:q`           | quit                                     |
| `:wq`          | save, then quit                          |
| `:path <file>` | set the file the active tab saves to     |
| `:open <file>` | open a file in a new tab                 |

Any other command that contains a `w` saves and any that contains a `q` quits;
commands with neither are reported as unknown. Errors, such as saving a tab
without a path, are shown in red in the status line for about a second and a
half. Files are written to `<file>.tmp` first and then renamed into place.

Every key press is appended to `log.txt` in the working directory.

## What it does not do

There is no undo, no search, no selection or clipboard, and no mouse support.
Files are read as UTF-8 (undecodable bytes are replaced) and saved with `\n`
line endings. The view scrolls vertically to follow the cursor but not
horizontally: characters past the right edge of the screen are not shown.

## Using the pieces

The building blocks can be used on their own:

```python
from ndditor.line import Line

line = Line.from_text("hello")
line.move_cursor_to(0)
line.insert(">")
print(str(line))  # ">hello"
```

The layout system lives in `ndditor.layout`:

- `ndditor.layout.geometry`: `Size`, `Point` and `BaseElement`
- `ndditor.layout.border`: `Border` and the box-drawing characters
- `ndditor.layout.containers`: `Column` and `Row`
- `ndditor.layout.sizedbox`: `SizedBox`
- `ndditor.layout.drawing`: `Color`, `Style`, the `Screen` interface and
  `draw_text`, `draw_box`, `draw_hline`, `draw_vline`

Elements draw onto any object with the `Screen` interface;
`ndditor.terminal.CursesScreen` is the one the editor uses. `ndditor.editor.Editor`
can be driven directly by passing `KeyPress` values from `ndditor.events` to
`Editor.handle_key` after `Editor.open`.