# doce

The pieces of a small console card game played against the machine. It
includes a deck of cards, a report of every turn written to a text file, and a
client for an online ranking service. A console menu ties them together.

## Installing

```
pip install .
```

## The menu

Start the menu with:

```
doce
```

It prints a menu and reads one option per line. Options are not case
sensitive:

- `A`: asks for a player name (the first word typed) and a difficulty. The
  difficulty must be 1 (easy), 2 (medium) or 3 (hard). The menu asks again
  until it gets one of these.
- `B`: reads the ranking service settings, prints the group code, the URL and
  the ranking URL, and then prints the body the service returns.
- `C`: quits.

Any other input prints `Opcion invalida. Intente de nuevo.`. The menu also ends
when input runs out.

The settings file is `configuracionesApi.txt` in the working directory. Use
`--config PATH` to read another file:

```
doce --config settings.txt
```

## The deck

`doce.game.Card` is an `IntEnum` of the card values. `doce.game.build_deck`
pushes cards onto a `doce.stack.Stack` in the order below. It stops when the
stack is full and returns how many cards it pushed.

| Card            | Value | Copies |
|-----------------|-------|--------|
| `MAS_DOS`       | 2     | 6      |
| `MAS_UNO`       | 1     | 10     |
| `SACAR_UNO`     | -1    | 8      |
| `SACAR_DOS`     | -2    | 6      |
| `REPETIR_TURNO` | 3     | 6      |
| `ESPEJO`        | 4     | 4      |

Each card takes 8 bytes of stack space: 4 for the card and 4 for the header.
A stack of the default capacity of 100 bytes therefore holds 12 cards, all of
them `MAS_DOS` and `MAS_UNO`. A stack created with `Stack(320)` holds the
whole deck of 40 cards.

Other helpers:

- `doce.game.card_name(value)` returns a card value's name. An unknown value
  gives `CARTA_DESCONOCIDA`.
- `doce.game.easy_mode(cards, rng=None)` returns one of the first three entries
  of `cards`, chosen at random. You can pass a `random.Random` instance as
  `rng`.

## Game reports

`doce.game.TurnRecord` holds one turn:

- `turn`
- `player_card`
- `machine_card`
- `player_points`
- `machine_points`

`doce.game.write_report(records, winner, player_name, directory=".", when=None)`
writes a report file and returns its path. `records` is a `doce.queue.Queue` of
`TurnRecord` entries, and the call empties it. The file name comes from
`doce.game.report_filename(when)`, which has the form
`informe-juego_2024-05-01-18-30.txt`. When `when` is not given, the current
time is used.

The report starts with `INFORME DEL JUEGO`. It then lists each turn's number,
the card each side played and the points each side has accumulated, and ends
with `EL GANADOR DEL JUEGO ES: <name>`. The winner is named as follows:

- `winner` equal to `5` (`doce.game.GANO_MAQUINA`) names the player.
- Any other value names `MAQUINA`.

## Ranking service

The first line of the settings file holds the service URL and the group code,
separated by the last `|` on the line:

```
https://ranking.example.com/api/resultados|GRUPO01
```

`doce.api.read_config(path)` parses the file into a
`doce.api.ApiConfig(url, group_code)`. It raises `doce.api.ApiError` in two
cases:

- the file cannot be opened;
- the line has no `|`.

The requests available are:

- `doce.api.result_payload(config, name, won)` returns the JSON body, for
  example `{"codigoGrupo":"GRUPO01","jugador":{"nombre":"ANA","vencedor":1}}`.
- `doce.api.send_result(config, name, won)` sends that body as a POST to the
  service URL.
- `doce.api.ranking_url(config)` returns `<url>/<group code>`.
- `doce.api.fetch_ranking(config)` sends a GET to that URL.
- `doce.api.delete_ranking(config)` sends a DELETE to that URL.

Each request returns the response body as text. An HTTP error status still
returns its body. A request that cannot be made at all (a bad URL, a
connection failure or a timeout) raises `ApiError`. TLS certificates are not
verified.

## Containers

`doce.stack.Stack(capacity=100)` is a stack with a byte budget. `push(item, size)`
charges `size` plus a 4-byte header. It raises `StackFullError` when the item
does not fit, and `is_full(size)` tells you in advance. `pop` and `peek` raise
`StackEmptyError` when the stack is empty.

`doce.queue.Queue` is an unbounded FIFO queue. `get` and `peek` raise
`QueueEmptyError` when the queue is empty. Iterating over the queue reads
from front to back and leaves the items in place.

## What it does not do

Option `A` of the menu collects a name and a difficulty and then ends the
session. No turns are played there. The menu does not write reports and does
not send results to the ranking service. Those steps are available only as
the functions described above. Deleting a ranking is also available only
through `doce.api.delete_ranking`.

## Running the tests

```
pip install ".[test]"
pytest
```