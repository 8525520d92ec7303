"""Cards, deck building and the end-of-game report."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from pathlib import Path

from doce.queue import Queue
from doce.stack import Stack, StackFullError

GANO_MAQUINA = 5
GANO_HUMANO = 6
MACHINE_NAME = "MAQUINA"
UNKNOWN_CARD = "CARTA_DESCONOCIDA"
CARD_SIZE = 4


class Card(IntEnum):
    MAS_UNO = 1
    MAS_DOS = 2
    SACAR_UNO = -1
    SACAR_DOS = -2
    REPETIR_TURNO = 3
    ESPEJO = 4


DECK_COMPOSITION: tuple[tuple[Card, int], ...] = (
    (Card.MAS_DOS, 6),
    (Card.MAS_UNO, 10),
    (Card.SACAR_UNO, 8),
    (Card.SACAR_DOS, 6),
    (Card.REPETIR_TURNO, 6),
    (Card.ESPEJO, 4),
)


@dataclass(frozen=True)
class TurnRecord:
    """What happened in one turn."""

    turn: int
    player_card: str
    machine_card: str
    player_points: int
    machine_points: int


def build_deck(stack: Stack) -> int:
    """Stack the deck's cards until the stack is full; return how many fit."""
    count = 0
    for card, copies in DECK_COMPOSITION:
        for _ in range(copies):
            try:
                stack.push(card, CARD_SIZE)
            except StackFullError:
                return count
            count += 1
    return count


def easy_mode(cards: Sequence[int], rng: random.Random | None = None) -> int:
    """Pick one of the first three cards at random."""
    chooser = rng if rng is not None else random.Random()
    return cards[chooser.randrange(3)]


def card_name(value: int) -> str:
    """Name of a card value, or the unknown-card marker."""
    try:
        return Card(value).name
    except ValueError:
        return UNKNOWN_CARD


def report_filename(when: datetime | None = None) -> str:
    """File name of the report for the given moment (default: now)."""
    moment = when if when is not None else datetime.now()
    return f"informe-juego_{moment:%Y-%m-%d-%H-%M}.txt"


def write_report(
    records: Queue,
    winner: int,
    player_name: str,
    directory: str | Path = ".",
    when: datetime | None = None,
) -> Path:
    """Drain ``records`` into a report file and return its path."""
    path = Path(directory) / report_filename(when)
    with path.open("w", encoding="utf-8") as out:
        out.write("INFORME DEL JUEGO\n\n")
        while not records.is_empty():
            record: TurnRecord = records.get()
            out.write(f"NUMERO DE TURNO:{record.turn}\n")
            out.write(f"Carta Jugada por {player_name}: {record.player_card}\n")
            out.write(f"Carta Jugada por {MACHINE_NAME}: {record.machine_card}\n")
            out.write(
                f"Puntos Acumulados por {player_name}: {record.player_points}\n"
            )
            out.write(
                f"Puntos Acumulados por {MACHINE_NAME}: {record.machine_points}\n\n"
            )
        champion = player_name if winner == GANO_MAQUINA else MACHINE_NAME
        out.write(f"EL GANADOR DEL JUEGO ES: {champion}\n")
    return path