import random
from collections import Counter
from datetime import datetime

from doce.game import (
    DECK_COMPOSITION,
    GANO_HUMANO,
    GANO_MAQUINA,
    Card,
    TurnRecord,
    build_deck,
    card_name,
    easy_mode,
    report_filename,
    write_report,
)
from doce.queue import Queue
from doce.stack import Stack


def _drain(stack):
    cards = []
    while not stack.is_empty():
        cards.append(stack.pop())
    return cards


def test_full_deck_composition():
    stack = Stack(capacity=1000)
    count = build_deck(stack)
    cards = _drain(stack)
    assert count == len(cards)
    counts = Counter(cards)
    assert counts[Card.MAS_DOS] == 6
    assert counts[Card.MAS_UNO] == 10
    assert counts[Card.SACAR_UNO] == 8
    assert counts[Card.SACAR_DOS] == 6
    assert counts[Card.REPETIR_TURNO] == 6
    assert counts[Card.ESPEJO] == 4


def test_deck_order_last_pushed_on_top():
    stack = Stack(capacity=1000)
    build_deck(stack)
    assert stack.pop() == Card.ESPEJO


def test_default_stack_fills_up():
    stack = Stack()
    count = build_deck(stack)
    assert count == len(stack)
    assert count == 12
    assert stack.is_full(4)
    assert count < sum(copies for _, copies in DECK_COMPOSITION)
    assert stack.pop() == Card.MAS_UNO


class _LastChoice:
    def randrange(self, n):
        return n - 1


def test_easy_mode_uses_rng_index():
    assert easy_mode([7, 8, 9, 10], _LastChoice()) == 9


def test_easy_mode_picks_among_first_three():
    rng = random.Random(1)
    cards = [Card.MAS_UNO, Card.ESPEJO, Card.SACAR_DOS, Card.MAS_DOS]
    picks = {easy_mode(cards, rng) for _ in range(50)}
    assert picks <= set(cards[:3])


def test_card_names():
    assert card_name(1) == "MAS_UNO"
    assert card_name(2) == "MAS_DOS"
    assert card_name(-1) == "SACAR_UNO"
    assert card_name(-2) == "SACAR_DOS"
    assert card_name(3) == "REPETIR_TURNO"
    assert card_name(4) == "ESPEJO"
    assert card_name(99) == "CARTA_DESCONOCIDA"


def test_report_filename_format():
    name = report_filename(datetime(2024, 5, 6, 7, 8))
    assert name == "informe-juego_2024-05-06-07-08.txt"


def test_write_report_contents_and_drains(tmp_path):
    queue = Queue()
    queue.put(TurnRecord(1, "MAS_UNO", "ESPEJO", 1, 0))
    queue.put(TurnRecord(2, "MAS_DOS", "SACAR_UNO", 3, 0))
    when = datetime(2024, 5, 6, 7, 8)
    path = write_report(queue, GANO_MAQUINA, "RAMIRO", tmp_path, when)
    assert path == tmp_path / report_filename(when)
    assert queue.is_empty()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "INFORME DEL JUEGO"
    assert "NUMERO DE TURNO:1" in lines
    assert "Carta Jugada por RAMIRO: MAS_DOS" in lines
    assert "Carta Jugada por MAQUINA: SACAR_UNO" in lines
    assert "Puntos Acumulados por RAMIRO: 3" in lines
    assert lines[-1] == "EL GANADOR DEL JUEGO ES: RAMIRO"


def test_write_report_other_winner(tmp_path):
    path = write_report(Queue(), GANO_HUMANO, "RAMIRO", tmp_path)
    text = path.read_text(encoding="utf-8")
    assert text.endswith("EL GANADOR DEL JUEGO ES: MAQUINA\n")
    assert "NUMERO DE TURNO" not in text