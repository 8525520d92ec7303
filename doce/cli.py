"""Interactive menu of the game."""

from __future__ import annotations

import argparse
import sys

from doce.api import DEFAULT_CONFIG_PATH, ApiError, fetch_ranking, ranking_url, read_config

MENU = (
    "--------MENU---------\n"
    "[A] Jugar \n"
    "[B] Ver ranking \n"
    "[C] Salir \n"
    "\nIngrese una opcion: \n"
)

DIFFICULTY_PROMPT = (
    "Seleccione dificultad:\n"
    "[1] Facil\n"
    "[2] Medio\n"
    "[3] Dificil\n"
    "\nIngrese una opcion: "
)


def _read_word(prompt: str) -> str:
    line = input(prompt)
    while not line.split():
        line = input()
    return line.split()[0]


def _ask_difficulty() -> int:
    while True:
        answer = input(DIFFICULTY_PROMPT).strip()
        try:
            level = int(answer)
        except ValueError:
            continue
        if 1 <= level <= 3:
            return level


def _play_session() -> None:
    print("\nIniciando juego...")
    name = _read_word("Ingrese el nombre del jugador: ")
    print(f"\nBienvenido {name}")
    _ask_difficulty()
    print("\n\nFin del juego.")


def _show_ranking(config_path: str) -> None:
    try:
        config = read_config(config_path)
    except ApiError:
        print("ERROR AL LEER LA CONFIGURACIONES DE LA API")
        return
    print(f"CODIGO DEL GRUPO: {config.group_code}")
    print(f"URL DE LA API: {config.url}")
    print(ranking_url(config))
    try:
        body = fetch_ranking(config)
    except ApiError as exc:
        print(f"Error en la solicitud: {exc}", file=sys.stderr)
        return
    print(body)


def main(argv: list[str] | None = None) -> int:
    """Run the menu loop until the user leaves or input ends."""
    parser = argparse.ArgumentParser(prog="doce", description="DoCe card game.")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="file holding 'url|group_code' of the ranking service",
    )
    args = parser.parse_args(argv)

    try:
        while True:
            print(MENU)
            option = input().strip()[:1].upper()
            if option == "A":
                _play_session()
            elif option == "B":
                _show_ranking(args.config)
            elif option == "C":
                print("\nSaliendo...\n")
                return 0
            else:
                print("\nOpcion invalida. Intente de nuevo.\n")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())