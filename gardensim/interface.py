"""The interactive prompt that reads commands and drives the simulation."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from gardensim import commands
from gardensim.garden import Garden

WELCOME = (
    "\nBem-vindo ao simulador de jardim!. Escreva 'ajuda' para saber os "
    "comandos disponíveis."
)
FAREWELL_HINT = "Escreva 'fim' para sair."
PROMPT = "> "

NO_GARDEN_YET = (
    "Comando invalido! Jardim nao iniciado!\n"
    "Comandos disponiveis: \n-> jardim <linhas> <colunas> \n-> ajuda"
)
INVALID_COMMAND = "Comando invalido!\n"

_ALWAYS_ALLOWED = frozenset({"ajuda", "", "fim"})
_MOVES = frozenset(commands.DIRECTIONS)


class Interface:
    """A simulator session: the garden (once created) and the running flag."""

    def __init__(self) -> None:
        self.garden: Optional[Garden] = None
        self.active = True

    def run(self) -> None:
        """Read and process command lines until 'fim' or end of input."""
        print(WELCOME)
        print(FAREWELL_HINT)
        while self.active:
            try:
                line = input(PROMPT)
            except EOFError:
                break
            self.process(line)

    def _handlers(self) -> dict[str, Callable[[Sequence[str]], None]]:
        return {
            "avanca": self._advance,
            "planta": lambda args: commands.cmd_plant(self, args),
            "colhe": lambda args: commands.cmd_harvest(self, args),
            "lplantas": lambda args: commands.cmd_list_plants(self),
            "lplanta": lambda args: commands.cmd_list_plant(self, args),
            "larea": lambda args: commands.cmd_list_area(self),
            "lsolo": lambda args: commands.cmd_list_soil(self, args),
            "lferr": lambda args: commands.cmd_list_tools(),
            "entra": lambda args: commands.cmd_enter(self, args),
            "sai": lambda args: commands.cmd_leave(self),
            "larga": lambda args: commands.cmd_drop_tool(self),
            "pega": lambda args: commands.cmd_pick_tool(self, args),
            "compra": lambda args: commands.cmd_buy(self, args),
            "grava": lambda args: commands.cmd_save(self, args),
            "recupera": lambda args: commands.cmd_restore(self, args),
            "apaga": lambda args: commands.cmd_delete(args),
            "ajuda": lambda args: commands.show_help(),
            "fim": lambda args: commands.cmd_quit(self),
        }

    def _advance(self, args: Sequence[str]) -> None:
        commands.cmd_advance(self, args)
        print()

    def process(self, line: str) -> None:
        """Run one command line."""
        tokens = line.split()
        cmd = tokens[0].lower() if tokens else ""
        args = tokens[1:]

        if self.garden is None and cmd not in _ALWAYS_ALLOWED:
            if cmd == "jardim":
                commands.cmd_garden(self, args)
            elif cmd == "executa":
                commands.cmd_run_script(self, args)
            else:
                print(NO_GARDEN_YET)
            return

        if cmd == "":
            return
        if cmd in _MOVES:
            commands.cmd_move(self, cmd)
            return
        handler = self._handlers().get(cmd)
        if handler is None:
            print(INVALID_COMMAND)
            return
        handler(args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive simulator."""
    Interface().run()
    return 0