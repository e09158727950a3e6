"""Handlers for the commands typed at the simulator prompt.

Every handler receives the running session: an object with a ``garden``
attribute (``None`` until a garden is created), an ``active`` flag and a
``process(line)`` method that runs one command line.  Command arguments are
passed as the list of whitespace-separated tokens following the command.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence

from gardensim.garden import Garden
from gardensim.gardener import DIRECTIONS, Gardener

SAVE_FOLDER = "Save"
SCRIPT_FOLDER = "Script"
MAX_SIZE = 26
PURCHASABLE_TOOLS = ("g", "t", "a", "z")

NO_GARDEN = "Crie primeiro um jardim com o comando 'jardim <linhas> <colunas>'."
GARDENER_OUTSIDE = "Erro: o jardineiro está fora do jardim."
OUT_OF_BOUNDS = "Posição fora dos limites do jardim."

HELP_TEXT = (
    "Comandos disponíveis:\n"
    " Criação jardim:\n"
    "   > jardim <linhas> <colunas>         - Cria um novo jardim\n"
    " Gestão do Tempo:\n"
    "   > avanca [n]                        - Avança o tempo\n"
    " Listagens:\n"
    "   > lplantas                          - Lista todas as plantas existentes no jardim\n"
    "   > lplanta <linha> <coluna>          - Mostra informações detalhadas sobre a planta na posição indicada\n"
    "   > larea                             - Mostra todas as posições ocupadas (plantas e ferramentas) no jardim\n"
    "   > lsolo <linha> <coluna> [n]        - Mostra a informação do solo na posição indicada (e nas posições vizinhas, se n for fornecido)\n"
    "   > lferr                             - Lista todas as ferramentas disponíveis (no solo e no inventário do jardineiro)\n"
    " Movimento e posição do jardineiro:\n"
    "   > entra <linha> <coluna>            - Coloca o jardineiro dentro do jardim na posição indicada\n"
    "   > sai                               - Faz o jardineiro sair do jardim\n"
    "   > e, d, c, b                        - Movem o jardineiro uma célula: esquerda, direita, cima, baixo (respetivamente)\n"
    "   Ações de jardinagem:\n"
    "       > planta <linha> <coluna> <tipo> - Planta uma nova planta do tipo indicado na posição especificada (c, r, e, x)\n"
    "       > colhe <linha> <coluna>         - Colhe (remove) a planta na posição indicada\n"
    "   Ferramentas:\n"
    "       > larga                         - Larga a ferramenta que o jardineiro tem atualmente na mão.\n"
    "       > pega <n>                      - Pega na ferramenta com número de série n (se estiver na célula ou inventário).\n"
    "       > compra <c>                    - Compra uma nova ferramenta do tipo c (ex.: g, a, t, z).\n"
    " Ficheiros:\n"
    "   > grava <nome_ficheiro>.txt         - Grava o ficheiro com o nome indicado\n"
    "   > recupera <nome_ficheiro>.txt      - Abre o ficheiro guardado com o nome indicado\n"
    "   > apaga <nome_ficheiro>.txt         - Apaga o ficheiro guardado com o nome indicado\n"
    " Terminar:\n"
    "   > fim                               - Termina o programa\n"
)


class Session(Protocol):
    garden: Optional[Garden]
    active: bool

    def process(self, line: str) -> None: ...


def _parse_ints(args: Sequence[str], count: int) -> Optional[list[int]]:
    """The first ``count`` arguments as integers, or None if any is missing or bad."""
    if len(args) < count:
        return None
    try:
        return [int(token) for token in args[:count]]
    except ValueError:
        return None


def _show(garden: Garden) -> None:
    print(garden.render(), end="")


def _garden_or_warn(session: Session, message: str = NO_GARDEN) -> Optional[Garden]:
    if session.garden is None:
        print(message)
    return session.garden


def _gardener_inside(garden: Garden) -> Optional[Gardener]:
    gardener = garden.gardener
    if not gardener.inside:
        print(GARDENER_OUTSIDE)
        return None
    return gardener


def _single_name(args: Sequence[str], missing: str, extra: str) -> Optional[str]:
    if not args:
        print(missing)
        return None
    if len(args) > 1:
        print(extra)
        return None
    return args[0]


def _file_path(name: str, folder: str) -> Path:
    return Path(folder) / f"{name}.txt"


def show_help() -> None:
    """Print the list of available commands."""
    print(HELP_TEXT, end="")


def cmd_garden(session: Session, args: Sequence[str]) -> None:
    """jardim <linhas> <colunas>: create the garden."""
    usage = "Uso: jardim <linhas> <colunas>"
    dims = _parse_ints(args, 2)
    if dims is None:
        print(usage)
        return
    if session.garden is not None:
        print("Já se encontra um jardim criado!")
        return
    rows, cols = dims
    if not (0 < rows <= MAX_SIZE and 0 < cols <= MAX_SIZE):
        print(usage)
        return
    session.garden = Garden(rows, cols)
    print(f"Jardim criado com {rows} linhas e {cols} colunas.")
    _show(session.garden)


def cmd_advance(session: Session, args: Sequence[str]) -> None:
    """avanca [n]: let n instants pass (one by default)."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    if not args:
        steps = 1
    else:
        parsed = _parse_ints(args, 1)
        steps = parsed[0] if parsed is not None else 0
    for message in garden.advance(steps):
        print(message)
    _show(garden)


def cmd_list_plants(session: Session) -> None:
    """lplantas: list every plant in the garden."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    print(garden.list_plants(), end="")
    _show(garden)
    print()


def cmd_list_plant(session: Session, args: Sequence[str]) -> None:
    """lplanta <linha> <coluna>: describe the plant at a position."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    pos = _parse_ints(args, 2)
    if pos is None:
        print(
            "Utilização: \n"
            "\t> lplantas                 - Lista todas as plantas existentes no jardim\n"
            "\t> lplanta <linha> <coluna> - Mostra informações detalhadas sobre a planta na posição indicada"
        )
        return
    row, col = pos[0] - 1, pos[1] - 1
    if garden.is_valid(row, col):
        print(garden.list_plant(row, col), end="")
        _show(garden)
    else:
        print(OUT_OF_BOUNDS)
    print()


def cmd_list_area(session: Session) -> None:
    """larea: list every occupied cell."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    print("Posições ocupadas no jardim:")
    found = False
    for row, col, cell in garden:
        if cell.plant is not None:
            print(f"  ({row + 1},{col + 1}) - Planta: {cell.plant.symbol}")
            found = True
    if not found:
        print("  Nenhuma célula ocupada.")


def cmd_list_soil(session: Session, args: Sequence[str]) -> None:
    """lsolo <linha> <coluna> [n]: describe the soil at a position."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    pos = _parse_ints(args, 2)
    if pos is None:
        print(
            "Utilização: \n"
            "\t> lsolo <linha> <coluna> [n]\n"
            "     Lista toda a informação do solo na posição indicada.\n"
            "     Caso [n] seja fornecido, mostra também as posições vizinhas num raio de n."
        )
        return
    row, col = pos[0] - 1, pos[1] - 1
    if garden.is_valid(row, col):
        print(garden.soil(row, col).describe())
    else:
        print("testeeeee.")
    print()
    _show(garden)


def cmd_list_tools() -> None:
    """lferr: list the tools (not available yet)."""
    print("Funcionalidade por implementar!")
    print("Procura ferramentas!")


def cmd_enter(session: Session, args: Sequence[str]) -> None:
    """entra <linha> <coluna>: put the gardener in the garden."""
    garden = _garden_or_warn(
        session,
        "Erro: ainda não existe um jardim. Crie-o com 'jardim <linhas> <colunas>'.",
    )
    if garden is None:
        return
    pos = _parse_ints(args, 2)
    if pos is None:
        print("Utilização: \n\t> entra <linha> <coluna>")
        return
    row, col = pos[0] - 1, pos[1] - 1
    if not garden.is_valid(row, col):
        print(OUT_OF_BOUNDS)
        return
    print(garden.gardener.enter(row, col))


def cmd_leave(session: Session) -> None:
    """sai: take the gardener out of the garden."""
    garden = _garden_or_warn(session, "Erro: ainda não existe um jardim.")
    if garden is None:
        return
    if not garden.gardener.inside:
        print("O jardineiro já está fora do jardim.")
        return
    print(garden.gardener.leave())


def cmd_move(session: Session, direction: str) -> None:
    """e, d, c, b: move the gardener one cell."""
    garden = _garden_or_warn(session, "Erro: ainda não existe um jardim.")
    if garden is None:
        return
    gardener = _gardener_inside(garden)
    if gardener is None:
        return
    if direction not in DIRECTIONS:
        print("Direção inválida.")
        return
    d_row, d_col = DIRECTIONS[direction]
    row, col = gardener.row + d_row, gardener.col + d_col
    if not garden.is_valid(row, col):
        print("Movimento inválido: o jardineiro não pode sair do jardim.")
        return
    gardener.set_position(row, col)
    print(f"Jardineiro moveu-se para ({chr(ord('A') + row)},{chr(ord('A') + col)})")


def cmd_plant(session: Session, args: Sequence[str]) -> None:
    """planta <linha> <coluna> <tipo>: plant a new plant."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    if _gardener_inside(garden) is None:
        return
    pos = _parse_ints(args, 2)
    if pos is None or len(args) < 3:
        print("Uso: '>planta <linha> <coluna> <tipo>'.")
        return
    row, col = pos[0] - 1, pos[1] - 1
    if not garden.is_valid(row, col):
        print(OUT_OF_BOUNDS)
        return
    try:
        print(garden.plant(row, col, args[2][0]))
    except ValueError as exc:
        print(exc)
    _show(garden)


def cmd_harvest(session: Session, args: Sequence[str]) -> None:
    """colhe <linha> <coluna>: remove the plant at a position."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    if _gardener_inside(garden) is None:
        return
    pos = _parse_ints(args, 2)
    if pos is None:
        print("Uso: '>colhe <linha> <coluna>'.")
        return
    row, col = pos[0] - 1, pos[1] - 1
    if not garden.is_valid(row, col):
        print(OUT_OF_BOUNDS)
        return
    message = garden.harvest(row, col)
    if message:
        print(message)
    _show(garden)


def cmd_drop_tool(session: Session) -> None:
    """larga: drop the tool in the gardener's hand."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    gardener = _gardener_inside(garden)
    if gardener is None:
        return
    if not gardener.has_tool():
        print("Erro: o jardineiro não nenhuma ferramenta na mão.")
        return
    print("O jardineiro está prestes a largar a ferramenta.")
    print("Funcionalidade não está implementada.")


def cmd_pick_tool(session: Session, args: Sequence[str]) -> None:
    """pega <n>: pick up the tool with serial number n."""
    garden = _garden_or_warn(session)
    if garden is None:
        return
    gardener = _gardener_inside(garden)
    if gardener is None:
        return
    serial = _parse_ints(args, 1)
    if serial is None:
        print("Uso: pega <n>")
        return
    if gardener.has_tool():
        print("Erro: o jardineiro já tem uma ferramenta na mão.")
        return
    print(f"Procura pela ferramenta com número de série {serial[0]}...")
    print("(Validação concluída — funcionalidade ainda não implementada)")


def cmd_buy(session: Session, args: Sequence[str]) -> None:
    """compra <c>: buy a tool of kind g, t, a or z."""
    if session.garden is None:
        print("Não existe jardim.")
        return
    name = _single_name(args, "Uso: compra <c>", "Uso: apaga <c>")
    if name is None:
        return
    if name in PURCHASABLE_TOOLS:
        print(f"Comando por implementar. Instancia de {name} ", end="")
    else:
        print("Apenas disponivel para compra: <g>,<a>,<t>,<z>.")


def is_valid_filename(name: str) -> bool:
    """Whether a save or script name is acceptable (no '.' and no '/')."""
    if "." in name or "/" in name:
        print(f"Nome invalido de ficheiro: {name}")
        return False
    return True


def save_exists(name: str, folder: str) -> bool:
    """Whether ``folder/name.txt`` exists."""
    return _file_path(name, folder).exists()


def create_save_file(name: str) -> bool:
    """Create an empty save file; return whether it worked."""
    path = _file_path(name, SAVE_FOLDER)
    try:
        path.open("w").close()
    except OSError:
        print(f"Erro ao criar o ficheiro: {path}")
        return False
    return True


def _read_answer() -> str:
    try:
        words = input().split()
    except EOFError:
        return ""
    return words[0] if words else ""


def cmd_save(session: Session, args: Sequence[str]) -> None:
    """grava <nome>: save the garden under a name."""
    if session.garden is None:
        print("Nao existe jardim para gravar!")
        return
    name = _single_name(args, "Uso: apaga <nome>", "Uso: apaga <nome>")
    if name is None or not is_valid_filename(name):
        return
    if save_exists(name, SAVE_FOLDER):
        print("Ficheiro existe! Quer gravar novamente?(s/n)")
        answer = _read_answer()
        if answer == "s":
            print("Comando por implementar dentro de gravar novamente")
        elif answer == "n":
            print("Nao foi gravado o ficheiro!")
        else:
            print("Comando errado!")
        return
    if not create_save_file(name):
        print("Erro na criacao de ficheiro!")
    print("Cria Ficheiro! Comando por implementar na gravacao nova!")


def cmd_restore(session: Session, args: Sequence[str]) -> None:
    """recupera <nome>: restore a saved garden."""
    name = _single_name(args, "Uso: apaga <nome>", "Uso: recupera <nome>")
    if name is None or not is_valid_filename(name):
        return
    if save_exists(name, SAVE_FOLDER):
        print("Gravacao existente com esse nome! Por implementar comando!")
    else:
        print(f"Gravacao com nome: {name} nao existe!\n")


def cmd_delete(args: Sequence[str]) -> None:
    """apaga <nome>: delete a saved garden."""
    name = _single_name(args, "Uso: apaga <nome>", "Uso: apaga <nome>")
    if name is None or not is_valid_filename(name):
        return
    if not is_valid_filename(SAVE_FOLDER):
        return
    if not save_exists(name, SAVE_FOLDER):
        print(f"Gravacao com nome: {name} nao existe!\n")
        return
    try:
        _file_path(name, SAVE_FOLDER).unlink()
    except OSError:
        return
    print(f"Gravacao com nome: {name} apagada com sucesso!\n")


def cmd_run_script(session: Session, args: Sequence[str]) -> None:
    """executa <ficheiro>: run every non-empty line of Script/<ficheiro>.txt."""
    usage = "Uso: executa <ficheiro>"
    name = _single_name(args, usage, usage)
    if name is None or not is_valid_filename(name):
        return
    if not save_exists(name, SCRIPT_FOLDER):
        print(f"Ficheiro com nome: {name} nao existe!\n")
        return
    print(f"Ficheiro com nome: {name} existe!\n")
    try:
        with _file_path(name, SCRIPT_FOLDER).open(encoding="utf-8") as script:
            lines = script.read().splitlines()
    except OSError:
        print("Erro a abrir ficheiro!", end="")
        return
    for line in lines:
        if not line:
            continue
        print(f"> {line}")
        session.process(line)


def cmd_quit(session: Session) -> None:
    """fim: stop the simulator."""
    session.active = False
    print("A terminar o simulador...")