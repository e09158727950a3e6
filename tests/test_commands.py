import io

import pytest

from gardensim import commands
from gardensim.garden import Garden
from gardensim.plants import Weed


class FakeSession:
    def __init__(self, garden=None):
        self.garden = garden
        self.active = True
        self.processed = []

    def process(self, line):
        self.processed.append(line)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def inside():
    s = FakeSession(Garden(3, 3))
    s.garden.gardener.enter(0, 0)
    return s


def test_show_help(capsys):
    commands.show_help()
    out = capsys.readouterr().out
    assert out.startswith("Comandos disponíveis:")
    assert "> fim" in out


def test_cmd_garden_creates(session, capsys):
    commands.cmd_garden(session, ["3", "4"])
    assert (session.garden.rows, session.garden.cols) == (3, 4)
    out = capsys.readouterr().out
    assert "Jardim criado com 3 linhas e 4 colunas." in out
    assert session.garden.render() in out


@pytest.mark.parametrize("args", [["0", "3"], ["3", "27"], ["x", "3"], ["3"]])
def test_cmd_garden_rejects(session, capsys, args):
    commands.cmd_garden(session, args)
    assert session.garden is None
    assert "Uso: jardim <linhas> <colunas>" in capsys.readouterr().out


def test_cmd_garden_accepts_max(session):
    commands.cmd_garden(session, ["26", "26"])
    assert session.garden.rows == 26


def test_cmd_garden_only_once(session, capsys):
    commands.cmd_garden(session, ["2", "2"])
    first = session.garden
    commands.cmd_garden(session, ["5", "5"])
    assert session.garden is first
    assert "Já se encontra um jardim criado!" in capsys.readouterr().out


def test_cmd_advance_without_garden(session, capsys):
    commands.cmd_advance(session, [])
    assert commands.NO_GARDEN in capsys.readouterr().out


@pytest.mark.parametrize("args,expected", [([], 1), (["x"], 0), (["3"], 3)])
def test_cmd_advance_steps(inside, args, expected):
    weed = Weed()
    inside.garden.soil(1, 1).place_plant(weed)
    commands.cmd_advance(inside, args)
    assert weed.instants == expected


def test_cmd_plant_requires_inside(capsys):
    s = FakeSession(Garden(2, 2))
    commands.cmd_plant(s, ["1", "1", "r"])
    assert not s.garden.soil(0, 0).has_plant()
    assert commands.GARDENER_OUTSIDE in capsys.readouterr().out


def test_cmd_plant_uses_first_letter(inside):
    commands.cmd_plant(inside, ["2", "3", "rosa"])
    planted = inside.garden.soil(1, 2).plant
    assert planted.name == "Roseira"
    assert planted.symbol == "R"


def test_cmd_plant_errors(inside, capsys):
    commands.cmd_plant(inside, ["9", "9", "r"])
    assert commands.OUT_OF_BOUNDS in capsys.readouterr().out
    commands.cmd_plant(inside, ["1", "1", "q"])
    assert "Tipo de planta desconhecido." in capsys.readouterr().out
    commands.cmd_plant(inside, ["1", "1", "c"])
    commands.cmd_plant(inside, ["1", "1", "r"])
    assert "Já existe uma planta nessa posição." in capsys.readouterr().out
    commands.cmd_plant(inside, ["1", "1"])
    assert "Uso: '>planta <linha> <coluna> <tipo>'." in capsys.readouterr().out


def test_cmd_harvest(inside, capsys):
    commands.cmd_plant(inside, ["1", "2", "r"])
    commands.cmd_harvest(inside, ["1", "2"])
    assert not inside.garden.soil(0, 1).has_plant()
    assert "foi colhida" in capsys.readouterr().out


def test_cmd_list_area(inside, capsys):
    commands.cmd_list_area(inside)
    assert "  Nenhuma célula ocupada." in capsys.readouterr().out
    commands.cmd_plant(inside, ["1", "2", "r"])
    capsys.readouterr()
    commands.cmd_list_area(inside)
    assert "  (1,2) - Planta: R" in capsys.readouterr().out


def test_cmd_list_plants_and_plant(inside, capsys):
    commands.cmd_plant(inside, ["1", "1", "r"])
    capsys.readouterr()
    commands.cmd_list_plants(inside)
    assert inside.garden.list_plants() in capsys.readouterr().out
    commands.cmd_list_plant(inside, ["1", "1"])
    assert inside.garden.list_plant(0, 0) in capsys.readouterr().out
    commands.cmd_list_plant(inside, ["7", "1"])
    assert commands.OUT_OF_BOUNDS in capsys.readouterr().out


def test_cmd_list_soil(inside, capsys):
    commands.cmd_list_soil(inside, ["2", "2"])
    assert inside.garden.soil(1, 1).describe() in capsys.readouterr().out
    commands.cmd_list_soil(inside, [])
    assert "Utilização:" in capsys.readouterr().out


def test_cmd_list_tools(capsys):
    commands.cmd_list_tools()
    assert "Funcionalidade por implementar!" in capsys.readouterr().out


def test_cmd_enter_and_leave(capsys):
    s = FakeSession(Garden(3, 3))
    commands.cmd_enter(s, ["1", "2"])
    assert s.garden.gardener.inside
    assert s.garden.gardener.position == (0, 1)
    assert "Jardineiro entrou em (A,B)" in capsys.readouterr().out
    commands.cmd_leave(s)
    assert not s.garden.gardener.inside
    commands.cmd_leave(s)
    assert "O jardineiro já está fora do jardim." in capsys.readouterr().out


def test_cmd_enter_out_of_bounds(capsys):
    s = FakeSession(Garden(2, 2))
    commands.cmd_enter(s, ["3", "1"])
    assert not s.garden.gardener.inside
    assert commands.OUT_OF_BOUNDS in capsys.readouterr().out


def test_cmd_move(inside, capsys):
    commands.cmd_move(inside, "d")
    assert inside.garden.gardener.position == (0, 1)
    commands.cmd_move(inside, "c")
    assert inside.garden.gardener.position == (0, 1)
    assert "Movimento inválido" in capsys.readouterr().out
    commands.cmd_move(inside, "x")
    assert "Direção inválida." in capsys.readouterr().out


def test_cmd_move_outside(capsys):
    s = FakeSession(Garden(2, 2))
    commands.cmd_move(s, "d")
    assert commands.GARDENER_OUTSIDE in capsys.readouterr().out


def test_tool_commands(inside, capsys):
    commands.cmd_drop_tool(inside)
    assert "Erro: o jardineiro não nenhuma ferramenta na mão." in capsys.readouterr().out
    commands.cmd_pick_tool(inside, [])
    assert "Uso: pega <n>" in capsys.readouterr().out
    commands.cmd_pick_tool(inside, ["7"])
    assert "número de série 7" in capsys.readouterr().out


def test_cmd_buy(inside, session, capsys):
    commands.cmd_buy(session, ["g"])
    assert "Não existe jardim." in capsys.readouterr().out
    commands.cmd_buy(inside, ["g"])
    assert "Instancia de g" in capsys.readouterr().out
    commands.cmd_buy(inside, ["q"])
    assert "Apenas disponivel para compra" in capsys.readouterr().out
    commands.cmd_buy(inside, ["g", "t"])
    assert "Uso: apaga <c>" in capsys.readouterr().out


@pytest.mark.parametrize("name,valid", [("jogo", True), ("a.txt", False), ("a/b", False)])
def test_is_valid_filename(name, valid):
    assert commands.is_valid_filename(name) is valid


def test_save_and_delete(tmp_path, monkeypatch, inside, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Save").mkdir()
    assert not commands.save_exists("jogo", "Save")
    commands.cmd_save(inside, ["jogo"])
    assert (tmp_path / "Save" / "jogo.txt").exists()
    assert commands.save_exists("jogo", "Save")
    commands.cmd_delete(["jogo"])
    assert not (tmp_path / "Save" / "jogo.txt").exists()
    assert "apagada com sucesso" in capsys.readouterr().out


def test_save_existing_asks(tmp_path, monkeypatch, inside, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Save").mkdir()
    assert commands.create_save_file("jogo")
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n"))
    commands.cmd_save(inside, ["jogo"])
    assert "Nao foi gravado o ficheiro!" in capsys.readouterr().out


def test_create_save_file_without_folder(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert commands.create_save_file("jogo") is False


def test_restore(tmp_path, monkeypatch, session, capsys):
    monkeypatch.chdir(tmp_path)
    commands.cmd_restore(session, ["nada"])
    assert "Gravacao com nome: nada nao existe!" in capsys.readouterr().out


def test_run_script(tmp_path, monkeypatch, session, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Script").mkdir()
    (tmp_path / "Script" / "demo.txt").write_text("jardim 2 2\n\najuda\n", encoding="utf-8")
    commands.cmd_run_script(session, ["demo"])
    assert session.processed == ["jardim 2 2", "ajuda"]
    assert "> jardim 2 2" in capsys.readouterr().out


def test_run_script_missing(tmp_path, monkeypatch, session):
    monkeypatch.chdir(tmp_path)
    commands.cmd_run_script(session, ["demo"])
    assert session.processed == []


def test_cmd_quit(session, capsys):
    commands.cmd_quit(session)
    assert session.active is False
    assert "A terminar o simulador..." in capsys.readouterr().out