from pathlib import Path
import pytest
from rich.console import Console
from wordladder import cli
from wordladder.words.bank import Dictionary

DATA_DICTIONARY = Path(__file__).resolve().parent.parent / "wordladder" / "data" / "dictionary.txt"

@pytest.fixture
def cat_dog_dictionary():
    return Dictionary(["cat", "cot", "cog", "dog", "dot"])

@pytest.fixture
def hit_cog_dictionary():
    return Dictionary(["hit", "hot", "dot", "dog", "lot", "log", "cog"])

@pytest.fixture
def shipped_dictionary():
    return Dictionary.from_file(DATA_DICTIONARY)

@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# test words\ncat\ncot\ncog\ndog\ndot\n\nhit\n", encoding="utf-8")
    return path

@pytest.fixture
def plain_console(monkeypatch):
    # Colourless output regardless of FORCE_COLOR in the environment
    console = Console(force_terminal=False, color_system=None, width=200)
    monkeypatch.setattr(cli, "console", console)
    return console
