from io import StringIO
from rich.console import Console
from wordladder.prompts.console import ConsolePrompter
from wordladder.prompts.templates import LENGTH_MISMATCH_MESSAGE, NOT_A_WORD_MESSAGE
from wordladder.words.bank import Dictionary

def make_prompter(dictionary, lines):
    output = StringIO()
    console = Console(file=output, force_terminal=False, color_system=None, width=200)
    return ConsolePrompter(dictionary, console, stream=StringIO(lines)), output

def test_ask_endpoints(cat_dog_dictionary):
    prompter, output = make_prompter(cat_dog_dictionary, "cat\nDOG\n")
    assert prompter.ask_endpoints() == ("cat", "dog")
    assert "source word [return to quit]" in output.getvalue()
    assert "destination word [return to quit]" in output.getvalue()

def test_reprompts_until_english_word(cat_dog_dictionary):
    prompter, output = make_prompter(cat_dog_dictionary, "cax\nzzz\ncot\n")
    assert prompter.ask_word("Word: ") == "cot"
    assert output.getvalue().count(NOT_A_WORD_MESSAGE) == 2

def test_empty_line_quits(cat_dog_dictionary):
    prompter, _ = make_prompter(cat_dog_dictionary, "\n")
    assert prompter.ask_endpoints() is None

def test_quit_at_destination(cat_dog_dictionary):
    prompter, _ = make_prompter(cat_dog_dictionary, "cat\n\n")
    assert prompter.ask_endpoints() is None

def test_end_of_input_quits(cat_dog_dictionary):
    prompter, _ = make_prompter(cat_dog_dictionary, "")
    assert prompter.ask_word("Word: ") is None

def test_length_mismatch_asks_for_new_destination():
    dictionary = Dictionary(["cat", "cats", "dog"])
    prompter, output = make_prompter(dictionary, "cat\ncats\ndog\n")
    assert prompter.ask_endpoints() == ("cat", "dog")
    assert LENGTH_MISMATCH_MESSAGE in output.getvalue()

def test_length_mismatch_then_quit():
    dictionary = Dictionary(["cat", "cats"])
    prompter, _ = make_prompter(dictionary, "cat\ncats\n\n")
    assert prompter.ask_endpoints() is None

def test_whitespace_line_reprompts(cat_dog_dictionary):
    prompter, output = make_prompter(cat_dog_dictionary, "  \ncat\n")
    assert prompter.ask_word("Word: ") == "cat"
    assert NOT_A_WORD_MESSAGE in output.getvalue()
