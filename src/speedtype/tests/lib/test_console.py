from io import StringIO
from random import Random
from time import time

import time_machine
from rich.console import Console

from ...lib.console import GameConsole
from ...lib.sentence_provider import SentenceProvider
from ...services.game import GameService
from ...types.enums import AccuracyBucket
from ..helper import *


def make_console(
    setting: Setting, service: GameService, stream: StringIO
) -> tuple[GameConsole, StringIO]:
    output = StringIO()
    console = Console(file=output, width=100, color_system=None)
    game_console = GameConsole(
        setting=setting,
        service=service,
        console=console,
        stream=stream,
        rng=Random(0),
        clock=time,
    )
    return game_console, output


def test_console_quit(setting: Setting, sentence_provider: SentenceProvider):
    service = GameService(sentence_provider=sentence_provider)
    game_console, output = make_console(setting, service, StringIO("4\n"))

    game_console.show_menu()

    assert "Speed Type" in output.getvalue()
    assert "Start Game" in output.getvalue()


def test_console_invalid_choice_reprompts(
    setting: Setting, sentence_provider: SentenceProvider
):
    service = GameService(sentence_provider=sentence_provider)
    game_console, output = make_console(setting, service, StringIO("9\n4\n"))

    game_console.show_menu()

    assert "Please select one of the available options" in output.getvalue()


def test_console_play_round(setting: Setting, sentence_provider: SentenceProvider):
    service = GameService(sentence_provider=sentence_provider)

    # menu, ready, typed sentence (15s), back to menu, quit
    lines = ["1", "", "The quick brown fox", "", "4"]
    with time_machine.travel(NOW, tick=False) as traveller:
        stream = TypingStream(lines, traveller, seconds_per_line=15)
        game_console, output = make_console(setting, service, stream)
        game_console.show_menu()

    text = output.getvalue()
    assert "The quick brown fox" in text
    assert "Time Taken: 15.00 Seconds" in text
    assert "Words Per Minute (WPM): 16.00" in text
    assert "Accuracy: 100%" in text

    assert service.history.entries() == [
        GameResult(wpm=16.0, accuracy=100, time_taken=15.0)
    ]


def test_console_discards_round_without_elapsed_time(
    setting: Setting, sentence_provider: SentenceProvider
):
    service = GameService(sentence_provider=sentence_provider)

    lines = ["1", "", "The quick brown fox", "", "4"]
    with time_machine.travel(NOW, tick=False) as traveller:
        stream = TypingStream(lines, traveller)
        game_console, output = make_console(setting, service, stream)
        game_console.show_menu()

    assert "Round discarded" in output.getvalue()
    assert len(service.history) == 0


def test_console_game_stats(setting: Setting, sentence_provider: SentenceProvider):
    service = GameService(sentence_provider=sentence_provider)
    service.finish_round("abx", "abc", 10.0)
    service.finish_round("the quick", "the quick", 30.0)

    game_console, output = make_console(setting, service, StringIO("\n"))
    game_console.show_game_stats()

    text = output.getvalue()
    for header in ["#", "WPM", "Accuracy", "Time Taken (s)"]:
        assert header in text

    newest = text.index("100%")
    oldest = text.index("67%")
    assert newest < oldest
    assert "4.00" in text
    assert "30.00" in text


def test_console_bar_chart(setting: Setting, sentence_provider: SentenceProvider):
    service = GameService(sentence_provider=sentence_provider)
    for typed in ["abc", "abc", "abx"]:
        service.finish_round(typed, "abc", 10.0)

    game_console, output = make_console(setting, service, StringIO("\n"))
    game_console.show_bar_chart()

    text = output.getvalue()
    assert "Bar chart:" in text
    for bucket in AccuracyBucket:
        assert bucket in text


def test_console_render_bar_chart_scales_to_peak(
    setting: Setting, sentence_provider: SentenceProvider
):
    # 7 label columns and 4 for spacing leave 40 for the bar
    setting.game.chart_width = 51
    service = GameService(sentence_provider=sentence_provider)
    game_console, _ = make_console(setting, service, StringIO())

    counts = {bucket: 0 for bucket in AccuracyBucket}
    counts[AccuracyBucket.P100] = 2
    counts[AccuracyBucket.P50] = 1

    output = StringIO()
    Console(file=output, width=100, color_system=None).print(
        game_console.render_bar_chart(counts)
    )
    rows = {
        line.split()[0]: line.count("█") for line in output.getvalue().splitlines()
    }

    assert len(rows) == 11
    assert rows["100%"] == 40
    assert rows["50%-59%"] == 20
    assert rows["0%-9%"] == 0
