from collections.abc import Callable
from logging import getLogger
from random import Random
from time import perf_counter
from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from ..services.game import GameService
from ..types.enums import AccuracyBucket, MenuChoice
from ..types.setting import Setting
from .stopwatch import Stopwatch

logger = getLogger(__name__)

BAR_COLORS = [
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
]


class GameConsole:
    """
    Terminal front end: menu, rounds, stats table and accuracy bar chart.

    `stream` replaces stdin when given, every prompt reads one line from it.
    `clock` times the rounds.
    """

    def __init__(
        self,
        setting: Setting,
        service: GameService,
        console: Console | None = None,
        stream: TextIO | None = None,
        rng: Random | None = None,
        clock: Callable[[], float] = perf_counter,
    ) -> None:
        self._setting = setting
        self._service = service
        self._console = console or Console()
        self._stream = stream
        self._rng = rng or Random()
        self._clock = clock

    def _clear(self):
        if self._setting.game.clear_screen:
            self._console.clear()

    def _read_line(self, prompt: str) -> str:
        line = self._console.input(prompt, stream=self._stream)
        return line.rstrip("\r\n")

    def _wait_for_enter(self):
        self._read_line("\n[bold green]Press Enter to Return to Menu...[/]")

    def show_menu(self):
        while True:
            self._clear()
            self._console.print("[bold yellow]Speed Type[/]")
            choices = list(MenuChoice)
            for index, item in enumerate(choices, start=1):
                self._console.print(f"  {index}. {item}")

            picked = Prompt.ask(
                "Choose an option",
                choices=[str(i) for i in range(1, len(choices) + 1)],
                console=self._console,
                stream=self._stream,
            )
            choice = choices[int(picked) - 1]
            logger.debug("menu choice: %s", choice)

            match choice:
                case MenuChoice.START_GAME:
                    self.start_game()
                case MenuChoice.VIEW_STATS:
                    self.show_game_stats()
                case MenuChoice.VIEW_CHART:
                    self.show_bar_chart()
                case MenuChoice.QUIT:
                    return

    def start_game(self):
        sentence = self._service.new_round()

        self._clear()
        self._console.print("[bold green]Type This Sentence:[/]")
        self._console.print(Text(sentence, style="italic yellow"))
        self._read_line("\n[gray50]Press Enter When Ready...[/]")

        stopwatch = Stopwatch(self._clock)
        stopwatch.start()
        typed_input = self._read_line("\n[bold cyan]Start Typing:[/] ")
        stopwatch.stop()

        ret = self._service.finish_round(typed_input, sentence, stopwatch.elapsed)
        if not ret.ok or ret.data is None:
            message = ret.error.message if ret.error else "unknown error"
            self._console.print(
                Text(f"\nRound discarded: {message}", style="bold red")
            )
            self._wait_for_enter()
            return

        result = ret.data
        self._console.print("\n[bold yellow]Results:[/]")
        self._console.print(f"[bold]Time Taken:[/] {result.time_taken:.2f} Seconds")
        self._console.print(f"[bold]Words Per Minute (WPM):[/] {result.wpm:.2f}")
        self._console.print(f"[bold]Accuracy:[/] {result.accuracy}%")
        self._wait_for_enter()

    def show_game_stats(self):
        self._clear()
        table = Table()
        table.add_column("#")
        table.add_column("WPM")
        table.add_column("Accuracy")
        table.add_column("Time Taken (s)")

        ret = self._service.stats()
        for index, result in enumerate(ret.data or [], start=1):
            table.add_row(
                f"{index}",
                f"{result.wpm:.2f}",
                f"{result.accuracy}%",
                f"{result.time_taken:.2f}",
            )

        self._console.print(table)
        self._wait_for_enter()

    def show_bar_chart(self):
        self._clear()
        self._console.print("\n[bold yellow]Bar chart:[/]")

        ret = self._service.chart()
        counts: dict[AccuracyBucket, int] = ret.data or {}
        self._console.print(self.render_bar_chart(counts))
        self._wait_for_enter()

    def render_bar_chart(self, counts: dict[AccuracyBucket, int]) -> Table:
        label_width = max(len(bucket) for bucket in AccuracyBucket)
        bar_width = max(1, self._setting.game.chart_width - label_width - 4)
        peak = max(counts.values(), default=0)

        table = Table.grid(padding=(0, 1))
        table.add_column(justify="right", width=label_width)
        table.add_column()
        for bucket in AccuracyBucket:
            count = counts.get(bucket, 0)
            length = round(count / peak * bar_width) if peak else 0
            bar = Text("█" * length, style=self._rng.choice(BAR_COLORS))
            bar.append(f" {count}")
            table.add_row(str(bucket), bar)

        return table
