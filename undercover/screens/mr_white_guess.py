"""
Mr. White Guess Screen - countdown and one guess at the common word
"""
from textual.app import ComposeResult
from textual.widgets import Header, Footer, Static, Input, Button, Label
from textual.containers import Container, Vertical
from textual.binding import Binding
from textual.screen import Screen
from textual import on
from rich.text import Text
from typing import Optional
import asyncio

from undercover.config import GAME_CONFIG
from undercover.errors import InvalidTransitionError
from undercover.round_engine import GuessOutcome


FEEDBACK = {
    GuessOutcome.CORRECT: ("Correct guess. Mr. White wins!", "bold green"),
    GuessOutcome.WRONG: ("Wrong guess. You are eliminated.", "bold red"),
    GuessOutcome.TIMEOUT: ("Time is up. You failed to guess.", "bold red"),
}


class MrWhiteGuessScreen(Screen):
    """Captured Mr. White gets one guess before the timer runs out"""

    CSS = """
    MrWhiteGuessScreen {
        background: $surface;
    }

    #guess_container {
        width: 100%;
        height: 1fr;
        align: center middle;
    }

    #guess_panel {
        width: 70;
        height: auto;
        background: $panel;
        border: heavy $error;
        padding: 2;
    }

    #guess_title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $error;
        margin-bottom: 1;
    }

    #timer_bar {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    #guess_input {
        margin-bottom: 1;
    }

    #submit_guess {
        width: 100%;
    }

    #status_text {
        width: 100%;
        text-align: center;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "app.quit", "Quit"),
    ]

    def __init__(self, engine, feedback_delay: Optional[float] = None):
        super().__init__()
        self.engine = engine
        self.capture = engine.capture
        self.feedback_delay = (
            feedback_delay if feedback_delay is not None else GAME_CONFIG["feedback_delay_seconds"]
        )
        self.countdown_task: Optional[asyncio.Task] = None
        self.feedback_shown = False
        self.done_event = asyncio.Event()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer()

        with Container(id="guess_container"):
            with Vertical(id="guess_panel"):
                yield Static(Text(f"{self.capture.player.name}, your identity is exposed."), id="guess_title")
                yield Static(self._timer_text(self.capture.time_left), id="timer_bar")
                yield Input(placeholder="Your guess", id="guess_input")
                yield Button("Confirm guess", id="submit_guess", variant="error")
                yield Label("", id="status_text")

    def on_mount(self) -> None:
        self.query_one("#guess_input", Input).focus()
        self.countdown_task = asyncio.create_task(self._run_countdown())

    def on_unmount(self) -> None:
        if self.countdown_task:
            self.countdown_task.cancel()

    @staticmethod
    def _timer_text(remaining: int) -> str:
        if remaining > 10:
            return f"⏱️ Time left: {remaining}s"
        return f"[bold red]⏱️ Time left: {remaining}s![/]"

    def _on_tick(self, remaining: int) -> None:
        try:
            self.query_one("#timer_bar", Static).update(self._timer_text(remaining))
        except Exception:
            pass

    async def _run_countdown(self) -> None:
        outcome = await self.engine.run_countdown(on_tick=self._on_tick)
        if outcome is GuessOutcome.TIMEOUT:
            await self._show_feedback(outcome)

    @on(Input.Submitted, "#guess_input")
    @on(Button.Pressed, "#submit_guess")
    def submit_guess(self) -> None:
        guess = self.query_one("#guess_input", Input).value
        if not guess.strip() or self.capture.judging or self.capture.settled:
            return
        self._set_busy(True)
        self.set_status("Judging...", "yellow")
        self.run_worker(self._judge_guess(guess), exclusive=True)

    async def _judge_guess(self, guess: str) -> None:
        try:
            outcome = await self.engine.submit_guess(guess)
        except InvalidTransitionError:
            return
        except Exception as e:
            # Capture stays open: let the player try again
            self._set_busy(False)
            self.set_status(f"⚠️ Judge failed ({e}). Try again.", "bold yellow")
            return

        await self._show_feedback(outcome)

    async def _show_feedback(self, outcome: GuessOutcome) -> None:
        if self.feedback_shown:
            return
        self.feedback_shown = True
        self._set_busy(True)

        message, style = FEEDBACK[outcome]
        self.set_status(message, style)
        await asyncio.sleep(self.feedback_delay)
        self.done_event.set()

    def _set_busy(self, busy: bool) -> None:
        self.query_one("#guess_input", Input).disabled = busy
        self.query_one("#submit_guess", Button).disabled = busy

    def set_status(self, message: str, style: str = "white") -> None:
        self.query_one("#status_text", Label).update(Text(message, style=style))
