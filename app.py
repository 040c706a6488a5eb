"""
Main Application - Orchestrates Game Flow with TUI
"""
from textual.app import App
import asyncio

# Import screens
from undercover.screens import (
    SetupScreen, RoleRevealScreen, RoundScreen, MrWhiteGuessScreen, GameOverScreen
)

# Import game session
from undercover.config import GAME_CONFIG
from undercover.round_engine import EngineState
from undercover.session import GameSession


class UndercoverApp(App):
    """Shared-device Undercover TUI Application"""

    TITLE = "Undercover"
    SUB_TITLE = "Pass-the-device Edition"

    def __init__(self, session: GameSession = None):
        super().__init__()
        self.session = session or GameSession()

    async def on_mount(self) -> None:
        """Initialize application"""
        # Run game in background worker so UI remains responsive
        self.run_worker(self._run(), exclusive=True)

    async def _run(self) -> None:
        """Setup, then matches until the players leave"""
        while True:
            setup_screen = SetupScreen(self.session)
            self.push_screen(setup_screen)
            await setup_screen.done_event.wait()
            self.pop_screen()

            while True:
                await self._reveal_pass()
                await self._play_rounds()

                choice = await self._show_game_over()
                if choice == "again":
                    continue
                if choice == "new":
                    self.session.reset()
                    break
                self.exit()
                return

    async def _reveal_pass(self) -> None:
        reveal_screen = RoleRevealScreen(self.session)
        self.push_screen(reveal_screen)
        await reveal_screen.done_event.wait()
        self.pop_screen()

    async def _play_rounds(self) -> None:
        engine = self.session.round_engine
        while engine.state is not EngineState.GAME_OVER:
            round_screen = RoundScreen(engine)
            self.push_screen(round_screen)
            await round_screen.done_event.wait()
            self.pop_screen()

            if engine.state is EngineState.MR_WHITE_CAPTURED:
                guess_screen = MrWhiteGuessScreen(engine)
                self.push_screen(guess_screen)
                await guess_screen.done_event.wait()
                self.pop_screen()

    async def _show_game_over(self) -> str:
        game_over_screen = GameOverScreen(self.session.result, self.session.words)
        self.push_screen(game_over_screen)
        await game_over_screen.done_event.wait()

        if game_over_screen.choice == "again":
            game_over_screen.show_status("Preparing new words...")
            await asyncio.sleep(GAME_CONFIG["replay_delay_seconds"])
            self.session.play_again()

        self.pop_screen()
        return game_over_screen.choice


# ============================================================================
# Entry Point
# ============================================================================

def main():
    UndercoverApp().run()


if __name__ == "__main__":
    main()
