"""
Game Logger - Records match events to file
Words and roles stay out of the log until the match is over
"""
import os
from datetime import datetime
from typing import List, Optional

from undercover.config import LOG_CONFIG


class GameLogger:
    """Logs match events to a plaintext file"""

    def __init__(self, session_id: str, log_dir: Optional[str] = None):
        self.session_id = session_id
        self.log_dir = log_dir or LOG_CONFIG["log_dir"]
        self.log_file = os.path.join(self.log_dir, LOG_CONFIG["log_file"])

        os.makedirs(self.log_dir, exist_ok=True)

        # Each session starts a fresh log
        with open(self.log_file, 'w', encoding='utf-8') as f:
            f.write("=== Undercover Game Log ===\n")
            f.write(f"Session ID: {session_id}\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
            f.write("=" * 50 + "\n\n")

    def log(self, message: str):
        """Write a log message with timestamp"""
        timestamp = datetime.now().strftime('%H:%M:%S')
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(f"[{timestamp}] {message}\n")

    def log_section(self, title: str):
        """Write a section header"""
        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write("\n" + "=" * 50 + "\n")
            f.write(f"{title}\n")
            f.write("=" * 50 + "\n")

    def log_match_start(self, match_number: int, names: List[str], mr_white_count: int,
                        undercover_count: int):
        self.log_section(f"Match {match_number}")
        self.log(f"Players ({len(names)}): {', '.join(names)}")
        self.log(f"Mr. White: {mr_white_count}, Undercover: {undercover_count}")

    def log_clue_order(self, round_number: int, names: List[str]):
        self.log_section(f"Round {round_number} - Clue Order")
        for position, name in enumerate(names, 1):
            self.log(f"  {position}. {name}")

    def log_vote(self, round_number: int, name: str, captured: bool):
        if captured:
            self.log(f"Round {round_number}: {name} was voted out and revealed as Mr. White")
        else:
            self.log(f"Round {round_number}: {name} was ELIMINATED")

    def log_guess_outcome(self, name: str, outcome: str):
        self.log(f"Mr. White guess by {name}: {outcome}")

    def log_game_end(self, winner: str, roster: List, common_word: str, undercover_word: str):
        """Log final roster with roles revealed"""
        self.log_section("Game Over")
        self.log(f"Winner: {winner}")
        self.log(f"Common word: {common_word}")
        self.log(f"Undercover word: {undercover_word}")
        for player in roster:
            status = "eliminated" if player.is_eliminated else "active"
            self.log(f"  {player.name}: {player.role.value} ({status})")
        self.log(f"Ended: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
