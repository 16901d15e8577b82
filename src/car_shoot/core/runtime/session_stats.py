"""
session_stats.py
----------------
Scoreboard for the running process: current round score and high score.
"""


class SessionStats:
    """Score container. Round resets keep the high score."""

    def __init__(self):
        self.score = 0
        self.high_score = 0

    def add_score(self, amount: int = 1):
        """Add to current score and raise the high score if exceeded."""
        if amount < 0:
            raise ValueError(f"Score can only increase, got {amount}")
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    def add_kill(self):
        """Score one destroyed enemy."""
        self.add_score(1)

    def reset(self):
        """Reset for a new round. Preserves high score."""
        self.score = 0
