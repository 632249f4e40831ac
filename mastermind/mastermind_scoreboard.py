"""Per-party point totals addressed by role."""

from __future__ import annotations

from .mastermind_state import Role, RoleAssignment


class Scoreboard:
    """Accumulates points for the two parties of one game.

    Totals belong to parties, so they follow a player when roles swap. Reads
    and awards are addressed by role through the current assignment.
    """

    def __init__(self, assignment: RoleAssignment):
        self._assignment = assignment
        self._totals: dict[str, int] = {
            assignment.codemaker.player_id: 0,
            assignment.codebreaker.player_id: 0,
        }

    def rebind(self, assignment: RoleAssignment) -> None:
        """Point role lookups at a new assignment of the same two parties."""
        if set(self._totals) != {assignment.codemaker.player_id, assignment.codebreaker.player_id}:
            raise ValueError("Scoreboard can only be rebound to the same two players.")
        self._assignment = assignment

    def award(self, role: Role, points: int) -> int:
        """Add points to whoever holds `role` and return their new total."""
        if points < 0:
            raise ValueError("Awarded points must be >= 0.")
        player_id = self._assignment.player_for(role).player_id
        self._totals[player_id] += points
        return self._totals[player_id]

    def points(self, role: Role) -> int:
        return self._totals[self._assignment.player_for(role).player_id]

    def points_for(self, player_id: str) -> int:
        return self._totals[player_id]

    def totals(self) -> dict[str, int]:
        return dict(self._totals)
