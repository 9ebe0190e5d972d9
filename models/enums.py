from enum import Enum


class GroupStatus(str, Enum):
    """Lifecycle of a group on the course."""
    WAITING = "WAITING"      # admitted, never teed off from the waiting list
    PLAYING = "PLAYING"      # placed on a tee box at least once
    FINISHED = "FINISHED"    # round complete, no longer held by the state


class CompletionRule(str, Enum):
    """Which course-length convention ends a round."""
    HOLES_COMPLETED = "holes_completed"  # holes_completed reaches round_goal
    LAST_HOLE = "last_hole"              # next hole would be past total_holes
