"""Host-facing entry points for the tee time engine.

Every method takes a full CourseState snapshot and returns a new one; the
service keeps no course data of its own. Hosts persist whatever state comes
back and must serialize commands for the same course.
"""

from typing import Iterable, List, Optional, Tuple

from models import CourseState, GolfGroup
from teetime.admission import add_groups_to_waiting_list, admit_groups
from teetime.config import CourseConfig
from teetime.exceptions import MissingGroupIdError, StateNotInitializedError
from teetime.finish_hole import finish_hole
from teetime.initializer import initialize_state
from teetime.logging import get_logger
from teetime.result import ScheduleResult
from teetime.scheduler import fill_empty_tee_boxes
from teetime.status import CourseStatus, summarize_state
from teetime.tee_off import tee_off_group

logger = get_logger(__name__)

PACKAGE_LOGGER = "teetime"


class TeeTimeService:
    """Stateless command surface over a CourseState.

    Usage:
        service = TeeTimeService(CourseConfig.from_env())
        state = service.initialize()
        result = service.add_group(state, "Smith", players=4)
        result = service.tee_off(result.state, "G1")
    """

    def __init__(self, config: Optional[CourseConfig] = None):
        self.config = config or CourseConfig()
        get_logger(PACKAGE_LOGGER).setLevel(self.config.log_level)

    # ================================================================
    # Guards
    # ================================================================

    @staticmethod
    def _require_state(state: Optional[CourseState]) -> CourseState:
        if state is None:
            raise StateNotInitializedError("State not initialized.")
        return state

    @staticmethod
    def _require_group_id(group_id) -> str:
        if group_id is None or not str(group_id).strip():
            raise MissingGroupIdError("groupId is required.")
        return str(group_id).strip()

    # ================================================================
    # Commands
    # ================================================================

    def initialize(
        self,
        total_holes: Optional[int] = None,
        max_groups_per_tee_box: Optional[int] = None,
    ) -> CourseState:
        """Fresh state; unspecified values come from the service config."""
        return initialize_state(
            total_holes if total_holes is not None else self.config.total_holes,
            max_groups_per_tee_box if max_groups_per_tee_box is not None else self.config.max_groups_per_tee_box,
            completion_rule=self.config.completion_rule,
            round_goal=self.config.round_goal,
        )

    def add_groups(self, state: Optional[CourseState], groups: Iterable[GolfGroup]) -> CourseState:
        """Append pre-built groups to the waiting list without scheduling."""
        return add_groups_to_waiting_list(self._require_state(state), groups)

    def add_group(self, state: Optional[CourseState], name: Optional[str], players: int = 4) -> ScheduleResult:
        """Admit one new group with a generated id and try to place it at once."""
        state = self._require_state(state)
        if name is None or not name.strip():
            raise MissingGroupIdError("Group name is required.")
        admitted, groups = admit_groups(state, [(name, players)])
        admission = ScheduleResult(state=admitted, logs=[f"Group {groups[0].name} added to the waiting list."])
        return admission.then(fill_empty_tee_boxes(admitted))

    def admit(self, state: Optional[CourseState], entries: Iterable[Tuple[str, int]]) -> Tuple[CourseState, List[GolfGroup]]:
        """Admit (name, players) pairs with generated ids; no scheduling."""
        return admit_groups(self._require_state(state), entries)

    def fill(self, state: Optional[CourseState]) -> ScheduleResult:
        return fill_empty_tee_boxes(self._require_state(state))

    def tee_off(self, state: Optional[CourseState], group_id: Optional[str]) -> ScheduleResult:
        state = self._require_state(state)
        return tee_off_group(state, self._require_group_id(group_id))

    def finish_hole(self, state: Optional[CourseState], group_id: Optional[str]) -> ScheduleResult:
        state = self._require_state(state)
        return finish_hole(state, self._require_group_id(group_id))

    def status(self, state: Optional[CourseState]) -> CourseStatus:
        return summarize_state(self._require_state(state))

    # ================================================================
    # Persistence helpers
    # ================================================================

    def load(self, payload: Optional[str]) -> CourseState:
        """Rebuild a state from its stored JSON blob."""
        if not payload:
            raise StateNotInitializedError("State not initialized.")
        return CourseState.from_json(payload)

    @staticmethod
    def dump(state: CourseState) -> str:
        return state.to_json()
