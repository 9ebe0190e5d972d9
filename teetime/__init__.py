from .admission import add_groups_to_waiting_list, admit_groups, build_group
from .config import CourseConfig
from .exceptions import (
    DuplicateGroupError,
    InvalidCourseConfigError,
    InvalidGroupError,
    MissingGroupIdError,
    StateNotInitializedError,
    TeeTimeError,
)
from .finish_hole import finish_hole
from .initializer import initialize_from_config, initialize_state
from .result import ScheduleResult
from .scheduler import fill_empty_tee_boxes
from .service import TeeTimeService
from .status import CourseStatus, summarize_state
from .tee_off import tee_off_group

__all__ = [
    "add_groups_to_waiting_list",
    "admit_groups",
    "build_group",
    "CourseConfig",
    "DuplicateGroupError",
    "InvalidCourseConfigError",
    "InvalidGroupError",
    "MissingGroupIdError",
    "StateNotInitializedError",
    "TeeTimeError",
    "finish_hole",
    "initialize_from_config",
    "initialize_state",
    "ScheduleResult",
    "fill_empty_tee_boxes",
    "TeeTimeService",
    "CourseStatus",
    "summarize_state",
    "tee_off_group",
]
