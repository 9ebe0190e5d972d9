from .base import BaseTeeModel
from .enums import CompletionRule, GroupStatus
from .group import GolfGroup
from .course_state import CourseState

__all__ = ["BaseTeeModel", "CompletionRule", "CourseState", "GolfGroup", "GroupStatus"]
