import pytest
from pydantic import ValidationError

from models import CompletionRule, CourseState, GolfGroup, GroupStatus
from teetime import (
    CourseConfig,
    DuplicateGroupError,
    InvalidCourseConfigError,
    InvalidGroupError,
    MissingGroupIdError,
    StateNotInitializedError,
    TeeTimeService,
    add_groups_to_waiting_list,
    admit_groups,
    build_group,
    initialize_from_config,
    initialize_state,
    summarize_state,
)


@pytest.fixture
def service():
    return TeeTimeService(CourseConfig(total_holes=9, max_groups_per_tee_box=3))


# ================================================================
# Initializer
# ================================================================

@pytest.mark.parametrize("kwargs", [
    {"total_holes": 0},
    {"total_holes": -18},
    {"max_groups_per_tee_box": 0},
    {"round_goal": 0},
    {"total_holes": True},
    {"total_holes": 18.5},
])
def test_initializer_rejects_invalid_inputs(kwargs):
    with pytest.raises(InvalidCourseConfigError):
        initialize_state(**kwargs)


def test_initializer_rejects_unknown_completion_rule():
    with pytest.raises(InvalidCourseConfigError, match="sudden_death"):
        initialize_state(18, completion_rule="sudden_death")

    state = initialize_state(18, completion_rule="last_hole")
    assert state.completion_rule == CompletionRule.LAST_HOLE


def test_invalid_config_is_a_value_error():
    with pytest.raises(ValueError):
        initialize_state(0)


def test_initialize_from_config():
    config = CourseConfig(total_holes=27, max_groups_per_tee_box=2,
                          completion_rule=CompletionRule.LAST_HOLE, round_goal=27)
    state = initialize_from_config(config)
    assert state.tee_box_holes() == [1, 10, 19]
    assert state.max_groups_per_tee_box == 2
    assert state.completion_rule == CompletionRule.LAST_HOLE
    assert state.round_goal == 27


# ================================================================
# Admission
# ================================================================

def test_add_groups_appends_without_scheduling():
    state = initialize_state(18)
    new_state = add_groups_to_waiting_list(state, [build_group("A", "Alpha"), build_group("B", "Bravo", 2)])

    assert [g.id for g in new_state.waiting_list] == ["A", "B"]
    assert all(g.status == GroupStatus.WAITING for g in new_state.waiting_list)
    assert new_state.tee_boxes[1] == []
    assert state.waiting_list == []


def test_add_groups_rejects_duplicate_ids():
    state = add_groups_to_waiting_list(initialize_state(18), [build_group("A", "Alpha")])

    with pytest.raises(DuplicateGroupError):
        add_groups_to_waiting_list(state, [build_group("A", "Again")])

    with pytest.raises(DuplicateGroupError):
        add_groups_to_waiting_list(state, [build_group("B", "Bravo"), build_group("B", "Bravo")])

    assert [g.id for g in state.waiting_list] == ["A"]


def test_build_group_rejects_empty_party():
    with pytest.raises(InvalidGroupError, match="Alpha"):
        build_group("G1", "Alpha", 0)
    assert build_group("G1", "Alpha", 6).players == 6


def test_admit_groups_generates_sequential_ids():
    state, groups = admit_groups(initialize_state(18), [("Alpha", 4), ("Bravo", 3)])
    assert [g.id for g in groups] == ["G1", "G2"]
    assert state.next_group_number == 3

    state, groups = admit_groups(state, [("Charlie", 2)])
    assert groups[0].id == "G3"
    assert [g.name for g in state.waiting_list] == ["Alpha", "Bravo", "Charlie"]


def test_admit_groups_skips_ids_already_in_use():
    state = add_groups_to_waiting_list(initialize_state(18), [build_group("G1", "Host Supplied")])
    state, groups = admit_groups(state, [("Alpha", 4)])
    assert groups[0].id == "G2"


def test_admission_resets_group_placement():
    group = GolfGroup(id="X", name="Alpha", status=GroupStatus.PLAYING, current_hole=5)
    state = add_groups_to_waiting_list(initialize_state(18), [group])
    assert state.waiting_list[0].status == GroupStatus.WAITING
    assert state.waiting_list[0].current_hole is None
    assert group.status == GroupStatus.PLAYING


# ================================================================
# Service
# ================================================================

def test_service_initialize_uses_config(service):
    state = service.initialize()
    assert state.total_holes == 9
    assert state.tee_box_holes() == [1]

    state = service.initialize(18, 2)
    assert state.tee_box_holes() == [1, 10]
    assert state.max_groups_per_tee_box == 2


def test_service_add_group_places_immediately(service):
    result = service.add_group(service.initialize(), "Alpha", players=2)
    assert result.logs == [
        "Group Alpha added to the waiting list.",
        "[New Tee Off] Group Alpha enters Tee Box 1 from the waiting list.",
    ]
    assert result.state.tee_boxes[1][0].players == 2


def test_service_full_flow(service):
    state = service.initialize()
    for name in ["Alpha", "Bravo", "Charlie", "Delta"]:
        state = service.add_group(state, name).state
    assert [g.name for g in state.waiting_list] == ["Delta"]

    result = service.tee_off(state, "G1")
    assert result.logs[0] == "[Tee Off] Group Alpha starts playing from Tee Box 1."

    result = service.finish_hole(result.state, "G1")
    assert result.state.groups_on_course["G1"].current_hole == 2

    status = service.status(result.state)
    assert status.waiting_count == 0
    assert [g.name for g in status.on_course] == ["Alpha"]


def test_service_add_group_accepts_large_party(service):
    result = service.add_group(service.initialize(), "Big Party", players=5)
    assert result.state.tee_boxes[1][0].players == 5
    assert result.logs[-1] == "[New Tee Off] Group Big Party enters Tee Box 1 from the waiting list."


def test_service_add_group_rejects_empty_party(service):
    state = service.initialize()
    with pytest.raises(InvalidGroupError):
        service.add_group(state, "Nobody", players=0)
    assert state.waiting_list == []


def test_service_admit_does_not_schedule(service):
    state, groups = service.admit(service.initialize(), [("Alpha", 4)])
    assert state.tee_boxes[1] == []
    assert service.fill(state).state.tee_boxes[1][0].id == groups[0].id


@pytest.mark.parametrize("call", [
    lambda s: s.fill(None),
    lambda s: s.tee_off(None, "G1"),
    lambda s: s.finish_hole(None, "G1"),
    lambda s: s.add_group(None, "Alpha"),
    lambda s: s.add_groups(None, []),
    lambda s: s.status(None),
    lambda s: s.load(None),
    lambda s: s.load(""),
])
def test_service_requires_initialized_state(service, call):
    with pytest.raises(StateNotInitializedError):
        call(service)


@pytest.mark.parametrize("group_id", [None, "", "   "])
def test_service_requires_group_id(service, group_id):
    state = service.initialize()
    with pytest.raises(MissingGroupIdError):
        service.tee_off(state, group_id)
    with pytest.raises(MissingGroupIdError):
        service.finish_hole(state, group_id)


@pytest.mark.parametrize("name", [None, "", "  "])
def test_service_requires_group_name(service, name):
    with pytest.raises(MissingGroupIdError):
        service.add_group(service.initialize(), name)


def test_service_soft_outcomes_are_not_errors(service):
    state = service.initialize()
    assert service.tee_off(state, "G1").logs[0].startswith("[Tee Off Blocked]")
    assert service.finish_hole(state, "G1").logs[0].startswith("[Move Error]")


def test_service_load_and_dump_round_trip(service):
    state = service.add_group(service.initialize(), "Alpha").state
    restored = service.load(service.dump(state))
    assert isinstance(restored, CourseState)
    assert restored.model_dump() == state.model_dump()


def test_service_load_rejects_corrupt_payload(service):
    with pytest.raises(ValidationError):
        service.load('{"total_holes": 0}')


def test_result_to_dict(service):
    result = service.add_group(service.initialize(), "Alpha")
    payload = result.to_dict()
    assert payload["logs"] == result.logs
    assert payload["state"]["tee_boxes"]["1"][0]["status"] == "PLAYING"


# ================================================================
# Status
# ================================================================

def test_status_summary():
    state = initialize_state(18, 1)
    state, _ = admit_groups(state, [("Alpha", 4), ("Bravo", 4), ("Charlie", 4)])
    service = TeeTimeService()
    state = service.fill(state).state
    state = service.tee_off(state, "G1").state    # Charlie backfills tee box 1

    status = summarize_state(state)
    assert status.total_holes == 18
    assert status.waiting_count == 0
    assert [(tb.hole, tb.occupancy, tb.open_slots) for tb in status.tee_boxes] == [(1, 1, 0), (10, 1, 0)]
    assert status.tee_boxes[0].group_names == ["Charlie"]
    assert [(g.id, g.current_hole) for g in status.on_course] == [("G1", 1)]
    assert status.transitioning_count == 0
    assert not status.is_idle


def test_status_idle_course():
    status = summarize_state(initialize_state(27))
    assert status.is_idle
    assert [tb.hole for tb in status.tee_boxes] == [1, 10, 19]
