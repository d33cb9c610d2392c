from overseas.learner.navigator import Direction, LessonNavigator, flatten
from overseas.schemas.learn import LearnModule
from tests.helpers.platform import lesson_body


def _modules():
    return [
        LearnModule.model_validate({"id": 1, "title": "Applications", "lessons": [lesson_body(10), lesson_body(11)]}),
        LearnModule.model_validate({"id": 2, "title": "Empty", "lessons": []}),
        LearnModule.model_validate({"id": 3, "title": "Visas", "lessons": [lesson_body(30)]}),
    ]


def test_lessons_are_flattened_in_module_order():
    assert [lesson.id for lesson in flatten(_modules())] == [10, 11, 30]


def test_first_lesson_is_selected_initially():
    navigator = LessonNavigator(_modules())
    assert navigator.current_lesson.id == 10
    assert navigator.can_go_previous is False
    assert navigator.can_go_next is True


def test_navigation_crosses_module_boundaries():
    navigator = LessonNavigator(_modules())
    navigator.navigate(Direction.NEXT)
    assert navigator.navigate(Direction.NEXT).id == 30
    assert navigator.can_go_next is False

    assert navigator.navigate(Direction.PREVIOUS).id == 11


def test_navigation_stops_at_both_ends():
    navigator = LessonNavigator(_modules())
    assert navigator.navigate(Direction.PREVIOUS).id == 10

    navigator.select(30)
    assert navigator.navigate(Direction.NEXT).id == 30


def test_view_state_resets_only_when_the_lesson_changes():
    navigator = LessonNavigator(_modules())
    navigator.view_state.playback_position = 42.5

    navigator.select(10)
    assert navigator.view_state.playback_position == 42.5

    navigator.navigate(Direction.NEXT)
    assert navigator.view_state.playback_position == 0.0


def test_stale_selection_does_not_move():
    navigator = LessonNavigator(_modules())
    navigator.select(999)

    assert navigator.current_lesson is None
    assert navigator.can_go_next is False
    assert navigator.can_go_previous is False
    assert navigator.navigate(Direction.NEXT) is None


def test_empty_curriculum():
    navigator = LessonNavigator([])
    assert navigator.current_lesson_id is None
    assert navigator.navigate(Direction.NEXT) is None
