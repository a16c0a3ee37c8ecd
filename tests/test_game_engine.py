import pytest

from math_sprint.core.game_engine import GameEngine
from math_sprint.core.models import FeedbackKind, GameConfig, GameState, Operator
from math_sprint.core.services.scheduler import ManualScheduler
from math_sprint.core.services.session_manager import SessionManager

from tests.conftest import (
    FORTY_TWO_MINUS_NINE,
    SEVEN_PLUS_FIVE,
    THREE_TIMES_FOUR,
    ScriptedGenerator,
    play_until_over,
)


def feedback_tasks(scheduler):
    return [task for task in scheduler.active_tasks() if task.interval is None]


class TestLifecycle:
    def test_fresh_engine_is_idle(self, engine):
        snapshot = engine.snapshot()
        assert snapshot.state is GameState.IDLE
        assert snapshot.question is None
        assert snapshot.score == 0
        assert snapshot.best_score == 0
        assert snapshot.remaining_seconds == 30
        assert snapshot.transient_message is None
        assert not engine.is_tick_timer_active()

    def test_start_begins_playing(self, engine):
        assert engine.start()

        snapshot = engine.snapshot()
        assert snapshot.state is GameState.PLAYING
        assert snapshot.question is not None
        assert snapshot.remaining_seconds == 30
        assert engine.is_tick_timer_active()

    def test_start_is_ignored_while_playing_or_ended(self, engine):
        engine.start()
        question = engine.snapshot().question
        assert not engine.start()
        assert engine.snapshot().question == question

        play_until_over(engine)
        assert not engine.start()
        assert engine.get_state() is GameState.ENDED

    def test_typing_while_idle_starts_the_game(self, engine):
        assert engine.update_input("5")

        snapshot = engine.snapshot()
        assert snapshot.state is GameState.PLAYING
        assert snapshot.pending_input == ""

    def test_blank_typing_while_idle_does_nothing(self, engine):
        assert not engine.update_input("   ")
        assert engine.get_state() is GameState.IDLE

    def test_input_is_disabled_once_ended(self, engine):
        engine.start()
        play_until_over(engine)

        assert not engine.update_input("12")
        assert engine.snapshot().pending_input == ""

    def test_restart_from_ended(self, scripted_engine):
        scripted_engine.start()
        scripted_engine.submit_answer("12")
        play_until_over(scripted_engine)
        best = scripted_engine.get_best_score()

        assert scripted_engine.restart()

        snapshot = scripted_engine.snapshot()
        assert snapshot.state is GameState.IDLE
        assert snapshot.score == 0
        assert snapshot.remaining_seconds == 30
        assert snapshot.question is None
        assert snapshot.transient_message is None
        assert snapshot.pending_input == ""
        assert snapshot.best_score == best == 1

    def test_restart_is_ignored_while_playing(self, engine):
        engine.start()
        assert not engine.restart()
        assert engine.get_state() is GameState.PLAYING

    def test_restart_from_idle_is_allowed(self, engine):
        assert engine.restart()
        assert engine.get_state() is GameState.IDLE


class TestTimer:
    def test_thirty_ticks_end_the_game(self, engine):
        engine.start()
        for _ in range(29):
            assert engine.tick()
        assert engine.snapshot().remaining_seconds == 1
        assert engine.get_state() is GameState.PLAYING

        engine.tick()

        snapshot = engine.snapshot()
        assert snapshot.remaining_seconds == 0
        assert snapshot.state is GameState.ENDED
        assert not engine.is_tick_timer_active()

    def test_scheduler_drives_the_countdown(self, engine, scheduler):
        engine.start()

        scheduler.advance(10)
        assert engine.snapshot().remaining_seconds == 20

        scheduler.advance(25)
        assert engine.snapshot().remaining_seconds == 0
        assert engine.get_state() is GameState.ENDED
        assert scheduler.active_tasks() == []

    def test_tick_is_noop_outside_play(self, engine):
        assert not engine.tick()
        assert engine.snapshot().remaining_seconds == 30

        engine.start()
        play_until_over(engine)
        assert not engine.tick()
        assert engine.snapshot().remaining_seconds == 0

    def test_only_one_tick_timer_per_session(self, engine, scheduler):
        engine.start()
        play_until_over(engine)
        engine.restart()
        engine.start()

        repeating = [task for task in scheduler.active_tasks() if task.interval is not None]
        assert len(repeating) == 1

        scheduler.advance(3)
        assert engine.snapshot().remaining_seconds == 27

    def test_restart_leaves_no_timer_behind(self, scripted_engine, scheduler):
        scripted_engine.start()
        scripted_engine.submit_answer("0")
        play_until_over(scripted_engine)
        scripted_engine.restart()

        assert scheduler.active_tasks() == []
        scheduler.advance(5)
        assert scripted_engine.snapshot().remaining_seconds == 30

    def test_shutdown_cancels_everything(self, scripted_engine, scheduler):
        scripted_engine.start()
        scripted_engine.submit_answer("1")

        scripted_engine.shutdown()
        scripted_engine.shutdown()

        assert scheduler.active_tasks() == []
        scheduler.advance(5)
        snapshot = scripted_engine.snapshot()
        assert snapshot.remaining_seconds == 30
        assert snapshot.transient_message == "Wrong! Answer was 12"


class TestAnswers:
    def test_correct_answer(self, scripted_engine):
        scripted_engine.start()
        assert scripted_engine.snapshot().question == SEVEN_PLUS_FIVE.prompt()

        result = scripted_engine.submit_answer("12")

        assert result.is_correct
        snapshot = scripted_engine.snapshot()
        assert snapshot.score == 1
        assert snapshot.remaining_seconds == 31
        assert snapshot.question == THREE_TIMES_FOUR.prompt()
        assert "correct" in snapshot.transient_message.lower()
        assert snapshot.feedback_kind is FeedbackKind.CORRECT

    def test_correct_answer_adds_one_second_to_running_clock(self, scripted_engine):
        scripted_engine.start()
        for _ in range(5):
            scripted_engine.tick()

        result = scripted_engine.submit_answer("12")

        assert result.remaining_seconds == 26
        assert result.score == 1

    def test_malformed_answer_is_wrong(self, scripted_engine):
        scripted_engine.start()

        result = scripted_engine.submit_answer("abc")

        assert not result.is_correct
        assert result.submitted_value is None
        snapshot = scripted_engine.snapshot()
        assert snapshot.score == 0
        assert snapshot.remaining_seconds == 30
        assert "12" in snapshot.transient_message
        assert snapshot.transient_message == "Wrong! Answer was 12"
        assert snapshot.feedback_kind is FeedbackKind.WRONG
        assert snapshot.question == THREE_TIMES_FOUR.prompt()

    def test_numeric_prefix_counts(self, scripted_engine):
        scripted_engine.start()
        assert scripted_engine.submit_answer("12 apples").is_correct

    def test_pending_input_is_submitted_and_cleared(self, scripted_engine):
        scripted_engine.start()
        scripted_engine.update_input("12")
        assert scripted_engine.snapshot().pending_input == "12"

        result = scripted_engine.submit_answer()

        assert result.is_correct
        assert scripted_engine.snapshot().pending_input == ""

    def test_blank_answer_is_ignored(self, scripted_engine):
        scripted_engine.start()

        assert scripted_engine.submit_answer("  ") is None
        assert scripted_engine.submit_answer() is None
        snapshot = scripted_engine.snapshot()
        assert snapshot.question == SEVEN_PLUS_FIVE.prompt()
        assert snapshot.transient_message is None

    def test_answers_are_ignored_outside_play(self, scripted_engine):
        assert scripted_engine.submit_answer("12") is None

        scripted_engine.start()
        play_until_over(scripted_engine)
        assert scripted_engine.submit_answer("12") is None
        assert scripted_engine.snapshot().score == 0

    def test_every_answer_moves_to_the_next_question(self, scripted_engine):
        scripted_engine.start()
        scripted_engine.submit_answer("12")
        scripted_engine.submit_answer("99")

        assert scripted_engine.snapshot().question == FORTY_TWO_MINUS_NINE.prompt()


class TestFeedback:
    def test_correct_feedback_clears_after_one_second(self, scripted_engine, scheduler):
        scripted_engine.start()
        scripted_engine.submit_answer("12")

        scheduler.advance(0.5)
        assert scripted_engine.snapshot().transient_message is not None
        scheduler.advance(0.5)
        assert scripted_engine.snapshot().transient_message is None

    def test_wrong_feedback_clears_after_one_and_a_half_seconds(self, scripted_engine, scheduler):
        scripted_engine.start()
        scripted_engine.submit_answer("0")

        scheduler.advance(1.25)
        assert scripted_engine.snapshot().transient_message == "Wrong! Answer was 12"
        scheduler.advance(0.25)
        assert scripted_engine.snapshot().transient_message is None

    def test_older_clear_does_not_erase_newer_message(self, scripted_engine, scheduler):
        scripted_engine.start()
        scripted_engine.submit_answer("0")
        stale_clear = feedback_tasks(scheduler)[0].callback

        scheduler.advance(1.0)
        scripted_engine.submit_answer("12")
        stale_clear()

        assert scripted_engine.snapshot().transient_message.startswith("Correct")
        scheduler.advance(0.5)
        assert scripted_engine.snapshot().transient_message.startswith("Correct")
        scheduler.advance(0.5)
        assert scripted_engine.snapshot().transient_message is None

    def test_restart_discards_pending_feedback(self, scripted_engine, scheduler):
        scripted_engine.start()
        scripted_engine.submit_answer("0")
        stale_clear = feedback_tasks(scheduler)[0].callback
        play_until_over(scripted_engine)
        scripted_engine.restart()
        scripted_engine.start()
        scripted_engine.submit_answer("0")

        stale_clear()

        assert scripted_engine.snapshot().transient_message is not None


class TestBestScore:
    def play_session(self, engine, correct_answers):
        engine.restart()
        engine.start()
        for _ in range(correct_answers):
            engine.submit_answer("12")
        play_until_over(engine)
        return engine.get_best_score()

    def test_best_score_never_decreases(self, scheduler):
        generator = ScriptedGenerator([SEVEN_PLUS_FIVE, THREE_TIMES_FOUR])
        engine = GameEngine(scheduler, generator=generator)

        history = [self.play_session(engine, n) for n in (2, 1, 0, 3, 2)]

        assert history == [2, 2, 2, 3, 3]

    def test_best_score_lives_in_the_session_manager(self, scheduler):
        manager = SessionManager(start_seconds=30)
        generator = ScriptedGenerator([SEVEN_PLUS_FIVE])
        engine = GameEngine(scheduler, session_manager=manager, generator=generator)

        self.play_session(engine, 4)

        assert manager.get_best_score() == 4
        assert engine.snapshot().best_score == 4


class TestEngineMisc:
    @pytest.mark.parametrize("operator", list(Operator))
    def test_generate_question(self, engine, operator):
        question = engine.generate_question(operator)
        assert question.operator is operator
        assert operator.apply(question.first_operand, question.second_operand) == question.expected_answer

    def test_same_seed_same_first_question(self):
        first = GameEngine(ManualScheduler(), GameConfig(seed=42))
        second = GameEngine(ManualScheduler(), GameConfig(seed=42))
        first.start()
        second.start()
        assert first.snapshot().question == second.snapshot().question

    def test_set_seed(self, engine):
        engine.set_seed(7)
        engine.start()
        expected = engine.snapshot().question
        play_until_over(engine)
        engine.restart()

        engine.set_seed(7)
        engine.start()

        assert engine.snapshot().question == expected

    def test_listeners_receive_snapshots(self, scripted_engine, scheduler):
        received = []
        scripted_engine.add_listener(received.append)

        scripted_engine.start()
        scripted_engine.submit_answer("12")
        scheduler.advance(1.0)

        states = [(s.state, s.score, s.transient_message is not None) for s in received]
        assert states[0] == (GameState.PLAYING, 0, False)
        assert states[1] == (GameState.PLAYING, 1, True)
        assert (GameState.PLAYING, 1, False) in states[2:]

        scripted_engine.remove_listener(received.append)
        count = len(received)
        scheduler.advance(3)
        assert len(received) == count

    def test_custom_config(self):
        scheduler = ManualScheduler()
        config = GameConfig(start_seconds=5, correct_bonus_seconds=3)
        engine = GameEngine(scheduler, config, generator=ScriptedGenerator([SEVEN_PLUS_FIVE]))
        engine.start()

        engine.submit_answer("12")

        assert engine.snapshot().remaining_seconds == 8
        scheduler.advance(8)
        assert engine.get_state() is GameState.ENDED
