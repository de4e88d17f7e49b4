import json
import logging
from dataclasses import asdict

import pytest

from wordle_engine.exceptions import IllegalTransitionError, SessionNotFoundError
from wordle_engine.models.game import Language
from wordle_engine.models.state import Errored, Lost, Ongoing, Won
from wordle_engine.services import game_service as game_service_module
from wordle_engine.services.game_service import GameService, letter_summary


def test_create_game_starts_an_ongoing_session(service_for):
    service = service_for(0)
    session_id = service.create_game()
    state = service.get_state(session_id)
    assert isinstance(state, Ongoing)
    assert state.language == Language.EN
    assert state.target == "crane"


def test_snapshot_hides_answer_until_game_over(service_for):
    service = service_for(0)
    session_id = service.create_game()
    service.submit_attempt(session_id, "slate")

    snapshot = service.get_snapshot(session_id)
    assert snapshot.status == "ongoing"
    assert snapshot.answer is None
    assert snapshot.current_round == 1
    assert snapshot.remaining_attempts == 5
    assert snapshot.guesses == ["slate"]
    assert snapshot.guess_results == [[
        ("s", "UNUSED"), ("l", "UNUSED"), ("a", "CORRECT"), ("t", "UNUSED"), ("e", "CORRECT")
    ]]

    service.submit_attempt(session_id, "crane")
    snapshot = service.get_snapshot(session_id)
    assert snapshot.status == "won"
    assert snapshot.game_over
    assert snapshot.won
    assert snapshot.answer == "crane"


def test_snapshot_is_json_serializable(service_for):
    service = service_for(0)
    session_id = service.create_game()
    service.submit_attempt(session_id, "apple")
    payload = json.loads(json.dumps(asdict(service.get_snapshot(session_id))))
    assert payload["language"] == "en"
    assert payload["letter_status"]["a"] == "MISPLACED"


def test_validation_error_is_reported_in_snapshot(service_for):
    service = service_for(0)
    session_id = service.create_game()
    state = service.submit_attempt(session_id, "ono po")
    assert isinstance(state, Ongoing)

    snapshot = service.get_snapshot(session_id)
    assert snapshot.error_kind == "INVALID_CHARACTERS"
    assert "ono po" in snapshot.last_error
    assert snapshot.pending_input == "ono po"
    assert snapshot.current_round == 0


def test_edit_then_submit_pending_input(service_for):
    service = service_for(0)
    session_id = service.create_game()
    service.edit_input(session_id, "Crane")
    state = service.submit_attempt(session_id)
    assert isinstance(state, Won)


def test_loss_after_max_attempts(service_for):
    service = service_for(0, max_attempts=3)
    session_id = service.create_game()
    for guess in ["slate", "apple", "hello"]:
        state = service.submit_attempt(session_id, guess)
    assert isinstance(state, Lost)
    snapshot = service.get_snapshot(session_id)
    assert snapshot.remaining_attempts == 0
    assert snapshot.answer == "crane"

    with pytest.raises(IllegalTransitionError):
        service.submit_attempt(session_id, "crane")


def test_start_new_game_and_switch_language(service_for, french):
    service = service_for(0, 1, french.words.index("table"))
    session_id = service.create_game()
    service.submit_attempt(session_id, "crane")

    state = service.start_new_game(session_id)
    assert state == Ongoing(language=Language.EN, target="slate")

    state = service.switch_language(session_id, Language.FR)
    assert state == Ongoing(language=Language.FR, target="table")


def test_create_game_in_a_given_language(service_for):
    service = service_for(0)
    session_id = service.create_game(Language.FR)
    assert service.get_state(session_id).target == "coeur"


def test_errored_session_snapshot(service_for):
    service = service_for()
    session_id = service.create_game()
    assert isinstance(service.get_state(session_id), Errored)
    snapshot = service.get_snapshot(session_id)
    assert snapshot.status == "errored"
    assert snapshot.last_error.startswith("Random word selection failed")


def test_unknown_session(service_for):
    service = service_for(0)
    assert service.get_state("nope") is None
    assert service.get_snapshot("nope") is None
    with pytest.raises(SessionNotFoundError):
        service.submit_attempt("nope", "crane")


def test_delete_game(service_for):
    service = service_for(0)
    session_id = service.create_game()
    assert service.delete_game(session_id)
    assert not service.delete_game(session_id)
    assert service.get_state(session_id) is None


def test_letter_summary_keeps_best_status(service_for):
    service = service_for(0)
    session_id = service.create_game()
    service.submit_attempt(session_id, "eerie")
    service.submit_attempt(session_id, "slate")
    state = service.get_state(session_id)

    summary = letter_summary(state.attempts)
    assert summary == {
        "a": "CORRECT",
        "e": "CORRECT",
        "i": "UNUSED",
        "l": "UNUSED",
        "r": "MISPLACED",
        "s": "UNUSED",
        "t": "UNUSED",
    }


def test_game_events_are_logged(service_for, caplog):
    caplog.set_level(logging.DEBUG, logger="wordle_game")
    service = service_for(0)
    session_id = service.create_game()
    service.submit_attempt(session_id, "zzzzz")
    service.submit_attempt(session_id, "crane")

    entries = [json.loads(record.getMessage()) for record in caplog.records if record.name == "wordle_game"]
    actions = [(entry["event_type"], entry["action"]) for entry in entries]
    assert ("GAME_EVENT", "game_started") in actions
    assert ("VALIDATION_ERROR", "submit_attempt") in actions
    assert ("GAME_EVENT", "game_won") in actions
    assert all(entry["session_id"] == session_id for entry in entries)


def test_global_service_singleton(loader):
    service = game_service_module.initialize_game_service(
        dictionary_loader=loader, random_index=lambda size: 0, default_language=Language.EN
    )
    assert game_service_module.get_game_service() is service
    assert isinstance(service, GameService)
    assert service.max_attempts == 6
