import logging
import random

import pytest

from app.core.exceptions import CellOccupied, GameEnded, InvalidIndex, NotYourTurn
from app.models.board import (
    Difficulty, GameMode, OutcomeStatus, Player, TurnState, new_board
)
from app.services.game_session import GameSession


def two_player():
    return GameSession(mode=GameMode.TWO)


def single_player(difficulty=Difficulty.EASY, seed=0):
    return GameSession(mode=GameMode.SINGLE, difficulty=difficulty, rng=random.Random(seed))


class TestTwoPlayer:

    def test_initial_state(self):
        session = two_player()
        assert session.board == new_board()
        assert session.active_player == Player.X
        assert session.state == TurnState.X_TURN
        assert session.outcome.status == OutcomeStatus.IN_PROGRESS
        assert not session.computer_should_move()

    def test_players_alternate(self):
        session = two_player()
        session.select_cell(0)
        assert session.board[0] == "X"
        assert session.state == TurnState.O_TURN
        assert not session.computer_should_move()
        session.select_cell(4)
        assert session.board[4] == "O"
        assert session.state == TurnState.X_TURN
        assert session.move_count == 2

    def test_win_finishes_game(self):
        session = two_player()
        for index in [0, 3, 1, 4]:
            session.select_cell(index)
        outcome = session.select_cell(2)
        assert outcome.status == OutcomeStatus.WIN
        assert outcome.winner == Player.X
        assert session.state == TurnState.FINISHED
        snapshot = session.snapshot()
        assert snapshot["winning_line"] == [0, 1, 2]
        assert snapshot["current_turn"] is None

        with pytest.raises(GameEnded):
            session.select_cell(5)

    def test_draw_finishes_game(self):
        session = two_player()
        # Ends as X O X / X O O / O X X
        for index in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
            session.select_cell(index)
        assert session.board == ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
        assert session.outcome.status == OutcomeStatus.DRAW
        assert session.state == TurnState.FINISHED

    def test_invalid_moves_raise(self):
        session = two_player()
        session.select_cell(0)
        with pytest.raises(CellOccupied):
            session.select_cell(0)
        with pytest.raises(InvalidIndex):
            session.select_cell(9)
        assert session.state == TurnState.O_TURN
        assert session.move_count == 1

    def test_rejected_clicks_are_no_ops(self):
        session = two_player()
        assert session.on_cell_selected(4) is True
        before = list(session.board)
        assert session.on_cell_selected(4) is False
        assert session.on_cell_selected(-1) is False
        assert session.board == before
        assert session.active_player == Player.O

    def test_no_computer_in_two_player_mode(self):
        session = two_player()
        session.select_cell(0)
        with pytest.raises(NotYourTurn):
            session.perform_computer_move()


class TestSinglePlayer:

    def test_computer_replies_after_human(self):
        session = single_player()
        session.select_cell(4)
        assert session.state == TurnState.O_TURN
        assert session.computer_should_move()

        index = session.perform_computer_move()
        assert index != 4
        assert session.board[index] == "O"
        assert session.state == TurnState.X_TURN
        assert not session.computer_should_move()

    def test_human_cannot_play_for_computer(self):
        session = single_player()
        session.select_cell(0)
        with pytest.raises(NotYourTurn):
            session.select_cell(1)
        assert session.on_cell_selected(1) is False
        assert session.board[1] == ""

    def test_computer_cannot_move_on_human_turn(self):
        session = single_player()
        with pytest.raises(NotYourTurn):
            session.perform_computer_move()

    def test_human_win_stops_computer(self):
        session = single_player(Difficulty.EASY)
        session.board = ["X", "X", "", "O", "O", "", "", "", ""]
        session.select_cell(2)
        assert session.outcome.winner == Player.X
        assert session.state == TurnState.FINISHED
        assert not session.computer_should_move()
        with pytest.raises(GameEnded):
            session.perform_computer_move()

    def test_medium_takes_win(self):
        session = single_player(Difficulty.MEDIUM)
        session.board = ["O", "O", "", "X", "", "", "", "", ""]
        session.select_cell(4)
        assert session.perform_computer_move() == 2
        assert session.outcome.winner == Player.O
        assert session.state == TurnState.FINISHED

    def test_hard_never_loses_to_random_play(self):
        rng = random.Random(42)
        session = single_player(Difficulty.HARD)
        for _ in range(10):
            session.restart()
            while session.state != TurnState.FINISHED:
                if session.computer_should_move():
                    session.perform_computer_move()
                else:
                    empty = [i for i, cell in enumerate(session.board) if cell == ""]
                    session.select_cell(rng.choice(empty))
            assert session.outcome.winner != Player.X

    def test_difficulty_change_keeps_existing_moves(self):
        session = single_player(Difficulty.EASY)
        session.select_cell(0)
        session.perform_computer_move()
        before = list(session.board)

        session.on_difficulty_changed(Difficulty.HARD)
        assert session.difficulty == Difficulty.HARD
        assert session.board == before
        assert session.state == TurnState.X_TURN

    def test_full_board_logs_instead_of_crashing(self, caplog):
        session = single_player()
        session.board = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
        session.active_player = Player.O
        session.state = TurnState.O_TURN

        with caplog.at_level(logging.ERROR):
            assert session.perform_computer_move() is None
        assert "No move available" in caplog.text
        assert session.state == TurnState.O_TURN


class TestRestart:

    @pytest.mark.parametrize("mode", list(GameMode))
    def test_restart_resets(self, mode):
        session = GameSession(mode=mode, rng=random.Random(5))
        session.select_cell(0)
        if session.computer_should_move():
            session.perform_computer_move()
        session.select_cell(session.board.index(""))

        session.restart()
        assert session.board == new_board()
        assert session.active_player == Player.X
        assert session.state == TurnState.X_TURN
        assert session.move_count == 0
        assert session.outcome.status == OutcomeStatus.IN_PROGRESS

    def test_restart_after_finish(self):
        session = two_player()
        for index in [0, 3, 1, 4, 2]:
            session.select_cell(index)
        session.restart()
        assert session.state == TurnState.X_TURN
        session.select_cell(0)

    def test_mode_change_restarts(self):
        session = single_player()
        session.select_cell(4)
        session.on_mode_changed(GameMode.TWO)
        assert session.mode == GameMode.TWO
        assert session.board == new_board()
        assert session.state == TurnState.X_TURN
