"""Unit tests for src/db/memory_repository.py"""

from uuid import UUID, uuid4

from src.connect_four.game import Game
from src.core.models import GameModel
from src.db.memory_repository import InMemoryGameRepository


def mock_game_model() -> GameModel:
    game = Game.new_game()
    game.start("red", "blue")
    return game.to_model()


def test_create_game(repository: InMemoryGameRepository) -> None:
    model = mock_game_model()
    stored, game_id = repository.create_game(model)
    assert isinstance(game_id, UUID)
    assert stored == model
    assert repository.get_game(game_id) == model


def test_ids_are_unique(repository: InMemoryGameRepository) -> None:
    _, first = repository.create_game(mock_game_model())
    _, second = repository.create_game(mock_game_model())
    assert first != second
    assert len(repository) == 2


def test_get_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.get_game(uuid4()) is None


def test_stored_game_only_changes_through_update(repository: InMemoryGameRepository) -> None:
    """Mutating a retrieved model must not alter the stored session."""
    _, game_id = repository.create_game(mock_game_model())
    retrieved = repository.get_game(game_id)
    assert retrieved is not None
    retrieved.board[5][0] = "one"
    retrieved.moves.append(0)

    stored = repository.get_game(game_id)
    assert stored is not None
    assert stored.board[5][0] is None
    assert stored.moves == []


def test_update_game(repository: InMemoryGameRepository) -> None:
    _, game_id = repository.create_game(mock_game_model())
    game = Game.from_model(repository.get_game(game_id))
    game.apply_move(3)

    updated = repository.update_game(game_id, game.to_model())
    assert updated is not None
    assert updated.moves == [3]
    assert repository.get_game(game_id).moves == [3]


def test_update_unknown_game(repository: InMemoryGameRepository) -> None:
    assert repository.update_game(uuid4(), mock_game_model()) is None
    assert len(repository) == 0


def test_delete_game(repository: InMemoryGameRepository) -> None:
    model = mock_game_model()
    _, game_id = repository.create_game(model)
    assert repository.delete_game(game_id) == model
    assert repository.get_game(game_id) is None
    assert repository.delete_game(game_id) is None
