import pytest

from jeweljam.player import HIGHSCORE_FILE, PROGRESS_FILE, Highscore, Player


@pytest.fixture
def highscore(tmp_path):
    return Highscore(
        Player("Mamoona", 0),
        tmp_path / HIGHSCORE_FILE,
        tmp_path / PROGRESS_FILE,
    )


def test_add_score_accumulates():
    player = Player("Mamoona", 5)
    player.add_score(10)
    player.add_score(-3)
    assert player.score == 12


def test_highscore_copies_player():
    player = Player("Mamoona", 7)
    record = Highscore(player)
    player.add_score(100)
    assert record.score == 7
    assert record.player.name == "Mamoona"


def test_default_paths():
    record = Highscore(Player("Mamoona", 0))
    assert record.highscore_path.name == "highscore.txt"
    assert record.progress_path.name == "playerProgress.txt"


def test_update_score_only_when_higher(highscore):
    assert highscore.update_score(Player("a", 30)) is True
    assert highscore.highest_score == 30
    assert highscore.update_score(Player("b", 30)) is False
    assert highscore.update_score(Player("c", 10)) is False
    assert highscore.highest_score == 30


def test_high_score_round_trip(highscore, tmp_path):
    highscore.update_score(Player("a", 40))
    highscore.save_high_score()
    fresh = Highscore(Player("x", 0), tmp_path / HIGHSCORE_FILE, tmp_path / PROGRESS_FILE)
    assert fresh.load_high_score() == 40
    assert fresh.highest_score == 40


def test_load_high_score_without_file_keeps_current(highscore):
    highscore.update_score(Player("a", 20))
    assert highscore.load_high_score() == 20


def test_save_progress_writes_name_and_score(highscore):
    highscore.save_progress()
    assert highscore.progress_path.read_text() == "Mamoona 0\n"


def test_score_file_round_trip(tmp_path):
    path = tmp_path / "score.txt"
    source = Highscore(Player("Mamoona", 12.5))
    source.save_score(path)
    target = Highscore(Player("other", 0))
    loaded = target.load_score(path)
    assert loaded == Player("Mamoona", 12.5)
    assert target.score == 12.5


def test_load_score_missing_file(highscore, tmp_path):
    with pytest.raises(FileNotFoundError):
        highscore.load_score(tmp_path / "absent.txt")


def test_load_score_malformed(highscore, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("onlyname\n")
    with pytest.raises(ValueError):
        highscore.load_score(path)