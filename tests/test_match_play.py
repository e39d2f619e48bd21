from models import BestBall, BestBallMatchPlay, Course, Hole, Player, Round, StrokePlay
from scoring import match_play
from scoring.ledger import ALL_HOLES, ScoreLedger
from scoring.match_play import NOT_MATCH_PLAY

TEAMS = {"Team 1": ["ann", "bob"], "Team 2": ["cat", "dan"]}


def _build_ledger(fmt=None, dan_handicap=0) -> ScoreLedger:
    course = Course(
        id="course-1",
        name="Demo Course",
        holes=[Hole(number=i, par=4, handicap=i) for i in range(1, 19)],
    )
    players = [
        Player(id="ann", name="Ann", handicap=0),
        Player(id="bob", name="Bob", handicap=0),
        Player(id="cat", name="Cat", handicap=0),
        Player(id="dan", name="Dan", handicap=dan_handicap),
    ]
    round_ = Round(
        id="r1",
        course_id=course.id,
        player_ids=[p.id for p in players],
        format=fmt if fmt is not None else BestBallMatchPlay(teams=TEAMS),
    )
    return ScoreLedger(round_, players, course)


def _play(ledger: ScoreLedger, hole_number: int, **scores: int) -> None:
    for player_id, strokes in scores.items():
        ledger.upsert(hole_number, player_id, strokes)


# ================================================================
# Best ball per hole
# ================================================================

def test_best_ball_takes_lowest_member_score():
    ledger = _build_ledger()
    _play(ledger, 1, ann=5, bob=4, cat=6)

    assert match_play.best_ball_gross(ledger, "Team 1", 1) == 4
    assert match_play.best_ball_net(ledger, "Team 1", 1) == 4
    assert match_play.best_ball_gross(ledger, "Team 2", 1) == 6
    assert match_play.best_ball_net(ledger, "Team 2", 2) is None


def test_best_ball_net_applies_strokes():
    ledger = _build_ledger(dan_handicap=18)
    _play(ledger, 1, ann=4, bob=4, cat=5, dan=5)

    assert match_play.best_ball_gross(ledger, "Team 2", 1) == 5
    assert match_play.best_ball_net(ledger, "Team 2", 1) == 4
    assert match_play.hole_winner(ledger, ("Team 1", "Team 2"), 1) is None


def test_hole_winner():
    ledger = _build_ledger()
    _play(ledger, 1, ann=3, bob=5, cat=4, dan=4)
    _play(ledger, 2, ann=5, bob=5, cat=4, dan=6)
    _play(ledger, 3, ann=4)

    teams = ("Team 1", "Team 2")
    assert match_play.hole_winner(ledger, teams, 1) == "Team 1"
    assert match_play.hole_winner(ledger, teams, 2) == "Team 2"
    assert match_play.hole_winner(ledger, teams, 3) is None


# ================================================================
# Match status
# ================================================================

def test_status_in_progress():
    ledger = _build_ledger()
    _play(ledger, 1, ann=3, cat=4)
    _play(ledger, 2, bob=4, dan=5)
    _play(ledger, 3, ann=4, cat=4)

    status = match_play.matchplay_status(ledger)
    assert status.team1_up == 2
    assert status.team2_up == -2
    assert status.holes_remaining == 15
    assert status.status == "Team 1 2 up with 15 to play"
    assert not status.is_finished


def test_status_all_square():
    ledger = _build_ledger()
    _play(ledger, 1, ann=3, cat=4)
    _play(ledger, 2, ann=5, cat=4)

    status = match_play.matchplay_status(ledger)
    assert status.is_all_square
    assert status.status == "All square with 16 to play"


def test_status_decided_early():
    ledger = _build_ledger()
    for number in range(1, 11):
        _play(ledger, number, ann=4, cat=3)

    status = match_play.matchplay_status(ledger)
    assert status.team2_up == 10
    assert status.holes_remaining == 8
    assert status.is_finished
    assert status.status == "Team 2 wins 10 up"


def test_status_halved_after_eighteen():
    ledger = _build_ledger()
    for number in ALL_HOLES:
        _play(ledger, number, ann=4, cat=4)

    status = match_play.matchplay_status(ledger)
    assert status.holes_remaining == 0
    assert status.is_finished
    assert status.status == "Match halved"


def test_status_sentinel_for_other_formats():
    ledger = _build_ledger(StrokePlay())
    _play(ledger, 1, ann=3, cat=4)

    status = match_play.matchplay_status(ledger)
    assert status.status == NOT_MATCH_PLAY
    assert status.team1_up == 0
    assert status.holes_remaining == 18
    assert match_play.matchplay_hole_winner(ledger, 1) is None


def test_status_sentinel_without_two_teams():
    ledger = _build_ledger(BestBallMatchPlay(teams={"Team 1": ["ann", "bob", "cat", "dan"]}))
    assert match_play.matchplay_status(ledger).status == NOT_MATCH_PLAY


# ================================================================
# Best-Ball stroke play
# ================================================================

def test_best_ball_standings():
    ledger = _build_ledger(BestBall(teams=TEAMS))
    _play(ledger, 1, ann=5, bob=4, cat=3, dan=6)
    _play(ledger, 2, ann=4, bob=4, cat=4, dan=5)

    rows = match_play.standings(ledger)
    assert rows == [
        {"team_name": "Team 2", "gross": 7, "net": 7},
        {"team_name": "Team 1", "gross": 8, "net": 8},
    ]
    totals = match_play.team_totals(ledger, "Team 1")
    assert totals == {"gross": 8, "net": 8}


def test_best_ball_standings_empty_for_other_formats():
    assert match_play.standings(_build_ledger(StrokePlay())) == []
