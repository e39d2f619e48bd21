import pytest

from models import Course, Hole, Player, Round
from scoring import stroke_play
from scoring.ledger import ScoreLedger


def _build_course() -> Course:
    # stroke index equals hole number: hole 1 hardest, hole 18 easiest
    holes = [
        Hole(number=i, par=4, handicap=i, tee_yardages={"Blue": 420, "Green": 360})
        for i in range(1, 19)
    ]
    return Course(id="course-1", name="Demo Course", holes=holes)


def _build_ledger(course=True, **round_fields) -> ScoreLedger:
    players = [
        Player(id="ann", name="Ann", handicap=13),
        Player(id="bob", name="Bob", handicap=20, is_current_user=True),
        Player(id="cat", name="Cat", handicap=0),
    ]
    round_ = Round(
        id="r1",
        course_id="course-1" if course else None,
        player_ids=[p.id for p in players],
        **round_fields,
    )
    return ScoreLedger(round_, players, _build_course() if course else None)


# ================================================================
# Upsert / lookup
# ================================================================

def test_upsert_creates_hole_lazily_and_overwrites():
    ledger = _build_ledger()
    assert ledger.lookup(1, "ann") is None
    assert ledger.round.hole_scores == []

    ledger.upsert(1, "ann", 5)
    ledger.upsert(1, "ann", 6)
    ledger.upsert(1, "bob", 4)

    assert ledger.lookup(1, "ann") == 6
    assert ledger.lookup(1, "bob") == 4
    assert len(ledger.round.hole_scores) == 1


def test_upsert_keeps_holes_ordered():
    ledger = _build_ledger()
    for number in (9, 2, 14):
        ledger.upsert(number, "cat", 4)
    assert [hs.hole_number for hs in ledger.round.hole_scores] == [2, 9, 14]


def test_upsert_rejects_invalid_cells():
    ledger = _build_ledger()
    with pytest.raises(ValueError):
        ledger.upsert(1, "zed", 4)                # not in the round
    with pytest.raises(ValueError):
        ledger.upsert(19, "ann", 4)
    with pytest.raises(ValueError):
        ledger.upsert(1, "ann", -1)


def test_clear_score():
    ledger = _build_ledger()
    ledger.upsert(3, "ann", 5)
    assert ledger.clear(3, "ann")
    assert ledger.lookup(3, "ann") is None
    assert not ledger.clear(3, "ann")
    assert not ledger.clear(4, "ann")


# ================================================================
# Net scores
# ================================================================

def test_net_for_hole_uses_allocation():
    ledger = _build_ledger()
    ledger.upsert(1, "ann", 5)     # handicap 13, SI 1 -> 1 stroke
    ledger.upsert(1, "bob", 6)     # handicap 20, SI 1 -> 2 strokes
    ledger.upsert(18, "ann", 5)    # SI 18 -> no stroke
    ledger.upsert(18, "bob", 5)    # SI 18 -> 1 stroke

    assert ledger.net_for_hole("ann", 1) == 4
    assert ledger.net_for_hole("bob", 1) == 4
    assert ledger.net_for_hole("ann", 18) == 5
    assert ledger.net_for_hole("bob", 18) == 4
    assert ledger.gets_stroke("ann", 13)
    assert not ledger.gets_stroke("ann", 14)


def test_net_for_hole_absent_values():
    ledger = _build_ledger()
    assert ledger.net_for_hole("ann", 1) is None          # no gross

    no_course = _build_ledger(course=False)
    no_course.upsert(1, "ann", 5)
    assert no_course.net_for_hole("ann", 1) is None       # no hole metadata
    assert no_course.strokes_received("ann", 1) == 0


def test_net_is_clamped_at_zero():
    ledger = _build_ledger()
    ledger.upsert(1, "bob", 1)                             # 2 strokes on SI 1
    assert ledger.net_for_hole("bob", 1) == 0


# ================================================================
# Round members
# ================================================================

def test_ordered_players_puts_device_owner_first():
    ledger = _build_ledger()
    assert [p.id for p in ledger.ordered_players] == ["bob", "ann", "cat"]
    assert [p.id for p in ledger.players] == ["ann", "bob", "cat"]


def test_tracking_players_and_tee_color():
    ledger = _build_ledger(tracking_player_ids={"cat"})
    assert [p.id for p in ledger.tracking_players] == ["cat"]
    assert ledger.effective_tee_color == "Green"           # no White on this course

    override = _build_ledger(tee_color="Blue")
    assert override.effective_tee_color == "Blue"
    assert _build_ledger(course=False).effective_tee_color is None


def test_is_complete():
    ledger = _build_ledger()
    assert not ledger.is_complete()
    for number in range(1, 19):
        for pid in ("ann", "bob", "cat"):
            ledger.upsert(number, pid, 4)
    assert ledger.is_complete()

    ledger.clear(18, "cat")
    assert not ledger.is_complete()


# ================================================================
# Stroke play
# ================================================================

def test_stroke_play_totals_accumulate_hole_nets():
    ledger = _build_ledger()
    for number in range(1, 19):
        ledger.upsert(number, "ann", 5)
        ledger.upsert(number, "bob", 6)
        ledger.upsert(number, "cat", 4)

    total = {row["player_id"]: row for row in stroke_play.totals(ledger)}
    assert total["ann"]["gross"] == 90
    assert total["ann"]["net"] == 90 - 13
    assert total["bob"]["gross"] == 108
    assert total["bob"]["net"] == 108 - 20
    assert total["cat"]["net"] == 72

    front = {row["player_id"]: row for row in stroke_play.front_nine(ledger)}
    back = {row["player_id"]: row for row in stroke_play.back_nine(ledger)}
    # Ann gets strokes on SI 1-13: nine on the front, four on the back
    assert front["ann"]["net"] == 45 - 9
    assert back["ann"]["net"] == 45 - 4
    assert front["ann"]["net"] + back["ann"]["net"] == total["ann"]["net"]


def test_stroke_play_partial_round():
    ledger = _build_ledger()
    ledger.upsert(1, "ann", 5)
    ledger.upsert(14, "ann", 5)

    total = {row["player_id"]: row for row in stroke_play.totals(ledger)}
    assert total["ann"] == {"player_id": "ann", "name": "Ann", "gross": 10, "net": 9, "holes_played": 2}
    assert total["cat"]["gross"] == 0
    assert total["cat"]["holes_played"] == 0


def test_stroke_play_without_course_subtracts_handicap_once():
    ledger = _build_ledger(course=False)
    for number in range(1, 10):
        ledger.upsert(number, "ann", 5)

    total = {row["player_id"]: row for row in stroke_play.totals(ledger)}
    assert total["ann"]["gross"] == 45
    assert total["ann"]["net"] == 45 - 13
    assert total["cat"]["net"] == 0                        # clamped, nothing recorded


def test_stroke_play_standings_order():
    ledger = _build_ledger()
    ledger.upsert(1, "ann", 3)
    ledger.upsert(1, "bob", 7)
    ledger.upsert(1, "cat", 4)
    assert [row["player_id"] for row in stroke_play.standings(ledger)] == ["ann", "cat", "bob"]


def test_stroke_play_skips_holes_missing_from_course():
    players = [Player(id="ann", name="Ann", handicap=0)]
    course = Course(id="nine", name="Nine Hole Course", holes=[Hole(number=i, par=4, handicap=i) for i in range(1, 10)])
    round_ = Round(id="r9", course_id="nine", player_ids=["ann"])
    ledger = ScoreLedger(round_, players, course)
    for number in range(1, 19):
        ledger.upsert(number, "ann", 4)

    row = stroke_play.totals(ledger)[0]
    assert row["gross"] == 36
    assert row["net"] == 36
    assert row["holes_played"] == 9
    assert stroke_play.back_nine(ledger)[0]["gross"] == 0
