import pytest

from holdem.betting_engine import Action, ActionType, BettingRound


def take_turn(rnd, players, action):
    seat = rnd.advance()
    return rnd.apply_action(players[seat], action, players)


def test_fold_marks_player(make_player):
    player = make_player(0, chips=100)
    rnd = BettingRound([0], forced_bet=20)
    line = rnd.apply_action(player, Action.fold())
    assert player.folded
    assert player.chips == 100
    assert line.endswith("folded")


def test_check_facing_a_bet_becomes_a_call(make_player):
    player = make_player(0, chips=100)
    rnd = BettingRound([0], forced_bet=20)
    line = rnd.apply_action(player, Action.check())
    assert player.chips == 80
    assert player.current_bet == 20
    assert rnd.pot == 20
    assert "check converted to call" in line


def test_free_check_moves_no_chips(make_player):
    player = make_player(0, chips=100)
    rnd = BettingRound([0])
    assert rnd.apply_action(player, Action.check()).endswith("checked")
    assert player.chips == 100 and rnd.pot == 0


def test_short_call_goes_all_in(make_player):
    player = make_player(0, chips=30)
    rnd = BettingRound([0], forced_bet=50)
    line = rnd.apply_action(player, Action.call())
    assert player.chips == 0
    assert player.is_all_in
    assert rnd.pot == 30
    assert rnd.current_bet == 50
    assert "all-in" in line


def test_raise_lifts_current_bet(make_player):
    player = make_player(0, chips=1000)
    rnd = BettingRound([0], forced_bet=20)
    line = rnd.apply_action(player, Action.raise_by(40))
    assert rnd.current_bet == 60
    assert rnd.min_raise == 40
    assert player.chips == 940
    assert rnd.pot == 60
    assert line.endswith("raised to $60")


def test_unaffordable_raise_downgrades_to_all_in(make_player):
    player = make_player(0, chips=50)
    rnd = BettingRound([0], forced_bet=20)
    line = rnd.apply_action(player, Action.raise_by(100))
    assert player.chips == 0
    assert player.current_bet == 50
    assert rnd.current_bet == 50
    assert rnd.pot == 50
    assert "all-in with $50" in line


def test_all_in_below_current_bet_keeps_bet(make_player):
    player = make_player(0, chips=15)
    rnd = BettingRound([0], forced_bet=20)
    rnd.apply_action(player, Action.raise_by(20))
    assert rnd.current_bet == 20
    assert player.chips == 0


def test_raise_requeues_other_players(make_player):
    players = {seat: make_player(seat, chips=500) for seat in range(3)}
    rnd = BettingRound([0, 1, 2], forced_bet=20)

    take_turn(rnd, players, Action.call())
    take_turn(rnd, players, Action.raise_by(20))

    assert list(rnd.players_to_act) == [2, 0]
    assert not rnd.check_complete(players.values())

    take_turn(rnd, players, Action.call())
    take_turn(rnd, players, Action.call())
    assert rnd.check_complete(players.values())
    assert all(p.current_bet == 40 for p in players.values())


def test_round_completes_when_everyone_matched(make_player):
    players = {seat: make_player(seat, chips=200) for seat in range(3)}
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    for _ in range(3):
        take_turn(rnd, players, Action.call())
    assert rnd.check_complete(players.values())
    assert rnd.pot == 60


def test_round_completes_with_one_player_left(make_player):
    players = {seat: make_player(seat, chips=200) for seat in range(3)}
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    take_turn(rnd, players, Action.fold())
    take_turn(rnd, players, Action.fold())
    assert rnd.players_to_act
    assert rnd.check_complete(players.values())


def test_chips_are_conserved(make_player):
    players = {seat: make_player(seat, chips=chips) for seat, chips in enumerate([300, 80, 500])}
    total = sum(p.chips for p in players.values())
    rnd = BettingRound([0, 1, 2], forced_bet=20)
    script = [Action.raise_by(50), Action.raise_by(200), Action.call(), Action.check(), Action.fold()]
    for action in script:
        rnd.skip_idle(players)
        if rnd.peek_next() is None:
            break
        take_turn(rnd, players, action)
        assert sum(p.chips for p in players.values()) + rnd.pot == total


def test_skip_idle_and_requeue_unmatched(make_player):
    players = {seat: make_player(seat, chips=100) for seat in range(3)}
    players[0].fold()
    players[1].chips = 0
    rnd = BettingRound([0, 1, 2], forced_bet=20)

    assert rnd.skip_idle(players) == [0, 1]
    assert rnd.peek_next() == 2

    rnd.advance()
    assert rnd.requeue_unmatched(players) == [2]


def test_advance_on_empty_queue_completes_round():
    rnd = BettingRound([])
    assert rnd.advance() is None
    assert rnd.complete


def test_post_blind_is_clamped(make_player):
    short = make_player(0, chips=5)
    rnd = BettingRound([0], forced_bet=20)
    assert rnd.post_blind(short, 10) == 5
    assert rnd.pot == 5


def test_action_parse():
    assert Action.parse({'action': 'fold'}) == Action.fold()
    assert Action.parse({'action': 'CALL', 'amount': 0}) == Action.call()
    assert Action.parse({'action': 'bet', 'amount': 40}) == Action(ActionType.RAISE, 40)
    assert Action.parse(Action.check()) == Action.check()
    assert Action.raise_by(40).to_dict() == {'action': 'raise', 'amount': 40}

    for bad in ({'action': 'dance'}, {'action': 'raise', 'amount': 0}, "fold", None):
        with pytest.raises(ValueError):
            Action.parse(bad)


def test_position_of_follows_street_order():
    rnd = BettingRound([1, 2, 0])
    assert [rnd.position_of(seat) for seat in (1, 2, 0)] == [0, 1, 2]
    assert rnd.position_of(5) == 0
