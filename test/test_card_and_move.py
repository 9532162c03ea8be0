from hanabi_rules import HanabiCard, HanabiMove


def test_default_card_is_invalid():
    card = HanabiCard()
    assert not card.is_valid()
    assert card.to_string() == "XX"


def test_card_equality_and_hash():
    assert HanabiCard(2, 3) == HanabiCard(2, 3)
    assert HanabiCard(2, 3) != HanabiCard(3, 2)
    assert len({HanabiCard(0, 0), HanabiCard(0, 0), HanabiCard(1, 0)}) == 2
    assert str(HanabiCard(4, 4)) == "B5"


def test_move_equality_ignores_unused_fields():
    assert HanabiMove(HanabiMove.Type.PLAY, card_index=2, color=3) == HanabiMove.play(2)
    assert HanabiMove.play(2) != HanabiMove.discard(2)
    assert HanabiMove.reveal_color(1, 0) != HanabiMove.reveal_color(2, 0)
    assert hash(HanabiMove.deal(1, 2)) == hash(HanabiMove(HanabiMove.Type.DEAL, card_index=4, color=1, rank=2))


def test_move_strings():
    assert str(HanabiMove.play(0)) == "(Play 0)"
    assert str(HanabiMove.discard(3)) == "(Discard 3)"
    assert str(HanabiMove.reveal_color(1, 0)) == "(Reveal player +1 color R)"
    assert str(HanabiMove.reveal_rank(2, 4)) == "(Reveal player +2 rank 5)"
    assert str(HanabiMove.deal(3, 1)) == "(Deal W2)"
    assert str(HanabiMove(HanabiMove.Type.DEAL)) == "(Deal XX)"
    assert str(HanabiMove.invalid()) == "(INVALID)"
    assert not HanabiMove.invalid().is_valid()
