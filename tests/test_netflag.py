from gopl import netflag
from gopl.netflag import Flags


def test_main_output(capsys):
    netflag.main([])
    assert capsys.readouterr().out.splitlines() == [
        "10001 true", "10000 false", "10010 false", "10010 true",
    ]


def test_turn_down_round_trip():
    v = Flags.UP | Flags.LOOPBACK
    down = netflag.turn_down(v)
    assert not netflag.is_up(down)
    assert down & Flags.LOOPBACK


def test_is_cast():
    assert not netflag.is_cast(Flags.UP)
    assert netflag.is_cast(netflag.set_broadcast(Flags.UP))