from gopl import digest

X = "2d711642b726b04401627ca9fbac32f5c8530fb1903cc4db02258717921a4881"
BIG_X = "4b68ab3847feda7d6c62c1fbcbeebfa35eab7351ed5e78f4ddadea5df64b8015"


def test_compare():
    assert digest.compare_digests("x", "X") == (X, BIG_X, False)


def test_same_input_equal():
    assert digest.compare_digests("x", "x")[2] is True


def test_main(capsys):
    digest.main([])
    assert capsys.readouterr().out.splitlines() == [X, BIG_X, "false", "[32]uint8"]