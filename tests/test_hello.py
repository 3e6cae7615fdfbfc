import platform

from gopl import hello


def test_greeting():
    assert hello.greeting() == "Hello, 世界"


def test_main_prints_greeting(capsys):
    assert hello.main([]) == 0
    assert capsys.readouterr().out == hello.greeting() + "\n"


def test_platform_pair_linux(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    monkeypatch.setattr(platform, "machine", lambda: "x86_64")
    assert hello.platform_pair() == ("linux", "amd64")


def test_platform_pair_darwin(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Darwin")
    monkeypatch.setattr(platform, "machine", lambda: "arm64")
    assert hello.platform_pair() == ("darwin", "arm64")


def test_platform_pair_unknown_is_lowercased(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Plan9")
    monkeypatch.setattr(platform, "machine", lambda: "MIPS")
    assert hello.platform_pair() == ("plan9", "mips")


def test_main_platform(capsys):
    hello.main(["--platform"])
    assert capsys.readouterr().out == " ".join(hello.platform_pair()) + "\n"