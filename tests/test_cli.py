"""
Tests for the command-line interface.
"""

from decorator_demo.interfaces.cli import main


def test_default_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Client: I have a simple component:\nRESULTADO: ConcreteComponent\n")
    assert "RESULTADO: ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))\n" in out


def test_custom_chain(capsys):
    assert main(["--chain", "B,A"]) == 0
    out = capsys.readouterr().out
    assert out == (
        "Client: Now I have a decorated component:\n"
        "RESULTADO: ConcreteDecoratorA(ConcreteDecoratorB(ConcreteComponent))\n\n"
    )


def test_chain_uses_configured_default(monkeypatch, capsys):
    monkeypatch.setenv("DECORATOR_CHAIN", "B")
    assert main(["--chain"]) == 0
    assert "RESULTADO: ConcreteDecoratorB(ConcreteComponent)\n" in capsys.readouterr().out


def test_chain_without_decorators(monkeypatch, capsys):
    monkeypatch.setenv("DECORATOR_CHAIN", "")
    assert main(["-c"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Client: I have a simple component:\n")
    assert "RESULTADO: ConcreteComponent\n" in out


def test_unknown_decorator_exits_with_error(capsys):
    assert main(["--chain", "A,Z"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR]" in captured.err
    assert "Z" in captured.err


def test_status(capsys):
    assert main(["--status"]) == 0
    out = capsys.readouterr().out
    assert "CONFIGURATION STATUS" in out
    assert "A: ConcreteDecoratorA" in out
    assert "Default Chain: A,B" in out


def test_explicit_empty_chain_is_bare_component(capsys):
    assert main(["--chain", ""]) == 0
    out = capsys.readouterr().out
    assert out == "Client: I have a simple component:\nRESULTADO: ConcreteComponent\n\n"


def test_bare_chain_flag_reads_configuration(capsys):
    assert main(["--chain"]) == 0
    assert "RESULTADO: ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))\n" in capsys.readouterr().out


def test_unknown_log_level_exits_with_error(capsys):
    assert main(["--log-level", "verbose"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[ERROR] Unknown log level: verbose" in captured.err


def test_unknown_configured_log_level_exits_with_error(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert main([]) == 2
    assert "[ERROR] Unknown log level: CHATTY" in capsys.readouterr().err
