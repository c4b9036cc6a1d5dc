"""Smoke test for the demo entry point."""

import main


def test_main_prints_roots(capsys):
    main.main()
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "x^3 - 9/2x^2 + 7/2x + 3",
        "f(1) = 3",
        "-1/2",
        "2",
        "3",
    ]
