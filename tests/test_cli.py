import io

import pytest

from SGEN.cli import build_parser, run, main
from SGEN.SGM.config import SampleConfig
from SGEN.SGM.sample_generator import generate_samples
from SGEN.SVM.table_check import read_table


def _run(config):
    out = io.StringIO()
    code = run(config, out)
    return code, out.getvalue()


def test_parser_short_flags():
    args = build_parser().parse_args(["-d", "8", "-s", "16", "-c", "4", "-x", "-v"])
    assert (args.depth, args.samples, args.cols, args.hex, args.verbose) == (8, 16, 4, True, True)


def test_parser_long_flags_and_defaults():
    args = build_parser().parse_args(["--depth", "12", "--samples", "0"])
    assert (args.depth, args.samples, args.cols, args.hex, args.verbose) == (12, 0, 1, False, False)


@pytest.mark.parametrize("argv", [
    ["-s", "4"],
    ["-d", "8"],
    ["-d", "256", "-s", "4"],
    ["-d", "-1", "-s", "4"],
    ["-d", "8", "-s", "-4"],
    ["-d", "8", "-s", "4", "-c", "300"],
    ["-d", "eight", "-s", "4"],
])
def test_parser_rejects(argv):
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args(argv)
    assert info.value.code == 2


def test_success_output():
    code, output = _run(SampleConfig(depth=8, samples=4, cols=4))
    assert code == 0
    assert output == "128, 255, 128, 0, \n\n"


def test_hex_output_reads_back():
    config = SampleConfig(depth=9, samples=50, cols=10, hex=True)
    code, output = _run(config)
    assert code == 0
    assert read_table(output) == generate_samples(config).tolist()
    assert all(token.startswith("0x") and len(token) == 5
               for token in output.replace("\n", "").split(", ") if token)


@pytest.mark.parametrize("config, expected, needles", [
    (SampleConfig(depth=0, samples=4), 1, ["zero"]),
    (SampleConfig(depth=33, samples=4), 2, ["33", "32"]),
    (SampleConfig(depth=8, samples=4, cols=0), 3, ["column"]),
])
def test_validation_failures(config, expected, needles):
    code, output = _run(config)
    assert code == expected
    assert output.startswith("[!!] ")
    assert output.count("\n") == 1
    for needle in needles:
        assert needle in output


def test_verbose_echoes_config_before_validation_error():
    code, output = _run(SampleConfig(depth=0, samples=4, verbose=True))
    assert code == 1
    assert output.startswith("SampleConfig\n")
    assert "Max sample value" not in output


def test_verbose_prints_max_value():
    code, output = _run(SampleConfig(depth=8, samples=2, verbose=True))
    assert code == 0
    assert "Max sample value: 255\n" in output
    assert output.endswith("128, \n128, \n\n")


def test_identical_runs_are_byte_identical():
    config = SampleConfig(depth=16, samples=333, cols=7, hex=True)
    assert _run(config) == _run(config)


@pytest.mark.parametrize("argv, expected", [
    (["-d", "8", "-s", "4"], 0),
    (["-d", "0", "-s", "4"], 1),
    (["-d", "33", "-s", "4"], 2),
    (["-d", "8", "-s", "4", "-c", "0"], 3),
])
def test_main_exit_codes(argv, expected, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == expected
    if expected == 0:
        assert capsys.readouterr().out == "128, \n255, \n128, \n0, \n\n"
