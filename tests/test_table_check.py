from SGEN.SGM.config import SampleConfig
from SGEN.SGM.formatter import format_table
from SGEN.SGM.sample_generator import generate_samples
from SGEN.SVM.table_check import read_table, row_lengths, check_table


def test_read_decimal_and_hex():
    assert read_table("1, 2, \n3, \n") == [1, 2, 3]
    assert read_table("0xFF, 0x00, \n\n") == [255, 0]


def test_row_lengths():
    text = format_table(range(10), SampleConfig(depth=8, samples=10, cols=4))
    assert row_lengths(text) == [4, 4, 2]


def test_row_lengths_with_aligned_rows():
    text = format_table(range(8), SampleConfig(depth=8, samples=8, cols=4))
    assert row_lengths(text) == [4, 4, 0]


def test_generated_table_passes():
    config = SampleConfig(depth=12, samples=100)
    report = check_table(generate_samples(config), 12)
    assert report.count == 100
    assert report.max_value == 4095
    assert report.symmetry_error is not None
    assert report.ok


def test_odd_count_has_no_symmetry_figure():
    report = check_table(generate_samples(SampleConfig(depth=8, samples=7)), 8)
    assert report.symmetry_error is None
    assert report.ok


def test_out_of_range_fails():
    report = check_table([128, 256], 8)
    assert not report.in_range
    assert not report.ok


def test_wrong_phase_fails():
    report = check_table([0, 255, 128, 0], 8)
    assert not report.phase_zero_ok
    assert not report.ok


def test_empty_table():
    report = check_table([], 8)
    assert report.count == 0
    assert report.ok
