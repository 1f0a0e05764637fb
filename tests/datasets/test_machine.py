"""
Tests for machine.data parsing, loading and column statistics.
"""

import numpy as np
import pytest

from perfmodel.core.exceptions import EmptyInputError, ValidationError
from perfmodel.datasets import (
    MachineRecord,
    describe,
    load_machine_data,
    parse_machine_line,
    parse_machine_lines,
    to_examples,
)
from perfmodel.regression import LabeledExample


LINE = "adviser,32/60,125,256,6000,256,16,128,198,199"


class TestParseLine:

    def test_fields(self):
        record = parse_machine_line(LINE)
        assert record == MachineRecord(
            "adviser", "32/60", 125, 256, 6000, 256, 16, 128, 198, 199
        )

    def test_whitespace_and_newline(self):
        record = parse_machine_line(" amdahl , 470v/7 ,29,8000,32000,32,8,32,269,253\n")
        assert record.vendor == "amdahl"
        assert record.model == "470v/7"
        assert record.erp == 253

    def test_features_and_example(self):
        record = parse_machine_line(LINE)
        assert record.features == (125, 256, 6000, 256, 16, 128)
        example = record.to_example()
        assert isinstance(example, LabeledExample)
        assert example.features == (125.0, 256.0, 6000.0, 256.0, 16.0, 128.0)
        assert example.target == 198.0

    @pytest.mark.parametrize("line", [
        "adviser,32/60,125,256,6000,256,16,128,198",
        "adviser,32/60,125,256,6000,256,16,128,198,199,1",
    ])
    def test_wrong_column_count(self, line):
        with pytest.raises(ValidationError, match="expected 10 columns"):
            parse_machine_line(line)

    def test_non_integer_field(self):
        with pytest.raises(ValidationError, match="MMAX"):
            parse_machine_line("adviser,32/60,125,256,6k,256,16,128,198,199")

    def test_format(self):
        text = parse_machine_line(LINE).format()
        assert text.startswith("     adviser")
        assert text.endswith("     198     199")


class TestParseLines:

    def test_skips_blank_lines(self):
        records = parse_machine_lines(["", LINE, "   ", LINE])
        assert len(records) == 2

    def test_malformed_line_warns_and_skips(self):
        with pytest.warns(UserWarning, match="line 2"):
            records = parse_machine_lines([LINE, "garbage", LINE])
        assert len(records) == 2


class TestLoad:

    def test_loads_every_line(self, machine_file, machine_lines):
        records = load_machine_data(machine_file)
        assert len(records) == len(machine_lines)
        assert records[0] == parse_machine_line(machine_lines[0])

    def test_accepts_str_path(self, machine_file):
        assert len(load_machine_data(str(machine_file))) == 40

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_machine_data(tmp_path / "missing.data")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.data"
        path.write_bytes("m\xe9tro,m1,1,2,3,4,5,6,7,8\n".encode("latin-1"))
        with pytest.raises(ValidationError, match="not UTF-8"):
            load_machine_data(path)

    def test_no_valid_records(self, tmp_path):
        path = tmp_path / "bad.data"
        path.write_text("nothing,here\n\n", encoding="utf-8")
        with pytest.warns(UserWarning):
            with pytest.raises(EmptyInputError):
                load_machine_data(path)

    def test_to_examples_keeps_order(self, machine_file):
        records = load_machine_data(machine_file)
        examples = to_examples(records)
        assert [ex.target for ex in examples] == [float(r.prp) for r in records]


class TestDescribe:

    def test_columns_in_order(self, machine_file):
        summaries = describe(load_machine_data(machine_file))
        assert [s.name for s in summaries] == [
            "MYCT", "MMIN", "MMAX", "CACH", "CHMIN", "CHMAX", "PRP",
        ]

    def test_values(self):
        records = [
            parse_machine_line("a,m1,100,10,20,0,1,2,50,40"),
            parse_machine_line("a,m2,300,30,40,8,1,6,150,140"),
        ]
        myct = describe(records)[0]
        assert (myct.minimum, myct.maximum, myct.mean) == (100.0, 300.0, 200.0)
        assert myct.std == pytest.approx(100.0)
        prp = describe(records)[-1]
        assert prp.mean == 100.0
        assert np.isclose(describe(records)[4].std, 0.0)

    def test_format(self):
        records = [parse_machine_line(LINE)]
        assert describe(records)[0].format() == (
            "    MYCT: Min=  125.00, Max=  125.00, Mean=  125.00, Std=    0.00"
        )

    def test_empty(self):
        with pytest.raises(EmptyInputError):
            describe([])
