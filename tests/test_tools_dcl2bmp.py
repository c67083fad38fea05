import os

import tools.dcl2bmp as dcl2bmp
from helpers import make_block


def run(indir, outdir, options=None):
    s = "dcl2bmp {} {}".format(indir, outdir)
    if options:
        s += " " + options
    return dcl2bmp.main(s.split(" ")[1:])


class TestDcl2Bmp:
    def test_converts_directory(self, tmp_path):
        indir = tmp_path / "in"
        indir.mkdir()
        (indir / "A.DCL").write_bytes(make_block(b"L"))
        (indir / "B.DCL").write_bytes(
            make_block(b"P", "00 " + "1" * 24 + " 0 11 " + "1" * 21)
        )
        outdir = tmp_path / "out"
        assert run(indir, outdir) == 0
        assert sorted(os.listdir(str(outdir))) == ["A.bmp", "B.bmp"]

    def test_partial_failure_exits_zero(self, tmp_path, caplog):
        indir = tmp_path / "in"
        indir.mkdir()
        (indir / "A.DCL").write_bytes(make_block(b"L"))
        (indir / "BAD.DCL").write_bytes(b"L")
        outdir = tmp_path / "out"
        assert run(indir, outdir, "-d") == 0
        assert os.listdir(str(outdir)) == ["A.bmp"]
        assert "Error converting BAD.DCL" in caplog.text
        assert "Converted: A.DCL" in caplog.text

    def test_pattern(self, tmp_path):
        (tmp_path / "A.IMG").write_bytes(make_block(b"L"))
        outdir = tmp_path / "out"
        assert run(tmp_path, outdir, "-p *.img") == 0
        assert os.listdir(str(outdir)) == ["A.bmp"]

    def test_missing_input_dir(self, tmp_path):
        assert run(tmp_path / "nope", tmp_path / "out") == 1
        assert not (tmp_path / "out").exists()
