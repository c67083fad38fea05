import sys

import atheris

with atheris.instrument_imports():
    from utils import make_block, prepare_dclconv_fuzzing
    from dclconv.dcl import decode_block

from dclconv.dclexceptions import DCLException


def fuzz_one_input(data: bytes) -> None:
    fdp = atheris.FuzzedDataProvider(data)
    try:
        image = decode_block(make_block(fdp))
    except DCLException:
        return
    assert len(image.data) == image.width * image.height * 3


if __name__ == "__main__":
    prepare_dclconv_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
