"""Functions that can be used for the most common use-cases for dclconv"""

import fnmatch
import logging
import os
import os.path
from typing import Iterable, List, Optional

from .dcl import decode_file
from .dclexceptions import DCLException
from .image import ImageWriter

log = logging.getLogger(__name__)


class ConversionResult:
    """Outcome of converting one file.

    :param path: the input file.
    :param output: name of the written image, None when conversion failed.
    :param error: the exception that stopped the conversion, if any.
    """

    def __init__(
        self,
        path: str,
        output: Optional[str] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.path = path
        self.output = output
        self.error = error

    def __repr__(self) -> str:
        if self.error is not None:
            return "<ConversionResult %s error=%r>" % (self.name, self.error)
        return "<ConversionResult %s -> %s>" % (self.name, self.output)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def ok(self) -> bool:
        return self.error is None


class ConversionReport:
    def __init__(self, results: Iterable[ConversionResult] = ()) -> None:
        self.results: List[ConversionResult] = list(results)

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def converted(self) -> List[ConversionResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[ConversionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failed


def convert_file(path: str, imagewriter: ImageWriter) -> ConversionResult:
    """Decode one DCL file and save it through `imagewriter`.

    Decoding, I/O and image saving errors are returned in the result
    instead of raised, so one bad file never stops a batch.
    """
    result = ConversionResult(path)
    stem = os.path.splitext(result.name)[0]
    try:
        image = decode_file(path)
        result.output = imagewriter.export_image(stem, image)
    except (DCLException, OSError, ValueError) as e:
        result.error = e
        log.error("Error converting %s: %s", result.name, e)
    else:
        log.info("Converted: %s", result.name)
    return result


def find_files(indir: str, pattern: str = "*.DCL") -> List[str]:
    """Return the files in `indir` matching `pattern`, ignoring case."""
    pattern = pattern.lower()
    return sorted(
        os.path.join(indir, name)
        for name in os.listdir(indir)
        if fnmatch.fnmatchcase(name.lower(), pattern)
        and os.path.isfile(os.path.join(indir, name))
    )


def convert_dir(
    indir: str, outdir: str, pattern: str = "*.DCL"
) -> ConversionReport:
    """Convert every matching file in `indir` to a BMP in `outdir`.

    :param indir: directory holding the DCL files; not searched recursively.
    :param outdir: directory for the BMP files, created when missing.
    :param pattern: shell-style file name pattern, matched case-insensitively.
    :return: a ConversionReport with one result per matching file.
    """
    paths = find_files(indir, pattern)
    imagewriter = ImageWriter(outdir)
    report = ConversionReport()
    for path in paths:
        report.results.append(convert_file(path, imagewriter))
    log.info(
        "%d converted, %d failed", len(report.converted), len(report.failed)
    )
    return report
