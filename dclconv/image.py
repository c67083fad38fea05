import logging
import os
import os.path

from PIL import Image

from .dcl import DCLImage

log = logging.getLogger(__name__)


class ImageWriter:
    """Write decoded DCL pictures to BMP files

    The first and last byte of every pixel trade places and the row order
    is reversed before saving.
    """

    ext = ".bmp"

    def __init__(self, outdir: str) -> None:
        self.outdir = outdir
        if not os.path.exists(self.outdir):
            os.makedirs(self.outdir)

    def export_image(self, name: str, image: DCLImage) -> str:
        """Save `image` as `<name>.bmp` in the output directory"""
        filename = name + self.ext
        path = os.path.join(self.outdir, filename)
        img = self.to_pil(image)
        with open(path, "wb") as fp:
            img.save(fp, "BMP")
        log.debug("Wrote %s", path)
        return filename

    @staticmethod
    def to_pil(image: DCLImage) -> Image.Image:
        # the raw decoder swaps channels with the BGR rawmode and reads
        # rows bottom up with orientation -1
        return Image.frombytes(
            "RGB",
            (image.width, image.height),
            image.data,
            "raw",
            "BGR",
            0,
            -1,
        )
