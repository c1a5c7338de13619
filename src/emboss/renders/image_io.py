from pathlib import Path

from PIL import Image
from returns.io import impure_safe

from emboss.container_models.canvas import Canvas
from emboss.utils.logger import log_railway_function


@log_railway_function("Failed to save canvas", "Successfully saved canvas")
@impure_safe
def save_canvas(canvas: Canvas, output_path: Path) -> Path:
    """
    Encode the canvas as an image file; the format follows the file suffix.

    :param canvas: The canvas to be written.
    :param output_path: The path where the image should be written.
    :returns: The path to the saved image, wrapped in an `IOResult`.
    """
    canvas.image.save(output_path)
    return output_path


@log_railway_function("Failed to load canvas")
@impure_safe
def load_canvas(image_path: Path) -> Canvas:
    """Read an image file into a new RGBA canvas to draw over."""
    with Image.open(image_path) as image:
        return Canvas.from_image(image)
