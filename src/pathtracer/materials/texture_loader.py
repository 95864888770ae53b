# materials/texture_loader.py
import logging
import os
import numpy as np
from PIL import Image, UnidentifiedImageError
from pathtracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def load_texture(image_path: str) -> ImageTexture:
    """
    Decode an image file into an ImageTexture with RGB channels in [0, 1].

    Raises FileNotFoundError for a missing path and ValueError when Pillow
    cannot decode the file.
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            data = np.asarray(img.convert("RGB"), dtype=np.float64) / 255.0
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Cannot decode texture {image_path}: {e}") from e

    texture = ImageTexture(data=data)
    logger.debug("Loaded texture %s (%dx%d)", image_path, texture.width, texture.height)
    return texture

def create_image_material(image_path: str, material_class, **material_params):
    """Wrap the image at `image_path` in `material_class` (Lambertian, DiffuseLight, ...)."""
    return material_class(load_texture(image_path), **material_params)
