# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from tiletracer.materials.textures import ImageTexture

logger = logging.getLogger(__name__)

def decode_bitmap(image_path: str) -> np.ndarray:
    """
    Decode an image file into a (height, width, 3) uint8 array, top row first.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the file cannot be decoded as an image
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.asarray(img, dtype=np.uint8).copy()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture.

    A file that is missing or cannot be decoded does not stop the render:
    a warning is logged and the returned texture samples the debug color.
    """
    try:
        data = decode_bitmap(image_path)
    except (FileNotFoundError, ValueError) as e:
        logger.warning("Could not load texture image file %r: %s", image_path, e)
        return ImageTexture(None)

    logger.debug("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data)

def create_image_material(image_path: str, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, DiffuseLight)
        **material_params: Additional parameters for the material

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
