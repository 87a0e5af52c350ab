"""
Utility functions for creature data derived from the dex number.
"""

from pogo_api.utils.data.constants import ASSETS_BASE_URL, GENERATION_BOUNDARIES


def determine_generation(dex_nr: int) -> int:
    """Determine the generation a creature was introduced in.

    Args:
        dex_nr (int): The national dex number

    Returns:
        int: The generation number, or 0 if the dex number is outside all known generations
    """
    for generation, last_dex_nr in GENERATION_BOUNDARIES.items():
        if 0 < dex_nr <= last_dex_nr:
            return generation
    return 0


def get_asset_image_url(dex_nr: int, asset_bundle_id: int, base_url: str = ASSETS_BASE_URL) -> str:
    """Build the icon URL for a creature asset.

    Args:
        dex_nr (int): The national dex number
        asset_bundle_id (int): The asset bundle value of the form (0 for the default icon)
        base_url (str, optional): URL template with ``dex_nr`` and ``asset_bundle_id`` fields.

    Returns:
        str: The formatted image URL
    """
    return base_url.format(dex_nr=dex_nr, asset_bundle_id=asset_bundle_id)
