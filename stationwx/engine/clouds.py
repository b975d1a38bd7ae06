# stationwx/engine/clouds.py
"""
Ceiling and cloud summary from reported cloud layers.

Only broken, overcast and vertical-visibility layers form a ceiling.
Few/scattered layers still show up in the summary string.
"""

from typing import Iterable, Optional

from .models import CloudAmount, CloudLayer
from .units import meters_to_feet, round_half_up

NO_CLOUDS = "SKC"
UNKNOWN_BASE = "///"


def extract_ceiling_ft(layers: Iterable[CloudLayer]) -> Optional[int]:
    """
    Lowest ceiling-forming base in feet.

    Args:
        layers: Cloud layers in reported order

    Returns:
        Ceiling in whole feet, or None if no BKN/OVC/VV layer has a known base
    """
    bases_m = [
        layer.base_m
        for layer in layers
        if layer.amount.forms_ceiling and layer.base_m is not None
    ]
    if not bases_m:
        return None
    return round_half_up(meters_to_feet(min(bases_m)))


def _layer_token(layer: CloudLayer) -> str:
    if layer.amount is CloudAmount.UNRECOGNIZED:
        amount = (layer.raw_amount or "").strip().upper()[:3] or CloudAmount.UNRECOGNIZED.value
    else:
        amount = layer.amount.value

    if layer.amount is CloudAmount.CLEAR:
        return amount
    if layer.base_m is None:
        return amount + UNKNOWN_BASE
    hundreds = round_half_up(meters_to_feet(layer.base_m) / 100)
    return f"{amount}{hundreds:03d}"


def summarize_clouds(layers: Iterable[CloudLayer]) -> str:
    """METAR-style sky condition, e.g. "FEW025 BKN040 OVC///"."""
    tokens = [_layer_token(layer) for layer in layers]
    return " ".join(tokens) if tokens else NO_CLOUDS
