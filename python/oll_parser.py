"""
OLL face descriptor parsing.

A descriptor is nine characters, one per face position in row-major order.
Whitespace is ignored, so "xUx ===  xDx" and "xUx===xDx" are the same face.
"""

from __future__ import annotations

import logging

from cube_types import (
    FACE_POSITIONS,
    FaceDescriptor,
    IllegalOrientationForPosition,
    MalformedDescriptor,
    Orientation,
    UnknownOrientationChar,
)
from face_layout import LEGAL_ORIENTATIONS

__all__ = ["parse_face_descriptor", "format_face_descriptor", "orientation_from_char"]

logger = logging.getLogger(__name__)

_CHAR_TO_ORIENTATION: dict[str, Orientation] = {
    "U": Orientation.UP,
    "D": Orientation.DOWN,
    "L": Orientation.LEFT,
    "R": Orientation.RIGHT,
    "=": Orientation.FACE,
    "F": Orientation.FACE,
    ".": Orientation.EMPTY,
    "E": Orientation.EMPTY,
    "X": Orientation.EMPTY,
    "x": Orientation.EMPTY,
}


def orientation_from_char(token: str, position: int = 0) -> Orientation:
    """Map a token to an Orientation. Only the first character counts; case sensitive."""
    if not token or token[0] not in _CHAR_TO_ORIENTATION:
        raise UnknownOrientationChar(token[:1], position)
    return _CHAR_TO_ORIENTATION[token[0]]


def parse_face_descriptor(text: str) -> FaceDescriptor:
    """
    Parse an OLL face descriptor.

    Character mapping:
    - U, D, L, R: sticker on the up/down/left/right edge of the cell
    - '=' or F: cell fully colored
    - '.', E, X or x: cell not colored

    Directional characters are only accepted where that edge is an outer
    edge of the face (see LEGAL_ORIENTATIONS).

    Example:
        "xUx===xDx" -> top middle sticker points up, middle row colored,
                       bottom middle sticker points down

    Raises:
        MalformedDescriptor: not exactly nine non-whitespace characters
        UnknownOrientationChar: character outside the mapping
        IllegalOrientationForPosition: edge sticker on an inner edge
    """
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != FACE_POSITIONS:
        raise MalformedDescriptor(len(chars))

    orientations: list[Orientation] = []
    for position, ch in enumerate(chars):
        orientation = orientation_from_char(ch, position)
        if orientation.is_directional and orientation not in LEGAL_ORIENTATIONS[position]:
            raise IllegalOrientationForPosition(position, orientation, LEGAL_ORIENTATIONS[position])
        orientations.append(orientation)

    desc = FaceDescriptor(tuple(orientations))
    logger.debug("parse_face_descriptor: %r -> %s", text, format_face_descriptor(desc))
    return desc


def format_face_descriptor(desc: FaceDescriptor) -> str:
    """Canonical text form, e.g. "xUx===xDx"."""
    return "".join(orientation.value for orientation in desc.orientations)
