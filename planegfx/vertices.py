"""Vertex attribute layouts and packing of mesh data into vertex buffers."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from planegfx.mesh import Mesh

GL_FLOAT = 0x1406
"""The GL enum value for single-precision float attribute components."""

_FLOAT_SIZE = struct.calcsize("<f")


class AttributeType(Enum):
    """The kinds of per-vertex data a layout can hold."""

    POINT = auto()
    COLOR = auto()
    TEXTURE_COORDINATE = auto()


@dataclass(frozen=True)
class TypeDescription:
    """How one attribute is laid out inside a vertex."""

    elements_number: int = 0
    elements_type: int = 0
    size_in_bytes: int = 0
    should_normalize: bool = False


_COMPONENTS = {
    AttributeType.POINT: 2,
    AttributeType.TEXTURE_COORDINATE: 2,
    AttributeType.COLOR: 4,
}


def _describe(type_: AttributeType) -> TypeDescription:
    count = _COMPONENTS[AttributeType(type_)]
    return TypeDescription(
        elements_number=count,
        elements_type=GL_FLOAT,
        size_in_bytes=count * _FLOAT_SIZE,
        should_normalize=False,
    )


class AttributeLayout(NamedTuple):
    """Where one attribute sits in an interleaved vertex buffer."""

    index: int
    elements_number: int
    elements_type: int
    normalized: bool
    stride: int
    offset: int


class VerticesDescription:
    """An ordered list of attributes that make up one interleaved vertex."""

    def __init__(self, *types: AttributeType) -> None:
        self._types: list[AttributeType] = []
        self._descriptions: list[TypeDescription] = []
        self.vertex_size = 0
        for type_ in types:
            self.add_type(type_)

    @property
    def types(self) -> tuple[AttributeType, ...]:
        """The attribute types, in vertex order."""
        return tuple(self._types)

    @property
    def descriptions(self) -> tuple[TypeDescription, ...]:
        """The description of each attribute, in vertex order."""
        return tuple(self._descriptions)

    def add_type(self, type_: AttributeType) -> None:
        """Append an attribute to the end of the vertex."""
        description = _describe(type_)
        self._types.append(AttributeType(type_))
        self._descriptions.append(description)
        self.vertex_size += description.size_in_bytes

    def attribute_layout(self) -> Iterator[AttributeLayout]:
        """Yield the pointer setup for each attribute, in order."""
        offset = 0
        for index, description in enumerate(self._descriptions):
            yield AttributeLayout(
                index=index,
                elements_number=description.elements_number,
                elements_type=description.elements_type,
                normalized=description.should_normalize,
                stride=self.vertex_size,
                offset=offset,
            )
            offset += description.size_in_bytes


def pack_mesh(mesh: Mesh, layout: VerticesDescription) -> bytes:
    """Interleave a mesh's data as little-endian floats following ``layout``.

    One vertex is written per mesh point; a mesh that lacks data for an
    attribute in the layout raises ``ValueError``.
    """
    sources = {
        AttributeType.POINT: ("points", mesh.points),
        AttributeType.COLOR: ("colors", mesh.colors),
        AttributeType.TEXTURE_COORDINATE: ("texture coordinates", mesh.texture_coordinates),
    }
    count = len(mesh)
    for type_ in layout.types:
        name, values = sources[type_]
        if len(values) < count:
            raise ValueError(f"mesh has {len(values)} {name} for {count} points")

    buffer = bytearray()
    for i in range(count):
        for type_ in layout.types:
            if type_ is AttributeType.COLOR:
                color = mesh.colors[i]
                buffer += struct.pack("<4f", color.r, color.g, color.b, color.a)
            else:
                vec = sources[type_][1][i]
                buffer += struct.pack("<2f", vec.x, vec.y)
    return bytes(buffer)