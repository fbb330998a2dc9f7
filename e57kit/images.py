"""Image descriptors stored in the XML section of E57 files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union
from xml.etree.ElementTree import Element

from .blob import Blob
from .date_time import DateTime
from .errors import InvalidError
from .xmlutil import (
    _local_name,
    find_child,
    gen_float,
    gen_int,
    gen_string,
    opt_string,
    req_f64,
    req_int,
    req_string,
)


def _req_u32(node: Element, tag_name: str) -> int:
    value = req_int(node, tag_name)
    if not 0 <= value < (1 << 32):
        raise InvalidError(f"Value {value} of XML tag '{tag_name}' does not fit into u32")
    return value


def _mask_xml(mask: Blob | None) -> str:
    return "" if mask is None else mask.xml_string("imageMask")


class ImageFormat(Enum):
    """File format of an image blob."""

    PNG = "png"
    JPEG = "jpeg"

    @property
    def tag_name(self) -> str:
        """Name of the XML element that holds a blob of this format."""
        return "pngImage" if self is ImageFormat.PNG else "jpegImage"


@dataclass
class ImageBlob:
    """A blob with image data and its file format."""

    data: Blob
    format: ImageFormat

    @classmethod
    def from_rep_node(cls, rep_node: Element) -> ImageBlob:
        """Find the JPEG or PNG blob inside a representation element."""
        for image_format in (ImageFormat.JPEG, ImageFormat.PNG):
            node = find_child(rep_node, image_format.tag_name)
            if node is not None:
                return cls(data=Blob.from_node(node), format=image_format)
        raise InvalidError("Cannot find PNG or JPEG blob")

    def xml_string(self) -> str:
        """Serialize as a pngImage or jpegImage blob element."""
        return self.data.xml_string(self.format.tag_name)


@dataclass
class VisualReferenceImageProperties:
    """Size of a visual reference image in pixels."""

    width: int
    height: int


@dataclass
class VisualReferenceImage:
    """A preview image that cannot be projected onto points."""

    blob: ImageBlob
    properties: VisualReferenceImageProperties
    mask: Blob | None = None

    @classmethod
    def from_node(cls, node: Element) -> VisualReferenceImage:
        """Parse a visualReferenceRepresentation structure."""
        return cls(
            blob=ImageBlob.from_rep_node(node),
            mask=Blob.from_parent_node("imageMask", node),
            properties=VisualReferenceImageProperties(
                width=_req_u32(node, "imageWidth"),
                height=_req_u32(node, "imageHeight"),
            ),
        )

    def xml_string(self) -> str:
        """Serialize as a visualReferenceRepresentation structure."""
        return (
            '<visualReferenceRepresentation type="Structure">\n'
            + self.blob.xml_string()
            + _mask_xml(self.mask)
            + gen_int("imageWidth", self.properties.width)
            + gen_int("imageHeight", self.properties.height)
            + "</visualReferenceRepresentation>\n"
        )


@dataclass
class PinholeImageProperties:
    """Parameters of a pinhole camera projection."""

    width: int
    height: int
    focal_length: float
    pixel_width: float
    pixel_height: float
    principal_x: float
    principal_y: float


@dataclass
class PinholeImage:
    """An image with a pinhole camera projection model."""

    blob: ImageBlob
    properties: PinholeImageProperties
    mask: Blob | None = None

    @classmethod
    def from_node(cls, node: Element) -> PinholeImage:
        """Parse a pinholeRepresentation structure."""
        return cls(
            blob=ImageBlob.from_rep_node(node),
            mask=Blob.from_parent_node("imageMask", node),
            properties=PinholeImageProperties(
                width=_req_u32(node, "imageWidth"),
                height=_req_u32(node, "imageHeight"),
                focal_length=req_f64(node, "focalLength"),
                pixel_width=req_f64(node, "pixelWidth"),
                pixel_height=req_f64(node, "pixelHeight"),
                principal_x=req_f64(node, "principalPointX"),
                principal_y=req_f64(node, "principalPointY"),
            ),
        )

    def xml_string(self) -> str:
        """Serialize as a pinholeRepresentation structure."""
        props = self.properties
        return (
            '<pinholeRepresentation type="Structure">\n'
            + self.blob.xml_string()
            + _mask_xml(self.mask)
            + gen_int("imageWidth", props.width)
            + gen_int("imageHeight", props.height)
            + gen_float("focalLength", props.focal_length)
            + gen_float("pixelWidth", props.pixel_width)
            + gen_float("pixelHeight", props.pixel_height)
            + gen_float("principalPointX", props.principal_x)
            + gen_float("principalPointY", props.principal_y)
            + "</pinholeRepresentation>\n"
        )


@dataclass
class SphericalImageProperties:
    """Parameters of a spherical projection."""

    width: int
    height: int
    pixel_width: float
    pixel_height: float


@dataclass
class SphericalImage:
    """An image with a spherical projection model."""

    blob: ImageBlob
    properties: SphericalImageProperties
    mask: Blob | None = None

    @classmethod
    def from_node(cls, node: Element) -> SphericalImage:
        """Parse a sphericalRepresentation structure."""
        return cls(
            blob=ImageBlob.from_rep_node(node),
            mask=Blob.from_parent_node("imageMask", node),
            properties=SphericalImageProperties(
                width=_req_u32(node, "imageWidth"),
                height=_req_u32(node, "imageHeight"),
                pixel_width=req_f64(node, "pixelWidth"),
                pixel_height=req_f64(node, "pixelHeight"),
            ),
        )

    def xml_string(self) -> str:
        """Serialize as a sphericalRepresentation structure."""
        props = self.properties
        return (
            '<sphericalRepresentation type="Structure">\n'
            + self.blob.xml_string()
            + _mask_xml(self.mask)
            + gen_int("imageWidth", props.width)
            + gen_int("imageHeight", props.height)
            + gen_float("pixelWidth", props.pixel_width)
            + gen_float("pixelHeight", props.pixel_height)
            + "</sphericalRepresentation>\n"
        )


@dataclass
class CylindricalImageProperties:
    """Parameters of a cylindrical projection."""

    width: int
    height: int
    radius: float
    principal_y: float
    pixel_width: float
    pixel_height: float


@dataclass
class CylindricalImage:
    """An image with a cylindrical projection model."""

    blob: ImageBlob
    properties: CylindricalImageProperties
    mask: Blob | None = None

    @classmethod
    def from_node(cls, node: Element) -> CylindricalImage:
        """Parse a cylindricalRepresentation structure."""
        return cls(
            blob=ImageBlob.from_rep_node(node),
            mask=Blob.from_parent_node("imageMask", node),
            properties=CylindricalImageProperties(
                width=_req_u32(node, "imageWidth"),
                height=_req_u32(node, "imageHeight"),
                radius=req_f64(node, "radius"),
                principal_y=req_f64(node, "principalPointY"),
                pixel_width=req_f64(node, "pixelWidth"),
                pixel_height=req_f64(node, "pixelHeight"),
            ),
        )

    def xml_string(self) -> str:
        """Serialize as a cylindricalRepresentation structure."""
        props = self.properties
        return (
            '<cylindricalRepresentation type="Structure">\n'
            + self.blob.xml_string()
            + _mask_xml(self.mask)
            + gen_int("imageWidth", props.width)
            + gen_int("imageHeight", props.height)
            + gen_float("readius", props.radius)
            + gen_float("principalPointY", props.principal_y)
            + gen_float("pixelWidth", props.pixel_width)
            + gen_float("pixelHeight", props.pixel_height)
            + "</cylindricalRepresentation>\n"
        )


Projection = Union[PinholeImage, SphericalImage, CylindricalImage]

_PROJECTIONS: tuple[tuple[str, Any], ...] = (
    ("pinholeRepresentation", PinholeImage),
    ("sphericalRepresentation", SphericalImage),
    ("cylindricalRepresentation", CylindricalImage),
)


def projection_from_image_node(image_node: Element) -> Projection | None:
    """Parse the projected representation of an image, if it has one."""
    for tag_name, kind in _PROJECTIONS:
        node = find_child(image_node, tag_name)
        if node is not None:
            return kind.from_node(node)
    return None


@dataclass
class Image:
    """Descriptor with the metadata of a single image.

    ``transform`` is kept for serialization as the ``pose`` element; it must
    provide ``xml_string(tag_name)``.  Parsing does not interpret the pose.
    """

    guid: str
    visual_reference: VisualReferenceImage | None = None
    projection: Projection | None = None
    transform: Any = None
    pointcloud_guid: str | None = None
    name: str | None = None
    description: str | None = None
    acquisition: DateTime | None = None
    sensor_vendor: str | None = None
    sensor_model: str | None = None
    sensor_serial: str | None = None

    @classmethod
    def from_node(cls, node: Element) -> Image:
        """Parse an image structure from the images2D vector."""
        acquisition_node = find_child(node, "acquisitionDateTime")
        visual_node = find_child(node, "visualReferenceRepresentation")
        return cls(
            guid=req_string(node, "guid"),
            pointcloud_guid=opt_string(node, "associatedData3DGuid"),
            name=opt_string(node, "name"),
            description=opt_string(node, "description"),
            sensor_model=opt_string(node, "sensorModel"),
            sensor_vendor=opt_string(node, "sensorVendor"),
            sensor_serial=opt_string(node, "sensorSerialNumber"),
            acquisition=(
                None if acquisition_node is None else DateTime.from_node(acquisition_node)
            ),
            projection=projection_from_image_node(node),
            visual_reference=(
                None if visual_node is None else VisualReferenceImage.from_node(visual_node)
            ),
        )

    def xml_string(self) -> str:
        """Serialize as a vectorChild structure of the images2D vector."""
        parts = ['<vectorChild type="Structure">\n', gen_string("guid", self.guid)]
        if self.visual_reference is not None:
            parts.append(self.visual_reference.xml_string())
        if self.projection is not None:
            parts.append(self.projection.xml_string())
        if self.transform is not None:
            parts.append(self.transform.xml_string("pose"))
        if self.pointcloud_guid is not None:
            parts.append(gen_string("associatedData3DGuid", self.pointcloud_guid))
        if self.name is not None:
            parts.append(gen_string("name", self.name))
        if self.description is not None:
            parts.append(gen_string("description", self.description))
        if self.acquisition is not None:
            parts.append(self.acquisition.xml_string("acquisitionDateTime"))
        if self.sensor_vendor is not None:
            parts.append(gen_string("sensorVendor", self.sensor_vendor))
        if self.sensor_model is not None:
            parts.append(gen_string("sensorModel", self.sensor_model))
        if self.sensor_serial is not None:
            parts.append(gen_string("sensorSerialNumber", self.sensor_serial))
        parts.append("</vectorChild>\n")
        return "".join(parts)


def images_from_document(root: Element) -> list[Image]:
    """Parse all image descriptors of the images2D vector in an XML document."""
    images2d = next(
        (
            element
            for element in root.iter()
            if isinstance(element.tag, str) and _local_name(element.tag) == "images2D"
        ),
        None,
    )
    if images2d is None:
        raise InvalidError("Cannot find 'images2D' tag in XML document")
    return [
        Image.from_node(child)
        for child in images2d
        if isinstance(child.tag, str)
        and _local_name(child.tag) == "vectorChild"
        and child.get("type") == "Structure"
    ]