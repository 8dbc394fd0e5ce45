"""
Plain records for the items stored in each table of a COCO document.

Each record is a dataclass that knows how to read itself from the external
json shape (:func:`from_dict`) and how to write itself back (:func:`to_dict`).
Optional fields take documented defaults, so partially specified documents
still load. Required fields and types are enforced by
:data:`annotstein.coco_schema.COCO_SCHEMA` before these constructors run.

Example:
    >>> from annotstein.coco_objects import *  # NOQA
    >>> img = Image.from_dict({'id': 1, 'file_name': 'x.jpg', 'width': 10, 'height': 10})
    >>> img.license
    0
    >>> ann = Annotation.from_dict({'id': 1, 'image_id': 1, 'category_id': 1, 'bbox': [0, 0, 5, 5]})
    >>> ann.bbox
    [0.0, 0.0, 5.0, 5.0]
    >>> Annotation.from_dict(ann.to_dict()) == ann
    True
"""
import copy
import ubelt as ub
from dataclasses import dataclass, field, fields
from typing import Dict, List

DEFAULT_INFO_VERSION = '0.1.0'


class _CocoRecord:
    """
    Shared json conversion for the dataclass records.

    Subclasses may define ``_coerce`` to cast raw json values into the stored
    python types.
    """
    _coerce = {}

    @classmethod
    def from_dict(cls, data):
        """
        Create a record from a json dictionary. Unknown keys are ignored.

        Args:
            data (Dict[str, Any]): the json object

        Returns:
            _CocoRecord
        """
        known = {f.name for f in fields(cls)}
        kw = {}
        for key, value in data.items():
            if key in known:
                caster = cls._coerce.get(key, None)
                kw[key] = value if caster is None else caster(value)
        return cls(**kw)

    def to_dict(self):
        """
        Returns:
            Dict[str, Any]: a json-serializable copy of this record
        """
        return {f.name: copy.deepcopy(getattr(self, f.name))
                for f in fields(self)}


def _floats(values):
    return [float(v) for v in values]


def _polygons(polygons):
    return [_floats(poly) for poly in polygons]


def _str_mapping(mapping):
    return {str(k): str(v) for k, v in mapping.items()}


@dataclass
class Image(_CocoRecord):
    id: int
    file_name: str
    width: int
    height: int
    date_captured: str = ''
    coco_url: str = ''
    license: int = 0
    flickr_url: str = ''

    _coerce = {
        'id': int,
        'width': int,
        'height': int,
        'license': int,
    }


@dataclass
class Annotation(_CocoRecord):
    """
    A single labeled region: a box, optional polygons, on one image in one
    category.
    """
    id: int
    image_id: int
    category_id: int
    bbox: List[float]
    area: float = 0.0
    iscrowd: int = 0
    segmentation: List[List[float]] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)

    _coerce = {
        'id': int,
        'image_id': int,
        'category_id': int,
        'bbox': _floats,
        'area': float,
        'iscrowd': int,
        'segmentation': _polygons,
        'attributes': _str_mapping,
    }


@dataclass
class Category(_CocoRecord):
    id: int
    name: str
    supercategory: str = ''

    _coerce = {'id': int}


@dataclass
class License(_CocoRecord):
    id: int
    name: str
    description: str = ''

    _coerce = {'id': int}


@dataclass
class Info(_CocoRecord):
    """
    Dataset level metadata. Not referenced by any other table.

    Use :func:`Info.new` for fresh metadata stamped with the current time.
    """
    name: str = ''
    version: str = DEFAULT_INFO_VERSION
    date: str = ''
    description: str = ''
    author: str = ''

    @classmethod
    def new(cls):
        """
        Example:
            >>> from annotstein.coco_objects import Info
            >>> info = Info.new()
            >>> assert info.version == '0.1.0'
            >>> assert info.date
        """
        return cls(date=ub.timestamp())

    @classmethod
    def from_dict(cls, data):
        self = super().from_dict(data)
        if 'date' not in data:
            self.date = ub.timestamp()
        return self
