"""
The place where the formal schema of an accepted COCO document is defined.

Only the fields that this package reads are described. Optional fields may be
omitted (they take the defaults documented in :mod:`annotstein.coco_objects`),
but when present they must have the right type. Unknown keys are allowed and
ignored.

CommandLine:
    python -m annotstein.coco_schema

Example:
    >>> from annotstein.coco_schema import COCO_SCHEMA
    >>> import jsonschema
    >>> COCO_SCHEMA.validate()
    >>> data = {
    >>>     'images': [{'id': 1, 'file_name': 'x.jpg', 'width': 10, 'height': 10}],
    >>>     'annotations': [{'id': 1, 'image_id': 1, 'category_id': 1, 'bbox': [0, 0, 5, 5]}],
    >>>     'categories': [{'id': 1, 'name': 'cat'}],
    >>> }
    >>> COCO_SCHEMA.validate(data)
    >>> data['images'][0].pop('width')
    >>> import pytest
    >>> with pytest.raises(jsonschema.ValidationError):
    >>>     COCO_SCHEMA.validate(data)
"""
from annotstein.util.jsonschema_elements import SchemaElements
import ubelt as ub

elem = SchemaElements()
ANY = elem.ANY
ANYOF = elem.ANYOF
ARRAY = elem.ARRAY
BOOLEAN = elem.BOOLEAN
INTEGER = elem.INTEGER
NUMBER = elem.NUMBER
OBJECT = elem.OBJECT
STRING = elem.STRING

# All ids and image dimensions are unsigned 32 bit integers
UINT32_MAX = 2 ** 32 - 1
UINT32 = INTEGER(minimum=0, maximum=UINT32_MAX)

ID = UINT32(description='A unique internal id within its own table')

PATH = STRING

BBOX = ARRAY(
    TYPE=NUMBER,
    numItems=4,
    description='[top-left x, top-left-y, width, height] in image-space pixels',
    title='BBOX',
)

MSCOCO_POLYGON = ARRAY(
    TYPE=NUMBER,
    description='a flat polygon [x1,y1,...,xk,yk]',
    title='MSCOCO_POLYGON',
)

SEGMENTATION = ARRAY(
    MSCOCO_POLYGON,
    description='A list of polygons belonging to this annotation',
)

ATTRIBUTES = OBJECT(
    additionalProperties=STRING,
    description='free-form string attributes attached to an annotation',
)

CATEGORY = OBJECT({
    'id': ID,
    'name': STRING(description='A unique external category name'),
    'supercategory': STRING(description='A coarser category name'),
},
    required=['id', 'name'],
    description='High level information about an annotation category',
    title='CATEGORY')

LICENSE = OBJECT({
    'id': ID,
    'name': STRING,
    'description': STRING,
},
    required=['id', 'name'],
    title='LICENSE')

IMAGE = OBJECT({
    'id': ID,
    'file_name': PATH(description='A relative or absolute path to the image file'),
    'width': UINT32(description='The width of the image in pixels'),
    'height': UINT32(description='The height of the image in pixels'),
    'date_captured': STRING,
    'coco_url': STRING,
    'flickr_url': STRING,
    'license': UINT32(description='The license id of this image, 0 if unset'),
},
    required=['id', 'file_name', 'width', 'height'],
    description='High level information about a single image file',
    title='IMAGE')

ANNOTATION = OBJECT({
    'id': ID,
    'image_id': UINT32(description='The image id this annotation belongs to'),
    'category_id': UINT32(description='The category id of this annotation'),
    'bbox': BBOX,
    'area': NUMBER,
    'iscrowd': ANYOF(INTEGER(enum=[0, 1]), BOOLEAN)(description=(
        'A legacy mscoco field used to indicate if an annotation contains '
        'multiple objects')),
    'segmentation': SEGMENTATION,
    'attributes': ATTRIBUTES,
},
    required=['id', 'image_id', 'category_id', 'bbox'],
    description='A labeled region of one image',
    title='ANNOTATION')

INFO = OBJECT({
    'name': STRING,
    'version': STRING,
    'date': STRING,
    'description': STRING,
    'author': STRING,
},
    title='INFO')

COCO_SCHEMA = OBJECT(
    PROPERTIES=ub.odict([
        ('info', INFO),
        ('licenses', ARRAY(LICENSE)),
        ('categories', ARRAY(CATEGORY)),
        ('images', ARRAY(IMAGE)),
        ('annotations', ARRAY(ANNOTATION)),
    ]),
    required=['images', 'annotations', 'categories'],
    description='The accepted COCO document',
    title='COCO_SCHEMA',
)


if __name__ == '__main__':
    """
    CommandLine:
        python -m annotstein.coco_schema > coco_schema.json
    """
    import json
    COCO_SCHEMA.validate()
    print(json.dumps(COCO_SCHEMA, indent='    '))
