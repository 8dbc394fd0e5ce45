"""
An in-memory implementation of the MS-COCO annotation format [CocoFormat]_.

A COCO document is a json file with tables of images, annotations (boxes and
polygons tied to an image and a category), categories, licenses, and a block
of dataset level info. The :class:`CocoDataset` holds each table as an ordered
list of records from :mod:`annotstein.coco_objects` and provides:

    * reading / writing (:class:`MixinCocoIO`),
    * structural checks (:class:`MixinCocoValidate`),
    * set-like transforms: union, image and annotation splits, and rebasing
      of image paths (:class:`MixinCocoTransforms`).

Transforms always return new datasets that share no mutable state with their
inputs, with the exception of :func:`MixinCocoTransforms.rebase`, which
edits the image file names in place.

Example:
    >>> import annotstein
    >>> dset = annotstein.CocoDataset.loads(
    >>>     '''
    >>>     {"images": [{"id": 1, "file_name": "x.jpg", "width": 10, "height": 10}],
    >>>      "annotations": [{"id": 1, "image_id": 1, "category_id": 1, "bbox": [0, 0, 5, 5]}],
    >>>      "categories": [{"id": 1, "name": "cat"}]}
    >>>     ''')
    >>> dset.validate()['status']
    True
    >>> dset1, dset2 = dset.image_split(1.0)
    >>> dset1.basic_stats()
    {'n_anns': 1, 'n_imgs': 1, 'n_cats': 1, 'n_licenses': 0}
    >>> dset2.basic_stats()
    {'n_anns': 0, 'n_imgs': 0, 'n_cats': 0, 'n_licenses': 0}

References:
    .. [CocoFormat] http://cocodataset.org/#format-data
"""
import copy
import json
import math
import os
import warnings
import ubelt as ub
from os.path import basename, join, normpath

from annotstein import exceptions
from annotstein._helpers import _ID_Remapper, _first_unique, _find_duplicates
from annotstein.coco_objects import Image, Annotation, Category, License, Info


class MixinCocoIO(object):
    """
    Methods for reading and writing the json representation
    """

    @classmethod
    def parse(cls, source):
        """
        Read a COCO json document from a file.

        Args:
            source (str | PathLike | IO): a path to a json file or an open
                text file object.

        Returns:
            CocoDataset

        Raises:
            annotstein.exceptions.ParseError: if the source cannot be read,
                is not json, or does not conform to the COCO schema.

        Example:
            >>> import annotstein
            >>> import ubelt as ub
            >>> dpath = ub.Path.appdir('annotstein/tests/doctest/parse').ensuredir()
            >>> fpath = dpath / 'data.json'
            >>> _ = fpath.write_text('{"images": [], "annotations": [], "categories": []}')
            >>> dset = annotstein.CocoDataset.parse(fpath)
            >>> dset.tag
            'data.json'
            >>> import pytest
            >>> with pytest.raises(annotstein.exceptions.ParseError):
            >>>     annotstein.CocoDataset.parse(dpath / 'does-not-exist.json')
        """
        if isinstance(source, (str, os.PathLike)):
            fpath = os.fspath(source)
            try:
                with open(fpath, 'r') as file:
                    text = file.read()
            except (OSError, UnicodeDecodeError) as ex:
                raise exceptions.ParseError(
                    'Unable to read fpath={!r}: {}'.format(fpath, ex)) from ex
        else:
            fpath = getattr(source, 'name', None)
            try:
                text = source.read()
            except (OSError, UnicodeDecodeError) as ex:
                raise exceptions.ParseError(
                    'Unable to read {!r}: {}'.format(source, ex)) from ex
        self = cls.loads(text)
        if fpath is not None:
            self.fpath = fpath
            self.tag = basename(fpath)
        return self

    @classmethod
    def loads(cls, text):
        """
        Create a dataset from the text of a COCO json document.

        Raises:
            annotstein.exceptions.ParseError
        """
        try:
            data = json.loads(text)
        except ValueError as ex:
            raise exceptions.ParseError('Invalid json: {}'.format(ex)) from ex
        return cls.from_data(data)

    @classmethod
    def from_data(cls, data):
        """
        Create a dataset from a COCO json dictionary.

        The dictionary is checked against
        :data:`annotstein.coco_schema.COCO_SCHEMA`, and is not modified or
        referenced by the new dataset.

        Args:
            data (Dict): the decoded json document

        Returns:
            CocoDataset

        Raises:
            annotstein.exceptions.ParseError

        Example:
            >>> import annotstein
            >>> import pytest
            >>> data = {
            >>>     'images': [{'id': 1, 'file_name': 'x.jpg', 'width': 10, 'height': 10}],
            >>>     'annotations': [], 'categories': [],
            >>> }
            >>> dset = annotstein.CocoDataset.from_data(data)
            >>> assert dset.info.version == '0.1.0'
            >>> data['images'][0]['id'] = 'one'
            >>> with pytest.raises(annotstein.exceptions.ParseError):
            >>>     annotstein.CocoDataset.from_data(data)
        """
        import jsonschema
        from annotstein.coco_schema import COCO_SCHEMA
        if not isinstance(data, dict):
            raise exceptions.ParseError(
                'A COCO document must be a json object, got {}'.format(
                    type(data).__name__))
        try:
            COCO_SCHEMA.validate(data)
        except jsonschema.ValidationError as ex:
            location = '/'.join(map(str, ex.absolute_path)) or '<root>'
            raise exceptions.ParseError(
                'Failed to validate schema at {}: {}'.format(
                    location, ex.message)) from ex

        try:
            info = data.get('info', None)
            self = cls(
                images=[Image.from_dict(d) for d in data['images']],
                annotations=[Annotation.from_dict(d) for d in data['annotations']],
                categories=[Category.from_dict(d) for d in data['categories']],
                info=Info.new() if info is None else Info.from_dict(info),
                licenses=[License.from_dict(d) for d in data.get('licenses', [])],
            )
        except (TypeError, ValueError) as ex:
            raise exceptions.ParseError(
                'Failed to build dataset: {}'.format(ex)) from ex
        return self

    def to_dict(self):
        """
        Returns:
            Dict: a json-serializable copy of this dataset with every default
                filled in.
        """
        return {
            'info': self.info.to_dict(),
            'licenses': [lic.to_dict() for lic in self.licenses],
            'categories': [cat.to_dict() for cat in self.categories],
            'images': [img.to_dict() for img in self.images],
            'annotations': [ann.to_dict() for ann in self.annotations],
        }

    def dumps(self, indent=None, newlines=True):
        """
        Writes the dataset out to the json format

        Args:
            indent (int | str | None): indentation for the json text. See
                :func:`json.dumps` for details.

            newlines (bool):
                if True, each annotation, image, category gets its own line.
                Defaults to True.

        Returns:
            str

        Example:
            >>> import annotstein
            >>> self = annotstein.CocoDataset.from_data({
            >>>     'images': [{'id': 1, 'file_name': 'x.jpg', 'width': 10, 'height': 10}],
            >>>     'annotations': [{'id': 1, 'image_id': 1, 'category_id': 1, 'bbox': [0, 0, 5, 5]}],
            >>>     'categories': [{'id': 1, 'name': 'cat'}],
            >>> })
            >>> text = self.dumps()
            >>> self2 = annotstein.CocoDataset.loads(text)
            >>> assert self2 == self
            >>> assert self2.images[0] is not self.images[0]
        """
        from annotstein.util import util_json
        data = self.to_dict()
        if newlines:
            text = util_json.pretty_dumps(data, indent=indent)
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False)
        return text

    def dump(self, file=None, indent=None, newlines=True, temp_file='auto'):
        """
        Writes the dataset out to the json format

        Args:
            file (PathLike | IO | None):
                Where to write the data. Can either be a path to a file or an
                open file pointer / stream. If unspecified, it will be written
                to the current ``fpath`` property.

            indent (int | str | None): indentation for the json file.

            newlines (bool):
                if True, each annotation, image, category gets its own line.

            temp_file (bool | str):
                Argument to :func:`safer.open`.  Ignored if ``file`` is not a
                PathLike object. Defaults to 'auto', which is False on Windows
                and True everywhere else.

        Example:
            >>> import annotstein
            >>> import ubelt as ub
            >>> dpath = ub.Path.appdir('annotstein/tests/doctest/dump').ensuredir()
            >>> dset = annotstein.CocoDataset()
            >>> dset.fpath = dpath / 'my_coco_file.json'
            >>> dset.dump()
            >>> assert annotstein.CocoDataset.parse(dset.fpath) == dset
        """
        if file is None:
            file = self.fpath
        if file is None:
            raise ValueError('must specify a file or set fpath before dumping')

        text = self.dumps(indent=indent, newlines=newlines)
        try:
            fpath = os.fspath(file)
        except TypeError:
            # We were given an open file pointer.
            file.write(text)
        else:
            import safer
            if temp_file == 'auto':
                temp_file = not ub.WIN32
            with safer.open(fpath, 'w', temp_file=temp_file) as fp:
                fp.write(text)


class MixinCocoValidate(object):
    """
    Structural checks on the tables of a dataset
    """

    def validate(self, **config):
        """
        Performs checks on this coco dataset.

        Corresponds to the ``annotstein validate`` CLI tool.

        The checks run in this order: unique image ids, unique annotation ids,
        unique category ids, unique license ids, and annotations that
        reference missing images or categories.

        Args:
            **config :
                licenses (default=True): if True, check license ids are unique

                references (default=True): if True, check that every
                annotation points at an existing image and category.

                fastfail (default=True): if True raise the first error found,
                otherwise collect all of them in the result.

                verbose (default=0): verbosity flag

        Returns:
            dict: result containing keys -
                status (bool): False if any errors occurred
                errors (List[ValidationError]): every error found

        Raises:
            annotstein.exceptions.DuplicateIdError:
                if fastfail and ids are reused within a table.

            annotstein.exceptions.DanglingReferenceError:
                if fastfail and an annotation references a missing item.

        Example:
            >>> import annotstein
            >>> from annotstein.coco_objects import Image
            >>> self = annotstein.CocoDataset(images=[
            >>>     Image(id=5, file_name='a.jpg', width=1, height=1),
            >>>     Image(id=5, file_name='b.jpg', width=1, height=1),
            >>> ])
            >>> result = self.validate(fastfail=False)
            >>> result['status']
            False
            >>> result['errors'][0].entity_kind
            'images'
        """
        verbose = config.get('verbose', 0)
        fastfail = config.get('fastfail', True)

        result = {
            'status': True,
            'errors': [],
        }

        def _error(ex):
            if verbose:
                print(ex)
            if fastfail:
                raise ex
            result['status'] = False
            result['errors'].append(ex)

        def _check_unique(table_key, items):
            if verbose:
                print('Check table {!r} has unique ids'.format(table_key))
            duplicates = _find_duplicates(item.id for item in items)
            if duplicates:
                _error(exceptions.DuplicateIdError(table_key, duplicates))

        _check_unique('images', self.images)
        _check_unique('annotations', self.annotations)
        _check_unique('categories', self.categories)

        if config.get('licenses', True):
            _check_unique('licenses', self.licenses)

        if config.get('references', True):
            if verbose:
                print('Check annotations reference existing images and categories')
            valid_gids = {img.id for img in self.images}
            valid_cids = {cat.id for cat in self.categories}
            bad_gids = [(ann.id, ann.image_id) for ann in self.annotations
                        if ann.image_id not in valid_gids]
            if bad_gids:
                _error(exceptions.DanglingReferenceError(
                    'annotations', 'images', bad_gids))
            bad_cids = [(ann.id, ann.category_id) for ann in self.annotations
                        if ann.category_id not in valid_cids]
            if bad_cids:
                _error(exceptions.DanglingReferenceError(
                    'annotations', 'categories', bad_cids))

        if verbose and result['status']:
            print('Dataset is valid')
        return result


def _check_fraction(fraction):
    if not 0 <= fraction <= 1:
        raise ValueError(
            'fraction must be between 0 and 1, got {!r}'.format(fraction))


def _ordered_partition(items, fraction, rng=None):
    """
    Split items into the first ``floor(fraction * len(items))`` items and the
    rest, optionally after a seeded shuffle.
    """
    _check_fraction(fraction)
    items = list(items)
    if rng is not None:
        import kwarray
        rng = kwarray.ensure_rng(rng, api='python')
        rng.shuffle(items)
    n = int(math.floor(fraction * len(items)))
    return items[:n], items[n:]


class MixinCocoTransforms(object):
    """
    Operations that build new datasets from existing ones, and the in-place
    image path rebase.
    """

    def union(*others, remap_ids=False, verbose=0):
        """
        Merges multiple :class:`CocoDataset` items into one.

        All tables are concatenated in input order. The info of the result is
        fresh metadata and is not inherited from any input.

        Args:
            *others : a series of CocoDatasets that we will merge.
                Note, if called as an instance method, the "self" instance
                will be the first item in the "others" list. But if called
                like a classmethod, "others" will be empty by default.

            remap_ids (bool):
                if False, ids are copied as-is, so inputs with overlapping ids
                produce a result that fails :func:`validate`. If True, ids are
                renumbered per table (keeping the original ids where they do
                not collide) and annotation / license references are updated
                to match. Defaults to False.

            verbose (int): verbosity flag

        Returns:
            CocoDataset: a new merged coco dataset

        Example:
            >>> import annotstein
            >>> from annotstein.coco_objects import Image
            >>> dset1 = annotstein.CocoDataset(images=[Image(1, 'a.jpg', 1, 1)])
            >>> dset2 = annotstein.CocoDataset(images=[Image(1, 'b.jpg', 1, 1)])
            >>> combo = annotstein.CocoDataset.union(dset1, dset2)
            >>> [img.file_name for img in combo.images]
            ['a.jpg', 'b.jpg']
            >>> combo = dset1.union(dset2, remap_ids=True)
            >>> [img.id for img in combo.images]
            [1, 2]

        Example:
            >>> import annotstein
            >>> # Test empty union
            >>> empty_union = annotstein.CocoDataset.union()
            >>> assert empty_union.n_images == 0
        """
        if len(others) > 0:
            cls = type(others[0])
        else:
            cls = CocoDataset

        images = []
        annotations = []
        categories = []
        licenses = []

        if remap_ids:
            gid_remapper = _ID_Remapper(reuse=True)
            aid_remapper = _ID_Remapper(reuse=True)
            cid_remapper = _ID_Remapper(reuse=True)
            lid_remapper = _ID_Remapper(reuse=True)

        prog = ub.ProgIter(others, desc='union', enabled=verbose > 0)
        for old_dset in prog:
            new_licenses = copy.deepcopy(old_dset.licenses)
            new_categories = copy.deepcopy(old_dset.categories)
            new_images = copy.deepcopy(old_dset.images)
            new_annotations = copy.deepcopy(old_dset.annotations)

            if remap_ids:
                for lic in new_licenses:
                    lic.id = lid_remapper.remap(lic.id)
                for cat in new_categories:
                    cat.id = cid_remapper.remap(cat.id)
                for img in new_images:
                    img.id = gid_remapper.remap(img.id)
                    # license 0 means unset unless a license actually uses it
                    img.license = lid_remapper.mapping.get(img.license, img.license)
                for ann in new_annotations:
                    ann.id = aid_remapper.remap(ann.id)
                    new_gid = gid_remapper.mapping.get(ann.image_id, None)
                    new_cid = cid_remapper.mapping.get(ann.category_id, None)
                    if new_gid is None:
                        warnings.warn('annot {} in {} has bad image-id {}'.format(
                            ann.id, old_dset.tag, ann.image_id))
                    else:
                        ann.image_id = new_gid
                    if new_cid is None:
                        warnings.warn('annot {} in {} has bad category-id {}'.format(
                            ann.id, old_dset.tag, ann.category_id))
                    else:
                        ann.category_id = new_cid

                # Mark that later datasets may not reuse these ids
                for remapper in [gid_remapper, aid_remapper, cid_remapper,
                                 lid_remapper]:
                    remapper.block_seen()

            licenses.extend(new_licenses)
            categories.extend(new_categories)
            images.extend(new_images)
            annotations.extend(new_annotations)

        new_dset = cls(images=images, annotations=annotations,
                       categories=categories, info=Info.new(),
                       licenses=licenses)
        return new_dset

    def subset(self, gids):
        """
        Return a new dataset containing only the specified images.

        All annotations in those images are taken, along with only the
        categories that those annotations use. The result gets fresh info and
        no licenses. Table order follows the order of this dataset.

        Args:
            gids (Iterable[int]): image-ids to copy into a new dataset

        Returns:
            CocoDataset

        Example:
            >>> import annotstein
            >>> from annotstein.coco_objects import Image, Annotation, Category
            >>> self = annotstein.CocoDataset(
            >>>     images=[Image(1, 'a.jpg', 1, 1), Image(2, 'b.jpg', 1, 1)],
            >>>     annotations=[Annotation(1, 2, 7, [0, 0, 1, 1])],
            >>>     categories=[Category(3, 'unused'), Category(7, 'used')])
            >>> sub = self.subset([2])
            >>> [cat.name for cat in sub.categories]
            ['used']
        """
        chosen_gids = set(gids)
        images = [img for img in self.images if img.id in chosen_gids]
        annotations = [ann for ann in self.annotations
                       if ann.image_id in chosen_gids]
        used_cids = {ann.category_id for ann in annotations}
        categories = [cat for cat in self.categories if cat.id in used_cids]
        sub_dset = self.__class__(
            images=copy.deepcopy(images),
            annotations=copy.deepcopy(annotations),
            categories=copy.deepcopy(categories),
            info=Info.new(),
            licenses=[],
        )
        return sub_dset

    def image_split(self, fraction, rng=None):
        """
        Partition this dataset into two disjoint datasets by image.

        The distinct image ids are taken in order of first appearance (or in a
        seeded random order if ``rng`` is given). The first
        ``floor(fraction * num_images)`` of them go to the first split and the
        rest go to the second. Each split is built with :func:`subset`.

        Args:
            fraction (float): fraction of images in the first split, in [0, 1]

            rng (int | random.Random | None):
                if specified, the images are shuffled with this random seed or
                state before splitting.

        Returns:
            Tuple[CocoDataset, CocoDataset]

        Example:
            >>> import annotstein
            >>> from annotstein.coco_objects import Image
            >>> self = annotstein.CocoDataset(images=[
            >>>     Image(gid, f'{gid}.jpg', 1, 1) for gid in range(1, 11)])
            >>> dset1, dset2 = self.image_split(0.3)
            >>> [img.id for img in dset1.images]
            [1, 2, 3]
            >>> dset2.n_images
            7
        """
        gids = _first_unique(img.id for img in self.images)
        gids1, gids2 = _ordered_partition(gids, fraction, rng=rng)
        return self.subset(gids1), self.subset(gids2)

    def annotation_split(self, fraction, rng=None):
        """
        Partition the annotations of this dataset into two datasets.

        The annotations are split the same way :func:`image_split` splits
        images. Each split keeps the images and categories referenced by its
        own annotations, so an image can belong to both splits. Images without
        annotations are not carried into either split.

        Args:
            fraction (float): fraction of annotations in the first split

            rng (int | random.Random | None):
                if specified, shuffle the annotations with this random seed or
                state before splitting.

        Returns:
            Tuple[CocoDataset, CocoDataset]
        """
        idxs = list(range(len(self.annotations)))
        idxs1, idxs2 = _ordered_partition(idxs, fraction, rng=rng)
        splits = []
        for part_idxs in [idxs1, idxs2]:
            annotations = [self.annotations[idx] for idx in sorted(part_idxs)]
            used_gids = {ann.image_id for ann in annotations}
            used_cids = {ann.category_id for ann in annotations}
            images = [img for img in self.images if img.id in used_gids]
            categories = [cat for cat in self.categories
                          if cat.id in used_cids]
            splits.append(self.__class__(
                images=copy.deepcopy(images),
                annotations=copy.deepcopy(annotations),
                categories=copy.deepcopy(categories),
                info=Info.new(),
                licenses=[],
            ))
        return tuple(splits)

    def rebase(self, base_path, verbose=0):
        """
        Prefix every image file name with a new base path (in place).

        Each ``file_name`` becomes the normalized join of ``base_path`` and
        the current name. This only rewrites strings; the filesystem is not
        touched and the files are not required to exist.

        Args:
            base_path (str | PathLike): the new base directory

            verbose (int): verbosity flag

        Returns:
            CocoDataset: this dataset, modified in place

        Example:
            >>> import annotstein
            >>> from annotstein.coco_objects import Image
            >>> self = annotstein.CocoDataset(images=[Image(1, 'a.jpg', 1, 1)])
            >>> _ = self.rebase('/data')
            >>> # xdoctest: +REQUIRES(POSIX)
            >>> self.images[0].file_name
            '/data/a.jpg'
        """
        base_path = os.fspath(base_path)
        prog = ub.ProgIter(self.images, desc='rebase', enabled=verbose > 0)
        for img in prog:
            img.file_name = normpath(join(base_path, img.file_name))
        return self


class MixinCocoStats(object):
    """
    Methods for getting stats about the dataset
    """

    @property
    def n_annots(self):
        """ The number of annotations in the dataset """
        return len(self.annotations)

    @property
    def n_images(self):
        """ The number of images in the dataset """
        return len(self.images)

    @property
    def n_cats(self):
        """ The number of categories in the dataset """
        return len(self.categories)

    @property
    def n_licenses(self):
        return len(self.licenses)

    def basic_stats(self):
        """
        Reports number of images, annotations, categories, and licenses.

        Returns:
            dict
        """
        return {
            'n_anns': self.n_annots,
            'n_imgs': self.n_images,
            'n_cats': self.n_cats,
            'n_licenses': self.n_licenses,
        }


class CocoDataset(MixinCocoIO, MixinCocoValidate, MixinCocoTransforms,
                  MixinCocoStats, ub.NiceRepr):
    """
    The main coco dataset class: ordered tables of images, annotations,
    categories, and licenses, plus dataset level info.

    Attributes:
        images (List[Image]): the image table
        annotations (List[Annotation]): the annotation table
        categories (List[Category]): the category table
        info (Info): dataset level metadata
        licenses (List[License]): the license table
        tag (str | None): name of the dataset for display purposes
        fpath (str | None): if known, the file this dataset was read from or
            will be written to by default.

    Example:
        >>> import annotstein
        >>> self = annotstein.CocoDataset()
        >>> print('self = {}'.format(self))
        self = <CocoDataset(tag=None, n_anns=0, n_imgs=0, n_cats=0, n_licenses=0)>
    """

    def __init__(self, images=None, annotations=None, categories=None,
                 info=None, licenses=None, tag=None, fpath=None):
        self.images = [] if images is None else list(images)
        self.annotations = [] if annotations is None else list(annotations)
        self.categories = [] if categories is None else list(categories)
        self.info = Info.new() if info is None else info
        self.licenses = [] if licenses is None else list(licenses)
        self.tag = tag
        self.fpath = fpath

    @classmethod
    def coerce(cls, key):
        """
        Attempt to transform the input into a CocoDataset.

        Args:
            key (str | PathLike | Dict | CocoDataset): a path to a coco file,
                a json dictionary, or an existing dataset (returned as-is).

        Returns:
            CocoDataset
        """
        if isinstance(key, cls):
            return key
        elif isinstance(key, dict):
            return cls.from_data(key)
        else:
            return cls.parse(key)

    def copy(self):
        """
        Deep copies this object

        Example:
            >>> import annotstein
            >>> from annotstein.coco_objects import Image
            >>> self = annotstein.CocoDataset(images=[Image(1, 'a.jpg', 1, 1)])
            >>> new = self.copy()
            >>> assert new == self
            >>> assert new.images[0] is not self.images[0]
        """
        new = copy.copy(self)
        new.images = copy.deepcopy(self.images)
        new.annotations = copy.deepcopy(self.annotations)
        new.categories = copy.deepcopy(self.categories)
        new.info = copy.deepcopy(self.info)
        new.licenses = copy.deepcopy(self.licenses)
        return new

    def __eq__(self, other):
        if not isinstance(other, CocoDataset):
            return NotImplemented
        return (
            self.images == other.images and
            self.annotations == other.annotations and
            self.categories == other.categories and
            self.info == other.info and
            self.licenses == other.licenses
        )

    __hash__ = None

    def __nice__(self):
        parts = []
        parts.append('tag={}'.format(self.tag))
        info = ub.urepr(self.basic_stats(), kvsep='=', si=1, nobr=1, nl=0,
                        sort=False)
        parts.append(info)
        return ', '.join(parts)


def merge(datasets, remap_ids=False, verbose=0):
    """
    Merge a sequence of datasets into a new one.

    Functional alias of :func:`CocoDataset.union`.

    Args:
        datasets (Iterable[CocoDataset]): datasets to concatenate in order
        remap_ids (bool): if True, renumber colliding ids. See
            :func:`CocoDataset.union`.
        verbose (int): verbosity flag

    Returns:
        CocoDataset

    Example:
        >>> from annotstein.coco_dataset import merge
        >>> empty = merge([])
        >>> empty.basic_stats()
        {'n_anns': 0, 'n_imgs': 0, 'n_cats': 0, 'n_licenses': 0}
    """
    return CocoDataset.union(*datasets, remap_ids=remap_ids, verbose=verbose)
