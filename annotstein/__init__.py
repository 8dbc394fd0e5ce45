"""
The annotstein module reads, checks, combines, and splits datasets stored in
the Microsoft COCO json format.

The main data structure is :class:`annotstein.CocoDataset`, which holds the
images, annotations, categories, licenses and info of one COCO file as
ordered lists of plain records (see :mod:`annotstein.coco_objects`).

.. code:: python

        >>> import annotstein
        >>> from annotstein.coco_objects import Image, Annotation, Category
        >>> dset = annotstein.CocoDataset(
        >>>     images=[Image(1, 'a.jpg', 640, 480), Image(2, 'b.jpg', 640, 480)],
        >>>     annotations=[Annotation(1, 1, 1, [10, 10, 20, 20]),
        >>>                  Annotation(2, 2, 1, [0, 0, 5, 5])],
        >>>     categories=[Category(1, 'cat')])
        >>> # Check ids are unique and references resolve
        >>> assert dset.validate()['status']
        >>> # Train / test split by image
        >>> train, test = dset.image_split(0.5)
        >>> assert train.n_annots == 1 and test.n_annots == 1
        >>> # Recombine, renumbering any colliding ids
        >>> combo = annotstein.merge([train, test], remap_ids=True)
        >>> assert combo.n_images == 2
        >>> text = combo.dumps()

The same operations are available from the command line::

    annotstein validate data.json
    annotstein rebase data.json /data/images --dst=rebased.json
    annotstein union a.json b.json --dst=combo.json --remap_ids
    annotstein split data.json --dst1=train.json --dst2=test.json --fraction=0.8
"""

__version__ = '0.1.0'

__submodules__ = {
    'coco_dataset': ['CocoDataset', 'merge'],
    'coco_objects': ['Annotation', 'Category', 'Image', 'Info', 'License'],
    'exceptions': [],
}


def lazy_import(module_name, submodules, submod_attrs):
    import importlib
    import os
    name_to_submod = {
        func: mod for mod, funcs in submod_attrs.items()
        for func in funcs
    }

    def __getattr__(name):
        if name in submodules:
            attr = importlib.import_module(
                '{module_name}.{name}'.format(
                    module_name=module_name, name=name)
            )
        elif name in name_to_submod:
            submodname = name_to_submod[name]
            module = importlib.import_module(
                '{module_name}.{submodname}'.format(
                    module_name=module_name, submodname=submodname)
            )
            attr = getattr(module, name)
        else:
            raise AttributeError(
                'No {module_name} attribute {name}'.format(
                    module_name=module_name, name=name))
        globals()[name] = attr
        return attr

    if os.environ.get('EAGER_IMPORT', ''):
        for name in submodules:
            __getattr__(name)

        for attrs in submod_attrs.values():
            for attr in attrs:
                __getattr__(attr)
    return __getattr__


__getattr__ = lazy_import(
    __name__,
    submodules={
        'coco_dataset',
        'coco_objects',
        'coco_schema',
        'exceptions',
    },
    submod_attrs={
        'coco_dataset': [
            'CocoDataset',
            'merge',
        ],
        'coco_objects': [
            'Annotation',
            'Category',
            'Image',
            'Info',
            'License',
        ],
    },
)


def __dir__():
    return __all__

__all__ = ['Annotation', 'Category', 'CocoDataset', 'Image', 'Info', 'License',
           'coco_dataset', 'coco_objects', 'coco_schema', 'exceptions',
           'merge']
