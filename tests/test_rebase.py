import os
import pytest


def _demo_dataset():
    import annotstein
    from annotstein.coco_objects import Image
    return annotstein.CocoDataset(images=[
        Image(1, 'a.jpg', 10, 10),
        Image(2, 'sub/dir/b.png', 10, 10),
        Image(3, 'sub/../c.png', 10, 10),
    ])


def test_rebase_joins_base_path():
    dset = _demo_dataset()
    result = dset.rebase('/data')
    assert result is dset
    names = [img.file_name for img in dset.images]
    assert names == [
        os.path.normpath('/data/a.jpg'),
        os.path.normpath('/data/sub/dir/b.png'),
        os.path.normpath('/data/c.png'),
    ]


@pytest.mark.skipif(os.name != 'posix', reason='posix paths')
def test_rebase_posix_example():
    dset = _demo_dataset()
    dset.rebase('/data')
    assert dset.images[0].file_name == '/data/a.jpg'


def test_rebase_accepts_pathlike():
    import ubelt as ub
    dset = _demo_dataset()
    dset.rebase(ub.Path('/data') / 'images')
    assert dset.images[0].file_name == os.path.normpath('/data/images/a.jpg')


def test_rebase_relative_base():
    dset = _demo_dataset()
    dset.rebase('bundle/')
    assert dset.images[0].file_name == os.path.join('bundle', 'a.jpg')


@pytest.mark.skipif(os.name != 'posix', reason='posix paths')
def test_rebase_keeps_absolute_names():
    import annotstein
    from annotstein.coco_objects import Image
    dset = annotstein.CocoDataset(images=[Image(1, '/abs/a.jpg', 1, 1)])
    dset.rebase('/data')
    assert dset.images[0].file_name == '/abs/a.jpg'


def test_rebase_leaves_other_tables_alone():
    import annotstein
    from annotstein.coco_objects import Image, Annotation, Category
    dset = annotstein.CocoDataset(
        images=[Image(1, 'a.jpg', 1, 1)],
        annotations=[Annotation(1, 1, 1, [0, 0, 1, 1])],
        categories=[Category(1, 'cat')])
    before = dset.copy()
    dset.rebase('/data')
    assert dset.annotations == before.annotations
    assert dset.categories == before.categories
    assert dset.info == before.info
    assert before.images[0].file_name == 'a.jpg'
