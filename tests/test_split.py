"""
Partitioning datasets by image and by annotation
"""
import math
import pytest


def _demo_dataset(num_images=10):
    """
    Image ``gid`` has ``gid % 3`` annotations. Category 4 is never used.
    """
    import annotstein
    from annotstein.coco_objects import Image, Annotation, Category, License
    images = [Image(gid, '{}.jpg'.format(gid), 10, 10)
              for gid in range(1, num_images + 1)]
    annotations = []
    for img in images:
        for idx in range(img.id % 3):
            aid = len(annotations) + 1
            cid = (aid % 3) + 1
            annotations.append(Annotation(aid, img.id, cid, [0, 0, idx, idx]))
    categories = [Category(cid, 'cat{}'.format(cid)) for cid in range(1, 5)]
    dset = annotstein.CocoDataset(
        images=images, annotations=annotations, categories=categories,
        licenses=[License(1, 'CC-BY')])
    return dset


def _tables(dset):
    return dset.images, dset.annotations, dset.categories


def _check_closure(sub):
    gids = {img.id for img in sub.images}
    used_cids = {ann.category_id for ann in sub.annotations}
    for ann in sub.annotations:
        assert ann.image_id in gids
    for cat in sub.categories:
        assert cat.id in used_cids
    assert sub.licenses == []
    assert sub.validate()['status']


def test_end_to_end_split():
    import annotstein
    dset = annotstein.CocoDataset.loads(
        '''
        {"images": [{"id": 1, "file_name": "x.jpg", "width": 10, "height": 10}],
         "annotations": [{"id": 1, "image_id": 1, "category_id": 1, "bbox": [0, 0, 5, 5]}],
         "categories": [{"id": 1, "name": "cat"}]}
        ''')
    assert dset.validate()['status']
    dset1, dset2 = dset.image_split(1.0)
    assert dset1.images == dset.images
    assert dset1.annotations == dset.annotations
    assert dset1.categories == dset.categories
    assert dset2.images == []
    assert dset2.annotations == []
    assert dset2.categories == []


@pytest.mark.parametrize('fraction', [0.0, 0.25, 0.5, 0.7, 0.99, 1.0])
def test_image_split_partitions(fraction):
    dset = _demo_dataset()
    dset1, dset2 = dset.image_split(fraction)
    gids = [img.id for img in dset.images]
    gids1 = [img.id for img in dset1.images]
    gids2 = [img.id for img in dset2.images]

    assert len(gids1) == math.floor(fraction * len(gids))
    assert set(gids1).isdisjoint(gids2)
    assert set(gids1) | set(gids2) == set(gids)
    # Without a seed, images keep their input order
    assert gids1 + gids2 == gids

    # Every annotation ends up on exactly one side
    aids1 = {ann.id for ann in dset1.annotations}
    aids2 = {ann.id for ann in dset2.annotations}
    assert aids1.isdisjoint(aids2)
    assert aids1 | aids2 == {ann.id for ann in dset.annotations}

    _check_closure(dset1)
    _check_closure(dset2)


def test_image_split_drops_unused_categories():
    dset = _demo_dataset()
    dset1, dset2 = dset.image_split(0.5)
    cids = {cat.id for cat in dset1.categories} | {cat.id for cat in dset2.categories}
    assert 4 not in cids


def test_image_split_fresh_info():
    dset = _demo_dataset()
    dset.info.name = 'parent'
    dset1, dset2 = dset.image_split(0.5)
    assert dset1.info.name == ''
    assert dset1.info.version == '0.1.0'
    assert dset2.info.name == ''


def test_image_split_seeded():
    dset = _demo_dataset(num_images=20)
    dset1a, dset2a = dset.image_split(0.3, rng=42)
    dset1b, dset2b = dset.image_split(0.3, rng=42)
    assert _tables(dset1a) == _tables(dset1b)
    assert _tables(dset2a) == _tables(dset2b)

    gids1 = {img.id for img in dset1a.images}
    gids2 = {img.id for img in dset2a.images}
    assert len(gids1) == 6
    assert gids1 | gids2 == {img.id for img in dset.images}
    assert gids1.isdisjoint(gids2)
    _check_closure(dset1a)
    _check_closure(dset2a)

    # Outputs keep the input order even when the selection is shuffled
    order = [img.id for img in dset1a.images]
    assert order == sorted(order)


def test_image_split_random_state():
    import random
    dset = _demo_dataset()
    dset1a, _ = dset.image_split(0.5, rng=random.Random(0))
    dset1b, _ = dset.image_split(0.5, rng=random.Random(0))
    assert _tables(dset1a) == _tables(dset1b)


def test_image_split_counts_distinct_ids():
    from annotstein.coco_objects import Image
    dset = _demo_dataset(num_images=4)
    dset.images.append(Image(4, 'duplicate.jpg', 10, 10))
    dset1, dset2 = dset.image_split(0.5)
    assert [img.id for img in dset1.images] == [1, 2]
    assert [img.id for img in dset2.images] == [3, 4, 4]


def test_image_split_outputs_are_independent():
    dset = _demo_dataset()
    dset1, dset2 = dset.image_split(0.5)
    dset1.images[0].file_name = 'changed.jpg'
    dset2.annotations[0].bbox[0] = 100
    assert dset.images[0].file_name == '1.jpg'
    assert all(ann.bbox[0] == 0 for ann in dset.annotations)


@pytest.mark.parametrize('fraction', [-0.1, 1.01, 2])
def test_split_bad_fraction(fraction):
    dset = _demo_dataset()
    with pytest.raises(ValueError):
        dset.image_split(fraction)
    with pytest.raises(ValueError):
        dset.annotation_split(fraction)


@pytest.mark.parametrize('fraction', [0.0, 0.5, 0.8, 1.0])
def test_annotation_split_partitions(fraction):
    dset = _demo_dataset()
    dset1, dset2 = dset.annotation_split(fraction)
    aids = [ann.id for ann in dset.annotations]
    aids1 = [ann.id for ann in dset1.annotations]
    aids2 = [ann.id for ann in dset2.annotations]
    assert len(aids1) == math.floor(fraction * len(aids))
    assert aids1 + aids2 == aids
    _check_closure(dset1)
    _check_closure(dset2)

    # Only annotated images are carried over
    annotated_gids = {ann.image_id for ann in dset.annotations}
    for sub in [dset1, dset2]:
        for img in sub.images:
            assert img.id in annotated_gids


def test_annotation_split_can_share_images():
    import annotstein
    from annotstein.coco_objects import Image, Annotation, Category
    dset = annotstein.CocoDataset(
        images=[Image(1, 'a.jpg', 10, 10), Image(2, 'empty.jpg', 10, 10)],
        annotations=[Annotation(1, 1, 1, [0, 0, 1, 1]),
                     Annotation(2, 1, 2, [0, 0, 2, 2])],
        categories=[Category(1, 'cat'), Category(2, 'dog')])
    dset1, dset2 = dset.annotation_split(0.5)
    assert [img.file_name for img in dset1.images] == ['a.jpg']
    assert [img.file_name for img in dset2.images] == ['a.jpg']
    assert [cat.name for cat in dset1.categories] == ['cat']
    assert [cat.name for cat in dset2.categories] == ['dog']
    assert dset1.images[0] is not dset2.images[0]


def test_annotation_split_seeded():
    dset = _demo_dataset(num_images=30)
    dset1a, dset2a = dset.annotation_split(0.5, rng=0)
    dset1b, dset2b = dset.annotation_split(0.5, rng=0)
    assert _tables(dset1a) == _tables(dset1b)
    assert _tables(dset2a) == _tables(dset2b)
    aids1 = {ann.id for ann in dset1a.annotations}
    aids2 = {ann.id for ann in dset2a.annotations}
    assert aids1.isdisjoint(aids2)
    assert aids1 | aids2 == {ann.id for ann in dset.annotations}


def test_subset():
    dset = _demo_dataset()
    sub = dset.subset([3, 2])
    assert [img.id for img in sub.images] == [2, 3]
    assert all(ann.image_id in {2, 3} for ann in sub.annotations)
    assert sub.n_annots == 2
    _check_closure(sub)
