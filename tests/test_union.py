"""
Merging datasets with CocoDataset.union / annotstein.merge
"""
import pytest


def _make_dataset(prefix, cat_name, license_name=None):
    import annotstein
    from annotstein.coco_objects import Image, Annotation, Category, License
    licenses = []
    if license_name is not None:
        licenses = [License(1, license_name)]
    dset = annotstein.CocoDataset(
        images=[Image(1, prefix + '1.jpg', 10, 10, license=1 if licenses else 0),
                Image(2, prefix + '2.jpg', 10, 10)],
        annotations=[Annotation(1, 1, 1, [0, 0, 1, 1]),
                     Annotation(2, 2, 1, [0, 0, 2, 2]),
                     Annotation(3, 2, 1, [1, 1, 3, 3])],
        categories=[Category(1, cat_name)],
        licenses=licenses,
        tag=prefix,
    )
    return dset


def test_merge_empty():
    import annotstein
    combo = annotstein.merge([])
    assert combo.images == []
    assert combo.annotations == []
    assert combo.categories == []
    assert combo.licenses == []
    assert combo.info.version == '0.1.0'
    assert combo.info.date != ''


def test_merge_concatenates_in_order():
    import annotstein
    dset_a = _make_dataset('a', 'cat', 'CC-BY')
    dset_b = _make_dataset('b', 'dog', 'MIT')
    dset_a.info.name = 'not inherited'
    combo = annotstein.merge([dset_a, dset_b])
    assert combo.images == dset_a.images + dset_b.images
    assert combo.annotations == dset_a.annotations + dset_b.annotations
    assert combo.categories == dset_a.categories + dset_b.categories
    assert combo.licenses == dset_a.licenses + dset_b.licenses
    assert combo.info.name == ''

    # Colliding ids are kept as-is
    from annotstein.exceptions import DuplicateIdError
    with pytest.raises(DuplicateIdError):
        combo.validate()


def test_union_call_styles_agree():
    import annotstein
    dset_a = _make_dataset('a', 'cat')
    dset_b = _make_dataset('b', 'dog')
    combo1 = annotstein.CocoDataset.union(dset_a, dset_b)
    combo2 = dset_a.union(dset_b)
    combo3 = annotstein.merge([dset_a, dset_b])
    assert combo1.images == combo2.images == combo3.images
    assert combo1.annotations == combo2.annotations == combo3.annotations


def test_merge_does_not_share_state():
    import annotstein
    dset_a = _make_dataset('a', 'cat')
    dset_b = _make_dataset('b', 'dog')
    combo = annotstein.merge([dset_a, dset_b], remap_ids=True)
    assert combo.images[0] is not dset_a.images[0]
    combo.images[0].file_name = 'changed.jpg'
    combo.annotations[3].bbox[0] = 100
    assert dset_a.images[0].file_name == 'a1.jpg'
    assert dset_b.annotations[0].bbox[0] == 0
    # Remapping does not modify the inputs
    assert [img.id for img in dset_b.images] == [1, 2]


def test_merge_remap_ids():
    import annotstein
    dset_a = _make_dataset('a', 'cat', 'CC-BY')
    dset_b = _make_dataset('b', 'dog', 'MIT')
    inputs = [dset_a, dset_b]
    combo = annotstein.merge(inputs, remap_ids=True)
    assert combo.validate()['status']

    assert [img.id for img in combo.images] == [1, 2, 3, 4]
    assert [ann.id for ann in combo.annotations] == [1, 2, 3, 4, 5, 6]
    assert [cat.id for cat in combo.categories] == [1, 2]
    assert [lic.id for lic in combo.licenses] == [1, 2]

    # Every annotation stays attached to the same image and category
    old_pairs = []
    for dset in inputs:
        gid_to_img = {img.id: img for img in dset.images}
        cid_to_cat = {cat.id: cat for cat in dset.categories}
        for ann in dset.annotations:
            old_pairs.append((gid_to_img[ann.image_id].file_name,
                              cid_to_cat[ann.category_id].name))
    gid_to_img = {img.id: img for img in combo.images}
    cid_to_cat = {cat.id: cat for cat in combo.categories}
    new_pairs = [(gid_to_img[ann.image_id].file_name,
                  cid_to_cat[ann.category_id].name)
                 for ann in combo.annotations]
    assert new_pairs == old_pairs

    # Image license references are translated too
    lid_to_lic = {lic.id: lic for lic in combo.licenses}
    assert lid_to_lic[combo.images[0].license].name == 'CC-BY'
    assert lid_to_lic[combo.images[2].license].name == 'MIT'
    assert combo.images[1].license == 0


def test_merge_remap_keeps_non_colliding_ids():
    import annotstein
    dset_a = _make_dataset('a', 'cat')
    dset_b = _make_dataset('b', 'dog')
    for img in dset_b.images:
        img.id += 10
    for ann in dset_b.annotations:
        ann.image_id += 10
    combo = annotstein.merge([dset_a, dset_b], remap_ids=True)
    assert [img.id for img in combo.images] == [1, 2, 11, 12]
    assert combo.validate()['status']


def test_merge_remap_warns_on_dangling_reference():
    import annotstein
    dset_a = _make_dataset('a', 'cat')
    dset_b = _make_dataset('b', 'dog')
    dset_b.annotations[0].image_id = 77
    with pytest.warns(UserWarning):
        combo = annotstein.merge([dset_a, dset_b], remap_ids=True)
    # The bad reference is left as-is so validation can report it
    assert combo.annotations[3].image_id == 77


def test_merge_remap_stays_in_uint32_range():
    import annotstein
    from annotstein.coco_objects import Image, Annotation, Category
    from annotstein.coco_schema import UINT32_MAX
    inputs = []
    for prefix in ['a', 'b']:
        inputs.append(annotstein.CocoDataset(
            images=[Image(UINT32_MAX, prefix + '.jpg', 10, 10)],
            annotations=[Annotation(UINT32_MAX, UINT32_MAX, UINT32_MAX, [0, 0, 1, 1])],
            categories=[Category(UINT32_MAX, prefix + '_cat')],
        ))
    combo = annotstein.merge(inputs, remap_ids=True)
    assert [img.id for img in combo.images] == [UINT32_MAX, 1]
    assert [ann.id for ann in combo.annotations] == [UINT32_MAX, 1]
    assert [cat.id for cat in combo.categories] == [UINT32_MAX, 1]
    assert combo.annotations[1].image_id == 1
    assert combo.validate()['status']

    recon = annotstein.CocoDataset.loads(combo.dumps())
    assert recon.images == combo.images
    assert recon.annotations == combo.annotations


def test_id_remapper_exhausted():
    from annotstein._helpers import _ID_Remapper
    remapper = _ID_Remapper(reuse=True, start=1, maximum=3)
    assert [remapper.remap(i) for i in [1, 2, 3]] == [1, 2, 3]
    remapper.block_seen()
    with pytest.raises(ValueError):
        remapper.remap(1)
