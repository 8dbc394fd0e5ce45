#!/usr/bin/env python
import ubelt as ub
import scriptconfig as scfg


class CocoSplitCLI(object):
    """
    Splits a coco file into two parts by image or by annotation.

    Useful for generating quick and dirty train/test splits.
    """
    name = 'split'

    class CLIConfig(scfg.DataConfig):
        """
        Split a single COCO dataset into two sub-datasets.
        """
        src = scfg.Value(None, help='input dataset to split', position=1)

        dst1 = scfg.Value('split1.json', help='output path of the first split')

        dst2 = scfg.Value('split2.json', help='output path of the second split')

        fraction = scfg.Value(0.75, type=float, help=ub.paragraph(
            '''
            fraction of the items (images or annotations) that go into the
            first split. Must be between 0 and 1.
            '''))

        rng = scfg.Value(None, help=ub.paragraph(
            '''
            A random seed for reproducible shuffled splits. If unspecified,
            items are split in the order they appear in the file.
            '''))

        splitter = scfg.Value('image', help=ub.paragraph(
            '''
            Split method to use.
            Using "image" assigns each image (and its annotations) to one
            partition.
            Using "annotation" assigns each annotation to one partition,
            and each partition keeps the images it needs.
            '''), choices=['image', 'annotation'])

        __epilog__ = """
        Example Usage:
            annotstein split data.json --dst1=train.json --dst2=test.json --fraction=0.8 --rng=42
        """

    @classmethod
    def main(cls, cmdline=True, **kw):
        """
        Example:
            >>> from annotstein.cli.coco_split import *  # NOQA
            >>> import annotstein
            >>> import ubelt as ub
            >>> from annotstein.coco_objects import Image
            >>> dpath = ub.Path.appdir('annotstein/tests/cli/split').ensuredir()
            >>> src = dpath / 'data.json'
            >>> images = [Image(gid, f'{gid}.jpg', 1, 1) for gid in range(1, 5)]
            >>> annotstein.CocoDataset(images=images).dump(src)
            >>> kw = {'src': src,
            >>>       'dst1': dpath / 'train.json',
            >>>       'dst2': dpath / 'test.json',
            >>>       'fraction': 0.5}
            >>> cmdline = False
            >>> cls = CocoSplitCLI
            >>> cls.main(cmdline, **kw)
            >>> annotstein.CocoDataset.parse(dpath / 'train.json').n_images
            2
        """
        import annotstein
        import rich
        config = cls.CLIConfig.cli(data=kw, cmdline=cmdline, strict=True)
        rich.print('config = {}'.format(ub.urepr(config, nl=1)))

        if config['src'] is None:
            raise Exception('must specify source: {}'.format(config['src']))

        rng = config['rng']
        if isinstance(rng, str):
            rng = int(rng)

        print('reading fpath = {!r}'.format(config['src']))
        dset = annotstein.CocoDataset.coerce(config['src'])

        splitter = config['splitter']
        if splitter == 'image':
            dset1, dset2 = dset.image_split(config['fraction'], rng=rng)
        elif splitter == 'annotation':
            dset1, dset2 = dset.annotation_split(config['fraction'], rng=rng)
        else:
            raise KeyError(splitter)

        print('stats(dset1): ' + ub.urepr(dset1.basic_stats(), nl=0))
        print('stats(dset2): ' + ub.urepr(dset2.basic_stats(), nl=0))

        dset1.fpath = config['dst1']
        dset2.fpath = config['dst2']
        print(f'Writing dset1 = {dset1.fpath!r}')
        dset1.dump(newlines=True)
        print(f'Writing dset2 = {dset2.fpath!r}')
        dset2.dump(newlines=True)


_CLI = CocoSplitCLI

if __name__ == '__main__':
    """
    CommandLine:
        python -m annotstein.cli.coco_split data.json --fraction=0.8 --rng=0
    """
    _CLI.main()
