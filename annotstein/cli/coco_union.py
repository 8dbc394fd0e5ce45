#!/usr/bin/env python
import ubelt as ub
import scriptconfig as scfg


class CocoUnionCLI(object):
    name = 'union'

    class CLIConfig(scfg.DataConfig):
        """
        Combine multiple COCO datasets into a single merged dataset.
        """
        src = scfg.Value([], position=1, help='path to multiple input datasets', nargs='+')

        dst = scfg.Value('combo.json', help='path to output dataset')

        remap_ids = scfg.Value(False, isflag=True, help=ub.paragraph(
                '''
                if True, renumber ids that collide between datasets and update
                the annotations that reference them. Otherwise ids are kept
                as-is and may be duplicated in the output.
                '''))

        __epilog__ = """
        Example Usage:
            annotstein union a.json b.json --dst=combo.json --remap_ids
        """

    @classmethod
    def main(cls, cmdline=True, **kw):
        """
        Example:
            >>> from annotstein.cli.coco_union import *  # NOQA
            >>> import annotstein
            >>> import ubelt as ub
            >>> from annotstein.coco_objects import Image
            >>> dpath = ub.Path.appdir('annotstein/tests/cli/union').ensuredir()
            >>> annotstein.CocoDataset(images=[Image(1, 'a.jpg', 1, 1)]).dump(dpath / 'a.json')
            >>> annotstein.CocoDataset(images=[Image(1, 'b.jpg', 1, 1)]).dump(dpath / 'b.json')
            >>> dst_fpath = dpath / 'combo.json'
            >>> kw = {
            >>>     'src': [dpath / 'a.json', dpath / 'b.json'],
            >>>     'dst': dst_fpath,
            >>>     'remap_ids': True,
            >>> }
            >>> cmdline = False
            >>> cls = CocoUnionCLI
            >>> cls.main(cmdline, **kw)
            >>> combo = annotstein.CocoDataset.parse(dst_fpath)
            >>> [img.id for img in combo.images]
            [1, 2]
        """
        import annotstein
        import rich
        config = cls.CLIConfig.cli(data=kw, cmdline=cmdline, strict=True)
        rich.print('config = {}'.format(ub.urepr(config, nl=1)))

        if config.src is None:
            raise Exception('must specify sources: {}'.format(config.src))

        if len(config.src) == 0:
            raise ValueError('Must provide at least one input dataset')

        datasets = []
        for fpath in ub.ProgIter(config.src, desc='reading datasets', verbose=1):
            datasets.append(annotstein.CocoDataset.coerce(fpath))

        print('Finished loading. Starting union.')
        combo = annotstein.CocoDataset.union(
            *datasets, remap_ids=config.remap_ids)

        out_fpath = ub.Path(config.dst)
        out_fpath.parent.ensuredir()
        print('Writing to out_fpath = {!r}'.format(out_fpath))
        combo.fpath = out_fpath
        combo.dump(combo.fpath, newlines=True)


_CLI = CocoUnionCLI

if __name__ == '__main__':
    """
    CommandLine:
        python -m annotstein.cli.coco_union a.json b.json --dst combo.json
    """
    _CLI.main()
