#!/usr/bin/env python
import warnings
import ubelt as ub
import scriptconfig as scfg


class CocoRebaseCLI:
    name = 'rebase'

    class CLIConfig(scfg.DataConfig):
        """
        Prefix every image file name with a new root path.

        Only the strings stored in the coco file are changed. The image files
        themselves are not moved or checked.
        """
        src = scfg.Value(None, help='Input coco dataset path', position=1)

        root_path = scfg.Value(None, help=(
            'New base path to join in front of every image file name'),
            position=2)

        dst = scfg.Value(None, help=(
            'Output coco dataset path. If unspecified, nothing is written.'))

        __epilog__ = """
        Example Usage:
            annotstein rebase data.json /data/images --dst rebased.json
        """

    @classmethod
    def main(cls, cmdline=True, **kw):
        """
        Example:
            >>> from annotstein.cli.coco_rebase import *  # NOQA
            >>> import annotstein
            >>> import ubelt as ub
            >>> from annotstein.coco_objects import Image
            >>> dpath = ub.Path.appdir('annotstein/tests/cli/rebase').ensuredir()
            >>> src = dpath / 'data.json'
            >>> dst = dpath / 'rebased.json'
            >>> annotstein.CocoDataset(images=[Image(1, 'a.jpg', 1, 1)]).dump(src)
            >>> kw = {'src': src, 'root_path': '/data', 'dst': dst}
            >>> cmdline = False
            >>> cls = CocoRebaseCLI
            >>> cls.main(cmdline, **kw)
            >>> # xdoctest: +REQUIRES(POSIX)
            >>> annotstein.CocoDataset.parse(dst).images[0].file_name
            '/data/a.jpg'
        """
        import annotstein
        import rich
        config = cls.CLIConfig.cli(data=kw, cmdline=cmdline, strict=True)
        rich.print('config = {}'.format(ub.urepr(config, nl=1)))

        if config['src'] is None:
            raise Exception('must specify source: {}'.format(config['src']))
        if config['root_path'] is None:
            raise ValueError('must specify root_path: {}'.format(
                config['root_path']))

        print('reading fpath = {!r}'.format(config['src']))
        dset = annotstein.CocoDataset.coerce(config['src'])
        dset.rebase(config['root_path'], verbose=1)

        if config['dst'] is None:
            warnings.warn(
                'No dst was given, the rebased dataset will not be written')
        else:
            dset.fpath = config['dst']
            print('dump dset.fpath = {!r}'.format(dset.fpath))
            dset.dump(dset.fpath, newlines=True)


_CLI = CocoRebaseCLI

if __name__ == '__main__':
    """
    CommandLine:
        python -m annotstein.cli.coco_rebase data.json /data/images --dst rebased.json
    """
    _CLI.main()
