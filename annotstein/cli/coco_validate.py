#!/usr/bin/env python
import ubelt as ub
import scriptconfig as scfg


class CocoValidateCLI:
    name = 'validate'

    class CLIConfig(scfg.DataConfig):
        """
        Validates that a coco file satisfies expected properties.

        Checks that a coco file conforms to the json schema, that ids are
        unique within each table, and that annotations only reference images
        and categories that exist.
        """
        src = scfg.Value(None, nargs='+', help='path to datasets', position=1)

        licenses = scfg.Value(True, isflag=True, help=ub.paragraph(
            '''
            if True, validate that license ids are unique
            '''))

        references = scfg.Value(True, isflag=True, help=ub.paragraph(
            '''
            if True, validate that every annotation references an existing
            image and category
            '''))

        __epilog__ = """
        Example Usage:
            annotstein validate data.json
            annotstein validate data.json --references=False
        """

    @classmethod
    def main(cls, cmdline=True, **kw):
        """
        Example:
            >>> from annotstein.cli.coco_validate import *  # NOQA
            >>> import annotstein
            >>> import ubelt as ub
            >>> dpath = ub.Path.appdir('annotstein/tests/cli/validate').ensuredir()
            >>> fpath = dpath / 'data.json'
            >>> annotstein.CocoDataset().dump(fpath)
            >>> kw = {'src': fpath}
            >>> cmdline = False
            >>> cls = CocoValidateCLI
            >>> cls.main(cmdline, **kw)
        """
        import annotstein
        import rich
        from annotstein import exceptions
        config = cls.CLIConfig.cli(data=kw, cmdline=cmdline, strict=True)
        rich.print('config = {}'.format(ub.urepr(config, nl=1)))

        if config['src'] is None:
            raise Exception('must specify source: {}'.format(config['src']))

        if isinstance(config['src'], (str, ub.Path)):
            fpaths = [config['src']]
        else:
            fpaths = config['src']

        fpath_to_errors = {}
        for fpath in ub.ProgIter(fpaths, desc='reading datasets', verbose=1):
            print('reading fpath = {!r}'.format(fpath))
            try:
                dset = annotstein.CocoDataset.coerce(fpath)
            except exceptions.ParseError as ex:
                print('Unable to parse fpath = {!r}'.format(fpath))
                fpath_to_errors[str(fpath)] = [str(ex)]
                continue
            # Errors are reported once in the summary below
            result = dset.validate(
                licenses=config['licenses'],
                references=config['references'],
                verbose=0,
                fastfail=False)
            fpath_to_errors[str(fpath)] = [str(ex) for ex in result['errors']]

        has_errors = any(ub.flatten(fpath_to_errors.values()))
        if has_errors:
            errmsg = ub.urepr(fpath_to_errors, nl=1)
            print('fpath_to_errors = {}'.format(errmsg))
            raise Exception(errmsg)


_CLI = CocoValidateCLI

if __name__ == '__main__':
    """
    CommandLine:
        python -m annotstein.cli.coco_validate data.json
    """
    _CLI.main()
