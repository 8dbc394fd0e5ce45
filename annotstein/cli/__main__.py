#!/usr/bin/env python
# PYTHON_ARGCOMPLETE_OK
import sys
import ubelt as ub


def main(argv=None):
    """
    Run one of the annotstein subcommands selected by the first positional
    argument.

    Args:
        argv (List[str] | None): command line arguments without the program
            name. If unspecified, ``sys.argv`` is used.

    Returns:
        int: zero on success

    CommandLine:
        annotstein --help
        annotstein validate data.json

    Example:
        >>> from annotstein.cli.__main__ import main
        >>> import annotstein
        >>> import ubelt as ub
        >>> dpath = ub.Path.appdir('annotstein/tests/cli/modal').ensuredir()
        >>> fpath = dpath / 'data.json'
        >>> annotstein.CocoDataset().dump(fpath)
        >>> ret = main(['validate', str(fpath)])
        >>> assert ret == 0
    """
    modnames = [
        'coco_validate',
        'coco_rebase',
        'coco_union',
        'coco_split',
    ]
    module_lut = {}
    for name in modnames:
        mod = ub.import_module_from_name('annotstein.cli.{}'.format(name))
        module_lut[name] = mod

    # Create a list of all submodules with CLI interfaces
    cli_modules = list(module_lut.values())

    import os
    ANNOTSTEIN_LOOSE_CLI = os.environ.get('ANNOTSTEIN_LOOSE_CLI', '')

    from scriptconfig.modal import ModalCLI
    modal = ModalCLI(description=ub.codeblock(
        '''
        The annotstein COCO CLI
        '''))

    def get_version(self):
        import annotstein
        return annotstein.__version__
    modal.__class__.version = property(get_version)

    for cli_module in cli_modules:
        cli_cls = cli_module._CLI
        assert hasattr(cli_cls, 'CLIConfig'), (
            'We are only supporting scriptconfig CLIs')
        cli_config = cli_cls.CLIConfig
        cli_config.__command__ = cli_cls.name
        if not hasattr(cli_config, 'main'):
            # Hack the main function into the config
            cli_config.main = cli_cls.main
        modal.register(cli_config)

    ret = modal.run(argv=argv, strict=not ANNOTSTEIN_LOOSE_CLI)
    return ret


if __name__ == '__main__':
    """
    CommandLine:
        python -m annotstein.cli --help
    """
    sys.exit(main())
