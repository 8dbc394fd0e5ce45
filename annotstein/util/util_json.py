"""
Json helpers for reading and writing COCO documents.
"""
import json


# Top level tables in the order they are written
TABLE_KEYS = [
    'info',
    'licenses',
    'categories',
    'images',
    'annotations',
]


def coerce_indent(indent):
    r"""
    Normalize an indentation argument into a whitespace string.

    Example:
        >>> from annotstein.util.util_json import coerce_indent
        >>> coerce_indent(2)
        '  '
        >>> coerce_indent(None)
        ''
        >>> coerce_indent('    ')
        '    '
        >>> coerce_indent('\t')
        '\t'
    """
    if indent is None:
        return ''
    if isinstance(indent, int):
        return ' ' * indent
    if isinstance(indent, str):
        if indent.strip():
            raise ValueError('indent must be whitespace, got {!r}'.format(indent))
        return indent
    raise TypeError('indent must be an int or str, got {!r}'.format(indent))


def _json_dumps(data, indent=None):
    return json.dumps(data, indent=indent, ensure_ascii=False)


def pretty_dumps(data, indent=None):
    """
    Dump a COCO json dictionary such that each table item gets its own line.

    This keeps large files diff-able and readable while staying valid json.

    Args:
        data (Dict): the COCO json dictionary
        indent (int | str | None): prefix for each table item line

    Returns:
        str

    Example:
        >>> from annotstein.util.util_json import pretty_dumps
        >>> data = {
        >>>     'categories': [{'id': 1, 'name': 'cat'}],
        >>>     'images': [],
        >>>     'info': {'name': 'demo'},
        >>> }
        >>> print(pretty_dumps(data, indent=0))
        {
        "info": {"name": "demo"},
        "categories": [
        {"id": 1, "name": "cat"}
        ],
        "images": []
        }
    """
    indent = coerce_indent(indent)
    dict_lines = []
    other_keys = sorted(set(data.keys()) - set(TABLE_KEYS))
    for key in TABLE_KEYS:
        if key not in data:
            continue
        value = data[key]
        if isinstance(value, list):
            value_lines = [_json_dumps(v) for v in value]
            if value_lines:
                value_body = (',\n' + indent).join(value_lines)
                value_repr = '[\n' + indent + value_body + '\n]'
            else:
                value_repr = '[]'
        else:
            value_repr = _json_dumps(value)
        dict_lines.append('{}: {}'.format(_json_dumps(key), value_repr))

    for key in other_keys:
        # Dont assume anything about other data
        value_repr = _json_dumps(data[key])
        dict_lines.append('{}: {}'.format(_json_dumps(key), value_repr))
    text = ''.join(['{\n', ',\n'.join(dict_lines), '\n}'])
    return text
