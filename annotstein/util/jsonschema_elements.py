r"""
Functional interface into defining jsonschema structures.

Each element is a plain dictionary (so it can be handed directly to
:func:`jsonschema.validate`) that can be called to derive a new element with
extra constraints.

Example:
    >>> from annotstein.util.jsonschema_elements import *  # NOQA
    >>> import jsonschema
    >>> schema = OBJECT({
    >>>     'id': INTEGER(minimum=0),
    >>>     'tags': ARRAY(STRING),
    >>>     'box': ARRAY(NUMBER, numItems=4),
    >>> }, required=['id'])
    >>> schema.validate()
    >>> jsonschema.validate({'id': 3, 'box': [0, 0, 1.5, 2]}, schema)
    >>> import pytest
    >>> with pytest.raises(jsonschema.ValidationError):
    >>>     jsonschema.validate({'id': -1}, schema)
"""
import ubelt as ub


class Element(dict):
    """
    A dictionary used to define an element of a JSON Schema.

    Args:
        base (dict): the keys / values this schema must contain
        options (Iterable[str]): the extra keys a derived element may set
        _normalize (callable | None): rewrites convenience keyword arguments
            into formal jsonschema keys when deriving a new element.

    Example:
        >>> from annotstein.util.jsonschema_elements import *  # NOQA
        >>> base = Element(base={'type': 'integer'}, options={'minimum'})
        >>> new = base(minimum=0, badattr=1, description='an id')
        >>> print(ub.urepr(new, nl=0, sort=1))
        {'description': 'an id', 'minimum': 0, 'type': 'integer'}
    """

    # Annotations any kind of element may carry
    __generics__ = {'title', 'description', 'default', 'examples'}

    def __init__(self, base, options=(), _normalize=None):
        self._base = base
        self._options = set(options) | self.__generics__
        self._normalize = _normalize
        super().__init__(base)

    def __call__(self, **kw):
        if self._normalize:
            kw = self._normalize(kw)
        newbase = ub.dict_union(self._base, ub.dict_isect(kw, self._options))
        return Element(newbase, self._options, self._normalize)

    def validate(self, instance=ub.NoParam):
        """
        If ``instance`` is given, validates that it conforms to this schema.
        Otherwise validates that this is a well formed schema.

        Raises:
            jsonschema.ValidationError | jsonschema.SchemaError
        """
        import jsonschema
        from jsonschema.validators import validator_for
        if instance is ub.NoParam:
            cls = validator_for(self)
            cls.check_schema(self)
            return self
        else:
            return jsonschema.validate(instance, schema=self)

    def __or__(self, other):
        """
        Syntax for making an anyOf relationship

        Example:
            >>> from annotstein.util.jsonschema_elements import *  # NOQA
            >>> assert (STRING | NULL) == ANYOF(STRING, NULL)
            >>> assert (STRING | NULL | INTEGER) == ANYOF(STRING, NULL, INTEGER)
        """
        unpacked = []
        for item in [self, other]:
            if list(item.keys()) == ['anyOf']:
                unpacked.extend(item['anyOf'])
            else:
                unpacked.append(item)
        return ANYOF(*unpacked)


def _normalize_array(kw):
    num_items = kw.pop('numItems', None)
    if num_items is not None:
        kw.update({'minItems': num_items, 'maxItems': num_items})
    return kw


class SchemaElements:
    """
    Factory for the core jsonschema element types.

    References:
        https://json-schema.org/understanding-json-schema/
    """

    @property
    def ANY(self):
        return Element({})

    @property
    def NULL(self):
        return Element({'type': 'null'})

    @property
    def BOOLEAN(self):
        return Element({'type': 'boolean'})

    @property
    def STRING(self):
        return Element({'type': 'string'}, options={'pattern', 'enum'})

    @property
    def NUMBER(self):
        return Element({'type': 'number'}, options={'minimum', 'maximum'})

    @property
    def INTEGER(self):
        return Element({'type': 'integer'},
                       options={'minimum', 'maximum', 'enum'})

    def ANYOF(self, *TYPES):
        return Element({'anyOf': list(TYPES)})

    def ARRAY(self, TYPE={}, **kw):
        """
        Example:
            >>> from annotstein.util.jsonschema_elements import *  # NOQA
            >>> print(ub.urepr(ARRAY(NUMBER, numItems=2), nl=0, sort=1))
            {'items': {'type': 'number'}, 'maxItems': 2, 'minItems': 2, 'type': 'array'}
        """
        self = Element(
            base={'type': 'array', 'items': TYPE},
            options={'minItems', 'maxItems'},
            _normalize=_normalize_array)
        return self(**kw)

    def OBJECT(self, PROPERTIES={}, **kw):
        self = Element(
            base={'type': 'object', 'properties': PROPERTIES},
            options={'required', 'additionalProperties'})
        return self(**kw)


elem = SchemaElements()

ANY = elem.ANY
ANYOF = elem.ANYOF
ARRAY = elem.ARRAY
BOOLEAN = elem.BOOLEAN
INTEGER = elem.INTEGER
NULL = elem.NULL
NUMBER = elem.NUMBER
OBJECT = elem.OBJECT
STRING = elem.STRING
