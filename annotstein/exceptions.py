"""
Errors raised when reading or checking a COCO dataset.
"""


class ParseError(ValueError):
    """
    Error when a COCO document cannot be read, is not valid json, or is
    missing / mistyping a required field.

    The underlying error is always available as ``__cause__``.
    """
    pass


class ValidationError(ValueError):
    """
    Generic error when a dataset violates one of its structural invariants
    """
    pass


class DuplicateIdError(ValidationError):
    """
    Error when two items in the same table share an id

    Attributes:
        entity_kind (str): the table that failed, e.g. "images"
        duplicates (List[int]): the ids that appear more than once
    """

    def __init__(self, entity_kind, duplicates):
        self.entity_kind = entity_kind
        self.duplicates = list(duplicates)
        msg = 'Duplicate {} ids: {!r}'.format(entity_kind, self.duplicates)
        super().__init__(msg)


class DanglingReferenceError(ValidationError):
    """
    Error when an item references an id that does not exist in another table

    Attributes:
        entity_kind (str): the table holding the bad references
        ref_kind (str): the table that should contain the referenced ids
        dangling (List[Tuple[int, int]]): pairs of (item id, missing id)
    """

    def __init__(self, entity_kind, ref_kind, dangling):
        self.entity_kind = entity_kind
        self.ref_kind = ref_kind
        self.dangling = list(dangling)
        first_id, first_ref = self.dangling[0]
        msg = (
            '{} {} reference missing {}: first is id={} -> {}'.format(
                len(self.dangling), entity_kind, ref_kind, first_id,
                first_ref))
        super().__init__(msg)
