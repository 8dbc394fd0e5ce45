"""
Helper data structures used by the dataset transforms, e.g. to recycle ids
when merging datasets.
"""


UINT32_MAX = 2 ** 32 - 1


class _ID_Remapper(object):
    """
    Helper to recycle ids for unions.

    For each dataset we create a mapping between each old id and a new id.  If
    possible and reuse=True we allow the new id to match the old id.  After
    each dataset is finished we mark all those ids as used and subsequent
    new-ids cannot be chosen from that pool.

    Args:
        reuse (bool): if True we are allowed to reuse ids
            as long as they haven't been used before.

        start (int): the first id handed out when a fresh id is needed.

        maximum (int): the largest id that may be handed out. Defaults to
            the largest unsigned 32 bit integer.

    Example:
        >>> from annotstein._helpers import _ID_Remapper
        >>> per_dataset_ids = [[1, 1, 3, 3, 200, 4], [204, 1, 2, 3, 3, 4, 5, 9]]
        >>> self = _ID_Remapper(reuse=True)
        >>> for ids in per_dataset_ids:
        >>>     new_ids = [self.remap(old_id) for old_id in ids]
        >>>     self.block_seen()
        >>>     print('new_ids = {!r}'.format(new_ids))
        new_ids = [1, 1, 3, 3, 200, 4]
        new_ids = [204, 205, 2, 206, 206, 207, 5, 9]
        >>> #
        >>> self = _ID_Remapper(reuse=False)
        >>> for ids in per_dataset_ids:
        >>>     new_ids = [self.remap(old_id) for old_id in ids]
        >>>     self.block_seen()
        >>>     print('new_ids = {!r}'.format(new_ids))
        new_ids = [1, 1, 2, 2, 3, 4]
        new_ids = [5, 6, 7, 8, 8, 9, 10, 11]
    """
    def __init__(self, reuse=False, start=1, maximum=UINT32_MAX):
        self.blocklist = set()
        self.mapping = dict()
        self.reuse = reuse
        self._used = set()
        self.start = start
        self.maximum = maximum
        self._nextid = start

    def remap(self, old_id):
        """
        Convert a old-id into a new-id. If self.reuse is True then we will
        return the same id if it hasn't been blocked or handed out yet.
        """
        if old_id in self.mapping:
            new_id = self.mapping[old_id]
        else:
            if (not self.reuse or old_id in self.blocklist or
                    old_id in self._used or old_id > self.maximum):
                new_id = self.next_id()
            else:
                new_id = old_id
                if old_id >= self._nextid:
                    self._nextid = old_id + 1
            self._used.add(new_id)
            self.mapping[old_id] = new_id
        return new_id

    def block_seen(self):
        """
        Mark all seen ids as unable to be used.
        Any ids sent to remap will now generate new ids.
        """
        self.blocklist.update(self.mapping.values())
        self.mapping = dict()

    def next_id(self):
        """
        Generate a new id that hasnt been used yet.

        Ids are never larger than ``self.maximum``. Once the counter passes
        it, the lowest free id at or above ``self.start`` is used instead.

        Raises:
            ValueError: if every id in the allowed range is taken

        Example:
            >>> from annotstein._helpers import _ID_Remapper
            >>> self = _ID_Remapper(reuse=True, maximum=5)
            >>> [self.remap(old_id) for old_id in [5, 2]]
            [5, 2]
            >>> self.block_seen()
            >>> [self.remap(old_id) for old_id in [5, 2, 9]]
            [1, 3, 4]
            >>> import pytest
            >>> with pytest.raises(ValueError):
            >>>     self.remap(10)
        """
        while self._nextid in self._used:
            self._nextid += 1
        if self._nextid > self.maximum:
            num_available = self.maximum - self.start + 1
            if len(self._used) >= num_available:
                raise ValueError(
                    'No free ids remain in [{}, {}]'.format(
                        self.start, self.maximum))
            # The lowest gap is found within len(self._used) + 1 steps
            next_id = self.start
            while next_id in self._used:
                next_id += 1
            return next_id
        next_id = self._nextid
        self._nextid += 1
        return next_id


def _first_unique(items):
    """
    Unique items in order of first appearance

    Example:
        >>> from annotstein._helpers import _first_unique
        >>> _first_unique([3, 1, 3, 2, 1])
        [3, 1, 2]
    """
    seen = set()
    unique = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


def _find_duplicates(items):
    """
    Items that appear more than once, in order of their second appearance

    Example:
        >>> from annotstein._helpers import _find_duplicates
        >>> _find_duplicates([5, 1, 5, 2, 1, 5])
        [5, 1]
    """
    seen = set()
    dup_set = set()
    dups = []
    for item in items:
        if item in seen:
            if item not in dup_set:
                dup_set.add(item)
                dups.append(item)
        else:
            seen.add(item)
    return dups
