import enum
from collections import defaultdict

from metamodel.log import logger


class ObjectKind(enum.Enum):
    """
    The kind of object a piece of metadata belongs to.

        - POST
        - USER
        - TERM
    """
    POST = 'post'
    USER = 'user'
    TERM = 'term'

    @classmethod
    def get(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


POST = ObjectKind.POST
USER = ObjectKind.USER
TERM = ObjectKind.TERM


class MetaStore:
    """
    Object metadata store.

    Subclasses implement :meth:`get_meta` and :meth:`update_meta` for the
    known object kinds. Reads and writes for any other kind are no-ops.
    """

    def read_meta(self, kind, object_id, key):
        """
        Read a metadata value.

        :param ObjectKind|str kind: object kind (post, user or term)
        :param int|str object_id: the object id
        :param str key: the namespaced meta key
        :return: the stored value, or an empty string
        """
        object_kind = ObjectKind.get(kind)
        if object_kind is None:
            logger.info('read ignored, unknown object kind: {!r}'.format(kind))
            return ''
        return self.get_meta(object_kind, object_id, key)

    def write_meta(self, kind, object_id, key, value):
        """
        Write a metadata value.

        :param ObjectKind|str kind: object kind (post, user or term)
        :param int|str object_id: the object id
        :param str key: the namespaced meta key
        :param value: the value to store
        :return: True if the value was stored
        """
        object_kind = ObjectKind.get(kind)
        if object_kind is None:
            logger.info('write ignored, unknown object kind: {!r}'.format(kind))
            return True
        return self.update_meta(object_kind, object_id, key, value)

    def get_meta(self, kind, object_id, key):
        raise NotImplementedError

    def update_meta(self, kind, object_id, key, value):
        raise NotImplementedError

    def __repr__(self):
        return '<{}>'.format(self.__class__.__name__)


class MemoryStore(MetaStore):
    """
    A metadata store kept in a dictionary.
    """

    def __init__(self):
        self.data = defaultdict(dict)

    def get_meta(self, kind, object_id, key):
        return self.data[kind, str(object_id)].get(key, '')

    def update_meta(self, kind, object_id, key, value):
        meta = self.data[kind, str(object_id)]
        if key in meta and meta[key] == value:
            return False
        meta[key] = value
        return True
