import enum
from collections.abc import Mapping
from copy import copy

from metamodel.util import resolve_key


class FieldType(enum.Enum):
    """
    The declared type of a model field.

        - TEXT
        - EMAIL
        - TEXTAREA
        - NUMBER
        - COLOR
        - OTHER
    """
    TEXT = 'text'
    EMAIL = 'email'
    TEXTAREA = 'textarea'
    NUMBER = 'number'
    COLOR = 'color'
    OTHER = 'other'

    @classmethod
    def get(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value.lower() if isinstance(value, str) else value)
        except ValueError:
            return cls.OTHER


TEXT = FieldType.TEXT
EMAIL = FieldType.EMAIL
TEXTAREA = FieldType.TEXTAREA
NUMBER = FieldType.NUMBER
COLOR = FieldType.COLOR
OTHER = FieldType.OTHER


class MetaField:
    """
    A single model field, which maps a short key to a namespaced storage key.

    >>> from metamodel.fields import EMAIL, TEXTAREA
    >>>
    >>> MetaField('bio', TEXTAREA, show_in_rest=True)
    >>> MetaField('email', EMAIL, get_cb=str.lower)
    >>> MetaField('age', 'number', sanitize_cb=lambda v: min(int(v), 120))
    """

    def __init__(self, short_key, type_=None, show_in_rest=False, **kwargs):
        """
        :param str short_key: field name, unique within a model (other values are formatted)
        :param FieldType|str type_: field type, selects the default sanitizer (optional)
        :param bool show_in_rest: expose the field through the REST registrar
        :param sanitize_cb: callable overriding the type sanitizer (optional)
        :param get_cb: callable applied to the stored value on read (optional)
        :param update_cb: callable replacing the store write on update (optional)
        """
        self.short_key = '' if short_key is None else '{}'.format(short_key)
        self.type_ = FieldType.get(type_)
        self.show_in_rest = bool(show_in_rest)
        self.sanitize_cb = kwargs.pop('sanitize_cb', None)
        self.get_cb = kwargs.pop('get_cb', None)
        self.update_cb = kwargs.pop('update_cb', None)
        self.description = kwargs.pop('description', None)
        self.default = kwargs.pop('default', None)
        self.extra = kwargs
        self._key = None

    @classmethod
    def from_dict(cls, data):
        data = dict(data)
        if 'sanitization_cb' in data:
            data.setdefault('sanitize_cb', data.pop('sanitization_cb'))
        return cls(data.pop('key', None), data.pop('type', None), **data)

    @classmethod
    def create(cls, field):
        if isinstance(field, MetaField):
            return field
        if isinstance(field, Mapping):
            return cls.from_dict(field)
        return cls(field, TEXT)

    @property
    def key(self):
        """
        Namespaced storage key, set when the field is bound to a model prefix.
        """
        return self._key

    def bind(self, prefix=None):
        """
        Return a copy of the field with its key namespaced by ``prefix``.

        Without a prefix the short key is used as the storage key as is.
        """
        field = copy(self)
        field._key = self.short_key if prefix is None else resolve_key(prefix, self.short_key)
        return field

    def __repr__(self):
        return '<{}({})>'.format(self.__class__.__name__, self.key or self.short_key)
